import logging
from typing import List, Optional

from gestion_academica.config.settings import Settings
from gestion_academica.core.exceptions import ReferenceNotFoundError
from gestion_academica.crud.base import CRUDBase
from gestion_academica.crud.carrera import CRUDCarrera
from gestion_academica.schemas.materia import Materia

logger = logging.getLogger(__name__)


class CRUDMateria(CRUDBase[Materia]):
    def __init__(self, settings: Settings, carreras: Optional[CRUDCarrera] = None):
        super().__init__(Materia, settings.materias_file, "materia")
        self.carreras = carreras or CRUDCarrera(settings)

    def create(self, obj_in: Materia) -> Materia:
        objs = self.storage.load()
        self._check_unique(objs, obj_in)
        # La referencia a la carrera solo se valida al crear
        if not self.carreras.exists(obj_in.carrera_id):
            logger.warning(f"⚠️ Materia {obj_in.id} referencia carrera inexistente {obj_in.carrera_id}")
            raise ReferenceNotFoundError(obj_in.carrera_id)
        objs.append(obj_in)
        self.storage.save(objs)
        logger.info(f"📝 materia creada: {obj_in.id} (carrera {obj_in.carrera_id})")
        return obj_in

    def get_by_carrera(self, carrera_id: int) -> List[Materia]:
        return [m for m in self.get_multi() if m.carrera_id == carrera_id]
