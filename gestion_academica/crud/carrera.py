from gestion_academica.config.settings import Settings
from gestion_academica.crud.base import CRUDBase
from gestion_academica.schemas.carrera import Carrera


class CRUDCarrera(CRUDBase[Carrera]):
    def __init__(self, settings: Settings):
        super().__init__(Carrera, settings.carreras_file, "carrera")

    def exists(self, id: int) -> bool:
        return any(c.id == id for c in self.get_multi())
