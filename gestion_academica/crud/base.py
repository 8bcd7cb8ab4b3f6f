import logging
from pathlib import Path
from typing import Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from gestion_academica.core.exceptions import DuplicateIdError, NotFoundError
from gestion_academica.core.storage import JsonListStorage

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class CRUDBase(Generic[ModelType]):
    def __init__(self, model: Type[ModelType], path: Union[str, Path], entidad: str):
        """
        Objeto CRUD con métodos por defecto para Create, Read, Update, Delete (CRUD).

        Cada operación lee la lista completa del archivo y, si la modifica,
        vuelve a escribirla entera.
        """
        self.model = model
        self.entidad = entidad
        self.storage = JsonListStorage(path, model)

    def get_multi(self) -> List[ModelType]:
        return self.storage.load()

    def get(self, id: int) -> Optional[ModelType]:
        return next((obj for obj in self.storage.load() if obj.id == id), None)

    def count(self) -> int:
        return len(self.storage.load())

    def next_id(self) -> int:
        """Siguiente ID libre: el máximo existente + 1, o 1 si la lista está vacía"""
        return max((obj.id for obj in self.storage.load()), default=0) + 1

    def create(self, obj_in: ModelType) -> ModelType:
        objs = self.storage.load()
        self._check_unique(objs, obj_in)
        objs.append(obj_in)
        self.storage.save(objs)
        logger.info(f"📝 {self.entidad} creada: {obj_in.id}")
        return obj_in

    def update(self, id: int, obj_in: ModelType) -> ModelType:
        objs = self.storage.load()
        index = next((i for i, obj in enumerate(objs) if obj.id == id), None)
        if index is None:
            logger.warning(f"⚠️ {self.entidad} {id} no encontrada para actualizar")
            raise NotFoundError(self.entidad, id)
        # Reemplazo por posición, aunque obj_in.id sea distinto de id
        objs[index] = obj_in
        self.storage.save(objs)
        logger.info(f"✏️ {self.entidad} actualizada: {id}")
        return obj_in

    def remove(self, id: int) -> int:
        objs = self.storage.load()
        remaining = [obj for obj in objs if obj.id != id]
        self.storage.save(remaining)
        removed = len(objs) - len(remaining)
        logger.info(f"🗑️ {self.entidad} {id} eliminada ({removed} registros)")
        return removed

    def reset(self) -> None:
        self.storage.save([])
        logger.info(f"🧹 Datos de {self.entidad} reiniciados")

    def _check_unique(self, objs: List[ModelType], obj_in: ModelType) -> None:
        if any(obj.id == obj_in.id for obj in objs):
            logger.warning(f"⚠️ ID duplicado para {self.entidad}: {obj_in.id}")
            raise DuplicateIdError(self.entidad, obj_in.id)
