"""
Persistencia de listas de registros en archivos JSON.

Cada archivo guarda una lista completa como un arreglo JSON. Las lecturas
devuelven la lista entera y las escrituras reemplazan el archivo completo.
"""
import logging
from pathlib import Path
from typing import Generic, List, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from gestion_academica.core.exceptions import DecodeError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class JsonListStorage(Generic[ModelType]):
    def __init__(self, path: Union[str, Path], model: Type[ModelType]):
        self.path = Path(path)
        self.model = model
        self._adapter = TypeAdapter(List[model])

    def load(self) -> List[ModelType]:
        if not self.path.exists():
            return []
        try:
            # Solo nombres de campo persistidos, sin coerción de tipos
            return self._adapter.validate_json(
                self.path.read_text(encoding="utf-8"), strict=True, by_alias=True, by_name=False
            )
        except (ValidationError, UnicodeDecodeError) as e:
            logger.error(f"❌ Contenido inválido en {self.path}: {e}")
            raise DecodeError(str(self.path), e) from e

    def save(self, records: List[ModelType]) -> None:
        if not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
        data = self._adapter.dump_json(list(records), by_alias=True)
        self.path.write_bytes(data)
        logger.debug(f"💾 {len(records)} registros guardados en {self.path}")


def load(path: Union[str, Path], model: Type[ModelType]) -> List[ModelType]:
    """Leer la lista de registros guardada en path (vacía si no existe)"""
    return JsonListStorage(path, model).load()


def save(path: Union[str, Path], records: List[ModelType], model: Type[ModelType]) -> None:
    """Sobrescribir path con la lista completa de registros"""
    JsonListStorage(path, model).save(records)
