"""
Excepciones del sistema de gestión académica
"""
from typing import Any, Optional


class AcademicoException(Exception):
    """Excepción base para todos los resultados fallidos de una operación"""

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class DuplicateIdError(AcademicoException):
    """Ya existe un registro con el mismo ID"""

    def __init__(self, entidad: str, id: int):
        super().__init__(
            f"Ya existe una {entidad} con el ID {id}.",
            "DUPLICATE_ID",
            {"entidad": entidad, "id": id},
        )


class NotFoundError(AcademicoException):
    """No existe un registro con el ID indicado"""

    def __init__(self, entidad: str, id: int):
        super().__init__(
            f"{entidad.capitalize()} con ID {id} no encontrada.",
            "NOT_FOUND",
            {"entidad": entidad, "id": id},
        )


class ReferenceNotFoundError(AcademicoException):
    """La materia referencia una carrera inexistente"""

    def __init__(self, carrera_id: int):
        super().__init__(
            f"No existe una carrera con el ID {carrera_id}.",
            "REFERENCE_NOT_FOUND",
            {"carrera_id": carrera_id},
        )


class DecodeError(AcademicoException):
    """El contenido del archivo no es JSON válido o no tiene la forma esperada"""

    def __init__(self, path: str, cause: Optional[Any] = None):
        super().__init__(
            f"El archivo {path} no contiene datos válidos.",
            "DECODE_ERROR",
            {"path": path, "cause": str(cause) if cause is not None else None},
        )
