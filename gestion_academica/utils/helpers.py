from typing import Any, Dict, Optional

from gestion_academica.schemas.carrera import Carrera
from gestion_academica.schemas.materia import Materia

TRUE_VALUES = {"true", "si", "sí", "s", "1"}
FALSE_VALUES = {"false", "no", "n", "0"}


def parse_bool(value: str) -> Optional[bool]:
    """Interpretar true/false (o si/no, 1/0); None si no es reconocible"""
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    return None


def parse_int(value: str) -> Optional[int]:
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_float(value: str) -> Optional[float]:
    try:
        return float(value.strip().replace(",", "."))
    except ValueError:
        return None


def format_carrera(c: Carrera) -> str:
    estado = "activa" if c.activa else "inactiva"
    return f"[{c.id}] {c.nombre} - {c.duracion} años - {estado} - creada el {c.fecha_creacion}"


def format_materia(m: Materia) -> str:
    tipo = "obligatoria" if m.obligatoria else "optativa"
    return f"[{m.id}] {m.nombre} - {m.creditos:g} créditos - {tipo} - carrera {m.carrera_id}"


class ResponseFormatter:
    """Formateador de respuestas estándar"""

    @staticmethod
    def success(data: Any, message: str = "Operación exitosa") -> Dict[str, Any]:
        return {"success": True, "message": message, "data": data}

    @staticmethod
    def error(message: str, error_code: str = None) -> Dict[str, Any]:
        response = {"success": False, "message": message}
        if error_code:
            response["error_code"] = error_code
        return response
