from .carrera import Carrera
from .materia import Materia

__all__ = [
    "Carrera",
    "Materia",
]
