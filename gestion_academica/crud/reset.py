from gestion_academica.crud.carrera import CRUDCarrera
from gestion_academica.crud.materia import CRUDMateria


def reset_datos(
    carreras: CRUDCarrera,
    materias: CRUDMateria,
    *,
    reset_carreras: bool = True,
    reset_materias: bool = True,
) -> None:
    """Vaciar la lista de carreras, la de materias o ambas"""
    if reset_carreras:
        carreras.reset()
    if reset_materias:
        materias.reset()
