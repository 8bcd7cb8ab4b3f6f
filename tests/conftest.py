import pytest

from gestion_academica.config.settings import Settings
from gestion_academica.crud.carrera import CRUDCarrera
from gestion_academica.crud.materia import CRUDMateria


@pytest.fixture()
def settings(tmp_path):
    """Settings apuntando a archivos dentro de un directorio temporal."""
    return Settings(
        carreras_file=str(tmp_path / "carreras.txt"),
        materias_file=str(tmp_path / "materias.txt"),
    )


@pytest.fixture()
def carreras(settings):
    return CRUDCarrera(settings)


@pytest.fixture()
def materias(settings, carreras):
    return CRUDMateria(settings, carreras)
