import builtins

import pytest

from gestion_academica.config.settings import Settings
from gestion_academica.crud.carrera import CRUDCarrera
from gestion_academica.crud.materia import CRUDMateria
from gestion_academica import main as main_module
from gestion_academica.main import Consola, main, pedir_booleano, pedir_entero

from factories import make_carrera, make_materia


@pytest.fixture()
def scripted_input(monkeypatch):
    """Reemplaza input() por una secuencia fija de respuestas."""

    def _script(*answers):
        pending = list(answers)

        def _input(prompt=""):
            if not pending:
                raise EOFError
            return pending.pop(0)

        monkeypatch.setattr(builtins, "input", _input)

    return _script


@pytest.fixture()
def consola(carreras, materias):
    return Consola(carreras, materias)


def test_pedir_entero_reprompts_until_valid(scripted_input, capsys):
    scripted_input("cinco", "", "5")

    assert pedir_entero("Duración: ") == 5
    assert capsys.readouterr().out.count("Ingresa un número entero") == 2


def test_pedir_booleano_accepts_spanish_answers(scripted_input):
    scripted_input("quizás", "Sí")

    assert pedir_booleano("Activa: ") is True


def test_crear_carrera_assigns_next_id(consola, carreras, scripted_input, capsys):
    carreras.create(make_carrera(3))
    scripted_input("Medicina", "6", "true", "10/02/2001")

    consola.crear_carrera()

    assert carreras.get(4).nombre == "Medicina"
    assert "Carrera creada exitosamente." in capsys.readouterr().out


def test_crear_materia_with_unknown_carrera_prints_error(consola, materias, scripted_input, capsys):
    scripted_input("Álgebra", "3,5", "false", "999")

    consola.crear_materia()

    assert materias.get_multi() == []
    assert "No existe una carrera con el ID 999." in capsys.readouterr().out


def test_actualizar_missing_carrera_reports_not_found(consola, scripted_input, capsys):
    scripted_input("8", "Nombre", "4", "false", "01/01/2000")

    consola.actualizar_carrera()

    assert "Carrera con ID 8 no encontrada." in capsys.readouterr().out


def test_listar_materias_por_carrera_without_matches(consola, scripted_input, capsys):
    scripted_input("1")

    consola.listar_materias_por_carrera()

    assert "No hay materias asociadas a la carrera con ID 1." in capsys.readouterr().out


def test_listar_materias_por_carrera_prints_matches(consola, carreras, materias, scripted_input, capsys):
    carreras.create(make_carrera(1))
    materias.create(make_materia(1, 1, "Programación I"))
    scripted_input("1")

    consola.listar_materias_por_carrera()

    out = capsys.readouterr().out
    assert "Materias de la carrera con ID 1:" in out
    assert "Programación I" in out


def test_menu_flow_with_invalid_option_and_reset(consola, carreras, materias, scripted_input, capsys):
    carreras.create(make_carrera(1))
    materias.create(make_materia(1, 1))
    scripted_input("9", "3", "3", "4")

    consola.menu_principal()

    out = capsys.readouterr().out
    assert "Opción no válida. Intenta de nuevo." in out
    assert "Ambos datos han sido eliminados." in out
    assert "¡Hasta luego!" in out
    assert carreras.get_multi() == []
    assert materias.get_multi() == []


def test_decode_error_is_reported_and_menu_continues(consola, settings, scripted_input, capsys):
    with open(settings.carreras_file, "w", encoding="utf-8") as f:
        f.write("{roto")
    scripted_input("1", "2", "6", "4")

    consola.menu_principal()

    out = capsys.readouterr().out
    assert "no contiene datos válidos" in out
    assert "¡Hasta luego!" in out


def test_main_aborts_when_data_file_is_corrupt(settings, monkeypatch, capsys):
    monkeypatch.setattr(main_module, "setup_logging", lambda s: None)
    with open(settings.materias_file, "w", encoding="utf-8") as f:
        f.write("[1, 2, 3]")

    assert main(settings) == 1
    assert "Error crítico" in capsys.readouterr().out


def test_main_exits_cleanly_on_end_of_input(settings, monkeypatch, scripted_input, capsys):
    monkeypatch.setattr(main_module, "setup_logging", lambda s: None)
    scripted_input("1", "2")

    assert main(settings) == 0
    assert "¡Hasta luego!" in capsys.readouterr().out


def test_file_access_error_is_reported_and_menu_continues(tmp_path, scripted_input, capsys):
    bloqueo = tmp_path / "no_es_directorio"
    bloqueo.write_text("", encoding="utf-8")
    s = Settings(
        _env_file=None,
        carreras_file=str(bloqueo / "carreras.txt"),
        materias_file=str(tmp_path / "materias.txt"),
    )
    carreras = CRUDCarrera(s)
    consola = Consola(carreras, CRUDMateria(s, carreras))
    scripted_input("3", "1", "4")

    consola.menu_principal()

    out = capsys.readouterr().out
    assert "No se pudo acceder al archivo" in out
    assert "¡Hasta luego!" in out


def test_ejecutar_returns_error_response_on_os_error(consola):
    def _falla():
        raise PermissionError("sin permisos")

    response = consola.ejecutar(_falla, "no se muestra")

    assert response["success"] is False
    assert response["error_code"] == "IO_ERROR"
