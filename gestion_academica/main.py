import logging
from typing import Any, Callable, Dict, Optional

from gestion_academica.config.logging import setup_logging
from gestion_academica.config.settings import Settings, settings as default_settings
from gestion_academica.core.exceptions import AcademicoException, DecodeError
from gestion_academica.crud.carrera import CRUDCarrera
from gestion_academica.crud.materia import CRUDMateria
from gestion_academica.crud.reset import reset_datos
from gestion_academica.schemas.carrera import Carrera
from gestion_academica.schemas.materia import Materia
from gestion_academica.utils.helpers import (
    ResponseFormatter,
    format_carrera,
    format_materia,
    parse_bool,
    parse_float,
    parse_int,
)

logger = logging.getLogger(__name__)


def pedir_texto(prompt: str) -> str:
    return input(prompt).strip()


def _pedir(prompt: str, parser: Callable[[str], Any], error: str):
    while True:
        value = parser(input(prompt))
        if value is not None:
            return value
        print(error)


def pedir_entero(prompt: str) -> int:
    return _pedir(prompt, parse_int, "❌ Ingresa un número entero.")


def pedir_decimal(prompt: str) -> float:
    return _pedir(prompt, parse_float, "❌ Ingresa un número decimal.")


def pedir_booleano(prompt: str) -> bool:
    return _pedir(prompt, parse_bool, "❌ Ingresa true o false.")


def leer_opcion() -> Optional[int]:
    return parse_int(input("Selecciona una opción: "))


class Consola:
    """Menús por consola sobre los repositorios de carreras y materias"""

    def __init__(self, carreras: CRUDCarrera, materias: CRUDMateria):
        self.carreras = carreras
        self.materias = materias

    def ejecutar(self, operacion: Callable[[], Any], mensaje: str) -> Dict[str, Any]:
        try:
            response = ResponseFormatter.success(operacion(), mensaje)
            print(f"✅ {response['message']}")
        except AcademicoException as e:
            response = ResponseFormatter.error(e.message, e.error_code)
            print(f"❌ Error: {response['message']}")
        except OSError as e:
            logger.error(f"❌ Error de archivo: {e}")
            response = ResponseFormatter.error(f"No se pudo acceder al archivo: {e}", "IO_ERROR")
            print(f"❌ Error: {response['message']}")
        return response

    # ------------------------------ menús ------------------------------
    def menu_principal(self) -> None:
        while True:
            print("\n===== Menú Principal =====")
            print("1. Gestionar Carreras")
            print("2. Gestionar Materias")
            print("3. Reiniciar Datos")
            print("4. Salir")
            opcion = leer_opcion()
            if opcion == 1:
                self.menu_carreras()
            elif opcion == 2:
                self.menu_materias()
            elif opcion == 3:
                self.menu_reiniciar_datos()
            elif opcion == 4:
                print("¡Hasta luego!")
                break
            else:
                print("Opción no válida. Intenta de nuevo.")

    def menu_carreras(self) -> None:
        while True:
            print("\n===== Menú Carreras =====")
            print("1. Crear Carrera")
            print("2. Listar Carreras")
            print("3. Actualizar Carrera")
            print("4. Eliminar Carrera")
            print("5. Ver Materias de una Carrera")
            print("6. Volver al Menú Principal")
            opcion = leer_opcion()
            if opcion == 1:
                self.crear_carrera()
            elif opcion == 2:
                self.listar_carreras()
            elif opcion == 3:
                self.actualizar_carrera()
            elif opcion == 4:
                self.eliminar_carrera()
            elif opcion == 5:
                self.listar_materias_por_carrera()
            elif opcion == 6:
                break
            else:
                print("Opción no válida.")

    def menu_materias(self) -> None:
        while True:
            print("\n===== Menú Materias =====")
            print("1. Crear Materia")
            print("2. Listar Materias")
            print("3. Actualizar Materia")
            print("4. Eliminar Materia")
            print("5. Volver al Menú Principal")
            opcion = leer_opcion()
            if opcion == 1:
                self.crear_materia()
            elif opcion == 2:
                self.listar_materias()
            elif opcion == 3:
                self.actualizar_materia()
            elif opcion == 4:
                self.eliminar_materia()
            elif opcion == 5:
                break
            else:
                print("Opción no válida.")

    def menu_reiniciar_datos(self) -> None:
        print("¿Qué deseas reiniciar?")
        print("1. Carreras")
        print("2. Materias")
        print("3. Ambas")
        print("4. Cancelar")
        opcion = leer_opcion()
        if opcion == 1:
            self.ejecutar(
                lambda: reset_datos(self.carreras, self.materias, reset_materias=False),
                "Todos los datos de carreras han sido eliminados.",
            )
        elif opcion == 2:
            self.ejecutar(
                lambda: reset_datos(self.carreras, self.materias, reset_carreras=False),
                "Todos los datos de materias han sido eliminados.",
            )
        elif opcion == 3:
            self.ejecutar(
                lambda: reset_datos(self.carreras, self.materias),
                "Ambos datos han sido eliminados.",
            )
        elif opcion == 4:
            print("Reinicio cancelado.")
        else:
            print("Opción no válida.")

    # ------------------------------ carreras ------------------------------
    def _leer_carrera(self, id: int, nuevo: bool = False) -> Carrera:
        nombre = pedir_texto("Nuevo Nombre: " if nuevo else "Nombre: ")
        duracion = pedir_entero("Nueva Duración (años): " if nuevo else "Duración (años): ")
        activa = pedir_booleano("Activa (true/false): ")
        fecha = pedir_texto(
            "Nueva Fecha de Creación (dd/MM/yyyy): " if nuevo else "Fecha de Creación (dd/MM/yyyy): "
        )
        return Carrera(id=id, nombre=nombre, duracion=duracion, activa=activa, fecha_creacion=fecha)

    def crear_carrera(self) -> None:
        try:
            id = self.carreras.next_id()
        except DecodeError as e:
            print(f"❌ Error: {e.message}")
            return
        carrera = self._leer_carrera(id)
        self.ejecutar(lambda: self.carreras.create(carrera), "Carrera creada exitosamente.")

    def listar_carreras(self) -> None:
        response = self.ejecutar(self.carreras.get_multi, "Listado de carreras:")
        for carrera in response.get("data") or []:
            print(format_carrera(carrera))

    def actualizar_carrera(self) -> None:
        id = pedir_entero("ID de la carrera a actualizar: ")
        carrera = self._leer_carrera(id, nuevo=True)
        self.ejecutar(lambda: self.carreras.update(id, carrera), "Carrera actualizada exitosamente.")

    def eliminar_carrera(self) -> None:
        id = pedir_entero("ID de la carrera a eliminar: ")
        self.ejecutar(lambda: self.carreras.remove(id), "Carrera eliminada exitosamente.")

    def listar_materias_por_carrera(self) -> None:
        carrera_id = pedir_entero("ID de la carrera: ")
        try:
            materias = self.materias.get_by_carrera(carrera_id)
        except DecodeError as e:
            print(f"❌ Error: {e.message}")
            return
        if not materias:
            print(f"No hay materias asociadas a la carrera con ID {carrera_id}.")
            return
        print(f"Materias de la carrera con ID {carrera_id}:")
        for materia in materias:
            print(format_materia(materia))

    # ------------------------------ materias ------------------------------
    def _leer_materia(self, id: int, nuevo: bool = False) -> Materia:
        nombre = pedir_texto("Nuevo Nombre: " if nuevo else "Nombre: ")
        creditos = pedir_decimal("Nuevos Créditos: " if nuevo else "Créditos: ")
        obligatoria = pedir_booleano("Obligatoria (true/false): ")
        carrera_id = pedir_entero("ID de la Carrera: ")
        return Materia(
            id=id, nombre=nombre, creditos=creditos, obligatoria=obligatoria, carrera_id=carrera_id
        )

    def crear_materia(self) -> None:
        try:
            id = self.materias.next_id()
        except DecodeError as e:
            print(f"❌ Error: {e.message}")
            return
        materia = self._leer_materia(id)
        self.ejecutar(lambda: self.materias.create(materia), "Materia creada exitosamente.")

    def listar_materias(self) -> None:
        response = self.ejecutar(self.materias.get_multi, "Listado de materias:")
        for materia in response.get("data") or []:
            print(format_materia(materia))

    def actualizar_materia(self) -> None:
        id = pedir_entero("ID de la materia a actualizar: ")
        materia = self._leer_materia(id, nuevo=True)
        self.ejecutar(lambda: self.materias.update(id, materia), "Materia actualizada exitosamente.")

    def eliminar_materia(self) -> None:
        id = pedir_entero("ID de la materia a eliminar: ")
        self.ejecutar(lambda: self.materias.remove(id), "Materia eliminada exitosamente.")


def verificar_datos(carreras: CRUDCarrera, materias: CRUDMateria) -> bool:
    """Cargar ambos archivos una vez al iniciar; False si alguno está corrupto"""
    try:
        logger.info(f"📊 {carreras.count()} carreras y {materias.count()} materias cargadas")
    except DecodeError as e:
        logger.error(f"❌ Error crítico al cargar datos: {e}")
        print(f"❌ Error crítico: {e.message} Corrige o elimina el archivo.")
        return False
    return True


def main(settings: Settings = None) -> int:
    settings = settings or default_settings
    setup_logging(settings)
    logger.info("🚀 Iniciando gestión de carreras y materias...")

    carreras = CRUDCarrera(settings)
    materias = CRUDMateria(settings, carreras)
    if not verificar_datos(carreras, materias):
        return 1

    try:
        Consola(carreras, materias).menu_principal()
    except (EOFError, KeyboardInterrupt):
        print("\n¡Hasta luego!")
    logger.info("🛑 Gestión finalizada")
    return 0
