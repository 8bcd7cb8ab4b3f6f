import logging

from .settings import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Settings) -> None:
    """Configurar el logger raíz según la configuración"""
    level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    kwargs = {"level": level, "format": LOG_FORMAT, "datefmt": DATE_FORMAT, "force": True}
    if settings.log_file:
        kwargs["filename"] = settings.log_file
        kwargs["encoding"] = "utf-8"
    logging.basicConfig(**kwargs)
