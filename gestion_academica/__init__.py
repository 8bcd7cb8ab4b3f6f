"""Gestión de carreras y materias persistidas en archivos JSON."""

__version__ = "1.0.0"
