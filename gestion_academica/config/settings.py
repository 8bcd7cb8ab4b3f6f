from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GESTION_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Archivos de datos
    carreras_file: str = "carreras.txt"
    materias_file: str = "materias.txt"

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None


settings = Settings()
