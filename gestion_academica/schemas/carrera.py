from pydantic import BaseModel, ConfigDict, Field


class Carrera(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True, extra="forbid")

    id: int
    nombre: str
    duracion: int
    activa: bool
    # Formato "dd/MM/yyyy", se guarda tal cual se ingresa
    fecha_creacion: str = Field(alias="fechaCreacion")
