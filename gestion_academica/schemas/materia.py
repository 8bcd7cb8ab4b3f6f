from pydantic import BaseModel, ConfigDict, Field


class Materia(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True, extra="forbid")

    id: int
    nombre: str
    creditos: float
    obligatoria: bool
    carrera_id: int = Field(alias="carreraId")
