import uuid
from pydantic import BaseModel, ConfigDict, field_validator

class ClinicSchema(BaseModel):
    id: uuid.UUID
    name: str
    model_config = ConfigDict(from_attributes=True)

# what clients send
class ClinicCreatePayload(BaseModel):
    name: str
    model_config = ConfigDict(extra="forbid")

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("O nome é obrigatório")
        if len(v) > 50:
            raise ValueError("O nome deve ter no máximo 50 caracteres")
        return v

# internal DTO for service
class ClinicCreate(BaseModel):
    user_id: int
    name: str
