from __future__ import annotations
import uuid
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator
from email_validator import EmailNotValidError, validate_email

from .models import PatientSex


class PatientSchema(BaseModel):
    id: uuid.UUID
    clinic_id: uuid.UUID
    name: str
    email: str
    phone_number: str
    sex: PatientSex
    model_config = ConfigDict(from_attributes=True)


# PUBLIC payload, what the patient form submits
class UpsertPatientPayload(BaseModel):
    id: Optional[uuid.UUID] = None
    name: str
    email: str
    phone_number: str
    sex: str
    model_config = ConfigDict(extra="forbid")

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("O nome é obrigatório")
        if len(v) > 255:
            raise ValueError("O nome deve ter no máximo 255 caracteres")
        return v

    @field_validator("email")
    @classmethod
    def email_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("O email é obrigatório")
        if len(v) > 255:
            raise ValueError("O email deve ter no máximo 255 caracteres")
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("Email inválido")
        return v.lower()

    @field_validator("phone_number")
    @classmethod
    def phone_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("O telefone é obrigatório")
        if len(v) > 32:
            raise ValueError("O telefone deve ter no máximo 32 caracteres")
        return v

    @field_validator("sex")
    @classmethod
    def sex_required(cls, v: str) -> str:
        if v not in {s.value for s in PatientSex}:
            raise ValueError("O sexo é obrigatório")
        return v


# INTERNAL DTO for the service
class PatientUpsert(BaseModel):
    id: Optional[uuid.UUID] = None
    clinic_id: uuid.UUID
    name: str
    email: str
    phone_number: str
    sex: PatientSex
