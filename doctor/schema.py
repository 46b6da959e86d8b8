from __future__ import annotations
import re
import uuid
from datetime import time
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, computed_field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from availability.schema import AvailabilityWindow, TIME_OF_DAY_PATTERN
from availability.validator import validate_window, weekday_label
from .pricing import from_cents, MAX_PRICE
from .specialties import MEDICAL_SPECIALTIES

_TIME_RE = re.compile(TIME_OF_DAY_PATTERN)


class DoctorSchema(BaseModel):
    id: uuid.UUID
    clinic_id: uuid.UUID
    name: str
    specialty: str
    avatar_image_url: Optional[str] = None
    appointment_price_in_cents: int
    available_from_weekday: int
    available_to_weekday: int
    available_from_time: time
    available_to_time: time
    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def appointment_price(self) -> Decimal:
        return from_cents(self.appointment_price_in_cents)

    @computed_field
    @property
    def available_from_weekday_label(self) -> str:
        return weekday_label(self.available_from_weekday)

    @computed_field
    @property
    def available_to_weekday_label(self) -> str:
        return weekday_label(self.available_to_weekday)


class SpecialtySchema(BaseModel):
    value: str
    label: str


# PUBLIC payload, what the doctor form submits
class UpsertDoctorPayload(BaseModel):
    id: Optional[uuid.UUID] = None
    name: str
    specialty: str
    appointment_price: Decimal
    available_from_weekday: int
    available_to_weekday: int
    available_from_time: str
    available_to_time: str
    avatar_image_url: Optional[str] = None
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

    @field_validator("specialty")
    @classmethod
    def specialty_known(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("A especialidade é obrigatória")
        if v not in MEDICAL_SPECIALTIES:
            raise ValueError("Especialidade inválida")
        return v

    @field_validator("appointment_price")
    @classmethod
    def price_required(cls, v: Decimal) -> Decimal:
        if v < Decimal("0.01"):
            raise ValueError("O valor da consulta é obrigatório")
        if v > MAX_PRICE:
            raise ValueError("O valor da consulta deve ser no máximo 21.474.836,47")
        return v

    @field_validator("avatar_image_url")
    @classmethod
    def avatar_length(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v:
            return None
        if len(v) > 512:
            raise ValueError("A URL da imagem deve ter no máximo 512 caracteres")
        return v

    @field_validator("available_from_weekday", "available_to_weekday")
    @classmethod
    def weekday_range(cls, v: int) -> int:
        if not (0 <= v <= 6):
            raise ValueError("O dia da semana deve estar entre 0 (domingo) e 6 (sábado)")
        return v

    @field_validator("available_from_time")
    @classmethod
    def from_time_required(cls, v: str) -> str:
        return _time_of_day(v, "O horário de inicio é obrigatório")

    @field_validator("available_to_time")
    @classmethod
    def to_time_required(cls, v: str) -> str:
        return _time_of_day(v, "O horário de final é obrigatório")

    @model_validator(mode="after")
    def validate_availability(self):
        error = validate_window(self.availability_window())
        if error is not None:
            raise PydanticCustomError(
                "availability_window", error.message, {"field": f"available_{error.field}"}
            )
        return self

    def availability_window(self) -> AvailabilityWindow:
        return AvailabilityWindow(
            from_weekday=self.available_from_weekday,
            to_weekday=self.available_to_weekday,
            from_time=self.available_from_time,
            to_time=self.available_to_time,
        )


def _time_of_day(v: str, required_message: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError(required_message)
    if not _TIME_RE.match(v):
        raise ValueError("Horário inválido, use HH:MM:SS")
    return v


# INTERNAL DTO for the service
class DoctorUpsert(BaseModel):
    id: Optional[uuid.UUID] = None
    clinic_id: uuid.UUID
    name: str
    specialty: str
    avatar_image_url: Optional[str] = None
    appointment_price_in_cents: int
    available_from_weekday: int
    available_to_weekday: int
    available_from_time: time
    available_to_time: time
