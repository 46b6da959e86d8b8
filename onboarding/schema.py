from __future__ import annotations
import uuid
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict


class PageKind(str, Enum):
    authentication = "authentication"
    clinic_form = "clinic_form"
    dashboard = "dashboard"
    doctors = "doctors"
    patients = "patients"
    appointments = "appointments"

    @property
    def path(self) -> str:
        return "/" + self.value.replace("_", "-")


class SessionState(str, Enum):
    unauthenticated = "unauthenticated"
    authenticated_no_clinic = "authenticated_no_clinic"
    authenticated_with_clinic = "authenticated_with_clinic"


class SessionUser(BaseModel):
    id: int
    name: str
    email: str
    model_config = ConfigDict(from_attributes=True, frozen=True)


class ClinicAssociation(BaseModel):
    clinic_id: uuid.UUID
    clinic_name: str
    model_config = ConfigDict(frozen=True)


class SessionContext(BaseModel):
    """Per-request view of who is calling and which clinic they belong to."""
    user: Optional[SessionUser] = None
    clinic: Optional[ClinicAssociation] = None
    model_config = ConfigDict(frozen=True)
