from typing import Optional
from pydantic import BaseModel

from doctor.schema import DoctorSchema
from patient.schema import PatientSchema


class PageSchema(BaseModel):
    page: str
    title: str
    description: Optional[str] = None


class AuthenticationPageSchema(PageSchema):
    tabs: list[str]


class DashboardPageSchema(PageSchema):
    user_name: str
    user_email: str
    clinic_name: str


class DoctorsPageSchema(PageSchema):
    doctors: list[DoctorSchema]


class PatientsPageSchema(PageSchema):
    patients: list[PatientSchema]
