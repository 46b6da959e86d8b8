from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from authz.deps import get_session_context
from core.config_loader import settings
from core.database import get_db
from doctor import service as doctor_service
from doctor.schema import DoctorSchema
from onboarding.gate import route
from onboarding.schema import PageKind, SessionContext
from patient import service as patient_service
from patient.schema import PatientSchema
from .schema import (
    PageSchema,
    AuthenticationPageSchema,
    DashboardPageSchema,
    DoctorsPageSchema,
    PatientsPageSchema,
)

pages_router = APIRouter(prefix="/pages", tags=["Pages"])


def page_url(page: PageKind) -> str:
    return f"{settings.API_PREFIX}{pages_router.prefix}{page.path}"


def _redirect_if_needed(session: SessionContext, requested: PageKind) -> Optional[RedirectResponse]:
    destination = route(session, requested)
    if destination is requested:
        return None
    return RedirectResponse(page_url(destination), status_code=status.HTTP_307_TEMPORARY_REDIRECT)


@pages_router.get("/authentication", response_model=AuthenticationPageSchema)
def authentication_page():
    return AuthenticationPageSchema(
        page=PageKind.authentication.value,
        title="Autenticação",
        tabs=["Login", "Criar Conta"],
    )


@pages_router.get("/clinic-form", response_model=PageSchema)
def clinic_form_page(session: SessionContext = Depends(get_session_context)):
    redirect = _redirect_if_needed(session, PageKind.clinic_form)
    if redirect:
        return redirect
    return PageSchema(
        page=PageKind.clinic_form.value,
        title="Adicionar Clinica",
        description="Adicione uma nova clinica para continuar.",
    )


@pages_router.get("/dashboard", response_model=DashboardPageSchema)
def dashboard_page(session: SessionContext = Depends(get_session_context)):
    redirect = _redirect_if_needed(session, PageKind.dashboard)
    if redirect:
        return redirect
    return DashboardPageSchema(
        page=PageKind.dashboard.value,
        title="Dashboard",
        user_name=session.user.name,
        user_email=session.user.email,
        clinic_name=session.clinic.clinic_name,
    )


@pages_router.get("/doctors", response_model=DoctorsPageSchema)
def doctors_page(session: SessionContext = Depends(get_session_context), db: Session = Depends(get_db)):
    redirect = _redirect_if_needed(session, PageKind.doctors)
    if redirect:
        return redirect
    return DoctorsPageSchema(
        page=PageKind.doctors.value,
        title="Médicos",
        description="Gerencie os médicos da sua clinica",
        doctors=[
            DoctorSchema.model_validate(d)
            for d in doctor_service.get_doctors(db, clinic_id=session.clinic.clinic_id)
        ],
    )


@pages_router.get("/patients", response_model=PatientsPageSchema)
def patients_page(session: SessionContext = Depends(get_session_context), db: Session = Depends(get_db)):
    redirect = _redirect_if_needed(session, PageKind.patients)
    if redirect:
        return redirect
    return PatientsPageSchema(
        page=PageKind.patients.value,
        title="Pacientes",
        description="Gerencie os pacientes da sua clinica",
        patients=[
            PatientSchema.model_validate(p)
            for p in patient_service.get_patients(db, clinic_id=session.clinic.clinic_id)
        ],
    )


@pages_router.get("/appointments", response_model=PageSchema)
def appointments_page(session: SessionContext = Depends(get_session_context)):
    redirect = _redirect_if_needed(session, PageKind.appointments)
    if redirect:
        return redirect
    return PageSchema(
        page=PageKind.appointments.value,
        title="Agendamentos",
        description="Gerencie os agendamentos da sua clinica",
    )
