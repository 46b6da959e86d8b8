import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.database import get_db
from authz.deps import require_clinic
from .pricing import to_cents
from .schema import DoctorSchema, SpecialtySchema, UpsertDoctorPayload, DoctorUpsert
from .specialties import MEDICAL_SPECIALTIES
from . import service

logger = logging.getLogger(__name__)

doctor_router = APIRouter(prefix="/doctors", tags=["Doctors"])

# Specialty catalogue for the form select
@doctor_router.get("/specialties", response_model=list[SpecialtySchema])
def list_specialties():
    return [SpecialtySchema(value=s, label=s) for s in MEDICAL_SPECIALTIES]

# List doctors of the caller's clinic
@doctor_router.get("", response_model=list[DoctorSchema])
def list_doctors(db: Session = Depends(get_db), clinic_id: uuid.UUID = Depends(require_clinic)):
    return service.get_doctors(db, clinic_id=clinic_id)

# Get doctor by id
@doctor_router.get("/{doctor_id}", response_model=DoctorSchema)
def doctor_detail(doctor_id: uuid.UUID, db: Session = Depends(get_db), clinic_id: uuid.UUID = Depends(require_clinic)):
    obj = service.get_doctor_for_clinic(db, doctor_id, clinic_id)
    if not obj:
        raise HTTPException(status_code=404, detail="doctor not found")
    return obj

# Create or update a doctor
@doctor_router.post("", response_model=DoctorSchema)
def doctor_upsert(
    payload: UpsertDoctorPayload,
    response: Response,
    db: Session = Depends(get_db),
    clinic_id: uuid.UUID = Depends(require_clinic),
):
    internal = DoctorUpsert(
        id=payload.id,
        clinic_id=clinic_id,
        name=payload.name,
        specialty=payload.specialty,
        avatar_image_url=payload.avatar_image_url,
        appointment_price_in_cents=to_cents(payload.appointment_price),
        available_from_weekday=payload.available_from_weekday,
        available_to_weekday=payload.available_to_weekday,
        available_from_time=payload.available_from_time,
        available_to_time=payload.available_to_time,
    )
    try:
        doctor, created = service.upsert_doctor(db, internal)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("doctor upsert failed for clinic %s", clinic_id)
        raise HTTPException(status_code=500, detail="Erro ao salvar médico.")

    logger.info("doctor %s %s", doctor.id, "created" if created else "updated")
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return doctor

# Delete doctor
@doctor_router.delete("/{doctor_id}")
def doctor_delete(doctor_id: uuid.UUID, db: Session = Depends(get_db), clinic_id: uuid.UUID = Depends(require_clinic)):
    if not service.delete_doctor(db, doctor_id, clinic_id=clinic_id):
        raise HTTPException(status_code=404, detail="doctor not found")
    return {"message": "doctor deleted"}
