import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.database import get_db
from authz.deps import require_clinic
from .schema import PatientSchema, UpsertPatientPayload, PatientUpsert
from . import service

logger = logging.getLogger(__name__)

patient_router = APIRouter(prefix="/patients", tags=["Patients"])

# List patients of the caller's clinic
@patient_router.get("", response_model=list[PatientSchema])
def list_patients(db: Session = Depends(get_db), clinic_id: uuid.UUID = Depends(require_clinic)):
    return service.get_patients(db, clinic_id=clinic_id)

# Get patient by id
@patient_router.get("/{patient_id}", response_model=PatientSchema)
def patient_detail(patient_id: uuid.UUID, db: Session = Depends(get_db), clinic_id: uuid.UUID = Depends(require_clinic)):
    obj = service.get_patient_for_clinic(db, patient_id, clinic_id)
    if not obj:
        raise HTTPException(status_code=404, detail="patient not found")
    return obj

# Create or update a patient
@patient_router.post("", response_model=PatientSchema)
def patient_upsert(
    payload: UpsertPatientPayload,
    response: Response,
    db: Session = Depends(get_db),
    clinic_id: uuid.UUID = Depends(require_clinic),
):
    internal = PatientUpsert(clinic_id=clinic_id, **payload.model_dump())
    try:
        patient, created = service.upsert_patient(db, internal)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("patient upsert failed for clinic %s", clinic_id)
        raise HTTPException(status_code=500, detail="Erro ao salvar paciente.")

    logger.info("patient %s %s", patient.id, "created" if created else "updated")
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return patient

# Delete patient
@patient_router.delete("/{patient_id}")
def patient_delete(patient_id: uuid.UUID, db: Session = Depends(get_db), clinic_id: uuid.UUID = Depends(require_clinic)):
    if not service.delete_patient(db, patient_id, clinic_id=clinic_id):
        raise HTTPException(status_code=404, detail="patient not found")
    return {"message": "patient deleted"}
