import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.database import get_db
from auth.services.auth_service import get_current_active_user

from .schema import ClinicSchema, ClinicCreatePayload, ClinicCreate
from . import service

logger = logging.getLogger(__name__)

clinic_router = APIRouter(prefix="/clinics", tags=["Clinics"])

# Caller's clinic
@clinic_router.get("/me", response_model=ClinicSchema)
def my_clinic(db: Session = Depends(get_db), user=Depends(get_current_active_user)):
    obj = service.get_clinic_for_user(db, user.id)
    if not obj:
        raise HTTPException(status_code=404, detail="clinic not found")
    return obj

# Create clinic (onboarding)
@clinic_router.post("", response_model=ClinicSchema, status_code=status.HTTP_201_CREATED)
def clinic_post(payload: ClinicCreatePayload, db: Session = Depends(get_db), user=Depends(get_current_active_user)):
    if service.get_clinic_for_user(db, user.id):
        raise HTTPException(status_code=409, detail="usuário já possui uma clinica")
    try:
        clinic = service.create_clinic(db, ClinicCreate(user_id=user.id, name=payload.name))
    except SQLAlchemyError:
        db.rollback()
        logger.exception("clinic creation failed for user %s", user.id)
        raise HTTPException(status_code=500, detail="Erro ao criar clinica.")
    logger.info("clinic %s created by user %s", clinic.id, user.id)
    return clinic
