from __future__ import annotations
import uuid
from typing import Optional, List, Tuple

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import Patient
from .schema import PatientUpsert


def get_patients(db: Session, *, clinic_id: uuid.UUID) -> List[Patient]:
    stmt = select(Patient).where(Patient.clinic_id == clinic_id).order_by(Patient.name.asc())
    return list(db.scalars(stmt))


def get_patient(db: Session, patient_id: uuid.UUID) -> Optional[Patient]:
    return db.get(Patient, patient_id)


def get_patient_for_clinic(db: Session, patient_id: uuid.UUID, clinic_id: uuid.UUID) -> Optional[Patient]:
    stmt = select(Patient).where(Patient.id == patient_id, Patient.clinic_id == clinic_id)
    return db.scalars(stmt).first()


def upsert_patient(db: Session, dto: PatientUpsert) -> Tuple[Patient, bool]:
    row = get_patient(db, dto.id) if dto.id is not None else None
    if row is not None and row.clinic_id != dto.clinic_id:
        raise HTTPException(status_code=404, detail="patient not found")

    created = row is None
    if created:
        row = Patient(id=dto.id or uuid.uuid4(), clinic_id=dto.clinic_id)
        db.add(row)

    for k, v in dto.model_dump(exclude={"id", "clinic_id"}).items():
        setattr(row, k, v)
    db.commit()
    db.refresh(row)
    return row, created


def delete_patient(db: Session, patient_id: uuid.UUID, *, clinic_id: uuid.UUID) -> bool:
    row = get_patient_for_clinic(db, patient_id, clinic_id)
    if not row:
        return False
    db.delete(row)
    db.commit()
    return True
