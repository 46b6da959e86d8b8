from __future__ import annotations
import uuid
from typing import Optional, List, Tuple

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import Doctor
from .schema import DoctorUpsert


def get_doctors(db: Session, *, clinic_id: uuid.UUID) -> List[Doctor]:
    stmt = select(Doctor).where(Doctor.clinic_id == clinic_id).order_by(Doctor.name.asc())
    return list(db.scalars(stmt))


def get_doctor(db: Session, doctor_id: uuid.UUID) -> Optional[Doctor]:
    return db.get(Doctor, doctor_id)


def get_doctor_for_clinic(db: Session, doctor_id: uuid.UUID, clinic_id: uuid.UUID) -> Optional[Doctor]:
    stmt = select(Doctor).where(Doctor.id == doctor_id, Doctor.clinic_id == clinic_id)
    return db.scalars(stmt).first()


def upsert_doctor(db: Session, dto: DoctorUpsert) -> Tuple[Doctor, bool]:
    """Update the doctor with ``dto.id`` or insert a new one.

    Returns the row and whether it was inserted. An id owned by another
    clinic is reported as missing.
    """
    row = get_doctor(db, dto.id) if dto.id is not None else None
    if row is not None and row.clinic_id != dto.clinic_id:
        raise HTTPException(status_code=404, detail="doctor not found")

    created = row is None
    if created:
        row = Doctor(id=dto.id or uuid.uuid4(), clinic_id=dto.clinic_id)
        db.add(row)

    data = dto.model_dump(exclude={"id", "clinic_id"})
    for k, v in data.items():
        setattr(row, k, v)
    db.commit()
    db.refresh(row)
    return row, created


def delete_doctor(db: Session, doctor_id: uuid.UUID, *, clinic_id: uuid.UUID) -> bool:
    row = get_doctor_for_clinic(db, doctor_id, clinic_id)
    if not row:
        return False
    db.delete(row)
    db.commit()
    return True
