from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import Clinic, UserToClinic
from .schema import ClinicCreate


def get_clinic_for_user(db: Session, user_id: int) -> Optional[Clinic]:
    """First clinic the user was linked to, or None before onboarding."""
    stmt = (
        select(Clinic)
        .join(UserToClinic, UserToClinic.clinic_id == Clinic.id)
        .where(UserToClinic.user_id == user_id)
        .order_by(UserToClinic.created_at.asc())
    )
    return db.scalars(stmt).first()


def create_clinic(db: Session, dto: ClinicCreate) -> Clinic:
    clinic = Clinic(name=dto.name)
    db.add(clinic)
    db.flush()

    db.add(UserToClinic(user_id=dto.user_id, clinic_id=clinic.id))
    db.commit()
    db.refresh(clinic)
    return clinic
