import uuid
from typing import Optional

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from auth.services.auth_service import get_current_active_user, get_optional_user
from clinic.service import get_clinic_for_user
from core.database import get_db
from onboarding.schema import ClinicAssociation, SessionContext, SessionUser
from user.models import User

def get_session_context(
    user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db),
) -> SessionContext:
    if user is None:
        return SessionContext()
    clinic = get_clinic_for_user(db, user.id)
    association = ClinicAssociation(clinic_id=clinic.id, clinic_name=clinic.name) if clinic else None
    return SessionContext(user=SessionUser.model_validate(user), clinic=association)

def require_clinic(
    user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> uuid.UUID:
    clinic = get_clinic_for_user(db, user.id)
    if clinic is None:
        raise HTTPException(status_code=403, detail="clinic not found")
    return clinic.id
