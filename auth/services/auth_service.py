import logging
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from auth.utils.auth_utils import decode_access_token, verify_password
from core.database import get_db
from user.models import User
from user.service import get_user, get_user_by_email

logger = logging.getLogger(__name__)

http_bearer = HTTPBearer(auto_error=False)


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        return None
    return user


def _user_from_token(db: Session, token: str) -> Optional[User]:
    try:
        payload = decode_access_token(token)
    except jwt.InvalidTokenError as exc:
        logger.debug("rejected access token: %s", exc)
        return None
    subject = str(payload.get("sub") or "")
    if not subject.isdigit():
        return None
    return get_user(db, int(subject))


def get_optional_user(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer),
    db: Session = Depends(get_db),
) -> Optional[User]:
    """Resolve the caller if a usable token was sent, otherwise None."""
    if creds is None:
        return None
    user = _user_from_token(db, creds.credentials)
    if user is None or not user.is_active:
        return None
    return user


def get_current_user(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer),
    db: Session = Depends(get_db),
) -> User:
    if creds is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user = _user_from_token(db, creds.credentials)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_current_active_user(user: User = Depends(get_current_user)) -> User:
    if not user.is_active:
        raise HTTPException(status_code=400, detail="inactive user")
    return user
