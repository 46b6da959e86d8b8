from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from auth.utils.auth_utils import get_password_hash
from user.models import User
from user.schemas import UserCreate


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    stmt = select(User).where(User.email == email.strip().lower())
    return db.scalars(stmt).first()


def create_user(db: Session, user: UserCreate) -> User:
    db_user = User(
        name=user.name,
        email=str(user.email).lower(),
        password_hash=get_password_hash(user.password),
        is_active=True,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user
