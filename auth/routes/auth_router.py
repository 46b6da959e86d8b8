import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from auth.schemas import SignUpPayload, LoginPayload, TokenSchema
from auth.services.auth_service import authenticate_user, get_current_active_user
from auth.utils.auth_utils import create_access_token
from core.database import get_db
from user.models import User
from user.schemas import UserSchema, UserCreate
from user.service import create_user, get_user_by_email

logger = logging.getLogger(__name__)

auth_router = APIRouter(prefix="/auth", tags=["Auth"])

# Create an account and log in
@auth_router.post("/sign-up", response_model=TokenSchema, status_code=status.HTTP_201_CREATED)
def sign_up(payload: SignUpPayload, db: Session = Depends(get_db)):
    if get_user_by_email(db, payload.email):
        raise HTTPException(status_code=409, detail="E-mail já cadastrado")
    try:
        user = create_user(db, UserCreate(**payload.model_dump()))
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="E-mail já cadastrado")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("sign-up failed")
        raise HTTPException(status_code=500, detail="Erro ao criar conta.")
    logger.info("user %s signed up", user.id)
    return TokenSchema(access_token=create_access_token(str(user.id)), user=UserSchema.model_validate(user))

# Log in
@auth_router.post("/login", response_model=TokenSchema)
def login(payload: LoginPayload, db: Session = Depends(get_db)):
    user = authenticate_user(db, payload.email, payload.password)
    if user is None or not user.is_active:
        logger.warning("failed login attempt")
        raise HTTPException(status_code=401, detail="E-mail ou senha inválidos")
    return TokenSchema(access_token=create_access_token(str(user.id)), user=UserSchema.model_validate(user))

# Current user
@auth_router.get("/me", response_model=UserSchema)
def me(current_user: User = Depends(get_current_active_user)):
    return current_user
