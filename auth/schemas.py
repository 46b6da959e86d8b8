from pydantic import BaseModel, ConfigDict, field_validator
from email_validator import EmailNotValidError, validate_email

from user.schemas import UserSchema


def _normalize_email(v: str, *, required_message: str, invalid_message: str) -> str:
    v = (v or "").strip()
    if not v:
        raise ValueError(required_message)
    try:
        validate_email(v, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError(invalid_message)
    return v.lower()


# what clients send
class SignUpPayload(BaseModel):
    name: str
    email: str
    password: str
    model_config = ConfigDict(extra="forbid")

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 5:
            raise ValueError("O nome deve ter pelo menos 5 caracteres")
        if len(v) > 50:
            raise ValueError("O nome deve ter no máximo 50 caracteres")
        return v

    @field_validator("email")
    @classmethod
    def email_format(cls, v: str) -> str:
        return _normalize_email(v, required_message="Insira um email", invalid_message="Insira um email valido")

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        if len(v) < 8:
            raise ValueError("A senha deve ter pelo menos 8 caracteres")
        return v


class LoginPayload(BaseModel):
    email: str
    password: str
    model_config = ConfigDict(extra="forbid")

    @field_validator("email")
    @classmethod
    def email_format(cls, v: str) -> str:
        return _normalize_email(v, required_message="Insira um email", invalid_message="Insira um email valido")

    @field_validator("password")
    @classmethod
    def password_present(cls, v: str) -> str:
        if not v:
            raise ValueError("Insira a senha")
        return v


class TokenSchema(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserSchema
