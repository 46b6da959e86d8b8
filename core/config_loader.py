from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    APP_NAME: str = "clinic-api"
    ENV: Literal["local", "dev", "prod"] = "local"
    API_PREFIX: str = "/api"
    LOG_LEVEL: Optional[str] = None

    # DB
    DATABASE_URL: str = "sqlite:///./clinic.db"

    # Auth
    JWT_SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_MINUTES: int = 60

    # JSON list in the environment, e.g. '["http://localhost:3000"]'
    BACKEND_CORS_ORIGINS: list[str] = []


settings = Settings()


def validate_runtime_config() -> None:
    if settings.ENV == "prod" and settings.JWT_SECRET_KEY == "change-me":
        raise RuntimeError("JWT_SECRET_KEY must be set in production.")
