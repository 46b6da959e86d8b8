import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from core.config_loader import settings, validate_runtime_config
from core.errors import field_errors
from core.logging import setup_logging

from auth.routes.auth_router import auth_router
from clinic.router import clinic_router
from doctor.router import doctor_router
from patient.router import patient_router
from pages.router import pages_router
import models_bootstrap

setup_logging()
validate_runtime_config()

logger = logging.getLogger(__name__)

openapi_tags = [
    {
        "name": "Auth",
        "description": "Sign-up, login and current user",
    },
    {
        "name": "Pages",
        "description": "Session-gated page data and redirects",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]

app = FastAPI(title=settings.APP_NAME, openapi_tags=openapi_tags)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            str(origin).strip("/") for origin in settings.BACKEND_CORS_ORIGINS
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(RequestValidationError)
async def form_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": "invalid form data", "errors": field_errors(exc.errors())},
    )


app.include_router(auth_router, prefix=settings.API_PREFIX)
app.include_router(clinic_router, prefix=settings.API_PREFIX)
app.include_router(doctor_router, prefix=settings.API_PREFIX)
app.include_router(patient_router, prefix=settings.API_PREFIX)
app.include_router(pages_router, prefix=settings.API_PREFIX)

logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)


@app.get("/health", tags=['Health Checks'])
def read_root():
    return {"health": "true"}
