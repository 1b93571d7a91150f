from fastapi import FastAPI

from .audit_logs import router as audit_logs_router
from .auth import router as auth_router
from .notifications import router as notifications_router
from .settings import router as settings_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(notifications_router)
    app.include_router(audit_logs_router)
    app.include_router(settings_router)
