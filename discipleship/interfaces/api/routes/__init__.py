from fastapi import FastAPI

from .curriculum import router as curriculum_router
from .health import router as health_router
from .messages import router as messages_router
from .notifications import router as notifications_router
from .pairings import router as pairings_router
from .profiles import router as profiles_router
from .progress import router as progress_router
from .reflections import router as reflections_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(profiles_router)
    app.include_router(pairings_router)
    app.include_router(curriculum_router)
    app.include_router(progress_router)
    app.include_router(messages_router)
    app.include_router(reflections_router)
    app.include_router(notifications_router)
