"""
Main entrypoint for the Exercise Tracker API.

``create_app`` assembles the FastAPI application: logging, CORS, the
landing page, the API router under ``/api`` and the lifecycle of the
SQLite store.  The store handle is created here, kept on
``app.state`` and handed to request handlers through dependencies.
A module level ``app`` is built from the environment settings so the
service can be served with::

    uvicorn exercise_tracker.app.main:app --reload
"""

from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.db import Database
from .core.logging_config import setup_logging

VIEWS_DIR = Path(__file__).resolve().parent / "views"


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to build the app from; defaults to the environment
        driven ``settings`` singleton.  Tests pass their own to point
        the store at a temporary database.

    Returns
    -------
    FastAPI
        A configured application whose store opens on startup and
        closes on shutdown.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.settings = app_settings
    app.state.database = Database(app_settings.database_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        return FileResponse(VIEWS_DIR / "index.html", media_type="text/html")

    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        app.state.database.open()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        app.state.database.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
