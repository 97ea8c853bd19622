"""FastAPI application exposing engine results to a UI layer."""

from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import get_settings
from ..db import AppStateRepository, get_db_path, init_db
from ..errors import DeserializationError, InvalidInputError
from ..logging_setup import get_logger, setup_logging
from .routers import avatar, data, exercises, stats, workouts

logger = get_logger(__name__)


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    # The CLI configures logging itself; a reloader process starts here
    if not structlog.is_configured():
        settings = get_settings()
        setup_logging(settings.log_level, settings.log_format)

    db_path = db_path or get_db_path()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: make sure the schema exists
        await init_db(db_path)
        yield

    app = FastAPI(
        title="fit-avatar",
        description="Workout progression and analytics",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.repository = AppStateRepository(db_path)

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        logger.info("Rejected request", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(DeserializationError)
    async def deserialization_handler(request: Request, exc: DeserializationError):
        logger.warning("Unreadable payload", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    app.include_router(avatar.router)
    app.include_router(stats.router)
    app.include_router(workouts.router)
    app.include_router(exercises.router)
    app.include_router(data.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
