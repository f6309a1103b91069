"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from registrar import __version__
from registrar.api.dependencies import close_state_store, init_state_store
from registrar.api.models import APIResponse
from registrar.api.routes import catalog, offerings, registrations
from registrar.config import Settings
from registrar.exceptions import ErrorKind, RegistrarError
from registrar.state_store import RecordExistsError, StateStoreError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTEGRITY_MISMATCH: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE_SECTION: status.HTTP_409_CONFLICT,
    ErrorKind.SCHEDULE_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.ACTIVE_REGISTRATION_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.ILLEGAL_TRANSITION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.IMMUTABLE_STATE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_WINDOW: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CASCADE_DELETE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def register_exception_handlers(app: FastAPI) -> None:
    """Translate core and store errors into APIResponse envelopes."""

    @app.exception_handler(RegistrarError)
    async def registrar_error_handler(request: Request, exc: RegistrarError) -> JSONResponse:
        logger.warning(
            "%s %s rejected: %s (%s)", request.method, request.url.path, exc.message, exc.kind
        )
        return JSONResponse(
            status_code=ERROR_STATUS_CODES[exc.kind],
            content=APIResponse[None](
                data=None, error=exc.message, code=exc.kind.value
            ).model_dump(),
        )

    @app.exception_handler(RecordExistsError)
    async def record_exists_handler(_request: Request, exc: RecordExistsError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=APIResponse[None](data=None, error=str(exc), code="RecordExists").model_dump(),
        )

    @app.exception_handler(StateStoreError)
    async def state_store_error_handler(request: Request, exc: StateStoreError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=APIResponse[None](data=None, error="Internal server error").model_dump(),
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    init_state_store(app.state.db_path)
    logger.info("Registrar API started (db=%s)", app.state.db_path)

    yield
    # Shutdown
    close_state_store()


def create_app(db_path: str | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: SQLite database path. Defaults to REGISTRAR_DB_PATH.
    """
    app = FastAPI(
        title="Registrar API",
        description="REST API for semester registrations and offered courses",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.db_path = db_path if db_path is not None else Settings.from_env().db_path

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(registrations.router, prefix="/api/v1")
    app.include_router(offerings.router, prefix="/api/v1")
    app.include_router(catalog.router, prefix="/api/v1")

    return app
