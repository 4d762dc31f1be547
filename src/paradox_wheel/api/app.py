"""FastAPI application factory and server entry point.

Every failure is returned as ``{"error": "<message>"}``. Status codes:

    400  validation failures (request bodies, query filters)
    401  admin password missing or wrong
    404  unknown record
    409  duplicate record
    500  anything else

Run with ``paradox-wheel-api`` or ``uvicorn --factory paradox_wheel.api.app:create_app``.
"""

from __future__ import annotations

from uuid import uuid4

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from paradox_wheel.api.routes import (
    admin,
    backgrounds,
    characters,
    content,
    mage_groups,
    merits,
    resources,
    rotes,
)
from paradox_wheel.core.config import Settings, get_settings
from paradox_wheel.core.exceptions import (
    AuthenticationError,
    DuplicateRecordError,
    ParadoxWheelError,
    RecordNotFoundError,
    ValidationError,
)
from paradox_wheel.core.logging import configure_logging, get_logger, log_context
from paradox_wheel.storage.database import Database


logger = get_logger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


# =============================================================================
# Exception Handlers
# =============================================================================


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error(400, _describe_validation(exc))

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return _error(400, exc.message)

    @app.exception_handler(AuthenticationError)
    async def authentication_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
        return _error(401, exc.message)

    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
        return _error(404, exc.message)

    @app.exception_handler(DuplicateRecordError)
    async def duplicate_handler(request: Request, exc: DuplicateRecordError) -> JSONResponse:
        return _error(409, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(ParadoxWheelError)
    async def app_error_handler(request: Request, exc: ParadoxWheelError) -> JSONResponse:
        logger.exception("Request failed", path=request.url.path, details=exc.details)
        return _error(500, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error", path=request.url.path)
        return _error(500, "Internal server error")


# =============================================================================
# Application Factory
# =============================================================================


def create_app(database: Database | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the REST application.

    Args:
        database: Database to serve. Defaults to the configured database path.
        settings: Settings to use. Defaults to ``get_settings()``.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()
    if database is None:
        database = Database(settings.storage.database_path)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        with log_context(request_id=str(uuid4()), method=request.method, path=request.url.path):
            return await call_next(request)

    _register_exception_handlers(app)

    for module in (characters, rotes, merits, resources, mage_groups, backgrounds, content, admin):
        app.include_router(module.router)

    logger.info("API application created", database=str(database.db_path))
    return app


def main() -> None:
    """Run the REST server with uvicorn."""
    settings = get_settings()
    configure_logging(settings)
    logger.info(f"Starting API on {settings.api.host}:{settings.api.port}")
    uvicorn.run(create_app(settings=settings), host=settings.api.host, port=settings.api.port)


__all__ = [
    "create_app",
    "main",
]
