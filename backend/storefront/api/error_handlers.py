"""Error Handlers — global exception handlers for the Storefront API.

Invariants:
    - StorefrontError → its http_status with {"message": ...}
    - RequestValidationError (body, query, path) → 400 with a field-level message
    - SQLAlchemyError → classified via classify_database_error (400/404/500)
    - HTTPException (unknown route, wrong method) → its status with {"message": detail}
    - Exception (catch-all) → 500 with the exception message, no traceback
    - Every failure is logged exactly once, here

Design Decisions:
    - Layered handlers: domain (StorefrontError), routing (HTTPException), validation (Pydantic),
      database (SQLAlchemy), catch-all (Exception). Route handlers never try/except.
    - Extracted from main.py (ADR: ExMA import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.core.errors import StorefrontError, PayloadValidationError
from storefront.infrastructure.database import classify_database_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_storefront_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_database_error_handler(app)
    _register_generic_error_handler(app)


def _error_response(request: Request, exc: StorefrontError) -> JSONResponse:
    extra = {
        "error_code": exc.code,
        "path": request.url.path,
        "method": request.method,
        "status_code": exc.http_status,
    }
    if exc.http_status >= 500:
        logger.error(f"{type(exc).__name__}: {exc.message}", extra=extra)
    else:
        logger.warning(f"{type(exc).__name__}: {exc.message}", extra=extra)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_storefront_error_handler(app: FastAPI) -> None:
    """Register Storefront domain/infrastructure error handler."""

    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        return _error_response(request, exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for routing failures (404 unknown path, 405 wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(
            f"HTTP {exc.status_code}: {exc.detail}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.status_code,
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=exc.headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        return _error_response(
            request, PayloadValidationError(format_validation_errors(exc.errors())),
        )


def _register_database_error_handler(app: FastAPI) -> None:
    """Register handler for SQLAlchemy errors raised outside a managed session."""

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        return _error_response(request, classify_database_error(exc))


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — message only, traceback stays in the logs."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc) or "An unexpected error occurred"},
        )


def format_validation_errors(errors) -> str:
    """Flatten Pydantic errors into one message: 'body.name: Field required; ...'."""
    parts = []
    for e in errors:
        loc = ".".join(str(part) for part in e.get("loc", ()))
        parts.append(f"{loc}: {e['msg']}" if loc else e["msg"])
    return "; ".join(parts) or "Invalid request data"
