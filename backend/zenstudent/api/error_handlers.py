"""Error Handlers - global exception handlers for the ZenStudent API.

Invariants:
    - Every error body has a top-level "message" string plus an "error" object
    - ZenStudentError -> its own http_status and to_response() body
    - RequestValidationError -> 400 with field-level details
    - Starlette HTTPException (unknown route, wrong method) -> same envelope
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (ZenStudentError), validation (Pydantic),
      routing (HTTPException), catch-all (Exception)
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from zenstudent.core.errors import ZenStudentError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _envelope(message: str, code: str, category: str, severity: ErrorSeverity) -> dict:
    return {
        "message": message,
        "error": {
            "code": code,
            "category": category,
            "severity": severity.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    }


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register ZenStudent domain/infrastructure error handler."""

    @app.exception_handler(ZenStudentError)
    async def domain_error_handler(request: Request, exc: ZenStudentError):
        """Handle all ZenStudent domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"ZenStudentError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "category": exc.category.value,
                "resource_id": exc.context.resource_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for routing-level HTTP errors (404 route, 405 method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.info(
            f"HTTP {exc.status_code} on {request.url.path}",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_envelope(
                str(exc.detail), "HTTP_ERROR", "http", ErrorSeverity.WARNING,
            ),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(
                "An unexpected error occurred", "INTERNAL_ERROR", "internal",
                ErrorSeverity.CRITICAL,
            ),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    body = _envelope(
        "Invalid request data", "VALIDATION_ERROR", "validation",
        ErrorSeverity.ERROR,
    )
    body["error"]["details"] = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return body
