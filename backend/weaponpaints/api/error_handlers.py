"""Error Handlers — global exception handlers for the Weapon Paints API.

Invariants:
    - Every error response is {"error": <label>, "message": <text>}
    - WeaponPaintsError → its own http_status and label
    - RequestValidationError → 400 "Validation error", plus field-level details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (WeaponPaintsError), validation (Pydantic), catch-all (Exception)
    - 5xx domain errors logged at ERROR with the internal message; 4xx at WARNING
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from weaponpaints.core.errors import WeaponPaintsError

logger = logging.getLogger(__name__)

_REQUEST_LOCATIONS = ("body", "path", "query", "header")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Weapon Paints domain/infrastructure error handler."""

    @app.exception_handler(WeaponPaintsError)
    async def domain_error_handler(request: Request, exc: WeaponPaintsError):
        """Handle all Weapon Paints domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
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
        """Handle malformed request bodies and path parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred",
            },
        )


def _field_name(loc: tuple) -> str:
    parts = [str(p) for p in loc]
    if parts and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(parts) or "request"


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    details = [
        {
            "field": _field_name(e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return {
        "error": "Validation error",
        "message": "; ".join(f"{d['field']}: {d['message']}" for d in details),
        "details": details,
    }
