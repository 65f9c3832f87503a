"""Error Handlers - map registry and request errors onto the JSON error envelope.

Invariants:
    - RegistryError responds with its own http_status and to_response() body
    - Malformed request bodies respond 400 VALIDATION_ERROR with per-field details
    - Anything else responds 500 INTERNAL_ERROR without internal details

Design Decisions:
    - Rejections (4xx) log at WARNING, infrastructure failures (5xx) at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import RegistryError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def _envelope(code: str, message: str, category: ErrorCategory, **extra) -> dict:
    return {"error": {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": ErrorSeverity.ERROR.value,
        **extra,
    }}


def register_error_handlers(app: FastAPI) -> None:
    """Install the registry's exception handlers on app."""

    @app.exception_handler(RegistryError)
    async def registry_error_handler(request: Request, exc: RegistryError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level, f"{exc.code} on {request.url.path}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError,
    ):
        details = [
            {"field": ".".join(str(loc) for loc in e["loc"]), "message": e["msg"]}
            for e in exc.errors()
        ]
        logger.warning(
            f"Malformed request on {request.url.path}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_envelope(
                "VALIDATION_ERROR", "Invalid request data",
                ErrorCategory.VALIDATION, details=details,
            ),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(
                "INTERNAL_ERROR", "An unexpected error occurred",
                ErrorCategory.INTERNAL,
            ),
        )
