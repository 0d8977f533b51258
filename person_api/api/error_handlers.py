"""Error Handlers - global exception handlers for the Person API.

Invariants:
    - PersonApiError -> its fixed status, JSON string body (the error text)
    - RequestValidationError -> 400 with field-level error details
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Three-layer handler: taxonomy (PersonApiError), validation (Pydantic), catch-all (Exception)
    - This is the only place errors become responses; handlers just raise
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from person_api.core.errors import PersonApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_person_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def error_response(exc: PersonApiError) -> JSONResponse:
    """Total conversion of a taxonomy error into a response."""
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_person_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PersonApiError)
    async def person_api_error_handler(request: Request, exc: PersonApiError):
        """Handle all taxonomy errors raised by the store."""
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return error_response(exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
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
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
