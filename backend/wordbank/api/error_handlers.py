"""Error Handlers — global exception handlers for the Wordbank API.

Invariants:
    - RequestValidationError → 400 validation envelope with field-level details
    - Routing 404 → not_found envelope (same shape as service failures)
    - Other routing errors (405, ...) → error envelope with the original
      status, a fixed message and the original headers (Allow)
    - Exception (catch-all) → 500 internal envelope; never leaks internal details

Design Decisions:
    - Three-layer handler: validation (Pydantic), HTTP (routing), catch-all (Exception)
    - All bodies built by core.envelope, so the error shape has one definition
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from wordbank.api.responses import to_response
from wordbank.core.envelope import from_failure, from_http_status
from wordbank.core.errors import INTERNAL_FAILURE, Failure, FailureKind, validation_failure
from wordbank.schemas.validate import field_errors

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors raised by FastAPI itself."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return to_response(from_failure(
            validation_failure("Invalid request data", field_errors(exc.errors())),
        ))


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Routing errors use the failure envelope; status and headers are kept."""
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return to_response(from_failure(
                Failure(FailureKind.NOT_FOUND, "Not found"),
            ))
        response = to_response(from_http_status(exc.status_code))
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return to_response(from_failure(INTERNAL_FAILURE))
