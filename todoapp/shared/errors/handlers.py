"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses. ``translate_error`` is the
single place that decides status codes and bodies; the FastAPI handlers
only log and wrap its result in a JSONResponse.

| Failure                         | Status | Body                          |
|---------------------------------|--------|-------------------------------|
| EntityNotFoundError             | 404    | {"error": message}            |
| InvalidArgumentError, ValueError| 400    | {"error": message}            |
| RequestValidationError          | 400    | {"errors": [per-field, ...]}  |
| anything else                   | 500    | {"error": generic message}    |

A pydantic ValidationError is a ValueError but still maps to 500: request
payloads are validated by FastAPI, so one raised later is a server fault.
"""

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as ModelValidationError

from todoapp.domain.tasks.errors import EntityNotFoundError, InvalidArgumentError
from todoapp.shared.security.headers import SECURE_HEADERS

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

INTERNAL_ERROR_PREFIX = "Internal server error"


@dataclass(frozen=True)
class ErrorTranslation:
    """Status code and JSON body produced for a failure."""

    status_code: int
    body: dict[str, Any]

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.body)


def _field_messages(exc: RequestValidationError) -> list[str]:
    """Return one "field: message" string per validation error, in order."""
    messages = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(location)
        message = error.get("msg", "invalid value")
        messages.append(f"{field}: {message}" if field else message)
    return messages


def _internal_message(exc: Exception) -> str:
    detail = str(exc).strip()
    return f"{INTERNAL_ERROR_PREFIX}: {detail or type(exc).__name__}"


def translate_error(exc: Exception) -> ErrorTranslation:
    """Classify a failure and build its status code and body.

    Args:
        exc: Any exception raised while handling a request.

    Returns:
        The translation for the first matching failure kind.
    """
    if isinstance(exc, EntityNotFoundError):
        return ErrorTranslation(HTTP_404, {"error": exc.message})
    if isinstance(exc, InvalidArgumentError):
        return ErrorTranslation(HTTP_400, {"error": exc.message})
    if isinstance(exc, RequestValidationError):
        return ErrorTranslation(HTTP_400, {"errors": _field_messages(exc)})
    # Model validation failing past the request boundary is a server bug.
    if isinstance(exc, ValueError) and not isinstance(exc, ModelValidationError):
        return ErrorTranslation(HTTP_400, {"error": str(exc) or type(exc).__name__})
    return ErrorTranslation(HTTP_500, {"error": _internal_message(exc)})


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(EntityNotFoundError)
    async def handle_not_found(
        _request: Request, exc: EntityNotFoundError
    ) -> JSONResponse:
        """Handle missing tasks and missing referenced entities."""
        logger.warning("Not found: %s", exc.message)
        return translate_error(exc).to_response()

    @app.exception_handler(InvalidArgumentError)
    async def handle_invalid_argument(
        _request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        """Handle business-rule violations."""
        logger.warning("Invalid argument: %s", exc.message)
        return translate_error(exc).to_response()

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle field-level payload validation failures."""
        translation = translate_error(exc)
        logger.warning("Request validation failed: %d field(s)", len(translation.body["errors"]))
        return translation.to_response()

    @app.exception_handler(ValueError)
    async def handle_value_error(_request: Request, exc: ValueError) -> JSONResponse:
        translation = translate_error(exc)
        if translation.status_code >= HTTP_500:
            logger.exception("Unexpected error: %s", type(exc).__name__)
        else:
            logger.warning("Bad request: %s", exc)
        return translation.to_response()

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes a traceback.

        Runs outside the middleware stack, so security headers are set here.
        """
        logger.exception("Unexpected error: %s", type(exc).__name__)
        response = translate_error(exc).to_response()
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers.setdefault(header_name, header_value)
        return response
