"""Exception handlers that turn domain errors into JSON responses.

Domain errors answer ``{"error": message}``; schema failures answer
``{"message": "Validation error", "issues": {field: message}}`` with 400.
"""

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from client_registry.application.schemas.client import field_errors
from client_registry.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    RecordValidationError,
)

logger = logging.getLogger(__name__)

DUPLICATE_TAX_ID_MESSAGE = "Tax id already registered"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def _validation_response(issues: dict[str, str]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation error", "issues": issues},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _validation_response(field_errors(exc.errors()))


async def record_validation_handler(request: Request, exc: RecordValidationError) -> JSONResponse:
    return _validation_response(exc.issues)


async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Client not found"},
    )


async def duplicate_handler(request: Request, exc: DuplicateEntityError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"error": DUPLICATE_TAX_ID_MESSAGE},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


async def catch_unhandled_errors(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    try:
        return await call_next(request)
    except Exception as exc:
        return await unhandled_error_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers.

    Call before adding ``CORSMiddleware`` so the generic 500 is produced
    inside it and still carries CORS headers.
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(RecordValidationError, record_validation_handler)
    app.add_exception_handler(EntityNotFoundError, not_found_handler)
    app.add_exception_handler(DuplicateEntityError, duplicate_handler)
    app.middleware("http")(catch_unhandled_errors)
