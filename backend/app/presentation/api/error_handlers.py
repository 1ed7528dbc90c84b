"""Maps domain exceptions to HTTP responses.

Every error body has the shape ``{"detail": ..., "success": false}``;
validation failures add ``errors`` with one message per field.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.application.schemas import ErrorResponse
from app.domain.exceptions import (
    EntityNotFoundError,
    ServiceProviderError,
    TaskTimeoutError,
    TransientServiceError,
    UnsupportedInputError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_CODES: dict[type[Exception], int] = {
    EntityNotFoundError: 404,
    ValidationError: 422,
    UnsupportedInputError: 400,
    TransientServiceError: 503,
    ServiceProviderError: 502,
    TaskTimeoutError: 504,
}


async def _handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    status_code = next(
        (code for exc_type, code in _STATUS_CODES.items() if isinstance(exc, exc_type)),
        500,
    )
    if status_code >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)

    body = ErrorResponse(
        detail=str(exc),
        errors=exc.errors if isinstance(exc, ValidationError) else None,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    for exc_type in _STATUS_CODES:
        app.add_exception_handler(exc_type, _handle_domain_error)
