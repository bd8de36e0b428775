"""Mapping of domain errors to HTTP responses.

Every domain error becomes a JSON body of the form
{"kind": "<ErrorClass>", "detail": "<message>", "field": <field or null>}.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from lingo.domain.error import (
    DomainError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    StorageError,
    ValidationError,
)

# Checked in order; the first matching class wins
ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidStateError, status.HTTP_409_CONFLICT),
    (StorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_for(exc: DomainError) -> int:
    """HTTP status code for a domain error (500 if unmapped)."""
    for error_class, status_code in ERROR_STATUS:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as JSON.

    Args:
        request: The request that raised
        exc: The domain error

    Returns:
        JSON response with kind, detail and field
    """
    status_code = status_for(exc)

    log = logfire.error if status_code >= 500 else logfire.info
    log(
        "Request failed",
        kind=type(exc).__name__,
        detail=str(exc),
        status_code=status_code,
        path=request.url.path,
        method=request.method,
    )

    return JSONResponse(
        status_code=status_code,
        content={
            "kind": type(exc).__name__,
            "detail": str(exc),
            "field": getattr(exc, "field", None),
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the application."""
    app.add_exception_handler(DomainError, handle_domain_error)
