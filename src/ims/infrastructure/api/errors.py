"""Exception -> HTTP response mapping. Every error body is ``{"error": message}``."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ims.domain.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    PersistenceError,
    ReferenceNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific class first; the first isinstance match wins.
ERROR_STATUS_CODES: list[tuple[type[DomainException], int]] = [
    (ReferenceNotFoundError, 400),
    (EntityNotFoundError, 404),
    (ValidationError, 400),
    (ConflictError, 400),
    (PersistenceError, 500),
]


def status_for(exc: DomainException) -> int:
    for exc_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 500


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return _error(status_code, str(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        # Drop the leading "body"/"query" segment.
        location = ".".join(str(part) for part in err.get("loc", ())[1:])
        problems.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return _error(400, "; ".join(problems) or "Invalid request")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
