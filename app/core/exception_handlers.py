"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Every error response has the
same body: {"requestId", "code", "error"}. Domain errors take their code,
description and status from the taxonomy; anything unrecognized gets the
fallback triple (ERR_INTERNAL_EXCEPTION, settings.internal_error_status) and
its cause is logged, never returned.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import (
    FALLBACK_CODE,
    FALLBACK_DESCRIPTION,
    NOT_OWNED_AS_NOT_FOUND,
    DomainError,
    ErrorKind,
    NotOwnedError,
    error_code,
    error_description,
)
from app.shared.context import get_request_id

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_STATUS = 400

# Map error kind to HTTP status; NotOwned kinds resolve through their NotFound kind
_KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.BAD_PAGE_SIZE: 400,
    ErrorKind.BAD_PAGE_INDEX: 400,
    ErrorKind.BAD_PAYLOAD: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.INVALID_TOKEN: 401,
    ErrorKind.EXPIRED_TOKEN: 401,
    ErrorKind.MALFORMED_TOKEN: 401,
    ErrorKind.MISSING_TOKEN: 401,
    ErrorKind.INVALID_CLAIMS: 401,
    ErrorKind.NOT_FOUND_ACCOUNT_BY_ID: 404,
    ErrorKind.NOT_FOUND_ACCOUNT_BY_EMAIL: 404,
    ErrorKind.NOT_FOUND_USER_BY_ID: 404,
    ErrorKind.NOT_FOUND_USER_BY_EMAIL: 404,
    ErrorKind.NOT_FOUND_ADDRESS_BY_ID: 404,
    ErrorKind.NOT_FOUND_ADDRESS_BY_ACCOUNT_ID: 404,
    ErrorKind.NOT_FOUND_DEVICE_BY_ID: 404,
    ErrorKind.NOT_FOUND_DEVICE_BY_SERIAL_NUMBER: 404,
    ErrorKind.NOT_FOUND_MODEL_BY_ID: 404,
    ErrorKind.NOT_FOUND_UNIT_BY_ID: 404,
    ErrorKind.NOT_FOUND_UNIT_BY_NAME: 404,
    ErrorKind.NOT_FOUND_SENSOR_BY_ID: 404,
    ErrorKind.NOT_FOUND_SENSOR_BY_CODE: 404,
    ErrorKind.SERIAL_NUMBER_MISMATCH: 400,
    ErrorKind.MODEL_MISMATCH: 400,
    ErrorKind.DEVICE_ACCOUNT_MISMATCH: 400,
}


def error_status(
    kind: ErrorKind | None, fallback_status: int = DEFAULT_FALLBACK_STATUS
) -> int:
    """Return the HTTP status for kind, or fallback_status when unmapped."""
    if kind is None:
        return fallback_status
    kind = NOT_OWNED_AS_NOT_FOUND.get(kind, kind)
    return _KIND_STATUS.get(kind, fallback_status)


def resolve_error(
    exc: BaseException, fallback_status: int = DEFAULT_FALLBACK_STATUS
) -> tuple[str, str, int]:
    """Return (code, description, status) for any exception. Never fails."""
    if isinstance(exc, DomainError):
        return (
            error_code(exc.kind),
            error_description(exc.kind),
            error_status(exc.kind, fallback_status),
        )
    return FALLBACK_CODE, FALLBACK_DESCRIPTION, fallback_status


def error_body(request_id: str, code: str, description: str) -> dict[str, str]:
    return {"requestId": request_id, "code": code, "error": description}


def build_error_response(
    request_id: str,
    exc: BaseException,
    fallback_status: int = DEFAULT_FALLBACK_STATUS,
) -> JSONResponse:
    """JSON error response for exc in the uniform envelope."""
    code, description, status = resolve_error(exc, fallback_status)
    return JSONResponse(
        status_code=status,
        content=error_body(request_id, code, description),
    )


def request_id_of(request: Request) -> str:
    """Request id set by RequestIDMiddleware (state first, then context)."""
    return getattr(request.state, "request_id", None) or get_request_id()


def _fallback_status(request: Request) -> int:
    context = getattr(request.app.state, "context", None)
    if context is None:
        return DEFAULT_FALLBACK_STATUS
    return context.settings.internal_error_status


def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map a DomainError through the taxonomy."""
    if not isinstance(exc, NotOwnedError):
        logger.info(
            "%s %s -> %s (%s)",
            request.method,
            request.url.path,
            exc.kind.value,
            exc.detail or "-",
        )
    return build_error_response(request_id_of(request), exc, _fallback_status(request))


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return BadPayload (400); field errors go to the log only."""
    logger.info("Request validation failed: %s", exc.errors())
    return JSONResponse(
        status_code=error_status(ErrorKind.BAD_PAYLOAD),
        content=error_body(
            request_id_of(request),
            error_code(ErrorKind.BAD_PAYLOAD),
            error_description(ErrorKind.BAD_PAYLOAD),
        ),
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Keep the framework status (e.g. 404 unknown route, 405) in the uniform envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(request_id_of(request), FALLBACK_CODE, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def _fallback_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything outside the taxonomy: log with traceback, answer with the fallback."""
    logger.exception("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)
    return build_error_response(request_id_of(request), exc, _fallback_status(request))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Persistence failures and operation
    timeouts are registered by type so they are answered inside the
    exception middleware. Other exceptions from routes are answered by
    UnhandledErrorMiddleware; the Exception handler covers whatever escapes
    the outer middleware.
    """
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, _fallback_exception_handler)
    app.add_exception_handler(TimeoutError, _fallback_exception_handler)
    app.add_exception_handler(Exception, _fallback_exception_handler)
