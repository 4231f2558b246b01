"""Authentication gate.

Runs before routing on every request. Public routes (allow-list, compared after
stripping the API prefix) pass through untouched. Every other request must carry
"Authorization: Bearer <token>"; a valid access token becomes a Principal on
request.state.principal, anything else is answered immediately with the
taxonomy error body and the handler never runs.
"""

from __future__ import annotations

import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.core.config import Settings
from app.core.exception_handlers import build_error_response, request_id_of
from app.domain.exceptions import AuthenticationError, ErrorKind
from app.domain.value_objects.principal import Principal
from app.infrastructure.security.jwt import decode_token, principal_from_claims

logger = logging.getLogger(__name__)


def route_key(path: str, api_prefix: str) -> str:
    """Lowercased path without the API prefix or trailing slash."""
    key = path.lower()
    prefix = api_prefix.lower().rstrip("/")
    if prefix and (key == prefix or key.startswith(prefix + "/")):
        key = key[len(prefix):]
    return key.rstrip("/") or "/"


def is_public_route(path: str, settings: Settings) -> bool:
    return route_key(path, settings.api_prefix) in settings.normalized_public_routes()


def extract_bearer(authorization: str | None, prefix: str) -> str:
    """Return the token after prefix. Missing header or wrong prefix -> MissingToken."""
    if not authorization or not authorization.startswith(prefix):
        raise AuthenticationError(ErrorKind.MISSING_TOKEN)
    token = authorization[len(prefix):].strip()
    if not token:
        raise AuthenticationError(ErrorKind.MISSING_TOKEN)
    return token


def authenticate_request(request: Request, settings: Settings) -> Principal:
    """Validate the bearer credential and return the Principal it carries."""
    token = extract_bearer(request.headers.get("Authorization"), settings.token_prefix)
    return principal_from_claims(decode_token(token, settings))


def AuthenticationMiddleware(app: Callable, settings: Settings) -> Callable:
    """Reject unauthenticated requests to non-public routes before routing."""

    class _Middleware(BaseHTTPMiddleware):
        async def dispatch(self, request: Request, call_next: Callable) -> Response:
            if request.method == "OPTIONS" or is_public_route(
                request.url.path, settings
            ):
                return await call_next(request)
            try:
                request.state.principal = authenticate_request(request, settings)
            except AuthenticationError as exc:
                logger.info(
                    "Rejected %s %s: %s", request.method, request.url.path, exc.kind.value
                )
                return build_error_response(
                    request_id_of(request), exc, settings.internal_error_status
                )
            return await call_next(request)

    return _Middleware(app)
