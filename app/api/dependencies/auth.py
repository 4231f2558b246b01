"""Principal and refresh-token dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.api.dependencies.db import get_settings_dep
from app.core.config import Settings
from app.domain.enums import TokenType
from app.domain.exceptions import AuthenticationError, ErrorKind
from app.domain.value_objects.principal import Principal
from app.infrastructure.security.jwt import TokenClaims, decode_token


def get_principal(request: Request) -> Principal:
    """Principal attached by AuthenticationMiddleware.

    Only reachable on protected routes, where the middleware has already
    rejected requests without a valid token.
    """
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise AuthenticationError(ErrorKind.MISSING_TOKEN, "no principal on request")
    return principal


def get_refresh_claims(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings_dep)],
) -> TokenClaims:
    """Validate the refresh token sent in the refresh header (default X-Refresh-Token)."""
    token = (request.headers.get(settings.refresh_token_header) or "").strip()
    if not token:
        raise AuthenticationError(ErrorKind.MISSING_TOKEN, settings.refresh_token_header)
    return decode_token(token, settings, expected_type=TokenType.REFRESH)


CurrentPrincipal = Annotated[Principal, Depends(get_principal)]
