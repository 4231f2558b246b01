"""Auth API: login, token refresh and logout.

All three are public routes (the gate lets them through); refresh and logout
validate the refresh token themselves. Tokens are stateless, so logout only
confirms the refresh token is valid.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import (
    get_customer_service,
    get_refresh_claims,
    get_settings_dep,
)
from app.application.services import CustomerService
from app.core.config import Settings
from app.domain.enums import Role
from app.infrastructure.security.jwt import (
    TokenClaims,
    create_access_token,
    create_refresh_token,
)
from app.schemas.auth import LoginRequest, LoginResponse, LoginUser, TokenPairResponse
from app.schemas.common import ERROR_RESPONSES, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(responses=ERROR_RESPONSES)


def _token_pair(settings: Settings, account_id: int, role: str) -> TokenPairResponse:
    access = create_access_token(settings, account_id, role)
    refresh = create_refresh_token(settings, account_id, role)
    return TokenPairResponse(
        token=access.token,
        refresh_token=refresh.token,
        expires_at=access.expires_at,
    )


@router.post("/login", response_model=LoginResponse, status_code=201)
async def login(
    body: LoginRequest,
    settings: Annotated[Settings, Depends(get_settings_dep)],
    service: CustomerService = Depends(get_customer_service),
):
    """Exchange email and password for an access and a refresh token."""
    account = await service.authenticate(body.email, body.password)
    role = Role.ADMIN.value
    pair = _token_pair(settings, account.id, role)
    logger.info("account %s logged in", account.id)
    return LoginResponse(
        token=pair.token,
        refresh_token=pair.refresh_token,
        expires_at=pair.expires_at,
        user=LoginUser(
            id=account.id,
            email=account.email,
            name=account.name,
            role=role,
            created_at=account.created_at,
        ),
    )


@router.post("/refresh", response_model=TokenPairResponse, status_code=201)
async def refresh(
    claims: Annotated[TokenClaims, Depends(get_refresh_claims)],
    settings: Annotated[Settings, Depends(get_settings_dep)],
    service: CustomerService = Depends(get_customer_service),
):
    """Issue a new token pair from a valid refresh token (X-Refresh-Token header)."""
    account = await service.ensure_active_account(claims.account_id)
    return _token_pair(settings, account.id, claims.role)


@router.post("/logout", response_model=MessageResponse)
async def logout(claims: Annotated[TokenClaims, Depends(get_refresh_claims)]):
    """Acknowledge logout. Tokens are not stored, so nothing is revoked server-side."""
    logger.info("account %s logged out", claims.account_id)
    return MessageResponse(message="Successfully logged out")
