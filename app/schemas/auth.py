"""Auth API schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel


class LoginRequest(CamelModel):
    """Request body for login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginUser(CamelModel):
    """Account summary returned with a successful login."""

    id: int
    email: str
    name: str
    role: str
    created_at: datetime


class TokenPairResponse(CamelModel):
    """Access token, refresh token and the access token's expiry."""

    token: str
    refresh_token: str
    expires_at: datetime


class LoginResponse(TokenPairResponse):
    user: LoginUser
