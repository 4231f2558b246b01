"""Account API schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel


class AccountCreateRequest(CamelModel):
    """Request body for public sign-up."""

    email: EmailStr
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    receives_updates: bool = False


class AccountUpdateRequest(CamelModel):
    """Request body for updating an account (partial). Email cannot change."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    receives_updates: bool | None = None
    password: str | None = Field(default=None, min_length=1)


class AccountResponse(CamelModel):
    """Account response (no password hash)."""

    id: int
    email: str
    name: str
    verified: bool
    receives_updates: bool
    created_at: datetime
    modified_at: datetime
