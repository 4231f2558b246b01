"""Account user API schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel


class UserCreateRequest(CamelModel):
    """Request body for adding a user to an account."""

    email: EmailStr
    first_name: str = Field(..., min_length=1, max_length=128)
    last_name: str = Field(..., min_length=1, max_length=128)
    cell: str = Field(default="", max_length=32)
    verified: bool = False
    receives_updates: bool = False


class UserUpdateRequest(CamelModel):
    """Request body for updating a user (partial)."""

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, min_length=1, max_length=128)
    last_name: str | None = Field(default=None, min_length=1, max_length=128)
    cell: str | None = Field(default=None, max_length=32)
    verified: bool | None = None
    receives_updates: bool | None = None


class UserResponse(CamelModel):
    id: int
    account_id: int
    email: str
    cell: str
    first_name: str
    last_name: str
    verified: bool
    receives_updates: bool
    created_at: datetime
    modified_at: datetime
