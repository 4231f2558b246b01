"""DTOs for account user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserResult:
    """User read-model."""

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


@dataclass(frozen=True)
class UserCreate:
    email: str
    first_name: str
    last_name: str
    cell: str = ""
    verified: bool = False
    receives_updates: bool = False


@dataclass(frozen=True)
class UserUpdate:
    """Partial user update; None leaves a field unchanged."""

    email: str | None = None
    cell: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    verified: bool | None = None
    receives_updates: bool | None = None
