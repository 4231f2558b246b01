"""DTOs for account use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AccountResult:
    """Account read-model. No password hash."""

    id: int
    email: str
    name: str
    verified: bool
    receives_updates: bool
    created_at: datetime
    modified_at: datetime


@dataclass(frozen=True)
class AccountCreate:
    """Sign-up input; password is plain text and hashed by the repository."""

    email: str
    password: str
    name: str
    receives_updates: bool = False


@dataclass(frozen=True)
class AccountUpdate:
    """Partial account update; None leaves a field unchanged."""

    name: str | None = None
    receives_updates: bool | None = None
    password: str | None = None
