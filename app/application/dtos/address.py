"""DTOs for address use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AddressResult:
    id: int
    account_id: int
    name: str
    address_line1: str
    address_line2: str | None
    city: str
    state: str | None
    postal_code: str
    country: str
    verified: bool
    created_at: datetime
    modified_at: datetime


@dataclass(frozen=True)
class AddressCreate:
    name: str
    address_line1: str
    city: str
    postal_code: str
    country: str
    address_line2: str | None = None
    state: str | None = None


@dataclass(frozen=True)
class AddressUpdate:
    """Partial address update; None leaves a field unchanged."""

    name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
