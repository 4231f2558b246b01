"""DTOs for device use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class DeviceResult:
    """Device read-model."""

    id: int
    account_id: int
    name: str
    serial_number: str
    model_id: int
    model_config: dict[str, Any]
    created_at: datetime
    modified_at: datetime


@dataclass(frozen=True)
class DeviceCreate:
    name: str
    serial_number: str
    model_id: int
    model_config: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DevicePatch:
    """Device update input.

    Only name and model_config are applied. serial_number and model_id, when
    supplied, must match the stored device (they cannot be changed).
    """

    name: str | None = None
    model_config: dict[str, Any] | None = None
    serial_number: str | None = None
    model_id: int | None = None
