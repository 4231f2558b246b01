"""DTOs for reference data (units, device models, sensors)."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UnitResult:
    id: int
    name: str
    symbol: str


@dataclass(frozen=True)
class DeviceModelResult:
    id: int
    name: str
    code: str


@dataclass(frozen=True)
class SensorResult:
    id: int
    unit_id: int
    code: str
    name: str
    config_required: dict[str, Any]
    default_config: dict[str, Any]
