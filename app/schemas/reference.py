"""Reference data API schemas (units, device models, sensors)."""

from typing import Any

from app.schemas.common import CamelModel


class UnitResponse(CamelModel):
    id: int
    name: str
    symbol: str


class DeviceModelResponse(CamelModel):
    id: int
    name: str
    code: str


class SensorResponse(CamelModel):
    id: int
    unit_id: int
    code: str
    name: str
    config_required: dict[str, Any]
    default_config: dict[str, Any]
