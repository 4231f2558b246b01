"""Device API schemas.

The device's model configuration travels as "modelConfig" on the wire; in
Python the field is named config because model_config is reserved by pydantic.
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from app.application.dtos.device import DeviceResult
from app.schemas.common import CamelModel


class DeviceCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    serial_number: str = Field(..., min_length=1, max_length=128)
    model_id: int = Field(..., gt=0)
    config: dict[str, Any] = Field(default_factory=dict, alias="modelConfig")


class DeviceUpdateRequest(CamelModel):
    """Name and model configuration change; serial number and model must match if sent."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    config: dict[str, Any] | None = Field(default=None, alias="modelConfig")
    serial_number: str | None = Field(default=None, min_length=1, max_length=128)
    model_id: int | None = Field(default=None, gt=0)


class DeviceResponse(CamelModel):
    id: int
    account_id: int
    name: str
    serial_number: str
    model_id: int
    config: dict[str, Any] = Field(alias="modelConfig")
    created_at: datetime
    modified_at: datetime

    @classmethod
    def from_result(cls, device: DeviceResult) -> "DeviceResponse":
        return cls(
            id=device.id,
            account_id=device.account_id,
            name=device.name,
            serial_number=device.serial_number,
            model_id=device.model_id,
            config=device.model_config,
            created_at=device.created_at,
            modified_at=device.modified_at,
        )
