"""Device repository. Interface methods return application DTOs."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.device import DeviceCreate, DeviceResult
from app.infrastructure.persistence.models.device import Device
from app.infrastructure.persistence.repositories.base import (
    DEFAULT_OPERATION_TIMEOUT_SECONDS,
    BaseRepository,
)
from app.shared.utils.datetime import ensure_utc


def _device_to_result(d: Device) -> DeviceResult:
    return DeviceResult(
        id=d.id,
        account_id=d.account_id,
        name=d.name,
        serial_number=d.serial_number,
        model_id=d.model_id,
        model_config=dict(d.model_config or {}),
        created_at=ensure_utc(d.created_at),
        modified_at=ensure_utc(d.modified_at),
    )


class DeviceRepository(BaseRepository[Device]):
    """Device repository. Serial numbers are globally unique, including inactive rows."""

    def __init__(
        self,
        db: AsyncSession,
        *,
        operation_timeout: float = DEFAULT_OPERATION_TIMEOUT_SECONDS,
    ) -> None:
        super().__init__(db, Device, operation_timeout=operation_timeout)

    async def get_by_id(self, device_id: int) -> DeviceResult | None:
        device = await self.get_active(device_id)
        return _device_to_result(device) if device else None

    async def get_by_serial_number_for_account(
        self, account_id: int, serial_number: str
    ) -> DeviceResult | None:
        device = await self.get_active_where(
            Device.account_id == account_id,
            Device.serial_number == serial_number,
        )
        return _device_to_result(device) if device else None

    async def serial_number_registered(self, serial_number: str) -> bool:
        result = await self._execute(
            select(func.count(Device.id)).where(Device.serial_number == serial_number)
        )
        return int(result.scalar_one()) > 0

    async def create_device(self, account_id: int, data: DeviceCreate) -> DeviceResult:
        device = Device(
            account_id=account_id,
            name=data.name,
            serial_number=data.serial_number,
            model_id=data.model_id,
            model_config=dict(data.model_config),
            active=True,
        )
        created = await self.create(device)
        return _device_to_result(created)

    async def update_device(
        self,
        device_id: int,
        name: str | None,
        model_config: dict[str, Any] | None,
    ) -> DeviceResult | None:
        device = await self.get_active(device_id)
        if not device:
            return None
        if name is not None:
            device.name = name
        if model_config is not None:
            # New dict so the JSON column is seen as changed
            device.model_config = dict(model_config)
        updated = await self.save(device)
        return _device_to_result(updated)

    async def list_for_account(
        self, account_id: int, offset: int, limit: int
    ) -> list[DeviceResult]:
        rows = await self.window(offset, limit, Device.account_id == account_id)
        return [_device_to_result(d) for d in rows]

    async def count_for_account(self, account_id: int) -> int:
        return await self.count(Device.account_id == account_id)
