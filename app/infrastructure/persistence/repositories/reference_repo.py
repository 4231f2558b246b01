"""Reference data repository (units, device models, sensors). Read-only."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.reference import (
    DeviceModelResult,
    SensorResult,
    UnitResult,
)
from app.infrastructure.persistence.models.reference import DeviceModel, Sensor, Unit
from app.infrastructure.persistence.repositories.base import (
    DEFAULT_OPERATION_TIMEOUT_SECONDS,
    BaseRepository,
)


def _unit_to_result(u: Unit) -> UnitResult:
    return UnitResult(id=u.id, name=u.name, symbol=u.symbol)


def _model_to_result(m: DeviceModel) -> DeviceModelResult:
    return DeviceModelResult(id=m.id, name=m.name, code=m.code)


def _sensor_to_result(s: Sensor) -> SensorResult:
    return SensorResult(
        id=s.id,
        unit_id=s.unit_id,
        code=s.code,
        name=s.name,
        config_required=dict(s.config_required or {}),
        default_config=dict(s.default_config or {}),
    )


class ReferenceRepository:
    """Facade over one BaseRepository per reference table (shared session)."""

    def __init__(
        self,
        db: AsyncSession,
        *,
        operation_timeout: float = DEFAULT_OPERATION_TIMEOUT_SECONDS,
    ) -> None:
        self.units = BaseRepository(db, Unit, operation_timeout=operation_timeout)
        self.models = BaseRepository(db, DeviceModel, operation_timeout=operation_timeout)
        self.sensors = BaseRepository(db, Sensor, operation_timeout=operation_timeout)

    # Units
    async def get_unit(self, unit_id: int) -> UnitResult | None:
        unit = await self.units.get_active(unit_id)
        return _unit_to_result(unit) if unit else None

    async def get_unit_by_name(self, name: str) -> UnitResult | None:
        unit = await self.units.get_active_where(
            func.lower(Unit.name) == name.strip().lower()
        )
        return _unit_to_result(unit) if unit else None

    async def list_units(self, offset: int, limit: int) -> list[UnitResult]:
        return [_unit_to_result(u) for u in await self.units.window(offset, limit)]

    async def count_units(self) -> int:
        return await self.units.count()

    # Device models
    async def get_model(self, model_id: int) -> DeviceModelResult | None:
        model = await self.models.get_active(model_id)
        return _model_to_result(model) if model else None

    async def list_models(self, offset: int, limit: int) -> list[DeviceModelResult]:
        return [_model_to_result(m) for m in await self.models.window(offset, limit)]

    async def count_models(self) -> int:
        return await self.models.count()

    # Sensors
    async def get_sensor(self, sensor_id: int) -> SensorResult | None:
        sensor = await self.sensors.get_active(sensor_id)
        return _sensor_to_result(sensor) if sensor else None

    async def get_sensor_by_code(self, code: str) -> SensorResult | None:
        sensor = await self.sensors.get_active_where(Sensor.code == code.strip())
        return _sensor_to_result(sensor) if sensor else None

    async def list_sensors(self, offset: int, limit: int) -> list[SensorResult]:
        return [_sensor_to_result(s) for s in await self.sensors.window(offset, limit)]

    async def count_sensors(self) -> int:
        return await self.sensors.count()
