"""Reference data ORM models: units, device models, sensors.

Global (not account-scoped) and read-only through the API.
"""

from typing import Any

from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import IdType, ReferenceModel


class Unit(ReferenceModel, Base):
    """Measurement unit (e.g. Celsius, °C). Table: unit."""

    __tablename__ = "unit"

    name: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    symbol: Mapped[str] = mapped_column(String(32), nullable=False)


class DeviceModel(ReferenceModel, Base):
    """Device hardware model. Table: device_model."""

    __tablename__ = "device_model"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)


class Sensor(ReferenceModel, Base):
    """Sensor type with its unit and configuration schema. Table: sensor."""

    __tablename__ = "sensor"

    unit_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("unit.id"), nullable=False, index=True
    )
    code: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    config_required: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=dict
    )
    default_config: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=dict
    )
