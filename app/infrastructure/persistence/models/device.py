"""Device ORM model."""

from typing import Any

from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AccountScopedModel, IdType


class Device(AccountScopedModel, Base):
    """Device registered to an account. Serial numbers are unique across all rows."""

    __tablename__ = "device"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    serial_number: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    model_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("device_model.id"), nullable=False, index=True
    )
    model_config: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=dict
    )
