"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.account import Account
from app.infrastructure.persistence.models.address import Address
from app.infrastructure.persistence.models.device import Device
from app.infrastructure.persistence.models.mixins import (
    AccountScopedMixin,
    AccountScopedModel,
    ActiveFlagMixin,
    IdentityMixin,
    ReferenceModel,
    TimestampMixin,
)
from app.infrastructure.persistence.models.reference import DeviceModel, Sensor, Unit
from app.infrastructure.persistence.models.user import User

__all__ = [
    "Account",
    "AccountScopedMixin",
    "AccountScopedModel",
    "ActiveFlagMixin",
    "Address",
    "Device",
    "DeviceModel",
    "IdentityMixin",
    "ReferenceModel",
    "Sensor",
    "TimestampMixin",
    "Unit",
    "User",
]
