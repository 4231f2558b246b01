"""Application DTOs: frozen dataclasses passed between layers (no ORM types)."""

from app.application.dtos.account import AccountCreate, AccountResult, AccountUpdate
from app.application.dtos.address import AddressCreate, AddressResult, AddressUpdate
from app.application.dtos.device import DeviceCreate, DevicePatch, DeviceResult
from app.application.dtos.reference import (
    DeviceModelResult,
    SensorResult,
    UnitResult,
)
from app.application.dtos.user import UserCreate, UserResult, UserUpdate

__all__ = [
    "AccountCreate",
    "AccountResult",
    "AccountUpdate",
    "AddressCreate",
    "AddressResult",
    "AddressUpdate",
    "DeviceCreate",
    "DeviceModelResult",
    "DevicePatch",
    "DeviceResult",
    "SensorResult",
    "UnitResult",
    "UserCreate",
    "UserResult",
    "UserUpdate",
]
