"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.account_repo import AccountRepository
from app.infrastructure.persistence.repositories.address_repo import AddressRepository
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.device_repo import DeviceRepository
from app.infrastructure.persistence.repositories.reference_repo import (
    ReferenceRepository,
)
from app.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "AccountRepository",
    "AddressRepository",
    "BaseRepository",
    "DeviceRepository",
    "ReferenceRepository",
    "UserRepository",
]
