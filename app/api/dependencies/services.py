"""Service dependencies (composition root).

Repositories are built here on the request's session; routes only see
services. Read routes use the reader pool, mutating routes the writer pool.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies.db import get_db, get_db_transactional, get_settings_dep
from app.application.services import CustomerService, DeviceService
from app.core.config import Settings
from app.infrastructure.persistence.repositories import (
    AccountRepository,
    AddressRepository,
    DeviceRepository,
    ReferenceRepository,
    UserRepository,
)


def _build_customer_service(db: AsyncSession, settings: Settings) -> CustomerService:
    timeout = settings.db_operation_timeout_seconds
    return CustomerService(
        account_repo=AccountRepository(db, operation_timeout=timeout),
        address_repo=AddressRepository(db, operation_timeout=timeout),
        user_repo=UserRepository(db, operation_timeout=timeout),
    )


def _build_device_service(db: AsyncSession, settings: Settings) -> DeviceService:
    timeout = settings.db_operation_timeout_seconds
    return DeviceService(
        account_repo=AccountRepository(db, operation_timeout=timeout),
        device_repo=DeviceRepository(db, operation_timeout=timeout),
        reference_repo=ReferenceRepository(db, operation_timeout=timeout),
    )


async def get_customer_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings_dep)],
) -> CustomerService:
    return _build_customer_service(db, settings)


async def get_customer_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    settings: Annotated[Settings, Depends(get_settings_dep)],
) -> CustomerService:
    return _build_customer_service(db, settings)


async def get_device_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings_dep)],
) -> DeviceService:
    return _build_device_service(db, settings)


async def get_device_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    settings: Annotated[Settings, Depends(get_settings_dep)],
) -> DeviceService:
    return _build_device_service(db, settings)
