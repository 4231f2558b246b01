"""Application services: orchestrate repositories, ownership and the error taxonomy."""

from app.application.services.account_scope import AccountScopedService
from app.application.services.customer_service import CustomerService
from app.application.services.device_service import DeviceService

__all__ = [
    "AccountScopedService",
    "CustomerService",
    "DeviceService",
]
