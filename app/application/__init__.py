"""Application layer: DTOs, repository interfaces, services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from app.application.services import CustomerService, DeviceService

__all__ = [
    "CustomerService",
    "DeviceService",
]
