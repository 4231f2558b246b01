"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IAccountRepository,
    IAddressRepository,
    IDeviceRepository,
    IReferenceRepository,
    IUserRepository,
)

__all__ = [
    "IAccountRepository",
    "IAddressRepository",
    "IDeviceRepository",
    "IReferenceRepository",
    "IUserRepository",
]
