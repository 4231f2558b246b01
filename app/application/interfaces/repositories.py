"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.

Every read honors the active flag: soft-deleted rows are never returned or
counted. List methods take a window (offset, limit); the matching count
method uses the same predicate without the window.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.account import (
        AccountCreate,
        AccountResult,
        AccountUpdate,
    )
    from app.application.dtos.address import (
        AddressCreate,
        AddressResult,
        AddressUpdate,
    )
    from app.application.dtos.device import DeviceCreate, DeviceResult
    from app.application.dtos.reference import (
        DeviceModelResult,
        SensorResult,
        UnitResult,
    )
    from app.application.dtos.user import UserCreate, UserResult, UserUpdate


# Account repository interface
class IAccountRepository(Protocol):
    """Protocol for account repository (DIP)."""

    async def get_by_id(self, account_id: int) -> AccountResult | None:
        """Return the active account with this id."""

    async def authenticate(self, email: str, password: str) -> AccountResult | None:
        """Return the active account when email and password match, else None."""

    async def create_account(self, data: AccountCreate) -> AccountResult:
        """Create an account; the password is hashed before storage."""

    async def update_account(
        self, account_id: int, data: AccountUpdate
    ) -> AccountResult | None:
        """Apply non-None fields and stamp modified_at. None if not found."""

    async def soft_delete(self, account_id: int) -> bool:
        """Mark the account inactive. False if it was not found."""

    async def list_accounts(
        self, account_id: int, offset: int, limit: int
    ) -> list[AccountResult]:
        """Return the window of accounts visible to account_id (only itself)."""

    async def count_accounts(self, account_id: int) -> int:
        """Count accounts visible to account_id."""


# Address repository interface
class IAddressRepository(Protocol):
    """Protocol for address repository (DIP)."""

    async def get_by_id(self, address_id: int) -> AddressResult | None:
        """Return the active address with this id (any account)."""

    async def create_address(
        self, account_id: int, data: AddressCreate
    ) -> AddressResult:
        """Create an address owned by account_id."""

    async def update_address(
        self, address_id: int, data: AddressUpdate
    ) -> AddressResult | None:
        """Apply non-None fields and stamp modified_at. None if not found."""

    async def soft_delete(self, address_id: int) -> bool:
        """Mark the address inactive. False if it was not found."""

    async def list_for_account(
        self, account_id: int, offset: int, limit: int
    ) -> list[AddressResult]:
        """Return a window of the account's addresses."""

    async def count_for_account(self, account_id: int) -> int:
        """Count the account's addresses."""


# User repository interface
class IUserRepository(Protocol):
    """Protocol for account user repository (DIP)."""

    async def get_by_id(self, user_id: int) -> UserResult | None:
        """Return the active user with this id (any account)."""

    async def get_by_email_for_account(
        self, account_id: int, email: str
    ) -> UserResult | None:
        """Return the account's active user with this email."""

    async def create_user(self, account_id: int, data: UserCreate) -> UserResult:
        """Create a user owned by account_id."""

    async def update_user(self, user_id: int, data: UserUpdate) -> UserResult | None:
        """Apply non-None fields and stamp modified_at. None if not found."""

    async def soft_delete(self, user_id: int) -> bool:
        """Mark the user inactive. False if it was not found."""

    async def list_for_account(
        self, account_id: int, offset: int, limit: int
    ) -> list[UserResult]:
        """Return a window of the account's users."""

    async def count_for_account(self, account_id: int) -> int:
        """Count the account's users."""


# Device repository interface
class IDeviceRepository(Protocol):
    """Protocol for device repository (DIP)."""

    async def get_by_id(self, device_id: int) -> DeviceResult | None:
        """Return the active device with this id (any account)."""

    async def get_by_serial_number_for_account(
        self, account_id: int, serial_number: str
    ) -> DeviceResult | None:
        """Return the account's active device with this serial number."""

    async def serial_number_registered(self, serial_number: str) -> bool:
        """True if any row (active or not, any account) uses this serial number."""

    async def create_device(self, account_id: int, data: DeviceCreate) -> DeviceResult:
        """Create a device owned by account_id."""

    async def update_device(
        self,
        device_id: int,
        name: str | None,
        model_config: dict[str, Any] | None,
    ) -> DeviceResult | None:
        """Apply name/model_config when given and stamp modified_at. None if not found."""

    async def soft_delete(self, device_id: int) -> bool:
        """Mark the device inactive. False if it was not found."""

    async def list_for_account(
        self, account_id: int, offset: int, limit: int
    ) -> list[DeviceResult]:
        """Return a window of the account's devices."""

    async def count_for_account(self, account_id: int) -> int:
        """Count the account's devices."""


# Reference data repository interface
class IReferenceRepository(Protocol):
    """Protocol for read-only reference data (units, device models, sensors)."""

    async def get_unit(self, unit_id: int) -> UnitResult | None: ...

    async def get_unit_by_name(self, name: str) -> UnitResult | None: ...

    async def list_units(self, offset: int, limit: int) -> list[UnitResult]: ...

    async def count_units(self) -> int: ...

    async def get_model(self, model_id: int) -> DeviceModelResult | None: ...

    async def list_models(self, offset: int, limit: int) -> list[DeviceModelResult]: ...

    async def count_models(self) -> int: ...

    async def get_sensor(self, sensor_id: int) -> SensorResult | None: ...

    async def get_sensor_by_code(self, code: str) -> SensorResult | None: ...

    async def list_sensors(self, offset: int, limit: int) -> list[SensorResult]: ...

    async def count_sensors(self) -> int: ...
