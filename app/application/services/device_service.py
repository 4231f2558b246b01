"""Device service: account devices plus global reference data.

Devices follow fetch, then ownership check, then mutate. Units, device models
and sensors are global and read-only; they have no ownership check.
"""

from __future__ import annotations

import logging

from app.application.dtos.device import DeviceCreate, DevicePatch, DeviceResult
from app.application.dtos.reference import (
    DeviceModelResult,
    SensorResult,
    UnitResult,
)
from app.application.interfaces.repositories import (
    IAccountRepository,
    IDeviceRepository,
    IReferenceRepository,
)
from app.application.services.account_scope import AccountScopedService
from app.domain.exceptions import ErrorKind, MismatchError, NotFoundError
from app.domain.value_objects.pagination import PageRequest, PageResult, build_page_result

logger = logging.getLogger(__name__)


class DeviceService(AccountScopedService):
    """Manage account devices and read reference data."""

    def __init__(
        self,
        account_repo: IAccountRepository,
        device_repo: IDeviceRepository,
        reference_repo: IReferenceRepository,
    ) -> None:
        super().__init__(account_repo)
        self.device_repo = device_repo
        self.reference_repo = reference_repo

    async def _owned_device(
        self, principal_account_id: int, account_id: int, device_id: int
    ) -> DeviceResult:
        await self.resolve_account(principal_account_id, account_id)
        device = await self.device_repo.get_by_id(device_id)
        if device is None:
            logger.info("device %s not found", device_id)
            raise NotFoundError(ErrorKind.NOT_FOUND_DEVICE_BY_ID, f"device_id={device_id}")
        self.ensure_owned(
            device.account_id,
            principal_account_id,
            ErrorKind.NOT_OWNED_DEVICE_BY_ID,
            "device",
            device_id,
        )
        return device

    async def create_device(
        self, principal_account_id: int, account_id: int, data: DeviceCreate
    ) -> DeviceResult:
        """Register a device to the caller's account.

        Raises:
            NotFoundError: Unknown model (NotFoundModelByID).
            MismatchError: Serial number already registered (DeviceAccountMismatch).
        """
        account = await self.resolve_account(principal_account_id, account_id)
        if await self.reference_repo.get_model(data.model_id) is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_MODEL_BY_ID, f"model_id={data.model_id}")
        if await self.device_repo.serial_number_registered(data.serial_number):
            logger.warning(
                "account %s tried to register serial %r which is already registered",
                account.id,
                data.serial_number,
            )
            raise MismatchError(ErrorKind.DEVICE_ACCOUNT_MISMATCH)
        device = await self.device_repo.create_device(account.id, data)
        logger.info("device %s created for account %s", device.id, account.id)
        return device

    async def fetch_device(
        self, principal_account_id: int, account_id: int, device_id: int
    ) -> DeviceResult:
        return await self._owned_device(principal_account_id, account_id, device_id)

    async def find_device_by_serial_number(
        self, principal_account_id: int, account_id: int, serial_number: str
    ) -> DeviceResult:
        """Lookup within the caller's account only."""
        account = await self.resolve_account(principal_account_id, account_id)
        device = await self.device_repo.get_by_serial_number_for_account(
            account.id, serial_number
        )
        if device is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_DEVICE_BY_SERIAL_NUMBER)
        return device

    async def update_device(
        self,
        principal_account_id: int,
        account_id: int,
        device_id: int,
        patch: DevicePatch,
    ) -> DeviceResult:
        """Apply name and model configuration to an owned device.

        Serial number and model are immutable: when the patch carries them they
        must equal the stored values.

        Raises:
            NotFoundError: Device missing or inactive.
            NotOwnedError: Device belongs to another account.
            MismatchError: SerialNumberMismatch or ModelMismatch.
        """
        device = await self._owned_device(principal_account_id, account_id, device_id)
        if patch.serial_number is not None and patch.serial_number != device.serial_number:
            raise MismatchError(ErrorKind.SERIAL_NUMBER_MISMATCH, f"device_id={device_id}")
        if patch.model_id is not None and patch.model_id != device.model_id:
            raise MismatchError(ErrorKind.MODEL_MISMATCH, f"device_id={device_id}")
        updated = await self.device_repo.update_device(
            device.id, name=patch.name, model_config=patch.model_config
        )
        if updated is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_DEVICE_BY_ID, f"device_id={device_id}")
        return updated

    async def delete_device(
        self, principal_account_id: int, account_id: int, device_id: int
    ) -> None:
        device = await self._owned_device(principal_account_id, account_id, device_id)
        if not await self.device_repo.soft_delete(device.id):
            raise NotFoundError(ErrorKind.NOT_FOUND_DEVICE_BY_ID, f"device_id={device_id}")
        logger.info("device %s deactivated", device.id)

    async def list_devices(
        self, principal_account_id: int, account_id: int, page: PageRequest
    ) -> PageResult[DeviceResult]:
        account = await self.resolve_account(principal_account_id, account_id)
        data = await self.device_repo.list_for_account(account.id, page.offset, page.limit)
        total = await self.device_repo.count_for_account(account.id)
        return build_page_result(data, page.page, page.page_size, total)

    # ---- Reference data ----

    async def fetch_sensor(self, sensor_id: int) -> SensorResult:
        sensor = await self.reference_repo.get_sensor(sensor_id)
        if sensor is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_SENSOR_BY_ID, f"sensor_id={sensor_id}")
        return sensor

    async def find_sensor_by_code(self, code: str) -> SensorResult:
        sensor = await self.reference_repo.get_sensor_by_code(code)
        if sensor is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_SENSOR_BY_CODE, f"code={code!r}")
        return sensor

    async def list_sensors(self, page: PageRequest) -> PageResult[SensorResult]:
        data = await self.reference_repo.list_sensors(page.offset, page.limit)
        total = await self.reference_repo.count_sensors()
        return build_page_result(data, page.page, page.page_size, total)

    async def fetch_unit(self, unit_id: int) -> UnitResult:
        unit = await self.reference_repo.get_unit(unit_id)
        if unit is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_UNIT_BY_ID, f"unit_id={unit_id}")
        return unit

    async def find_unit_by_name(self, name: str) -> UnitResult:
        unit = await self.reference_repo.get_unit_by_name(name)
        if unit is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_UNIT_BY_NAME, f"name={name!r}")
        return unit

    async def list_units(self, page: PageRequest) -> PageResult[UnitResult]:
        data = await self.reference_repo.list_units(page.offset, page.limit)
        total = await self.reference_repo.count_units()
        return build_page_result(data, page.page, page.page_size, total)

    async def fetch_model(self, model_id: int) -> DeviceModelResult:
        model = await self.reference_repo.get_model(model_id)
        if model is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_MODEL_BY_ID, f"model_id={model_id}")
        return model

    async def list_models(self, page: PageRequest) -> PageResult[DeviceModelResult]:
        data = await self.reference_repo.list_models(page.offset, page.limit)
        total = await self.reference_repo.count_models()
        return build_page_result(data, page.page, page.page_size, total)
