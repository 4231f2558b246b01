"""Address repository. Interface methods return application DTOs."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.address import AddressCreate, AddressResult, AddressUpdate
from app.infrastructure.persistence.models.address import Address
from app.infrastructure.persistence.repositories.base import (
    DEFAULT_OPERATION_TIMEOUT_SECONDS,
    BaseRepository,
)
from app.shared.utils.datetime import ensure_utc


def _address_to_result(a: Address) -> AddressResult:
    return AddressResult(
        id=a.id,
        account_id=a.account_id,
        name=a.name,
        address_line1=a.address_line1,
        address_line2=a.address_line2,
        city=a.city,
        state=a.state,
        postal_code=a.postal_code,
        country=a.country,
        verified=a.verified,
        created_at=ensure_utc(a.created_at),
        modified_at=ensure_utc(a.modified_at),
    )


class AddressRepository(BaseRepository[Address]):
    def __init__(
        self,
        db: AsyncSession,
        *,
        operation_timeout: float = DEFAULT_OPERATION_TIMEOUT_SECONDS,
    ) -> None:
        super().__init__(db, Address, operation_timeout=operation_timeout)

    async def get_by_id(self, address_id: int) -> AddressResult | None:
        address = await self.get_active(address_id)
        return _address_to_result(address) if address else None

    async def create_address(
        self, account_id: int, data: AddressCreate
    ) -> AddressResult:
        address = Address(
            account_id=account_id,
            name=data.name,
            address_line1=data.address_line1,
            address_line2=data.address_line2,
            city=data.city,
            state=data.state,
            postal_code=data.postal_code,
            country=data.country,
            verified=False,
            active=True,
        )
        created = await self.create(address)
        return _address_to_result(created)

    async def update_address(
        self, address_id: int, data: AddressUpdate
    ) -> AddressResult | None:
        address = await self.get_active(address_id)
        if not address:
            return None
        self._apply(
            address,
            {
                "name": data.name,
                "address_line1": data.address_line1,
                "address_line2": data.address_line2,
                "city": data.city,
                "state": data.state,
                "postal_code": data.postal_code,
                "country": data.country,
            },
        )
        updated = await self.save(address)
        return _address_to_result(updated)

    async def list_for_account(
        self, account_id: int, offset: int, limit: int
    ) -> list[AddressResult]:
        rows = await self.window(offset, limit, Address.account_id == account_id)
        return [_address_to_result(a) for a in rows]

    async def count_for_account(self, account_id: int) -> int:
        return await self.count(Address.account_id == account_id)
