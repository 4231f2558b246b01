"""Account repository with password helpers. Interface methods return application DTOs."""

from __future__ import annotations

import asyncio

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.account import AccountCreate, AccountResult, AccountUpdate
from app.infrastructure.persistence.models.account import Account
from app.infrastructure.persistence.repositories.base import (
    DEFAULT_OPERATION_TIMEOUT_SECONDS,
    BaseRepository,
)
from app.infrastructure.security.password import get_password_hash, verify_password
from app.shared.utils.datetime import ensure_utc

def _account_to_result(a: Account) -> AccountResult:
    """Map ORM Account to AccountResult (no password hash)."""
    return AccountResult(
        id=a.id,
        email=a.email,
        name=a.name,
        verified=a.verified,
        receives_updates=a.receives_updates,
        created_at=ensure_utc(a.created_at),
        modified_at=ensure_utc(a.modified_at),
    )


def normalize_email(email: str) -> str:
    """Lowercased form used only for matching; stored emails keep their case."""
    return email.strip().lower()


class AccountRepository(BaseRepository[Account]):
    """Account repository. authenticate, create_account, update_account, soft_delete."""

    # bcrypt hash compared against when the email is unknown, so a miss costs
    # as much as a wrong password. Built once per process on first use.
    _dummy_hash: str | None = None

    def __init__(
        self,
        db: AsyncSession,
        *,
        operation_timeout: float = DEFAULT_OPERATION_TIMEOUT_SECONDS,
    ) -> None:
        super().__init__(db, Account, operation_timeout=operation_timeout)

    @classmethod
    async def _get_dummy_hash(cls) -> str:
        if cls._dummy_hash is None:
            cls._dummy_hash = await asyncio.to_thread(
                get_password_hash, "not-a-real-password"
            )
        return cls._dummy_hash

    async def get_by_id(self, account_id: int) -> AccountResult | None:
        account = await self.get_active(account_id)
        return _account_to_result(account) if account else None

    async def get_by_email(self, email: str) -> Account | None:
        return await self.get_active_where(
            func.lower(Account.email) == normalize_email(email)
        )

    async def authenticate(self, email: str, password: str) -> AccountResult | None:
        account = await self.get_by_email(email)
        if not account:
            dummy_hash = await self._get_dummy_hash()
            await asyncio.to_thread(verify_password, password, dummy_hash)
            return None
        if not await asyncio.to_thread(verify_password, password, account.password_hash):
            return None
        return _account_to_result(account)

    async def create_account(self, data: AccountCreate) -> AccountResult:
        """Create account; IntegrityError (duplicate email) propagates unchanged."""
        hashed = await asyncio.to_thread(get_password_hash, data.password)
        account = Account(
            email=data.email.strip(),
            password_hash=hashed,
            name=data.name,
            receives_updates=data.receives_updates,
            verified=False,
            active=True,
        )
        created = await self.create(account)
        return _account_to_result(created)

    async def update_account(
        self, account_id: int, data: AccountUpdate
    ) -> AccountResult | None:
        account = await self.get_active(account_id)
        if not account:
            return None
        self._apply(
            account,
            {"name": data.name, "receives_updates": data.receives_updates},
        )
        if data.password is not None:
            account.password_hash = await asyncio.to_thread(
                get_password_hash, data.password
            )
        updated = await self.save(account)
        return _account_to_result(updated)

    async def list_accounts(
        self, account_id: int, offset: int, limit: int
    ) -> list[AccountResult]:
        rows = await self.window(offset, limit, Account.id == account_id)
        return [_account_to_result(a) for a in rows]

    async def count_accounts(self, account_id: int) -> int:
        return await self.count(Account.id == account_id)
