"""Account user repository. Interface methods return application DTOs."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserCreate, UserResult, UserUpdate
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import (
    DEFAULT_OPERATION_TIMEOUT_SECONDS,
    BaseRepository,
)
from app.shared.utils.datetime import ensure_utc


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(
        id=u.id,
        account_id=u.account_id,
        email=u.email,
        cell=u.cell,
        first_name=u.first_name,
        last_name=u.last_name,
        verified=u.verified,
        receives_updates=u.receives_updates,
        created_at=ensure_utc(u.created_at),
        modified_at=ensure_utc(u.modified_at),
    )


class UserRepository(BaseRepository[User]):
    """User repository scoped by account_id for lists and email lookups."""

    def __init__(
        self,
        db: AsyncSession,
        *,
        operation_timeout: float = DEFAULT_OPERATION_TIMEOUT_SECONDS,
    ) -> None:
        super().__init__(db, User, operation_timeout=operation_timeout)

    async def get_by_id(self, user_id: int) -> UserResult | None:
        user = await self.get_active(user_id)
        return _user_to_result(user) if user else None

    async def get_by_email_for_account(
        self, account_id: int, email: str
    ) -> UserResult | None:
        user = await self.get_active_where(
            User.account_id == account_id,
            func.lower(User.email) == email.strip().lower(),
        )
        return _user_to_result(user) if user else None

    async def create_user(self, account_id: int, data: UserCreate) -> UserResult:
        user = User(
            account_id=account_id,
            email=data.email.strip(),
            cell=data.cell,
            first_name=data.first_name,
            last_name=data.last_name,
            verified=data.verified,
            receives_updates=data.receives_updates,
            active=True,
        )
        created = await self.create(user)
        return _user_to_result(created)

    async def update_user(self, user_id: int, data: UserUpdate) -> UserResult | None:
        user = await self.get_active(user_id)
        if not user:
            return None
        self._apply(
            user,
            {
                "email": data.email.strip() if data.email else None,
                "cell": data.cell,
                "first_name": data.first_name,
                "last_name": data.last_name,
                "verified": data.verified,
                "receives_updates": data.receives_updates,
            },
        )
        updated = await self.save(user)
        return _user_to_result(updated)

    async def list_for_account(
        self, account_id: int, offset: int, limit: int
    ) -> list[UserResult]:
        rows = await self.window(offset, limit, User.account_id == account_id)
        return [_user_to_result(u) for u in rows]

    async def count_for_account(self, account_id: int) -> int:
        return await self.count(User.account_id == account_id)
