"""Base repository: bounded execution, active-row lookups, window and count.

Every statement runs under asyncio.wait_for with the configured per-operation
deadline. A timeout surfaces as TimeoutError and is not translated here:
it reaches the HTTP boundary as an opaque failure.
"""

import asyncio
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base
from app.shared.utils.datetime import utc_now

DEFAULT_OPERATION_TIMEOUT_SECONDS = 5.0

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_active, window, count, create, save and soft_delete.

    Subclasses map ORM rows to application DTOs; nothing above the
    repository layer sees ORM objects.
    """

    def __init__(
        self,
        db: AsyncSession,
        model: type[ModelType],
        *,
        operation_timeout: float = DEFAULT_OPERATION_TIMEOUT_SECONDS,
    ) -> None:
        self.db = db
        self.model = model
        self.operation_timeout = operation_timeout

    async def _bounded(self, awaitable: Any) -> Any:
        """Await one persistence call under the per-operation deadline."""
        return await asyncio.wait_for(awaitable, timeout=self.operation_timeout)

    async def _execute(self, stmt: Any) -> Any:
        return await self._bounded(self.db.execute(stmt))

    def _active_filter(self) -> ColumnElement[bool]:
        model: Any = self.model
        return model.active.is_(True)

    async def get_active(self, entity_id: int) -> ModelType | None:
        """Return the active row with this primary key, or None."""
        model: Any = self.model
        result = await self._execute(
            select(self.model).where(model.id == entity_id, self._active_filter())
        )
        return result.scalar_one_or_none()

    async def get_active_where(self, *criteria: ColumnElement[bool]) -> ModelType | None:
        """Return the first active row matching criteria, or None."""
        model: Any = self.model
        result = await self._execute(
            select(self.model)
            .where(self._active_filter(), *criteria)
            .order_by(model.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    def _scoped(self, criteria: Iterable[ColumnElement[bool]]) -> Select[Any]:
        return select(self.model).where(self._active_filter(), *criteria)

    async def window(
        self,
        offset: int,
        limit: int,
        *criteria: ColumnElement[bool],
    ) -> list[ModelType]:
        """Return active rows matching criteria, ordered by id, within [offset, offset+limit)."""
        model: Any = self.model
        stmt = self._scoped(criteria).order_by(model.id).offset(offset).limit(limit)
        result = await self._execute(stmt)
        return list(result.scalars().all())

    async def count(self, *criteria: ColumnElement[bool]) -> int:
        """Count active rows matching the same criteria as window()."""
        model: Any = self.model
        stmt = (
            select(func.count(model.id))
            .where(self._active_filter(), *criteria)
        )
        result = await self._execute(stmt)
        return int(result.scalar_one())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and load server-generated values."""
        self.db.add(obj)
        await self._bounded(self.db.flush())
        await self._bounded(self.db.refresh(obj))
        return obj

    async def save(self, obj: ModelType) -> ModelType:
        """Stamp modified_at and flush changes on an attached record."""
        model_obj: Any = obj
        model_obj.modified_at = utc_now()
        await self._bounded(self.db.flush())
        await self._bounded(self.db.refresh(obj))
        return obj

    async def soft_delete(self, entity_id: int) -> bool:
        """Mark the active row inactive. Returns False if there was none.

        The row stays in storage; every read filters it out afterwards.
        """
        obj = await self.get_active(entity_id)
        if obj is None:
            return False
        model_obj: Any = obj
        model_obj.active = False
        model_obj.modified_at = utc_now()
        await self._bounded(self.db.flush())
        return True

    @staticmethod
    def _apply(obj: Any, values: dict[str, Any]) -> None:
        """Set every non-None value on obj."""
        for key, value in values.items():
            if value is not None:
                setattr(obj, key, value)
