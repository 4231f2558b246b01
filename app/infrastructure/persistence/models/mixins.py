"""SQLAlchemy mixins for common model patterns (DRY).

Provides: IdentityMixin, AccountScopedMixin, TimestampMixin, ActiveFlagMixin,
and the combined ReferenceModel and AccountScopedModel.
"""

from datetime import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, ForeignKey, Integer, true
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from app.shared.utils.datetime import utc_now

# BIGINT identity on Postgres; SQLite only autoincrements INTEGER PRIMARY KEY.
IdType = BigInteger().with_variant(Integer, "sqlite")


class IdentityMixin:
    """Mixin for a database-generated int64 primary key."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(IdType, primary_key=True, autoincrement=True)


class AccountScopedMixin:
    """Mixin for rows owned by an account. Provides account_id FK to account."""

    @declared_attr
    def account_id(cls) -> Mapped[int]:
        return mapped_column(
            IdType,
            ForeignKey("account.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )


class TimestampMixin:
    """Mixin for created_at and modified_at (set in Python, timezone-aware).

    modified_at is stamped explicitly by repositories on update.
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), default=utc_now, nullable=False)

    @declared_attr
    def modified_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), default=utc_now, nullable=False)


class ActiveFlagMixin:
    """Mixin for soft delete. active=False rows behave as absent to every read."""

    @declared_attr
    def active(cls) -> Mapped[bool]:
        return mapped_column(
            Boolean, nullable=False, default=True, server_default=true(), index=True
        )


class ReferenceModel(IdentityMixin, TimestampMixin, ActiveFlagMixin):
    """Global reference data (units, models, sensors): no owning account."""


class AccountScopedModel(
    IdentityMixin, AccountScopedMixin, TimestampMixin, ActiveFlagMixin
):
    """Rows owned by an account (users, addresses, devices)."""
