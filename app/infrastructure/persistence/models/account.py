"""Account ORM model: the tenant root that owns users, addresses and devices."""

from sqlalchemy import Boolean, Index, String, false, func
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    ActiveFlagMixin,
    IdentityMixin,
    TimestampMixin,
)


class Account(IdentityMixin, TimestampMixin, ActiveFlagMixin, Base):
    """Account model. Table: account.

    Email is stored as given and unique across all accounts ignoring case.
    """

    __tablename__ = "account"

    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    receives_updates: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )


Index("uq_account_email_lower", func.lower(Account.email), unique=True)
