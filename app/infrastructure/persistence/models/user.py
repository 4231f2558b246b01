"""User ORM model: a contact person belonging to an account."""

from sqlalchemy import Boolean, String, false
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AccountScopedModel


class User(AccountScopedModel, Base):
    """User model. Table: account_user (scoped by account_id)."""

    __tablename__ = "account_user"

    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    cell: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str] = mapped_column(String(128), nullable=False)
    verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    receives_updates: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
