"""SQLAlchemy model for User aggregate."""

from uuid import UUID

from sqlalchemy import Boolean, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from aegis_identity.infrastructure.persistence.sqlalchemy.base import (
    Base,
    TimestampMixin,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.models.association import (
    user_roles,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.models.role_model import (
    RoleModel,
)


class UserModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates."""

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    is_email_verified: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    roles: Mapped[list[RoleModel]] = relationship(
        secondary=user_roles,
        lazy="raise",
        order_by=RoleModel.name,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
