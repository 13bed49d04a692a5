"""SQLAlchemy model for Permission aggregate."""

from uuid import UUID

from sqlalchemy import Boolean, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from aegis_identity.infrastructure.persistence.sqlalchemy.base import (
    Base,
    TimestampMixin,
)


class PermissionModel(Base, TimestampMixin):
    __tablename__ = "permissions"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<PermissionModel(id={self.id}, name={self.name})>"
