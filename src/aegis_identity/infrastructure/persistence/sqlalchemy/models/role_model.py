"""SQLAlchemy model for Role aggregate."""

from uuid import UUID

from sqlalchemy import Boolean, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from aegis_identity.infrastructure.persistence.sqlalchemy.base import (
    Base,
    TimestampMixin,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.models.association import (
    role_permissions,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.models.permission_model import (  # NOQA: E501
    PermissionModel,
)


class RoleModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting Role aggregates.

    ``permissions`` must be loaded explicitly by every query
    (``lazy="raise"``), so an unloaded collection fails loudly instead of
    issuing implicit I/O.
    """

    __tablename__ = "roles"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    permissions: Mapped[list[PermissionModel]] = relationship(
        secondary=role_permissions,
        lazy="raise",
        order_by=PermissionModel.name,
    )

    def __repr__(self) -> str:
        return f"<RoleModel(id={self.id}, name={self.name})>"
