"""Model-to-aggregate mapping shared by the identity repositories."""

from sqlalchemy.exc import IntegrityError

from aegis_identity.domain.permission import Permission
from aegis_identity.domain.role import Role
from aegis_identity.domain.shared.time import ensure_tz_aware
from aegis_identity.domain.user import User
from aegis_identity.infrastructure.persistence.sqlalchemy.models import (
    PermissionModel,
    RoleModel,
    UserModel,
)


def permission_to_domain(model: PermissionModel) -> Permission:
    return Permission.reconstitute(
        id=model.id,
        name=model.name,
        description=model.description,
        is_active=model.is_active,
        created_at=ensure_tz_aware(model.created_at),
        updated_at=ensure_tz_aware(model.updated_at),
    )


def role_to_domain(model: RoleModel) -> Role:
    return Role.reconstitute(
        id=model.id,
        name=model.name,
        description=model.description,
        is_active=model.is_active,
        permissions=[permission_to_domain(p) for p in model.permissions],
        created_at=ensure_tz_aware(model.created_at),
        updated_at=ensure_tz_aware(model.updated_at),
    )


def user_to_domain(model: UserModel) -> User:
    return User.reconstitute(
        id=model.id,
        email=model.email,
        password_hash=model.password_hash,
        first_name=model.first_name,
        last_name=model.last_name,
        is_active=model.is_active,
        is_email_verified=model.is_email_verified,
        roles=[role_to_domain(r) for r in model.roles],
        created_at=ensure_tz_aware(model.created_at),
        updated_at=ensure_tz_aware(model.updated_at),
    )


# PostgreSQL unique_violation
UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """Tell unique and primary key violations apart from other integrity errors."""
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == UNIQUE_VIOLATION_SQLSTATE
    # SQLite reports composite primary keys as unique constraints too
    return "UNIQUE constraint failed" in str(orig)
