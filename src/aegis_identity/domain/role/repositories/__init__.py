from aegis_identity.domain.role.repositories.role_repository import RoleRepository

__all__ = ["RoleRepository"]
