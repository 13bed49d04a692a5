from aegis_identity.domain.role.aggregates.role import Role

__all__ = ["Role"]
