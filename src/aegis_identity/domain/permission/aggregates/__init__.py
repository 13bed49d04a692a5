from aegis_identity.domain.permission.aggregates.permission import Permission

__all__ = ["Permission"]
