from aegis_identity.application.context.principal import Principal

__all__ = ["Principal"]
