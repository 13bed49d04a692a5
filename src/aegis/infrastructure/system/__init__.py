from aegis.infrastructure.system.health_checker import HealthChecker, HealthReport

__all__ = ["HealthChecker", "HealthReport"]
