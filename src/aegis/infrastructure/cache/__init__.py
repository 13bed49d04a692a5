from aegis.infrastructure.cache.redis_cache import RedisCacheService

__all__ = ["RedisCacheService"]
