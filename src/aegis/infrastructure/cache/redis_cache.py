"""Redis key-value cache client."""

from __future__ import annotations

import json
import logging
from typing import Any

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class RedisCacheService:
    """JSON key-value cache with a key prefix and a default TTL.

    The connection pool is created lazily on first use.
    """

    def __init__(
        self,
        url: str,
        key_prefix: str = "aegis:",
        default_ttl: int = 300,
        max_connections: int = 10,
    ):
        self._url = url
        self._key_prefix = key_prefix
        self._default_ttl = default_ttl
        self._max_connections = max_connections
        self._pool: ConnectionPool | None = None
        self._client: Redis | None = None

    def _get_client(self) -> Redis:
        if self._client is None:
            self._pool = ConnectionPool.from_url(
                self._url,
                max_connections=self._max_connections,
                decode_responses=True,
                health_check_interval=30,
            )
            self._client = Redis(connection_pool=self._pool)
            logger.info("Redis connection pool created")
        return self._client

    def _make_key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        expire = self._default_ttl if ttl is None else ttl
        await self._get_client().set(
            self._make_key(key),
            json.dumps(value, default=str),
            ex=expire or None,
        )

    async def get(self, key: str) -> Any | None:
        raw = await self._get_client().get(self._make_key(key))
        if raw is None:
            return None
        return json.loads(raw)

    async def delete(self, key: str) -> bool:
        return bool(await self._get_client().delete(self._make_key(key)))

    async def ping(self) -> bool:
        try:
            return bool(await self._get_client().ping())
        except RedisError as e:
            logger.warning("Redis ping failed: %s", e)
            return False

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        if self._pool is not None:
            await self._pool.disconnect()
            self._pool = None
            logger.info("Redis connection closed")
