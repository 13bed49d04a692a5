"""Unit tests for the Redis cache client (Redis itself is mocked)."""

import json
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from aegis.infrastructure.cache import RedisCacheService


class TestRedisCacheService:
    def setup_method(self):
        self.client = AsyncMock()
        self.cache = RedisCacheService(
            url="redis://localhost:6379/0",
            key_prefix="test:",
            default_ttl=60,
        )
        self.cache._client = self.client

    @pytest.mark.asyncio
    async def test_set_uses_prefix_and_default_ttl(self):
        await self.cache.set("user:1", {"name": "Ada"})

        self.client.set.assert_awaited_once_with(
            "test:user:1", json.dumps({"name": "Ada"}), ex=60
        )

    @pytest.mark.asyncio
    async def test_zero_ttl_means_no_expiry(self):
        await self.cache.set("k", 1, ttl=0)

        self.client.set.assert_awaited_once_with("test:k", "1", ex=None)

    @pytest.mark.asyncio
    async def test_get_decodes_json(self):
        self.client.get.return_value = '{"a": [1, 2]}'

        assert await self.cache.get("k") == {"a": [1, 2]}
        self.client.get.assert_awaited_once_with("test:k")

    @pytest.mark.asyncio
    async def test_get_miss(self):
        self.client.get.return_value = None

        assert await self.cache.get("missing") is None

    @pytest.mark.asyncio
    async def test_delete(self):
        self.client.delete.return_value = 1

        assert await self.cache.delete("k") is True

    @pytest.mark.asyncio
    async def test_ping_failure_is_reported_not_raised(self):
        self.client.ping.side_effect = RedisConnectionError("refused")

        assert await self.cache.ping() is False

    @pytest.mark.asyncio
    async def test_close_releases_client(self):
        await self.cache.close()

        self.client.aclose.assert_awaited_once()
        assert self.cache._client is None
