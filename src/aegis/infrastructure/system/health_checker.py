"""Readiness checks for the database and the optional Redis cache."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from sqlalchemy import text

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from aegis.infrastructure.cache import RedisCacheService

logger = logging.getLogger(__name__)

DEFAULT_PING_TIMEOUT = 0.3


@dataclass
class HealthReport:
    info: dict[str, dict[str, Any]] = field(default_factory=dict)
    error: dict[str, dict[str, Any]] = field(default_factory=dict)

    @property
    def healthy(self) -> bool:
        return not self.error

    @property
    def status(self) -> str:
        return "ok" if self.healthy else "error"

    def up(self, name: str) -> None:
        self.info[name] = {"status": "up"}

    def down(self, name: str, message: str) -> None:
        self.error[name] = {"status": "down", "message": message}


class HealthChecker:
    def __init__(
        self,
        engine: AsyncEngine,
        cache: RedisCacheService | None = None,
        timeout: float = DEFAULT_PING_TIMEOUT,
    ):
        self._engine = engine
        self._cache = cache
        self._timeout = timeout

    async def check(self) -> HealthReport:
        report = HealthReport()
        await self._check_database(report)
        if self._cache is not None:
            await self._check_cache(report)
        return report

    async def _ping_database(self) -> None:
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def _check_database(self, report: HealthReport) -> None:
        try:
            await asyncio.wait_for(self._ping_database(), timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.warning("Database ping timed out after %.3fs", self._timeout)
            report.down("database", "timeout")
        except Exception as e:  # NOQA: BLE001
            logger.warning("Database ping failed: %s", e)
            report.down("database", str(e))
        else:
            report.up("database")

    async def _check_cache(self, report: HealthReport) -> None:
        try:
            ok = await asyncio.wait_for(self._cache.ping(), timeout=self._timeout)
        except asyncio.TimeoutError:
            ok = False
        if ok:
            report.up("redis")
        else:
            report.down("redis", "unreachable")
