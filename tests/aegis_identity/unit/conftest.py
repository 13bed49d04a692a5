"""
Pytest configuration for aegis_identity unit tests.

Persistence unit tests run against in-memory SQLite.
"""

# Re-export shared SQLite fixtures
from tests.shared.fixtures.sqlite import (
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)

__all__ = [
    "sqlite_engine",
    "sqlite_session",
    "sqlite_session_maker",
]
