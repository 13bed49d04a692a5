"""Pytest configuration for aegis unit tests."""

# Re-export shared SQLite fixtures
from tests.shared.fixtures.sqlite import sqlite_engine

__all__ = ["sqlite_engine"]
