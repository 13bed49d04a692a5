"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    ├── aegis_auth/            # Password hashing and JWT tests
    ├── aegis_identity/        # Identity domain tests (users, roles, permissions)
    │   ├── unit/              # Fast, isolated tests (incl. SQLite persistence)
    │   └── integration/       # Tests with Testcontainers PostgreSQL
    ├── aegis/                 # API, media, cache, health and CLI tests
    └── shared/                # Shared fixtures and utilities

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-integration    Run integration tests
    --run-all            Run all tests
"""

import os

import pytest

# Settings are read at import time by the API module; keep tests hermetic.
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("DATABASE_DSN", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")

from aegis_config import clear_settings_cache  # noqa: E402


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior (auto-skipped)",
    )


def _flag(value: str) -> bool:
    return value.lower() in ("1", "true", "yes")


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    if config.getoption("--run-all") or _flag(os.environ.get("RUN_ALL_TESTS", "")):
        return

    run_integration = config.getoption("--run-integration") or _flag(
        os.environ.get("RUN_INTEGRATION", ""),
    )
    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}
        if "integration" in item_markers:
            item.add_marker(skip_integration)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and end the session with a fresh settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()
