"""Pytest fixtures for API tests.

The app runs against a file-backed SQLite database seeded with the default
permissions, roles and admin account. NullPool keeps connections from
leaking between the setup loop and the TestClient's loop.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from aegis.infrastructure.persistence.init_db import create_tables, run_bootstrap
from aegis.infrastructure.system import HealthChecker
from aegis.presentation.api.app import API_V1_PREFIX, create_app
from aegis.presentation.api.config import get_api_settings
from aegis.presentation.api.dependencies import get_db_session, get_health_checker
from aegis_config.settings import Settings

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-password-123"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        password_hash_rounds=4,
        bootstrap_admin_email=ADMIN_EMAIL,
        bootstrap_admin_password=SecretStr(ADMIN_PASSWORD),
        media_max_file_size_mb=1,
        media_max_files=2,
    )


@pytest.fixture
def test_engine(tmp_path):
    return create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'aegis-api.db'}",
        poolclass=NullPool,
    )


def _run(coro):
    """Run a coroutine in a fresh event loop, apart from TestClient's loop."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def _setup_test_database(engine, settings: Settings) -> None:
    async def _setup():
        await create_tables(engine)
        session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        await run_bootstrap(session_maker, settings)

    _run(_setup())


@pytest.fixture
def test_app(api_settings, test_engine):
    """Create the app with the database and settings dependencies overridden."""
    _setup_test_database(test_engine, api_settings)

    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    app.dependency_overrides[get_health_checker] = lambda: HealthChecker(
        engine=test_engine,
        timeout=5.0,
    )

    yield app

    _run(test_engine.dispose())


@pytest.fixture
def test_client(test_app):
    return TestClient(test_app)


def _login(client: TestClient, email: str, password: str) -> dict:
    response = client.post(
        f"{API_V1_PREFIX}/auth/login",
        json={"email": email, "password": password},
    )
    assert response.status_code == 200, (
        f"Login failed: {response.status_code} - {response.text}"
    )
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def login_as(test_client):
    """Log in and return bearer auth headers."""
    return lambda email, password: _login(test_client, email, password)


@pytest.fixture
def admin_headers(test_client) -> dict:
    """Auth headers for the seeded administrator."""
    return _login(test_client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def registered_user_data() -> dict:
    return {
        "email": "api-test-user@example.com",
        "password": "SecurePassword123!",
        "first_name": "Api",
        "last_name": "Tester",
    }


@pytest.fixture
def user_headers(test_client, registered_user_data) -> dict:
    """Auth headers for a freshly registered user without roles."""
    response = test_client.post(
        f"{API_V1_PREFIX}/auth/register",
        json=registered_user_data,
    )
    assert response.status_code == 201, (
        f"Registration failed: {response.status_code} - {response.text}"
    )
    return _login(
        test_client,
        registered_user_data["email"],
        registered_user_data["password"],
    )


@pytest.fixture
def admin_credentials() -> dict:
    return {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
