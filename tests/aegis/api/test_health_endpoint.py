"""API tests for the health endpoint and request correlation ids."""

from unittest.mock import AsyncMock

from aegis.infrastructure.system import HealthChecker
from aegis.presentation.api.dependencies import get_health_checker
from aegis.presentation.api.middleware import CORRELATION_ID_HEADER


class TestHealthEndpoint:
    def test_healthy_database(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "info": {"database": {"status": "up"}},
            "error": {},
        }

    def test_unreachable_cache_returns_503(self, test_app, test_client, test_engine):
        cache = AsyncMock()
        cache.ping.return_value = False
        test_app.dependency_overrides[get_health_checker] = lambda: HealthChecker(
            engine=test_engine,
            cache=cache,
            timeout=5.0,
        )

        response = test_client.get("/health")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "error"
        assert data["info"] == {"database": {"status": "up"}}
        assert data["error"] == {"redis": {"status": "down", "message": "unreachable"}}

    def test_health_needs_no_authentication(self, test_client):
        assert test_client.get("/health").status_code == 200


class TestCorrelationId:
    def test_incoming_id_is_echoed(self, test_client):
        response = test_client.get("/health", headers={CORRELATION_ID_HEADER: "req-42"})

        assert response.headers[CORRELATION_ID_HEADER] == "req-42"

    def test_id_generated_when_absent(self, test_client):
        first = test_client.get("/health").headers[CORRELATION_ID_HEADER]
        second = test_client.get("/health").headers[CORRELATION_ID_HEADER]

        assert first
        assert first != second

    def test_error_responses_carry_id(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/auth/me")

        assert response.status_code == 401
        assert CORRELATION_ID_HEADER in response.headers
