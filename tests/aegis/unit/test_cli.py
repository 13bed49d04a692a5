"""Tests for the aegis command-line interface."""

from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from aegis.presentation.cli.app import app
from aegis_config.settings import Settings
from aegis_identity.application.seeding import SeedReport

runner = CliRunner()


class TestSecretsCommand:
    def test_generate_prints_both_secrets(self):
        result = runner.invoke(app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "JWT_SECRET_KEY=" in result.output
        assert "POSTGRES_PASSWORD=" in result.output

    def test_generated_secrets_differ_between_runs(self):
        first = runner.invoke(app, ["secrets", "generate"]).output
        second = runner.invoke(app, ["secrets", "generate"]).output

        assert first != second


class TestSeedCommand:
    def test_reports_created_entities(self):
        report = SeedReport(
            created_permissions=["users:read"],
            created_roles=["admin"],
            granted=[("admin", "users:read")],
            admin_created=True,
        )
        with patch("aegis.presentation.cli.app._seed", AsyncMock(return_value=report)):
            result = runner.invoke(app, ["seed"])

        assert result.exit_code == 0
        assert "Bootstrap seeding" in result.output
        assert "users:read" in result.output

    def test_reports_nothing_to_do(self):
        with patch("aegis.presentation.cli.app._seed", AsyncMock(return_value=SeedReport())):
            result = runner.invoke(app, ["seed"])

        assert result.exit_code == 0
        assert "nothing to do" in result.output


class TestServeCommand:
    def test_runs_uvicorn_with_overrides(self):
        settings = Settings(_env_file=None, jwt_secret_key="test-secret")
        with (
            patch("aegis.presentation.cli.app.get_settings", return_value=settings),
            patch("uvicorn.run") as run,
        ):
            result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "--port", "9000"])

        assert result.exit_code == 0
        run.assert_called_once_with(
            "aegis.presentation.api.app:app",
            host="127.0.0.1",
            port=9000,
            reload=False,
        )

    def test_defaults_come_from_settings(self):
        settings = Settings(_env_file=None, jwt_secret_key="test-secret", api_port=8123)
        with (
            patch("aegis.presentation.cli.app.get_settings", return_value=settings),
            patch("uvicorn.run") as run,
        ):
            runner.invoke(app, ["serve"])

        assert run.call_args.kwargs["port"] == 8123
        assert run.call_args.kwargs["host"] == settings.api_host
