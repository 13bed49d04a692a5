"""Unit tests for Settings computed values."""

from pydantic import SecretStr

from aegis_config import Settings


def _settings(**overrides) -> Settings:
    return Settings(
        _env_file=None,
        jwt_secret_key=SecretStr("secret"),
        **overrides,
    )


class TestDatabaseUrl:
    def test_dsn_wins(self):
        settings = _settings(database_dsn="sqlite+aiosqlite:///./data/aegis.db")

        assert settings.database_url == "sqlite+aiosqlite:///./data/aegis.db"

    def test_built_from_postgres_components(self):
        settings = _settings(
            database_dsn=None,
            postgres_host="db",
            postgres_port=5433,
            postgres_user="aegis",
            postgres_password=SecretStr("pw"),
            postgres_db="rbac",
        )

        assert settings.database_url == "postgresql+asyncpg://aegis:pw@db:5433/rbac"


class TestOptionalCollaborators:
    def test_cors_origins_parsed(self):
        settings = _settings(api_cors_origins=" http://a.test , ,http://b.test")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_cors_origins_accept_list(self):
        settings = _settings(api_cors_origins=["http://a.test", "http://b.test"])

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_cache_disabled_without_url(self):
        assert _settings(redis_url=None).cache_enabled is False
        assert _settings(redis_url="redis://localhost:6379/0").cache_enabled is True

    def test_media_needs_all_credentials(self):
        assert _settings(cloudinary_cloud_name="demo").media_enabled is False
        assert (
            _settings(
                cloudinary_cloud_name="demo",
                cloudinary_api_key="key",
                cloudinary_api_secret=SecretStr("shh"),
            ).media_enabled
            is True
        )

    def test_defaults(self):
        settings = _settings()

        assert settings.jwt_access_token_expire_hours == 1
        assert settings.media_max_files == 2
        assert settings.media_max_file_size_mb == 10
        assert settings.bootstrap_on_startup is True
