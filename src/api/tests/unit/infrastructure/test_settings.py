"""Unit tests for infrastructure settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import (
    BrevoSettings,
    CorsSettings,
    DatabaseSettings,
    Settings,
    TenancySettings,
)


class TestDatabaseSettingsPoolConfiguration:
    """Tests for connection pool configuration."""

    def test_default_pool_settings(self):
        """Should have sensible pool defaults."""
        settings = DatabaseSettings()
        assert settings.pool_min_connections >= 1
        assert settings.pool_max_connections >= settings.pool_min_connections

    def test_pool_max_must_be_greater_than_or_equal_to_min(self):
        """Should validate max >= min."""
        with pytest.raises(ValidationError) as exc_info:
            DatabaseSettings(pool_min_connections=10, pool_max_connections=5)

        assert "pool_max_connections" in str(exc_info.value)

    def test_pool_min_must_be_positive(self):
        """Pool min connections must be >= 1."""
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_min_connections=0)

    def test_connection_string_omits_password(self, mock_db_settings):
        """Connection string is safe to log."""
        assert mock_db_settings.connection_string == (
            "postgresql://testuser@testhost:5432/testdb"
        )
        assert "testpass" not in mock_db_settings.connection_string


class TestDatabaseSettingsEnvironment:
    """Tests for environment variable loading."""

    def test_reads_prefixed_environment(self, monkeypatch):
        """Should load EADCONTROL_DB_* variables."""
        monkeypatch.setenv("EADCONTROL_DB_HOST", "db.internal")
        monkeypatch.setenv("EADCONTROL_DB_PORT", "6543")

        settings = DatabaseSettings()

        assert settings.host == "db.internal"
        assert settings.port == 6543


class TestCorsSettings:
    """Tests for CORS settings."""

    def test_default_static_origins(self):
        """Should allow the deployed platform hosts and local development."""
        settings = CorsSettings()
        assert "https://eadcontrol.com.br" in settings.allowed_origins
        assert "https://educar.eadcontrol.com.br" in settings.allowed_origins
        assert "https://api-aeroclube.eadcontrol.com.br" in settings.allowed_origins
        assert "http://eaddemo.localhost:5173" in settings.allowed_origins
        assert not any("maisaqui1" in o for o in settings.allowed_origins)

    def test_exposes_tenant_headers(self):
        """Browsers should be able to read the tenant headers."""
        settings = CorsSettings()
        assert settings.exposed_headers == ["X-Tenant-Id", "X-Tenant-Slug"]
        assert settings.supports_credentials is True
        assert settings.max_age == 0

    def test_origin_regex_joins_patterns(self):
        """Patterns should be combined into one alternation."""
        settings = CorsSettings(allowed_origin_patterns=["^a$", "^b$"])
        assert settings.origin_regex == "(?:^a$)|(?:^b$)"

    def test_origin_regex_none_without_patterns(self):
        """No patterns means no regex."""
        settings = CorsSettings(allowed_origin_patterns=[])
        assert settings.origin_regex is None

    def test_max_age_cannot_be_negative(self):
        """Negative preflight cache is rejected."""
        with pytest.raises(ValidationError):
            CorsSettings(max_age=-1)


class TestTenancySettings:
    """Tests for tenancy settings."""

    def test_central_domains_are_normalized(self):
        """Central domains compare case-insensitively."""
        settings = TenancySettings(central_domains=[" API.Example.com ", ""])
        assert settings.central_domains == ["api.example.com"]

    def test_default_frontend_option(self):
        """Frontend origin is read from default_frontend_url."""
        assert TenancySettings().frontend_url_option == "default_frontend_url"


class TestBrevoSettings:
    """Tests for Brevo settings."""

    def test_not_configured_without_key(self, monkeypatch):
        """An empty key disables delivery."""
        monkeypatch.delenv("BREVO_API_KEY", raising=False)
        assert BrevoSettings(api_key="").is_configured is False

    def test_configured_with_key(self):
        """A key enables delivery."""
        assert BrevoSettings(api_key="xkeysib-123").is_configured is True

    def test_api_url_trailing_slash_is_stripped(self):
        """Endpoint paths are appended with a leading slash."""
        settings = BrevoSettings(api_url="https://api.brevo.com/v3/")
        assert settings.api_url == "https://api.brevo.com/v3"

    def test_sender_falls_back_to_mail_from(self, monkeypatch):
        """MAIL_FROM_* variables provide the default sender."""
        monkeypatch.delenv("BREVO_FROM_EMAIL", raising=False)
        monkeypatch.delenv("BREVO_FROM_NAME", raising=False)
        monkeypatch.setenv("MAIL_FROM_ADDRESS", "no-reply@example.com")
        monkeypatch.setenv("MAIL_FROM_NAME", "Example")

        settings = BrevoSettings()

        assert settings.from_email == "no-reply@example.com"
        assert settings.from_name == "Example"

    def test_brevo_sender_wins_over_mail_from(self, monkeypatch):
        """BREVO_FROM_* takes precedence."""
        monkeypatch.setenv("BREVO_FROM_EMAIL", "brevo@example.com")
        monkeypatch.setenv("MAIL_FROM_ADDRESS", "mail@example.com")

        assert BrevoSettings().from_email == "brevo@example.com"

    def test_api_key_is_secret(self):
        """The key must not appear in the settings repr."""
        settings = BrevoSettings(api_key="xkeysib-123")
        assert "xkeysib-123" not in repr(settings)


class TestSettings:
    """Tests for application settings."""

    def test_defaults(self, monkeypatch):
        """Should provide development defaults."""
        monkeypatch.delenv("EADCONTROL_APP_NAME", raising=False)
        settings = Settings()
        assert settings.app_name == "EAD Control API"
        assert settings.frontend_url == "http://localhost:3000"
