"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        EADCONTROL_DB_HOST: Database host (default: localhost)
        EADCONTROL_DB_PORT: Database port (default: 5432)
        EADCONTROL_DB_DATABASE: Database name (default: eadcontrol)
        EADCONTROL_DB_USERNAME: Database user (default: eadcontrol)
        EADCONTROL_DB_PASSWORD: Database password (required in production)
        EADCONTROL_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        EADCONTROL_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="EADCONTROL_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="eadcontrol", description="Database name")
    username: str = Field(default="eadcontrol", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class CorsSettings(BaseSettings):
    """Cross-origin resource sharing settings.

    The static origins seed the process-wide origin registry. Tenant
    frontends are appended to it at runtime from each tenant's
    ``default_frontend_url`` option.

    Environment variables:
        EADCONTROL_CORS_ALLOWED_ORIGINS: JSON list of exact origins
        EADCONTROL_CORS_ALLOWED_ORIGIN_PATTERNS: JSON list of origin regexes
        EADCONTROL_CORS_ALLOWED_METHODS: JSON list of methods (default: ["*"])
        EADCONTROL_CORS_ALLOWED_HEADERS: JSON list of headers (default: ["*"])
        EADCONTROL_CORS_EXPOSED_HEADERS: JSON list of headers exposed to browsers
        EADCONTROL_CORS_MAX_AGE: Preflight cache lifetime in seconds (default: 0)
        EADCONTROL_CORS_SUPPORTS_CREDENTIALS: Allow credentials (default: true)
    """

    model_config = SettingsConfigDict(
        env_prefix="EADCONTROL_CORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    allowed_origins: list[str] = Field(
        default_factory=lambda: [
            "https://api-educar.eadcontrol.com.br",
            "https://api-aeroclube.eadcontrol.com.br",
            "https://educar.eadcontrol.com.br",
            "https://www.educar.eadcontrol.com.br",
            "https://n8n-educar.eadcontrol.com.br",
            "https://eadcontrol.com.br",
            "http://educar.localhost:3000",
            "http://educar.localhost:5173",
            "http://eaddemo.localhost:3000",
            "http://eaddemo.localhost:4000",
            "http://eaddemo.localhost:4001",
            "http://localhost:4001",
            "http://localhost:8000",
            "http://eadcontrol1.localhost:8080",
            "http://api-eaddemo.localhost:8000",
            "http://eaddemo.localhost:5173",
        ],
        description="Exact origins allowed before any tenant is initialized",
    )
    allowed_origin_patterns: list[str] = Field(
        default_factory=lambda: [
            r"^https?://.*\.localhost(:\d+)?$",
            r"^https://.*\.eadcontrol\.com\.br$",
            r"^http://localhost:.*$",
        ],
        description="Regular expressions matched against the full origin",
    )
    allowed_methods: list[str] = Field(default_factory=lambda: ["*"])
    allowed_headers: list[str] = Field(default_factory=lambda: ["*"])
    exposed_headers: list[str] = Field(
        default_factory=lambda: ["X-Tenant-Id", "X-Tenant-Slug"],
        description="Response headers readable by browser clients",
    )
    max_age: int = Field(default=0, ge=0, description="Preflight cache seconds")
    supports_credentials: bool = Field(default=True)

    @property
    def origin_regex(self) -> str | None:
        """Combine the origin patterns into a single alternation, if any."""
        if not self.allowed_origin_patterns:
            return None
        return "|".join(f"(?:{pattern})" for pattern in self.allowed_origin_patterns)


class TenancySettings(BaseSettings):
    """Tenant identification settings.

    Environment variables:
        EADCONTROL_TENANCY_CENTRAL_DOMAINS: JSON list of hosts served without tenant
        EADCONTROL_TENANCY_FRONTEND_URL_OPTION: Option key holding the tenant frontend
    """

    model_config = SettingsConfigDict(
        env_prefix="EADCONTROL_TENANCY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    central_domains: list[str] = Field(
        default_factory=lambda: ["localhost", "127.0.0.1"],
        description="Domains that are served without a tenant context",
    )
    frontend_url_option: str = Field(
        default="default_frontend_url",
        description="Tenant option holding the frontend origin",
    )

    @field_validator("central_domains")
    @classmethod
    def normalize_domains(cls, value: list[str]) -> list[str]:
        """Compare domains case-insensitively."""
        return [domain.strip().lower() for domain in value if domain.strip()]


class BrevoSettings(BaseSettings):
    """Brevo transactional email settings.

    Environment variables:
        BREVO_API_KEY: API key; delivery is skipped when empty
        BREVO_API_URL: API base URL (default: https://api.brevo.com/v3)
        BREVO_FROM_EMAIL or MAIL_FROM_ADDRESS: Default sender address
        BREVO_FROM_NAME or MAIL_FROM_NAME: Default sender name
    """

    model_config = SettingsConfigDict(
        env_prefix="BREVO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: SecretStr = Field(default=SecretStr(""), description="Brevo API key")
    api_url: str = Field(
        default="https://api.brevo.com/v3",
        description="Brevo API base URL",
    )
    from_email: str | None = Field(
        default=None,
        validation_alias=AliasChoices("BREVO_FROM_EMAIL", "MAIL_FROM_ADDRESS"),
        description="Default sender address",
    )
    from_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("BREVO_FROM_NAME", "MAIL_FROM_NAME"),
        description="Default sender name",
    )

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Endpoint paths are joined with a leading slash."""
        return value.rstrip("/")

    @property
    def is_configured(self) -> bool:
        """Whether an API key is present."""
        return bool(self.api_key.get_secret_value())


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="EADCONTROL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="EAD Control API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Minimum log level")
    frontend_url: str = Field(
        default="http://localhost:3000",
        description=(
            "Frontend linked from emails when the tenant has no"
            " default_frontend_url option"
        ),
    )

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_cors_settings() -> CorsSettings:
    """Get cached CORS settings."""
    return CorsSettings()


@lru_cache
def get_tenancy_settings() -> TenancySettings:
    """Get cached tenancy settings."""
    return TenancySettings()


@lru_cache
def get_brevo_settings() -> BrevoSettings:
    """Get cached Brevo settings."""
    return BrevoSettings()
