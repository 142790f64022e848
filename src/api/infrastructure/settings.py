"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GrafanaSettings(BaseSettings):
    """Grafana connection settings.

    Environment variables:
        GRAFANA_URL: Base URL of the Grafana instance (default: http://localhost:3000)
        GRAFANA_AUTH: API token, or "user:password" for basic auth (default: empty)
        GRAFANA_ORG_ID: Default org for folders declared without one (default: 1)
        GRAFANA_TIMEOUT_SECONDS: Per-request timeout (default: 30)
        GRAFANA_VERIFY_TLS: Verify TLS certificates (default: true)
    """

    model_config = SettingsConfigDict(
        env_prefix="GRAFANA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = Field(default="http://localhost:3000", description="Grafana base URL")
    auth: SecretStr = Field(
        default=SecretStr(""),
        description="API token or user:password",
    )
    org_id: int = Field(
        default=1,
        ge=0,
        description="Default org ID; 0 defers to the server's default org",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        le=600,
        description="Per-request timeout in seconds",
    )
    verify_tls: bool = Field(default=True, description="Verify TLS certificates")

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        """Require an http(s) URL and strip trailing slashes."""
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"url must start with http:// or https://, got {value!r}")
        return value.rstrip("/")


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="FOLDER_PERMISSIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(
        default="Grafana Folder Permissions", description="Application name"
    )
    debug: bool = Field(default=False, description="Debug mode (enables debug logs)")

    @property
    def grafana(self) -> GrafanaSettings:
        """Get Grafana settings."""
        return get_grafana_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_grafana_settings() -> GrafanaSettings:
    """Get cached Grafana settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return GrafanaSettings()
