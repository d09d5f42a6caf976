"""Client configuration (settings and environment).

Single source of truth for connection and telemetry settings. Uses
pydantic-settings with .env support; every variable is read with the
UTB_ prefix (e.g. UTB_BASE_URL, UTB_TENANT_ID).
"""

from functools import lru_cache

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment and .env.

    base_url and tenant_id are required. access_token is optional here
    because embedding applications usually pass a per-session token to
    UserTasksClient.from_settings() instead of configuring one globally.
    """

    # App
    app_name: str = "usertasks-bridge-client"
    app_version: str = "1.0.0"
    debug: bool = False

    # Bridge API
    base_url: str = ""
    tenant_id: str = ""
    access_token: SecretStr | None = None
    request_timeout_seconds: float = 30.0

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_prefix="UTB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate required connection settings and telemetry exporter."""
        if not self.base_url:
            raise ValueError(
                "UTB_BASE_URL is required (e.g. http://localhost:8089). "
                "Set in environment or .env file."
            )
        if not self.tenant_id:
            raise ValueError(
                "UTB_TENANT_ID is required. Set in environment or .env file."
            )
        if self.request_timeout_seconds <= 0:
            raise ValueError("UTB_REQUEST_TIMEOUT_SECONDS must be positive")
        if self.telemetry_exporter not in ("console", "otlp", "none"):
            raise ValueError(
                f"Invalid telemetry_exporter '{self.telemetry_exporter}'. "
                "Must be one of: 'console', 'otlp', 'none'"
            )
        if self.telemetry_exporter == "otlp" and not self.telemetry_otlp_endpoint:
            raise ValueError(
                "UTB_TELEMETRY_OTLP_ENDPOINT is required when telemetry_exporter is 'otlp'."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
