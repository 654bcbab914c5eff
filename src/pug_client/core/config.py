"""Configuration management for the Pug Video API client.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Endpoint values that are not set
explicitly are filled in from the preset of the selected environment.
"""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["production", "staging"]

ENVIRONMENT_PRESETS: dict[str, dict[str, str]] = {
    "production": {
        "api_endpoint": "https://api.video.scorevision.com",
        "auth_endpoint": "https://fantagio.auth0.com/oauth/token",
        "auth_audience": "https://api.fantag.io/",
    },
    "staging": {
        "api_endpoint": "https://staging-api.video.scorevision.com",
        "auth_endpoint": "https://fantagio-staging.auth0.com/oauth/token",
        "auth_audience": "https://staging-api.fantag.io/",
    },
}


class Settings(BaseSettings):
    """Client configuration settings.

    Settings are loaded from environment variables (``PUG_`` prefix) and
    .env files. All configuration values are validated at construction.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PUG_",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment Settings
    environment: Environment = "production"
    api_endpoint: str | None = None
    namespace: str | None = None

    # Authentication Settings
    auth_endpoint: str | None = None
    auth_audience: str | None = None
    auth_grant_type: str = "client_credentials"
    client_id: str | None = None
    client_secret: str | None = Field(default=None, repr=False)
    access_token: str | None = Field(
        default=None,
        repr=False,
        description="Pre-issued bearer token; skips the client-credentials flow",
    )

    # Pagination Settings
    per_page: int = Field(default=10, ge=1)

    # Connection Settings
    open_timeout: float = 5.0
    timeout: float = 10.0

    # Patch Settings
    patch_key_style: Literal["camel", "snake"] = Field(
        default="camel",
        description="Key convention used for JSON Patch paths and values",
    )

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    @field_validator("api_endpoint")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        """Normalize the API endpoint so paths join cleanly."""
        if v is None:
            return v
        return v.rstrip("/")

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v: Any) -> Any:
        """Accept environment names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def apply_environment_preset(self) -> "Settings":
        """Fill unset endpoint fields from the environment preset."""
        preset = ENVIRONMENT_PRESETS[self.environment]
        for key, value in preset.items():
            if getattr(self, key) is None:
                setattr(self, key, value)
        return self

    @property
    def is_production(self) -> bool:
        """Check if pointed at the production environment."""
        return self.environment == "production"

    @property
    def is_staging(self) -> bool:
        """Check if pointed at the staging environment."""
        return self.environment == "staging"

    @property
    def has_credentials(self) -> bool:
        """Check if client-credentials authentication is possible."""
        return bool(self.client_id and self.client_secret)

    def merged(self, **overrides: Any) -> "Settings":
        """Return a copy with ``overrides`` applied and re-validated.

        When the environment changes, endpoints that came from the old
        environment's preset are re-resolved from the new one; endpoints
        set to custom values are kept.
        """
        data = self.model_dump()
        if "environment" in overrides:
            for key, value in ENVIRONMENT_PRESETS[self.environment].items():
                if data.get(key) == value:
                    data.pop(key)
        data.update(overrides)
        return type(self).model_validate(data)

    @classmethod
    def for_environment(cls, environment: str, **overrides: Any) -> "Settings":
        """Build settings for a named environment preset.

        Args:
            environment: "production" or "staging".
            **overrides: Field values taking priority over the preset.

        Returns:
            Settings: Validated settings instance.

        Raises:
            ValueError: If the environment name is unknown.
        """
        if environment.lower() not in ENVIRONMENT_PRESETS:
            raise ValueError(
                f"Unknown environment: {environment}. Use 'production' or 'staging'"
            )
        return cls(environment=environment, **overrides)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call. It is the process-wide default used when
    a client is built without explicit settings.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
