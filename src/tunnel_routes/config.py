"""Client configuration loaded with pydantic-settings."""

from typing import Any

from pydantic import (
    AliasChoices,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from .common.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_USER_AGENT = "tunnel-routes-python/0.1.0"

ENV_PREFIX = "CLOUDFLARE_"


class ClientConfig(BaseSettings):
    """Connection and credential settings for the API.

    Unset fields are read from ``CLOUDFLARE_*`` environment variables
    (``CLOUDFLARE_API_TOKEN``, ``CLOUDFLARE_EMAIL``, ``CLOUDFLARE_API_KEY``,
    ``CLOUDFLARE_BASE_URL``, ``CLOUDFLARE_TIMEOUT``). Keyword arguments win.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, description="API root URL")
    api_token: str | None = Field(default=None, description="Scoped API token")
    api_email: str | None = Field(
        default=None,
        validation_alias=AliasChoices("api_email", f"{ENV_PREFIX}EMAIL"),
        description="Legacy auth email",
    )
    api_key: str | None = Field(default=None, description="Legacy global API key")
    timeout: float = Field(
        default=30.0, ge=0.1, le=300.0, description="Request timeout in seconds"
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL without a trailing slash."""
        if not v.startswith(("https://", "http://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_credentials(self) -> "ClientConfig":
        """Require exactly one complete authentication style."""
        has_token = bool(self.api_token)
        has_legacy = bool(self.api_email) or bool(self.api_key)

        if has_token and has_legacy:
            raise ValueError("Use either api_token or api_email/api_key, not both")
        if has_legacy and not (self.api_email and self.api_key):
            raise ValueError("api_email and api_key must be provided together")
        if not has_token and not has_legacy:
            raise ValueError("An api_token or api_email/api_key pair is required")
        return self

    def auth_headers(self) -> dict[str, str]:
        """Return the headers that authenticate a request."""
        if self.api_token:
            return {"Authorization": f"Bearer {self.api_token}"}
        return {"X-Auth-Email": self.api_email or "", "X-Auth-Key": self.api_key or ""}

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        """Build a configuration from the environment.

        Args:
            **overrides: Values that take precedence over the environment

        Raises:
            ConfigurationError: If the resulting configuration is invalid
        """
        try:
            return cls(**overrides)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid client configuration: {e}") from e
