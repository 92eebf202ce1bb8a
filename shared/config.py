"""
Shared configuration management for the token toolkit.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="TOKEN_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="info")


class TokenConfig(BaseConfig):
    """Defaults applied when callers do not pass explicit options.

    Signing secrets are supplied per call and are deliberately absent here.
    """

    service_name: str = Field(default="token")

    # Issuance
    default_expiry_minutes: int = Field(default=60, ge=0)
    default_algorithm: str = Field(default="HS256")

    # Validation
    leeway_seconds: int = Field(default=0, ge=0)
    strict_validation: bool = Field(default=True)


def get_config(**overrides) -> TokenConfig:
    """Get configuration, reading TOKEN_* environment variables."""
    return TokenConfig(**overrides)
