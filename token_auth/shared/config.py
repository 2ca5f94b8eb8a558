"""
Shared configuration management for token-auth.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="TOKEN_AUTH_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")


class TokenSettings(BaseConfig):
    """Verification and issuance settings."""

    # Lifetime of tokens that carry `iat` but no `exp`
    iat_grace_seconds: float = Field(default=30.0, gt=0)

    # Signing algorithm used by the issuer; must belong to the pinned family
    signing_algorithm: str = Field(default="RS256")


def get_token_settings(**overrides) -> TokenSettings:
    """Get token settings from the environment, with optional overrides."""
    return TokenSettings(**overrides)
