"""
Configuration management for the SecDay web app.

Uses Pydantic Settings for environment variable validation and type safety.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from secday.password.models import ScoringMode


class PwnedPasswordsConfig(BaseSettings):
    """Pwned Passwords range API configuration."""

    api_url: str = Field(
        default="https://api.pwnedpasswords.com",
        description="Base URL of the Pwned Passwords API"
    )
    timeout: float = Field(
        default=10.0,
        gt=0,
        description="Total request timeout in seconds"
    )
    user_agent: str = Field(
        default="SecDay-Password-Checker/1.0",
        description="User-Agent header sent with range queries"
    )
    add_padding: bool = Field(
        default=True,
        description="Ask the API to pad responses with fake suffixes"
    )

    class Config:
        env_prefix = "PWNED_"
        env_file = ".env"
        extra = "ignore"


class ScoringConfig(BaseSettings):
    """Password scoring configuration."""

    mode: ScoringMode = Field(
        default=ScoringMode.WEIGHTED,
        description="weighted (four factors) or breach_only"
    )

    class Config:
        env_prefix = "SCORING_"
        env_file = ".env"
        extra = "ignore"


class WebConfig(BaseSettings):
    """Web server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8080, ge=1, le=65535, description="Listen port")
    reload: bool = Field(default=False, description="Enable uvicorn auto-reload")

    class Config:
        env_prefix = "WEB_"
        env_file = ".env"
        extra = "ignore"


class AppConfig(BaseSettings):
    """Main application configuration."""

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    # Nested configurations
    pwned: PwnedPasswordsConfig = Field(default_factory=PwnedPasswordsConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    web: WebConfig = Field(default_factory=WebConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the global configuration instance.

    Lazily loads configuration on first access.

    Returns:
        AppConfig: The global configuration instance
    """
    global _config
    if _config is None:
        _config = AppConfig(
            pwned=PwnedPasswordsConfig(),
            scoring=ScoringConfig(),
            web=WebConfig(),
        )
    return _config


def reload_config() -> AppConfig:
    """
    Reload configuration from environment variables.

    Useful for testing or when environment changes.

    Returns:
        AppConfig: The reloaded configuration instance
    """
    global _config
    _config = None
    return get_config()
