"""Configuration management for Webman.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded at application
startup and is immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables (prefixed with
    ``WEBMAN_``) and .env files. All values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WEBMAN_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "Webman"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False
    api_prefix: str = ""

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 9090
    workers: int = 1

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./data/webman.db"
    db_echo: bool = False
    db_auto_create: bool = Field(
        default=True,
        description="Create missing tables on startup (disable when using migrations)",
    )

    # CORS Settings
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:9091",
            "http://127.0.0.1:9091",
            "http://webman.stettzy.com",
            "https://webman.stettzy.com",
        ]
    )
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD"]
    )
    cors_allow_headers: list[str] = Field(
        default=[
            "Origin",
            "Content-Type",
            "Content-Length",
            "Accept",
            "Accept-Encoding",
            "Authorization",
            "Access-Control-Request-Headers",
            "Access-Control-Request-Method",
        ]
    )
    cors_expose_headers: list[str] = Field(default=["Content-Length"])

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Proxy Settings
    proxy_timeout: float | None = Field(
        default=None,
        description="Outbound proxy timeout in seconds (None waits indefinitely)",
    )
    proxy_follow_redirects: bool = True

    @field_validator(
        "cors_origins",
        "cors_allow_methods",
        "cors_allow_headers",
        "cors_expose_headers",
        mode="before",
    )
    @classmethod
    def parse_comma_separated(cls, v: str | list[str]) -> list[str]:
        """Parse a list setting from a comma-separated string or list."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @field_validator("proxy_timeout")
    @classmethod
    def validate_proxy_timeout(cls, v: float | None) -> float | None:
        """Reject non-positive timeouts."""
        if v is not None and v <= 0:
            raise ValueError("proxy_timeout must be positive or unset")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"

    @model_validator(mode="after")
    def validate_sqlite_workers(self) -> "Settings":
        """Validate that SQLite is not used with multiple workers."""
        if self.workers > 1 and self.database_url.startswith("sqlite"):
            raise ValueError(
                "SQLite does not support multiple worker processes. "
                f"Requested {self.workers} workers, but SQLite requires workers=1."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
