"""
Shared configuration management for the Items Access Layer.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ITEMS_",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")


class ItemsConfig(BaseConfig):
    """Backing store settings for item lookups."""

    # Cache
    redis_url: str = Field(default="redis://localhost:6379/0")
    redis_socket_timeout_seconds: float = Field(default=5.0, gt=0)

    # Origin
    origin_url: str = Field(default="http://localhost:8080")
    origin_timeout_seconds: float = Field(default=10.0, gt=0)


def get_config() -> ItemsConfig:
    """Get configuration for item lookups."""
    return ItemsConfig()
