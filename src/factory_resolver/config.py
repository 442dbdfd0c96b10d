"""Configuration with pydantic-settings.

Settings are read from ``FACTORY_RESOLVER_*`` environment variables or a
``.env`` file. The adapter list is ordered: when two adapters produce the
same factory name, the one listed later wins.

Usage:
    FACTORY_RESOLVER_ADAPTERS=orm,factory_boy pytest
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ADAPTERS = "orm,factory_boy,blueprint"


class ResolverSettings(BaseSettings):
    """Factory resolver settings."""

    model_config = SettingsConfigDict(
        env_prefix="FACTORY_RESOLVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    adapters: str = Field(
        default=DEFAULT_ADAPTERS,
        description="Comma-separated adapter keys, in collision-resolution order",
    )
    cache_factories: bool = Field(
        default=False,
        description="Memoize the name -> adapter mapping until invalidated",
    )

    # Logging configuration
    service_name: str = Field(
        default="factory_resolver",
        description="Service name for structured logging",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )

    @field_validator("adapters")
    @classmethod
    def validate_adapters(cls, v: str) -> str:
        """Normalize the adapter list and reject an empty one."""
        keys = [key.strip().lower() for key in v.split(",") if key.strip()]
        if not keys:
            raise ValueError("At least one adapter must be configured")
        return ",".join(keys)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @property
    def adapter_keys(self) -> list[str]:
        """Configured adapter keys, in order."""
        return self.adapters.split(",")


@lru_cache
def get_settings() -> ResolverSettings:
    """Get cached settings instance."""
    return ResolverSettings()
