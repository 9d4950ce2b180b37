"""Application configuration settings."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class ServerSpeed(str, Enum):
    """Latency profiles the network-effects middleware can emulate."""

    INSTANT = "instant"
    FAST = "fast"
    SLOW = "slow"


class Settings(BaseSettings):
    """Configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
        populate_by_name=True,
    )

    port: int = Field(
        default=3002,
        validation_alias="SERVER_PORT",
        description="TCP port the HTTP listener binds to (0 picks a free port)",
        ge=0,
        le=65535,
    )
    speed: ServerSpeed = Field(
        default=ServerSpeed.FAST,
        validation_alias="SERVER_SPEED",
        description="Latency profile applied to every request",
    )
    page_size: int = Field(
        default=10,
        description="Number of items returned per page by listing endpoints",
        gt=0,
    )
    chance_of_server_error: float = Field(
        default=0.05,
        description="Probability that a request is answered with an injected 500",
        ge=0.0,
        le=1.0,
    )
    request_logging: bool = Field(
        default=True,
        description="Log one line per request with its latency and fault outcome",
    )
    fast_latency_min_ms: int = Field(default=500, ge=0)
    fast_latency_max_ms: int = Field(default=1000, ge=0)
    slow_latency_min_ms: int = Field(default=1000, ge=0)
    slow_latency_max_ms: int = Field(default=2000, ge=0)
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )

    @field_validator("speed", mode="before")
    @classmethod
    def _fallback_to_fast(cls, value: object) -> object:
        if isinstance(value, ServerSpeed):
            return value
        # Only the exact lowercase names select a profile.
        try:
            return ServerSpeed(value)
        except ValueError:
            return ServerSpeed.FAST

    @model_validator(mode="after")
    def _validate_latency_windows(self) -> "Settings":
        if self.fast_latency_min_ms > self.fast_latency_max_ms:
            raise ValueError("FAST_LATENCY_MIN_MS must not exceed FAST_LATENCY_MAX_MS")
        if self.slow_latency_min_ms > self.slow_latency_max_ms:
            raise ValueError("SLOW_LATENCY_MIN_MS must not exceed SLOW_LATENCY_MAX_MS")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["ServerSpeed", "Settings", "get_settings", "reset_settings_cache"]
