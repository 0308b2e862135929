"""
Configuration management with pydantic-settings.

Every key is read from the environment (prefix ``SLACK_ALERTS_``) or a
``.env`` file and validated on load. All keys have defaults, so an empty
environment yields a usable (if silent) configuration: the default webhook
URL is empty, which makes every alert a no-op.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Slack alert settings loaded from environment variables / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="SLACK_ALERTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Dispatch ──────────────────────────────────────────────────────
    enabled: bool = Field(
        default=True,
        description="Global kill switch. When false every alert is dropped.",
    )
    webhook_urls: dict[str, str] = Field(
        default_factory=lambda: {"default": ""},
        description="JSON mapping of target name to Slack incoming webhook URL.",
    )
    job: str | None = Field(
        default="send_to_slack_channel",
        description="Identifier of the delivery job used to POST the payload.",
    )
    queue: str = Field(
        default="default",
        description="Queue name used for asynchronous delivery.",
    )
    sync: bool = Field(
        default=False,
        description="Deliver inline instead of queueing when no override is given.",
    )

    # ── Redis / ARQ ───────────────────────────────────────────────────
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection string for ARQ workers.",
    )

    # ── HTTP transport ────────────────────────────────────────────────
    http_timeout: float = Field(
        default=10.0,
        description="Seconds before a webhook POST is abandoned.",
    )

    # ── Logging ───────────────────────────────────────────────────────
    log_level: str = Field(
        default="INFO",
        description="Level the ARQ worker configures logging at on startup.",
    )


@lru_cache()
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


settings = get_settings()
