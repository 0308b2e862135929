"""
Webhook registry: named targets plus the global dispatch flags.

Built once from Settings and passed down to the dispatcher; nothing reads
ambient configuration after construction.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pydantic import AnyUrl, TypeAdapter, ValidationError

from slack_alerts.core.config import Settings
from slack_alerts.core.exceptions import InvalidWebhookURL
from slack_alerts.jobs.base import BaseDeliveryJob
from slack_alerts.jobs.factory import JobFactory

logger = logging.getLogger(__name__)

_url_adapter = TypeAdapter(AnyUrl)


def is_valid_webhook_url(url: str) -> bool:
    """True if ``url`` is an absolute URL with both a scheme and a host."""
    try:
        parsed = _url_adapter.validate_python(url)
    except ValidationError:
        return False
    return bool(parsed.scheme and parsed.host)


@dataclass(frozen=True)
class WebhookRegistry:
    """
    Read-only view of the configured webhook targets.

    Maps target names to webhook URLs (an empty URL means the target is
    switched off) and carries the defaults the dispatcher falls back to
    when an alert has no override: queue, sync mode, job identifier and
    the HTTP timeout handed to every job it builds.
    """

    webhook_urls: Mapping[str, str] = field(default_factory=dict)
    enabled: bool = True
    default_queue: str = "default"
    default_sync: bool = False
    job_class: str | None = "send_to_slack_channel"
    http_timeout: float = 10.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "webhook_urls", MappingProxyType(dict(self.webhook_urls)))

    @classmethod
    def from_settings(cls, settings: Settings) -> WebhookRegistry:
        return cls(
            webhook_urls=settings.webhook_urls,
            enabled=settings.enabled,
            default_queue=settings.queue,
            default_sync=settings.sync,
            job_class=settings.job,
            http_timeout=settings.http_timeout,
        )

    def is_enabled(self) -> bool:
        return self.enabled

    def resolve(self, target_name: str) -> str | None:
        """
        Return the webhook URL for ``target_name``.

        Returns None when the target is absent or its URL is empty, which
        callers treat as a silent no-op. Raises InvalidWebhookURL when the
        value is non-empty but not an absolute URL.
        """
        url = self.webhook_urls.get(target_name)
        if not url:
            logger.debug("No webhook URL configured for target=%s.", target_name)
            return None

        if not is_valid_webhook_url(url):
            raise InvalidWebhookURL(target_name, url)
        return url

    def resolve_job_class(self) -> type[BaseDeliveryJob]:
        return JobFactory.resolve(self.job_class)
