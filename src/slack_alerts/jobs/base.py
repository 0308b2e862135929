"""Abstract base class for all delivery jobs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

# Wire keys for the cosmetic overrides, in the order Slack documents them.
OVERRIDE_FIELDS = ("channel", "username", "icon_url", "icon_emoji")


class BaseDeliveryJob(ABC):
    """
    Contract for the unit of work that delivers one alert to one webhook.

    The URL and payload are injected via __init__ and have already been
    validated by the dispatcher. Subclasses only implement ``handle``, which
    is awaited inline for synchronous delivery or by the ARQ worker for
    queued delivery.

    Jobs must be rebuildable from ``to_job_kwargs()`` so they can cross the
    Redis queue as plain JSON.
    """

    def __init__(
        self,
        url: str,
        payload: dict[str, Any],
        *,
        channel: str | None = None,
        username: str | None = None,
        icon_url: str | None = None,
        icon_emoji: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.url = url
        self.payload = payload
        self.channel = channel
        self.username = username
        self.icon_url = icon_url
        self.icon_emoji = icon_emoji
        # Transport timeout in seconds; None leaves the choice to the job.
        self.timeout = timeout

    def to_payload(self) -> dict[str, Any]:
        """The JSON body POSTed to the webhook: content plus any set overrides."""
        body = dict(self.payload)
        for name in OVERRIDE_FIELDS:
            value = getattr(self, name)
            if value is not None:
                body[name] = value
        return body

    def to_job_kwargs(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "payload": self.payload,
            **{name: getattr(self, name) for name in OVERRIDE_FIELDS},
            "timeout": self.timeout,
        }

    @abstractmethod
    async def handle(self) -> None:
        """Perform the delivery. Raise on failure; the result is not inspected."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.url!r}, payload={self.to_payload()!r})"
