"""
SlackAlert — fluent entry point.

Each configuration method returns a new SlackAlert, so a partially
configured alert can be reused without leaking overrides between chains:

    alert = SlackAlert(dispatcher)
    await alert.to("marketing").to_channel("#launches").message("Shipped!")
    await alert.sync().blocks([{"type": "divider"}])
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from slack_alerts.core.config import Settings, get_settings
from slack_alerts.core.registry import WebhookRegistry
from slack_alerts.dispatcher import Dispatcher
from slack_alerts.models import AlertConfig, DispatchResult, blocks_payload, text_payload
from slack_alerts.queues import ArqJobQueue, JobQueue


class SlackAlert:
    """Immutable builder over an AlertConfig, bound to a Dispatcher."""

    def __init__(self, dispatcher: Dispatcher, config: AlertConfig | None = None) -> None:
        self.dispatcher = dispatcher
        self.config = config or AlertConfig()

    @classmethod
    async def from_settings(
        cls,
        settings: Settings | None = None,
        queue: JobQueue | None = None,
    ) -> SlackAlert:
        """
        Build a SlackAlert from Settings.

        Without an explicit queue, an ARQ pool is opened on
        ``settings.redis_url``. The returned alert owns that pool: close it
        with ``aclose()`` or use the alert as an async context manager.
        """
        settings = settings or get_settings()
        registry = WebhookRegistry.from_settings(settings)
        if queue is None:
            queue = await ArqJobQueue.connect(settings.redis_url, settings.job)
        return cls(Dispatcher(registry, queue))

    async def aclose(self) -> None:
        """Close the dispatcher's queue. Shared by every alert derived from this one."""
        await self.dispatcher.aclose()

    async def __aenter__(self) -> SlackAlert:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _with(self, **changes: Any) -> SlackAlert:
        return SlackAlert(self.dispatcher, replace(self.config, **changes))

    # ── Configuration ─────────────────────────────────────────────────

    def to(self, target_name: str) -> SlackAlert:
        return self._with(target_name=target_name)

    def to_channel(self, channel: str) -> SlackAlert:
        return self._with(channel=channel)

    def on_queue(self, queue_name: str) -> SlackAlert:
        return self._with(queue=queue_name)

    def sync(self, flag: bool = True) -> SlackAlert:
        return self._with(sync=flag)

    def with_username(self, username: str) -> SlackAlert:
        return self._with(username=username)

    def with_icon_url(self, icon_url: str) -> SlackAlert:
        return self._with(icon_url=icon_url)

    def with_icon_emoji(self, icon_emoji: str) -> SlackAlert:
        return self._with(icon_emoji=icon_emoji)

    # ── Terminal operations ───────────────────────────────────────────

    async def message(self, text: str) -> DispatchResult:
        """Send plain text."""
        return await self.dispatcher.dispatch(self.config, text_payload(text))

    async def blocks(self, blocks: list[dict[str, Any]]) -> DispatchResult:
        """Send Slack Block Kit blocks."""
        return await self.dispatcher.dispatch(self.config, blocks_payload(blocks))
