"""
Slack webhook delivery job.

POSTs the assembled payload to a Slack incoming webhook with httpx.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from slack_alerts.core.config import settings
from slack_alerts.core.exceptions import DeliveryFailed
from slack_alerts.jobs.base import BaseDeliveryJob

logger = logging.getLogger(__name__)


class SendToSlackChannelJob(BaseDeliveryJob):
    """
    Default delivery job.

    A pre-built ``httpx.AsyncClient`` can be injected (tests, connection
    reuse); otherwise a short-lived client is opened per delivery. Jobs built
    by the dispatcher receive the registry's timeout; a job constructed
    without one falls back to ``settings.http_timeout``.
    """

    def __init__(
        self,
        url: str,
        payload: dict[str, Any],
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        **overrides: Any,
    ) -> None:
        super().__init__(
            url,
            payload,
            timeout=timeout if timeout is not None else settings.http_timeout,
            **overrides,
        )
        self.client = client

    async def handle(self) -> None:
        try:
            if self.client is not None:
                await self._post(self.client)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    await self._post(client)
        except httpx.HTTPStatusError as exc:
            logger.error("Slack webhook rejected alert: %s", exc)
            raise DeliveryFailed(self.url, str(exc), exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            logger.error("Failed to send Slack alert: %s", exc)
            raise DeliveryFailed(self.url, str(exc)) from exc

        logger.info("Slack alert sent successfully.")

    async def _post(self, client: httpx.AsyncClient) -> None:
        response = await client.post(self.url, json=self.to_payload())
        response.raise_for_status()
