"""
Dispatcher — decides whether and how an alert is delivered.

Flow (linear, any failed check short-circuits the rest):
  Step 1 → Alerts disabled?            → NO_OP
  Step 2 → Resolve the job class        → JobClassNotFound
  Step 3 → Resolve the target URL       → NO_OP (empty) / InvalidWebhookURL
  Step 4 → Build the delivery job
  Step 5 → Pick sync/async and the queue name (override wins over registry)
  Step 6 → Await job.handle() inline, or enqueue it

The job class is checked before the URL, so a broken job identifier is
reported even for a target whose URL is empty.
"""

from __future__ import annotations

import logging
from typing import Any

from slack_alerts.core.registry import WebhookRegistry
from slack_alerts.models import AlertConfig, DispatchResult
from slack_alerts.queues import JobQueue

logger = logging.getLogger(__name__)


class Dispatcher:
    """Hands configured alerts to a delivery job, inline or through a queue."""

    def __init__(self, registry: WebhookRegistry, queue: JobQueue) -> None:
        self.registry = registry
        self.queue = queue

    async def dispatch(self, config: AlertConfig, payload: dict[str, Any]) -> DispatchResult:
        if not self.registry.is_enabled():
            logger.debug("Slack alerts disabled. Alert to target=%s skipped.", config.target_name)
            return DispatchResult.NO_OP

        job_cls = self.registry.resolve_job_class()

        url = self.registry.resolve(config.target_name)
        if url is None:
            logger.info("No webhook URL for target=%s. Alert skipped.", config.target_name)
            return DispatchResult.NO_OP

        job = job_cls(url, payload, timeout=self.registry.http_timeout, **config.job_overrides())

        sync = config.sync if config.sync is not None else self.registry.default_sync
        if sync:
            logger.info("Delivering %s to target=%s inline.", job_cls.__name__, config.target_name)
            await job.handle()
            return DispatchResult.DISPATCHED_SYNC

        queue_name = config.queue if config.queue is not None else self.registry.default_queue
        await self.queue.enqueue(job, queue_name)
        return DispatchResult.DISPATCHED_ASYNC

    async def aclose(self) -> None:
        """Release the queue's connections."""
        await self.queue.close()
