"""
ARQ Worker Settings — executes queued Slack alerts.

Usage:
    arq slack_alerts.workers.worker_settings.WorkerSettings
"""

from __future__ import annotations

import logging
from typing import Any

from arq.connections import RedisSettings

from slack_alerts.core.config import settings
from slack_alerts.jobs.factory import JobFactory

logger = logging.getLogger(__name__)


async def run_delivery_job(ctx: dict, job_identifier: str, job_kwargs: dict[str, Any]) -> None:
    """ARQ job: rebuild a queued delivery job and run it."""
    job = JobFactory.create(job_identifier, **job_kwargs)
    logger.info("Running %s (arq job %s).", job_identifier, ctx.get("job_id"))
    await job.handle()


async def startup(ctx: dict) -> None:
    """Called on worker startup."""
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Slack alerts worker listening on queue=%s.", settings.queue)


async def shutdown(ctx: dict) -> None:
    """Called on worker shutdown."""
    pass


class WorkerSettings:
    """ARQ worker configuration."""

    functions = [
        run_delivery_job,
    ]

    on_startup = startup
    on_shutdown = shutdown

    redis_settings = RedisSettings.from_dsn(settings.redis_url)
    queue_name = settings.queue
