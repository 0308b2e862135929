"""
Job queues: where asynchronously dispatched alerts are handed off.

ArqJobQueue pushes onto Redis for the ARQ worker defined in
``slack_alerts.workers.worker_settings``. InMemoryJobQueue keeps jobs in a
list, for tests and for scripts that want to run the queue themselves.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from arq import ArqRedis, create_pool
from arq.connections import RedisSettings

from slack_alerts.core.exceptions import JobClassNotFound
from slack_alerts.jobs.base import BaseDeliveryJob
from slack_alerts.jobs.factory import JobFactory

logger = logging.getLogger(__name__)

# Name of the ARQ function registered in WorkerSettings.functions.
DELIVERY_FUNCTION = "run_delivery_job"


class JobQueue(ABC):
    """Non-blocking submission of a delivery job to a named queue."""

    @abstractmethod
    async def enqueue(self, job: BaseDeliveryJob, queue_name: str) -> None:
        ...

    async def close(self) -> None:
        """Release connections held by the queue; nothing to do by default."""
        pass


class ArqJobQueue(JobQueue):
    """
    Submits jobs to ARQ.

    The job crosses Redis as (identifier, kwargs); the worker rebuilds it
    through JobFactory, so the job class must be resolvable on the worker.
    """

    def __init__(self, pool: ArqRedis, job_identifier: str | None = None) -> None:
        self.pool = pool
        self.job_identifier = job_identifier

    @classmethod
    async def connect(cls, redis_url: str, job_identifier: str | None = None) -> ArqJobQueue:
        pool = await create_pool(RedisSettings.from_dsn(redis_url))
        return cls(pool, job_identifier)

    def _identifier_for(self, job: BaseDeliveryJob) -> str:
        """
        Pick an identifier the worker can turn back into ``type(job)``.

        Raises JobClassNotFound before anything is queued when no candidate
        round-trips, e.g. for classes defined inside a function.
        """
        job_cls = type(job)
        candidates = [self.job_identifier] if self.job_identifier else []
        candidates += [
            identifier
            for identifier, registered in JobFactory.registered().items()
            if registered is job_cls
        ]
        candidates.append(f"{job_cls.__module__}:{job_cls.__qualname__}")

        for identifier in candidates:
            try:
                if JobFactory.resolve(identifier) is job_cls:
                    return identifier
            except JobClassNotFound:
                continue
        raise JobClassNotFound(candidates[-1])

    async def enqueue(self, job: BaseDeliveryJob, queue_name: str) -> None:
        identifier = self._identifier_for(job)
        arq_job = await self.pool.enqueue_job(
            DELIVERY_FUNCTION,
            identifier,
            job.to_job_kwargs(),
            _queue_name=queue_name,
        )
        logger.info(
            "Queued %s on queue=%s (arq job %s).",
            identifier,
            queue_name,
            getattr(arq_job, "job_id", None),
        )

    async def close(self) -> None:
        await self.pool.close()


class InMemoryJobQueue(JobQueue):
    """FIFO list of (queue_name, job) pairs."""

    def __init__(self) -> None:
        self.jobs: list[tuple[str, BaseDeliveryJob]] = []

    async def enqueue(self, job: BaseDeliveryJob, queue_name: str) -> None:
        self.jobs.append((queue_name, job))
        logger.debug("Buffered %r on queue=%s.", job, queue_name)

    def on_queue(self, queue_name: str) -> list[BaseDeliveryJob]:
        return [job for name, job in self.jobs if name == queue_name]

    async def drain(self) -> int:
        """Run every buffered job in submission order; return how many ran."""
        pending, self.jobs = self.jobs, []
        for _, job in pending:
            await job.handle()
        return len(pending)

    def __len__(self) -> int:
        return len(self.jobs)

    def __iter__(self) -> Any:
        return iter(self.jobs)
