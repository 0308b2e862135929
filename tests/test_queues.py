"""Tests for the in-memory and ARQ job queues."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from slack_alerts.core.exceptions import JobClassNotFound
from slack_alerts.jobs.factory import JobFactory
from slack_alerts.jobs.send_to_slack_channel import SendToSlackChannelJob
from slack_alerts.queues import DELIVERY_FUNCTION, ArqJobQueue, InMemoryJobQueue
from slack_alerts.workers.worker_settings import run_delivery_job

from conftest import VALID_URL, RecordingJob


class Notifications:
    class NestedJob(RecordingJob):
        """Job class reachable only through its dotted qualname."""


def _pool() -> MagicMock:
    pool = MagicMock()
    pool.enqueue_job = AsyncMock(return_value=MagicMock(job_id="abc123"))
    pool.close = AsyncMock()
    return pool


class TestInMemoryJobQueue:

    @pytest.mark.asyncio
    async def test_drain_runs_jobs_in_order(self):
        queue = InMemoryJobQueue()
        first = RecordingJob(VALID_URL, {"text": "one"})
        second = RecordingJob(VALID_URL, {"text": "two"})
        await queue.enqueue(first, "default")
        await queue.enqueue(second, "other")

        assert await queue.drain() == 2
        assert RecordingJob.handled == [first, second]
        assert len(queue) == 0

    @pytest.mark.asyncio
    async def test_on_queue(self):
        queue = InMemoryJobQueue()
        job = RecordingJob(VALID_URL, {"text": "one"})
        await queue.enqueue(job, "my-queue")

        assert queue.on_queue("my-queue") == [job]
        assert queue.on_queue("default") == []


class TestArqJobQueue:

    @pytest.mark.asyncio
    async def test_enqueues_registered_identifier(self):
        pool = _pool()
        job = RecordingJob(VALID_URL, {"text": "hi"}, channel="#ops")

        await ArqJobQueue(pool).enqueue(job, "my-queue")

        pool.enqueue_job.assert_awaited_once_with(
            DELIVERY_FUNCTION,
            "recording",
            job.to_job_kwargs(),
            _queue_name="my-queue",
        )

    @pytest.mark.asyncio
    async def test_explicit_identifier_wins(self):
        JobFactory.register("custom", SendToSlackChannelJob)
        try:
            pool = _pool()
            job = SendToSlackChannelJob(VALID_URL, {"text": "hi"})

            await ArqJobQueue(pool, job_identifier="custom").enqueue(job, "default")

            assert pool.enqueue_job.await_args.args[1] == "custom"
        finally:
            JobFactory.unregister("custom")

    @pytest.mark.asyncio
    async def test_explicit_identifier_for_other_class_is_skipped(self):
        pool = _pool()
        job = RecordingJob(VALID_URL, {"text": "hi"})

        await ArqJobQueue(pool, job_identifier="send_to_slack_channel").enqueue(job, "default")

        assert pool.enqueue_job.await_args.args[1] == "recording"

    @pytest.mark.asyncio
    async def test_nested_job_uses_import_path(self):
        pool = _pool()
        job = Notifications.NestedJob(VALID_URL, {"text": "hi"})

        await ArqJobQueue(pool).enqueue(job, "default")

        identifier = pool.enqueue_job.await_args.args[1]
        assert identifier == f"{__name__}:Notifications.NestedJob"

        await run_delivery_job({}, identifier, pool.enqueue_job.await_args.args[2])
        assert len(RecordingJob.handled) == 1
        assert type(RecordingJob.handled[0]) is Notifications.NestedJob

    @pytest.mark.asyncio
    async def test_local_job_rejected_before_queueing(self):
        class AdHocJob(RecordingJob):
            pass

        pool = _pool()
        with pytest.raises(JobClassNotFound):
            await ArqJobQueue(pool).enqueue(AdHocJob(VALID_URL, {"text": "hi"}), "default")

        pool.enqueue_job.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_close(self):
        pool = _pool()
        await ArqJobQueue(pool).close()
        pool.close.assert_awaited_once()
