"""Shared fixtures: an in-memory queue and recording delivery jobs."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from slack_alerts.core.exceptions import DeliveryFailed
from slack_alerts.core.registry import WebhookRegistry
from slack_alerts.dispatcher import Dispatcher
from slack_alerts.jobs.base import BaseDeliveryJob
from slack_alerts.jobs.factory import JobFactory
from slack_alerts.queues import InMemoryJobQueue
from slack_alerts.alert import SlackAlert

VALID_URL = "https://test-domain.com"


class RecordingJob(BaseDeliveryJob):
    """Delivery job that records itself instead of calling Slack."""

    handled: list[BaseDeliveryJob] = []

    async def handle(self) -> None:
        RecordingJob.handled.append(self)


class FailingJob(BaseDeliveryJob):
    async def handle(self) -> None:
        raise DeliveryFailed(self.url, "boom", 500)


@pytest.fixture(autouse=True)
def _recording_jobs() -> Iterator[None]:
    """Register the test jobs and clear recorded deliveries around each test."""
    JobFactory.register("recording", RecordingJob)
    JobFactory.register("failing", FailingJob)
    RecordingJob.handled.clear()
    yield
    RecordingJob.handled.clear()
    JobFactory.unregister("recording")
    JobFactory.unregister("failing")


def make_registry(**overrides) -> WebhookRegistry:
    options = {
        "webhook_urls": {"default": VALID_URL},
        "job_class": "recording",
    }
    options.update(overrides)
    return WebhookRegistry(**options)


@pytest.fixture
def queue() -> InMemoryJobQueue:
    return InMemoryJobQueue()


@pytest.fixture
def make_alert(queue: InMemoryJobQueue):
    """Build a SlackAlert over a fresh registry and the shared in-memory queue."""

    def _make(**registry_overrides) -> SlackAlert:
        return SlackAlert(Dispatcher(make_registry(**registry_overrides), queue))

    return _make
