"""Send alerts to Slack incoming webhooks, inline or through an ARQ queue."""

from slack_alerts.alert import SlackAlert
from slack_alerts.core.exceptions import (
    DeliveryFailed,
    InvalidWebhookURL,
    JobClassNotFound,
    SlackAlertsError,
)
from slack_alerts.core.registry import WebhookRegistry
from slack_alerts.dispatcher import Dispatcher
from slack_alerts.jobs import BaseDeliveryJob, JobFactory, SendToSlackChannelJob
from slack_alerts.models import AlertConfig, DispatchResult
from slack_alerts.queues import ArqJobQueue, InMemoryJobQueue, JobQueue

__all__ = [
    "AlertConfig",
    "ArqJobQueue",
    "BaseDeliveryJob",
    "DeliveryFailed",
    "DispatchResult",
    "Dispatcher",
    "InMemoryJobQueue",
    "InvalidWebhookURL",
    "JobClassNotFound",
    "JobFactory",
    "JobQueue",
    "SendToSlackChannelJob",
    "SlackAlert",
    "SlackAlertsError",
    "WebhookRegistry",
]
