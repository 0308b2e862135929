"""Delivery jobs package."""

from slack_alerts.jobs.base import BaseDeliveryJob
from slack_alerts.jobs.factory import JobFactory
from slack_alerts.jobs.send_to_slack_channel import SendToSlackChannelJob

__all__ = [
    "BaseDeliveryJob",
    "JobFactory",
    "SendToSlackChannelJob",
]
