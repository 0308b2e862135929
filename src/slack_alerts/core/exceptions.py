"""
Exception hierarchy for slack-alerts.

Only configuration problems are raised before a job exists. Transport
failures surface as ``DeliveryFailed`` and reach the caller only when the
alert was delivered inline.
"""

from __future__ import annotations

from typing import Any


class SlackAlertsError(Exception):
    """Base exception for all slack-alerts errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidWebhookURL(SlackAlertsError):
    """A target resolved to a non-empty value that is not an absolute URL."""

    def __init__(self, target: str, url: str) -> None:
        super().__init__(
            f"Webhook URL configured for target '{target}' is not a valid URL: {url!r}",
            details={"target": target, "url": url},
        )


class JobClassNotFound(SlackAlertsError):
    """The configured delivery job identifier does not name a usable job."""

    def __init__(self, identifier: str | None) -> None:
        super().__init__(
            f"Delivery job {identifier!r} does not exist or is not a concrete delivery job",
            details={"identifier": identifier},
        )


class DeliveryFailed(SlackAlertsError):
    """The webhook POST failed (connection error or non-2xx response)."""

    def __init__(self, url: str, message: str = "", status_code: int | None = None) -> None:
        super().__init__(
            f"Delivery to Slack webhook failed: {message}",
            details={"url": url, "status_code": status_code},
        )
        self.status_code = status_code
