"""Data models shared by the alert builder and the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class DispatchResult(StrEnum):
    """Terminal states of a dispatch that did not raise."""

    NO_OP = "NO_OP"                        # disabled, or target URL empty/absent
    DISPATCHED_SYNC = "DISPATCHED_SYNC"    # job ran inline before returning
    DISPATCHED_ASYNC = "DISPATCHED_ASYNC"  # job handed to the queue


@dataclass(frozen=True, slots=True)
class AlertConfig:
    """Per-call overrides accumulated by the fluent builder."""

    target_name: str = "default"
    channel: str | None = None
    username: str | None = None
    icon_url: str | None = None
    icon_emoji: str | None = None
    queue: str | None = None
    sync: bool | None = None

    def job_overrides(self) -> dict[str, Any]:
        """Cosmetic overrides forwarded to the delivery job."""
        return {
            "channel": self.channel,
            "username": self.username,
            "icon_url": self.icon_url,
            "icon_emoji": self.icon_emoji,
        }


def text_payload(text: str) -> dict[str, Any]:
    return {"text": text}


def blocks_payload(blocks: list[dict[str, Any]]) -> dict[str, Any]:
    return {"blocks": list(blocks)}
