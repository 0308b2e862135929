"""
JobFactory: maps a configured job identifier to a delivery job class.

Flow:
  Step 1 → Look the identifier up in the job registry
  Step 2 → Fall back to importing it as a dotted path ("pkg.mod:Class")
  Step 3 → Accept only concrete BaseDeliveryJob subclasses

Usage:
    job_cls = JobFactory.resolve(settings.job)
    job = job_cls(url, payload, channel="#ops")
"""

from __future__ import annotations

import importlib
import inspect
import logging
from typing import Any

from slack_alerts.core.exceptions import JobClassNotFound
from slack_alerts.jobs.base import BaseDeliveryJob
from slack_alerts.jobs.send_to_slack_channel import SendToSlackChannelJob

logger = logging.getLogger(__name__)

# ── Registry: maps job identifier → concrete job class ────────────────

_JOB_REGISTRY: dict[str, type[BaseDeliveryJob]] = {
    "send_to_slack_channel": SendToSlackChannelJob,
}


def _import_job_class(path: str) -> Any:
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        return None
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        logger.debug("Could not import module %s for job %s.", module_name, path)
        return None

    # "module:Outer.Inner" names a nested class.
    target: Any = module
    for part in attr.split("."):
        target = getattr(target, part, None)
        if target is None:
            return None
    return target


def _is_concrete_job(candidate: Any) -> bool:
    return (
        inspect.isclass(candidate)
        and issubclass(candidate, BaseDeliveryJob)
        and not inspect.isabstract(candidate)
    )


class JobFactory:
    """
    Resolves and instantiates delivery jobs by identifier.

    Usage:
        JobFactory.register("audit", AuditJob)
        job = JobFactory.create("audit", url, {"text": "hi"})
    """

    @staticmethod
    def register(identifier: str, job_cls: type[BaseDeliveryJob]) -> None:
        """Register ``job_cls`` under ``identifier``, replacing any previous entry."""
        if not _is_concrete_job(job_cls):
            raise TypeError(f"{job_cls!r} is not a concrete BaseDeliveryJob subclass")
        _JOB_REGISTRY[identifier] = job_cls

    @staticmethod
    def unregister(identifier: str) -> None:
        _JOB_REGISTRY.pop(identifier, None)

    @staticmethod
    def registered() -> dict[str, type[BaseDeliveryJob]]:
        return dict(_JOB_REGISTRY)

    @staticmethod
    def resolve(identifier: str | None) -> type[BaseDeliveryJob]:
        """
        Return the job class for ``identifier``.

        Raises JobClassNotFound for an empty or None identifier, for names
        that are neither registered nor importable, and for anything that is
        not a concrete BaseDeliveryJob subclass.
        """
        if not identifier:
            raise JobClassNotFound(identifier)

        job_cls: Any = _JOB_REGISTRY.get(identifier)
        if job_cls is None and ("." in identifier or ":" in identifier):
            job_cls = _import_job_class(identifier)

        if not _is_concrete_job(job_cls):
            raise JobClassNotFound(identifier)
        return job_cls

    @staticmethod
    def create(identifier: str | None, url: str, payload: dict[str, Any], **overrides: Any) -> BaseDeliveryJob:
        job_cls = JobFactory.resolve(identifier)
        return job_cls(url, payload, **overrides)
