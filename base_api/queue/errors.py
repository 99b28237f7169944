"""
Typed errors for the job queue adapter.
"""
from ..core.exceptions import InternalError


class QueueError(InternalError):
    """Base error of the queue subsystem."""

    default_message = "Job queue unavailable"


class QueueConfigurationError(QueueError):
    """Queue adapter settings are invalid."""


class QueueEnqueueError(QueueError):
    """Enqueueing a job failed."""
