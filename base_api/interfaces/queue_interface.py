"""
Job queue interface for dependency abstraction.
The queue owns job state; services only read it.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Protocol, runtime_checkable


class JobState(str, Enum):
    """Lifecycle stage of a queued job."""

    WAITING = "waiting"
    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"
    DELAYED = "delayed"


@dataclass
class JobRecord:
    """Snapshot of a job as held by the queue backend."""

    id: str
    name: str
    data: Dict[str, Any]
    state: JobState
    progress: Any = 0
    return_value: Any = None
    failed_reason: Optional[str] = None
    enqueued_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None


@runtime_checkable
class IJobQueue(Protocol):
    """Protocol for job queue operations."""

    async def enqueue(self, name: str, payload: Dict[str, Any]) -> JobRecord:
        """
        Add a job to the queue.

        Args:
            name: Job name
            payload: Job data (must be serializable)

        Returns:
            The enqueued job with its queue-assigned id
        """
        ...

    async def get_job(self, job_id: str) -> Optional[JobRecord]:
        """
        Fetch a job by id.

        Returns:
            Job snapshot or None if the queue does not know the id
        """
        ...

    async def count_by_state(self, state: JobState) -> int:
        """
        Count jobs currently in a state.

        Args:
            state: Job state

        Returns:
            Number of jobs
        """
        ...
