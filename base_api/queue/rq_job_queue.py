"""
RQ-backed job queue.

Maps RQ job statuses and registries onto the five job states the service
reports: waiting, active, completed, failed and delayed.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, Optional

from redis import Redis, RedisError
from rq import Queue
from rq.exceptions import NoSuchJobError
from rq.job import Job, JobStatus
from rq.registry import (
    DeferredJobRegistry,
    FailedJobRegistry,
    FinishedJobRegistry,
    ScheduledJobRegistry,
    StartedJobRegistry,
)
from rq.results import Result
import structlog

from ..interfaces.queue_interface import IJobQueue, JobRecord, JobState
from .errors import QueueConfigurationError, QueueEnqueueError, QueueError

logger = structlog.get_logger()

PROCESS_MESSAGE_JOB_PATH = "base_api.queue.jobs.process_message"

_STATE_BY_STATUS = {
    JobStatus.QUEUED: JobState.WAITING,
    JobStatus.STARTED: JobState.ACTIVE,
    JobStatus.FINISHED: JobState.COMPLETED,
    JobStatus.FAILED: JobState.FAILED,
    JobStatus.STOPPED: JobState.FAILED,
    JobStatus.CANCELED: JobState.FAILED,
    JobStatus.SCHEDULED: JobState.DELAYED,
    JobStatus.DEFERRED: JobState.DELAYED,
}


@dataclass(frozen=True)
class RQQueueConfig:
    """RQ adapter configuration."""

    queue_name: str = "test-messages"
    job_timeout_seconds: int = 300
    result_ttl_seconds: int = 86400


def _validate_config(config: RQQueueConfig) -> RQQueueConfig:
    if not (config.queue_name or "").strip():
        raise QueueConfigurationError("queue_name must not be empty")
    if config.job_timeout_seconds <= 0:
        raise QueueConfigurationError("job_timeout_seconds must be > 0")
    if config.result_ttl_seconds < 0:
        raise QueueConfigurationError("result_ttl_seconds must not be negative")
    return config


def _failed_reason(job: Job) -> Optional[str]:
    result = job.latest_result()
    if result is None or result.type != Result.Type.FAILED:
        return None
    exc_string = (result.exc_string or "").strip()
    # Last traceback line carries the exception type and message
    return exc_string.splitlines()[-1] if exc_string else None


class RQJobQueue(IJobQueue):
    """Job queue adapter over RQ."""

    def __init__(self, connection: Redis, config: Optional[RQQueueConfig] = None):
        self.config = _validate_config(config or RQQueueConfig())
        self.connection = connection
        self.queue = Queue(name=self.config.queue_name, connection=connection)
        logger.info(
            "RQ queue initialized",
            queue=self.config.queue_name,
            job_timeout_seconds=self.config.job_timeout_seconds,
        )

    def _to_record(self, job: Job) -> JobRecord:
        status = job.get_status(refresh=False)
        data = job.args[0] if job.args else {}
        return JobRecord(
            id=job.id,
            name=job.meta.get("name") or job.description or "",
            data=data,
            state=_STATE_BY_STATUS.get(status, JobState.WAITING),
            progress=job.meta.get("progress", 0),
            return_value=job.return_value(),
            failed_reason=_failed_reason(job),
            enqueued_at=job.enqueued_at,
            started_at=job.started_at,
            ended_at=job.ended_at,
        )

    def _enqueue(self, name: str, payload: Dict[str, Any]) -> JobRecord:
        job = self.queue.enqueue(
            PROCESS_MESSAGE_JOB_PATH,
            payload,
            job_timeout=self.config.job_timeout_seconds,
            result_ttl=self.config.result_ttl_seconds,
            description=name,
            meta={"name": name, "progress": 0},
        )
        return self._to_record(job)

    async def enqueue(self, name: str, payload: Dict[str, Any]) -> JobRecord:
        try:
            record = await asyncio.to_thread(self._enqueue, name, payload)
        except RedisError as e:
            logger.error("Failed to enqueue job", queue=self.config.queue_name, job_name=name, error=str(e))
            raise QueueEnqueueError("Failed to add job to queue", original_error=e) from e

        logger.info("Job enqueued", queue=self.config.queue_name, job_id=record.id, job_name=name)
        return record

    def _get_job(self, job_id: str) -> Optional[JobRecord]:
        try:
            job = Job.fetch(job_id, connection=self.connection)
        except (NoSuchJobError, ValueError):
            # Ids outside [A-Za-z0-9_-] raise ValueError and can never name a job
            return None
        return self._to_record(job)

    async def get_job(self, job_id: str) -> Optional[JobRecord]:
        try:
            return await asyncio.to_thread(self._get_job, job_id)
        except RedisError as e:
            logger.error("Failed to fetch job", job_id=job_id, error=str(e))
            raise QueueError("Failed to fetch job", original_error=e) from e

    def _count(self, state: JobState) -> int:
        if state == JobState.WAITING:
            return self.queue.count
        if state == JobState.ACTIVE:
            return StartedJobRegistry(queue=self.queue).count
        if state == JobState.COMPLETED:
            return FinishedJobRegistry(queue=self.queue).count
        if state == JobState.FAILED:
            return FailedJobRegistry(queue=self.queue).count
        if state == JobState.DELAYED:
            return (
                ScheduledJobRegistry(queue=self.queue).count
                + DeferredJobRegistry(queue=self.queue).count
            )
        raise ValueError(f"Unknown job state: {state}")

    async def count_by_state(self, state: JobState) -> int:
        try:
            return await asyncio.to_thread(self._count, JobState(state))
        except RedisError as e:
            logger.error("Failed to count jobs", state=str(state), error=str(e))
            raise QueueError("Failed to count jobs", original_error=e) from e
