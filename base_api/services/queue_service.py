"""
Queue accounting service.

Submits messages to the job queue and reports on job and queue state. The
queue backend is the source of truth; nothing is cached here.
"""
import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog

from ..interfaces.queue_interface import IJobQueue, JobRecord, JobState
from ..schemas.queue_schemas import AddMessageResponse, JobStatusResponse, QueueStatsResponse

logger = structlog.get_logger()

PROCESS_MESSAGE_JOB_NAME = "process-test-message"
MESSAGE_QUEUED = "Message added to queue successfully"

STATS_ORDER = (
    JobState.WAITING,
    JobState.ACTIVE,
    JobState.COMPLETED,
    JobState.FAILED,
    JobState.DELAYED,
)


class QueueService:
    """Service for adding messages to the job queue and reading job state."""

    def __init__(self, job_queue: IJobQueue):
        self.job_queue = job_queue

    async def add_message(
        self,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> AddMessageResponse:
        """
        Enqueue a message for background processing.

        Raises:
            InternalError: If the queue rejects the job
        """
        payload = {
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "metadata": metadata,
        }

        job = await self.job_queue.enqueue(PROCESS_MESSAGE_JOB_NAME, payload)

        logger.info("Message added to queue", job_id=job.id, job_name=PROCESS_MESSAGE_JOB_NAME)
        return AddMessageResponse(job_id=job.id, message=MESSAGE_QUEUED, data=payload)

    async def get_job_status(self, job_id: str) -> Optional[JobStatusResponse]:
        """Return the job's current status, or None if the queue has no such job."""
        job = await self.job_queue.get_job(job_id)
        if job is None:
            return None
        return self._to_status(job)

    async def get_queue_stats(self) -> QueueStatsResponse:
        counts = await asyncio.gather(
            *(self.job_queue.count_by_state(state) for state in STATS_ORDER)
        )
        by_state = {state.value: count for state, count in zip(STATS_ORDER, counts)}
        return QueueStatsResponse(**by_state, total=sum(counts))

    @staticmethod
    def _to_status(job: JobRecord) -> JobStatusResponse:
        return JobStatusResponse(
            job_id=job.id,
            state=job.state.value,
            progress=job.progress,
            data=job.data,
            return_value=job.return_value,
            failed_reason=job.failed_reason,
            enqueued_at=job.enqueued_at,
            processed_at=job.started_at,
            finished_at=job.ended_at,
        )
