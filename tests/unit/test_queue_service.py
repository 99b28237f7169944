"""
Tests for QueueService with a mocked job queue.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from base_api.core.exceptions import InternalError
from base_api.interfaces.queue_interface import JobRecord, JobState
from base_api.queue.errors import QueueEnqueueError, QueueError
from base_api.services.queue_service import MESSAGE_QUEUED, PROCESS_MESSAGE_JOB_NAME, QueueService


@pytest.fixture
def job_queue():
    queue = AsyncMock()
    queue.enqueue.side_effect = lambda name, payload: JobRecord(
        id="job-1", name=name, data=payload, state=JobState.WAITING
    )
    return queue


@pytest.fixture
def queue_service(job_queue):
    return QueueService(job_queue)


@pytest.mark.asyncio
async def test_add_message_builds_payload(queue_service, job_queue):
    result = await queue_service.add_message("hello", {"source": "test"})

    assert result.job_id == "job-1"
    assert result.message == MESSAGE_QUEUED
    assert result.data["message"] == "hello"
    assert result.data["metadata"] == {"source": "test"}
    assert datetime.fromisoformat(result.data["timestamp"]).tzinfo is not None

    name, payload = job_queue.enqueue.call_args[0]
    assert name == PROCESS_MESSAGE_JOB_NAME
    assert payload == result.data


@pytest.mark.asyncio
async def test_add_message_without_metadata(queue_service):
    result = await queue_service.add_message("hello")

    assert result.data["metadata"] is None


@pytest.mark.asyncio
async def test_add_message_enqueue_failure(queue_service, job_queue):
    job_queue.enqueue.side_effect = QueueEnqueueError("Failed to add job to queue")

    with pytest.raises(InternalError):
        await queue_service.add_message("hello")


@pytest.mark.asyncio
async def test_get_job_status_absent(queue_service, job_queue):
    job_queue.get_job.return_value = None

    assert await queue_service.get_job_status("missing") is None


@pytest.mark.asyncio
async def test_get_job_status_projection(queue_service, job_queue):
    enqueued = datetime(2024, 1, 1, tzinfo=timezone.utc)
    started = datetime(2024, 1, 1, 0, 0, 1, tzinfo=timezone.utc)
    ended = datetime(2024, 1, 1, 0, 0, 2, tzinfo=timezone.utc)
    job_queue.get_job.return_value = JobRecord(
        id="job-1",
        name=PROCESS_MESSAGE_JOB_NAME,
        data={"message": "hello", "timestamp": "t", "metadata": None},
        state=JobState.COMPLETED,
        progress=100,
        return_value={"processed": True},
        enqueued_at=enqueued,
        started_at=started,
        ended_at=ended,
    )

    status = await queue_service.get_job_status("job-1")

    assert status.job_id == "job-1"
    assert status.state == "completed"
    assert status.progress == 100
    assert status.data["message"] == "hello"
    assert status.return_value == {"processed": True}
    assert status.failed_reason is None
    assert status.enqueued_at == enqueued
    assert status.processed_at == started
    assert status.finished_at == ended


@pytest.mark.asyncio
async def test_get_queue_stats(queue_service, job_queue):
    counts = {
        JobState.WAITING: 3,
        JobState.ACTIVE: 1,
        JobState.COMPLETED: 5,
        JobState.FAILED: 2,
        JobState.DELAYED: 0,
    }
    job_queue.count_by_state.side_effect = lambda state: counts[state]

    stats = await queue_service.get_queue_stats()

    assert stats.waiting == 3
    assert stats.active == 1
    assert stats.completed == 5
    assert stats.failed == 2
    assert stats.delayed == 0
    assert stats.total == 11
    assert job_queue.count_by_state.await_count == 5


@pytest.mark.asyncio
async def test_get_queue_stats_fails_when_any_count_fails(queue_service, job_queue):
    def count(state):
        if state == JobState.FAILED:
            raise QueueError("Failed to count jobs")
        return 0

    job_queue.count_by_state.side_effect = count

    with pytest.raises(QueueError):
        await queue_service.get_queue_stats()
