"""
Test queue endpoints: submit messages and inspect job and queue state.
"""
from fastapi import Request

from ..core.exceptions import NotFoundError
from ..schemas.queue_schemas import AddMessageResponse, JobStatusResponse, QueueStatsResponse
from ..schemas.validation import validate_add_message
from .deps import get_container, validated_body


async def add_message(request: Request) -> AddMessageResponse:
    data = await validated_body(request, validate_add_message)
    return await get_container(request).queue_service.add_message(data.message, data.metadata)


async def get_job_status(request: Request, job_id: str) -> JobStatusResponse:
    """Current state of a job. 404 when the queue does not know the id."""
    job_status = await get_container(request).queue_service.get_job_status(job_id)
    if job_status is None:
        raise NotFoundError("Job not found")
    return job_status


async def get_queue_stats(request: Request) -> QueueStatsResponse:
    return await get_container(request).queue_service.get_queue_stats()
