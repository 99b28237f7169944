"""
Job queue schemas.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field, StrictStr

from .base import CamelModel, RequestModel


class AddMessageRequest(RequestModel):
    message: StrictStr = Field(..., min_length=1, description="Message to process")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Arbitrary metadata")


class AddMessageResponse(CamelModel):
    job_id: str
    message: str
    data: Dict[str, Any]


class JobStatusResponse(CamelModel):
    """Direct projection of queue-held job fields."""

    job_id: str
    state: str
    progress: Any = 0
    data: Dict[str, Any]
    return_value: Any = None
    failed_reason: Optional[str] = None
    enqueued_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None


class QueueStatsResponse(CamelModel):
    waiting: int = 0
    active: int = 0
    completed: int = 0
    failed: int = 0
    delayed: int = 0
    total: int = 0
