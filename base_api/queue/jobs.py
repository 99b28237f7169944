"""
Worker-side job functions executed by RQ.
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from rq import get_current_job
import structlog

from ..core.config import get_settings

logger = structlog.get_logger()


def _report_progress(progress: int) -> None:
    job = get_current_job()
    if job is None:
        return
    job.meta["progress"] = progress
    job.save_meta()


def process_message(payload: Dict[str, Any], delay_seconds: Optional[float] = None) -> Dict[str, Any]:
    """Process a queued test message and return a processing receipt."""
    job = get_current_job()
    job_id = job.id if job else None
    message = payload.get("message")

    logger.info("Processing job", job_id=job_id, message=message)
    _report_progress(0)

    if delay_seconds is None:
        delay_seconds = get_settings().JOB_SIMULATED_DELAY_SECONDS
    _report_progress(50)
    time.sleep(delay_seconds)  # simulated work

    _report_progress(100)
    logger.info("Successfully processed job", job_id=job_id)

    return {
        "processed": True,
        "message": message,
        "timestamp": payload.get("timestamp"),
        "processedAt": datetime.now(timezone.utc).isoformat(),
    }
