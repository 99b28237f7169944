"""
Job queue adapter and worker-side job functions.
"""
from .errors import QueueConfigurationError, QueueEnqueueError, QueueError
from .rq_job_queue import PROCESS_MESSAGE_JOB_PATH, RQJobQueue, RQQueueConfig

__all__ = [
    "PROCESS_MESSAGE_JOB_PATH",
    "QueueConfigurationError",
    "QueueEnqueueError",
    "QueueError",
    "RQJobQueue",
    "RQQueueConfig",
]
