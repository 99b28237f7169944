"""
Queue worker entry point.

Runs an RQ worker on the message queue; jobs execute base_api.queue.jobs.
"""
import redis
from rq import Queue, Worker
import structlog

from .core.config import get_settings
from .core.logging_config import configure_logging
from .core.redis import RedisManager

logger = structlog.get_logger()


def main() -> None:
    settings = get_settings()
    configure_logging(settings.DEBUG)

    redis_manager = RedisManager.from_settings(settings)
    connection = redis_manager.initialize()
    try:
        connection.ping()
    except redis.RedisError as e:
        logger.error("Redis unavailable for worker", error=str(e))
        raise SystemExit("Redis unavailable") from e

    try:
        logger.info("Worker starting", queue=settings.QUEUE_NAME)
        queue = Queue(name=settings.QUEUE_NAME, connection=connection)
        worker = Worker([queue], connection=connection)
        worker.work(with_scheduler=True)
    except KeyboardInterrupt:
        logger.info("Worker stopped by signal")
    finally:
        redis_manager.close()
        logger.info("Worker shut down")


if __name__ == "__main__":
    main()
