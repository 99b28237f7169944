"""
Service wiring.

Every collaborator is built explicitly by build_container; nothing is looked up
by type at runtime. Tests pass their own collaborators in place of the
database and Redis backed ones.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine
import structlog

from .core.config import Settings
from .core.database import close_db_connections, create_engine_from_settings, create_session_factory
from .core.redis import RedisManager
from .core.security import PasswordHasher, TokenIssuer
from .interfaces.queue_interface import IJobQueue
from .interfaces.repository_interface import IUserRepository
from .interfaces.security_interface import IPasswordHasher, IResetTokenSender
from .queue.rq_job_queue import RQJobQueue, RQQueueConfig
from .repositories.user_repository import UserRepository
from .services.auth import CredentialService, LoggingResetTokenSender
from .services.profile_service import ProfileService
from .services.queue_service import QueueService

logger = structlog.get_logger()


@dataclass
class ServiceContainer:
    """Wired services plus the resources they hold open."""

    settings: Settings
    user_repository: IUserRepository
    job_queue: IJobQueue
    password_hasher: IPasswordHasher
    token_issuer: TokenIssuer
    credential_service: CredentialService
    profile_service: ProfileService
    queue_service: QueueService
    engine: Optional[AsyncEngine] = None
    redis_manager: Optional[RedisManager] = None

    async def close(self) -> None:
        if self.redis_manager:
            self.redis_manager.close()
        await close_db_connections(self.engine)
        logger.info("Service container closed")


def build_container(
    settings: Settings,
    *,
    user_repository: Optional[IUserRepository] = None,
    job_queue: Optional[IJobQueue] = None,
    password_hasher: Optional[IPasswordHasher] = None,
    reset_token_sender: Optional[IResetTokenSender] = None,
) -> ServiceContainer:
    """
    Build the service graph.

    Args:
        settings: Application settings
        user_repository: User store; defaults to the SQLAlchemy repository on DATABASE_URL
        job_queue: Job queue; defaults to RQ on REDIS_URL
        password_hasher: Defaults to bcrypt with BCRYPT_ROUNDS
        reset_token_sender: Defaults to a sender that only logs

    Returns:
        Wired container
    """
    engine = None
    if user_repository is None:
        engine = create_engine_from_settings(settings)
        user_repository = UserRepository(create_session_factory(engine))

    redis_manager = None
    if job_queue is None:
        redis_manager = RedisManager.from_settings(settings)
        job_queue = RQJobQueue(
            redis_manager.initialize(),
            RQQueueConfig(
                queue_name=settings.QUEUE_NAME,
                job_timeout_seconds=settings.JOB_TIMEOUT_SECONDS,
                result_ttl_seconds=settings.JOB_RESULT_TTL_SECONDS,
            ),
        )

    password_hasher = password_hasher or PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    token_issuer = TokenIssuer.from_settings(settings)
    reset_token_sender = reset_token_sender or LoggingResetTokenSender(include_token=settings.DEBUG)

    container = ServiceContainer(
        settings=settings,
        user_repository=user_repository,
        job_queue=job_queue,
        password_hasher=password_hasher,
        token_issuer=token_issuer,
        credential_service=CredentialService(
            user_repository=user_repository,
            password_hasher=password_hasher,
            token_issuer=token_issuer,
            reset_token_sender=reset_token_sender,
        ),
        profile_service=ProfileService(user_repository),
        queue_service=QueueService(job_queue),
        engine=engine,
        redis_manager=redis_manager,
    )
    logger.info(
        "Service container built",
        user_repository=type(user_repository).__name__,
        job_queue=type(job_queue).__name__,
    )
    return container
