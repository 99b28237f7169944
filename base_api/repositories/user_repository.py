"""
User repository implementation following the Repository pattern.
SQLAlchemy-backed user store; each operation runs in its own session.
"""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
import structlog

from ..core.exceptions import ConflictError, InternalError
from ..interfaces.repository_interface import IUserRepository
from ..models.base import utcnow
from ..models.user import User, generate_user_id

logger = structlog.get_logger()


def _is_unique_violation(error: IntegrityError) -> bool:
    return "unique" in str(error.orig).lower()


class UserRepository(IUserRepository):
    """Repository for user data access operations."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def _fetch_one(self, query, operation: str) -> Optional[User]:
        try:
            async with self.session_factory() as db:
                result = await db.execute(query)
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("User lookup failed", operation=operation, error=str(e))
            raise InternalError("Failed to load user", original_error=e) from e

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return await self._fetch_one(select(User).where(User.id == user_id), "get_by_id")

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._fetch_one(select(User).where(User.email == email), "get_by_email")

    async def get_active_by_email(self, email: str) -> Optional[User]:
        query = select(User).where(User.email == email, User.is_active.is_(True))
        return await self._fetch_one(query, "get_active_by_email")

    def create(self, **fields: Any) -> User:
        """Build a new, unsaved user."""
        now = utcnow()
        fields.setdefault("is_active", True)
        return User(id=generate_user_id(), created_at=now, updated_at=now, **fields)

    async def save(self, user: User) -> User:
        """
        Insert or update a user.

        The unique index on email decides races between concurrent writers.
        """
        user.touch()
        async with self.session_factory() as db:
            try:
                merged = await db.merge(user)
                await db.commit()
            except IntegrityError as e:
                await db.rollback()
                if _is_unique_violation(e):
                    logger.info("User save rejected, email already taken", user_id=user.id)
                    raise ConflictError("Email address already exists") from e
                logger.error("User save failed integrity check", user_id=user.id, error=str(e))
                raise InternalError("Failed to save user", original_error=e) from e
            except SQLAlchemyError as e:
                await db.rollback()
                logger.error("User save failed", user_id=user.id, error=str(e))
                raise InternalError("Failed to save user", original_error=e) from e

        logger.debug("User saved", user_id=merged.id)
        return merged
