"""
In-memory user store for development and tests.

Check-and-write on save runs under a lock, so concurrent writers targeting
the same email resolve to one success and one ConflictError.
"""

import asyncio
from typing import Any, Dict, Optional

import structlog

from ..core.exceptions import ConflictError
from ..interfaces.repository_interface import IUserRepository
from ..models.base import utcnow
from ..models.user import User, generate_user_id

logger = structlog.get_logger()


def _copy(user: User) -> User:
    return User(**user.to_dict())


class InMemoryUserRepository(IUserRepository):
    """Dict-backed user store. Callers always get detached copies."""

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._lock = asyncio.Lock()

    async def get_by_id(self, user_id: str) -> Optional[User]:
        user = self._users.get(user_id)
        return _copy(user) if user else None

    async def get_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return _copy(user)
        return None

    async def get_active_by_email(self, email: str) -> Optional[User]:
        user = await self.get_by_email(email)
        if user and user.is_active:
            return user
        return None

    def create(self, **fields: Any) -> User:
        now = utcnow()
        fields.setdefault("is_active", True)
        return User(id=generate_user_id(), created_at=now, updated_at=now, **fields)

    async def save(self, user: User) -> User:
        async with self._lock:
            for existing in self._users.values():
                if existing.email == user.email and existing.id != user.id:
                    logger.info("User save rejected, email already taken", user_id=user.id)
                    raise ConflictError("Email address already exists")
            user.touch()
            self._users[user.id] = _copy(user)
        return _copy(user)

    def __len__(self) -> int:
        return len(self._users)
