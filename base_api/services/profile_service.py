"""
Profile service for reading and editing the signed-in user's profile.
"""
from typing import Any, Mapping

import structlog

from ..core.exceptions import ConflictError, NotFoundError
from ..interfaces.repository_interface import IUserRepository
from ..models.user import User
from ..schemas.user_schemas import UserResponse

logger = structlog.get_logger()

PROFILE_FIELDS = frozenset({"first_name", "last_name"})


class ProfileService:
    """Profile reads and edits. Every result is a sanitized user."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def _require_user(self, user_id: str) -> User:
        user = await self.user_repository.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    async def get_profile(self, user_id: str) -> UserResponse:
        user = await self._require_user(user_id)
        return UserResponse.from_user(user)

    async def update_profile(self, user_id: str, updates: Mapping[str, Any]) -> UserResponse:
        """
        Apply a partial profile update.

        Args:
            user_id: ID of the user to update
            updates: Field values keyed by attribute name. Only first_name and
                last_name are applied; keys left out are not touched and an
                explicit None clears the field.

        Returns:
            Updated sanitized user
        """
        user = await self._require_user(user_id)

        applied = []
        for field, value in updates.items():
            if field in PROFILE_FIELDS:
                setattr(user, field, value)
                applied.append(field)

        saved_user = await self.user_repository.save(user)

        logger.info("Profile updated", user_id=user_id, updated_fields=applied)
        return UserResponse.from_user(saved_user)

    async def change_email(self, user_id: str, new_email: str) -> UserResponse:
        """
        Move the user to a new email address.

        Raises:
            NotFoundError: Unknown user
            ConflictError: Another user already holds the address
        """
        user = await self._require_user(user_id)

        holder = await self.user_repository.get_by_email(new_email)
        if holder and holder.id != user.id:
            raise ConflictError("Email address already exists")

        user.email = new_email
        saved_user = await self.user_repository.save(user)

        logger.info("Email changed", user_id=user_id, email="***MASKED***")
        return UserResponse.from_user(saved_user)
