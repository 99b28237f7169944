"""
Repository interfaces for dependency abstraction.
Defines the user store contract the services call into.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from ..models.user import User


@runtime_checkable
class IUserRepository(Protocol):
    """Protocol for user store operations.

    Implementations MUST enforce email uniqueness atomically and raise
    ``ConflictError`` from ``save`` when it would be violated.
    """

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User instance or None if not found
        """
        ...

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email, active or not.

        Args:
            email: User email, matched as stored

        Returns:
            User instance or None if not found
        """
        ...

    async def get_active_by_email(self, email: str) -> Optional[User]:
        """
        Get an active user by email.

        Returns:
            User instance or None if missing or inactive
        """
        ...

    def create(self, **fields: Any) -> User:
        """
        Build a new, unsaved user with a fresh id.

        Args:
            **fields: Column values (email, password_hash, first_name, ...)

        Returns:
            Unsaved user instance
        """
        ...

    async def save(self, user: User) -> User:
        """
        Insert or update a user, refreshing updated_at.

        Raises:
            ConflictError: email already belongs to another user
            InternalError: storage failure
        """
        ...
