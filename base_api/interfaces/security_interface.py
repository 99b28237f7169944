"""
Security collaborator interfaces: password hashing, token issuing and
password-reset token delivery.
"""

from datetime import timedelta
from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class IPasswordHasher(Protocol):
    """Protocol for salted one-way password hashing."""

    async def hash(self, password: str) -> str:
        ...

    async def verify(self, password: str, password_hash: Optional[str]) -> bool:
        """Return False, never raise, on a malformed hash."""
        ...


@runtime_checkable
class ITokenIssuer(Protocol):
    """Protocol for signing and verifying session and reset tokens."""

    def issue(self, subject: str, email: str, expires_delta: Optional[timedelta] = None) -> str:
        ...

    def decode_access_token(self, token: str) -> Optional[Dict[str, Any]]:
        ...

    def issue_password_reset_token(
        self,
        email: str,
        password_hash: str,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        ...

    def verify_password_reset_token(self, token: str, email: str, password_hash: str) -> bool:
        ...


@runtime_checkable
class IResetTokenSender(Protocol):
    """Protocol for handing a password reset token to its owner."""

    async def send(self, user_id: str, email: str, token: str) -> None:
        """
        Deliver a reset token.

        Args:
            user_id: Account the token belongs to
            email: Address the token is meant for
            token: Signed reset token
        """
        ...
