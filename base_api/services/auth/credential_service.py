"""
Credential service: registration, login, credential validation and password
change/reset. Issues session tokens for successful register and login.
"""

from dataclasses import dataclass
from typing import Dict, Optional

import structlog

from ...core.exceptions import BadRequestError, ConflictError, NotFoundError, UnauthorizedError
from ...interfaces.repository_interface import IUserRepository
from ...interfaces.security_interface import IPasswordHasher, IResetTokenSender, ITokenIssuer
from ...models.user import User
from ...schemas.user_schemas import UserResponse

logger = structlog.get_logger()

RESET_REQUESTED_MESSAGE = "If the email exists, a password reset link has been sent"
RESET_COMPLETED_MESSAGE = "Password has been reset successfully"


@dataclass(frozen=True)
class AuthResult:
    """Token plus sanitized user returned by register and login."""

    access_token: str
    user: UserResponse


class CredentialService:
    """Service responsible for the credential and session lifecycle."""

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
        token_issuer: ITokenIssuer,
        reset_token_sender: IResetTokenSender,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer
        self.reset_token_sender = reset_token_sender

    def _auth_result(self, user: User) -> AuthResult:
        access_token = self.token_issuer.issue(subject=user.id, email=user.email)
        return AuthResult(access_token=access_token, user=UserResponse.from_user(user))

    async def register(
        self,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> AuthResult:
        """
        Register a new active user and sign them in.

        Raises:
            ConflictError: If the email is already registered
        """
        if await self.user_repository.get_by_email(email):
            raise ConflictError("Email address already exists")

        password_hash = await self.password_hasher.hash(password)
        user = self.user_repository.create(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            is_active=True,
        )
        # save() raises ConflictError too if a concurrent registration won
        saved_user = await self.user_repository.save(user)

        logger.info("User registered", user_id=saved_user.id, email="***MASKED***")
        return self._auth_result(saved_user)

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Authenticate a user and issue an access token.

        Raises:
            UnauthorizedError: If credentials are invalid or the account is inactive
        """
        user = await self.validate_user(email, password)
        if not user:
            logger.info("Login rejected", email="***MASKED***")
            raise UnauthorizedError("Invalid email or password")

        logger.info("User logged in", user_id=user.id)
        return self._auth_result(user)

    async def validate_user(self, email: str, password: str) -> Optional[User]:
        """Return the active user matching the credentials, else None. Never raises on bad input."""
        user = await self.user_repository.get_active_by_email(email)
        if not user:
            return None

        if not await self.password_hasher.verify(password, user.password_hash):
            return None

        return user

    async def change_password(self, user_id: str, current_password: str, new_password: str) -> None:
        """
        Change a user's password after verifying the current one.

        Raises:
            NotFoundError: Unknown user
            UnauthorizedError: Current password does not match
            BadRequestError: New password equals the current one
        """
        user = await self.user_repository.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        if not await self.password_hasher.verify(current_password, user.password_hash):
            raise UnauthorizedError("Current password is incorrect")

        if current_password == new_password:
            raise BadRequestError("New password must be different from current password")

        user.password_hash = await self.password_hasher.hash(new_password)
        await self.user_repository.save(user)

        logger.info("Password changed", user_id=user.id)

    async def request_password_reset(self, email: str) -> Dict[str, str]:
        """
        Start a password reset.

        The response is the same whether or not the email is registered.
        """
        user = await self.user_repository.get_by_email(email)

        if user and user.is_active:
            token = self.token_issuer.issue_password_reset_token(email, user.password_hash)
            try:
                await self.reset_token_sender.send(user.id, email, token)
                logger.info("Password reset initiated", user_id=user.id)
            except Exception as e:
                # Delivery failures must not change the response
                logger.error("Password reset token delivery failed", user_id=user.id, error=str(e))

        return {"message": RESET_REQUESTED_MESSAGE}

    async def reset_password(self, email: str, new_password: str, reset_token: str) -> Dict[str, str]:
        """
        Complete a password reset with a token from request_password_reset.

        Raises:
            NotFoundError: No user with that email
            BadRequestError: Token invalid, expired, for another account, or already used
        """
        user = await self.user_repository.get_by_email(email)
        if not user:
            raise NotFoundError("User not found")

        if not self.token_issuer.verify_password_reset_token(reset_token, email, user.password_hash):
            logger.info("Password reset rejected, invalid token", user_id=user.id)
            raise BadRequestError("Invalid or expired reset token")

        user.password_hash = await self.password_hasher.hash(new_password)
        await self.user_repository.save(user)

        logger.info("Password reset completed", user_id=user.id)
        return {"message": RESET_COMPLETED_MESSAGE}
