import asyncio
import hashlib
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
import structlog

from .config import Settings

logger = structlog.get_logger()

ACCESS_TOKEN_TYPE = "access"
PASSWORD_RESET_TOKEN_TYPE = "password_reset"


class PasswordHasher:
    """Salted one-way password hashing (bcrypt)."""

    def __init__(self, rounds: int = 10):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    async def hash(self, password: str) -> str:
        """Generate password hash off the event loop."""
        return await asyncio.to_thread(self.pwd_context.hash, password)

    async def verify(self, password: str, password_hash: Optional[str]) -> bool:
        """Verify a password against its hash. Malformed hashes verify as False."""
        if not password_hash:
            return False
        try:
            return await asyncio.to_thread(self.pwd_context.verify, password, password_hash)
        except (ValueError, TypeError) as e:
            logger.warning("Password hash could not be verified", error=str(e))
            return False


def password_fingerprint(password_hash: str) -> str:
    """Short digest of a password hash, binds reset tokens to the current password."""
    return hashlib.sha256(password_hash.encode()).hexdigest()[:16]


class TokenIssuer:
    """Signs and verifies JWTs with the service secret."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 60,
        reset_token_expire_minutes: int = 60,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.access_token_expire_minutes = access_token_expire_minutes
        self.reset_token_expire_minutes = reset_token_expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            access_token_expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
            reset_token_expire_minutes=settings.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES,
        )

    def _encode(self, data: Dict[str, Any], expires_delta: timedelta) -> str:
        now = datetime.now(timezone.utc)
        to_encode = data.copy()
        to_encode.update({"iat": now, "exp": now + expires_delta})
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def _decode(self, token: str, token_type: str) -> Optional[Dict[str, Any]]:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            return None
        if payload.get("type") != token_type:
            return None
        return payload

    def issue(self, subject: str, email: str, expires_delta: Optional[timedelta] = None) -> str:
        """Create JWT access token carrying subject and email claims."""
        return self._encode(
            {"sub": str(subject), "email": email, "type": ACCESS_TOKEN_TYPE},
            expires_delta or timedelta(minutes=self.access_token_expire_minutes),
        )

    def decode_access_token(self, token: str) -> Optional[Dict[str, Any]]:
        """Decode and validate an access token. None when invalid or expired."""
        payload = self._decode(token, ACCESS_TOKEN_TYPE)
        if not payload or not payload.get("sub"):
            return None
        return payload

    def issue_password_reset_token(
        self,
        email: str,
        password_hash: str,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """Generate password reset token bound to the current password hash."""
        return self._encode(
            {
                "sub": email,
                "type": PASSWORD_RESET_TOKEN_TYPE,
                "pwd": password_fingerprint(password_hash),
            },
            expires_delta or timedelta(minutes=self.reset_token_expire_minutes),
        )

    def verify_password_reset_token(self, token: str, email: str, password_hash: str) -> bool:
        """Check a reset token against the account it is being redeemed for."""
        payload = self._decode(token, PASSWORD_RESET_TOKEN_TYPE)
        if not payload:
            return False
        return (
            payload.get("sub") == email
            and payload.get("pwd") == password_fingerprint(password_hash)
        )
