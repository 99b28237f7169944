"""
Dependency injection for FastAPI endpoints.
Provides the service container, the current user and request body validation.
"""
from typing import Any, Callable, Optional, TypeVar

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
import structlog

from ..container import ServiceContainer
from ..core.exceptions import RequestValidationFailed, UnauthorizedError
from ..models.user import User
from ..schemas.validation import ValidationResult

logger = structlog.get_logger()
security = HTTPBearer(auto_error=False)

T = TypeVar("T")


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> User:
    """
    Resolve the user behind the Bearer token.

    Raises:
        UnauthorizedError: Missing, invalid or expired token, or the account is gone or inactive
    """
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    container = get_container(request)
    payload = container.token_issuer.decode_access_token(credentials.credentials)
    if not payload:
        raise UnauthorizedError("Invalid or expired token")

    user = await container.user_repository.get_by_id(payload["sub"])
    if not user or not user.is_active:
        logger.info("Token rejected, account unavailable", user_id=payload["sub"])
        raise UnauthorizedError("Invalid or expired token")

    return user


async def read_json_body(request: Request) -> Any:
    """Decoded JSON body, or None when the body is empty or not JSON."""
    try:
        return await request.json()
    except ValueError:
        return None


async def validated_body(request: Request, validator: Callable[[Any], ValidationResult[T]]) -> T:
    """
    Run an explicit validator over the request body.

    Raises:
        RequestValidationFailed: With the per-field errors
    """
    result = validator(await read_json_body(request))
    if not result.is_valid:
        errors = [error.to_dict() for error in result.errors]
        logger.info("Request validation failed", path=request.url.path, fields=[e["field"] for e in errors])
        raise RequestValidationFailed(errors)
    return result.value
