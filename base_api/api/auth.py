"""
Authentication endpoints: registration, login, password change and reset.
"""
from fastapi import Depends, Request

from ..models.user import User
from ..schemas.auth_schemas import AuthResponse, MessageResponse
from ..schemas.validation import (
    validate_login,
    validate_password_change,
    validate_password_reset_confirm,
    validate_password_reset_request,
    validate_registration,
)
from ..services.auth import AuthResult
from .deps import get_container, get_current_user, validated_body


def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(access_token=result.access_token, user=result.user)


async def register(request: Request) -> AuthResponse:
    """
    Register a new user account.

    Returns an access token and the sanitized user.
    """
    data = await validated_body(request, validate_registration)
    result = await get_container(request).credential_service.register(
        email=data.email,
        password=data.password,
        first_name=data.first_name,
        last_name=data.last_name,
    )
    return _auth_response(result)


async def login(request: Request) -> AuthResponse:
    data = await validated_body(request, validate_login)
    result = await get_container(request).credential_service.login(data.email, data.password)
    return _auth_response(result)


async def change_password(
    request: Request,
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    """Change password for the authenticated user."""
    data = await validated_body(request, validate_password_change)
    await get_container(request).credential_service.change_password(
        user_id=current_user.id,
        current_password=data.current_password,
        new_password=data.new_password,
    )
    return MessageResponse(message="Password changed successfully")


async def request_password_reset(request: Request) -> MessageResponse:
    """
    Request a password reset.

    The response does not reveal whether the email is registered.
    """
    data = await validated_body(request, validate_password_reset_request)
    result = await get_container(request).credential_service.request_password_reset(data.email)
    return MessageResponse(**result)


async def confirm_password_reset(request: Request) -> MessageResponse:
    data = await validated_body(request, validate_password_reset_confirm)
    result = await get_container(request).credential_service.reset_password(
        email=data.email,
        new_password=data.new_password,
        reset_token=data.token,
    )
    return MessageResponse(**result)
