"""
Profile endpoints for the authenticated user.
"""
from fastapi import Depends, Request

from ..models.user import User
from ..schemas.user_schemas import UserResponse
from ..schemas.validation import validate_email_change, validate_profile_update
from .deps import get_container, get_current_user, validated_body


async def get_profile(
    request: Request,
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    return await get_container(request).profile_service.get_profile(current_user.id)


async def update_profile(
    request: Request,
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    """Update first and last name. Fields left out of the body are kept."""
    data = await validated_body(request, validate_profile_update)
    return await get_container(request).profile_service.update_profile(
        current_user.id,
        data.model_dump(exclude_unset=True),
    )


async def change_email(
    request: Request,
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    data = await validated_body(request, validate_email_change)
    return await get_container(request).profile_service.change_email(current_user.id, data.email)
