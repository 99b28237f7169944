"""
User-related Pydantic schemas for request/response validation.
"""
from datetime import datetime
from typing import Annotated, Optional

from pydantic import EmailStr, Field, StringConstraints

from .base import CamelModel, RequestModel

NAME_PATTERN = r"^[a-zA-Z\s'-]+$"

PersonName = Annotated[
    str,
    StringConstraints(min_length=2, max_length=50, pattern=NAME_PATTERN),
]


class UserResponse(CamelModel):
    """Sanitized user: has no password field, so it is safe to transmit."""

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    first_name: Optional[str] = Field(None, description="User's first name")
    last_name: Optional[str] = Field(None, description="User's last name")
    is_active: bool = Field(..., description="Whether the account may authenticate")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_user(cls, user) -> "UserResponse":
        return cls.model_validate(user)


class UpdateProfileRequest(RequestModel):
    """Partial profile update; fields left out are not touched."""

    first_name: Optional[PersonName] = Field(None, description="2-50 letters, spaces, hyphens, apostrophes")
    last_name: Optional[PersonName] = Field(None, description="2-50 letters, spaces, hyphens, apostrophes")


class ChangeEmailRequest(RequestModel):
    email: EmailStr = Field(..., description="New email address")
