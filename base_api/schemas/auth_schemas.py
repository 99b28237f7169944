"""
Authentication-related Pydantic schemas for request/response validation.
"""
from typing import Optional

from pydantic import EmailStr, Field

from .base import CamelModel, RequestModel
from .user_schemas import PersonName, UserResponse

PASSWORD_MIN_LENGTH = 8


class RegistrationRequest(RequestModel):
    """Registration request schema."""

    email: EmailStr = Field(..., description="User's email address (must be unique)")
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, description="User's password")
    first_name: Optional[PersonName] = Field(None, description="User's first name")
    last_name: Optional[PersonName] = Field(None, description="User's last name")


class LoginRequest(RequestModel):
    """Login request schema."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")


class PasswordChangeRequest(RequestModel):
    current_password: str = Field(..., min_length=1, description="Current password")
    new_password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, description="New password")


class PasswordResetRequest(RequestModel):
    email: EmailStr = Field(..., description="Email address to send password reset to")


class PasswordResetConfirmRequest(RequestModel):
    email: EmailStr = Field(..., description="User email address")
    new_password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, description="New password")
    token: str = Field(..., min_length=1, description="Password reset token")


class AuthResponse(CamelModel):
    """Register/login response schema."""

    access_token: str = Field(..., description="JWT access token")
    user: UserResponse = Field(..., description="Sanitized user")


class MessageResponse(CamelModel):
    message: str
