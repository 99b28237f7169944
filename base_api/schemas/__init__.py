"""
Pydantic schemas for request/response validation.
"""
from .base import HealthResponse
from .auth_schemas import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    PasswordChangeRequest,
    PasswordResetConfirmRequest,
    PasswordResetRequest,
    RegistrationRequest,
)
from .queue_schemas import (
    AddMessageRequest,
    AddMessageResponse,
    JobStatusResponse,
    QueueStatsResponse,
)
from .user_schemas import ChangeEmailRequest, UpdateProfileRequest, UserResponse
from .validation import FieldError, ValidationResult, validate_payload

__all__ = [
    "AddMessageRequest",
    "AddMessageResponse",
    "AuthResponse",
    "ChangeEmailRequest",
    "FieldError",
    "HealthResponse",
    "JobStatusResponse",
    "LoginRequest",
    "MessageResponse",
    "PasswordChangeRequest",
    "PasswordResetConfirmRequest",
    "PasswordResetRequest",
    "QueueStatsResponse",
    "RegistrationRequest",
    "UpdateProfileRequest",
    "UserResponse",
    "ValidationResult",
    "validate_payload",
]
