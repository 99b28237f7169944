"""
Explicit request validation.

Each function turns a raw JSON body into a ValidationResult holding either the
parsed request or the list of field errors. The HTTP layer calls these before
any service is invoked.
"""
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .auth_schemas import (
    LoginRequest,
    PasswordChangeRequest,
    PasswordResetConfirmRequest,
    PasswordResetRequest,
    RegistrationRequest,
)
from .queue_schemas import AddMessageRequest
from .user_schemas import ChangeEmailRequest, UpdateProfileRequest

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationResult(Generic[T]):
    value: Optional[T] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.value is not None and not self.errors


def validate_payload(model: Type[T], data: Any) -> ValidationResult[T]:
    """Validate a decoded JSON body against a request model."""
    if not isinstance(data, dict):
        return ValidationResult(errors=[FieldError("body", "Request body must be a JSON object")])

    try:
        return ValidationResult(value=model.model_validate(data))
    except ValidationError as e:
        return ValidationResult(
            errors=[
                FieldError(
                    field=".".join(str(part) for part in err.get("loc", ())) or "body",
                    message=err.get("msg", "Invalid value"),
                )
                for err in e.errors()
            ]
        )


def validate_registration(data: Any) -> ValidationResult[RegistrationRequest]:
    return validate_payload(RegistrationRequest, data)


def validate_login(data: Any) -> ValidationResult[LoginRequest]:
    return validate_payload(LoginRequest, data)


def validate_password_change(data: Any) -> ValidationResult[PasswordChangeRequest]:
    return validate_payload(PasswordChangeRequest, data)


def validate_password_reset_request(data: Any) -> ValidationResult[PasswordResetRequest]:
    return validate_payload(PasswordResetRequest, data)


def validate_password_reset_confirm(data: Any) -> ValidationResult[PasswordResetConfirmRequest]:
    return validate_payload(PasswordResetConfirmRequest, data)


def validate_profile_update(data: Any) -> ValidationResult[UpdateProfileRequest]:
    return validate_payload(UpdateProfileRequest, data)


def validate_email_change(data: Any) -> ValidationResult[ChangeEmailRequest]:
    return validate_payload(ChangeEmailRequest, data)


def validate_add_message(data: Any) -> ValidationResult[AddMessageRequest]:
    return validate_payload(AddMessageRequest, data)
