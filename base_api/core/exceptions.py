"""
Service-level error taxonomy.

Services raise these instead of HTTP exceptions; the API layer maps each kind
to its status code in a single exception handler.
"""
from typing import Any, Dict, List, Optional

from fastapi import status


class ServiceError(Exception):
    """Base class for business-rule and backend failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Internal Server Error"
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, *, original_error: Optional[BaseException] = None):
        self.message = message or self.default_message
        self.original_error = original_error
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "error": self.error,
            "message": self.message,
        }


class ConflictError(ServiceError):
    """Duplicate email on register or email change."""

    status_code = status.HTTP_409_CONFLICT
    error = "Conflict"
    default_message = "Email address already exists"


class UnauthorizedError(ServiceError):
    """Bad credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Unauthorized"
    default_message = "Unauthorized"


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "Not Found"
    default_message = "Not found"


class BadRequestError(ServiceError):
    """Input accepted by validation but rejected by a business rule."""

    status_code = status.HTTP_400_BAD_REQUEST
    error = "Bad Request"
    default_message = "Bad request"


class InternalError(ServiceError):
    """Unexpected storage or queue backend failure. Never retried."""


class RequestValidationFailed(BadRequestError):
    """Request body failed input validation; carries the per-field errors."""

    default_message = "Validation failed"

    def __init__(self, errors: List[Dict[str, str]], message: Optional[str] = None):
        super().__init__(message)
        self.errors = errors

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        body["errors"] = self.errors
        return body
