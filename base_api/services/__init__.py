"""
Business services.
"""
from .auth import AuthResult, CredentialService, LoggingResetTokenSender
from .profile_service import ProfileService
from .queue_service import QueueService

__all__ = [
    "AuthResult",
    "CredentialService",
    "LoggingResetTokenSender",
    "ProfileService",
    "QueueService",
]
