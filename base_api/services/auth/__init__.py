"""
Authentication services.
"""

from .credential_service import AuthResult, CredentialService
from .reset_token_sender import LoggingResetTokenSender

__all__ = [
    "AuthResult",
    "CredentialService",
    "LoggingResetTokenSender",
]
