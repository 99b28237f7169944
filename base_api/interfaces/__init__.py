"""
Interface definitions for dependency abstractions.
These Protocol classes define contracts for collaborators so services can be
wired explicitly and tested with mocks.
"""

from .queue_interface import IJobQueue, JobRecord, JobState
from .repository_interface import IUserRepository
from .security_interface import IPasswordHasher, IResetTokenSender, ITokenIssuer

__all__ = [
    "IJobQueue",
    "JobRecord",
    "JobState",
    "IUserRepository",
    "IPasswordHasher",
    "IResetTokenSender",
    "ITokenIssuer",
]
