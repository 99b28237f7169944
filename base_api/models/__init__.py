"""
Database models for the base API.
"""
from .base import Base, BaseModel, TimestampMixin
from .user import User

__all__ = [
    "Base",
    "BaseModel",
    "TimestampMixin",
    "User",
]
