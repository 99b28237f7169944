"""
User model. Email uniqueness is enforced by a unique index, which is the
authoritative guard against concurrent registrations and email changes.
"""
import uuid

from sqlalchemy import Boolean, Column, String, UniqueConstraint

from .base import BaseModel


def generate_user_id() -> str:
    return str(uuid.uuid4())


class User(BaseModel):
    """Registered user account."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_user_id)
    email = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(50), nullable=True)
    last_name = Column(String(50), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, active={self.is_active})>"
