from .user_factory import DEFAULT_PASSWORD, DEFAULT_PASSWORD_HASH, InactiveUserFactory, UserFactory

__all__ = [
    "DEFAULT_PASSWORD",
    "DEFAULT_PASSWORD_HASH",
    "InactiveUserFactory",
    "UserFactory",
]
