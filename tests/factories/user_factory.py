"""
User model factories for testing.
Uses Factory Boy to generate realistic test data with Faker.
"""
import factory
from factory import Faker, LazyAttribute, LazyFunction
from passlib.context import CryptContext

from base_api.models.base import utcnow
from base_api.models.user import User, generate_user_id

DEFAULT_PASSWORD = "Passw0rd!"

# Hashed once at import; rounds=4 is the bcrypt minimum
_pwd_context = CryptContext(schemes=["bcrypt"], bcrypt__rounds=4)
DEFAULT_PASSWORD_HASH = _pwd_context.hash(DEFAULT_PASSWORD)


class UserFactory(factory.Factory):
    """Factory for User model."""

    class Meta:
        model = User

    id = LazyFunction(generate_user_id)
    email = Faker("email")
    first_name = Faker("first_name")
    last_name = Faker("last_name")
    password_hash = DEFAULT_PASSWORD_HASH
    is_active = True

    created_at = LazyFunction(utcnow)
    updated_at = LazyAttribute(lambda obj: obj.created_at)


class InactiveUserFactory(UserFactory):
    """Factory for deactivated accounts."""

    is_active = False
