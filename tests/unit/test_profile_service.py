"""
Tests for ProfileService.
"""
from unittest.mock import AsyncMock

import pytest

from base_api.core.exceptions import ConflictError, NotFoundError
from base_api.schemas.user_schemas import UserResponse
from base_api.services.profile_service import ProfileService
from tests.factories import UserFactory


@pytest.fixture
def user_repository():
    repo = AsyncMock()
    repo.save.side_effect = lambda user: user
    return repo


@pytest.fixture
def profile_service(user_repository):
    return ProfileService(user_repository)


@pytest.mark.asyncio
async def test_get_profile(profile_service, user_repository):
    user = UserFactory.build()
    user_repository.get_by_id.return_value = user

    profile = await profile_service.get_profile(user.id)

    assert isinstance(profile, UserResponse)
    assert profile.id == user.id
    assert profile.email == user.email
    assert "password_hash" not in profile.model_dump()


@pytest.mark.asyncio
async def test_get_profile_unknown_user(profile_service, user_repository):
    user_repository.get_by_id.return_value = None

    with pytest.raises(NotFoundError):
        await profile_service.get_profile("missing")


@pytest.mark.asyncio
async def test_update_profile_applies_present_fields_only(profile_service, user_repository):
    user = UserFactory.build(first_name="Ada", last_name="Lovelace")
    user_repository.get_by_id.return_value = user

    profile = await profile_service.update_profile(user.id, {"first_name": "Grace"})

    assert profile.first_name == "Grace"
    assert profile.last_name == "Lovelace"
    user_repository.save.assert_awaited_once()


@pytest.mark.asyncio
async def test_update_profile_explicit_none_clears(profile_service, user_repository):
    user = UserFactory.build(first_name="Ada", last_name="Lovelace")
    user_repository.get_by_id.return_value = user

    profile = await profile_service.update_profile(user.id, {"last_name": None})

    assert profile.first_name == "Ada"
    assert profile.last_name is None


@pytest.mark.asyncio
async def test_update_profile_ignores_other_fields(profile_service, user_repository):
    user = UserFactory.build(email="a@x.com")
    original_hash = user.password_hash
    user_repository.get_by_id.return_value = user

    profile = await profile_service.update_profile(
        user.id,
        {"email": "b@x.com", "password_hash": "x", "is_active": False},
    )

    assert profile.email == "a@x.com"
    assert profile.is_active is True
    assert user.password_hash == original_hash


@pytest.mark.asyncio
async def test_update_profile_unknown_user(profile_service, user_repository):
    user_repository.get_by_id.return_value = None

    with pytest.raises(NotFoundError):
        await profile_service.update_profile("missing", {"first_name": "Grace"})


@pytest.mark.asyncio
async def test_change_email(profile_service, user_repository):
    user = UserFactory.build(email="a@x.com")
    user_repository.get_by_id.return_value = user
    user_repository.get_by_email.return_value = None

    profile = await profile_service.change_email(user.id, "b@x.com")

    assert profile.email == "b@x.com"


@pytest.mark.asyncio
async def test_change_email_to_own_address(profile_service, user_repository):
    user = UserFactory.build(email="a@x.com")
    user_repository.get_by_id.return_value = user
    user_repository.get_by_email.return_value = user

    profile = await profile_service.change_email(user.id, "a@x.com")

    assert profile.email == "a@x.com"


@pytest.mark.asyncio
async def test_change_email_taken_by_other_user(profile_service, user_repository):
    user = UserFactory.build(email="a@x.com")
    user_repository.get_by_id.return_value = user
    user_repository.get_by_email.return_value = UserFactory.build(email="b@x.com")

    with pytest.raises(ConflictError) as exc_info:
        await profile_service.change_email(user.id, "b@x.com")

    assert exc_info.value.message == "Email address already exists"
    user_repository.save.assert_not_called()


@pytest.mark.asyncio
async def test_change_email_unknown_user(profile_service, user_repository):
    user_repository.get_by_id.return_value = None

    with pytest.raises(NotFoundError):
        await profile_service.change_email("missing", "b@x.com")
