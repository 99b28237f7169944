"""
Tests for explicit request validation.
"""
import pytest

from base_api.schemas.validation import (
    validate_add_message,
    validate_email_change,
    validate_login,
    validate_password_change,
    validate_password_reset_confirm,
    validate_password_reset_request,
    validate_profile_update,
    validate_registration,
)


def _fields(result):
    return {error.field for error in result.errors}


class TestRegistrationValidation:

    def test_valid_payload(self):
        result = validate_registration(
            {"email": "a@x.com", "password": "Passw0rd!", "firstName": "Mary-Jane", "lastName": "O'Neil"}
        )

        assert result.is_valid
        assert result.value.email == "a@x.com"
        assert result.value.first_name == "Mary-Jane"
        assert result.value.last_name == "O'Neil"

    def test_names_are_optional(self):
        result = validate_registration({"email": "a@x.com", "password": "Passw0rd!"})

        assert result.is_valid
        assert result.value.first_name is None

    def test_snake_case_keys_accepted(self):
        result = validate_registration({"email": "a@x.com", "password": "Passw0rd!", "first_name": "Ada"})

        assert result.is_valid
        assert result.value.first_name == "Ada"

    @pytest.mark.parametrize(
        "payload,field",
        [
            ({"email": "not-an-email", "password": "Passw0rd!"}, "email"),
            ({"email": "a@x.com", "password": "short"}, "password"),
            ({"password": "Passw0rd!"}, "email"),
            ({"email": "a@x.com", "password": "Passw0rd!", "firstName": "A"}, "firstName"),
            ({"email": "a@x.com", "password": "Passw0rd!", "lastName": "x" * 51}, "lastName"),
            ({"email": "a@x.com", "password": "Passw0rd!", "firstName": "R2D2"}, "firstName"),
        ],
    )
    def test_invalid_payloads(self, payload, field):
        result = validate_registration(payload)

        assert not result.is_valid
        assert result.value is None
        assert field in _fields(result)

    def test_unknown_field_rejected(self):
        result = validate_registration({"email": "a@x.com", "password": "Passw0rd!", "isActive": False})

        assert not result.is_valid
        assert "isActive" in _fields(result)

    @pytest.mark.parametrize("payload", [None, [], "text", 42])
    def test_non_object_body(self, payload):
        result = validate_registration(payload)

        assert not result.is_valid
        assert _fields(result) == {"body"}


def test_login_requires_password():
    assert validate_login({"email": "a@x.com", "password": "x"}).is_valid
    assert not validate_login({"email": "a@x.com", "password": ""}).is_valid


def test_password_change_rules():
    assert validate_password_change({"currentPassword": "old", "newPassword": "N3wPassword!"}).is_valid
    assert not validate_password_change({"currentPassword": "", "newPassword": "N3wPassword!"}).is_valid
    assert not validate_password_change({"currentPassword": "old", "newPassword": "short"}).is_valid


def test_password_reset_request_requires_email():
    assert validate_password_reset_request({"email": "a@x.com"}).is_valid
    assert not validate_password_reset_request({"email": "nope"}).is_valid


def test_password_reset_confirm_rules():
    valid = {"email": "a@x.com", "newPassword": "N3wPassword!", "token": "t"}
    assert validate_password_reset_confirm(valid).is_valid
    assert not validate_password_reset_confirm({**valid, "token": ""}).is_valid
    assert not validate_password_reset_confirm({**valid, "newPassword": "short"}).is_valid


def test_profile_update_tracks_present_fields():
    result = validate_profile_update({"lastName": None})

    assert result.is_valid
    assert result.value.model_dump(exclude_unset=True) == {"last_name": None}


def test_profile_update_empty_body_is_valid():
    result = validate_profile_update({})

    assert result.is_valid
    assert result.value.model_dump(exclude_unset=True) == {}


def test_email_change_requires_valid_email():
    assert validate_email_change({"email": "b@x.com"}).is_valid
    assert not validate_email_change({"email": "b@"}).is_valid


class TestAddMessageValidation:

    def test_valid(self):
        result = validate_add_message({"message": "hello", "metadata": {"k": 1}})

        assert result.is_valid
        assert result.value.metadata == {"k": 1}

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"message": ""},
            {"message": 42},
            {"message": "hello", "metadata": "not-an-object"},
        ],
    )
    def test_invalid(self, payload):
        assert not validate_add_message(payload).is_valid
