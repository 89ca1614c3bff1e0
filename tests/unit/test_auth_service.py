"""
Unit tests for the auth service (credential verification and login).
"""

import pytest

from auth.config import INCORRECT_CREDENTIALS, INVALID_LOGIN
from auth.service import Unauthenticated, authenticate_user, login_user
from auth.utils import decode_credentials
from restaurant_explorer.errors import InvalidCredentialsError
from restaurant_explorer.storage.storage import UserStorage


@pytest.fixture
def users():
    store = UserStorage()
    store.insert_user("john.doe", "john.doe@example.com", "VerySecret!")
    store.insert_user("jane.smith", "jane.smith@example.com", "pa:ss:word")
    return store


def test_authenticate_success(users):
    principal = authenticate_user(users, "john.doe", "VerySecret!")
    assert (principal.user_id, principal.username) == (1, "john.doe")


def test_authenticate_password_with_colons(users):
    assert authenticate_user(users, "jane.smith", "pa:ss:word").user_id == 2


@pytest.mark.parametrize(
    "username,password",
    [
        ("nobody", "VerySecret!"),      # unknown user
        ("john.doe", "verysecret!"),    # case matters
        ("john.doe", "VerySecret! "),   # no trimming
        ("John.Doe", "VerySecret!"),    # usernames are case-sensitive
        ("john.doe", ""),
    ],
)
def test_authenticate_rejects_with_single_reason(users, username, password):
    with pytest.raises(Unauthenticated) as exc:
        authenticate_user(users, username, password)
    assert exc.value.reason == INCORRECT_CREDENTIALS


def test_login_returns_usable_header_value(users):
    result = login_user(users, "jane.smith", "pa:ss:word")
    assert result.user.user_id == 2
    assert decode_credentials(result.header_value) == ("jane.smith", "pa:ss:word")


def test_login_response_never_carries_the_stored_credential(users):
    payload = login_user(users, "john.doe", "VerySecret!").model_dump(by_alias=True)
    assert "passwordHash" not in payload["user"]
    assert set(payload) == {"user", "headerValue"}


def test_login_rejects_wrong_password(users):
    with pytest.raises(InvalidCredentialsError) as exc:
        login_user(users, "john.doe", "nope")
    assert exc.value.message == INVALID_LOGIN
    assert exc.value.status_code == 401
