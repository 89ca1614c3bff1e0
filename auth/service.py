"""
Core authentication logic.

This module verifies credentials against an injected user store. It never
touches HTTP objects; the gate in `dependencies.py` adapts it to FastAPI.

Known simplifications:
    - The stored credential is compared to the presented password with plain
      equality (no hashing, no constant-time compare).
    - No lockout, rate limiting or backoff: a failed attempt can be retried
      immediately.
"""

import logging

from restaurant_explorer.errors import InvalidCredentialsError
from restaurant_explorer.models import UserOut
from restaurant_explorer.storage.base import BaseUserStore

from .config import INCORRECT_CREDENTIALS, INVALID_LOGIN
from .schemas import LoginResponse, Principal
from .utils import encode_credentials

log = logging.getLogger(__name__)


class Unauthenticated(Exception):
    """Request rejected by the auth gate. Always rendered as HTTP 401."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def authenticate_user(users: BaseUserStore, username: str, password: str) -> Principal:
    """
    Authenticate a user by validating their username and password.

    Args:
        users (BaseUserStore): Store used for the lookup.
        username (str): The username provided by the client.
        password (str): The password provided by the client.

    Returns:
        Principal: Identity to hand to the route handler.

    Raises:
        Unauthenticated: Unknown user or mismatching credential (same reason
            for both, so usernames cannot be enumerated).
    """
    user = users.get_user_by_username(username)
    if user is None or user.password_hash != password:
        log.info("Rejected credentials for username=%r", username)
        raise Unauthenticated(INCORRECT_CREDENTIALS)
    return Principal(user_id=user.user_id, username=user.username)


def login_user(users: BaseUserStore, username: str, password: str) -> LoginResponse:
    """
    Check a username/password pair and hand back the header value the client
    must send on subsequent requests.

    Raises:
        InvalidCredentialsError: Unknown user or wrong password.
    """
    user = users.get_user_by_username(username)
    if user is None or user.password_hash != password:
        raise InvalidCredentialsError(INVALID_LOGIN)
    return LoginResponse(
        user=UserOut.from_user(user),
        header_value=encode_credentials(username, password),
    )
