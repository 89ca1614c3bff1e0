"""
UserManager module for Restaurant Explorer.

Responsibilities:
    - Account lookup, registration, username change, password change, deletion
    - Username / email uniqueness checks with precise 409 messages

Notes:
    - Login and request authentication live in the `auth` package; this module
      only manages account records.
    - `password_hash` is stored and compared verbatim (whatever the client
      sends); no server-side hashing is applied.
"""

from ..errors import ConflictError, NotFoundError, OperationFailedError
from ..models import PasswordUpdate, User, UserCreate, UserUpdate
from ..storage.base import BaseUserStore


class UserManager:
    def __init__(self, users: BaseUserStore):
        self.users = users

    def get_user(self, user_id: int) -> User:
        user = self.users.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with ID {user_id} not found")
        return user

    def register(self, payload: UserCreate) -> User:
        """
        Create a new account.

        Raises:
            ConflictError: Username or email already in use.
            OperationFailedError: The store refused the insert.
        """
        if self.users.username_exists(payload.username):
            raise ConflictError(f"Username '{payload.username}' already exists")
        if self.users.email_exists(payload.email):
            raise ConflictError(f"Email '{payload.email}' already exists")

        user = self.users.insert_user(payload.username, payload.email, payload.password_hash)
        if user is None:
            raise OperationFailedError("Failed to create user")
        return user

    def update_user(self, payload: UserUpdate) -> User:
        """Change the username; email is kept as stored."""
        existing = self.get_user(payload.user_id)

        if payload.username != existing.username:
            other = self.users.get_user_by_username(payload.username)
            if other is not None and other.user_id != payload.user_id:
                raise ConflictError(f"Username '{payload.username}' is already taken")

        if not self.users.update_username(payload.user_id, payload.username):
            raise OperationFailedError("Failed to update user")
        return existing.model_copy(update={"username": payload.username})

    def change_password(self, payload: PasswordUpdate) -> None:
        existing = self.get_user(payload.user_id)
        if existing.password_hash != payload.old_password_hash:
            raise OperationFailedError("Current password is incorrect")
        if not self.users.update_password(payload.user_id, payload.new_password_hash):
            raise OperationFailedError("Failed to update password")

    def delete_user(self, user_id: int) -> None:
        self.get_user(user_id)
        if not self.users.delete_user(user_id):
            raise OperationFailedError("Failed to delete user")
