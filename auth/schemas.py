"""
Pydantic schemas for request/response models in the auth module.
"""

from restaurant_explorer.models import CamelModel, UserOut


class Principal(CamelModel):
    """Authenticated identity of the current request."""
    user_id: int
    username: str


class UserLogin(CamelModel):
    """Schema for login request payload."""
    username: str
    password_hash: str


class LoginResponse(CamelModel):
    """Login result: the user and a ready-to-use Authorization header value."""
    user: UserOut
    header_value: str
