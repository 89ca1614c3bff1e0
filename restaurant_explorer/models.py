"""
Pydantic models for Restaurant Explorer entities and request payloads.

Wire format:
    Field names are camelCase on the wire (userId, restaurantId, priceRange, ...)
    and snake_case in Python. `populate_by_name=True` lets callers use either
    when constructing models.

Price ranges:
    A single-letter code: L (low), M (medium), H (high).
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PriceRange(str, Enum):
    LOW = "L"
    MEDIUM = "M"
    HIGH = "H"


# ---------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------

class User(CamelModel):
    """Stored account. `password_hash` is compared verbatim by the auth gate."""
    user_id: int
    username: str
    email: str
    password_hash: str
    created_at: datetime = Field(default_factory=utcnow)


class UserOut(CamelModel):
    """Public view of a user; never carries the stored credential."""
    user_id: int
    username: str
    email: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserOut":
        return cls(
            user_id=user.user_id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )


class Restaurant(CamelModel):
    restaurant_id: int
    name: str = Field(max_length=100)
    address: str = ""
    neighborhood: str = Field("", max_length=50)
    opening_hours: str = ""
    cuisine: str = Field("", max_length=50)
    price_range: PriceRange
    dietary_options: str = ""
    created_at: datetime = Field(default_factory=utcnow)


class Review(CamelModel):
    review_id: int
    user_id: int
    restaurant_id: int
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)


class Bookmark(CamelModel):
    user_id: int
    restaurant_id: int
    created_at: datetime = Field(default_factory=utcnow)


# ---------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------

class UserCreate(CamelModel):
    username: str = Field(min_length=1, max_length=50)
    email: str = Field(min_length=1, max_length=100)
    password_hash: str = Field(min_length=1)


class UserUpdate(CamelModel):
    user_id: int
    username: str = Field(min_length=1, max_length=50)


class PasswordUpdate(CamelModel):
    user_id: int
    old_password_hash: str
    new_password_hash: str = Field(min_length=1)


class ReviewIn(CamelModel):
    user_id: int
    restaurant_id: int
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None


class BookmarkIn(CamelModel):
    user_id: int
    restaurant_id: int


class Message(CamelModel):
    message: str
