"""
Base storage interfaces for Restaurant Explorer.

Purpose:
    Define small, stable contracts for the four stores (users, restaurants,
    reviews, bookmarks) so that the auth gate, managers and routes depend on
    behaviour, never on a concrete engine (in-memory, PostgreSQL, ...).

Conventions:
    - Lookups return the entity or None ("not found" is not an error).
    - Writes return the created entity / True on success and None / False when
      the backend refuses the write (constraint violation, missing row).
    - Infrastructure failures (connection lost, bad DSN) raise StorageError.

Testing & Coverage:
    These are abstract methods and are not executed directly in tests.
    We annotate them with `# pragma: no cover`.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Bookmark, Restaurant, Review, User
from .filters import RestaurantFilter


class StorageError(RuntimeError):
    """The backing store could not be reached or failed mid-operation."""


class BaseUserStore(ABC):
    """Abstract base class for user account storage."""

    @abstractmethod  # pragma: no cover
    def get_user_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def get_user_by_username(self, username: str) -> Optional[User]:
        """Exact (case-sensitive) username lookup used by the auth gate."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def insert_user(self, username: str, email: str, password_hash: str) -> Optional[User]:
        """
        Create a user and return it with its assigned id.

        Returns:
            Optional[User]: None if the username or email is already taken.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def update_username(self, user_id: int, username: str) -> bool:
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def update_password(self, user_id: int, password_hash: str) -> bool:
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def delete_user(self, user_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def username_exists(self, username: str) -> bool:
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def email_exists(self, email: str) -> bool:
        raise NotImplementedError


class BaseRestaurantStore(ABC):
    """Abstract base class for restaurant listings (read-only through the API)."""

    @abstractmethod  # pragma: no cover
    def get_by_id(self, restaurant_id: int) -> Optional[Restaurant]:
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def filter_restaurants(self, criteria: RestaurantFilter) -> List[Restaurant]:
        """
        Return restaurants matching the AND-of-ORs criteria.

        Order is natural storage order; callers must not rely on it.
        """
        raise NotImplementedError


class BaseReviewStore(ABC):
    """Abstract base class for restaurant reviews."""

    @abstractmethod  # pragma: no cover
    def get_reviews_by_restaurant(self, restaurant_id: int) -> List[Review]:
        """All reviews for a restaurant, newest first."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def get_user_review(self, user_id: int, restaurant_id: int) -> Optional[Review]:
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def insert_review(
        self, user_id: int, restaurant_id: int, rating: int, comment: Optional[str]
    ) -> Optional[Review]:
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def update_review(self, review_id: int, user_id: int, rating: int, comment: Optional[str]) -> bool:
        """Update rating/comment of a review, scoped to its author."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def delete_review(self, review_id: int, user_id: int) -> bool:
        raise NotImplementedError


class BaseBookmarkStore(ABC):
    """Abstract base class for user bookmarks."""

    @abstractmethod  # pragma: no cover
    def get_bookmarks_by_user(self, user_id: int) -> List[Bookmark]:
        """Bookmarks of a user, newest first."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def is_bookmarked(self, user_id: int, restaurant_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def add_bookmark(self, user_id: int, restaurant_id: int) -> Optional[Bookmark]:
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def remove_bookmark(self, user_id: int, restaurant_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def get_bookmarked_restaurants(self, user_id: int) -> List[Restaurant]:
        """Restaurants bookmarked by a user, most recently bookmarked first."""
        raise NotImplementedError
