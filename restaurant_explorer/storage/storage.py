"""
Storage module for Restaurant Explorer (in-memory implementation).

Responsibilities:
    - Keep users, restaurants, reviews and bookmarks in process memory
    - Assign monotonically increasing ids, like SERIAL columns would
    - Apply the same filter semantics as the SQL backend (RestaurantFilter.matches)
    - Sort review and bookmark listings newest first

Design:
    - Reference implementation of the BaseStorage contracts; keeps unit and
      integration tests fast and deterministic.
    - FastAPI runs sync handlers on a thread pool, so every store guards its
      dictionaries with a lock.
    - Restaurants are read-only through the API; `add_restaurant` exists for
      seeding and tests.

LLM Prompt Example:
    "Explain how this in-memory storage can be swapped for PostgreSQL without
     changing the managers or routes, by adhering to narrow store interfaces."
"""

import itertools
import threading
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..models import Bookmark, PriceRange, Restaurant, Review, User, utcnow
from .base import BaseBookmarkStore, BaseRestaurantStore, BaseReviewStore, BaseUserStore
from .filters import RestaurantFilter


def _newest_first(items, key):
    # Reverse first so that equal timestamps still come out newest-inserted first.
    return sorted(reversed(list(items)), key=key, reverse=True)


class UserStorage(BaseUserStore):
    def __init__(self, dependents: Iterable[Union["ReviewStorage", "BookmarkStorage"]] = ()):
        """
        Internal schema:
            self.users = { user_id: User }

        `dependents` are stores holding rows owned by a user; deleting the user
        purges them too, like ON DELETE CASCADE in schema.sql.
        """
        self.users: Dict[int, User] = {}
        self.dependents = tuple(dependents)
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        for user in list(self.users.values()):
            if user.username == username:
                return user
        return None

    def insert_user(self, username: str, email: str, password_hash: str) -> Optional[User]:
        with self._lock:
            # Mirrors the UNIQUE constraints on users.username / users.email.
            if self.username_exists(username) or self.email_exists(email):
                return None
            user = User(
                user_id=next(self._ids),
                username=username,
                email=email,
                password_hash=password_hash,
                created_at=utcnow(),
            )
            self.users[user.user_id] = user
            return user

    def update_username(self, user_id: int, username: str) -> bool:
        with self._lock:
            user = self.users.get(user_id)
            if user is None:
                return False
            self.users[user_id] = user.model_copy(update={"username": username})
            return True

    def update_password(self, user_id: int, password_hash: str) -> bool:
        with self._lock:
            user = self.users.get(user_id)
            if user is None:
                return False
            self.users[user_id] = user.model_copy(update={"password_hash": password_hash})
            return True

    def delete_user(self, user_id: int) -> bool:
        with self._lock:
            if self.users.pop(user_id, None) is None:
                return False
            for store in self.dependents:
                store.delete_by_user(user_id)
            return True

    def username_exists(self, username: str) -> bool:
        return any(u.username == username for u in list(self.users.values()))

    def email_exists(self, email: str) -> bool:
        return any(u.email == email for u in list(self.users.values()))


class RestaurantStorage(BaseRestaurantStore):
    def __init__(self):
        self.restaurants: Dict[int, Restaurant] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def add_restaurant(
        self,
        name: str,
        neighborhood: str,
        cuisine: str,
        price_range: PriceRange,
        dietary_options: str = "",
        address: str = "",
        opening_hours: str = "",
        created_at: Optional[datetime] = None,
    ) -> Restaurant:
        """Insert a restaurant (seeding/test helper; not part of the API surface)."""
        with self._lock:
            restaurant = Restaurant(
                restaurant_id=next(self._ids),
                name=name,
                address=address,
                neighborhood=neighborhood,
                opening_hours=opening_hours,
                cuisine=cuisine,
                price_range=PriceRange(price_range),
                dietary_options=dietary_options,
                created_at=created_at or utcnow(),
            )
            self.restaurants[restaurant.restaurant_id] = restaurant
            return restaurant

    def get_by_id(self, restaurant_id: int) -> Optional[Restaurant]:
        return self.restaurants.get(restaurant_id)

    def filter_restaurants(self, criteria: RestaurantFilter) -> List[Restaurant]:
        # Insertion order stands in for the database's natural order.
        return [r for r in list(self.restaurants.values()) if criteria.matches(r)]


class ReviewStorage(BaseReviewStore):
    def __init__(self):
        self.reviews: Dict[int, Review] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def get_reviews_by_restaurant(self, restaurant_id: int) -> List[Review]:
        matching = [r for r in list(self.reviews.values()) if r.restaurant_id == restaurant_id]
        return _newest_first(matching, key=lambda r: r.created_at)

    def get_user_review(self, user_id: int, restaurant_id: int) -> Optional[Review]:
        for review in list(self.reviews.values()):
            if review.user_id == user_id and review.restaurant_id == restaurant_id:
                return review
        return None

    def insert_review(
        self, user_id: int, restaurant_id: int, rating: int, comment: Optional[str]
    ) -> Optional[Review]:
        with self._lock:
            # One review per (user, restaurant), like the UNIQUE constraint in schema.sql.
            if self.get_user_review(user_id, restaurant_id) is not None:
                return None
            review = Review(
                review_id=next(self._ids),
                user_id=user_id,
                restaurant_id=restaurant_id,
                rating=rating,
                comment=comment,
                created_at=utcnow(),
            )
            self.reviews[review.review_id] = review
            return review

    def update_review(self, review_id: int, user_id: int, rating: int, comment: Optional[str]) -> bool:
        with self._lock:
            review = self.reviews.get(review_id)
            if review is None or review.user_id != user_id:
                return False
            self.reviews[review_id] = review.model_copy(update={"rating": rating, "comment": comment})
            return True

    def delete_review(self, review_id: int, user_id: int) -> bool:
        with self._lock:
            review = self.reviews.get(review_id)
            if review is None or review.user_id != user_id:
                return False
            del self.reviews[review_id]
            return True

    def delete_by_user(self, user_id: int) -> int:
        """Drop every review written by `user_id`; returns how many were removed."""
        with self._lock:
            doomed = [rid for rid, r in self.reviews.items() if r.user_id == user_id]
            for rid in doomed:
                del self.reviews[rid]
            return len(doomed)


class BookmarkStorage(BaseBookmarkStore):
    def __init__(self, restaurants: RestaurantStorage):
        """
        Internal schema:
            self.bookmarks = { (user_id, restaurant_id): Bookmark }

        The restaurant store is needed to resolve bookmarked restaurants
        (the SQL backend does the same with a JOIN).
        """
        self.bookmarks: Dict[Tuple[int, int], Bookmark] = {}
        self.restaurants = restaurants
        self._lock = threading.Lock()

    def get_bookmarks_by_user(self, user_id: int) -> List[Bookmark]:
        mine = [b for b in list(self.bookmarks.values()) if b.user_id == user_id]
        return _newest_first(mine, key=lambda b: b.created_at)

    def is_bookmarked(self, user_id: int, restaurant_id: int) -> bool:
        return (user_id, restaurant_id) in self.bookmarks

    def add_bookmark(self, user_id: int, restaurant_id: int) -> Optional[Bookmark]:
        with self._lock:
            key = (user_id, restaurant_id)
            if key in self.bookmarks:
                return None
            bookmark = Bookmark(user_id=user_id, restaurant_id=restaurant_id, created_at=utcnow())
            self.bookmarks[key] = bookmark
            return bookmark

    def remove_bookmark(self, user_id: int, restaurant_id: int) -> bool:
        with self._lock:
            return self.bookmarks.pop((user_id, restaurant_id), None) is not None

    def delete_by_user(self, user_id: int) -> int:
        with self._lock:
            doomed = [key for key in self.bookmarks if key[0] == user_id]
            for key in doomed:
                del self.bookmarks[key]
            return len(doomed)

    def get_bookmarked_restaurants(self, user_id: int) -> List[Restaurant]:
        result = []
        for bookmark in self.get_bookmarks_by_user(user_id):
            restaurant = self.restaurants.get_by_id(bookmark.restaurant_id)
            if restaurant is not None:
                result.append(restaurant)
        return result
