"""
BookmarkManager module for Restaurant Explorer.

Responsibilities:
    - List the restaurants a user bookmarked (most recent first)
    - Check, add and remove bookmarks with existence and duplicate checks
"""

from typing import List

from ..errors import ConflictError, NotFoundError, OperationFailedError
from ..models import Bookmark, Restaurant
from ..storage.base import BaseBookmarkStore, BaseRestaurantStore, BaseUserStore


class BookmarkManager:
    def __init__(
        self,
        bookmarks: BaseBookmarkStore,
        users: BaseUserStore,
        restaurants: BaseRestaurantStore,
    ):
        self.bookmarks = bookmarks
        self.users = users
        self.restaurants = restaurants

    def _require_user(self, user_id: int) -> None:
        if self.users.get_user_by_id(user_id) is None:
            raise NotFoundError(f"User with ID {user_id} not found")

    def _require_restaurant(self, restaurant_id: int) -> None:
        if self.restaurants.get_by_id(restaurant_id) is None:
            raise NotFoundError(f"Restaurant with ID {restaurant_id} not found")

    def bookmarked_restaurants(self, user_id: int) -> List[Restaurant]:
        self._require_user(user_id)
        return self.bookmarks.get_bookmarked_restaurants(user_id)

    def is_bookmarked(self, user_id: int, restaurant_id: int) -> bool:
        self._require_user(user_id)
        self._require_restaurant(restaurant_id)
        return self.bookmarks.is_bookmarked(user_id, restaurant_id)

    def add_bookmark(self, user_id: int, restaurant_id: int) -> Bookmark:
        """
        Bookmark a restaurant for a user.

        Raises:
            NotFoundError: Unknown user or restaurant.
            ConflictError: Already bookmarked.
            OperationFailedError: The store refused the insert.
        """
        self._require_user(user_id)
        self._require_restaurant(restaurant_id)
        if self.bookmarks.is_bookmarked(user_id, restaurant_id):
            raise ConflictError(
                f"Restaurant with ID {restaurant_id} is already bookmarked by user with ID {user_id}"
            )
        bookmark = self.bookmarks.add_bookmark(user_id, restaurant_id)
        if bookmark is None:
            raise OperationFailedError("Failed to add bookmark")
        return bookmark

    def remove_bookmark(self, user_id: int, restaurant_id: int) -> None:
        self._require_user(user_id)
        self._require_restaurant(restaurant_id)
        if not self.bookmarks.is_bookmarked(user_id, restaurant_id):
            raise NotFoundError(
                f"Bookmark not found for user ID {user_id} and restaurant ID {restaurant_id}"
            )
        if not self.bookmarks.remove_bookmark(user_id, restaurant_id):
            raise OperationFailedError("Failed to remove bookmark")
