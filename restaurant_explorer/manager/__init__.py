"""Business rules for restaurants, reviews, bookmarks and user accounts."""

from .bookmark_manager import BookmarkManager
from .restaurant_manager import RestaurantManager
from .review_manager import ReviewManager
from .user_manager import UserManager

__all__ = ["BookmarkManager", "RestaurantManager", "ReviewManager", "UserManager"]
