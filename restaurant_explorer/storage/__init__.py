"""Storage backends and the restaurant filter builder."""

from .base import (
    BaseBookmarkStore,
    BaseRestaurantStore,
    BaseReviewStore,
    BaseUserStore,
    StorageError,
)
from .filters import RestaurantFilter, build_where_clause
from .storage_factory import Stores, get_stores, memory_stores

__all__ = [
    "BaseBookmarkStore",
    "BaseRestaurantStore",
    "BaseReviewStore",
    "BaseUserStore",
    "RestaurantFilter",
    "StorageError",
    "Stores",
    "build_where_clause",
    "get_stores",
    "memory_stores",
]
