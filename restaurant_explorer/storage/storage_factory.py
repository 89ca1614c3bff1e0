"""
Storage factory: switch storage backend from config (lazy env version)
======================================================================

This module centralizes selection of the storage backend (in-memory vs DB)
so the rest of the app can stay ignorant of where data lives.

- Reads environment **at call time** to avoid stale values in tests.
- Imports the DB backend **only if** the selected backend is "postgres".

Environment variables
---------------------
- EXPLORER_STORAGE_BACKEND: "memory" (default) or "postgres"
- EXPLORER_DB_DSN:          DSN string if backend=="postgres"
- EXPLORER_SEED_DEMO_DATA:  "1" (default) to seed the memory backend
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .base import BaseBookmarkStore, BaseRestaurantStore, BaseReviewStore, BaseUserStore
from .storage import BookmarkStorage, RestaurantStorage, ReviewStorage, UserStorage

log = logging.getLogger(__name__)


@dataclass
class Stores:
    """The four stores the app is wired with."""
    users: BaseUserStore
    restaurants: BaseRestaurantStore
    reviews: BaseReviewStore
    bookmarks: BaseBookmarkStore


def memory_stores(seed: bool = False) -> Stores:
    """Fresh, isolated in-memory stores (optionally seeded with demo rows)."""
    restaurants = RestaurantStorage()
    reviews = ReviewStorage()
    bookmarks = BookmarkStorage(restaurants)
    # Deleting a user cascades to their reviews and bookmarks, as in schema.sql
    users = UserStorage(dependents=(reviews, bookmarks))
    if seed:
        from .sample_data import seed_memory

        seed_memory(users, restaurants)
    return Stores(users=users, restaurants=restaurants, reviews=reviews, bookmarks=bookmarks)


def get_stores(backend: Optional[str] = None, **kwargs) -> Stores:
    """
    Return the stores for the configured backend.

    Parameters
    ----------
    backend : str, optional
        "memory" (default) or "postgres". If omitted, reads EXPLORER_STORAGE_BACKEND.
    kwargs : dict
        For postgres, dsn="...". For memory, seed=True/False.

    Raises
    ------
    ValueError
        Unknown backend, or postgres without a DSN.
    """
    be = (backend or os.getenv("EXPLORER_STORAGE_BACKEND", "memory")).strip().lower()
    log.info("Selected storage backend: %r", be)

    if be == "memory":
        seed = kwargs.get("seed")
        if seed is None:
            seed = os.getenv("EXPLORER_SEED_DEMO_DATA", "1").strip().lower() in {"1", "true", "yes", "on"}
        return memory_stores(seed=seed)

    if be == "postgres":
        dsn = kwargs.get("dsn") or os.getenv("EXPLORER_DB_DSN", "")
        if not dsn:
            raise ValueError("DB_DSN is required for postgres backend (env EXPLORER_DB_DSN)")
        # Local import to avoid hard dependency when not using postgres
        from .db_storage import BookmarkDBStorage, RestaurantDBStorage, ReviewDBStorage, UserDBStorage

        return Stores(
            users=UserDBStorage(dsn),
            restaurants=RestaurantDBStorage(dsn),
            reviews=ReviewDBStorage(dsn),
            bookmarks=BookmarkDBStorage(dsn),
        )

    raise ValueError(f"Unknown storage backend: {be!r}")
