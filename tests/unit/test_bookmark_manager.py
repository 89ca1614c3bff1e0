"""
Unit tests for BookmarkManager.
"""

import pytest

from restaurant_explorer.errors import ConflictError, NotFoundError
from restaurant_explorer.manager import BookmarkManager
from restaurant_explorer.storage.storage_factory import memory_stores


@pytest.fixture
def manager():
    s = memory_stores()
    s.users.insert_user("john.doe", "john.doe@example.com", "VerySecret!")
    s.restaurants.add_restaurant("Bæst", "Nørrebro", "Italian", "M")
    s.restaurants.add_restaurant("Noma", "Christianshavn", "Nordic", "H")
    return BookmarkManager(s.bookmarks, s.users, s.restaurants)


def test_add_and_check(manager):
    bookmark = manager.add_bookmark(1, 2)
    assert (bookmark.user_id, bookmark.restaurant_id) == (1, 2)
    assert manager.is_bookmarked(1, 2) is True
    assert manager.is_bookmarked(1, 1) is False


def test_add_twice_conflicts(manager):
    manager.add_bookmark(1, 1)
    with pytest.raises(ConflictError, match="already bookmarked by user with ID 1"):
        manager.add_bookmark(1, 1)


@pytest.mark.parametrize("user_id,restaurant_id", [(9, 1), (1, 9)])
def test_unknown_user_or_restaurant(manager, user_id, restaurant_id):
    with pytest.raises(NotFoundError):
        manager.add_bookmark(user_id, restaurant_id)
    with pytest.raises(NotFoundError):
        manager.is_bookmarked(user_id, restaurant_id)


def test_bookmarked_restaurants_most_recent_first(manager):
    manager.add_bookmark(1, 1)
    manager.add_bookmark(1, 2)
    assert [r.name for r in manager.bookmarked_restaurants(1)] == ["Noma", "Bæst"]


def test_bookmarked_restaurants_unknown_user(manager):
    with pytest.raises(NotFoundError, match="User with ID 9 not found"):
        manager.bookmarked_restaurants(9)


def test_remove_bookmark(manager):
    manager.add_bookmark(1, 1)
    manager.remove_bookmark(1, 1)
    assert manager.is_bookmarked(1, 1) is False


def test_remove_missing_bookmark(manager):
    with pytest.raises(NotFoundError, match="Bookmark not found for user ID 1 and restaurant ID 2"):
        manager.remove_bookmark(1, 2)
