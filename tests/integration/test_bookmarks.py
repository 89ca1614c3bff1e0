"""
Integration tests for /api/bookmark endpoints.
"""


def _add(client, auth, user_id=1, restaurant_id=1):
    return client.post("/api/bookmark", json={"userId": user_id, "restaurantId": restaurant_id}, headers=auth)


def test_add_bookmark(client, john_auth):
    response = _add(client, john_auth, restaurant_id=5)
    assert response.status_code == 201
    assert response.json()["restaurantId"] == 5
    assert response.headers["location"] == "/api/bookmark/check/1/5"


def test_check_bookmark(client, john_auth):
    assert client.get("/api/bookmark/check/1/5", headers=john_auth).json() is False
    _add(client, john_auth, restaurant_id=5)
    response = client.get("/api/bookmark/check/1/5", headers=john_auth)
    assert response.status_code == 200
    assert response.json() is True


def test_duplicate_bookmark_conflicts(client, john_auth):
    _add(client, john_auth)
    response = _add(client, john_auth)
    assert response.status_code == 409
    assert response.json()["detail"] == "Restaurant with ID 1 is already bookmarked by user with ID 1"


def test_bookmark_unknown_restaurant(client, john_auth):
    assert _add(client, john_auth, restaurant_id=999).status_code == 404


def test_bookmarked_restaurants_most_recent_first(client, john_auth):
    _add(client, john_auth, restaurant_id=2)
    _add(client, john_auth, restaurant_id=6)
    response = client.get("/api/bookmark/user/1/restaurants", headers=john_auth)
    assert response.status_code == 200
    assert [r["name"] for r in response.json()] == ["Hija de Sanchez", "Manfreds"]


def test_bookmarked_restaurants_unknown_user(client, john_auth):
    assert client.get("/api/bookmark/user/999/restaurants", headers=john_auth).status_code == 404


def test_remove_bookmark(client, john_auth):
    _add(client, john_auth, restaurant_id=3)
    assert client.delete("/api/bookmark/1/3", headers=john_auth).status_code == 204
    response = client.delete("/api/bookmark/1/3", headers=john_auth)
    assert response.status_code == 404
    assert response.json()["detail"] == "Bookmark not found for user ID 1 and restaurant ID 3"
