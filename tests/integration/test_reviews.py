"""
Integration tests for /api/review endpoints.
"""


def _create(client, auth, user_id=1, restaurant_id=1, rating=4, comment="Good pasta"):
    return client.post(
        "/api/review",
        json={"userId": user_id, "restaurantId": restaurant_id, "rating": rating, "comment": comment},
        headers=auth,
    )


def test_create_review(client, john_auth):
    response = _create(client, john_auth)
    assert response.status_code == 201
    data = response.json()
    assert data["reviewId"] == 1
    assert data["rating"] == 4
    assert response.headers["location"] == "/api/review/user/1/restaurant/1"


def test_get_user_review(client, john_auth):
    _create(client, john_auth)
    response = client.get("/api/review/user/1/restaurant/1", headers=john_auth)
    assert response.status_code == 200
    assert response.json()["comment"] == "Good pasta"


def test_get_user_review_missing(client, john_auth):
    assert client.get("/api/review/user/1/restaurant/2", headers=john_auth).status_code == 404


def test_reviews_for_restaurant_are_public_and_newest_first(client, john_auth, jane_auth):
    _create(client, john_auth, user_id=1, comment="first")
    _create(client, jane_auth, user_id=2, comment="second")
    response = client.get("/api/review/restaurant/1")
    assert response.status_code == 200
    assert [r["comment"] for r in response.json()] == ["second", "first"]


def test_reviews_for_unknown_restaurant(client):
    assert client.get("/api/review/restaurant/999").status_code == 404


def test_duplicate_review_conflicts(client, john_auth):
    _create(client, john_auth)
    response = _create(client, john_auth, rating=1)
    assert response.status_code == 409
    assert response.json()["detail"] == "User already has a review for this restaurant"


def test_review_for_unknown_restaurant(client, john_auth):
    response = _create(client, john_auth, restaurant_id=999)
    assert response.status_code == 404
    assert response.json()["detail"] == "Restaurant with ID 999 not found"


def test_rating_out_of_range(client, john_auth):
    assert _create(client, john_auth, rating=6).status_code == 422
    assert _create(client, john_auth, rating=0).status_code == 422


def test_update_review(client, john_auth):
    _create(client, john_auth, rating=2)
    response = client.put(
        "/api/review",
        json={"userId": 1, "restaurantId": 1, "rating": 5, "comment": "Changed my mind"},
        headers=john_auth,
    )
    assert response.status_code == 200
    assert response.json()["rating"] == 5
    assert response.json()["reviewId"] == 1


def test_update_missing_review(client, john_auth):
    response = client.put(
        "/api/review", json={"userId": 1, "restaurantId": 2, "rating": 5}, headers=john_auth
    )
    assert response.status_code == 404


def test_delete_review(client, john_auth):
    _create(client, john_auth)
    response = client.delete("/api/review/user/1/restaurant/1", headers=john_auth)
    assert response.status_code == 204
    assert client.delete("/api/review/user/1/restaurant/1", headers=john_auth).status_code == 404
