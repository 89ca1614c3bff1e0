"""
ReviewManager module for Restaurant Explorer.

Responsibilities:
    - List reviews of a restaurant (newest first)
    - Enforce one review per user per restaurant
    - Update and delete a user's own review

Design notes:
    - Existence of the referenced user and restaurant is checked before any
      write, so callers get a precise 404 instead of a constraint failure.
    - A review is addressed by (user_id, restaurant_id); the review id is
      resolved internally, so a user can only touch their own review.
"""

from typing import List

from ..errors import ConflictError, NotFoundError, OperationFailedError
from ..models import Review, ReviewIn
from ..storage.base import BaseRestaurantStore, BaseReviewStore, BaseUserStore


class ReviewManager:
    def __init__(
        self,
        reviews: BaseReviewStore,
        users: BaseUserStore,
        restaurants: BaseRestaurantStore,
    ):
        self.reviews = reviews
        self.users = users
        self.restaurants = restaurants

    def _require_user(self, user_id: int) -> None:
        if self.users.get_user_by_id(user_id) is None:
            raise NotFoundError(f"User with ID {user_id} not found")

    def _require_restaurant(self, restaurant_id: int) -> None:
        if self.restaurants.get_by_id(restaurant_id) is None:
            raise NotFoundError(f"Restaurant with ID {restaurant_id} not found")

    def reviews_for_restaurant(self, restaurant_id: int) -> List[Review]:
        self._require_restaurant(restaurant_id)
        return self.reviews.get_reviews_by_restaurant(restaurant_id)

    def user_review(self, user_id: int, restaurant_id: int) -> Review:
        self._require_user(user_id)
        self._require_restaurant(restaurant_id)
        review = self.reviews.get_user_review(user_id, restaurant_id)
        if review is None:
            raise NotFoundError(
                f"Review for restaurant ID {restaurant_id} by user ID {user_id} not found"
            )
        return review

    def create_review(self, payload: ReviewIn) -> Review:
        """
        Create a review.

        Raises:
            NotFoundError: Unknown user or restaurant.
            ConflictError: The user already reviewed this restaurant.
            OperationFailedError: The store refused the insert.
        """
        self._require_user(payload.user_id)
        self._require_restaurant(payload.restaurant_id)
        if self.reviews.get_user_review(payload.user_id, payload.restaurant_id) is not None:
            raise ConflictError("User already has a review for this restaurant")

        review = self.reviews.insert_review(
            payload.user_id, payload.restaurant_id, payload.rating, payload.comment
        )
        if review is None:
            raise OperationFailedError("Failed to create review")
        return review

    def update_review(self, payload: ReviewIn) -> Review:
        existing = self.reviews.get_user_review(payload.user_id, payload.restaurant_id)
        if existing is None:
            raise NotFoundError("Review not found or doesn't belong to this user")

        ok = self.reviews.update_review(
            existing.review_id, payload.user_id, payload.rating, payload.comment
        )
        if not ok:
            raise OperationFailedError("Failed to update review")
        return existing.model_copy(update={"rating": payload.rating, "comment": payload.comment})

    def delete_review(self, user_id: int, restaurant_id: int) -> None:
        existing = self.reviews.get_user_review(user_id, restaurant_id)
        if existing is None:
            raise NotFoundError("Review not found")
        if not self.reviews.delete_review(existing.review_id, user_id):
            raise OperationFailedError("Failed to delete review")
