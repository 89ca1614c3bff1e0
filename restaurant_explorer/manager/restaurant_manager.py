"""
RestaurantManager: lookup and filtering of restaurant listings.
"""

from typing import List

from ..errors import NotFoundError
from ..models import Restaurant
from ..storage.base import BaseRestaurantStore
from ..storage.filters import RestaurantFilter


class RestaurantManager:
    def __init__(self, restaurants: BaseRestaurantStore):
        self.restaurants = restaurants

    def get_restaurant(self, restaurant_id: int) -> Restaurant:
        restaurant = self.restaurants.get_by_id(restaurant_id)
        if restaurant is None:
            raise NotFoundError(f"Restaurant with ID {restaurant_id} not found")
        return restaurant

    def filter_restaurants(self, criteria: RestaurantFilter) -> List[Restaurant]:
        # Empty criteria is valid input: it returns every restaurant.
        return self.restaurants.filter_restaurants(criteria)
