"""
Global pytest fixtures for the Restaurant Explorer test suite.

Responsibilities:
    - Provide fresh in-memory stores populated with a small, known dataset
    - Provide a FastAPI TestClient built via the app factory on those stores
    - Provide ready-made Authorization header values for the known users

Known dataset (ids are assigned in insertion order, starting at 1):
    users:
        1 john.doe   / VerySecret!
        2 jane.smith / pa:ss:word
    restaurants:
        1 Bæst              Nørrebro        Italian  M  Vegetarian
        2 Manfreds          Nørrebro        Nordic   M  Vegetarian, Vegan
        3 Kødbyens Fiskebar Vesterbro       Seafood  H  Gluten-free
        4 Gasoline Grill    Indre By        Burgers  L  (none)
        5 Noma              Christianshavn  Nordic   H  Vegetarian, Vegan, Gluten-free
        6 Hija de Sanchez   Vesterbro       Mexican  L  Vegan
"""

import pytest
from fastapi.testclient import TestClient

from auth.utils import encode_credentials
from main import create_app
from restaurant_explorer.storage.storage_factory import Stores, memory_stores

RESTAURANTS = [
    ("Bæst", "Nørrebro", "Italian", "M", "Vegetarian"),
    ("Manfreds", "Nørrebro", "Nordic", "M", "Vegetarian, Vegan"),
    ("Kødbyens Fiskebar", "Vesterbro", "Seafood", "H", "Gluten-free"),
    ("Gasoline Grill", "Indre By", "Burgers", "L", ""),
    ("Noma", "Christianshavn", "Nordic", "H", "Vegetarian, Vegan, Gluten-free"),
    ("Hija de Sanchez", "Vesterbro", "Mexican", "L", "Vegan"),
]


@pytest.fixture
def stores() -> Stores:
    """Fresh in-memory stores with the known dataset."""
    s = memory_stores(seed=False)
    s.users.insert_user("john.doe", "john.doe@example.com", "VerySecret!")
    s.users.insert_user("jane.smith", "jane.smith@example.com", "pa:ss:word")
    for name, neighborhood, cuisine, price, dietary in RESTAURANTS:
        s.restaurants.add_restaurant(
            name=name,
            neighborhood=neighborhood,
            cuisine=cuisine,
            price_range=price,
            dietary_options=dietary,
        )
    return s


@pytest.fixture
def client(stores: Stores) -> TestClient:
    """
    Provide a TestClient for a new app instance wired to the `stores` fixture.

    Notes:
        - Uses the app factory so each test gets clean, isolated state.
        - Tests can reach into `stores` directly to arrange or assert data.
    """
    return TestClient(create_app(stores))


@pytest.fixture
def john_auth() -> dict:
    return {"Authorization": encode_credentials("john.doe", "VerySecret!")}


@pytest.fixture
def jane_auth() -> dict:
    return {"Authorization": encode_credentials("jane.smith", "pa:ss:word")}
