"""
Sample rows for demos: used to seed the in-memory backend and, through
`seed_restaurants.py`, a PostgreSQL database.
"""

from .storage import RestaurantStorage, UserStorage

DEMO_USERS = [
    # (username, email, password_hash)
    ("john.doe", "john.doe@example.com", "VerySecret!"),
    ("jane.smith", "jane.smith@example.com", "AlsoSecret!"),
]

DEMO_RESTAURANTS = [
    # (name, address, neighborhood, opening_hours, cuisine, price_range, dietary_options)
    ("Bæst", "Guldbergsgade 29, 2200 København N", "Nørrebro", "17:00-22:00", "Italian", "M", "Vegetarian"),
    ("Manfreds", "Jægersborggade 40, 2200 København N", "Nørrebro", "12:00-22:00", "Nordic", "M", "Vegetarian, Vegan"),
    ("Kødbyens Fiskebar", "Flæsketorvet 100, 1711 København V", "Vesterbro", "17:30-23:00", "Seafood", "H", "Gluten-free"),
    ("Gasoline Grill", "Landgreven 10, 1301 København K", "Indre By", "11:00-21:00", "Burgers", "L", ""),
    ("Noma", "Refshalevej 96, 1432 København K", "Christianshavn", "17:00-00:00", "Nordic", "H", "Vegetarian, Vegan, Gluten-free"),
    ("Hija de Sanchez", "Slagterboderne 8, 1716 København V", "Vesterbro", "11:00-22:00", "Mexican", "L", "Vegan"),
    ("Mirabelle", "Guldbergsgade 29, 2200 København N", "Nørrebro", "07:00-22:00", "Bakery", "L", "Vegetarian"),
    ("Geranium", "Per Henrik Lings Allé 4, 2100 København Ø", "Østerbro", "12:00-23:00", "Nordic", "H", "Vegetarian, Pescatarian"),
]


def seed_memory(users: UserStorage, restaurants: RestaurantStorage) -> None:
    """Fill empty in-memory stores with the demo rows."""
    for username, email, password_hash in DEMO_USERS:
        users.insert_user(username, email, password_hash)
    for name, address, neighborhood, hours, cuisine, price, dietary in DEMO_RESTAURANTS:
        restaurants.add_restaurant(
            name=name,
            address=address,
            neighborhood=neighborhood,
            opening_hours=hours,
            cuisine=cuisine,
            price_range=price,
            dietary_options=dietary,
        )
