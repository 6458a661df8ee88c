"""Reference products present in every freshly migrated database."""

from decimal import Decimal

SEED_PRODUCTS = [
    {
        "id": 1,
        "name": "Laptop",
        "price": Decimal("1000.00"),
        "description": "A powerful laptop",
    },
    {
        "id": 2,
        "name": "Smartphone",
        "price": Decimal("500.00"),
        "description": "A modern smartphone",
    },
]
