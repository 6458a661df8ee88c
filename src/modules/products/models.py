"""Product model, the single resource exposed by the API.

Columns:
- ``id``: integer surrogate key assigned by the database.
- ``name``: required, at most 100 characters.
- ``price``: ``decimal(18,2)``, of which inputs may use 15 significant
  digits.  Non-negativity is not enforced.
- ``description``: optional, nullable.
"""

from __future__ import annotations

from django.db import models

NAME_MAX_LENGTH = 100
PRICE_MAX_DIGITS = 18
PRICE_DECIMAL_PLACES = 2
# Accepted on input.  SQLite keeps decimals as REAL, exact to 15 digits.
PRICE_MAX_SIGNIFICANT_DIGITS = 15


class Product(models.Model):
    id = models.AutoField(primary_key=True)
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ001

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
