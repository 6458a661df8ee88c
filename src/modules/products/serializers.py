"""Product DRF serializer for API output.

Field names go out verbatim as ``Id``, ``Name``, ``Price`` and
``Description``; ``Price`` keeps DRF's decimal-as-string rendering
(``"1000.00"``), so both fractional digits survive.  Input is
validated by ``modules.products.validation``, not here.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import (
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    Product,
)


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    Id = serializers.IntegerField(source="id", read_only=True)
    Name = serializers.CharField(source="name", max_length=NAME_MAX_LENGTH)
    Price = serializers.DecimalField(
        source="price",
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )
    Description = serializers.CharField(
        source="description",
        allow_null=True,
        required=False,
    )

    class Meta:
        model = Product
        fields = ["Id", "Name", "Price", "Description"]
