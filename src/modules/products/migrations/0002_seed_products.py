"""Seed the two reference products (Laptop, Smartphone).

Rows are inserted with explicit ids, so the id sequence is reset afterwards
on backends that keep one (PostgreSQL); the next created product gets id 3.
"""

from decimal import Decimal

from django.core.management.color import no_style
from django.db import migrations

# Frozen copy of modules.products.constants.SEED_PRODUCTS; migrations must
# not import app code that can change after they are applied.
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


def seed_products(apps, schema_editor):
    Product = apps.get_model("products", "Product")
    db_alias = schema_editor.connection.alias
    Product.objects.using(db_alias).bulk_create(
        [Product(**fields) for fields in SEED_PRODUCTS]
    )

    connection = schema_editor.connection
    statements = connection.ops.sequence_reset_sql(no_style(), [Product])
    with connection.cursor() as cursor:
        for sql in statements:
            cursor.execute(sql)


def unseed_products(apps, schema_editor):
    Product = apps.get_model("products", "Product")
    db_alias = schema_editor.connection.alias
    Product.objects.using(db_alias).filter(
        id__in=[fields["id"] for fields in SEED_PRODUCTS]
    ).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("products", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_products, unseed_products),
    ]
