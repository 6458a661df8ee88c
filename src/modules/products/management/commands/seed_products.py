from __future__ import annotations

from django.core.management.base import BaseCommand
from django.core.management.color import no_style
from django.db import connection, transaction

from modules.products.constants import SEED_PRODUCTS
from modules.products.models import Product


class Command(BaseCommand):
    help = "Restore the reference products (Laptop, Smartphone) by id."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")
        created = 0
        for fields in SEED_PRODUCTS:
            defaults = {key: value for key, value in fields.items() if key != "id"}
            _, was_created = Product.objects.update_or_create(
                id=fields["id"], defaults=defaults
            )
            created += int(was_created)

        with connection.cursor() as cursor:
            for sql in connection.ops.sequence_reset_sql(no_style(), [Product]):
                cursor.execute(sql)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: created={created}, "
                f"restored={len(SEED_PRODUCTS) - created}"
            )
        )
