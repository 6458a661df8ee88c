"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the result-kind contract: a ``DatabaseError``
raised by any single operation is logged and returned as ``StoreFault``;
a missing row is ``Success(None)`` (lookup) or a zero row count
(update/delete), and the Service Layer decides what that means for the
API response.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog

from django.db import DatabaseError, transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from shared.domain.results import Result, StoreFault, Success

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def list(self) -> Result[List[Product]]:
        try:
            return Success(list(Product.objects.all()))
        except DatabaseError as exc:
            return self._fault("list", exc)

    def get_by_id(self, id: int) -> Result[Optional[Product]]:
        """Retrieve a product by primary key; ``Success(None)`` when absent."""
        try:
            return Success(Product.objects.filter(id=id).first())
        except DatabaseError as exc:
            return self._fault("get_by_id", exc, product_id=id)

    def exists(self, id: int) -> Result[bool]:
        try:
            return Success(Product.objects.filter(id=id).exists())
        except DatabaseError as exc:
            return self._fault("exists", exc, product_id=id)

    def create(self, entity: Product) -> Result[Product]:
        """Insert ``entity`` as a new row; any id it carries is discarded.

        The returned entity is re-read, so it holds what the store kept.
        """
        entity.id = None
        try:
            with transaction.atomic():
                entity.save(force_insert=True)
                entity.refresh_from_db()
        except DatabaseError as exc:
            return self._fault("create", exc)
        logger.info("product.inserted", product_id=entity.id)
        return Success(entity)

    def update(self, id: int, fields: Dict[str, Any]) -> Result[int]:
        """Overwrite ``fields`` on the row at ``id`` with a single UPDATE.

        No upsert: the value is the number of rows changed (0 or 1).
        """
        try:
            with transaction.atomic():
                count = Product.objects.filter(id=id).update(**fields)
        except DatabaseError as exc:
            return self._fault("update", exc, product_id=id)
        logger.info(
            "product.row_updated",
            product_id=id,
            fields=sorted(fields),
            rows=count,
        )
        return Success(count)

    def delete(self, id: int) -> Result[int]:
        """Hard-delete the row at ``id``; the value is the deleted row count."""
        try:
            with transaction.atomic():
                count, _ = Product.objects.filter(id=id).delete()
        except DatabaseError as exc:
            return self._fault("delete", exc, product_id=id)
        logger.info("product.row_deleted", product_id=id, rows=count)
        return Success(count)

    @staticmethod
    def _fault(operation: str, exc: DatabaseError, **context: Any) -> StoreFault:
        logger.error(
            "store.fault",
            operation=operation,
            error=str(exc),
            exc_info=True,
            **context,
        )
        return StoreFault(message=str(exc))
