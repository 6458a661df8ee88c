"""Product service layer (Use Cases).

Implements the per-verb resource contract on top of the injected
``IProductRepository``.  Every method returns a result kind and never
raises for expected outcomes:

- PUT replaces ``name``, ``price`` and ``description`` of an existing
  record.  It never creates: an absent id is ``NotFound``.
- PATCH applies ``price`` only.  Other fields in the body are ignored
  (a narrowing kept for compatibility with existing clients).
- DELETE checks existence first, so a second delete on the same id is
  ``NotFound`` even though the store would treat it as a no-op.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List

import structlog

from modules.products.models import Product
from modules.products.validation import (
    ID_MISMATCH_MESSAGE,
    NULL_BODY_ERRORS,
    body_id_matches,
    normalize_payload,
    validate_price_update,
    validate_product,
)
from shared.domain.results import NotFound, Result, Success, ValidationFailed

if TYPE_CHECKING:
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> Result[List[Product]]:
        return self._repo.list()

    def get_product(self, id: int) -> Result[Product]:
        """Retrieve a single product; ``NotFound`` when absent.

        HEAD uses this same lookup so both verbs agree on existence.
        """
        result = self._repo.get_by_id(id)
        if not result.ok:
            return result
        if result.value is None:
            logger.info("product.not_found", product_id=id)
            return NotFound(id=id)
        return result

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, payload: Any) -> Result[Product]:
        """Validate a full body and insert it; any ``Id`` in it is ignored."""
        validated = validate_product(payload)
        if not validated.ok:
            logger.info("product.validation_failed", errors=validated.errors)
            return validated

        result = self._repo.create(Product(**validated.value.to_fields()))
        if result.ok:
            logger.info("product.created", product_id=result.value.id)
        return result

    def replace_product(self, id: int, payload: Any) -> Result[None]:
        """Overwrite all mutable fields of the product at ``id`` (PUT)."""
        rejected = self._check_body(id, payload, id_required=True)
        if rejected is not None:
            return rejected

        validated = validate_product(payload)
        if not validated.ok:
            logger.info(
                "product.validation_failed",
                product_id=id,
                errors=validated.errors,
            )
            return validated

        result = self._update_existing(id, validated.value.to_fields())
        if result.ok:
            logger.info("product.replaced", product_id=id)
        return result

    def update_price(self, id: int, payload: Any) -> Result[None]:
        """Apply the body's ``Price`` to the product at ``id`` (PATCH)."""
        rejected = self._check_body(id, payload, id_required=False)
        if rejected is not None:
            return rejected

        validated = validate_price_update(payload)
        if not validated.ok:
            logger.info(
                "product.validation_failed",
                product_id=id,
                errors=validated.errors,
            )
            return validated

        result = self._update_existing(id, validated.value.to_fields())
        if result.ok:
            logger.info(
                "product.price_updated",
                product_id=id,
                price=str(validated.value.price),
            )
        return result

    def delete_product(self, id: int) -> Result[None]:
        """Permanently remove the product at ``id``."""
        found = self._require_existing(id)
        if not found.ok:
            return found

        result = self._repo.delete(id)
        if not result.ok:
            return result
        if result.value == 0:
            # Removed by a concurrent request between the check and the delete.
            return NotFound(id=id)
        logger.info("product.deleted", product_id=id)
        return Success(None)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_body(
        self, id: int, payload: Any, id_required: bool
    ) -> ValidationFailed | None:
        if not isinstance(payload, dict):
            logger.info("product.validation_failed", product_id=id, reason="null_body")
            return ValidationFailed(errors=dict(NULL_BODY_ERRORS))
        if not body_id_matches(normalize_payload(payload), id, required=id_required):
            logger.info("product.validation_failed", product_id=id, reason="id_mismatch")
            return ValidationFailed(errors={"Id": [ID_MISMATCH_MESSAGE]})
        return None

    def _require_existing(self, id: int) -> Result[bool]:
        found = self._repo.exists(id)
        if not found.ok:
            return found
        if not found.value:
            logger.info("product.not_found", product_id=id)
            return NotFound(id=id)
        return found

    def _update_existing(self, id: int, fields: Dict[str, Any]) -> Result[None]:
        found = self._require_existing(id)
        if not found.ok:
            return found

        result = self._repo.update(id, fields)
        if not result.ok:
            return result
        if result.value == 0:
            return NotFound(id=id)
        return Success(None)
