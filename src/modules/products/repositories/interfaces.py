"""Product repository interface.

The Product store needs nothing beyond the generic keyed-store contract
of ``IRepository``; this alias pins the entity type so services and
tests depend on a named abstraction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product resource."""
