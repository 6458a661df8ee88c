"""Unit tests for ProductDjangoRepository.

Covers:
- list / get_by_id / exists against the seeded store.
- create (id assignment), update (in place, no upsert), delete.
- DatabaseError surfaced as StoreFault instead of raised.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import patch

import pytest
from django.db import IntegrityError, OperationalError

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository
from shared.domain.results import StoreFault, Success

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


# ===========================================================================
# Queries
# ===========================================================================


class TestList:
    def test_returns_seed_products(self, repo):
        result = repo.list()
        assert isinstance(result, Success)
        assert [p.name for p in result.value] == ["Laptop", "Smartphone"]

    def test_returns_empty_list_when_no_products(self, repo):
        Product.objects.all().delete()
        assert repo.list() == Success([])


class TestGetById:
    def test_returns_product_when_found(self, repo):
        result = repo.get_by_id(1)
        assert result.value.name == "Laptop"
        assert result.value.price == Decimal("1000.00")

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(999) == Success(None)


class TestExists:
    def test_true_for_seed(self, repo):
        assert repo.exists(2) == Success(True)

    def test_false_for_absent(self, repo):
        assert repo.exists(999) == Success(False)


# ===========================================================================
# Commands
# ===========================================================================


class TestCreate:
    def test_assigns_new_id(self, repo):
        result = repo.create(Product(name="Widget", price=Decimal("9.99")))
        assert result.ok
        assert result.value.id not in (None, 1, 2)
        assert Product.objects.filter(id=result.value.id).exists()

    def test_ignores_supplied_id(self, repo):
        result = repo.create(Product(id=1, name="Impostor", price=Decimal("1.00")))
        assert result.value.id != 1
        assert Product.objects.get(id=1).name == "Laptop"

    def test_returns_stored_values(self, repo):
        result = repo.create(Product(name="Widget", price=Decimal("2.5")))
        assert result.value.price == Decimal("2.50")
        assert result.value.description is None

    def test_database_error_is_store_fault(self, repo):
        with patch.object(
            Product, "save", side_effect=IntegrityError("NOT NULL constraint failed")
        ):
            result = repo.create(Product(name="Widget", price=Decimal("1.00")))
        assert result == StoreFault("NOT NULL constraint failed")


class TestUpdate:
    def test_overwrites_named_fields_only(self, repo):
        result = repo.update(1, {"price": Decimal("899.99")})
        assert result == Success(1)
        product = Product.objects.get(id=1)
        assert product.price == Decimal("899.99")
        assert product.name == "Laptop"

    def test_absent_id_is_not_upserted(self, repo):
        assert repo.update(999, {"name": "Ghost"}) == Success(0)
        assert not Product.objects.filter(id=999).exists()


class TestDelete:
    def test_removes_row(self, repo):
        assert repo.delete(1) == Success(1)
        assert not Product.objects.filter(id=1).exists()

    def test_second_delete_is_noop(self, repo):
        repo.delete(1)
        assert repo.delete(1) == Success(0)


# ===========================================================================
# Store faults
# ===========================================================================


class TestStoreFaults:
    def test_list(self, repo):
        with patch.object(
            Product.objects, "all", side_effect=OperationalError("database is locked")
        ):
            assert repo.list() == StoreFault("database is locked")

    @pytest.mark.parametrize(
        "call",
        [
            lambda r: r.get_by_id(1),
            lambda r: r.exists(1),
            lambda r: r.update(1, {"name": "x"}),
            lambda r: r.delete(1),
        ],
        ids=["get_by_id", "exists", "update", "delete"],
    )
    def test_filter_based_operations(self, repo, call):
        with patch.object(
            Product.objects, "filter", side_effect=OperationalError("no such table")
        ):
            assert call(repo) == StoreFault("no such table")

    def test_fault_is_logged(self, repo, caplog):
        import logging

        with caplog.at_level(logging.ERROR, logger="modules.products.repositories.django_repository"):
            with patch.object(
                Product.objects, "all", side_effect=OperationalError("boom")
            ):
                repo.list()
        assert any("store.fault" in r.getMessage() for r in caplog.records)
