from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Every test runs against the test database."""


@pytest.fixture()
def api_client():
    """DRF APIClient for the JSON-only product API."""
    return APIClient()


@pytest.fixture()
def make_product():
    """Factory that persists a Product, overriding any default field."""

    def _make(**overrides) -> Product:
        fields = {"name": "Apple", "price": Decimal("1.50"), "quantity": 10}
        fields.update(overrides)
        return Product.objects.create(**fields)

    return _make
