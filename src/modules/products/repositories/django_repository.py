"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: a missing row is ``None``,
never an HTTP-level exception.  Each write commits in its own
``transaction.atomic`` block.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.products.exceptions import ProductConcurrencyConflict
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        return Product.objects.filter(id=id).first()

    def list(self) -> List[Product]:
        return list(Product.objects.all())

    @transaction.atomic
    def add(self, entity: Product) -> Product:
        """Insert a new row; the database assigns ``entity.id``."""
        entity.id = None
        entity.save(force_insert=True)
        logger.info("product.inserted", product_id=entity.id)
        return entity

    @transaction.atomic
    def update(self, entity: Product) -> None:
        """Replace the stored row with ``entity``.

        A plain ``UPDATE ... WHERE id = %s``.  Zero affected rows means
        the row the caller assumed is no longer there.
        """
        affected = Product.objects.filter(id=entity.id).update(
            name=entity.name,
            price=entity.price,
            quantity=entity.quantity,
        )
        if affected == 0:
            raise ProductConcurrencyConflict(
                f"Update of product {entity.id} affected 0 rows; expected 1."
            )
        logger.info("product.replaced", product_id=entity.id)

    @transaction.atomic
    def delete(self, entity: Product) -> None:
        product_id = entity.id
        entity.delete()
        logger.info("product.removed", product_id=product_id)

    def exists(self, id: int) -> bool:
        return Product.objects.filter(id=id).exists()
