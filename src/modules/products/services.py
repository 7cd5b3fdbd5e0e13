"""Product service layer (Use Cases).

Orchestrates the Product resource, delegating persistence to the
injected ``IProductRepository`` and returning immutable output DTOs.

Update policy: a concurrency conflict on commit is resolved only when
the row has vanished (reported as ``ProductNotFound``).  When the row
still exists the conflict is re-raised; it is never retried or merged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.products.dtos import ProductOutputDTO
from modules.products.exceptions import (
    ProductConcurrencyConflict,
    ProductIdMismatch,
    ProductNotFound,
)
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> ProductOutputDTO:
        """Persist a new product and return it with its assigned ``id``."""
        product = Product(name=dto.name, price=dto.price, quantity=dto.quantity)
        product = self._repo.add(product)
        logger.info("product.created", product_id=product.id, name=product.name)
        return ProductOutputDTO.from_entity(product)

    # Not atomic: the existence re-check must see the store after the
    # failed write has rolled back.
    def update_product(self, id: int, dto: UpdateProductDTO) -> None:
        """Replace every field of product ``id`` with the payload.

        Raises:
            ProductIdMismatch: if ``dto.id`` differs from ``id``.
            ProductNotFound: if the row does not exist at commit time.
            ProductConcurrencyConflict: if the commit conflicted while the
                row still exists.
        """
        log = logger.bind(product_id=id)

        if dto.id != id:
            log.warning("product.id_mismatch", payload_id=dto.id)
            raise ProductIdMismatch(
                f"Payload id {dto.id} does not match product {id}."
            )

        product = Product(id=id, name=dto.name, price=dto.price, quantity=dto.quantity)
        try:
            self._repo.update(product)
        except ProductConcurrencyConflict:
            if not self._repo.exists(id):
                log.info("product.not_found")
                raise ProductNotFound(f"Product {id} not found.") from None
            log.error("product.concurrency_conflict")
            raise

        log.info("product.updated")

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(f"Product {id} not found.")
        self._repo.delete(product)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[ProductOutputDTO]:
        """Return every product; an empty store yields an empty list."""
        return [ProductOutputDTO.from_entity(p) for p in self._repo.list()]

    def get_product(self, id: int) -> ProductOutputDTO:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=id)
        return ProductOutputDTO.from_entity(product)
