"""Product repository interface.

Specialises ``IRepository[Product]``: the one abstraction the service
layer uses to reach the ``products`` table.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""

    @abstractmethod
    def update(self, entity: Product) -> None:
        """Replace every column of the row with ``entity.id``.

        Raises:
            ProductConcurrencyConflict: if no row was affected because the
                row changed or vanished since it was read.
        """
