"""Product model.

A product row is created with a server-assigned integer ``id``, replaced
in full on update and physically removed on delete.
"""

from __future__ import annotations

from django.db import models


class Product(models.Model):
    """Catalog entry.  ``id`` never changes once assigned."""

    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.IntegerField()

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
