"""Product DRF serializer for API output.

Renders ``ProductOutputDTO`` instances; request bodies are validated by
the Pydantic DTOs in ``dtos.py``, not by this serializer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "price", "quantity"]
        read_only_fields = ["id"]
