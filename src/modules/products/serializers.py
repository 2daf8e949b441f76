"""Product DRF serializer for API output.

Input never goes through this serializer: request bodies are checked
by the validation pipeline and converted into Pydantic DTOs from
``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "availability",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
