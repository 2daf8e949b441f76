"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
or ``False`` instead of raising HTTP-level exceptions; the Service
Layer decides how to translate a missing entity into an API response.
Database errors are not caught here.
"""

from __future__ import annotations

from typing import List, Optional

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        return Product.objects.filter(pk=id).first()

    def list(self) -> List[Product]:
        return list(Product.objects.order_by("id"))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Delete a product row by ID.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.
        """
        deleted, _ = Product.objects.filter(pk=id).delete()
        return bool(deleted)
