"""Product service layer (Use Cases).

Orchestrates the Product lifecycle, delegating persistence to the
injected ``IProductRepository``.  Every lookup goes to the repository;
the service keeps no state between calls.  Commands run inside
``transaction.atomic``, so they need a configured Django database even
when the injected repository keeps rows in memory.

Business rules enforced here:
- New products are available by default.
- Update replaces name, price and availability in one write.
- The availability toggle flips the stored value.
- A missing ID is reported as ``ProductNotFound`` by every operation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound
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

    def _get_or_raise(self, id: int) -> Product:
        product = self._repo.get_by_id(id)
        if product is None:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(f"Product {id} not found.")
        return product

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        product = Product(
            name=dto.name,
            price=dto.price,
            availability=dto.availability,
        )
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Overwrite name, price and availability of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)

        product.name = dto.name
        product.price = dto.price
        product.availability = dto.availability

        product = self._repo.save(product)
        logger.info("product.updated", product_id=id)
        return product

    @transaction.atomic
    def toggle_availability(self, id: int) -> Product:
        """Flip the availability flag of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        availability = product.toggle_availability()
        product = self._repo.save(product)
        logger.info(
            "product.availability_toggled",
            product_id=id,
            availability=availability,
        )
        return product

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        self._get_or_raise(id)
        if not self._repo.delete(id):
            # Removed by a concurrent request between the read and the delete
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        return self._repo.list()

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        logger.info("product.retrieved", product_id=id)
        return product
