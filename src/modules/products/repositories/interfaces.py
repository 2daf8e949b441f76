"""Product repository interface.

The persistence capability the Product service depends on: read all,
read by ID, save (create or update) and delete, keyed by integer ID.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by ID, or ``None`` if it does not exist."""

    @abstractmethod
    def list(self) -> List[Product]:
        """List every product, ordered by ascending ID."""
