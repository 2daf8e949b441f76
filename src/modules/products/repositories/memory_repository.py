"""In-memory implementation of the Product repository.

Keeps products in a dict keyed by ID and hands out IDs from a counter,
so deleted IDs are never reused.  Nothing touches the database: the
stored ``Product`` instances are never saved through the ORM.  Useful
as a drop-in store for tests and local experiments.
"""

from __future__ import annotations

import copy
import threading
from typing import Dict, Iterable, List, Optional

from django.utils import timezone

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class InMemoryProductRepository(IProductRepository):
    """Dict-backed Product repository."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._rows: Dict[int, Product] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        for product in products:
            self.save(product)

    def get_by_id(self, id: int) -> Optional[Product]:
        row = self._rows.get(id)
        return copy.copy(row) if row is not None else None

    def list(self) -> List[Product]:
        return [copy.copy(self._rows[pk]) for pk in sorted(self._rows)]

    def save(self, entity: Product) -> Product:
        now = timezone.now()
        with self._lock:
            if entity.id is None:
                entity.id = self._next_id
                entity.created_at = now
                self._next_id += 1
            self._next_id = max(self._next_id, entity.id + 1)
            entity.updated_at = now
            self._rows[entity.id] = copy.copy(entity)
        return entity

    def delete(self, id: int) -> bool:
        with self._lock:
            return self._rows.pop(id, None) is not None

    def __len__(self) -> int:
        return len(self._rows)
