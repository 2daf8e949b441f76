"""Product model.

Business rules implemented:
- Name must not be empty.
- Price must be greater than zero (application check + DB constraint).
- Availability defaults to ``True`` on creation.
- Deletion removes the row; the ID is never reused.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Product aggregate root.

    ``id`` is the integer primary key assigned by the database on insert
    and is never changed afterwards.
    """

    name = models.TextField()
    price = models.FloatField()
    availability = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if not self.name:
            raise ValidationError({"name": "Product name cannot be empty."})
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": "Price must be greater than zero."})

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def toggle_availability(self) -> bool:
        """Flip ``availability`` in memory and return the new value."""
        self.availability = not self.availability
        return self.availability

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
