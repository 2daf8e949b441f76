"""Product domain exceptions.

Raised by the Validation Pipeline and the Service Layer.  The API layer
(Views) catches these and translates them into HTTP responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from modules.products.validation import FieldFailure


class ProductNotFound(Exception):
    """No product exists with the requested ID."""


class InvalidProductInput(Exception):
    """One or more request checks failed.

    Carries every failure, in the order the checks were declared.
    """

    def __init__(self, failures: List[FieldFailure]) -> None:
        self.failures = list(failures)
        super().__init__(", ".join(f.msg for f in self.failures))
