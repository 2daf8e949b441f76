"""Request validation pipeline for the Product resource.

Each operation declares an ordered list of ``Check`` objects.  A check
looks at one field of the path parameters or of the request body and
either passes or yields a ``FieldFailure``.  ``ValidationPipeline.run``
evaluates *every* check and returns all failures in declaration order,
so a client always gets the complete list of problems in one response.

Values are judged by their textual form, the way the HTTP layer sees
them: a missing field or ``null`` reads as ``""``, numbers as their
decimal text, booleans as ``"true"`` / ``"false"``.

The pipeline knows nothing about HTTP frameworks; views hand it plain
mappings and turn the raised ``InvalidProductInput`` into a 400.
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from modules.products.exceptions import InvalidProductInput

PARAMS = "params"
BODY = "body"

ID_INVALID = "id invalid"
NAME_EMPTY = "product name cannot be empty"
PRICE_NOT_NUMERIC = "invalid value"
PRICE_NOT_POSITIVE = "invalid price"
PRICE_EMPTY = "price cannot be empty"
AVAILABILITY_INVALID = "invalid availability value"

_INT_RE = re.compile(r"^[-+]?[0-9]+$")
_NUMERIC_RE = re.compile(r"^[-+]?([0-9]*\.)?[0-9]+$")
_TRUE_VALUES = ("true", "1")
_FALSE_VALUES = ("false", "0")

_MISSING = object()


# ---------------------------------------------------------------------------
# Value coercion
# ---------------------------------------------------------------------------


def as_text(value: Any) -> str:
    """Render a raw request value the way the checks read it."""
    if value is None or value is _MISSING:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_number(value: Any) -> Optional[float]:
    """Return the numeric value of ``value``, or ``None`` if it is not numeric.

    Digit strings too large for a float overflow to ``inf`` and are
    rejected as non-numeric.
    """
    text = as_text(value)
    if not _NUMERIC_RE.match(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


def to_bool(value: Any) -> Optional[bool]:
    text = as_text(value)
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return None


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def is_int(value: Any) -> bool:
    return bool(_INT_RE.match(as_text(value)))


def is_not_empty(value: Any) -> bool:
    return as_text(value) != ""


def is_numeric(value: Any) -> bool:
    return to_number(value) is not None


def is_positive(value: Any) -> bool:
    number = to_number(value)
    return number is not None and number > 0


def is_boolean(value: Any) -> bool:
    return to_bool(value) is not None


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class FieldFailure(BaseModel):
    """A single failed check, serialised as one entry of ``errors``."""

    model_config = ConfigDict(frozen=True)

    msg: str
    path: str
    location: str
    value: Any = None

    def as_dict(self) -> dict:
        data = {
            "type": "field",
            "msg": self.msg,
            "path": self.path,
            "location": self.location,
        }
        if "value" in self.model_fields_set:
            data["value"] = self.value
        return data


class Check:
    """One rule applied to one field."""

    def __init__(
        self,
        field: str,
        rule: Callable[[Any], bool],
        message: str,
        location: str = BODY,
    ) -> None:
        self.field = field
        self.rule = rule
        self.message = message
        self.location = location

    def __call__(
        self, params: Mapping[str, Any], body: Mapping[str, Any]
    ) -> Optional[FieldFailure]:
        source = params if self.location == PARAMS else body
        value = source.get(self.field, _MISSING)
        if self.rule(value):
            return None
        failure = {"msg": self.message, "path": self.field, "location": self.location}
        if value is not _MISSING:
            failure["value"] = value
        return FieldFailure(**failure)

    def __repr__(self) -> str:
        return f"Check({self.location}.{self.field}: {self.message!r})"


class ValidationPipeline:
    """Ordered, non-short-circuiting sequence of checks."""

    def __init__(self, checks: Sequence[Check]) -> None:
        self.checks = tuple(checks)

    def run(
        self,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> List[FieldFailure]:
        params = params or {}
        if not isinstance(body, Mapping):
            body = {}
        failures = []
        for check in self.checks:
            failure = check(params, body)
            if failure is not None:
                failures.append(failure)
        return failures

    def enforce(
        self,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> None:
        """Raise ``InvalidProductInput`` if any check fails."""
        failures = self.run(params, body)
        if failures:
            raise InvalidProductInput(failures)


ID_CHECKS = [Check("id", is_int, ID_INVALID, location=PARAMS)]

NAME_CHECKS = [Check("name", is_not_empty, NAME_EMPTY)]

PRICE_CHECKS = [
    Check("price", is_numeric, PRICE_NOT_NUMERIC),
    Check("price", is_positive, PRICE_NOT_POSITIVE),
    Check("price", is_not_empty, PRICE_EMPTY),
]

AVAILABILITY_CHECKS = [Check("availability", is_boolean, AVAILABILITY_INVALID)]

# get-by-id, patch and delete only carry the path ID
PRODUCT_ID_PIPELINE = ValidationPipeline(ID_CHECKS)

CREATE_PRODUCT_PIPELINE = ValidationPipeline([*NAME_CHECKS, *PRICE_CHECKS])

UPDATE_PRODUCT_PIPELINE = ValidationPipeline(
    [*ID_CHECKS, *NAME_CHECKS, *PRICE_CHECKS, *AVAILABILITY_CHECKS]
)
