"""Unit tests for the Product validation pipeline.

Covers:
- Individual rules (integer, non-empty, numeric, positive, boolean).
- Failure accumulation and declaration order per operation.
- Failure wire shape.
"""

from __future__ import annotations

import pytest

from modules.products.exceptions import InvalidProductInput
from modules.products.validation import (
    AVAILABILITY_INVALID,
    CREATE_PRODUCT_PIPELINE,
    ID_INVALID,
    NAME_EMPTY,
    PRICE_EMPTY,
    PRICE_NOT_NUMERIC,
    PRICE_NOT_POSITIVE,
    PRODUCT_ID_PIPELINE,
    UPDATE_PRODUCT_PIPELINE,
    Check,
    ValidationPipeline,
    as_text,
    is_boolean,
    is_int,
    is_not_empty,
    is_numeric,
    is_positive,
    to_bool,
    to_number,
)

pytestmark = pytest.mark.unit


def _messages(failures):
    return [f.msg for f in failures]


# ===========================================================================
# Rules
# ===========================================================================


class TestAsText:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ""),
            ("", ""),
            ("abc", "abc"),
            (50, "50"),
            (50.0, "50"),
            (19.99, "19.99"),
            (True, "true"),
            (False, "false"),
        ],
    )
    def test_renders_values(self, value, expected):
        assert as_text(value) == expected


class TestRules:
    @pytest.mark.parametrize("value", ["1", "200", "-3", "+7", "007", 12])
    def test_is_int_accepts(self, value):
        assert is_int(value)

    @pytest.mark.parametrize("value", ["not-valid-url", "1.5", "", None, "1e3", " 1"])
    def test_is_int_rejects(self, value):
        assert not is_int(value)

    def test_is_not_empty(self):
        assert is_not_empty("Mouse")
        assert is_not_empty(0)
        assert not is_not_empty("")
        assert not is_not_empty(None)

    @pytest.mark.parametrize("value", [50, 0, -1, 19.99, "12", "12.50", ".5"])
    def test_is_numeric_accepts(self, value):
        assert is_numeric(value)

    @pytest.mark.parametrize("value", ["hola", "", None, True, "1e5", "12,5"])
    def test_is_numeric_rejects(self, value):
        assert not is_numeric(value)

    @pytest.mark.parametrize("value", [50, 0.01, "3"])
    def test_is_positive_accepts(self, value):
        assert is_positive(value)

    @pytest.mark.parametrize("value", [0, -5, "0", "hola", None])
    def test_is_positive_rejects(self, value):
        assert not is_positive(value)

    @pytest.mark.parametrize("value", [True, False, "true", "false", 1, 0, "1", "0"])
    def test_is_boolean_accepts(self, value):
        assert is_boolean(value)

    @pytest.mark.parametrize("value", ["yes", "", None, 2, "True"])
    def test_is_boolean_rejects(self, value):
        assert not is_boolean(value)

    def test_to_number_and_to_bool(self):
        assert to_number("12.5") == 12.5
        assert to_number("abc") is None
        assert to_bool("0") is False
        assert to_bool(True) is True
        assert to_bool("maybe") is None

    @pytest.mark.parametrize("value", ["1" * 400, "9" * 310 + ".5"])
    def test_float_overflow_is_not_numeric(self, value):
        assert to_number(value) is None
        assert not is_numeric(value)
        assert not is_positive(value)


# ===========================================================================
# Pipelines
# ===========================================================================


class TestCreatePipeline:
    def test_empty_body_reports_four_failures_in_order(self):
        failures = CREATE_PRODUCT_PIPELINE.run(body={})
        assert _messages(failures) == [
            NAME_EMPTY,
            PRICE_NOT_NUMERIC,
            PRICE_NOT_POSITIVE,
            PRICE_EMPTY,
        ]

    @pytest.mark.parametrize("price", [0, -1, "0", -0.5])
    def test_non_positive_price_reports_only_invalid_price(self, price):
        failures = CREATE_PRODUCT_PIPELINE.run(body={"name": "Monitor", "price": price})
        assert _messages(failures) == [PRICE_NOT_POSITIVE]

    def test_non_numeric_price_reports_two_failures(self):
        failures = CREATE_PRODUCT_PIPELINE.run(body={"name": "Monitor", "price": "hola"})
        assert _messages(failures) == [PRICE_NOT_NUMERIC, PRICE_NOT_POSITIVE]

    def test_overflowing_price_reports_two_failures(self):
        failures = CREATE_PRODUCT_PIPELINE.run(body={"name": "Monitor", "price": "1" * 400})
        assert _messages(failures) == [PRICE_NOT_NUMERIC, PRICE_NOT_POSITIVE]

    def test_valid_body_passes(self):
        assert CREATE_PRODUCT_PIPELINE.run(body={"name": "Mouse", "price": 50}) == []

    def test_non_mapping_body_is_treated_as_empty(self):
        failures = CREATE_PRODUCT_PIPELINE.run(body=["name", "price"])
        assert len(failures) == 4


class TestUpdatePipeline:
    def test_empty_body_reports_five_failures_in_order(self):
        failures = UPDATE_PRODUCT_PIPELINE.run({"id": "1"}, {})
        assert _messages(failures) == [
            NAME_EMPTY,
            PRICE_NOT_NUMERIC,
            PRICE_NOT_POSITIVE,
            PRICE_EMPTY,
            AVAILABILITY_INVALID,
        ]

    def test_invalid_id_with_valid_body_reports_one_failure(self):
        failures = UPDATE_PRODUCT_PIPELINE.run(
            {"id": "not-valid-url"},
            {"name": "Monitor", "price": 400, "availability": True},
        )
        assert _messages(failures) == [ID_INVALID]

    def test_invalid_id_is_reported_first(self):
        failures = UPDATE_PRODUCT_PIPELINE.run({"id": "x"}, {})
        assert len(failures) == 6
        assert failures[0].msg == ID_INVALID
        assert failures[0].location == "params"

    def test_invalid_availability(self):
        failures = UPDATE_PRODUCT_PIPELINE.run(
            {"id": "1"}, {"name": "Monitor", "price": 10, "availability": "yes"}
        )
        assert _messages(failures) == [AVAILABILITY_INVALID]


class TestIdPipeline:
    def test_non_integer_id_reports_one_failure(self):
        failures = PRODUCT_ID_PIPELINE.run({"id": "not-valid"})
        assert _messages(failures) == [ID_INVALID]

    def test_integer_id_passes(self):
        assert PRODUCT_ID_PIPELINE.run({"id": "200"}) == []

    def test_enforce_raises_with_failures(self):
        with pytest.raises(InvalidProductInput) as excinfo:
            PRODUCT_ID_PIPELINE.enforce({"id": "abc"})
        assert _messages(excinfo.value.failures) == [ID_INVALID]

    def test_enforce_passes_silently(self):
        PRODUCT_ID_PIPELINE.enforce({"id": "1"})


class TestPipelineMechanics:
    def test_every_check_runs(self):
        calls = []

        def rule(name):
            def _rule(value):
                calls.append(name)
                return False

            return _rule

        pipeline = ValidationPipeline(
            [Check("a", rule("a"), "bad a"), Check("b", rule("b"), "bad b")]
        )
        failures = pipeline.run(body={})

        assert calls == ["a", "b"]
        assert _messages(failures) == ["bad a", "bad b"]


class TestFailureShape:
    def test_missing_value_is_omitted(self):
        (failure,) = CREATE_PRODUCT_PIPELINE.run(body={"price": 10})
        assert failure.as_dict() == {
            "type": "field",
            "msg": NAME_EMPTY,
            "path": "name",
            "location": "body",
        }

    def test_present_value_is_echoed(self):
        (failure,) = CREATE_PRODUCT_PIPELINE.run(body={"name": "Monitor", "price": 0})
        assert failure.as_dict()["value"] == 0
        assert failure.as_dict()["path"] == "price"

    def test_null_value_is_echoed(self):
        failures = CREATE_PRODUCT_PIPELINE.run(body={"name": None, "price": 10})
        assert failures[0].as_dict()["value"] is None
