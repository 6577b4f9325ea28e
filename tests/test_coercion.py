"""Tests for value conversion helpers and the UNDEFINED sentinel."""

import copy
import math
import pickle
import sys

import pytest

from shapeguard.coercion import (
    coerce_to_boolean,
    coerce_to_number,
    coerce_to_text,
    format_number,
    is_number,
    parse_numeric_text,
    to_json_text,
)
from shapeguard.types import UNDEFINED, ErrorDetail, Failure, Success

needs_digit_limit = pytest.mark.skipif(
    getattr(sys, "get_int_max_str_digits", lambda: 0)() == 0,
    reason="interpreter has no int/str digit limit",
)


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "1"),
            (1.0, "1"),
            (-0.5, "-0.5"),
            (1e21, "1e+21"),
            (math.nan, "NaN"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
            (True, "true"),
            (1e-7, "1e-7"),
            (1.5e-7, "1.5e-7"),
            (1e-5, "0.00001"),
            (-1.5e-5, "-0.000015"),
            (1.5e300, "1.5e+300"),
        ],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected

    @needs_digit_limit
    def test_int_past_digit_limit(self):
        assert format_number(10**5000) == "Infinity"
        assert format_number(-(10**5000)) == "-Infinity"


class TestJsonText:
    def test_compact(self):
        assert to_json_text({"a": [1, "b"]}) == '{"a":[1,"b"]}'

    def test_undefined(self):
        assert to_json_text(UNDEFINED) == "undefined"

    def test_undefined_members_are_dropped(self):
        assert to_json_text({"a": UNDEFINED, "b": 1}) == '{"b":1}'

    def test_non_finite_becomes_null(self):
        assert to_json_text([math.inf, math.nan]) == "[null,null]"

    def test_indent(self):
        assert to_json_text({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    @needs_digit_limit
    def test_int_past_digit_limit_becomes_null(self):
        assert to_json_text([10**5000, 1]) == "[null,1]"


class TestNumericText:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("12", 12),
            (" -7 ", -7),
            ("1.5", 1.5),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("0b101", 5),
            ("0o17", 15),
            ("", 0),
            ("   ", 0),
            ("Infinity", math.inf),
        ],
    )
    def test_numeric(self, text, expected):
        assert parse_numeric_text(text) == expected

    @pytest.mark.parametrize("text", ["12px", "1,000", "-0x1", "1_000", "nan", "inf"])
    def test_not_numeric(self, text):
        assert parse_numeric_text(text) is None

    @needs_digit_limit
    def test_integer_text_past_digit_limit(self):
        assert parse_numeric_text("1" * 5000) == math.inf
        assert parse_numeric_text("-" + "9" * 5000) == -math.inf


class TestCoercion:
    def test_is_number(self):
        assert is_number(3)
        assert is_number(math.inf)
        assert not is_number(True)
        assert not is_number(math.nan)
        assert not is_number("3")

    def test_text(self):
        assert coerce_to_text(False) == "false"
        assert coerce_to_text(2.50) == "2.5"

    def test_number_default(self):
        assert coerce_to_number(object(), default=4) == 4
        assert coerce_to_number("junk", default=4) == 0

    def test_boolean(self):
        assert coerce_to_boolean("tRuE") is True
        assert coerce_to_boolean(0.0) is False
        assert coerce_to_boolean("on", default=True) is True


class TestSentinelAndResults:
    def test_undefined_is_singleton(self):
        assert copy.copy(UNDEFINED) is UNDEFINED
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED

    def test_undefined_is_falsy_and_not_none(self):
        assert not UNDEFINED
        assert UNDEFINED is not None
        assert repr(UNDEFINED) == "UNDEFINED"

    def test_failure_requires_errors(self):
        with pytest.raises(ValueError):
            Failure(())

    def test_failure_wire_shape(self):
        error = ErrorDetail(
            field="age",
            message="Too young",
            operation="min",
            expected_type="number",
            received_value=3,
            suggestion="value must be greater than 18",
        )
        assert Failure([error]).to_dict() == {
            "success": False,
            "errors": [
                {
                    "field": "age",
                    "message": "Too young",
                    "operation": "min",
                    "expectedType": "number",
                    "receivedValue": 3,
                    "suggestion": "value must be greater than 18",
                }
            ],
        }

    def test_relabel(self):
        error = ErrorDetail("value", "m", "min", "string", "a", "s")
        relabelled = error.relabel("name")
        assert relabelled.field == "name"
        assert error.field == "value"

    def test_success_wire_shape(self):
        assert Success([1]).to_dict() == {"success": True, "data": [1]}
