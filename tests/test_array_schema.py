"""Tests for the array combinator."""

import pytest

from shapeguard import factory as s
from shapeguard.coercion import to_json_text
from shapeguard.errors import SchemaConfigurationError
from shapeguard.types import Failure, Success


class TestArrayParse:
    def test_valid_array(self):
        assert s.array(s.number()).parse([1, 2, 3]) == Success([1, 2, 3])

    def test_tuple_becomes_list(self):
        assert s.array(s.number()).parse((1, 2)) == Success([1, 2])

    def test_empty_array(self):
        assert s.array(s.string()).parse([]) == Success([])

    def test_items_are_normalized(self):
        schema = s.array(s.string().trim().to_upper_case())
        assert schema.parse([" a ", "b "]) == Success(["A", "B"])

    def test_bad_element_is_reported(self):
        result = s.array(s.boolean()).parse([False, True, "hello"])
        assert isinstance(result, Failure)
        (error,) = result.errors
        assert error.received_value == "hello"
        assert error.field == 'Error occur in this field "hello"'
        assert error.operation == "parse"

    def test_aggregates_every_element(self):
        result = s.array(s.number().min(5)).parse([1, 10, 2])
        assert [e.field for e in result.errors] == [
            "Error occur in this field 1",
            "Error occur in this field 2",
        ]

    def test_huge_int_element_is_reported(self):
        result = s.array(s.string()).parse([10**5000])
        (error,) = result.errors
        assert error.received_value == 10**5000
        assert error.field.startswith("Error occur in this field ")
        assert isinstance(to_json_text(result.to_dict()), str)

    def test_object_elements_are_labelled_with_json(self):
        schema = s.array(s.object({"name": s.string()}))
        (error,) = schema.parse([{"name": "ok"}, {"name": 1}]).errors
        assert error.field == 'Error occur in this field {"name":1}'

    @pytest.mark.parametrize("value", ["abc", {"a": 1}, None, 5])
    def test_non_array_fails(self, value):
        (error,) = s.array(s.string()).parse(value).errors
        assert error.field == "array"
        assert error.operation == "parse"
        assert error.expected_type == "array"
        assert error.message == "Please provide an array"
        assert error.suggestion == "Provided value is not an array"

    def test_nested_arrays(self):
        schema = s.array(s.array(s.number()))
        assert schema.parse([[1], [2, 3]]) == Success([[1], [2, 3]])
        (error,) = schema.parse([[1], ["x"]]).errors
        assert error.field == 'Error occur in this field ["x"]'

    def test_item_must_be_schema(self):
        with pytest.raises(SchemaConfigurationError):
            s.array(int)
