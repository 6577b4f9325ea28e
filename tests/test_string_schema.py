"""Tests for the string schema: narrowing, checks and mutations."""

import dataclasses
import re

import pytest

from shapeguard import factory as s
from shapeguard.errors import SchemaConfigurationError
from shapeguard.messages import DEFAULT_CATALOG
from shapeguard.types import UNDEFINED, Failure, Success


def only_error(result):
    """Return the single error of a failed result."""
    assert isinstance(result, Failure)
    assert len(result.errors) == 1
    return result.errors[0]


# =============================================================================
# Narrowing and Presence
# =============================================================================


class TestNarrowing:
    def test_plain_string_passes(self):
        result = s.string().parse("hello")
        assert result == Success("hello")
        assert result.success is True

    def test_non_string_is_type_error(self):
        error = only_error(s.string().parse(42))
        assert error.field == "value"
        assert error.operation == "type"
        assert error.expected_type == "string"
        assert error.received_value == 42
        assert error.message == "Value must be a string"
        assert error.suggestion == "value must be a string"

    def test_missing_value_is_type_error(self):
        error = only_error(s.string().parse())
        assert error.received_value is UNDEFINED

    def test_constructor_message_replaces_type_message(self):
        error = only_error(s.string("Name must be text").parse(None))
        assert error.message == "Name must be text"

    def test_empty_string_is_a_string(self):
        assert s.string().parse("") == Success("")


class TestPresence:
    def test_required_fails_on_non_string(self):
        error = only_error(s.string().required().parse(None))
        assert error.operation == "required"
        assert error.message == "String is required"

    def test_required_custom_message(self):
        error = only_error(s.string().required(message="Name is needed").parse(UNDEFINED))
        assert error.message == "Name is needed"

    def test_required_takes_priority_over_nullable(self):
        error = only_error(s.string().nullable().required().parse(None))
        assert error.operation == "required"

    def test_nullable_accepts_none_as_empty(self):
        assert s.string().nullable().parse(None) == Success("")

    def test_nullable_uses_default(self):
        assert s.string().nullable().default("n/a").parse(None) == Success("n/a")

    def test_nullable_does_not_accept_missing(self):
        assert not s.string().nullable().parse(UNDEFINED).success

    def test_optional_missing_is_empty(self):
        assert s.string().optional().parse() == Success("")

    def test_optional_missing_uses_default(self):
        assert s.string().optional().default("guest").parse() == Success("guest")

    def test_optional_other_values_become_empty(self):
        assert s.string().optional().default("guest").parse(42) == Success("")

    def test_default_replaces_non_string(self):
        assert s.string().default("n/a").parse(42) == Success("n/a")

    def test_falsy_default_counts(self):
        assert s.string().default("").parse(None) == Success("")
        assert s.string().default(0).parse(None) == Success("0")

    def test_default_is_not_validated(self):
        assert s.string().min(10).default("x").parse(None) == Success("x")


class TestCoercion:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (12, "12"),
            (1.0, "1"),
            (1.5, "1.5"),
            (True, "true"),
            (None, ""),
            (UNDEFINED, ""),
            ({"a": 1}, '{"a":1}'),
            ([1, "b"], '[1,"b"]'),
        ],
    )
    def test_coerces_to_text(self, value, expected):
        assert s.string().coerce().parse(value) == Success(expected)

    def test_huge_int_coerces(self):
        result = s.string().coerce().parse(10**5000)
        assert result.success
        assert result.data == "Infinity" or result.data.startswith("1000")

    def test_coerced_value_runs_checks(self):
        error = only_error(s.string().coerce().min(3).parse(7))
        assert error.operation == "min"
        assert error.received_value == "7"


# =============================================================================
# Validations
# =============================================================================


class TestLengthChecks:
    def test_min_failure_details(self):
        error = only_error(s.string().min(3).parse("hi"))
        assert error.operation == "min"
        assert error.message == "String is too short"
        assert error.suggestion == "value must be at least 3 characters long"
        assert error.received_value == "hi"

    def test_max_reports_first_failure(self):
        error = only_error(s.string().min(3).max(10).parse("hello hello hello"))
        assert error.operation == "max"
        assert error.suggestion == "value must be at most 10 characters long"

    def test_length(self):
        assert s.string().length(4).parse("abcd").success
        error = only_error(s.string().length(4).parse("abc"))
        assert error.suggestion == "value must be exactly 4 characters long"

    def test_custom_message(self):
        error = only_error(s.string().min(3, message="Too short!").parse("a"))
        assert error.message == "Too short!"

    def test_first_failure_stops_the_pipeline(self):
        error = only_error(s.string().min(10).email().parse("bad"))
        assert error.operation == "min"


class TestSubstringChecks:
    def test_starts_with(self):
        assert s.string().starts_with("ab").parse("abc").success
        error = only_error(s.string().starts_with("ab").parse("cab"))
        assert error.operation == "startsWith"
        assert error.suggestion == 'value must startsWith "ab"'
        assert error.message == "String must start with specified value"

    def test_ends_with(self):
        assert s.string().ends_with(".py").parse("main.py").success
        error = only_error(s.string().ends_with(".py").parse("main.rs"))
        assert error.suggestion == 'value must endsWith ".py"'

    def test_includes(self):
        assert s.string().includes("ell").parse("hello").success
        error = only_error(s.string().includes("xyz").parse("hello"))
        assert error.operation == "includes"


class TestPatternChecks:
    def test_regex_searches(self):
        assert s.string().regex(r"\d+").parse("abc123").success

    def test_regex_failure_renders_literal(self):
        error = only_error(s.string().regex(r"^\d+$").parse("12a"))
        assert error.operation == "regex"
        assert error.suggestion == r"value must match the regex /^\d+$/"

    def test_regex_accepts_compiled_pattern(self):
        schema = s.string().regex(re.compile("^abc$", re.IGNORECASE))
        assert schema.parse("ABC").success
        error = only_error(schema.parse("abd"))
        assert error.suggestion == "value must match the regex /^abc$/i"

    @pytest.mark.parametrize(
        "address",
        ["john.doe@example.com", "ab@mail.example.org", "first+tag@example.io"],
    )
    def test_valid_email(self, address):
        assert s.string().email().parse(address).success

    @pytest.mark.parametrize(
        "address",
        [
            "not-an-email",
            "a@example.com",
            ".john@example.com",
            "jo..hn@example.com",
            "john@example",
            "john@example.c",
        ],
    )
    def test_invalid_email(self, address):
        error = only_error(s.string().email().parse(address))
        assert error.operation == "email"
        assert error.message == "Invalid email"

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "http://localhost:8080/path?q=1",
            "ftp://files.example.com/a.txt",
            "mailto:someone@example.com",
            "file:///etc/hosts",
        ],
    )
    def test_valid_url(self, url):
        assert s.string().url().parse(url).success

    @pytest.mark.parametrize(
        "url",
        ["example.com", "not a url", "http://", "https://example.com:99999", ""],
    )
    def test_invalid_url(self, url):
        error = only_error(s.string().url().parse(url))
        assert error.operation == "url"
        assert error.suggestion == "value must be a valid URL"


class TestCharacterChecks:
    def test_alpha_only(self):
        assert s.string().alpha_only().parse("abcXYZ").success
        assert not s.string().alpha_only().parse("abc1").success
        assert not s.string().alpha_only().parse("").success

    def test_alpha_numeric(self):
        assert s.string().alpha_numeric().parse("abc123").success
        error = only_error(s.string().alpha_numeric().parse("abc-123"))
        assert error.operation == "alphaNumeric"

    def test_allow_char(self):
        schema = s.string().allow_char("abc-")
        assert schema.parse("a-b-c").success
        assert not schema.parse("abd").success
        assert not schema.parse("").success

    def test_allow_char_is_literal(self):
        schema = s.string().allow_char("a-z")
        assert schema.parse("a-z").success
        assert not schema.parse("b").success

    def test_block_char(self):
        schema = s.string().block_char("!@")
        assert schema.parse("hello").success
        error = only_error(schema.parse("hello!"))
        assert error.operation == "blockChar"
        assert error.suggestion == "value must not contain blocked characters"


# =============================================================================
# Mutations
# =============================================================================


class TestMutations:
    def test_trim_lower_chain(self):
        schema = s.string().trim().min(3).max(10).to_lower_case()
        assert schema.parse("  Hello ") == Success("hello")

    def test_validation_sees_mutated_value(self):
        error = only_error(s.string().trim().min(3).parse("  ab  "))
        assert error.received_value == "ab"

    def test_validation_before_mutation_sees_raw_value(self):
        assert s.string().min(5).trim().parse("  ab  ") == Success("ab")

    def test_to_upper_case(self):
        assert s.string().to_upper_case().parse("shout") == Success("SHOUT")

    @pytest.mark.parametrize(
        "style, expected",
        [
            ("sentence", "Hello world"),
            ("title", "Hello World"),
            ("uppercase", "HELLO WORLD"),
            ("lowercase", "hello world"),
            ("pascal", "HelloWorld"),
            ("camel", "helloWorld"),
        ],
    )
    def test_capitalize_styles(self, style, expected):
        assert s.string().capitalize(style).parse("hello world") == Success(expected)

    def test_pascal_drops_any_separator(self):
        schema = s.string().capitalize("pascal", separator="-")
        assert schema.parse("hello-world") == Success("HelloWorld")

    def test_camel_lowercases_first_word(self):
        assert s.string().capitalize("camel").parse("Hello World") == Success("helloWorld")

    def test_title_with_custom_separator(self):
        schema = s.string().capitalize("title", separator="-")
        assert schema.parse("foo-bar") == Success("Foo-Bar")

    def test_slugify(self):
        assert s.string().slugify().parse("  Hello World! ") == Success("hello-world")
        assert s.string().slugify("_").parse("Hello Big World") == Success("hello_big_world")

    def test_censor_all(self):
        assert s.string().censor(censor_all=True).parse("secret") == Success("******")

    def test_censor_range(self):
        schema = s.string().censor(start_offset=0, end_offset=4, replacement="#")
        assert schema.parse("1234567890") == Success("####567890")

    def test_censor_word_list_is_case_sensitive(self):
        schema = s.string().censor(["bad", "ugly"])
        assert schema.parse("bad and ugly Bad") == Success("*** and **** Bad")

    def test_censor_single_word_ignores_case(self):
        schema = s.string().censor("bad")
        assert schema.parse("Bad words are bad, badly") == Success("*** words are ***, badly")

    def test_censor_single_word_is_literal(self):
        schema = s.string().censor("a.c")
        assert schema.parse("abc a.c") == Success("abc ***")

    def test_censor_without_target_is_noop(self):
        assert s.string().censor().parse("text") == Success("text")

    def test_mutations_are_idempotent(self):
        schema = s.string().trim().to_lower_case().slugify()
        once = schema.parse("  Hello World  ").data
        assert schema.parse(once) == Success(once)


# =============================================================================
# Configuration
# =============================================================================


class TestConfiguration:
    @pytest.mark.parametrize("bad", [-1, "3", True, 2.5])
    def test_length_arguments_are_checked(self, bad):
        with pytest.raises(SchemaConfigurationError):
            s.string().min(bad)

    def test_invalid_regex(self):
        with pytest.raises(SchemaConfigurationError, match="invalid pattern"):
            s.string().regex("(")

    def test_invalid_slug_separator(self):
        with pytest.raises(SchemaConfigurationError):
            s.string().slugify("+")

    def test_invalid_capitalize_style(self):
        with pytest.raises(SchemaConfigurationError, match="style"):
            s.string().capitalize("shouty")

    def test_empty_capitalize_separator(self):
        with pytest.raises(SchemaConfigurationError):
            s.string().capitalize("title", separator="")

    def test_censor_replacement_is_one_character(self):
        with pytest.raises(SchemaConfigurationError):
            s.string().censor(censor_all=True, replacement="**")

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            s.string().max(-5)

    def test_snapshots_are_immutable(self):
        schema = s.string().min(3)
        snapshot = schema.config
        schema.max(5)
        assert len(snapshot.checks) == 1
        assert len(schema.config.checks) == 2
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.coerce = True

    def test_fluent_calls_return_the_schema(self):
        schema = s.string()
        assert schema.min(1) is schema

    def test_parse_does_not_change_configuration(self):
        schema = s.string().trim().min(2)
        before = schema.config
        schema.parse("  abc ")
        schema.parse(None)
        assert schema.config is before

    def test_catalog_messages(self):
        catalog = DEFAULT_CATALOG.merged({"string": {"min": "Too short", "type": "Need text"}})
        schema = s.string(catalog=catalog).min(3)
        assert only_error(schema.parse("a")).message == "Too short"
        assert only_error(schema.parse(1)).message == "Need text"

    def test_repr_lists_checks(self):
        assert repr(s.string().trim().min(2)) == "StringSchema([trim, min])"
