"""Shared plumbing for the primitive schemas.

A primitive schema holds one frozen configuration snapshot. Fluent calls
build a new snapshot with ``dataclasses.replace`` and return the schema
itself, so chains read naturally while ``parse`` always works against an
immutable configuration.
"""

import math
import re
from dataclasses import replace
from typing import Any, Generic, TypeVar

from shapeguard.errors import SchemaConfigurationError
from shapeguard.messages import DEFAULT_CATALOG, MessageCatalog
from shapeguard.types import Schema

C = TypeVar("C")
T = TypeVar("T")


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"


# Distinct from every user value, including 0, "" and False
NO_DEFAULT: Any = _NoDefault()


class PrimitiveSchema(Schema[T], Generic[T, C]):
    """Base for string, number and boolean schemas.

    Subclasses set ``SCHEMA_TYPE`` (the catalog section they read) and
    create their initial config in ``__init__``.
    """

    SCHEMA_TYPE = ""

    def __init__(self, config: C, catalog: MessageCatalog = DEFAULT_CATALOG):
        self._config = config
        self.catalog = catalog

    @property
    def config(self) -> C:
        """The current (immutable) configuration snapshot."""
        return self._config

    def _configure(self, **changes: Any):
        self._config = replace(self._config, **changes)
        return self

    def _add_check(self, check: Any):
        return self._configure(checks=self._config.checks + (check,))

    def _message(self, key: str, override: str | None) -> str:
        if override is not None:
            return override
        return self.catalog.message(self.SCHEMA_TYPE, key)

    def __repr__(self) -> str:
        kinds = ", ".join(check.kind.value for check in self._config.checks)
        return f"{type(self).__name__}([{kinds}])"


# =============================================================================
# Argument Validation
# =============================================================================


def require_length(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SchemaConfigurationError(
            f"{name}() expects a non-negative integer, got {value!r}"
        )
    return value


def require_number(name: str, value: Any) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or (
        isinstance(value, float) and math.isnan(value)
    ):
        raise SchemaConfigurationError(f"{name}() expects a number, got {value!r}")
    return value


def require_text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise SchemaConfigurationError(f"{name}() expects a string, got {value!r}")
    return value


def compile_pattern(value: Any) -> re.Pattern:
    if isinstance(value, re.Pattern):
        if not isinstance(value.pattern, str):
            raise SchemaConfigurationError("regex() expects a text pattern, not bytes")
        return value
    if not isinstance(value, str):
        raise SchemaConfigurationError(
            f"regex() expects a pattern string or compiled pattern, got {value!r}"
        )
    try:
        return re.compile(value)
    except re.error as exc:
        raise SchemaConfigurationError(f"regex() got an invalid pattern: {exc}") from exc
