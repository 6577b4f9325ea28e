"""Check variants for the primitive schemas.

A check is one configured step of a primitive schema's pipeline. Checks are
tagged records: ``kind`` selects the behavior, ``value`` carries the
kind-specific payload and ``message`` is copied verbatim into the error the
check produces. Schemas keep their checks in insertion order.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any


# =============================================================================
# String Checks
# =============================================================================


class StringCheckKind(str, Enum):
    """Kinds of string checks. Values double as error ``operation`` names."""

    # Validations
    MIN = "min"
    MAX = "max"
    LENGTH = "length"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    INCLUDES = "includes"
    REGEX = "regex"
    EMAIL = "email"
    URL = "url"
    ALPHA_ONLY = "alphaOnly"
    ALPHA_NUMERIC = "alphaNumeric"
    ALLOW_CHAR = "allowChar"
    BLOCK_CHAR = "blockChar"

    # Mutations
    TRIM = "trim"
    TO_LOWER_CASE = "toLowerCase"
    TO_UPPER_CASE = "toUpperCase"
    CAPITALIZE = "capitalize"
    SLUGIFY = "slugify"
    CENSOR = "censor"

    # Presence markers (handled by the parser, skipped by the engine)
    OPTIONAL = "optional"
    REQUIRED = "required"


STRING_MARKERS = frozenset({StringCheckKind.OPTIONAL, StringCheckKind.REQUIRED})


class CapitalizeStyle(str, Enum):
    SENTENCE = "sentence"
    TITLE = "title"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    PASCAL = "pascal"
    CAMEL = "camel"


SLUG_SEPARATORS = ("-", "_")


@dataclass(frozen=True)
class CapitalizeOptions:
    style: CapitalizeStyle = CapitalizeStyle.SENTENCE
    separator: str = " "


@dataclass(frozen=True)
class CensorOptions:
    """Payload of a censor check.

    Modes, in priority order: ``censor_all``; both offsets; a tuple of
    words (case-sensitive); a single word (case-insensitive).
    """

    censor: str | tuple[str, ...] | None = None
    replacement: str = "*"
    start_offset: int | None = None
    end_offset: int | None = None
    censor_all: bool = False


@dataclass(frozen=True)
class StringCheck:
    kind: StringCheckKind
    value: Any = None
    message: str = ""


# =============================================================================
# Number Checks
# =============================================================================


class NumberCheckKind(str, Enum):
    MIN = "min"
    MAX = "max"
    INT = "int"
    FLOAT = "float"
    FINITE = "finite"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NON_NEGATIVE = "nonNegative"
    NON_POSITIVE = "nonPositive"
    EQUAL = "equal"
    NON_EQUAL = "nonEqual"
    GREATER = "greater"
    GREATER_EQUAL = "greaterEqual"
    LESS = "less"
    LESS_EQUAL = "lessEqual"
    MULTIPLE_OF = "multipleOf"
    SAFE = "safe"
    BETWEEN = "between"
    STEP = "step"


class BetweenType(str, Enum):
    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"


@dataclass(frozen=True)
class BetweenBounds:
    min: int | float
    max: int | float
    type: BetweenType = BetweenType.INCLUSIVE


@dataclass(frozen=True)
class NumberCheck:
    kind: NumberCheckKind
    value: Any = None
    message: str = ""


# =============================================================================
# Boolean Checks
# =============================================================================


class BooleanCheckKind(str, Enum):
    IS_TRUE = "isTrue"
    IS_FALSE = "isFalse"
    EQUAL = "equal"


@dataclass(frozen=True)
class BooleanCheck:
    kind: BooleanCheckKind
    value: bool | None = None
    message: str = ""


def regex_literal(pattern: re.Pattern) -> str:
    """Render a compiled pattern as a /source/flags literal."""
    flags = ""
    if pattern.flags & re.IGNORECASE:
        flags += "i"
    if pattern.flags & re.MULTILINE:
        flags += "m"
    if pattern.flags & re.DOTALL:
        flags += "s"
    return f"/{pattern.pattern}/{flags}"
