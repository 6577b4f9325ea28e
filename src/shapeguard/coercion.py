"""Value conversions shared by the primitive schemas.

Inputs usually come from JSON payloads, so textual renderings follow the
JavaScript conventions those payloads were produced with: integral floats
print without a trailing ``.0``, non-finite numbers print as ``NaN`` /
``Infinity``, and objects serialize to compact JSON.
"""

import json
import math
import re
from collections.abc import Mapping
from typing import Any

from shapeguard.types import UNDEFINED

MAX_SAFE_INTEGER = 2**53 - 1

# Decimal literal accepted by JavaScript's Number(): 12, -1.5, .5, 1e3, 5.
_DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

# Prefixed integer literals (unsigned, as in JavaScript)
_PREFIXED_PATTERN = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")

_INFINITY_PATTERN = re.compile(r"^([+-]?)Infinity$")


# =============================================================================
# Type Predicates
# =============================================================================


def is_number(value: Any) -> bool:
    """True for int/float values, excluding bool and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_integral(value: int | float) -> bool:
    """Mirror of Number.isInteger: finite and without a fractional part."""
    if isinstance(value, int):
        return True
    return math.isfinite(value) and value.is_integer()


# =============================================================================
# Text Rendering
# =============================================================================


def _int_text(value: int) -> str | None:
    """Decimal text of an int, or None past the interpreter's digit limit."""
    try:
        return str(value)
    except ValueError:
        return None


def format_number(value: int | float) -> str:
    """Render a number the way JavaScript's String() does.

    Ints too long to convert to text render as (-)Infinity, the value
    Number() gives them.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        text = _int_text(value)
        if text is None:
            return "Infinity" if value > 0 else "-Infinity"
        return text
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    power = int(exponent)
    # Positional down to 1e-6, exponent without zero padding beyond that
    if -7 < power < 0:
        sign = "-" if mantissa.startswith("-") else ""
        digits = mantissa.lstrip("-").replace(".", "")
        return f"{sign}0.{'0' * (-power - 1)}{digits}"
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def _jsonable(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, int) and not isinstance(value, bool) and _int_text(value) is None:
        return None
    if value is UNDEFINED:
        return None
    if isinstance(value, Mapping):
        return {
            str(key): _jsonable(item)
            for key, item in value.items()
            if item is not UNDEFINED
        }
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def to_json_text(value: Any, indent: int | None = None) -> str:
    """Serialize like JSON.stringify; unserializable leaves fall back to str()."""
    if value is UNDEFINED:
        return "undefined"
    return json.dumps(
        _jsonable(value),
        indent=indent,
        separators=(",", ":") if indent is None else None,
        ensure_ascii=False,
        default=str,
    )


# =============================================================================
# Coercion
# =============================================================================


def coerce_to_text(value: Any) -> str:
    """Best-effort conversion of any value to a string. Never fails."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return format_number(value)
    if value is None or value is UNDEFINED:
        return ""
    return to_json_text(value)


def parse_numeric_text(text: str) -> int | float | None:
    """Parse text the way JavaScript's Number() does.

    Returns None when the text is not numeric (Number() would give NaN).
    """
    stripped = text.strip()
    if stripped == "":
        return 0
    if _PREFIXED_PATTERN.match(stripped):
        return int(stripped, 0)
    infinity = _INFINITY_PATTERN.match(stripped)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    if _DECIMAL_PATTERN.match(stripped):
        if re.fullmatch(r"[+-]?\d+", stripped):
            try:
                return int(stripped)
            except ValueError:
                # Past the int digit limit; float() overflows to +/-inf
                return float(stripped)
        return float(stripped)
    return None


def coerce_to_number(value: Any, default: Any = None) -> int | float:
    """Best-effort conversion of any value to a number. Never fails.

    Unconvertible text becomes 0; sequences become their length; mappings,
    other objects, ``UNDEFINED`` and NaN become ``default`` (or 0).
    """
    fallback = 0 if default is None else default
    if isinstance(value, bool):
        return int(value)
    if is_number(value):
        return value
    if isinstance(value, float):
        return fallback
    if isinstance(value, str):
        parsed = parse_numeric_text(value)
        return 0 if parsed is None else parsed
    if value is None:
        return 0
    if is_sequence(value):
        return len(value)
    return fallback


def coerce_to_boolean(value: Any, default: Any = None) -> bool:
    """Best-effort conversion to bool: "true"/"false" text and 1/0 only."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    if is_number(value):
        if value == 1:
            return True
        if value == 0:
            return False
    return False if default is None else default
