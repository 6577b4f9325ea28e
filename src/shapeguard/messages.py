"""Default error messages and message catalogs.

Messages are plain configuration: every schema receives a MessageCatalog at
construction time and reads the default message for each check from it.
A catalog can be overridden from a YAML file:

    string:
      min: "Too short"
      type: "Expected text"
    number:
      between: "Out of range"

Files are validated against ``resources/message_catalog.schema.json``
before use.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as JsonSchemaError

from shapeguard.errors import CatalogError

logger = logging.getLogger(__name__)

_CATALOG_SCHEMA_PATH = Path(__file__).parent / "resources" / "message_catalog.schema.json"


# =============================================================================
# Built-in Messages
# =============================================================================

STRING_MESSAGES: Mapping[str, str] = MappingProxyType({
    "type": "Value must be a string",
    "required": "String is required",
    "min": "String is too short",
    "max": "String is too long",
    "length": "String is not equal",
    "startsWith": "String must start with specified value",
    "endsWith": "String must end with specified value",
    "includes": "String must include specified value",
    "regex": "String does not match regex",
    "email": "Invalid email",
    "url": "Invalid URL",
    "alphaOnly": "String must contain only letters",
    "alphaNumeric": "String must contain only letters and numbers",
    "allowChar": "String must contain only letters, numbers, and specified characters",
    "blockChar": "String must contain only letters, numbers, and not contain specified characters",
})

NUMBER_MESSAGES: Mapping[str, str] = MappingProxyType({
    "type": "Value must be a number",
    "min": "Number is less than minimum value",
    "max": "Number is greater than maximum value",
    "int": "Value must be an integer",
    "float": "Value must be a float",
    "finite": "Value must be a finite number",
    "positive": "Value must be a positive number",
    "negative": "Value must be a negative number",
    "nonNegative": "Value must be a non-negative number",
    "nonPositive": "Value must be a non-positive number",
    "equal": "Number is not equal to the expected value",
    "nonEqual": "Number is equal to the not expected value",
    "greater": "Number is not greater than the expected value",
    "greaterEqual": "Number is not greater than or equal to the expected value",
    "less": "Number is not less than the expected value",
    "lessEqual": "Number is not less than or equal to the expected value",
    "multipleOf": "Number is not a multiple of the expected value",
    "safe": "Number is not a safe integer",
    "between": "Number is not between the expected values",
    "step": "Number should be a multiple of the expected step",
})

BOOLEAN_MESSAGES: Mapping[str, str] = MappingProxyType({
    "type": "Provided value is not a boolean",
    "isTrue": "Ensure the value is strictly `true`",
    "isFalse": "Ensure the value is strictly `false`",
    "equal": "Provided value is not equal to the main value",
})

OBJECT_MESSAGES: Mapping[str, str] = MappingProxyType({
    "type": "Value must be a valid object",
})

ARRAY_MESSAGES: Mapping[str, str] = MappingProxyType({
    "type": "Please provide an array",
})

SCHEMA_TYPES = ("string", "number", "boolean", "object", "array")


# =============================================================================
# Catalog
# =============================================================================


def _freeze(messages: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(messages))


@dataclass(frozen=True)
class MessageCatalog:
    """Default messages for every schema type, keyed by check kind.

    Attributes:
        string: Messages for string schemas ("type", "required", check kinds)
        number: Messages for number schemas
        boolean: Messages for boolean schemas
        object: Shape-error message for object schemas
        array: Shape-error message for array schemas
    """

    string: Mapping[str, str] = field(default_factory=lambda: STRING_MESSAGES)
    number: Mapping[str, str] = field(default_factory=lambda: NUMBER_MESSAGES)
    boolean: Mapping[str, str] = field(default_factory=lambda: BOOLEAN_MESSAGES)
    object: Mapping[str, str] = field(default_factory=lambda: OBJECT_MESSAGES)
    array: Mapping[str, str] = field(default_factory=lambda: ARRAY_MESSAGES)

    def messages_for(self, schema_type: str) -> Mapping[str, str]:
        if schema_type not in SCHEMA_TYPES:
            raise KeyError(f"Unknown schema type '{schema_type}'")
        return getattr(self, schema_type)

    def message(self, schema_type: str, key: str) -> str:
        """Look up one message, e.g. ``catalog.message("string", "min")``."""
        return self.messages_for(schema_type)[key]

    def merged(self, overrides: Mapping[str, Mapping[str, str]]) -> "MessageCatalog":
        """Return a copy with per-type overrides applied.

        Keys that no schema reads are kept but logged, since they usually
        point at a typo in a catalog file.
        """
        updated: dict[str, Mapping[str, str]] = {}
        for schema_type in SCHEMA_TYPES:
            base = dict(self.messages_for(schema_type))
            extra = overrides.get(schema_type) or {}
            for key in extra:
                if key not in base:
                    logger.warning(
                        "Message catalog override '%s.%s' does not match any check",
                        schema_type,
                        key,
                    )
            base.update(extra)
            updated[schema_type] = _freeze(base)
        return MessageCatalog(**updated)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {t: dict(self.messages_for(t)) for t in SCHEMA_TYPES}


DEFAULT_CATALOG = MessageCatalog()


# =============================================================================
# Loading
# =============================================================================


def _load_catalog_schema() -> dict[str, Any]:
    with _CATALOG_SCHEMA_PATH.open() as fh:
        return json.load(fh)


def _json_path(error: JsonSchemaError) -> str:
    """Convert a jsonschema error path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return ".".join(parts).replace(".[", "[") or "<root>"


def validate_catalog_data(data: Any) -> list[str]:
    """Validate parsed catalog data. Returns a list of issues (empty if valid)."""
    validator = Draft202012Validator(_load_catalog_schema())
    return [
        f"{_json_path(error)}: {error.message}"
        for error in sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    ]


def load_catalog_data(path: Path) -> Any:
    """Read a catalog YAML file without validating it."""
    try:
        with path.open() as fh:
            return yaml.safe_load(fh)
    except OSError as exc:
        raise CatalogError(f"Cannot read message catalog {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise CatalogError(f"YAML parse error in {path}: {exc}") from exc


def load_catalog(
    path: Path | str,
    base: MessageCatalog = DEFAULT_CATALOG,
) -> MessageCatalog:
    """Load message overrides from a YAML file and merge them into ``base``.

    Args:
        path: YAML file mapping schema type -> {check kind: message}
        base: Catalog the overrides are applied to

    Returns:
        The merged MessageCatalog

    Raises:
        CatalogError: If the file is unreadable, not YAML, or fails validation
    """
    path = Path(path)
    data = load_catalog_data(path)
    if data is None:
        data = {}

    issues = validate_catalog_data(data)
    if issues:
        raise CatalogError(f"Invalid message catalog {path}", issues)

    logger.info("Loaded message catalog from %s", path)
    return base.merged(data)
