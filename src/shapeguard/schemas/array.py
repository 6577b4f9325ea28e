"""Array combinator: validates every element of a list or tuple.

Like the object combinator it never stops at the first bad element.
Errors are relabelled with the serialized element, not its index.
"""

import logging
from typing import Any

from shapeguard.coercion import is_sequence, to_json_text
from shapeguard.errors import SchemaConfigurationError
from shapeguard.messages import DEFAULT_CATALOG, MessageCatalog
from shapeguard.types import (
    UNDEFINED,
    ErrorDetail,
    Failure,
    Schema,
    Success,
    ValidationResult,
)

logger = logging.getLogger(__name__)


def element_label(element: Any) -> str:
    return f"Error occur in this field {to_json_text(element)}"


class ArraySchema(Schema[list]):
    """Validates each element with one item schema; output is always a list."""

    def __init__(self, item: Schema, catalog: MessageCatalog = DEFAULT_CATALOG):
        if not isinstance(item, Schema):
            raise SchemaConfigurationError(
                f"array() expects a schema for its items, got {type(item).__name__}"
            )
        self.item = item
        self.catalog = catalog

    def parse(self, value: Any = UNDEFINED) -> ValidationResult[list]:
        if not is_sequence(value):
            return Failure((
                ErrorDetail(
                    field="array",
                    message=self.catalog.message("array", "type"),
                    operation="parse",
                    expected_type="array",
                    received_value=value,
                    suggestion="Provided value is not an array",
                ),
            ))

        items: list[Any] = []
        errors: list[ErrorDetail] = []

        for element in value:
            result = self.item.parse(element)
            if result.success:
                items.append(result.data)
            else:
                label = element_label(element)
                errors.extend(error.relabel(label) for error in result.errors)

        if errors:
            logger.debug("Array parse failed with %d error(s) over %d element(s)", len(errors), len(value))
            return Failure(tuple(errors))

        return Success(items)

    def __repr__(self) -> str:
        return f"ArraySchema({self.item!r})"
