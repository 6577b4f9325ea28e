"""Object combinator: validates a mapping field by field.

Every key of the shape is parsed, even after an earlier key failed, so a
single call reports every field-level problem. Child errors are relabelled
with the shape key; keys not in the shape are dropped from the output.
"""

import logging
from types import MappingProxyType
from typing import Any, Mapping

from shapeguard.coercion import is_mapping
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


class ObjectSchema(Schema[dict[str, Any]]):
    """Validates a mapping against a fixed shape of child schemas.

    Example:
        schema = ObjectSchema({
            "name": StringSchema().min(3),
            "age": NumberSchema().min(18),
        })
        schema.parse({"name": "Ada", "age": 36})
    """

    def __init__(
        self,
        shape: Mapping[str, Schema],
        catalog: MessageCatalog = DEFAULT_CATALOG,
    ):
        if not is_mapping(shape):
            raise SchemaConfigurationError("object() expects a mapping of field name to schema")
        for key, child in shape.items():
            if not isinstance(key, str):
                raise SchemaConfigurationError(f"object() field names must be strings, got {key!r}")
            if not isinstance(child, Schema):
                raise SchemaConfigurationError(
                    f"object() field '{key}' must be a schema, got {type(child).__name__}"
                )
        self.shape: Mapping[str, Schema] = MappingProxyType(dict(shape))
        self.catalog = catalog

    def parse(self, value: Any = UNDEFINED) -> ValidationResult[dict[str, Any]]:
        if not is_mapping(value):
            return Failure((
                ErrorDetail(
                    field="",
                    message=self.catalog.message("object", "type"),
                    operation="parse",
                    expected_type="object",
                    received_value=value,
                    suggestion="Please provide a correct object",
                ),
            ))

        data: dict[str, Any] = {}
        errors: list[ErrorDetail] = []

        for key, child in self.shape.items():
            result = child.parse(value.get(key, UNDEFINED))
            if result.success:
                data[key] = result.data
            else:
                errors.extend(error.relabel(key) for error in result.errors)

        if errors:
            logger.debug(
                "Object parse failed with %d error(s) across fields %s",
                len(errors),
                sorted({error.field for error in errors}),
            )
            return Failure(tuple(errors))

        return Success(data)

    def __repr__(self) -> str:
        return f"ObjectSchema({list(self.shape)})"
