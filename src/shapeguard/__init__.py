"""shapeguard: runtime validation and normalization of untyped data.

Usage:
    from shapeguard import factory as s

    schema = s.object({
        "name": s.string().min(3),
        "age": s.number().min(30),
        "is_verified": s.boolean(),
    })
    result = schema.parse(payload)
    if result.success:
        save(result.data)
    else:
        report([error.to_dict() for error in result.errors])
"""

from shapeguard import factory
from shapeguard.checks import (
    BetweenType,
    BooleanCheckKind,
    CapitalizeStyle,
    NumberCheckKind,
    StringCheckKind,
)
from shapeguard.errors import CatalogError, SchemaConfigurationError, ShapeguardError
from shapeguard.factory import array, boolean, number, string
from shapeguard.messages import DEFAULT_CATALOG, MessageCatalog, load_catalog
from shapeguard.schemas import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    StringSchema,
)
from shapeguard.types import (
    UNDEFINED,
    ErrorDetail,
    Failure,
    Schema,
    Success,
    ValidationResult,
)

__version__ = "0.3.0"

__all__ = [
    # Types
    "UNDEFINED",
    "ErrorDetail",
    "Failure",
    "Schema",
    "Success",
    "ValidationResult",
    # Schemas
    "ArraySchema",
    "BooleanSchema",
    "NumberSchema",
    "ObjectSchema",
    "StringSchema",
    # Check kinds
    "BetweenType",
    "BooleanCheckKind",
    "CapitalizeStyle",
    "NumberCheckKind",
    "StringCheckKind",
    # Factory
    "factory",
    "array",
    "boolean",
    "number",
    "string",
    # Messages
    "DEFAULT_CATALOG",
    "MessageCatalog",
    "load_catalog",
    # Errors
    "CatalogError",
    "SchemaConfigurationError",
    "ShapeguardError",
]
