"""Constructor functions for schemas.

    from shapeguard import factory as s

    user = s.object({
        "name": s.string().trim().min(3),
        "age": s.number().int().min(0),
        "tags": s.array(s.string()),
    })
"""

from typing import Mapping

from shapeguard.messages import DEFAULT_CATALOG, MessageCatalog
from shapeguard.schemas import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    StringSchema,
)
from shapeguard.types import Schema


def string(
    message: str | None = None,
    catalog: MessageCatalog = DEFAULT_CATALOG,
) -> StringSchema:
    return StringSchema(message=message, catalog=catalog)


def number(
    message: str | None = None,
    catalog: MessageCatalog = DEFAULT_CATALOG,
) -> NumberSchema:
    return NumberSchema(message=message, catalog=catalog)


def boolean(
    message: str | None = None,
    catalog: MessageCatalog = DEFAULT_CATALOG,
) -> BooleanSchema:
    return BooleanSchema(message=message, catalog=catalog)


def object(
    shape: Mapping[str, Schema],
    catalog: MessageCatalog = DEFAULT_CATALOG,
) -> ObjectSchema:
    return ObjectSchema(shape, catalog=catalog)


def array(item: Schema, catalog: MessageCatalog = DEFAULT_CATALOG) -> ArraySchema:
    return ArraySchema(item, catalog=catalog)
