"""Schema classes: primitive parsers and composite combinators."""

from shapeguard.schemas.array import ArraySchema
from shapeguard.schemas.base import NO_DEFAULT, PrimitiveSchema
from shapeguard.schemas.boolean import BooleanConfig, BooleanSchema
from shapeguard.schemas.number import NumberConfig, NumberSchema
from shapeguard.schemas.object import ObjectSchema
from shapeguard.schemas.string import StringConfig, StringSchema

__all__ = [
    "ArraySchema",
    "BooleanConfig",
    "BooleanSchema",
    "NO_DEFAULT",
    "NumberConfig",
    "NumberSchema",
    "ObjectSchema",
    "PrimitiveSchema",
    "StringConfig",
    "StringSchema",
]
