"""Transform engines: ordered check execution per primitive type."""

from shapeguard.engines.base import TransformEngine
from shapeguard.engines.boolean import BooleanTransform
from shapeguard.engines.number import NumberTransform
from shapeguard.engines.string import StringTransform

__all__ = [
    "TransformEngine",
    "BooleanTransform",
    "NumberTransform",
    "StringTransform",
]
