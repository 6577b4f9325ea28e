"""Core types shared by every shapeguard schema.

This module defines:
- UNDEFINED: the "no value" sentinel (distinct from ``None``)
- ErrorDetail: one structured validation failure
- Success / Failure: the two halves of a ValidationResult
- Schema: the abstract base every schema implements
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class _Undefined:
    """Marker for an absent value, e.g. a key missing from an object."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: dict) -> "_Undefined":
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


@dataclass(frozen=True)
class ErrorDetail:
    """A single validation failure.

    Attributes:
        field: Where the failure happened (a default label, an object key,
            or an array element description)
        message: Human-readable message, taken verbatim from the check
        operation: The check kind that failed ("min", "regex", "parse", ...)
        expected_type: The type or value the check expected
        received_value: The offending value, exactly as seen by the check
        suggestion: How to fix the value
    """

    field: str
    message: str
    operation: str
    expected_type: str
    received_value: Any
    suggestion: str

    def relabel(self, field: str) -> "ErrorDetail":
        """Return a copy of this error attributed to another field."""
        return replace(self, field=field)

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "message": self.message,
            "operation": self.operation,
            "expectedType": self.expected_type,
            "receivedValue": self.received_value,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful parse carrying the normalized value."""

    data: T

    success = True

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "data": self.data}


@dataclass(frozen=True)
class Failure:
    """Failed parse carrying at least one ErrorDetail, in emission order."""

    errors: tuple[ErrorDetail, ...]

    success = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise ValueError("Failure requires at least one ErrorDetail")

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": False,
            "errors": [error.to_dict() for error in self.errors],
        }


ValidationResult = Union[Success[T], Failure]


class Schema(ABC, Generic[T]):
    """A reusable validator/transformer for one data shape.

    ``parse`` is total: every input produces either a Success or a Failure.
    """

    @abstractmethod
    def parse(self, value: Any = UNDEFINED) -> "ValidationResult[T]":
        ...
