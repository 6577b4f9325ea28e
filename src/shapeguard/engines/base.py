"""Shared check-execution loop for the primitive transform engines."""

from typing import Any, ClassVar, Generic, Iterable, TypeVar

from shapeguard.types import ErrorDetail, Failure, Success, ValidationResult

T = TypeVar("T")


class TransformEngine(Generic[T]):
    """Runs checks in order against a working value held by the engine.

    Subclasses map every check kind to a handler method in ``HANDLERS``.
    A handler either rewrites ``self.value`` and returns None, or returns
    the ErrorDetail for a failed validation. The first failure ends the run.

    An engine instance is created per parse call and is not shared.
    """

    HANDLERS: ClassVar[dict[Any, str]] = {}
    EXPECTED_TYPE: ClassVar[str] = ""
    FIELD: ClassVar[str] = "value"
    SKIPPED: ClassVar[frozenset] = frozenset()

    def __init__(self, value: T):
        self.value = value

    def transform(self, checks: Iterable[Any]) -> ValidationResult[T]:
        for check in checks:
            if check.kind in self.SKIPPED:
                continue
            handler = getattr(self, self.HANDLERS[check.kind])
            error = handler(check)
            if error is not None:
                return Failure((error,))
        return Success(self.value)

    def fail(
        self,
        check: Any,
        suggestion: str,
        expected_type: str | None = None,
    ) -> ErrorDetail:
        """Build the error for a failed check against the current value."""
        return ErrorDetail(
            field=self.FIELD,
            message=check.message,
            operation=check.kind.value,
            expected_type=expected_type or self.EXPECTED_TYPE,
            received_value=self.value,
            suggestion=suggestion,
        )
