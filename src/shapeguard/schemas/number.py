"""Number schema: coercion, narrowing and the fluent check builders.

``int`` and ``float`` are numbers here; ``bool`` is not, and NaN never
passes narrowing. Infinity does, so that ``finite()`` can reject it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shapeguard.checks import BetweenBounds, BetweenType, NumberCheck, NumberCheckKind
from shapeguard.coercion import coerce_to_number, is_number
from shapeguard.engines.number import NumberTransform
from shapeguard.errors import SchemaConfigurationError
from shapeguard.messages import DEFAULT_CATALOG, MessageCatalog
from shapeguard.schemas.base import NO_DEFAULT, PrimitiveSchema, require_number
from shapeguard.types import UNDEFINED, ErrorDetail, Failure, Success, ValidationResult


@dataclass(frozen=True)
class NumberConfig:
    """Configuration snapshot of a NumberSchema.

    Attributes:
        checks: Checks in insertion order
        default: Fallback for non-numeric input, or NO_DEFAULT
        coerce: Convert input to a number before narrowing
        nullable: Accept None (as the default, or 0)
        optional: Accept UNDEFINED (as the default, or 0)
        type_message: Message for the type error; catalog default if None
    """

    checks: tuple[NumberCheck, ...] = ()
    default: Any = NO_DEFAULT
    coerce: bool = False
    nullable: bool = False
    optional: bool = False
    type_message: str | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT


class NumberParser:
    """Runs one parse call against a NumberConfig."""

    def __init__(self, config: NumberConfig, catalog: MessageCatalog):
        self.config = config
        self.catalog = catalog

    def parse(self, value: Any) -> ValidationResult[int | float]:
        config = self.config
        if config.coerce:
            value = coerce_to_number(value, config.default if config.has_default else None)

        if value is None and config.nullable:
            return Success(self._fallback())
        if value is UNDEFINED and config.optional:
            return Success(self._fallback())

        if not is_number(value):
            if config.has_default:
                return Success(config.default)
            return Failure((
                ErrorDetail(
                    field="number",
                    message=config.type_message or self.catalog.message("number", "type"),
                    operation="parse",
                    expected_type="number",
                    received_value=value,
                    suggestion="Ensure the value is a number",
                ),
            ))

        return NumberTransform(value).transform(config.checks)

    def _fallback(self) -> int | float:
        return self.config.default if self.config.has_default else 0


class NumberSchema(PrimitiveSchema[Any, NumberConfig]):
    """Validates numbers.

    Example:
        schema = NumberSchema().coerce().int().between(1, 10)
        schema.parse("7")   # Success(data=7)
    """

    SCHEMA_TYPE = "number"

    def __init__(
        self,
        message: str | None = None,
        catalog: MessageCatalog = DEFAULT_CATALOG,
    ):
        super().__init__(NumberConfig(type_message=message), catalog)

    def parse(self, value: Any = UNDEFINED) -> ValidationResult[int | float]:
        return NumberParser(self._config, self.catalog).parse(value)

    def _check(
        self,
        kind: NumberCheckKind,
        value: Any = None,
        message: str | None = None,
    ) -> NumberSchema:
        return self._add_check(
            NumberCheck(kind=kind, value=value, message=self._message(kind.value, message))
        )

    def _bounded(
        self, kind: NumberCheckKind, name: str, value: Any, message: str | None
    ) -> NumberSchema:
        return self._check(kind, require_number(name, value), message)

    # -- bounds ----------------------------------------------------------------

    def min(self, value: int | float, *, message: str | None = None) -> NumberSchema:
        return self._bounded(NumberCheckKind.MIN, "min", value, message)

    def max(self, value: int | float, *, message: str | None = None) -> NumberSchema:
        return self._bounded(NumberCheckKind.MAX, "max", value, message)

    def gt(self, value: int | float, *, message: str | None = None) -> NumberSchema:
        return self._bounded(NumberCheckKind.GREATER, "gt", value, message)

    def gte(self, value: int | float, *, message: str | None = None) -> NumberSchema:
        return self._bounded(NumberCheckKind.GREATER_EQUAL, "gte", value, message)

    def lt(self, value: int | float, *, message: str | None = None) -> NumberSchema:
        return self._bounded(NumberCheckKind.LESS, "lt", value, message)

    def lte(self, value: int | float, *, message: str | None = None) -> NumberSchema:
        return self._bounded(NumberCheckKind.LESS_EQUAL, "lte", value, message)

    def equal(self, value: int | float, *, message: str | None = None) -> NumberSchema:
        return self._bounded(NumberCheckKind.EQUAL, "equal", value, message)

    def non_equal(self, value: int | float, *, message: str | None = None) -> NumberSchema:
        return self._bounded(NumberCheckKind.NON_EQUAL, "non_equal", value, message)

    def between(
        self,
        min: int | float,
        max: int | float,
        type: BetweenType | str = BetweenType.INCLUSIVE,
        *,
        message: str | None = None,
    ) -> NumberSchema:
        low = require_number("between", min)
        high = require_number("between", max)
        if low > high:
            raise SchemaConfigurationError(
                f"between() min ({low!r}) must not exceed max ({high!r})"
            )
        try:
            kind = BetweenType(type)
        except ValueError as exc:
            raise SchemaConfigurationError(
                f"between() type must be 'inclusive' or 'exclusive', got {type!r}"
            ) from exc
        return self._check(
            NumberCheckKind.BETWEEN, BetweenBounds(min=low, max=high, type=kind), message
        )

    # -- divisibility ------------------------------------------------------------

    def multiple_of(self, value: int | float, *, message: str | None = None) -> NumberSchema:
        if require_number("multiple_of", value) == 0:
            raise SchemaConfigurationError("multiple_of() divisor must not be zero")
        return self._check(NumberCheckKind.MULTIPLE_OF, value, message)

    def step(self, value: int | float, *, message: str | None = None) -> NumberSchema:
        if require_number("step", value) == 0:
            raise SchemaConfigurationError("step() must not be zero")
        return self._check(NumberCheckKind.STEP, value, message)

    # -- sign and kind -------------------------------------------------------------

    def positive(self, *, message: str | None = None) -> NumberSchema:
        return self._check(NumberCheckKind.POSITIVE, message=message)

    def negative(self, *, message: str | None = None) -> NumberSchema:
        return self._check(NumberCheckKind.NEGATIVE, message=message)

    def non_negative(self, *, message: str | None = None) -> NumberSchema:
        return self._check(NumberCheckKind.NON_NEGATIVE, message=message)

    def non_positive(self, *, message: str | None = None) -> NumberSchema:
        return self._check(NumberCheckKind.NON_POSITIVE, message=message)

    def finite(self, *, message: str | None = None) -> NumberSchema:
        return self._check(NumberCheckKind.FINITE, message=message)

    def safe(self, *, message: str | None = None) -> NumberSchema:
        return self._check(NumberCheckKind.SAFE, message=message)

    def int(self, *, message: str | None = None) -> NumberSchema:
        return self._check(NumberCheckKind.INT, message=message)

    def float(self, *, message: str | None = None) -> NumberSchema:
        return self._check(NumberCheckKind.FLOAT, message=message)

    # -- presence and fallback -----------------------------------------------------

    def nullable(self) -> NumberSchema:
        return self._configure(nullable=True)

    def optional(self) -> NumberSchema:
        return self._configure(optional=True)

    def default(self, value: int | float) -> NumberSchema:
        return self._configure(default=require_number("default", value))

    def coerce(self) -> NumberSchema:
        return self._configure(coerce=True)
