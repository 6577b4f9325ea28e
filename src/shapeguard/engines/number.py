"""Transform engine for number schemas.

All comparisons are exact. ``step`` is the one exception: it accepts a
rounding error below machine epsilon, while ``multipleOf`` requires an
exact zero remainder.
"""

import math
import sys

from shapeguard.checks import BetweenBounds, BetweenType, NumberCheck, NumberCheckKind
from shapeguard.coercion import MAX_SAFE_INTEGER, format_number, is_integral
from shapeguard.engines.base import TransformEngine
from shapeguard.types import ErrorDetail

EPSILON = sys.float_info.epsilon


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def is_step_multiple(value: int | float, step: int | float) -> bool:
    if isinstance(value, int) and isinstance(step, int):
        return value % step == 0
    try:
        quotient = value / step
    except OverflowError:
        return False
    if not math.isfinite(quotient):
        return False
    return abs(value - _round_half_up(quotient) * step) < EPSILON


def is_exact_multiple(value: int | float, divisor: int | float) -> bool:
    try:
        # inf % n is nan, which is never 0
        return value % divisor == 0
    except OverflowError:
        return False


def is_within(value: int | float, bounds: BetweenBounds) -> bool:
    if bounds.type is BetweenType.EXCLUSIVE:
        return bounds.min < value < bounds.max
    return bounds.min <= value <= bounds.max


class NumberTransform(TransformEngine[int | float]):
    """Executes number checks against a narrowed, non-NaN number."""

    EXPECTED_TYPE = "number"

    HANDLERS = {
        NumberCheckKind.MIN: "_check_min",
        NumberCheckKind.MAX: "_check_max",
        NumberCheckKind.INT: "_check_int",
        NumberCheckKind.FLOAT: "_check_float",
        NumberCheckKind.FINITE: "_check_finite",
        NumberCheckKind.POSITIVE: "_check_positive",
        NumberCheckKind.NEGATIVE: "_check_negative",
        NumberCheckKind.NON_NEGATIVE: "_check_non_negative",
        NumberCheckKind.NON_POSITIVE: "_check_non_positive",
        NumberCheckKind.EQUAL: "_check_equal",
        NumberCheckKind.NON_EQUAL: "_check_non_equal",
        NumberCheckKind.GREATER: "_check_greater",
        NumberCheckKind.GREATER_EQUAL: "_check_greater_equal",
        NumberCheckKind.LESS: "_check_less",
        NumberCheckKind.LESS_EQUAL: "_check_less_equal",
        NumberCheckKind.MULTIPLE_OF: "_check_multiple_of",
        NumberCheckKind.SAFE: "_check_safe",
        NumberCheckKind.BETWEEN: "_check_between",
        NumberCheckKind.STEP: "_check_step",
    }

    def _bound(self, check: NumberCheck) -> str:
        return format_number(check.value)

    def _check_min(self, check: NumberCheck) -> ErrorDetail | None:
        if self.value < check.value:
            return self.fail(check, f"value must be greater than {self._bound(check)}")
        return None

    def _check_max(self, check: NumberCheck) -> ErrorDetail | None:
        if self.value > check.value:
            return self.fail(check, f"value must be less than {self._bound(check)}")
        return None

    def _check_int(self, check: NumberCheck) -> ErrorDetail | None:
        if not is_integral(self.value):
            return self.fail(check, "value must be an integer")
        return None

    def _check_float(self, check: NumberCheck) -> ErrorDetail | None:
        if is_integral(self.value):
            return self.fail(check, "value must be a float")
        return None

    def _check_finite(self, check: NumberCheck) -> ErrorDetail | None:
        if not math.isfinite(self.value):
            return self.fail(check, "value must be a finite number")
        return None

    def _check_positive(self, check: NumberCheck) -> ErrorDetail | None:
        if self.value <= 0:
            return self.fail(check, "value must be a positive number")
        return None

    def _check_negative(self, check: NumberCheck) -> ErrorDetail | None:
        if self.value >= 0:
            return self.fail(check, "value must be a negative number")
        return None

    def _check_non_negative(self, check: NumberCheck) -> ErrorDetail | None:
        if self.value < 0:
            return self.fail(check, "value must be a non-negative number")
        return None

    def _check_non_positive(self, check: NumberCheck) -> ErrorDetail | None:
        if self.value > 0:
            return self.fail(check, "value must be a non-positive number")
        return None

    def _check_equal(self, check: NumberCheck) -> ErrorDetail | None:
        if self.value != check.value:
            return self.fail(check, f"value must be equal to {self._bound(check)}")
        return None

    def _check_non_equal(self, check: NumberCheck) -> ErrorDetail | None:
        if self.value == check.value:
            return self.fail(check, f"value must not be equal to {self._bound(check)}")
        return None

    def _check_greater(self, check: NumberCheck) -> ErrorDetail | None:
        if self.value <= check.value:
            return self.fail(check, f"value must be greater than {self._bound(check)}")
        return None

    def _check_greater_equal(self, check: NumberCheck) -> ErrorDetail | None:
        if self.value < check.value:
            return self.fail(
                check, f"value must be greater than or equal to {self._bound(check)}"
            )
        return None

    def _check_less(self, check: NumberCheck) -> ErrorDetail | None:
        if self.value >= check.value:
            return self.fail(check, f"value must be less than {self._bound(check)}")
        return None

    def _check_less_equal(self, check: NumberCheck) -> ErrorDetail | None:
        if self.value > check.value:
            return self.fail(
                check, f"value must be less than or equal to {self._bound(check)}"
            )
        return None

    def _check_multiple_of(self, check: NumberCheck) -> ErrorDetail | None:
        if not is_exact_multiple(self.value, check.value):
            return self.fail(check, f"value must be a multiple of {self._bound(check)}")
        return None

    def _check_safe(self, check: NumberCheck) -> ErrorDetail | None:
        if not (is_integral(self.value) and abs(self.value) <= MAX_SAFE_INTEGER):
            return self.fail(check, "value must be a safe integer")
        return None

    def _check_between(self, check: NumberCheck) -> ErrorDetail | None:
        bounds: BetweenBounds = check.value
        if not is_within(self.value, bounds):
            return self.fail(
                check,
                f"value must be between ({bounds.type.value}) "
                f"{format_number(bounds.min)} and {format_number(bounds.max)}",
            )
        return None

    def _check_step(self, check: NumberCheck) -> ErrorDetail | None:
        if not is_step_multiple(self.value, check.value):
            return self.fail(check, f"value must be a multiple of {self._bound(check)}")
        return None
