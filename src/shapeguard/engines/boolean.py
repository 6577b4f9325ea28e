"""Transform engine for boolean schemas."""

from shapeguard.checks import BooleanCheck, BooleanCheckKind
from shapeguard.coercion import format_number
from shapeguard.engines.base import TransformEngine
from shapeguard.types import ErrorDetail


class BooleanTransform(TransformEngine[bool]):
    """Executes boolean checks. Errors are labelled ``"boolean"``."""

    EXPECTED_TYPE = "boolean"
    FIELD = "boolean"

    HANDLERS = {
        BooleanCheckKind.IS_TRUE: "_check_is_true",
        BooleanCheckKind.IS_FALSE: "_check_is_false",
        BooleanCheckKind.EQUAL: "_check_equal",
    }

    def _check_is_true(self, check: BooleanCheck) -> ErrorDetail | None:
        if self.value is not True:
            return self.fail(check, 'Your provided value is not "true"', expected_type="true")
        return None

    def _check_is_false(self, check: BooleanCheck) -> ErrorDetail | None:
        if self.value is not False:
            return self.fail(check, 'Your provided value is not "false"', expected_type="false")
        return None

    def _check_equal(self, check: BooleanCheck) -> ErrorDetail | None:
        if self.value is not check.value:
            return self.fail(
                check, "Provide a same value", expected_type=format_number(check.value)
            )
        return None
