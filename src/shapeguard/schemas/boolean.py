"""Boolean schema.

Coercion accepts "true"/"false" (any case) and 1/0; everything else
becomes the default, or False. The nullable/optional shortcuts return the
default (or False) without running checks.
"""

from dataclasses import dataclass
from typing import Any

from shapeguard.checks import BooleanCheck, BooleanCheckKind
from shapeguard.coercion import coerce_to_boolean
from shapeguard.engines.boolean import BooleanTransform
from shapeguard.errors import SchemaConfigurationError
from shapeguard.messages import DEFAULT_CATALOG, MessageCatalog
from shapeguard.schemas.base import NO_DEFAULT, PrimitiveSchema
from shapeguard.types import UNDEFINED, ErrorDetail, Failure, Success, ValidationResult


@dataclass(frozen=True)
class BooleanConfig:
    checks: tuple[BooleanCheck, ...] = ()
    default: Any = NO_DEFAULT
    coerce: bool = False
    nullable: bool = False
    optional: bool = False
    type_message: str | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT


class BooleanParser:
    """Runs one parse call against a BooleanConfig."""

    def __init__(self, config: BooleanConfig, catalog: MessageCatalog):
        self.config = config
        self.catalog = catalog

    def parse(self, value: Any) -> ValidationResult[bool]:
        config = self.config
        if config.coerce:
            value = coerce_to_boolean(value, config.default if config.has_default else None)

        if value is None and config.nullable:
            return Success(self._fallback())
        if value is UNDEFINED and config.optional:
            return Success(self._fallback())

        if not isinstance(value, bool):
            if config.has_default:
                return Success(config.default)
            return Failure((
                ErrorDetail(
                    field="boolean",
                    message=config.type_message or self.catalog.message("boolean", "type"),
                    operation="parse",
                    expected_type="boolean",
                    received_value=value,
                    suggestion="Use coercion or transformation to convert the value to boolean",
                ),
            ))

        return BooleanTransform(value).transform(config.checks)

    def _fallback(self) -> bool:
        return self.config.default if self.config.has_default else False


class BooleanSchema(PrimitiveSchema[bool, BooleanConfig]):
    """Validates booleans."""

    SCHEMA_TYPE = "boolean"

    def __init__(
        self,
        message: str | None = None,
        catalog: MessageCatalog = DEFAULT_CATALOG,
    ):
        super().__init__(BooleanConfig(type_message=message), catalog)

    def parse(self, value: Any = UNDEFINED) -> ValidationResult[bool]:
        return BooleanParser(self._config, self.catalog).parse(value)

    def _check(
        self,
        kind: BooleanCheckKind,
        value: bool | None = None,
        message: str | None = None,
    ) -> "BooleanSchema":
        return self._add_check(
            BooleanCheck(kind=kind, value=value, message=self._message(kind.value, message))
        )

    def is_true(self, *, message: str | None = None) -> "BooleanSchema":
        return self._check(BooleanCheckKind.IS_TRUE, message=message)

    def is_false(self, *, message: str | None = None) -> "BooleanSchema":
        return self._check(BooleanCheckKind.IS_FALSE, message=message)

    def equal(self, value: bool, *, message: str | None = None) -> "BooleanSchema":
        return self._check(BooleanCheckKind.EQUAL, _require_bool("equal", value), message)

    def nullable(self) -> "BooleanSchema":
        return self._configure(nullable=True)

    def optional(self) -> "BooleanSchema":
        return self._configure(optional=True)

    def default(self, value: bool) -> "BooleanSchema":
        return self._configure(default=_require_bool("default", value))

    def coerce(self) -> "BooleanSchema":
        return self._configure(coerce=True)


def _require_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise SchemaConfigurationError(f"{name}() expects a bool, got {value!r}")
    return value
