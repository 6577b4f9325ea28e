"""String schema: narrowing policy plus the fluent check builders.

Parse policy, in order:
1. Coercion (if enabled) turns any input into text
2. A string goes straight to the StringTransform engine
3. Otherwise: ``required()`` fails; ``nullable()`` accepts None;
   ``optional()`` accepts anything else as ""; a configured default is
   used; anything left is a type error
"""

from dataclasses import dataclass
from typing import Any, Iterable

from shapeguard.checks import (
    SLUG_SEPARATORS,
    CapitalizeOptions,
    CapitalizeStyle,
    CensorOptions,
    StringCheck,
    StringCheckKind,
)
from shapeguard.coercion import coerce_to_text
from shapeguard.engines.string import StringTransform
from shapeguard.errors import SchemaConfigurationError
from shapeguard.messages import DEFAULT_CATALOG, MessageCatalog
from shapeguard.schemas.base import (
    NO_DEFAULT,
    PrimitiveSchema,
    compile_pattern,
    require_length,
    require_text,
)
from shapeguard.types import UNDEFINED, ErrorDetail, Failure, Success, ValidationResult


@dataclass(frozen=True)
class StringConfig:
    """Configuration snapshot of a StringSchema.

    Attributes:
        checks: Checks and presence markers, in insertion order
        default: Fallback for non-string input, or NO_DEFAULT
        coerce: Convert any input to text before narrowing
        nullable: Accept None (as the default, or "")
        type_message: Message for the type error; catalog default if None
    """

    checks: tuple[StringCheck, ...] = ()
    default: Any = NO_DEFAULT
    coerce: bool = False
    nullable: bool = False
    type_message: str | None = None

    def find(self, kind: StringCheckKind) -> StringCheck | None:
        for check in self.checks:
            if check.kind is kind:
                return check
        return None


class StringParser:
    """Runs one parse call against a StringConfig."""

    SUGGESTION = "value must be a string"

    def __init__(self, config: StringConfig, catalog: MessageCatalog):
        self.config = config
        self.catalog = catalog

    def parse(self, value: Any) -> ValidationResult[str]:
        config = self.config
        if config.coerce:
            value = coerce_to_text(value)

        if isinstance(value, str):
            return StringTransform(value).transform(config.checks)

        required = config.find(StringCheckKind.REQUIRED)
        if required is not None:
            return self._failure(value, "required", required.message)

        if value is None and config.nullable:
            return Success(self._fallback())

        optional = config.find(StringCheckKind.OPTIONAL) is not None
        if value is UNDEFINED and optional:
            return Success(self._fallback())
        if optional:
            return Success("")

        if config.default is not NO_DEFAULT:
            return Success(coerce_to_text(config.default))

        message = config.type_message or self.catalog.message("string", "type")
        return self._failure(value, "type", message)

    def _fallback(self) -> str:
        if self.config.default is NO_DEFAULT:
            return ""
        return coerce_to_text(self.config.default)

    def _failure(self, value: Any, operation: str, message: str) -> Failure:
        return Failure((
            ErrorDetail(
                field="value",
                message=message,
                operation=operation,
                expected_type="string",
                received_value=value,
                suggestion=self.SUGGESTION,
            ),
        ))


class StringSchema(PrimitiveSchema[str, StringConfig]):
    """Validates and normalizes strings.

    Example:
        schema = StringSchema().trim().min(3).max(10).to_lower_case()
        schema.parse("  Hello ")   # Success(data="hello")
    """

    SCHEMA_TYPE = "string"

    def __init__(
        self,
        message: str | None = None,
        catalog: MessageCatalog = DEFAULT_CATALOG,
    ):
        super().__init__(StringConfig(type_message=message), catalog)

    def parse(self, value: Any = UNDEFINED) -> ValidationResult[str]:
        return StringParser(self._config, self.catalog).parse(value)

    def _validation(
        self,
        kind: StringCheckKind,
        value: Any = None,
        message: str | None = None,
    ) -> "StringSchema":
        return self._add_check(
            StringCheck(kind=kind, value=value, message=self._message(kind.value, message))
        )

    # -- length ----------------------------------------------------------------

    def min(self, length: int, *, message: str | None = None) -> "StringSchema":
        return self._validation(StringCheckKind.MIN, require_length("min", length), message)

    def max(self, length: int, *, message: str | None = None) -> "StringSchema":
        return self._validation(StringCheckKind.MAX, require_length("max", length), message)

    def length(self, length: int, *, message: str | None = None) -> "StringSchema":
        return self._validation(
            StringCheckKind.LENGTH, require_length("length", length), message
        )

    # -- content ---------------------------------------------------------------

    def starts_with(self, prefix: str, *, message: str | None = None) -> "StringSchema":
        return self._validation(
            StringCheckKind.STARTS_WITH, require_text("starts_with", prefix), message
        )

    def ends_with(self, suffix: str, *, message: str | None = None) -> "StringSchema":
        return self._validation(
            StringCheckKind.ENDS_WITH, require_text("ends_with", suffix), message
        )

    def includes(self, part: str, *, message: str | None = None) -> "StringSchema":
        return self._validation(
            StringCheckKind.INCLUDES, require_text("includes", part), message
        )

    def regex(self, pattern: Any, *, message: str | None = None) -> "StringSchema":
        return self._validation(StringCheckKind.REGEX, compile_pattern(pattern), message)

    def email(self, *, message: str | None = None) -> "StringSchema":
        return self._validation(StringCheckKind.EMAIL, message=message)

    def url(self, *, message: str | None = None) -> "StringSchema":
        return self._validation(StringCheckKind.URL, message=message)

    def alpha_only(self, *, message: str | None = None) -> "StringSchema":
        return self._validation(StringCheckKind.ALPHA_ONLY, message=message)

    def alpha_numeric(self, *, message: str | None = None) -> "StringSchema":
        return self._validation(StringCheckKind.ALPHA_NUMERIC, message=message)

    def allow_char(self, chars: str, *, message: str | None = None) -> "StringSchema":
        return self._validation(
            StringCheckKind.ALLOW_CHAR, require_text("allow_char", chars), message
        )

    def block_char(self, chars: str, *, message: str | None = None) -> "StringSchema":
        return self._validation(
            StringCheckKind.BLOCK_CHAR, require_text("block_char", chars), message
        )

    # -- mutations -------------------------------------------------------------

    def trim(self) -> "StringSchema":
        return self._add_check(StringCheck(kind=StringCheckKind.TRIM))

    def to_lower_case(self) -> "StringSchema":
        return self._add_check(StringCheck(kind=StringCheckKind.TO_LOWER_CASE))

    def to_upper_case(self) -> "StringSchema":
        return self._add_check(StringCheck(kind=StringCheckKind.TO_UPPER_CASE))

    def capitalize(
        self,
        style: CapitalizeStyle | str = CapitalizeStyle.SENTENCE,
        separator: str = " ",
    ) -> "StringSchema":
        try:
            style = CapitalizeStyle(style)
        except ValueError as exc:
            choices = ", ".join(s.value for s in CapitalizeStyle)
            raise SchemaConfigurationError(
                f"capitalize() style must be one of {choices}, got {style!r}"
            ) from exc
        if not isinstance(separator, str) or separator == "":
            raise SchemaConfigurationError("capitalize() separator must be a non-empty string")
        return self._add_check(
            StringCheck(
                kind=StringCheckKind.CAPITALIZE,
                value=CapitalizeOptions(style=style, separator=separator),
            )
        )

    def slugify(self, separator: str = "-") -> "StringSchema":
        if separator not in SLUG_SEPARATORS:
            raise SchemaConfigurationError(
                f"slugify() separator must be '-' or '_', got {separator!r}"
            )
        return self._add_check(StringCheck(kind=StringCheckKind.SLUGIFY, value=separator))

    def censor(
        self,
        censor: str | Iterable[str] | None = None,
        *,
        replacement: str = "*",
        start_offset: int | None = None,
        end_offset: int | None = None,
        censor_all: bool = False,
    ) -> "StringSchema":
        """Mask sensitive text. See CensorOptions for mode priority."""
        if not isinstance(replacement, str) or len(replacement) != 1:
            raise SchemaConfigurationError("censor() replacement must be a single character")
        if censor is not None and not isinstance(censor, str):
            censor = tuple(censor)
            if not all(isinstance(word, str) for word in censor):
                raise SchemaConfigurationError("censor() words must be strings")
        return self._add_check(
            StringCheck(
                kind=StringCheckKind.CENSOR,
                value=CensorOptions(
                    censor=censor,
                    replacement=replacement,
                    start_offset=start_offset,
                    end_offset=end_offset,
                    censor_all=censor_all,
                ),
            )
        )

    # -- presence and fallback -------------------------------------------------

    def optional(self) -> "StringSchema":
        return self._add_check(StringCheck(kind=StringCheckKind.OPTIONAL))

    def required(self, *, message: str | None = None) -> "StringSchema":
        return self._validation(StringCheckKind.REQUIRED, message=message)

    def nullable(self) -> "StringSchema":
        return self._configure(nullable=True)

    def default(self, value: Any) -> "StringSchema":
        return self._configure(default=value)

    def coerce(self) -> "StringSchema":
        return self._configure(coerce=True)
