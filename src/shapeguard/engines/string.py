"""Transform engine for string schemas.

Validations:
- min / max / length: character-count bounds
- startsWith / endsWith / includes: substring tests
- regex: pattern search
- email / url: address syntax
- alphaOnly / alphaNumeric / allowChar / blockChar: character sets

Mutations (never fail):
- trim / toLowerCase / toUpperCase
- capitalize: sentence, title, uppercase, lowercase, pascal, camel
- slugify: url-safe lowercase slug
- censor: mask all, a range, a word list, or a single word
"""

import logging
import re
from urllib.parse import urlsplit

from shapeguard.checks import (
    CapitalizeStyle,
    CensorOptions,
    STRING_MARKERS,
    StringCheck,
    StringCheckKind,
    regex_literal,
)
from shapeguard.engines.base import TransformEngine
from shapeguard.types import ErrorDetail

logger = logging.getLogger(__name__)


# =============================================================================
# Patterns
# =============================================================================

# Local part of at least two characters, no leading dot, no double dots
EMAIL_PATTERN = re.compile(
    r"(?!\.)(?!.*\.\.)([A-Z0-9_'+\-.]+)[A-Z0-9_+-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}",
    re.IGNORECASE | re.ASCII,
)

ALPHA_PATTERN = re.compile(r"[a-zA-Z]+")
ALPHA_NUMERIC_PATTERN = re.compile(r"[a-zA-Z0-9]+")

_SCHEME_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9+.\-]*")

# Schemes whose URLs must name a host
_HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})

_WORD_PATTERN = re.compile(r"\b\w+\b", re.ASCII)
_WHITESPACE_PATTERN = re.compile(r"\s+")
_NON_SLUG_PATTERN = re.compile(r"[^a-z0-9\-_]")


def is_valid_url(text: str) -> bool:
    """Probe whether text parses as an absolute URL.

    urlsplit raises ValueError for malformed hosts and ports; that is
    treated as an invalid URL rather than propagated.
    """
    try:
        parts = urlsplit(text)
        parts.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError as exc:
        logger.debug("URL probe rejected %r: %s", text, exc)
        return False

    if not parts.scheme or not _SCHEME_PATTERN.fullmatch(parts.scheme):
        return False
    if text.strip() != text or any(ch.isspace() for ch in parts.netloc):
        return False
    if parts.scheme.lower() in _HIERARCHICAL_SCHEMES:
        return bool(parts.hostname)
    if parts.scheme.lower() == "file":
        return text[len(parts.scheme) + 1:].startswith("/")
    return bool(parts.netloc or parts.path)


def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def capitalize(text: str, style: CapitalizeStyle, separator: str) -> str:
    """Re-case text according to one of the capitalize styles."""
    if style is CapitalizeStyle.SENTENCE:
        return _upper_first(text)
    if style is CapitalizeStyle.TITLE:
        return separator.join(_upper_first(w) for w in text.split(separator))
    if style is CapitalizeStyle.UPPERCASE:
        return text.upper()
    if style is CapitalizeStyle.LOWERCASE:
        return text.lower()
    if style is CapitalizeStyle.PASCAL:
        return "".join(_upper_first(w) for w in text.split(separator))
    # camel
    words = text.split(separator)
    return words[0].lower() + "".join(_upper_first(w) for w in words[1:])


def slugify(text: str, separator: str) -> str:
    slug = _WHITESPACE_PATTERN.sub(separator, text.lower().strip())
    return _NON_SLUG_PATTERN.sub("", slug)


def censor(text: str, options: CensorOptions) -> str:
    """Mask part of text; the masked span keeps its original length."""
    replacement = options.replacement

    if options.censor_all:
        return replacement * len(text)

    if options.start_offset is not None and options.end_offset is not None:
        start = max(0, options.start_offset)
        end = min(len(text), options.end_offset)
        if start < end:
            return text[:start] + replacement * (end - start) + text[end:]
        return text

    if isinstance(options.censor, tuple) and options.censor:
        targets = set(options.censor)
        return _WORD_PATTERN.sub(
            lambda m: replacement * len(m.group()) if m.group() in targets else m.group(),
            text,
        )

    if isinstance(options.censor, str) and options.censor.strip():
        pattern = re.compile(
            rf"\b{re.escape(options.censor)}\b", re.IGNORECASE | re.ASCII
        )
        return pattern.sub(lambda m: replacement * len(m.group()), text)

    return text


# =============================================================================
# Engine
# =============================================================================


class StringTransform(TransformEngine[str]):
    """Executes string checks against a narrowed string value."""

    EXPECTED_TYPE = "string"
    SKIPPED = STRING_MARKERS

    HANDLERS = {
        StringCheckKind.MIN: "_check_min",
        StringCheckKind.MAX: "_check_max",
        StringCheckKind.LENGTH: "_check_length",
        StringCheckKind.STARTS_WITH: "_check_substring",
        StringCheckKind.ENDS_WITH: "_check_substring",
        StringCheckKind.INCLUDES: "_check_substring",
        StringCheckKind.REGEX: "_check_regex",
        StringCheckKind.EMAIL: "_check_email",
        StringCheckKind.URL: "_check_url",
        StringCheckKind.ALPHA_ONLY: "_check_alpha_only",
        StringCheckKind.ALPHA_NUMERIC: "_check_alpha_numeric",
        StringCheckKind.ALLOW_CHAR: "_check_allow_char",
        StringCheckKind.BLOCK_CHAR: "_check_block_char",
        StringCheckKind.TRIM: "_apply_trim",
        StringCheckKind.TO_LOWER_CASE: "_apply_lower",
        StringCheckKind.TO_UPPER_CASE: "_apply_upper",
        StringCheckKind.CAPITALIZE: "_apply_capitalize",
        StringCheckKind.SLUGIFY: "_apply_slugify",
        StringCheckKind.CENSOR: "_apply_censor",
    }

    # -- validations ---------------------------------------------------------

    def _check_min(self, check: StringCheck) -> ErrorDetail | None:
        if len(self.value) < check.value:
            return self.fail(check, f"value must be at least {check.value} characters long")
        return None

    def _check_max(self, check: StringCheck) -> ErrorDetail | None:
        if len(self.value) > check.value:
            return self.fail(check, f"value must be at most {check.value} characters long")
        return None

    def _check_length(self, check: StringCheck) -> ErrorDetail | None:
        if len(self.value) != check.value:
            return self.fail(check, f"value must be exactly {check.value} characters long")
        return None

    def _check_substring(self, check: StringCheck) -> ErrorDetail | None:
        if check.kind is StringCheckKind.STARTS_WITH:
            ok = self.value.startswith(check.value)
        elif check.kind is StringCheckKind.ENDS_WITH:
            ok = self.value.endswith(check.value)
        else:
            ok = check.value in self.value
        if not ok:
            return self.fail(check, f'value must {check.kind.value} "{check.value}"')
        return None

    def _check_regex(self, check: StringCheck) -> ErrorDetail | None:
        if not check.value.search(self.value):
            return self.fail(check, f"value must match the regex {regex_literal(check.value)}")
        return None

    def _check_email(self, check: StringCheck) -> ErrorDetail | None:
        if not EMAIL_PATTERN.fullmatch(self.value):
            return self.fail(check, "value must be a valid email address")
        return None

    def _check_url(self, check: StringCheck) -> ErrorDetail | None:
        if not is_valid_url(self.value):
            return self.fail(check, "value must be a valid URL")
        return None

    def _check_alpha_only(self, check: StringCheck) -> ErrorDetail | None:
        if not ALPHA_PATTERN.fullmatch(self.value):
            return self.fail(check, "value must contain only alphabetic characters")
        return None

    def _check_alpha_numeric(self, check: StringCheck) -> ErrorDetail | None:
        if not ALPHA_NUMERIC_PATTERN.fullmatch(self.value):
            return self.fail(check, "value must contain only alphanumeric characters")
        return None

    def _check_allow_char(self, check: StringCheck) -> ErrorDetail | None:
        allowed = set(check.value)
        if not self.value or any(ch not in allowed for ch in self.value):
            return self.fail(check, "value must contain only allowed characters")
        return None

    def _check_block_char(self, check: StringCheck) -> ErrorDetail | None:
        blocked = set(check.value)
        if any(ch in blocked for ch in self.value):
            return self.fail(check, "value must not contain blocked characters")
        return None

    # -- mutations -----------------------------------------------------------

    def _apply_trim(self, check: StringCheck) -> None:
        self.value = self.value.strip()

    def _apply_lower(self, check: StringCheck) -> None:
        self.value = self.value.lower()

    def _apply_upper(self, check: StringCheck) -> None:
        self.value = self.value.upper()

    def _apply_capitalize(self, check: StringCheck) -> None:
        self.value = capitalize(self.value, check.value.style, check.value.separator)

    def _apply_slugify(self, check: StringCheck) -> None:
        self.value = slugify(self.value, check.value)

    def _apply_censor(self, check: StringCheck) -> None:
        self.value = censor(self.value, check.value)
