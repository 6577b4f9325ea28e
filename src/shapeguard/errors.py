"""Exceptions raised by shapeguard.

Validation failures are never raised: ``parse`` always returns a result
object. These exceptions cover misuse at configuration time and broken
message-catalog files.
"""


class ShapeguardError(Exception):
    """Base class for all shapeguard exceptions."""
    pass


class SchemaConfigurationError(ShapeguardError, ValueError):
    """A fluent configuration call received an unusable argument."""
    pass


class CatalogError(ShapeguardError):
    """A message catalog could not be loaded or failed validation.

    Attributes:
        issues: One ``"path: message"`` string per problem found
    """

    def __init__(self, message: str, issues: list[str] | None = None):
        self.issues = list(issues or [])
        if self.issues:
            message = f"{message}: " + "; ".join(self.issues)
        super().__init__(message)
