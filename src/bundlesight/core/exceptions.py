"""
Error taxonomy for stats ingestion and querying.

Normalization failures are values (see ``core.result``); only broken
preconditions inside the resolvers are raised.
"""

from enum import StrEnum


class NormalizationErrorKind(StrEnum):
    """Stable identifiers for why a stats document could not be ingested."""
    NOT_AN_OBJECT = "not_an_object"
    UNRECOGNIZED_SHAPE = "unrecognized_shape"
    MISSING_ASSETS_ARRAY = "missing_assets_array"
    MALFORMED_ENTRY = "malformed_entry"


class NormalizationError(Exception):
    """
    A stats document that cannot be turned into a Report.

    Attributes:
        kind: Stable error kind.
        message: Human-readable explanation.
    """

    def __init__(self, kind: NormalizationErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(f"[{kind.value}] {message}")


class PreconditionViolation(Exception):
    """Raised when a resolver receives a Report whose collections are not lists."""

    def __init__(self, field_name: str, actual: object):
        self.field_name = field_name
        super().__init__(
            f"Report.{field_name} must be a list, got {type(actual).__name__}"
        )


class StatsLoadError(Exception):
    """
    Raised (or returned) when a stats file cannot be read or parsed.

    Attributes:
        path: The file that failed to load.
        message: Human-readable error message.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class ConfigError(Exception):
    """Raised when a config file exists but cannot be used."""


class ModuleNotFoundInReport(Exception):
    """Raised by CLI commands when a module reference resolves to nothing."""

    def __init__(self, module_ref: str):
        self.module_ref = module_ref
        super().__init__(f"Module not found: {module_ref}")
