"""Error taxonomy for the reconciliation layer.

Every error carries a short ``summary`` used as the diagnostic title when the
error is reported against a resource instance.
"""

from __future__ import annotations

from assetsync.config.errors import ConfigurationError, MissingConfigurationError


class AssetsError(Exception):
    """Base class for errors raised while synchronizing asset objects."""

    summary = "Asset object error"


class ValidationError(AssetsError, ValueError):
    """Declared input is malformed, e.g. an attribute without values."""

    summary = "Invalid declared attributes"


class ReconciliationError(AssetsError):
    """Label/avatar consistency contract is violated."""

    summary = "Error in object attribute for the label."


class LabelAttributeNotFoundError(ReconciliationError):
    """No attribute can supply the object label."""


class MultipleLabelValuesError(ReconciliationError):
    """The label attribute is declared with more than one value."""


class RemoteError(AssetsError):
    """Failure reported by the catalog service or the transport, surfaced verbatim."""

    summary = "Assets API request failed"

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is not None:
            message = f"{message} (HTTP {self.status_code})"
        if self.operation:
            message = f"{self.operation}: {message}"
        return message


__all__ = [
    "AssetsError",
    "ConfigurationError",
    "LabelAttributeNotFoundError",
    "MissingConfigurationError",
    "MultipleLabelValuesError",
    "ReconciliationError",
    "RemoteError",
    "ValidationError",
]
