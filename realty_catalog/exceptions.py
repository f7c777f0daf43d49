"""Custom exception hierarchy for realty-catalog."""

from typing import Any


class CatalogError(Exception):
    """Base exception for all realty-catalog errors."""


class InvalidArgumentError(CatalogError, ValueError):
    """Raised when a value is present but outside its allowed bounds."""

    def __init__(self, field: str, value: Any, reason: str | None = None) -> None:
        self.field = field
        self.value = value
        message = f"Invalid {field}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingRequiredFieldError(CatalogError, ValueError):
    """Raised when a required value is absent."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Invalid {field}: None")


class ConfigurationError(CatalogError):
    """Raised when configuration is invalid or missing."""
