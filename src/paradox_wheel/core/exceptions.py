"""Custom exception hierarchy for The Paradox Wheel.

All exceptions inherit from ParadoxWheelError, so the API layer and the
Streamlit pages can catch one type at the boundary and still read the
domain-specific context.

Allocation rule violations (spending more dots than a budget allows, lowering
an affinity sphere, ...) are NOT exceptions. They come back as rejected
``AllocationResult`` objects from ``paradox_wheel.engine.allocator``.

Example:
    >>> from paradox_wheel.core.exceptions import RecordNotFoundError
    >>> raise RecordNotFoundError("Rote not found", record_type="rote", record_id="abc")
"""

from __future__ import annotations

from typing import Any


class ParadoxWheelError(Exception):
    """Base exception for all Paradox Wheel errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(ParadoxWheelError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(ParadoxWheelError):
    """Raised when incoming data fails validation.

    Used for request payloads and reference data (unknown sphere names,
    negative costs, ...), not for point-allocation rules.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


# =============================================================================
# Storage Exceptions
# =============================================================================


class StorageError(ParadoxWheelError):
    """Base exception for persistence failures."""

    def __init__(
        self,
        message: str,
        *,
        record_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize storage error with record type context.

        Args:
            message: Human-readable error description.
            record_type: Kind of record involved (rote, merit, character, ...).
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if record_type:
            combined_details["record_type"] = record_type
        super().__init__(message, details=combined_details)


class RecordNotFoundError(StorageError):
    """Raised when a record that must exist is missing."""

    def __init__(
        self,
        message: str,
        *,
        record_type: str | None = None,
        record_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize not-found error with the missing id.

        Args:
            message: Human-readable error description.
            record_type: Kind of record that was looked up.
            record_id: Identifier that was not found.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if record_id:
            combined_details["record_id"] = record_id
        super().__init__(message, record_type=record_type, details=combined_details)


class DuplicateRecordError(StorageError):
    """Raised when a uniqueness constraint is violated.

    Examples are assigning the same rote twice to one character, or two
    backgrounds with the same name.
    """


# =============================================================================
# Character Build Exceptions
# =============================================================================


class BuildError(ParadoxWheelError):
    """Base exception for character build errors that are not rule rejections."""


class InvalidBuildStateError(BuildError):
    """Raised when a build is used in a phase that does not allow it.

    The typical case is turning an unfinished wizard session into a
    persisted character.
    """

    def __init__(
        self,
        message: str,
        *,
        phase: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize build state error with phase context.

        Args:
            message: Human-readable error description.
            phase: The phase the build was in.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if phase:
            combined_details["phase"] = phase
        super().__init__(message, details=combined_details)


# =============================================================================
# Access & UI Exceptions
# =============================================================================


class AuthenticationError(ParadoxWheelError):
    """Raised when an admin credential is missing or wrong."""


class UIError(ParadoxWheelError):
    """Raised when a Streamlit page cannot render or its session state is corrupt."""


__all__ = [
    "ParadoxWheelError",
    "ConfigurationError",
    "ValidationError",
    "StorageError",
    "RecordNotFoundError",
    "DuplicateRecordError",
    "BuildError",
    "InvalidBuildStateError",
    "AuthenticationError",
    "UIError",
]
