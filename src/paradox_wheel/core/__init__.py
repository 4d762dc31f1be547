"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        ParadoxWheelError: Base exception for all application errors.
        ConfigurationError, ValidationError, StorageError, RecordNotFoundError,
        DuplicateRecordError, BuildError, InvalidBuildStateError,
        AuthenticationError, UIError.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        log_context: Bind context to log entries inside a block.
"""

from __future__ import annotations

from paradox_wheel.core.config import (
    AdminSettings,
    ApiSettings,
    Settings,
    StorageSettings,
    UISettings,
    clear_settings_cache,
    get_settings,
)
from paradox_wheel.core.exceptions import (
    AuthenticationError,
    BuildError,
    ConfigurationError,
    DuplicateRecordError,
    InvalidBuildStateError,
    ParadoxWheelError,
    RecordNotFoundError,
    StorageError,
    UIError,
    ValidationError,
)
from paradox_wheel.core.logging import (
    configure_logging,
    get_logger,
    log_context,
)


__all__ = [
    # Exceptions
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
    # Configuration
    "Settings",
    "StorageSettings",
    "AdminSettings",
    "ApiSettings",
    "UISettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "log_context",
]
