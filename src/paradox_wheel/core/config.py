"""Configuration management for The Paradox Wheel.

Centralized configuration using pydantic-settings, supporting environment
variables, .env files, and runtime overrides. The admin password is held as
a SecretStr and is never written to logs.

Example:
    >>> from paradox_wheel.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.app_name)
    'The Paradox Wheel'

Environment Variables:
    PARADOX_WHEEL_DATABASE_PATH: Path to the SQLite database file
    PARADOX_WHEEL_ADMIN_PASSWORD: Password for the admin panel and admin API
    PARADOX_WHEEL_API_HOST / PARADOX_WHEEL_API_PORT: REST server bind address
    PARADOX_WHEEL_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from paradox_wheel.core.exceptions import ConfigurationError


class StorageSettings(BaseSettings):
    """Configuration for the SQLite database.

    Attributes:
        database_path: Path to the SQLite database file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARADOX_WHEEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_path: Path = Field(
        default=Path("data/paradox_wheel.db"),
        description="Path to SQLite database",
    )


class AdminSettings(BaseSettings):
    """Configuration for the admin gate.

    Attributes:
        password: Admin password. When unset, every admin operation is refused.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARADOX_WHEEL_ADMIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    password: SecretStr | None = Field(
        default=None,
        description="Admin password",
    )

    @property
    def enabled(self) -> bool:
        """Whether an admin password has been configured."""
        return bool(self.password and self.password.get_secret_value())


class ApiSettings(BaseSettings):
    """Configuration for the REST server.

    Attributes:
        host: Interface to bind.
        port: TCP port to bind.
        cors_origins: Origins allowed to call the API from a browser.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARADOX_WHEEL_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", description="Bind host")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")
    cors_origins: list[str] = Field(
        default_factory=list,
        description="Allowed CORS origins",
    )

    @field_validator("host", mode="after")
    @classmethod
    def validate_host(cls, value: str) -> str:
        """Reject an empty bind host.

        Raises:
            ConfigurationError: If the host is blank.
        """
        if not value.strip():
            raise ConfigurationError("API host must not be empty", config_key="api_host")
        return value


class UISettings(BaseSettings):
    """Configuration for the Streamlit UI.

    Attributes:
        theme: UI theme ('light', 'dark', or 'auto').
        page_title: Browser page title.
        sidebar_default_state: Default sidebar state.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARADOX_WHEEL_UI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    theme: Literal["light", "dark", "auto"] = Field(
        default="light",
        description="UI theme",
    )
    page_title: str = Field(
        default="The Paradox Wheel",
        description="Browser page title",
    )
    sidebar_default_state: Literal["expanded", "collapsed"] = Field(
        default="expanded",
        description="Default sidebar state",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        storage: Database settings.
        admin: Admin gate settings.
        api: REST server settings.
        ui: UI settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARADOX_WHEEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="The Paradox Wheel",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    storage: StorageSettings = Field(default_factory=StorageSettings)
    admin: AdminSettings = Field(default_factory=AdminSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    ui: UISettings = Field(default_factory=UISettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode.

        Returns:
            True if not in debug mode.
        """
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "StorageSettings",
    "AdminSettings",
    "ApiSettings",
    "UISettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
