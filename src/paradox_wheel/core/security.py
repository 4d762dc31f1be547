"""Admin password checks.

The admin password lives in ``AdminSettings.password`` as a ``SecretStr``
(``PARADOX_WHEEL_ADMIN_PASSWORD``). Comparison is constant-time. When no
password is configured, admin access is disabled entirely.
"""

from __future__ import annotations

import hmac

from paradox_wheel.core.config import Settings, get_settings
from paradox_wheel.core.exceptions import AuthenticationError
from paradox_wheel.core.logging import get_logger


logger = get_logger(__name__)


def check_admin_password(password: str | None, settings: Settings | None = None) -> bool:
    """Check a submitted admin password.

    Args:
        password: The password the user typed.
        settings: Settings to read the configured password from.

    Returns:
        True only if a password is configured and it matches.
    """
    settings = settings or get_settings()
    if not settings.admin.enabled or not password:
        return False

    expected = settings.admin.password.get_secret_value()  # type: ignore[union-attr]
    return hmac.compare_digest(password.encode("utf-8"), expected.encode("utf-8"))


def require_admin(password: str | None, settings: Settings | None = None) -> None:
    """Raise unless the password grants admin access.

    Raises:
        AuthenticationError: If admin is disabled or the password is wrong.
    """
    settings = settings or get_settings()
    if not settings.admin.enabled:
        logger.warning("Admin access attempted but no admin password is configured")
        raise AuthenticationError("Admin access is disabled")
    if not check_admin_password(password, settings):
        logger.warning("Admin password rejected")
        raise AuthenticationError("Invalid password")


__all__ = [
    "check_admin_password",
    "require_admin",
]
