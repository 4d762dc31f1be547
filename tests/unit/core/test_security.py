"""Tests for the admin password check."""

from __future__ import annotations

import pytest

from paradox_wheel.core.config import AdminSettings, Settings
from paradox_wheel.core.exceptions import AuthenticationError
from paradox_wheel.core.security import check_admin_password, require_admin


@pytest.fixture
def admin_settings() -> Settings:
    return Settings(admin=AdminSettings(password="sleepers-beware"))


@pytest.fixture
def locked_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.delenv("PARADOX_WHEEL_ADMIN_PASSWORD", raising=False)
    return Settings(admin=AdminSettings(password=None))


class TestCheckAdminPassword:
    """Tests for check_admin_password."""

    def test_correct_password(self, admin_settings: Settings) -> None:
        assert check_admin_password("sleepers-beware", admin_settings) is True

    def test_wrong_password(self, admin_settings: Settings) -> None:
        assert check_admin_password("sleepers", admin_settings) is False

    def test_missing_password(self, admin_settings: Settings) -> None:
        assert check_admin_password(None, admin_settings) is False
        assert check_admin_password("", admin_settings) is False

    def test_disabled_admin_rejects_everything(self, locked_settings: Settings) -> None:
        """Without a configured password nothing authenticates, not even empty input."""
        assert check_admin_password("", locked_settings) is False
        assert check_admin_password("anything", locked_settings) is False

    def test_non_ascii_password(self) -> None:
        settings = Settings(admin=AdminSettings(password="Ψυχή"))
        assert check_admin_password("Ψυχή", settings) is True


class TestRequireAdmin:
    """Tests for require_admin."""

    def test_passes_with_correct_password(self, admin_settings: Settings) -> None:
        require_admin("sleepers-beware", admin_settings)

    def test_raises_on_wrong_password(self, admin_settings: Settings) -> None:
        with pytest.raises(AuthenticationError, match="Invalid password"):
            require_admin("nope", admin_settings)

    def test_raises_when_disabled(self, locked_settings: Settings) -> None:
        with pytest.raises(AuthenticationError, match="disabled"):
            require_admin("sleepers-beware", locked_settings)
