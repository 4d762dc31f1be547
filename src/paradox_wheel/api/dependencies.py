"""Request-scoped dependencies for the REST routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from paradox_wheel.core.config import Settings
from paradox_wheel.storage.database import Database


def get_db(request: Request) -> Database:
    """Database attached to the running app."""
    return request.app.state.database


def get_app_settings(request: Request) -> Settings:
    """Settings the app was created with."""
    return request.app.state.settings


DatabaseDep = Annotated[Database, Depends(get_db)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]


__all__ = [
    "get_db",
    "get_app_settings",
    "DatabaseDep",
    "SettingsDep",
]
