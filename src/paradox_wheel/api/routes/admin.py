"""Admin routes: password check, sample seeding, bulk rote deletion."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from paradox_wheel.api.dependencies import DatabaseDep, SettingsDep
from paradox_wheel.api.schemas import AdminPassword
from paradox_wheel.core.logging import get_logger
from paradox_wheel.core.security import check_admin_password, require_admin


logger = get_logger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/auth")
def authenticate(body: AdminPassword, settings: SettingsDep) -> JSONResponse:
    if check_admin_password(body.password, settings):
        return JSONResponse({"authenticated": True})
    return JSONResponse({"authenticated": False, "error": "Invalid password"}, status_code=401)


@router.post("/seed")
def seed(body: AdminPassword, db: DatabaseDep, settings: SettingsDep) -> dict[str, object]:
    """Insert the sample rotes."""
    require_admin(body.password, settings)
    created = db.seed_rotes()
    logger.info("Seeded sample rotes", count=len(created))
    return {"success": True, "count": len(created)}


@router.delete("/delete-all")
def delete_all(body: AdminPassword, db: DatabaseDep, settings: SettingsDep) -> dict[str, object]:
    """Delete every rote. Takes the password as a JSON body."""
    require_admin(body.password, settings)
    deleted = db.delete_all_rotes()
    logger.warning("Deleted all rotes", count=deleted)
    return {"success": True, "deletedCount": deleted}
