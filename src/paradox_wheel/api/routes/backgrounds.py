"""Background catalogue routes: ``/api/backgrounds``."""

from __future__ import annotations

from fastapi import APIRouter

from paradox_wheel.api.dependencies import DatabaseDep
from paradox_wheel.api.schemas import BackgroundCreate, BackgroundOut
from paradox_wheel.models.enums import BackgroundSubtype
from paradox_wheel.storage.records import BackgroundRecord


router = APIRouter(prefix="/api/backgrounds", tags=["backgrounds"])


@router.get("", response_model=list[BackgroundOut])
def list_backgrounds(db: DatabaseDep, subtype: BackgroundSubtype | None = None) -> list[BackgroundRecord]:
    return db.list_backgrounds(subtype=subtype.value if subtype else None)


@router.post("", response_model=BackgroundOut)
def create_background(body: BackgroundCreate, db: DatabaseDep) -> BackgroundRecord:
    """Add a background. A name already in the catalogue is a 409."""
    return db.create_background(**body.model_dump(mode="json"))
