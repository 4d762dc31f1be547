"""Merits & Flaws routes: ``/api/merits``."""

from __future__ import annotations

from fastapi import APIRouter

from paradox_wheel.api.dependencies import DatabaseDep
from paradox_wheel.api.schemas import MeritCreate, MeritOut, MeritUpdate, SuccessOut
from paradox_wheel.core.exceptions import RecordNotFoundError
from paradox_wheel.models.enums import MeritKind
from paradox_wheel.storage.records import MeritRecord


router = APIRouter(prefix="/api/merits", tags=["merits"])


@router.get("", response_model=list[MeritOut])
def list_merits(
    db: DatabaseDep,
    category: str | None = None,
    type: MeritKind | None = None,
) -> list[MeritRecord]:
    """List merits and flaws by category then name."""
    return db.list_merits(category=category, type=type.value if type else None)


@router.post("", response_model=MeritOut, status_code=201)
def create_merit(body: MeritCreate, db: DatabaseDep) -> MeritRecord:
    return db.create_merit(**body.model_dump(mode="json"))


@router.get("/{merit_id}", response_model=MeritOut)
def get_merit(merit_id: str, db: DatabaseDep) -> MeritRecord:
    merit = db.get_merit(merit_id)
    if merit is None:
        raise RecordNotFoundError("Merit not found", record_type="merit", record_id=merit_id)
    return merit


@router.put("/{merit_id}", response_model=MeritOut)
def update_merit(merit_id: str, body: MeritUpdate, db: DatabaseDep) -> MeritRecord:
    return db.update_merit(merit_id, **body.model_dump(mode="json", exclude_unset=True))


@router.delete("/{merit_id}", response_model=SuccessOut)
def delete_merit(merit_id: str, db: DatabaseDep) -> SuccessOut:
    if not db.delete_merit(merit_id):
        raise RecordNotFoundError("Merit not found", record_type="merit", record_id=merit_id)
    return SuccessOut()
