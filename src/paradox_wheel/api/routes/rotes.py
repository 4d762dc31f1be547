"""Grimoire routes: ``/api/rotes``."""

from __future__ import annotations

from fastapi import APIRouter

from paradox_wheel.api.dependencies import DatabaseDep
from paradox_wheel.api.schemas import RoteCreate, RoteOut, RoteUpdate, SuccessOut
from paradox_wheel.core.exceptions import RecordNotFoundError
from paradox_wheel.engine.search import parse_sphere_filter, search_rotes
from paradox_wheel.storage.records import RoteRecord


router = APIRouter(prefix="/api/rotes", tags=["rotes"])


def _get_or_404(db: DatabaseDep, rote_id: str) -> RoteRecord:
    rote = db.get_rote(rote_id)
    if rote is None:
        raise RecordNotFoundError("Rote not found", record_type="rote", record_id=rote_id)
    return rote


@router.get("", response_model=list[RoteOut])
def list_rotes(
    db: DatabaseDep,
    q: str = "",
    tradition: str | None = None,
    spheres: str | None = None,
) -> list[RoteRecord]:
    """List rotes, newest first, optionally searched.

    ``spheres`` takes minimums as ``Forces:3,Mind:2``.
    """
    minimums = parse_sphere_filter(spheres)
    return search_rotes(db.list_rotes(), query=q, sphere_minimums=minimums, tradition=tradition)


@router.post("", response_model=RoteOut, status_code=201)
def create_rote(body: RoteCreate, db: DatabaseDep) -> RoteRecord:
    return db.create_rote(**body.model_dump())


@router.get("/{rote_id}", response_model=RoteOut)
def get_rote(rote_id: str, db: DatabaseDep) -> RoteRecord:
    return _get_or_404(db, rote_id)


@router.put("/{rote_id}", response_model=RoteOut)
def update_rote(rote_id: str, body: RoteUpdate, db: DatabaseDep) -> RoteRecord:
    return db.update_rote(rote_id, **body.model_dump(exclude_unset=True))


@router.delete("/{rote_id}", response_model=SuccessOut)
def delete_rote(rote_id: str, db: DatabaseDep) -> SuccessOut:
    if not db.delete_rote(rote_id):
        raise RecordNotFoundError("Rote not found", record_type="rote", record_id=rote_id)
    return SuccessOut()
