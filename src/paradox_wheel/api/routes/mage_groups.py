"""Mage group routes: ``/api/mage-groups``.

Updates carry the group id in the body and deletes take ``?id=``.
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from paradox_wheel.api.dependencies import DatabaseDep
from paradox_wheel.api.schemas import MageGroupCreate, MageGroupOut, MageGroupUpdate, SuccessOut
from paradox_wheel.core.exceptions import RecordNotFoundError
from paradox_wheel.storage.records import MageGroupRecord


router = APIRouter(prefix="/api/mage-groups", tags=["mage-groups"])


@router.get("", response_model=list[MageGroupOut])
def list_mage_groups(
    db: DatabaseDep,
    published: bool = False,
    category: str | None = None,
) -> list[MageGroupRecord]:
    """List groups in display order. ``published=true`` hides drafts."""
    return db.list_mage_groups(published_only=published, category=category)


@router.post("", response_model=MageGroupOut)
def create_mage_group(body: MageGroupCreate, db: DatabaseDep) -> MageGroupRecord:
    return db.create_mage_group(**body.model_dump())


@router.put("", response_model=MageGroupOut)
def update_mage_group(body: MageGroupUpdate, db: DatabaseDep) -> MageGroupRecord:
    fields = body.model_dump(exclude_unset=True)
    group_id = fields.pop("id")
    return db.update_mage_group(group_id, **fields)


@router.delete("", response_model=SuccessOut)
def delete_mage_group(db: DatabaseDep, id: str = Query(min_length=1)) -> SuccessOut:
    if not db.delete_mage_group(id):
        raise RecordNotFoundError("Mage group not found", record_type="mage_group", record_id=id)
    return SuccessOut()
