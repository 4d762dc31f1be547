"""Character routes: ``/api/characters`` and rote assignment.

Characters are global; there are no user accounts.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from paradox_wheel.api.dependencies import DatabaseDep
from paradox_wheel.api.schemas import (
    AssignRote,
    CharacterCreate,
    CharacterOut,
    CharacterRoteOut,
    CharacterUpdate,
    SuccessOut,
)
from paradox_wheel.core.exceptions import DuplicateRecordError, RecordNotFoundError
from paradox_wheel.core.logging import get_logger
from paradox_wheel.storage.records import CharacterRecord, CharacterRoteRecord


logger = get_logger(__name__)

router = APIRouter(prefix="/api/characters", tags=["characters"])


def _not_found(character_id: str) -> RecordNotFoundError:
    return RecordNotFoundError("Character not found", record_type="character", record_id=character_id)


@router.get("", response_model=list[CharacterOut])
def list_characters(db: DatabaseDep) -> list[CharacterRecord]:
    """List characters, newest first, with their rotes."""
    return db.list_characters()


@router.post("", response_model=CharacterOut, status_code=201)
def create_character(body: CharacterCreate, db: DatabaseDep) -> CharacterRecord:
    return db.create_character(**body.model_dump())


@router.get("/{character_id}", response_model=CharacterOut)
def get_character(character_id: str, db: DatabaseDep) -> CharacterRecord:
    character = db.get_character(character_id)
    if character is None:
        raise _not_found(character_id)
    return character


@router.put("/{character_id}", response_model=CharacterOut)
def update_character(character_id: str, body: CharacterUpdate, db: DatabaseDep) -> CharacterRecord:
    return db.update_character(character_id, **body.model_dump(exclude_unset=True))


@router.delete("/{character_id}", response_model=SuccessOut)
def delete_character(character_id: str, db: DatabaseDep) -> SuccessOut:
    if not db.delete_character(character_id):
        raise _not_found(character_id)
    return SuccessOut()


# =============================================================================
# Rote Assignment
# =============================================================================


@router.post("/{character_id}/rotes", response_model=CharacterRoteOut, status_code=201)
def assign_rote(character_id: str, body: AssignRote, db: DatabaseDep) -> CharacterRoteRecord:
    """Assign a grimoire rote to a character.

    Assigning the same rote twice is a client error (400).
    """
    try:
        return db.assign_rote(
            character_id,
            body.rote_id,
            notes=body.notes,
            specialty=body.specialty,
        )
    except DuplicateRecordError as exc:
        logger.debug("Duplicate rote assignment", character_id=character_id, rote_id=body.rote_id)
        raise HTTPException(status_code=400, detail=exc.message) from exc


@router.delete("/{character_id}/rotes", response_model=SuccessOut)
def unassign_rote(
    character_id: str,
    db: DatabaseDep,
    rote_id: str = Query(alias="roteId", min_length=1),
) -> SuccessOut:
    if not db.unassign_rote(character_id, rote_id):
        raise RecordNotFoundError(
            "Rote is not assigned to this character",
            record_type="character_rote",
            record_id=rote_id,
        )
    return SuccessOut()
