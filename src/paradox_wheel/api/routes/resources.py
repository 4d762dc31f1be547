"""Resource library routes: ``/api/resources``."""

from __future__ import annotations

from fastapi import APIRouter

from paradox_wheel.api.dependencies import DatabaseDep
from paradox_wheel.api.schemas import ResourceCreate, ResourceOut, ResourceUpdate, SuccessOut
from paradox_wheel.core.exceptions import RecordNotFoundError
from paradox_wheel.storage.records import ResourceRecord


router = APIRouter(prefix="/api/resources", tags=["resources"])


@router.get("", response_model=list[ResourceOut])
def list_resources(
    db: DatabaseDep,
    type: str | None = None,
    category: str | None = None,
    featured: bool | None = None,
) -> list[ResourceRecord]:
    return db.list_resources(type=type, category=category, featured=featured)


@router.post("", response_model=ResourceOut, status_code=201)
def create_resource(body: ResourceCreate, db: DatabaseDep) -> ResourceRecord:
    return db.create_resource(**body.model_dump())


@router.get("/{resource_id}", response_model=ResourceOut)
def get_resource(resource_id: str, db: DatabaseDep) -> ResourceRecord:
    resource = db.get_resource(resource_id)
    if resource is None:
        raise RecordNotFoundError("Resource not found", record_type="resource", record_id=resource_id)
    return resource


@router.put("/{resource_id}", response_model=ResourceOut)
def update_resource(resource_id: str, body: ResourceUpdate, db: DatabaseDep) -> ResourceRecord:
    return db.update_resource(resource_id, **body.model_dump(exclude_unset=True))


@router.delete("/{resource_id}", response_model=SuccessOut)
def delete_resource(resource_id: str, db: DatabaseDep) -> SuccessOut:
    if not db.delete_resource(resource_id):
        raise RecordNotFoundError("Resource not found", record_type="resource", record_id=resource_id)
    return SuccessOut()
