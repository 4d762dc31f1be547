"""Editable site content: ``/api/site-settings`` and the two guide sections.

GET returns the stored values merged over the defaults. PUT upserts the
given keys and returns the whole section.
"""

from __future__ import annotations

from fastapi import APIRouter

from paradox_wheel.api.dependencies import DatabaseDep
from paradox_wheel.storage.database import CONTENT_DEFAULTS


router = APIRouter(tags=["content"])


def _add_section_routes(section: str) -> None:
    path = f"/api/{section}"

    def read_section(db: DatabaseDep) -> dict[str, str]:
        return db.get_content(section)

    def write_section(values: dict[str, str], db: DatabaseDep) -> dict[str, str]:
        return db.update_content(section, values)

    router.add_api_route(path, read_section, methods=["GET"], name=f"get_{section}")
    router.add_api_route(path, write_section, methods=["PUT"], name=f"update_{section}")


for _section in CONTENT_DEFAULTS:
    _add_section_routes(_section)
