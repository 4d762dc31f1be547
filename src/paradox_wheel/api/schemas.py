"""Request and response bodies for the REST API.

JSON uses camelCase (``pageRef``, ``roteId``, ``headerImage``); Python code
uses snake_case. Every model accepts either spelling on input.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from paradox_wheel.core.constants import SPHERE_LEVEL_MAX
from paradox_wheel.models.build import CharacterBuildState
from paradox_wheel.models.enums import BackgroundSubtype, MeritKind
from paradox_wheel.models.traditions import ALL_SPHERES


class CamelModel(BaseModel):
    """Base for API bodies: camelCase aliases, built from records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(CamelModel):
    """Base for PUT bodies.

    Omitted fields are left alone. Fields named in ``required_fields`` may be
    omitted but not cleared with an explicit null.
    """

    required_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_cleared_required(self) -> PartialUpdate:
        cleared = sorted(
            name for name in self.required_fields & self.model_fields_set if getattr(self, name) is None
        )
        if cleared:
            raise ValueError(f"{', '.join(cleared)} cannot be null")
        return self


def _check_spheres(value: dict[str, int] | None) -> dict[str, int] | None:
    if value is None:
        return value
    if not value:
        raise ValueError("At least one sphere is required")
    for sphere, level in value.items():
        if sphere not in ALL_SPHERES:
            raise ValueError(f"Unknown sphere: {sphere}")
        if not 0 <= level <= SPHERE_LEVEL_MAX:
            raise ValueError(f"{sphere} must be between 0 and {SPHERE_LEVEL_MAX}")
    return value


# =============================================================================
# Rotes
# =============================================================================


class RoteCreate(CamelModel):
    name: str = Field(min_length=1)
    tradition: str = Field(min_length=1)
    description: str = Field(min_length=1)
    spheres: dict[str, int]
    level: str = Field(min_length=1)
    page_ref: str | None = None

    @field_validator("spheres")
    @classmethod
    def validate_spheres(cls, value: dict[str, int] | None) -> dict[str, int] | None:
        return _check_spheres(value)


class RoteUpdate(PartialUpdate):
    required_fields = frozenset({"name", "tradition", "description", "spheres", "level"})

    name: str | None = Field(default=None, min_length=1)
    tradition: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    spheres: dict[str, int] | None = None
    level: str | None = Field(default=None, min_length=1)
    page_ref: str | None = None

    @field_validator("spheres")
    @classmethod
    def validate_spheres(cls, value: dict[str, int] | None) -> dict[str, int] | None:
        return _check_spheres(value)


class RoteOut(CamelModel):
    id: str
    name: str
    tradition: str
    description: str
    spheres: dict[str, int]
    level: str
    page_ref: str | None
    created_at: datetime
    updated_at: datetime


# =============================================================================
# Merits & Flaws
# =============================================================================


class MeritCreate(CamelModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    type: MeritKind
    cost: int = Field(ge=0)
    description: str = Field(min_length=1)
    subtype: str | None = None
    page_ref: str | None = None


class MeritUpdate(PartialUpdate):
    required_fields = frozenset({"name", "category", "type", "cost", "description"})

    name: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, min_length=1)
    type: MeritKind | None = None
    cost: int | None = Field(default=None, ge=0)
    description: str | None = Field(default=None, min_length=1)
    subtype: str | None = None
    page_ref: str | None = None


class MeritOut(CamelModel):
    id: str
    name: str
    category: str
    type: str
    subtype: str | None
    cost: int
    description: str
    page_ref: str | None


# =============================================================================
# Backgrounds
# =============================================================================


class BackgroundCreate(CamelModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    subtype: BackgroundSubtype
    cost: str = Field(min_length=1)
    description: str = Field(min_length=1)
    page_ref: str | None = None

    @field_validator("cost", mode="before")
    @classmethod
    def cost_as_text(cls, value: Any) -> Any:
        """Costs are stored as text; accept bare numbers too."""
        return str(value) if isinstance(value, int) else value


class BackgroundOut(CamelModel):
    id: str
    name: str
    category: str
    subtype: str
    cost: str
    description: str
    page_ref: str | None


# =============================================================================
# Resources
# =============================================================================


class ResourceCreate(CamelModel):
    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: str | None = None
    url: str | None = None
    author: str | None = None
    image_url: str | None = None
    featured: bool = False


class ResourceUpdate(PartialUpdate):
    required_fields = frozenset({"name", "type", "description", "featured"})

    name: str | None = Field(default=None, min_length=1)
    type: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    category: str | None = None
    url: str | None = None
    author: str | None = None
    image_url: str | None = None
    featured: bool | None = None


class ResourceOut(CamelModel):
    id: str
    name: str
    type: str
    category: str | None
    description: str
    url: str | None
    author: str | None
    image_url: str | None
    featured: bool


# =============================================================================
# Mage Groups
# =============================================================================


class MageGroupCreate(CamelModel):
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    category: str = Field(min_length=1)
    description: str = Field(min_length=1)
    philosophy: str | None = None
    practices: str | None = None
    organization: str | None = None
    header_image: str | None = None
    sidebar_image: str | None = None
    published: bool = False
    sort_order: int = 0


class MageGroupUpdate(PartialUpdate):
    """Update body. The group id travels in the body, not the path."""

    required_fields = frozenset(
        {"name", "slug", "category", "description", "published", "sort_order"}
    )

    id: str = Field(min_length=1)
    name: str | None = Field(default=None, min_length=1)
    slug: str | None = Field(default=None, min_length=1, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    category: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    philosophy: str | None = None
    practices: str | None = None
    organization: str | None = None
    header_image: str | None = None
    sidebar_image: str | None = None
    published: bool | None = None
    sort_order: int | None = None


class MageGroupOut(CamelModel):
    id: str
    name: str
    slug: str
    category: str
    description: str
    philosophy: str | None
    practices: str | None
    organization: str | None
    header_image: str | None
    sidebar_image: str | None
    published: bool
    sort_order: int


# =============================================================================
# Characters
# =============================================================================


def _normalize_sheet(value: dict[str, Any] | None) -> dict[str, Any] | None:
    if value is None:
        return value
    return CharacterBuildState.model_validate(value).model_dump(mode="json")


class CharacterCreate(CamelModel):
    name: str = Field(min_length=1)
    faction: str = Field(min_length=1)
    concept: str | None = None
    arete: int | None = Field(default=None, ge=0, le=10)
    avatar: str | None = None
    essence: str | None = None
    sheet: dict[str, Any] | None = None

    @field_validator("sheet")
    @classmethod
    def validate_sheet(cls, value: dict[str, Any] | None) -> dict[str, Any] | None:
        return _normalize_sheet(value)


class CharacterUpdate(PartialUpdate):
    required_fields = frozenset({"name", "faction"})

    name: str | None = Field(default=None, min_length=1)
    faction: str | None = Field(default=None, min_length=1)
    concept: str | None = None
    arete: int | None = Field(default=None, ge=0, le=10)
    avatar: str | None = None
    essence: str | None = None
    sheet: dict[str, Any] | None = None

    @field_validator("sheet")
    @classmethod
    def validate_sheet(cls, value: dict[str, Any] | None) -> dict[str, Any] | None:
        return _normalize_sheet(value)


class CharacterRoteOut(CamelModel):
    id: str
    character_id: str
    rote_id: str
    notes: str | None
    specialty: bool
    created_at: datetime
    rote: RoteOut | None = None


class CharacterOut(CamelModel):
    id: str
    name: str
    faction: str
    concept: str | None
    arete: int | None
    avatar: str | None
    essence: str | None
    sheet: dict[str, Any] | None
    created_at: datetime
    updated_at: datetime
    rotes: list[CharacterRoteOut] = Field(default_factory=list)


class AssignRote(CamelModel):
    rote_id: str = Field(min_length=1)
    notes: str | None = None
    specialty: bool = False


# =============================================================================
# Admin & Misc
# =============================================================================


class AdminPassword(CamelModel):
    password: str = ""


class SuccessOut(CamelModel):
    success: bool = True


__all__ = [
    "CamelModel",
    "PartialUpdate",
    "RoteCreate",
    "RoteUpdate",
    "RoteOut",
    "MeritCreate",
    "MeritUpdate",
    "MeritOut",
    "BackgroundCreate",
    "BackgroundOut",
    "ResourceCreate",
    "ResourceUpdate",
    "ResourceOut",
    "MageGroupCreate",
    "MageGroupUpdate",
    "MageGroupOut",
    "CharacterCreate",
    "CharacterUpdate",
    "CharacterRoteOut",
    "CharacterOut",
    "AssignRote",
    "AdminPassword",
    "SuccessOut",
]
