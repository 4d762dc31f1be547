"""Record types for persisted rows.

Plain dataclasses built from ``sqlite3.Row`` objects. JSON columns (rote
spheres, character sheets) are decoded on the way in.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


# =============================================================================
# Reference Data
# =============================================================================


@dataclass
class RoteRecord:
    """A rote from the grimoire.

    Attributes:
        id: Unique identifier.
        name: Rote name.
        tradition: Tradition the rote belongs to.
        description: Effect description.
        spheres: Sphere display name to required rating.
        level: Rank text such as "Disciple" or "Master".
        page_ref: Source book reference.
        created_at: When the rote was created.
        updated_at: When the rote was last changed.
    """

    id: str
    name: str
    tradition: str
    description: str
    spheres: dict[str, int]
    level: str
    page_ref: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: Any) -> RoteRecord:
        """Create from database row."""
        return cls(
            id=row["id"],
            name=row["name"],
            tradition=row["tradition"],
            description=row["description"],
            spheres=json.loads(row["spheres"]),
            level=row["level"],
            page_ref=row["page_ref"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    @property
    def highest_sphere(self) -> int:
        return max(self.spheres.values(), default=0)


@dataclass
class MeritRecord:
    """A merit or flaw from the catalogue. ``type`` is "merit" or "flaw"."""

    id: str
    name: str
    category: str
    type: str
    cost: int
    description: str
    subtype: str | None = None
    page_ref: str | None = None

    @classmethod
    def from_row(cls, row: Any) -> MeritRecord:
        """Create from database row."""
        return cls(
            id=row["id"],
            name=row["name"],
            category=row["category"],
            type=row["type"],
            cost=row["cost"],
            description=row["description"],
            subtype=row["subtype"],
            page_ref=row["page_ref"],
        )


@dataclass
class BackgroundRecord:
    """A background from the reference catalogue.

    ``cost`` is free text because published costs are often ranges
    ("1-5", "2 per dot").
    """

    id: str
    name: str
    category: str
    subtype: str
    cost: str
    description: str
    page_ref: str | None = None

    @classmethod
    def from_row(cls, row: Any) -> BackgroundRecord:
        """Create from database row."""
        return cls(
            id=row["id"],
            name=row["name"],
            category=row["category"],
            subtype=row["subtype"],
            cost=row["cost"],
            description=row["description"],
            page_ref=row["page_ref"],
        )


@dataclass
class ResourceRecord:
    """A recommended book, website or tool."""

    id: str
    name: str
    type: str
    description: str
    category: str | None = None
    url: str | None = None
    author: str | None = None
    image_url: str | None = None
    featured: bool = False

    @classmethod
    def from_row(cls, row: Any) -> ResourceRecord:
        """Create from database row."""
        return cls(
            id=row["id"],
            name=row["name"],
            type=row["type"],
            description=row["description"],
            category=row["category"],
            url=row["url"],
            author=row["author"],
            image_url=row["image_url"],
            featured=bool(row["featured"]),
        )


@dataclass
class MageGroupRecord:
    """A tradition encyclopedia entry."""

    id: str
    name: str
    slug: str
    category: str
    description: str
    philosophy: str | None = None
    practices: str | None = None
    organization: str | None = None
    header_image: str | None = None
    sidebar_image: str | None = None
    published: bool = False
    sort_order: int = 0

    @classmethod
    def from_row(cls, row: Any) -> MageGroupRecord:
        """Create from database row."""
        return cls(
            id=row["id"],
            name=row["name"],
            slug=row["slug"],
            category=row["category"],
            description=row["description"],
            philosophy=row["philosophy"],
            practices=row["practices"],
            organization=row["organization"],
            header_image=row["header_image"],
            sidebar_image=row["sidebar_image"],
            published=bool(row["published"]),
            sort_order=row["sort_order"],
        )


# =============================================================================
# Characters
# =============================================================================


@dataclass
class CharacterRoteRecord:
    """A rote assigned to a character, with the rote itself attached."""

    id: str
    character_id: str
    rote_id: str
    notes: str | None
    specialty: bool
    created_at: datetime
    rote: RoteRecord | None = None

    @classmethod
    def from_row(cls, row: Any, rote: RoteRecord | None = None) -> CharacterRoteRecord:
        """Create from database row."""
        return cls(
            id=row["id"],
            character_id=row["character_id"],
            rote_id=row["rote_id"],
            notes=row["notes"],
            specialty=bool(row["specialty"]),
            created_at=datetime.fromisoformat(row["created_at"]),
            rote=rote,
        )


@dataclass
class CharacterRecord:
    """A saved character.

    Attributes:
        id: Unique identifier.
        name: Character name.
        faction: Tradition or Convention.
        concept: Character concept.
        arete: Arete rating.
        avatar: Avatar description.
        essence: Avatar essence.
        sheet: Full build state from the creation wizard, when made there.
        created_at: When the character was created.
        updated_at: When the character was last changed.
        rotes: Assigned rotes, newest first.
    """

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
    rotes: list[CharacterRoteRecord] = field(default_factory=list)

    @classmethod
    def from_row(
        cls, row: Any, rotes: list[CharacterRoteRecord] | None = None
    ) -> CharacterRecord:
        """Create from database row."""
        return cls(
            id=row["id"],
            name=row["name"],
            faction=row["faction"],
            concept=row["concept"],
            arete=row["arete"],
            avatar=row["avatar"],
            essence=row["essence"],
            sheet=json.loads(row["sheet"]) if row["sheet"] else None,
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
            rotes=rotes or [],
        )


__all__ = [
    "RoteRecord",
    "MeritRecord",
    "BackgroundRecord",
    "ResourceRecord",
    "MageGroupRecord",
    "CharacterRoteRecord",
    "CharacterRecord",
]
