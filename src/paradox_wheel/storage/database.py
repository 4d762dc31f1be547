"""SQLite persistence layer for The Paradox Wheel.

Provides persistent storage for:
- Reference data (rotes, merits & flaws, backgrounds, resources, mage groups)
- Saved characters and the rotes assigned to them
- Editable content blocks (site settings, guide text, creation text)

Storage location defaults to ``data/paradox_wheel.db`` and is configurable
with ``PARADOX_WHEEL_DATABASE_PATH``.
"""

from __future__ import annotations

import json
import sqlite3
from collections.abc import Generator, Iterable
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any
from uuid import uuid4

from paradox_wheel.core.exceptions import (
    DuplicateRecordError,
    RecordNotFoundError,
    ValidationError,
)
from paradox_wheel.core.logging import get_logger
from paradox_wheel.storage.records import (
    BackgroundRecord,
    CharacterRecord,
    CharacterRoteRecord,
    MageGroupRecord,
    MeritRecord,
    ResourceRecord,
    RoteRecord,
)
from paradox_wheel.storage.seed import SAMPLE_ROTES

logger = get_logger(__name__)


# =============================================================================
# Content Sections
# =============================================================================

CONTENT_DEFAULTS: dict[str, dict[str, str]] = {
    "site-settings": {
        "footerText": "The Paradox Wheel © 2026",
        "welcomeTitle": "Welcome, Newly Awakened",
        "welcomeText": "",
        "aboutPage": "",
        "howToUse": "",
        "creditsPage": "",
    },
    "guide-expanded-content": {
        "concept": "",
        "attributes": "",
        "abilities": "",
        "spheres": "",
        "backgrounds": "",
        "freebies": "",
    },
    "character-creation-content": {
        "overview": "",
        "attributes": "",
        "abilities": "",
        "spheres": "",
        "finishing": "",
    },
}
"""Fixed keys and default values for each editable content section."""


# Columns a caller may change through the update_* methods
_UPDATABLE_COLUMNS: dict[str, tuple[str, ...]] = {
    "rotes": ("name", "tradition", "description", "spheres", "level", "page_ref"),
    "merits": ("name", "category", "type", "subtype", "cost", "description", "page_ref"),
    "backgrounds": ("name", "category", "subtype", "cost", "description", "page_ref"),
    "resources": (
        "name",
        "type",
        "category",
        "description",
        "url",
        "author",
        "image_url",
        "featured",
    ),
    "mage_groups": (
        "name",
        "slug",
        "category",
        "description",
        "philosophy",
        "practices",
        "organization",
        "header_image",
        "sidebar_image",
        "published",
        "sort_order",
    ),
    "characters": ("name", "faction", "concept", "arete", "avatar", "essence", "sheet"),
}

# NOT NULL columns among the updatable ones
_REQUIRED_COLUMNS: dict[str, frozenset[str]] = {
    "rotes": frozenset({"name", "tradition", "description", "spheres", "level"}),
    "merits": frozenset({"name", "category", "type", "cost", "description"}),
    "backgrounds": frozenset({"name", "category", "subtype", "cost", "description"}),
    "resources": frozenset({"name", "type", "description", "featured"}),
    "mage_groups": frozenset({"name", "slug", "category", "description", "published", "sort_order"}),
    "characters": frozenset({"name", "faction"}),
}

_JSON_COLUMNS = frozenset({"spheres", "sheet"})
_TIMESTAMPED_TABLES = frozenset({"rotes", "characters"})


def _to_column(column: str, value: Any) -> Any:
    if column in _JSON_COLUMNS and value is not None:
        return json.dumps(value)
    if isinstance(value, bool):
        return int(value)
    return value


class Database:
    """SQLite database for Paradox Wheel persistence.

    Every public method opens its own connection, commits on success and
    rolls back on error, so one instance can be shared across API requests.
    """

    SCHEMA_VERSION = 1

    def __init__(self, db_path: str | Path | None = None) -> None:
        """Initialize database.

        Args:
            db_path: Path to database file. If None, uses the configured path.
        """
        if db_path is None:
            self.db_path = self._get_default_path()
        else:
            self.db_path = Path(db_path)

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

        logger.info(f"Database initialized at {self.db_path}")

    @staticmethod
    def _get_default_path() -> Path:
        """Get the database path from settings."""
        from paradox_wheel.core.config import get_settings

        return get_settings().storage.database_path

    @contextmanager
    def _get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a database connection with proper cleanup."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_schema(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS schema_version (
                    version INTEGER PRIMARY KEY
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS rotes (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    tradition TEXT NOT NULL,
                    description TEXT NOT NULL,
                    spheres TEXT NOT NULL,
                    level TEXT NOT NULL,
                    page_ref TEXT,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS merits (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    category TEXT NOT NULL,
                    type TEXT NOT NULL CHECK (type IN ('merit', 'flaw')),
                    subtype TEXT,
                    cost INTEGER NOT NULL,
                    description TEXT NOT NULL,
                    page_ref TEXT
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS backgrounds (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL UNIQUE,
                    category TEXT NOT NULL,
                    subtype TEXT NOT NULL,
                    cost TEXT NOT NULL,
                    description TEXT NOT NULL,
                    page_ref TEXT
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS resources (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    type TEXT NOT NULL,
                    category TEXT,
                    description TEXT NOT NULL,
                    url TEXT,
                    author TEXT,
                    image_url TEXT,
                    featured INTEGER NOT NULL DEFAULT 0
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS mage_groups (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    slug TEXT NOT NULL UNIQUE,
                    category TEXT NOT NULL,
                    description TEXT NOT NULL,
                    philosophy TEXT,
                    practices TEXT,
                    organization TEXT,
                    header_image TEXT,
                    sidebar_image TEXT,
                    published INTEGER NOT NULL DEFAULT 0,
                    sort_order INTEGER NOT NULL DEFAULT 0
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS characters (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    faction TEXT NOT NULL,
                    concept TEXT,
                    arete INTEGER,
                    avatar TEXT,
                    essence TEXT,
                    sheet TEXT,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS character_rotes (
                    id TEXT PRIMARY KEY,
                    character_id TEXT NOT NULL REFERENCES characters(id) ON DELETE CASCADE,
                    rote_id TEXT NOT NULL REFERENCES rotes(id) ON DELETE CASCADE,
                    notes TEXT,
                    specialty INTEGER NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL,
                    UNIQUE (character_id, rote_id)
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS content_blocks (
                    section TEXT NOT NULL,
                    key TEXT NOT NULL,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL,
                    PRIMARY KEY (section, key)
                )
            """)

            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_rotes_created
                ON rotes(created_at DESC)
            """)
            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_merits_category
                ON merits(category, type, name)
            """)
            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_character_rotes_character
                ON character_rotes(character_id)
            """)

            cursor.execute("""
                INSERT OR REPLACE INTO schema_version (version) VALUES (?)
            """, (self.SCHEMA_VERSION,))

    # =========================================================================
    # Shared Helpers
    # =========================================================================

    def _update(self, table: str, record_id: str, fields: dict[str, Any]) -> None:
        """Apply a partial update to one row.

        Raises:
            ValidationError: If a field is not an updatable column or a
                required column is set to None.
            RecordNotFoundError: If no row has this id.
        """
        allowed = _UPDATABLE_COLUMNS[table]
        unknown = sorted(set(fields) - set(allowed))
        if unknown:
            raise ValidationError(
                f"Cannot update {', '.join(unknown)} on {table}",
                field_name=unknown[0],
            )
        cleared = sorted(column for column in _REQUIRED_COLUMNS[table] & fields.keys() if fields[column] is None)
        if cleared:
            raise ValidationError(
                f"{', '.join(cleared)} cannot be null",
                field_name=cleared[0],
                invalid_value=None,
            )

        values = {column: _to_column(column, value) for column, value in fields.items()}
        if table in _TIMESTAMPED_TABLES:
            values["updated_at"] = datetime.now().isoformat()

        with self._get_connection() as conn:
            cursor = conn.cursor()
            if values:
                assignments = ", ".join(f"{column} = ?" for column in values)
                cursor.execute(
                    f"UPDATE {table} SET {assignments} WHERE id = ?",
                    (*values.values(), record_id),
                )
                found = cursor.rowcount > 0
            else:
                cursor.execute(f"SELECT 1 FROM {table} WHERE id = ?", (record_id,))
                found = cursor.fetchone() is not None

        if not found:
            raise RecordNotFoundError(
                f"No {table} row with id {record_id}",
                record_type=table,
                record_id=record_id,
            )
        logger.info(f"Updated {table}: {record_id}", fields=sorted(fields))

    def _delete(self, table: str, record_id: str) -> bool:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(f"DELETE FROM {table} WHERE id = ?", (record_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"Deleted from {table}: {record_id}")
        return deleted

    def _count(self, table: str) -> int:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(f"SELECT COUNT(*) FROM {table}")
            return cursor.fetchone()[0]

    # =========================================================================
    # Rote Operations
    # =========================================================================

    def create_rote(
        self,
        name: str,
        tradition: str,
        description: str,
        spheres: dict[str, int],
        level: str,
        page_ref: str | None = None,
    ) -> RoteRecord:
        """Add a rote to the grimoire.

        Args:
            name: Rote name.
            tradition: Owning tradition.
            description: Effect description.
            spheres: Sphere display name to required rating.
            level: Rank text.
            page_ref: Optional source reference.

        Returns:
            Created rote record.
        """
        record_id = str(uuid4())
        now = datetime.now()

        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO rotes
                (id, name, tradition, description, spheres, level, page_ref, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """, (record_id, name, tradition, description, json.dumps(spheres), level,
                  page_ref, now.isoformat(), now.isoformat()))

        logger.info(f"Added rote: {name} ({tradition})")

        return RoteRecord(
            id=record_id,
            name=name,
            tradition=tradition,
            description=description,
            spheres=dict(spheres),
            level=level,
            page_ref=page_ref,
            created_at=now,
            updated_at=now,
        )

    def get_rote(self, rote_id: str) -> RoteRecord | None:
        """Get a rote by ID, or None if it does not exist."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM rotes WHERE id = ?", (rote_id,))
            row = cursor.fetchone()
            return RoteRecord.from_row(row) if row else None

    def list_rotes(self) -> list[RoteRecord]:
        """Get all rotes, newest first."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM rotes ORDER BY created_at DESC, rowid DESC")
            return [RoteRecord.from_row(row) for row in cursor.fetchall()]

    def update_rote(self, rote_id: str, **fields: Any) -> RoteRecord:
        """Change some fields of a rote.

        Raises:
            RecordNotFoundError: If the rote does not exist.
        """
        self._update("rotes", rote_id, fields)
        return self.get_rote(rote_id)  # type: ignore[return-value]

    def delete_rote(self, rote_id: str) -> bool:
        """Delete a rote. Character assignments of it go too."""
        return self._delete("rotes", rote_id)

    def delete_all_rotes(self) -> int:
        """Empty the grimoire.

        Returns:
            Number of rotes deleted.
        """
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM rotes")
            count = cursor.rowcount

        logger.warning(f"Deleted all rotes ({count})")
        return count

    def seed_rotes(self, rotes: Iterable[dict[str, Any]] = SAMPLE_ROTES) -> list[RoteRecord]:
        """Insert the sample rotes.

        Returns:
            The created rote records.
        """
        created = [self.create_rote(**rote) for rote in rotes]
        logger.info(f"Seeded {len(created)} rotes")
        return created

    # =========================================================================
    # Merit & Flaw Operations
    # =========================================================================

    def create_merit(
        self,
        name: str,
        category: str,
        type: str,
        cost: int,
        description: str,
        subtype: str | None = None,
        page_ref: str | None = None,
    ) -> MeritRecord:
        """Add a merit or flaw to the catalogue.

        Raises:
            ValidationError: If ``type`` is not "merit" or "flaw".
        """
        if type not in ("merit", "flaw"):
            raise ValidationError(
                "Merit type must be 'merit' or 'flaw'",
                field_name="type",
                invalid_value=type,
            )

        record_id = str(uuid4())
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO merits (id, name, category, type, subtype, cost, description, page_ref)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """, (record_id, name, category, type, subtype, cost, description, page_ref))

        logger.info(f"Added {type}: {name} ({cost} pt)")

        return MeritRecord(
            id=record_id,
            name=name,
            category=category,
            type=type,
            cost=cost,
            description=description,
            subtype=subtype,
            page_ref=page_ref,
        )

    def get_merit(self, merit_id: str) -> MeritRecord | None:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM merits WHERE id = ?", (merit_id,))
            row = cursor.fetchone()
            return MeritRecord.from_row(row) if row else None

    def list_merits(
        self,
        category: str | None = None,
        type: str | None = None,
    ) -> list[MeritRecord]:
        """Get merits and flaws ordered by category, type, name.

        Args:
            category: Only this category.
            type: Only "merit" or only "flaw".
        """
        clauses: list[str] = []
        params: list[Any] = []
        if category:
            clauses.append("category = ?")
            params.append(category)
        if type:
            clauses.append("type = ?")
            params.append(type)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT * FROM merits {where} ORDER BY category, type, name",
                params,
            )
            return [MeritRecord.from_row(row) for row in cursor.fetchall()]

    def update_merit(self, merit_id: str, **fields: Any) -> MeritRecord:
        """Change some fields of a merit or flaw.

        Raises:
            RecordNotFoundError: If the merit does not exist.
        """
        if "type" in fields and fields["type"] not in ("merit", "flaw"):
            raise ValidationError(
                "Merit type must be 'merit' or 'flaw'",
                field_name="type",
                invalid_value=fields["type"],
            )
        self._update("merits", merit_id, fields)
        return self.get_merit(merit_id)  # type: ignore[return-value]

    def delete_merit(self, merit_id: str) -> bool:
        return self._delete("merits", merit_id)

    # =========================================================================
    # Background Operations
    # =========================================================================

    def create_background(
        self,
        name: str,
        category: str,
        subtype: str,
        cost: str,
        description: str,
        page_ref: str | None = None,
    ) -> BackgroundRecord:
        """Add a background to the reference catalogue.

        Raises:
            DuplicateRecordError: If a background with this name exists.
        """
        record_id = str(uuid4())
        try:
            with self._get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("""
                    INSERT INTO backgrounds (id, name, category, subtype, cost, description, page_ref)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                """, (record_id, name, category, subtype, cost, description, page_ref))
        except sqlite3.IntegrityError as exc:
            raise DuplicateRecordError(
                "Background already exists",
                record_type="background",
                details={"name": name},
            ) from exc

        logger.info(f"Added background: {name}")

        return BackgroundRecord(
            id=record_id,
            name=name,
            category=category,
            subtype=subtype,
            cost=cost,
            description=description,
            page_ref=page_ref,
        )

    def get_background(self, background_id: str) -> BackgroundRecord | None:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM backgrounds WHERE id = ?", (background_id,))
            row = cursor.fetchone()
            return BackgroundRecord.from_row(row) if row else None

    def list_backgrounds(self, subtype: str | None = None) -> list[BackgroundRecord]:
        """Get backgrounds by name, optionally only one subtype."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            if subtype:
                cursor.execute(
                    "SELECT * FROM backgrounds WHERE subtype = ? ORDER BY name",
                    (subtype,),
                )
            else:
                cursor.execute("SELECT * FROM backgrounds ORDER BY name")
            return [BackgroundRecord.from_row(row) for row in cursor.fetchall()]

    def update_background(self, background_id: str, **fields: Any) -> BackgroundRecord:
        try:
            self._update("backgrounds", background_id, fields)
        except sqlite3.IntegrityError as exc:
            raise DuplicateRecordError(
                "Background already exists",
                record_type="background",
                details={"name": fields.get("name")},
            ) from exc
        return self.get_background(background_id)  # type: ignore[return-value]

    def delete_background(self, background_id: str) -> bool:
        return self._delete("backgrounds", background_id)

    # =========================================================================
    # Resource Operations
    # =========================================================================

    def create_resource(
        self,
        name: str,
        type: str,
        description: str,
        category: str | None = None,
        url: str | None = None,
        author: str | None = None,
        image_url: str | None = None,
        featured: bool = False,
    ) -> ResourceRecord:
        """Add a recommended resource."""
        record_id = str(uuid4())
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO resources
                (id, name, type, category, description, url, author, image_url, featured)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """, (record_id, name, type, category, description, url, author, image_url,
                  int(featured)))

        logger.info(f"Added resource: {name} ({type})")

        return ResourceRecord(
            id=record_id,
            name=name,
            type=type,
            description=description,
            category=category,
            url=url,
            author=author,
            image_url=image_url,
            featured=featured,
        )

    def get_resource(self, resource_id: str) -> ResourceRecord | None:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM resources WHERE id = ?", (resource_id,))
            row = cursor.fetchone()
            return ResourceRecord.from_row(row) if row else None

    def list_resources(
        self,
        type: str | None = None,
        category: str | None = None,
        featured: bool | None = None,
    ) -> list[ResourceRecord]:
        """Get resources, featured first, then by type and name."""
        clauses: list[str] = []
        params: list[Any] = []
        if type:
            clauses.append("type = ?")
            params.append(type)
        if category:
            clauses.append("category = ?")
            params.append(category)
        if featured is not None:
            clauses.append("featured = ?")
            params.append(int(featured))
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT * FROM resources {where} ORDER BY featured DESC, type, name",
                params,
            )
            return [ResourceRecord.from_row(row) for row in cursor.fetchall()]

    def update_resource(self, resource_id: str, **fields: Any) -> ResourceRecord:
        self._update("resources", resource_id, fields)
        return self.get_resource(resource_id)  # type: ignore[return-value]

    def delete_resource(self, resource_id: str) -> bool:
        return self._delete("resources", resource_id)

    # =========================================================================
    # Mage Group Operations
    # =========================================================================

    def create_mage_group(
        self,
        name: str,
        slug: str,
        category: str,
        description: str,
        philosophy: str | None = None,
        practices: str | None = None,
        organization: str | None = None,
        header_image: str | None = None,
        sidebar_image: str | None = None,
        published: bool = False,
        sort_order: int = 0,
    ) -> MageGroupRecord:
        """Add a tradition encyclopedia entry.

        Raises:
            DuplicateRecordError: If the slug is taken.
        """
        record_id = str(uuid4())
        try:
            with self._get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("""
                    INSERT INTO mage_groups
                    (id, name, slug, category, description, philosophy, practices,
                     organization, header_image, sidebar_image, published, sort_order)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """, (record_id, name, slug, category, description, philosophy, practices,
                      organization, header_image, sidebar_image, int(published), sort_order))
        except sqlite3.IntegrityError as exc:
            raise DuplicateRecordError(
                f"Mage group slug already in use: {slug}",
                record_type="mage_group",
                details={"slug": slug},
            ) from exc

        logger.info(f"Added mage group: {name}")

        return MageGroupRecord(
            id=record_id,
            name=name,
            slug=slug,
            category=category,
            description=description,
            philosophy=philosophy,
            practices=practices,
            organization=organization,
            header_image=header_image,
            sidebar_image=sidebar_image,
            published=published,
            sort_order=sort_order,
        )

    def get_mage_group(self, group_id: str) -> MageGroupRecord | None:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM mage_groups WHERE id = ?", (group_id,))
            row = cursor.fetchone()
            return MageGroupRecord.from_row(row) if row else None

    def list_mage_groups(
        self,
        published_only: bool = False,
        category: str | None = None,
    ) -> list[MageGroupRecord]:
        """Get mage groups ordered by category, sort order, name."""
        clauses: list[str] = []
        params: list[Any] = []
        if published_only:
            clauses.append("published = 1")
        if category:
            clauses.append("category = ?")
            params.append(category)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT * FROM mage_groups {where} ORDER BY category, sort_order, name",
                params,
            )
            return [MageGroupRecord.from_row(row) for row in cursor.fetchall()]

    def update_mage_group(self, group_id: str, **fields: Any) -> MageGroupRecord:
        try:
            self._update("mage_groups", group_id, fields)
        except sqlite3.IntegrityError as exc:
            raise DuplicateRecordError(
                f"Mage group slug already in use: {fields.get('slug')}",
                record_type="mage_group",
            ) from exc
        return self.get_mage_group(group_id)  # type: ignore[return-value]

    def delete_mage_group(self, group_id: str) -> bool:
        return self._delete("mage_groups", group_id)

    # =========================================================================
    # Character Operations
    # =========================================================================

    def create_character(
        self,
        name: str,
        faction: str,
        concept: str | None = None,
        arete: int | None = None,
        avatar: str | None = None,
        essence: str | None = None,
        sheet: dict[str, Any] | None = None,
    ) -> CharacterRecord:
        """Save a new character.

        Args:
            name: Character name.
            faction: Tradition or Convention.
            concept: Optional concept.
            arete: Optional Arete rating.
            avatar: Optional avatar description.
            essence: Optional essence.
            sheet: Full build state from the creation wizard.

        Returns:
            Created character record (with no rotes yet).
        """
        record_id = str(uuid4())
        now = datetime.now()

        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO characters
                (id, name, faction, concept, arete, avatar, essence, sheet, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """, (record_id, name, faction, concept, arete, avatar, essence,
                  _to_column("sheet", sheet), now.isoformat(), now.isoformat()))

        logger.info(f"Saved character: {name} ({faction})")

        return CharacterRecord(
            id=record_id,
            name=name,
            faction=faction,
            concept=concept,
            arete=arete,
            avatar=avatar,
            essence=essence,
            sheet=sheet,
            created_at=now,
            updated_at=now,
        )

    def _character_rotes(
        self, conn: sqlite3.Connection, character_ids: list[str]
    ) -> dict[str, list[CharacterRoteRecord]]:
        """Load assigned rotes for several characters, newest first."""
        assigned: dict[str, list[CharacterRoteRecord]] = {cid: [] for cid in character_ids}
        if not character_ids:
            return assigned

        placeholders = ", ".join("?" for _ in character_ids)
        cursor = conn.cursor()
        cursor.execute(f"""
            SELECT cr.id, cr.character_id, cr.rote_id, cr.notes, cr.specialty,
                   cr.created_at AS assigned_at,
                   r.name, r.tradition, r.description, r.spheres, r.level, r.page_ref,
                   r.created_at, r.updated_at
            FROM character_rotes cr
            JOIN rotes r ON r.id = cr.rote_id
            WHERE cr.character_id IN ({placeholders})
            ORDER BY cr.created_at DESC, cr.rowid DESC
        """, character_ids)

        for row in cursor.fetchall():
            rote = RoteRecord(
                id=row["rote_id"],
                name=row["name"],
                tradition=row["tradition"],
                description=row["description"],
                spheres=json.loads(row["spheres"]),
                level=row["level"],
                page_ref=row["page_ref"],
                created_at=datetime.fromisoformat(row["created_at"]),
                updated_at=datetime.fromisoformat(row["updated_at"]),
            )
            assigned[row["character_id"]].append(
                CharacterRoteRecord(
                    id=row["id"],
                    character_id=row["character_id"],
                    rote_id=row["rote_id"],
                    notes=row["notes"],
                    specialty=bool(row["specialty"]),
                    created_at=datetime.fromisoformat(row["assigned_at"]),
                    rote=rote,
                )
            )
        return assigned

    def get_character(self, character_id: str) -> CharacterRecord | None:
        """Get a character with its assigned rotes, or None."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM characters WHERE id = ?", (character_id,))
            row = cursor.fetchone()
            if row is None:
                return None
            rotes = self._character_rotes(conn, [character_id])
            return CharacterRecord.from_row(row, rotes[character_id])

    def list_characters(self) -> list[CharacterRecord]:
        """Get all characters with their rotes, newest first."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM characters ORDER BY created_at DESC, rowid DESC")
            rows = cursor.fetchall()
            rotes = self._character_rotes(conn, [row["id"] for row in rows])
            return [CharacterRecord.from_row(row, rotes[row["id"]]) for row in rows]

    def update_character(self, character_id: str, **fields: Any) -> CharacterRecord:
        """Change some fields of a character.

        Raises:
            RecordNotFoundError: If the character does not exist.
        """
        self._update("characters", character_id, fields)
        return self.get_character(character_id)  # type: ignore[return-value]

    def delete_character(self, character_id: str) -> bool:
        """Delete a character and its rote assignments."""
        return self._delete("characters", character_id)

    def assign_rote(
        self,
        character_id: str,
        rote_id: str,
        notes: str | None = None,
        specialty: bool = False,
    ) -> CharacterRoteRecord:
        """Add a rote to a character's grimoire.

        Raises:
            RecordNotFoundError: If the character or the rote does not exist.
            DuplicateRecordError: If the rote is already assigned.
        """
        if self.get_character(character_id) is None:
            raise RecordNotFoundError(
                "Character not found",
                record_type="character",
                record_id=character_id,
            )
        rote = self.get_rote(rote_id)
        if rote is None:
            raise RecordNotFoundError("Rote not found", record_type="rote", record_id=rote_id)

        record_id = str(uuid4())
        now = datetime.now()
        try:
            with self._get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("""
                    INSERT INTO character_rotes
                    (id, character_id, rote_id, notes, specialty, created_at)
                    VALUES (?, ?, ?, ?, ?, ?)
                """, (record_id, character_id, rote_id, notes, int(specialty), now.isoformat()))
        except sqlite3.IntegrityError as exc:
            raise DuplicateRecordError(
                "Rote already assigned to this character",
                record_type="character_rote",
                details={"character_id": character_id, "rote_id": rote_id},
            ) from exc

        logger.info(f"Assigned rote {rote.name} to character {character_id}")

        return CharacterRoteRecord(
            id=record_id,
            character_id=character_id,
            rote_id=rote_id,
            notes=notes,
            specialty=specialty,
            created_at=now,
            rote=rote,
        )

    def unassign_rote(self, character_id: str, rote_id: str) -> bool:
        """Remove a rote from a character.

        Returns:
            True if an assignment was removed.
        """
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "DELETE FROM character_rotes WHERE character_id = ? AND rote_id = ?",
                (character_id, rote_id),
            )
            removed = cursor.rowcount > 0

        if removed:
            logger.info(f"Unassigned rote {rote_id} from character {character_id}")
        return removed

    # =========================================================================
    # Content Blocks
    # =========================================================================

    def get_content(self, section: str) -> dict[str, str]:
        """Get a content section, with defaults for keys never saved.

        Raises:
            ValidationError: If the section is unknown.
        """
        defaults = self._section_defaults(section)
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT key, value FROM content_blocks WHERE section = ?",
                (section,),
            )
            stored = {row["key"]: row["value"] for row in cursor.fetchall()}

        # Empty stored values fall back to the default text
        return {key: stored.get(key) or default for key, default in defaults.items()}

    def update_content(self, section: str, values: dict[str, str]) -> dict[str, str]:
        """Save some keys of a content section.

        Returns:
            The full section after the update.

        Raises:
            ValidationError: If the section or a key is unknown.
        """
        defaults = self._section_defaults(section)
        unknown = sorted(set(values) - set(defaults))
        if unknown:
            raise ValidationError(
                f"Unknown {section} key(s): {', '.join(unknown)}",
                field_name=unknown[0],
            )

        now = datetime.now().isoformat()
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.executemany("""
                INSERT INTO content_blocks (section, key, value, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT (section, key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
            """, [(section, key, value, now) for key, value in values.items()])

        logger.info(f"Updated content section {section}", keys=sorted(values))
        return self.get_content(section)

    @staticmethod
    def _section_defaults(section: str) -> dict[str, str]:
        try:
            return CONTENT_DEFAULTS[section]
        except KeyError as exc:
            raise ValidationError(
                f"Unknown content section: {section}",
                field_name="section",
                invalid_value=section,
            ) from exc

    # =========================================================================
    # Counts
    # =========================================================================

    def get_counts(self) -> dict[str, int]:
        """Get the number of rows per catalogue, for the home page."""
        return {
            "rotes": self._count("rotes"),
            "merits": self._count("merits"),
            "backgrounds": self._count("backgrounds"),
            "resources": self._count("resources"),
            "mage_groups": self._count("mage_groups"),
            "characters": self._count("characters"),
        }


# =============================================================================
# Singleton Instance
# =============================================================================


_database_instance: Database | None = None


def get_database() -> Database:
    """Get the global database instance.

    Returns:
        Database singleton instance.
    """
    global _database_instance

    if _database_instance is None:
        _database_instance = Database()

    return _database_instance


def reset_database() -> None:
    """Forget the global instance so the next call reopens from settings."""
    global _database_instance
    _database_instance = None


__all__ = [
    "CONTENT_DEFAULTS",
    "Database",
    "get_database",
    "reset_database",
]
