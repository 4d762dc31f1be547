"""Tests for SQLite persistence."""

from __future__ import annotations

from pathlib import Path

import pytest

from paradox_wheel.core.exceptions import (
    DuplicateRecordError,
    RecordNotFoundError,
    ValidationError,
)
from paradox_wheel.storage.database import CONTENT_DEFAULTS, Database
from paradox_wheel.storage.seed import SAMPLE_ROTES


class TestDatabaseInit:
    """Tests for database creation."""

    def test_creates_file_and_parent(self, tmp_path: Path) -> None:
        db_path = tmp_path / "nested" / "dir" / "wheel.db"

        Database(db_path)

        assert db_path.exists()

    def test_reopen_keeps_data(self, tmp_path: Path) -> None:
        db_path = tmp_path / "wheel.db"
        Database(db_path).create_rote("Ward", "Verbena", "A ward", {"Life": 1}, "Apprentice")

        assert len(Database(db_path).list_rotes()) == 1

    def test_default_path_from_settings(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PARADOX_WHEEL_DATABASE_PATH", str(tmp_path / "env.db"))

        database = Database()

        assert database.db_path == tmp_path / "env.db"

    def test_empty_counts(self, database: Database) -> None:
        assert database.get_counts() == {
            "rotes": 0,
            "merits": 0,
            "backgrounds": 0,
            "resources": 0,
            "mage_groups": 0,
            "characters": 0,
        }


class TestRotes:
    """Tests for rote storage."""

    def test_create_and_get(self, database: Database) -> None:
        created = database.create_rote(
            name="The Flickering Ward",
            tradition="Order of Hermes",
            description="A barrier",
            spheres={"Forces": 3, "Prime": 2},
            level="Disciple",
            page_ref="p.142",
        )

        loaded = database.get_rote(created.id)

        assert loaded is not None
        assert loaded.name == "The Flickering Ward"
        assert loaded.spheres == {"Forces": 3, "Prime": 2}
        assert loaded.page_ref == "p.142"
        assert loaded.highest_sphere == 3

    def test_get_missing(self, database: Database) -> None:
        assert database.get_rote("missing") is None

    def test_list_newest_first(self, database: Database) -> None:
        database.create_rote("First", "Verbena", "", {"Life": 1}, "Apprentice")
        database.create_rote("Second", "Verbena", "", {"Life": 2}, "Disciple")

        assert [r.name for r in database.list_rotes()] == ["Second", "First"]

    def test_update(self, database: Database) -> None:
        rote = database.create_rote("Ward", "Verbena", "", {"Life": 1}, "Apprentice")

        updated = database.update_rote(rote.id, name="Greater Ward", spheres={"Life": 3})

        assert updated.name == "Greater Ward"
        assert updated.spheres == {"Life": 3}
        assert updated.tradition == "Verbena"
        assert updated.updated_at >= rote.updated_at

    def test_update_missing(self, database: Database) -> None:
        with pytest.raises(RecordNotFoundError):
            database.update_rote("missing", name="x")

    def test_update_unknown_column(self, database: Database) -> None:
        rote = database.create_rote("Ward", "Verbena", "", {"Life": 1}, "Apprentice")

        with pytest.raises(ValidationError):
            database.update_rote(rote.id, id="other")

    def test_update_cannot_null_required_column(self, database: Database) -> None:
        rote = database.create_rote("Ward", "Verbena", "", {"Life": 1}, "Apprentice")

        with pytest.raises(ValidationError) as exc_info:
            database.update_rote(rote.id, name=None)

        assert exc_info.value.details["field_name"] == "name"
        assert database.get_rote(rote.id).name == "Ward"

    def test_update_can_null_optional_column(self, database: Database) -> None:
        rote = database.create_rote("Ward", "Verbena", "", {"Life": 1}, "Apprentice", page_ref="p.3")

        assert database.update_rote(rote.id, page_ref=None).page_ref is None

    def test_delete(self, database: Database) -> None:
        rote = database.create_rote("Ward", "Verbena", "", {"Life": 1}, "Apprentice")

        assert database.delete_rote(rote.id) is True
        assert database.delete_rote(rote.id) is False
        assert database.get_rote(rote.id) is None

    def test_seed_and_delete_all(self, database: Database) -> None:
        created = database.seed_rotes()

        assert len(created) == len(SAMPLE_ROTES) == 12
        assert database.delete_all_rotes() == 12
        assert database.list_rotes() == []

    def test_seed_is_additive(self, seeded_database: Database) -> None:
        seeded_database.seed_rotes()

        assert seeded_database.get_counts()["rotes"] == 24


class TestMerits:
    """Tests for the merit & flaw catalogue."""

    def test_create_and_filter(self, database: Database) -> None:
        database.create_merit("Acute Senses", "Physical", "merit", 1, "Sharp senses")
        database.create_merit("Nightmares", "Mental", "flaw", 1, "Bad dreams")
        database.create_merit("Lucky", "Supernatural", "merit", 3, "Fortune")

        assert [m.name for m in database.list_merits()] == ["Nightmares", "Acute Senses", "Lucky"]
        assert [m.name for m in database.list_merits(type="merit")] == ["Acute Senses", "Lucky"]
        assert [m.name for m in database.list_merits(category="Mental")] == ["Nightmares"]

    def test_invalid_type(self, database: Database) -> None:
        with pytest.raises(ValidationError):
            database.create_merit("Odd", "Misc", "quirk", 1, "")

    def test_update_invalid_type(self, database: Database) -> None:
        merit = database.create_merit("Lucky", "Supernatural", "merit", 3, "")

        with pytest.raises(ValidationError):
            database.update_merit(merit.id, type="quirk")

    def test_update_and_delete(self, database: Database) -> None:
        merit = database.create_merit("Lucky", "Supernatural", "merit", 3, "")

        assert database.update_merit(merit.id, cost=4).cost == 4
        assert database.delete_merit(merit.id) is True
        assert database.get_merit(merit.id) is None


class TestBackgrounds:
    """Tests for the background catalogue."""

    def test_create_and_list(self, database: Database) -> None:
        database.create_background("Node", "Mystic", "mage", "1-5", "A place of power")
        database.create_background("Allies", "Social", "general", "1-5", "Friends")

        assert [b.name for b in database.list_backgrounds()] == ["Allies", "Node"]
        assert [b.name for b in database.list_backgrounds("mage")] == ["Node"]

    def test_duplicate_name(self, database: Database) -> None:
        database.create_background("Node", "Mystic", "mage", "1-5", "")

        with pytest.raises(DuplicateRecordError):
            database.create_background("Node", "Mystic", "mage", "1-5", "")

    def test_rename_to_existing(self, database: Database) -> None:
        database.create_background("Node", "Mystic", "mage", "1-5", "")
        library = database.create_background("Library", "Mystic", "mage", "1-5", "")

        with pytest.raises(DuplicateRecordError):
            database.update_background(library.id, name="Node")


class TestResources:
    """Tests for recommended resources."""

    def test_featured_first(self, database: Database) -> None:
        database.create_resource("Mage 20th", "book", "Core rules")
        database.create_resource("Wiki", "website", "Fan wiki", featured=True)

        resources = database.list_resources()

        assert [r.name for r in resources] == ["Wiki", "Mage 20th"]
        assert resources[0].featured is True

    def test_filters(self, database: Database) -> None:
        database.create_resource("Mage 20th", "book", "Core rules", category="rules")
        database.create_resource("Wiki", "website", "Fan wiki", featured=True)

        assert [r.name for r in database.list_resources(type="book")] == ["Mage 20th"]
        assert [r.name for r in database.list_resources(featured=False)] == ["Mage 20th"]
        assert [r.name for r in database.list_resources(category="rules")] == ["Mage 20th"]

    def test_update(self, database: Database) -> None:
        resource = database.create_resource("Wiki", "website", "Fan wiki")

        assert database.update_resource(resource.id, featured=True).featured is True


class TestMageGroups:
    """Tests for tradition encyclopedia entries."""

    def test_published_filter(self, database: Database) -> None:
        database.create_mage_group("Verbena", "verbena", "traditions", "Life mages", published=True)
        database.create_mage_group("Syndicate", "syndicate", "technocracy", "Money")

        assert len(database.list_mage_groups()) == 2
        assert [g.slug for g in database.list_mage_groups(published_only=True)] == ["verbena"]
        assert [g.slug for g in database.list_mage_groups(category="technocracy")] == ["syndicate"]

    def test_duplicate_slug(self, database: Database) -> None:
        database.create_mage_group("Verbena", "verbena", "traditions", "")

        with pytest.raises(DuplicateRecordError):
            database.create_mage_group("Verbena II", "verbena", "traditions", "")

    def test_sort_order(self, database: Database) -> None:
        database.create_mage_group("B", "b", "traditions", "", sort_order=2)
        database.create_mage_group("A", "a", "traditions", "", sort_order=1)

        assert [g.name for g in database.list_mage_groups()] == ["A", "B"]


class TestCharacters:
    """Tests for saved characters and rote assignments."""

    def test_create_and_get(self, database: Database) -> None:
        character = database.create_character(
            name="Mara Voss",
            faction="Verbena",
            concept="Hedge witch",
            arete=3,
            avatar="Avatar 3",
            essence="Primordial",
            sheet={"name": "Mara Voss", "phase": "complete"},
        )

        loaded = database.get_character(character.id)

        assert loaded is not None
        assert loaded.name == "Mara Voss"
        assert loaded.arete == 3
        assert loaded.sheet == {"name": "Mara Voss", "phase": "complete"}
        assert loaded.rotes == []

    def test_minimal_character(self, database: Database) -> None:
        character = database.create_character("Nobody", "Orphans")

        loaded = database.get_character(character.id)

        assert loaded.sheet is None
        assert loaded.concept is None

    def test_update(self, database: Database) -> None:
        character = database.create_character("Mara", "Verbena")

        updated = database.update_character(character.id, arete=2, sheet={"phase": "basics"})

        assert updated.arete == 2
        assert updated.sheet == {"phase": "basics"}

    def test_assign_rote(self, seeded_database: Database) -> None:
        character = seeded_database.create_character("Mara", "Verbena")
        rote = seeded_database.list_rotes()[0]

        assignment = seeded_database.assign_rote(character.id, rote.id, notes="Favourite", specialty=True)

        loaded = seeded_database.get_character(character.id)
        assert assignment.rote is not None
        assert assignment.rote.name == rote.name
        assert len(loaded.rotes) == 1
        assert loaded.rotes[0].rote_id == rote.id
        assert loaded.rotes[0].notes == "Favourite"
        assert loaded.rotes[0].specialty is True
        assert loaded.rotes[0].rote.spheres == rote.spheres

    def test_assign_twice(self, seeded_database: Database) -> None:
        character = seeded_database.create_character("Mara", "Verbena")
        rote = seeded_database.list_rotes()[0]
        seeded_database.assign_rote(character.id, rote.id)

        with pytest.raises(DuplicateRecordError):
            seeded_database.assign_rote(character.id, rote.id)

    def test_assign_missing_records(self, seeded_database: Database) -> None:
        character = seeded_database.create_character("Mara", "Verbena")
        rote = seeded_database.list_rotes()[0]

        with pytest.raises(RecordNotFoundError, match="Character"):
            seeded_database.assign_rote("missing", rote.id)
        with pytest.raises(RecordNotFoundError, match="Rote"):
            seeded_database.assign_rote(character.id, "missing")

    def test_unassign(self, seeded_database: Database) -> None:
        character = seeded_database.create_character("Mara", "Verbena")
        rote = seeded_database.list_rotes()[0]
        seeded_database.assign_rote(character.id, rote.id)

        assert seeded_database.unassign_rote(character.id, rote.id) is True
        assert seeded_database.unassign_rote(character.id, rote.id) is False
        assert seeded_database.get_character(character.id).rotes == []

    def test_deleting_rote_removes_assignment(self, seeded_database: Database) -> None:
        character = seeded_database.create_character("Mara", "Verbena")
        rote = seeded_database.list_rotes()[0]
        seeded_database.assign_rote(character.id, rote.id)

        seeded_database.delete_rote(rote.id)

        assert seeded_database.get_character(character.id).rotes == []

    def test_delete_character(self, seeded_database: Database) -> None:
        character = seeded_database.create_character("Mara", "Verbena")
        seeded_database.assign_rote(character.id, seeded_database.list_rotes()[0].id)

        assert seeded_database.delete_character(character.id) is True
        assert seeded_database.get_character(character.id) is None
        assert seeded_database.list_characters() == []

    def test_list_includes_rotes(self, seeded_database: Database) -> None:
        first = seeded_database.create_character("Mara", "Verbena")
        second = seeded_database.create_character("Ilse", "Order of Hermes")
        rotes = seeded_database.list_rotes()
        seeded_database.assign_rote(first.id, rotes[0].id)
        seeded_database.assign_rote(first.id, rotes[1].id)

        characters = {c.id: c for c in seeded_database.list_characters()}

        assert len(characters[first.id].rotes) == 2
        assert characters[second.id].rotes == []


class TestContent:
    """Tests for editable content sections."""

    def test_defaults(self, database: Database) -> None:
        content = database.get_content("site-settings")

        assert content == CONTENT_DEFAULTS["site-settings"]

    def test_update_merges(self, database: Database) -> None:
        content = database.update_content("site-settings", {"welcomeText": "Hello, Awakened"})

        assert content["welcomeText"] == "Hello, Awakened"
        assert content["footerText"] == CONTENT_DEFAULTS["site-settings"]["footerText"]
        assert database.get_content("site-settings")["welcomeText"] == "Hello, Awakened"

    def test_update_overwrites(self, database: Database) -> None:
        database.update_content("guide-expanded-content", {"spheres": "one"})
        database.update_content("guide-expanded-content", {"spheres": "two"})

        assert database.get_content("guide-expanded-content")["spheres"] == "two"

    def test_empty_value_falls_back_to_default(self, database: Database) -> None:
        database.update_content("site-settings", {"footerText": ""})

        footer = database.get_content("site-settings")["footerText"]

        assert footer == CONTENT_DEFAULTS["site-settings"]["footerText"]

    def test_unknown_section(self, database: Database) -> None:
        with pytest.raises(ValidationError):
            database.get_content("secret-settings")

    def test_unknown_key(self, database: Database) -> None:
        with pytest.raises(ValidationError):
            database.update_content("site-settings", {"adminPassword": "x"})
