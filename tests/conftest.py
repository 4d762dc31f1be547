"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in The Paradox Wheel test suite.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

    from paradox_wheel.engine.builder import CharacterBuilder
    from paradox_wheel.models.build import CharacterBuildState
    from paradox_wheel.storage.database import Database


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from paradox_wheel.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "PARADOX_WHEEL_DEBUG": "true",
        "PARADOX_WHEEL_LOG_LEVEL": "DEBUG",
        "PARADOX_WHEEL_ADMIN_PASSWORD": "sleepers-beware",
        "PARADOX_WHEEL_DATABASE_PATH": str(tmp_path / "env.db"),
        "PARADOX_WHEEL_API_PORT": "9123",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture
def database(tmp_path: Path) -> Database:
    """Create an empty database in a temporary directory."""
    from paradox_wheel.storage.database import Database

    return Database(tmp_path / "paradox_wheel.db")


@pytest.fixture
def seeded_database(database: Database) -> Database:
    """A database holding the sample rotes."""
    database.seed_rotes()
    return database


# =============================================================================
# Build Fixtures
# =============================================================================


@pytest.fixture
def fresh_state() -> CharacterBuildState:
    """A brand new build state at the basics phase."""
    from paradox_wheel.models.build import CharacterBuildState

    return CharacterBuildState()


@pytest.fixture
def prioritized_state(fresh_state: CharacterBuildState) -> CharacterBuildState:
    """A state with physical/social/mental ranked primary/secondary/tertiary."""
    from paradox_wheel.engine import allocator

    state = fresh_state
    for category, tier in (("physical", "primary"), ("social", "secondary"), ("mental", "tertiary")):
        state = allocator.set_attribute_priority(state, category, tier).state
    for category, tier in (("talents", "primary"), ("skills", "secondary"), ("knowledges", "tertiary")):
        state = allocator.set_ability_priority(state, category, tier).state
    return state


def _check(result: Any) -> None:
    assert result.success, result.message


def _drive(builder: CharacterBuilder, target: str) -> CharacterBuilder:
    """Fill in each phase with a valid allocation until ``target`` is reached."""
    from paradox_wheel.models.enums import Phase

    steps: dict[Phase, Callable[[CharacterBuilder], None]] = {
        Phase.BASICS: lambda b: _check(
            b.update_identity(
                name="Mara Voss",
                affiliation="Verbena",
                essence="Primordial",
                concept="Hedge witch",
            )
        ),
        Phase.ATTRIBUTES_PRIORITY: lambda b: [
            _check(b.set_attribute_priority(category, tier))
            for category, tier in (("physical", "primary"), ("social", "secondary"), ("mental", "tertiary"))
        ],
        Phase.ATTRIBUTES_ASSIGN: lambda b: [
            _check(b.set_attribute(name, value))
            for name, value in (
                ("strength", 4), ("dexterity", 3), ("stamina", 3),
                ("charisma", 3), ("manipulation", 2), ("appearance", 3),
                ("perception", 2), ("intelligence", 2), ("wits", 2),
            )
        ],
        Phase.ABILITIES_PRIORITY: lambda b: [
            _check(b.set_ability_priority(category, tier))
            for category, tier in (("talents", "primary"), ("skills", "secondary"), ("knowledges", "tertiary"))
        ],
        Phase.ABILITIES_ASSIGN: lambda b: [
            _check(b.set_ability(name, value))
            for name, value in (
                ("alertness", 3), ("awareness", 3), ("empathy", 3), ("athletics", 2), ("brawl", 2),
                ("craft", 3), ("meditation", 3), ("survival", 3),
                ("occult", 3), ("medicine", 2),
            )
        ],
        Phase.SPHERES: lambda b: [
            _check(b.set_affinity_sphere("life")),
            _check(b.set_sphere("life", 3)),
            _check(b.set_sphere("forces", 2)),
            _check(b.set_sphere("prime", 1)),
        ],
        Phase.BACKGROUNDS: lambda b: [
            _check(b.set_background(name, value))
            for name, value in (("avatar", 3), ("node", 2), ("library", 2))
        ],
        Phase.FREEBIES: lambda b: [
            _check(b.add_freebie_dot("arete")),
            _check(b.add_freebie_dot("arete")),
            _check(b.add_freebie_dot("willpower")),
            _check(b.add_freebie_dot("willpower")),
            _check(b.add_freebie_dot("attribute", "strength")),
        ],
    }

    goal = Phase(target)
    while builder.phase is not goal:
        steps[builder.phase](builder)
        _check(builder.advance())
    return builder


@pytest.fixture
def builder_at() -> Callable[[str], CharacterBuilder]:
    """Factory for a builder whose earlier phases are already complete.

    Example:
        >>> builder = builder_at("spheres")
        >>> builder.phase
        <Phase.SPHERES: 'spheres'>
    """
    from paradox_wheel.engine.builder import CharacterBuilder

    def factory(phase: str) -> CharacterBuilder:
        return _drive(CharacterBuilder(), phase)

    return factory


@pytest.fixture
def complete_builder(builder_at: Callable[[str], CharacterBuilder]) -> CharacterBuilder:
    """A builder that has reached the complete phase."""
    return builder_at("complete")
