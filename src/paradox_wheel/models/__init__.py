"""Pydantic V2 models and reference tables for The Paradox Wheel.

Submodules:
    enums: Closed vocabularies (Attribute, Ability, Sphere, Phase, ...)
    traditions: Tradition lists, sphere aliases, tradition symbols
    build: CharacterBuildState and its nested records

Example:
    >>> from paradox_wheel.models import CharacterBuildState, Attribute
    >>> state = CharacterBuildState(name="Marisol", affiliation="Verbena")
    >>> state.attributes[Attribute.WITS]
    1
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from paradox_wheel.models.enums import (
    Ability,
    AbilityCategory,
    Attribute,
    AttributeCategory,
    Background,
    BackgroundSubtype,
    FreebieCategory,
    MeritKind,
    Phase,
    Priority,
    RejectionReason,
    Sphere,
)

# =============================================================================
# Build State
# =============================================================================
from paradox_wheel.models.build import (
    CharacterBuildState,
    FreebieDots,
    MeritSelection,
)

# =============================================================================
# Reference Tables
# =============================================================================
from paradox_wheel.models.traditions import (
    ALL_FACTIONS,
    ALL_SPHERES,
    ALL_TRADITIONS,
    SPHERE_ALIASES,
    TECHNOCRACY_CONVENTIONS,
    TECHNOCRACY_SPHERES,
    TRADITION_CATEGORIES,
    TRADITIONS,
    get_linked_spheres,
    get_tradition_category,
    get_tradition_symbol,
    suggested_affinity_spheres,
)


__all__ = [
    # Enums
    "Ability",
    "AbilityCategory",
    "Attribute",
    "AttributeCategory",
    "Background",
    "BackgroundSubtype",
    "FreebieCategory",
    "MeritKind",
    "Phase",
    "Priority",
    "RejectionReason",
    "Sphere",
    # Build
    "CharacterBuildState",
    "FreebieDots",
    "MeritSelection",
    # Reference
    "ALL_FACTIONS",
    "ALL_SPHERES",
    "ALL_TRADITIONS",
    "SPHERE_ALIASES",
    "TECHNOCRACY_CONVENTIONS",
    "TECHNOCRACY_SPHERES",
    "TRADITION_CATEGORIES",
    "TRADITIONS",
    "get_linked_spheres",
    "get_tradition_category",
    "get_tradition_symbol",
    "suggested_affinity_spheres",
]
