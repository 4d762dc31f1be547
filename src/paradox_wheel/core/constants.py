"""Rules constants for character creation and display.

Budgets follow the M20 character creation rules: attributes start at one
free dot each, abilities at zero, and the wizard hands out the dots below on
top of that.
"""

from __future__ import annotations

# =============================================================================
# Attribute & Ability Budgets
# =============================================================================

ATTRIBUTE_TIER_POINTS = {
    "primary": 7,
    "secondary": 5,
    "tertiary": 3,
}
"""Dots above the free first dot, per attribute category priority."""

ABILITY_TIER_POINTS = {
    "primary": 13,
    "secondary": 9,
    "tertiary": 5,
}
"""Dots per ability category priority."""

ATTRIBUTE_BASE = 1
"""Every attribute starts with one dot for free."""

ABILITY_CREATION_MAX = 3
"""No ability may exceed this before freebie points."""

# =============================================================================
# Spheres, Backgrounds, Arete, Willpower
# =============================================================================

SPHERE_BUDGET = 6
"""Sphere dots at creation, including the affinity sphere's dot."""

SPHERE_CREATION_MAX = 3
"""No sphere may exceed this before freebie points."""

AFFINITY_SPHERE_MIN = 1
"""The affinity sphere can never drop below this."""

BACKGROUND_BUDGET = 7
"""Background dots at creation."""

BACKGROUND_MAX = 5
"""Cap on a single background's base rating."""

BASE_ARETE = 1
BASE_WILLPOWER = 5

# =============================================================================
# Freebie Points
# =============================================================================

FREEBIE_POINTS = 15
"""Freebie pool available after the priority-based allocation."""

FREEBIE_COSTS = {
    "attribute": 5,
    "ability": 2,
    "sphere": 7,
    "background": 1,
    "arete": 4,
    "willpower": 1,
}
"""Freebie point price of one dot, per trait category."""

MAX_FLAW_POINTS = 7
"""Flaws may return at most this many freebie points."""

TRAIT_MAX = 5
"""Cap on base + freebie dots for attributes, abilities, spheres, backgrounds."""

ARETE_CREATION_MAX = 3
"""Highest Arete a new character may start with."""

WILLPOWER_MAX = 10

SPECIALTY_THRESHOLD = 4
"""Abilities at or above this rating should carry a specialty."""

# =============================================================================
# Reference Data Display
# =============================================================================

SPHERE_LEVEL_MAX = 5
"""Highest sphere rating a rote can require."""

MAX_HISTORY = 50
"""Undo/redo depth for the character builder."""


__all__ = [
    "ATTRIBUTE_TIER_POINTS",
    "ABILITY_TIER_POINTS",
    "ATTRIBUTE_BASE",
    "ABILITY_CREATION_MAX",
    "SPHERE_BUDGET",
    "SPHERE_CREATION_MAX",
    "AFFINITY_SPHERE_MIN",
    "BACKGROUND_BUDGET",
    "BACKGROUND_MAX",
    "BASE_ARETE",
    "BASE_WILLPOWER",
    "FREEBIE_POINTS",
    "FREEBIE_COSTS",
    "MAX_FLAW_POINTS",
    "TRAIT_MAX",
    "ARETE_CREATION_MAX",
    "WILLPOWER_MAX",
    "SPECIALTY_THRESHOLD",
    "SPHERE_LEVEL_MAX",
    "MAX_HISTORY",
]
