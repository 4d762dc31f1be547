"""Tradition, faction and sphere reference tables.

Static lookup data shared by the search engine, the API validators and the
Streamlit pages. Sphere names here are display names ("Forces",
"Primal Utility") as stored on rotes, not the lowercase ``Sphere`` enum used
on a character sheet.
"""

from __future__ import annotations

from dataclasses import dataclass

from paradox_wheel.models.enums import Sphere


# =============================================================================
# Factions
# =============================================================================

TRADITIONS: tuple[str, ...] = (
    "Akashic Brotherhood",
    "Celestial Chorus",
    "Cult of Ecstasy",
    "Dreamspeakers",
    "Euthanatos",
    "Order of Hermes",
    "Sons of Ether",
    "Verbena",
    "Virtual Adepts",
    "Hollow Ones",
    "Orphans",
)

TECHNOCRACY_CONVENTIONS: tuple[str, ...] = (
    "Iteration X",
    "New World Order",
    "Progenitors",
    "Syndicate",
    "Void Engineers",
)

ALL_FACTIONS: tuple[str, ...] = TRADITIONS + TECHNOCRACY_CONVENTIONS


@dataclass(frozen=True)
class TraditionCategory:
    """A labelled group of traditions shown together in pickers."""

    key: str
    label: str
    groups: tuple[str, ...]


TRADITION_CATEGORIES: tuple[TraditionCategory, ...] = (
    TraditionCategory(
        key="traditions",
        label="Nine Traditions",
        groups=(
            "Akashic Brotherhood",
            "Celestial Chorus",
            "Cult of Ecstasy",
            "Dreamspeakers",
            "Euthanatos",
            "Order of Hermes",
            "Sons of Ether",
            "Verbena",
            "Virtual Adepts",
            "Hollow Ones",
        ),
    ),
    TraditionCategory(
        key="technocracy",
        label="Technocracy Conventions",
        groups=(*TECHNOCRACY_CONVENTIONS, "Technocracy"),
    ),
    TraditionCategory(
        key="crafts",
        label="Crafts & Organizations",
        groups=(
            "Ahl-i-Batin",
            "Bata'a",
            "Children of Knowledge",
            "Fencer",
            "Hem-Ka Sobk",
            "High Guild",
            "Knights Templar",
            "Kopa Loei",
            "Shamans",
            "Sisters of Hippolyta",
            "Solificati",
            "Taftani",
            "Wu-Keng",
            "Wu Lung",
        ),
    ),
    TraditionCategory(
        key="cultural",
        label="Cultural/Traditional",
        groups=(
            "Aboriginal",
            "African",
            "Aztec",
            "Babylonian",
            "Celtic",
            "Egyptian",
            "Etruscan",
            "Finnish",
            "Greek",
            "Inuit",
            "Mayan",
            "Mesoamerican",
            "Norse",
            "Polynesian",
            "Roman",
            "Tantric",
        ),
    ),
    TraditionCategory(
        key="other",
        label="Other Factions",
        groups=(
            "Artisan",
            "Infernalist",
            "Marauder",
            "Nephandi",
            "Order of Reason",
            "Reality Hackers",
        ),
    ),
    TraditionCategory(
        key="universal",
        label="Universal",
        groups=("Universal",),
    ),
)

ALL_TRADITIONS: tuple[str, ...] = tuple(
    sorted(group for category in TRADITION_CATEGORIES for group in category.groups)
)
"""Every known tradition or group name, sorted, for validation and pickers."""


def get_tradition_category(tradition: str) -> str:
    """Get the category label for a tradition.

    Args:
        tradition: Tradition or group name.

    Returns:
        The category label, or "Other" for unknown names.
    """
    for category in TRADITION_CATEGORIES:
        if tradition in category.groups:
            return category.label
    return "Other"


_TRADITION_SYMBOLS: dict[str, str] = {
    "Akashic Brotherhood": "☸",
    "Celestial Chorus": "✡",
    "Cult of Ecstasy": "☄",
    "Dreamspeakers": "☾",
    "Euthanatos": "☠",
    "Order of Hermes": "♁",
    "Sons of Ether": "⚛",
    "Verbena": "⚘",
    "Virtual Adepts": "⌘",
    "Hollow Ones": "☆",
    "Orphans": "✴",
    "Iteration X": "⚙",
    "New World Order": "⌂",
    "Progenitors": "⚕",
    "Syndicate": "⚖",
    "Void Engineers": "☉",
}

DEFAULT_TRADITION_SYMBOL = "✦"


def get_tradition_symbol(tradition: str) -> str:
    """Get the unicode glyph shown next to a tradition name."""
    return _TRADITION_SYMBOLS.get(tradition, DEFAULT_TRADITION_SYMBOL)


# =============================================================================
# Spheres
# =============================================================================

SPHERES: tuple[str, ...] = tuple(sphere.display_name for sphere in Sphere)

TECHNOCRACY_SPHERES: tuple[str, ...] = (
    "Data",
    "Dimensional Science",
    "Primal Utility",
)

ALL_SPHERES: tuple[str, ...] = SPHERES + TECHNOCRACY_SPHERES

SPHERE_ALIASES: dict[str, str] = {
    "Data": "Correspondence",
    "Correspondence": "Data",
    "Primal Utility": "Prime",
    "Prime": "Primal Utility",
    "Dimensional Science": "Spirit",
    "Spirit": "Dimensional Science",
}
"""Technocracy sphere names and their Tradition equivalents, both ways."""


def get_linked_spheres(sphere_name: str) -> list[str]:
    """Get a sphere name together with its Technocracy/Tradition alias.

    Args:
        sphere_name: Display name of a sphere.

    Returns:
        ``[sphere_name, alias]`` when an alias exists, else ``[sphere_name]``.

    Example:
        >>> get_linked_spheres("Data")
        ['Data', 'Correspondence']
    """
    alias = SPHERE_ALIASES.get(sphere_name)
    return [sphere_name, alias] if alias else [sphere_name]


def is_technocracy_sphere(sphere_name: str) -> bool:
    return sphere_name in TECHNOCRACY_SPHERES


def get_sphere_dots(level: int) -> str:
    """Render a sphere rating as filled dots, e.g. ``"● ● ●"``."""
    return " ".join("●" for _ in range(level))


# Spheres a new mage of each faction may take as affinity (M20 core).
AFFINITY_SPHERES: dict[str, tuple[Sphere, ...]] = {
    "Akashic Brotherhood": (Sphere.MIND, Sphere.LIFE),
    "Celestial Chorus": (Sphere.PRIME, Sphere.FORCES, Sphere.SPIRIT),
    "Cult of Ecstasy": (Sphere.TIME, Sphere.LIFE, Sphere.MIND),
    "Dreamspeakers": (Sphere.SPIRIT, Sphere.FORCES, Sphere.LIFE, Sphere.MATTER),
    "Euthanatos": (Sphere.ENTROPY, Sphere.LIFE, Sphere.SPIRIT),
    "Order of Hermes": (Sphere.FORCES,),
    "Sons of Ether": (Sphere.MATTER, Sphere.FORCES, Sphere.PRIME),
    "Verbena": (Sphere.LIFE, Sphere.FORCES),
    "Virtual Adepts": (Sphere.CORRESPONDENCE, Sphere.FORCES),
    "Iteration X": (Sphere.FORCES, Sphere.MATTER, Sphere.TIME),
    "New World Order": (Sphere.MIND, Sphere.CORRESPONDENCE),
    "Progenitors": (Sphere.LIFE, Sphere.PRIME),
    "Syndicate": (Sphere.ENTROPY, Sphere.MIND, Sphere.PRIME),
    "Void Engineers": (Sphere.SPIRIT, Sphere.CORRESPONDENCE, Sphere.FORCES),
}


def suggested_affinity_spheres(affiliation: str) -> tuple[Sphere, ...]:
    """Get the affinity choices for a faction.

    Factions without a fixed list (Hollow Ones, Orphans, crafts, ...) may
    pick any sphere.
    """
    return AFFINITY_SPHERES.get(affiliation, tuple(Sphere))


__all__ = [
    "TRADITIONS",
    "TECHNOCRACY_CONVENTIONS",
    "ALL_FACTIONS",
    "TraditionCategory",
    "TRADITION_CATEGORIES",
    "ALL_TRADITIONS",
    "get_tradition_category",
    "DEFAULT_TRADITION_SYMBOL",
    "get_tradition_symbol",
    "SPHERES",
    "TECHNOCRACY_SPHERES",
    "ALL_SPHERES",
    "SPHERE_ALIASES",
    "get_linked_spheres",
    "is_technocracy_sphere",
    "get_sphere_dots",
    "AFFINITY_SPHERES",
    "suggested_affinity_spheres",
]
