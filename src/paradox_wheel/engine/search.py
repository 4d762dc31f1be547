"""Rote search and reference catalogue filtering.

Search works on records already loaded from the database. Sphere minimums
honour the Technocracy aliases, so a filter of ``Data >= 2`` also matches a
rote rated ``Correspondence 2``.

Example:
    >>> minimums = parse_sphere_filter("Forces:3,Prime:2")
    >>> [r.name for r in search_rotes(rotes, sphere_minimums=minimums)]
    ['The Flickering Ward']
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from paradox_wheel.core.constants import SPHERE_LEVEL_MAX
from paradox_wheel.core.exceptions import ValidationError
from paradox_wheel.models.traditions import ALL_SPHERES, get_linked_spheres
from paradox_wheel.storage.records import BackgroundRecord, MeritRecord, RoteRecord


class _Categorized(Protocol):
    category: str


C = TypeVar("C", bound=_Categorized)

ALL = "all"
"""Filter value meaning "no filter" in the UI pickers."""


# =============================================================================
# Rotes
# =============================================================================


def rote_matches_query(rote: RoteRecord, query: str) -> bool:
    """Case-insensitive substring match over name, tradition, description, spheres."""
    needle = query.strip().lower()
    if not needle:
        return True
    haystacks = [rote.name, rote.tradition, rote.description, *rote.spheres]
    return any(needle in text.lower() for text in haystacks)


def rote_meets_minimums(rote: RoteRecord, sphere_minimums: dict[str, int]) -> bool:
    """Check every sphere minimum against the rote or its aliased sphere.

    A minimum of zero is no filter.
    """
    for sphere, minimum in sphere_minimums.items():
        if minimum <= 0:
            continue
        if not any(rote.spheres.get(linked, 0) >= minimum for linked in get_linked_spheres(sphere)):
            return False
    return True


def search_rotes(
    rotes: Iterable[RoteRecord],
    query: str = "",
    sphere_minimums: dict[str, int] | None = None,
    tradition: str | None = None,
) -> list[RoteRecord]:
    """Filter rotes by text, sphere minimums and tradition.

    Args:
        rotes: Rotes to search, in display order.
        query: Free text. Empty matches everything.
        sphere_minimums: Sphere display name to minimum rating.
        tradition: Exact tradition name. ``None``, empty or "all" means any.

    Returns:
        Matching rotes in their original order.
    """
    minimums = sphere_minimums or {}
    wanted_tradition = tradition if tradition and tradition != ALL else None
    return [
        rote
        for rote in rotes
        if rote_matches_query(rote, query)
        and rote_meets_minimums(rote, minimums)
        and (wanted_tradition is None or rote.tradition == wanted_tradition)
    ]


def parse_sphere_filter(raw: str | None) -> dict[str, int]:
    """Parse a ``"Forces:3,Mind:2"`` query parameter.

    Raises:
        ValidationError: On a malformed pair, an unknown sphere, or a level
            outside 0..5.
    """
    minimums: dict[str, int] = {}
    if not raw:
        return minimums

    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        name, sep, level_text = pair.partition(":")
        name = name.strip()
        if not sep:
            raise ValidationError(
                f"Sphere filter must look like 'Forces:3', got {pair!r}",
                field_name="spheres",
                invalid_value=pair,
            )
        if name not in ALL_SPHERES:
            raise ValidationError(
                f"Unknown sphere: {name}",
                field_name="spheres",
                invalid_value=name,
            )
        try:
            level = int(level_text)
        except ValueError as exc:
            raise ValidationError(
                f"Sphere level must be a number, got {level_text!r}",
                field_name="spheres",
                invalid_value=level_text,
            ) from exc
        if not 0 <= level <= SPHERE_LEVEL_MAX:
            raise ValidationError(
                f"Sphere level must be between 0 and {SPHERE_LEVEL_MAX}",
                field_name="spheres",
                invalid_value=level,
            )
        minimums[name] = level
    return minimums


def rote_traditions(rotes: Iterable[RoteRecord]) -> list[str]:
    """Get the distinct traditions present in a set of rotes, sorted."""
    return sorted({rote.tradition for rote in rotes})


# =============================================================================
# Merits, Flaws & Backgrounds
# =============================================================================


def filter_merits(
    merits: Iterable[MeritRecord],
    kind: str | None = None,
    category: str | None = None,
    term: str = "",
) -> list[MeritRecord]:
    """Filter the merit & flaw catalogue.

    Args:
        merits: Catalogue entries.
        kind: "merit" or "flaw". ``None`` or "all" keeps both.
        category: Exact category. ``None`` or "all" keeps every category.
        term: Case-insensitive text over name, category and description.
    """
    needle = term.strip().lower()
    results = []
    for merit in merits:
        if kind and kind != ALL and merit.type != kind:
            continue
        if category and category != ALL and merit.category != category:
            continue
        if needle and not any(
            needle in text.lower() for text in (merit.name, merit.category, merit.description)
        ):
            continue
        results.append(merit)
    return results


def group_by_category(items: Sequence[C]) -> dict[str, list[C]]:
    """Group catalogue entries by category, categories sorted by name."""
    groups: dict[str, list[C]] = {}
    for item in items:
        groups.setdefault(item.category, []).append(item)
    return {category: groups[category] for category in sorted(groups)}


def filter_backgrounds(
    backgrounds: Iterable[BackgroundRecord],
    subtype: str | None = None,
    term: str = "",
) -> list[BackgroundRecord]:
    """Filter backgrounds by subtype ("general"/"mage") and text."""
    needle = term.strip().lower()
    return [
        background
        for background in backgrounds
        if (not subtype or subtype == ALL or background.subtype == subtype)
        and (
            not needle
            or needle in background.name.lower()
            or needle in background.description.lower()
        )
    ]


__all__ = [
    "ALL",
    "rote_matches_query",
    "rote_meets_minimums",
    "search_rotes",
    "parse_sphere_filter",
    "rote_traditions",
    "filter_merits",
    "group_by_category",
    "filter_backgrounds",
]
