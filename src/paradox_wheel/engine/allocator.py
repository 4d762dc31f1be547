"""Point-allocation rules for character creation.

Every operation is a pure function taking a ``CharacterBuildState`` and an
input, and returning an ``AllocationResult``. The input state is never
mutated. An accepted result carries a new state, a rejected one carries the
unchanged input together with a ``RejectionReason`` so callers can tell the
user exactly why nothing happened.

Unknown trait names are programming errors rather than rule violations and
raise ``ValidationError``.

Example:
    >>> state = CharacterBuildState(name="Marisol")
    >>> state = set_attribute_priority(state, "physical", "primary").state
    >>> result = set_attribute(state, "strength", 6)
    >>> result.success, attribute_points_remaining(result.state, "physical")
    (True, 2)
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

from paradox_wheel.core.constants import (
    ABILITY_CREATION_MAX,
    ABILITY_TIER_POINTS,
    AFFINITY_SPHERE_MIN,
    ARETE_CREATION_MAX,
    ATTRIBUTE_BASE,
    ATTRIBUTE_TIER_POINTS,
    BACKGROUND_BUDGET,
    BACKGROUND_MAX,
    FREEBIE_COSTS,
    FREEBIE_POINTS,
    MAX_FLAW_POINTS,
    SPECIALTY_THRESHOLD,
    SPHERE_BUDGET,
    SPHERE_CREATION_MAX,
    TRAIT_MAX,
    WILLPOWER_MAX,
)
from paradox_wheel.core.exceptions import ValidationError
from paradox_wheel.core.logging import get_logger
from paradox_wheel.models.build import CharacterBuildState, MeritSelection
from paradox_wheel.models.enums import (
    Ability,
    AbilityCategory,
    Attribute,
    AttributeCategory,
    Background,
    FreebieCategory,
    Phase,
    Priority,
    RejectionReason,
    Sphere,
)


logger = get_logger(__name__)

E = TypeVar("E", bound=StrEnum)


# =============================================================================
# Result Type
# =============================================================================


class AllocationResult(BaseModel):
    """Outcome of an allocation or phase transition.

    Attributes:
        success: Whether the change was applied.
        state: The new state when applied, the unchanged input when rejected.
        reason: Why the change was refused. ``None`` on success.
        message: Human-readable description for toasts and logs.
        old_value: Value before the change.
        new_value: Value requested or applied.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    state: CharacterBuildState
    reason: RejectionReason | None = None
    message: str = ""
    old_value: Any = None
    new_value: Any = None

    @property
    def rejected(self) -> bool:
        return not self.success

    @classmethod
    def accept(
        cls,
        state: CharacterBuildState,
        message: str,
        old_value: Any = None,
        new_value: Any = None,
    ) -> AllocationResult:
        """Build a successful result carrying the new state."""
        return cls(
            success=True,
            state=state,
            message=message,
            old_value=old_value,
            new_value=new_value,
        )

    @classmethod
    def reject(
        cls,
        state: CharacterBuildState,
        reason: RejectionReason,
        message: str,
        old_value: Any = None,
        new_value: Any = None,
    ) -> AllocationResult:
        """Build a rejected result carrying the unchanged state."""
        logger.debug("Allocation rejected", reason=reason.value, detail=message)
        return cls(
            success=False,
            state=state,
            reason=reason,
            message=message,
            old_value=old_value,
            new_value=new_value,
        )


def _coerce(enum_type: type[E], value: str, field_name: str) -> E:
    """Convert a raw name to its enum member.

    Raises:
        ValidationError: If the name is not a member of the enum.
    """
    try:
        return enum_type(value)
    except ValueError as exc:
        raise ValidationError(
            f"Unknown {field_name}: {value!r}",
            field_name=field_name,
            invalid_value=value,
        ) from exc


def _coerce_priority(tier: Priority | str | None) -> Priority | None:
    if tier is None or tier == "none" or tier == "":
        return None
    return _coerce(Priority, tier, "priority")


# =============================================================================
# Budget Helpers
# =============================================================================


def attribute_points_budget(
    state: CharacterBuildState, category: AttributeCategory | str
) -> int:
    """Get the dots a category's priority tier grants (7/5/3, or 0 when unset)."""
    category = _coerce(AttributeCategory, category, "attribute category")
    tier = state.attribute_priorities[category]
    return ATTRIBUTE_TIER_POINTS[tier.value] if tier else 0


def attribute_points_remaining(
    state: CharacterBuildState, category: AttributeCategory | str
) -> int:
    """Get the unspent attribute dots for a category.

    The first dot of every attribute is free and does not count as spent.
    """
    category = _coerce(AttributeCategory, category, "attribute category")
    spent = sum(state.attributes[a] - ATTRIBUTE_BASE for a in category.attributes)
    return attribute_points_budget(state, category) - spent


def ability_points_budget(state: CharacterBuildState, category: AbilityCategory | str) -> int:
    """Get the dots a category's priority tier grants (13/9/5, or 0 when unset)."""
    category = _coerce(AbilityCategory, category, "ability category")
    tier = state.ability_priorities[category]
    return ABILITY_TIER_POINTS[tier.value] if tier else 0


def ability_points_remaining(
    state: CharacterBuildState, category: AbilityCategory | str
) -> int:
    category = _coerce(AbilityCategory, category, "ability category")
    spent = sum(state.abilities[a] for a in category.abilities)
    return ability_points_budget(state, category) - spent


def sphere_points_remaining(state: CharacterBuildState) -> int:
    return SPHERE_BUDGET - sum(state.spheres.values())


def background_points_remaining(state: CharacterBuildState) -> int:
    return BACKGROUND_BUDGET - sum(state.backgrounds.values())


def flaw_total(state: CharacterBuildState) -> int:
    return state.flaw_total


def freebies_spent(state: CharacterBuildState) -> int:
    """Weighted freebie spend across the whole ledger, net of flaws."""
    return state.freebie_dots.spent() + state.merit_total - state.flaw_total


def remaining_freebies(state: CharacterBuildState) -> int:
    """Get the freebie balance, recomputed from the full ledger.

    ``15 - (attr*5 + ability*2 + sphere*7 + background*1 + arete*4 +
    willpower*1 + merits - flaws)``. Flaws can push this above 15.
    """
    return FREEBIE_POINTS - freebies_spent(state)


# =============================================================================
# Priorities
# =============================================================================


def set_attribute_priority(
    state: CharacterBuildState,
    category: AttributeCategory | str,
    tier: Priority | str | None,
) -> AllocationResult:
    """Assign a priority tier to an attribute group.

    Any other group holding the same tier is reset to no priority. Always
    succeeds.
    """
    category = _coerce(AttributeCategory, category, "attribute category")
    new_tier = _coerce_priority(tier)
    old_tier = state.attribute_priorities[category]

    priorities = dict(state.attribute_priorities)
    if new_tier is not None:
        for other, held in priorities.items():
            if held is new_tier:
                priorities[other] = None
    priorities[category] = new_tier

    new_state = state.model_copy(update={"attribute_priorities": priorities}, deep=True)
    return AllocationResult.accept(
        new_state,
        f"{category.value.capitalize()} attributes set to {new_tier or 'none'}",
        old_tier,
        new_tier,
    )


def set_ability_priority(
    state: CharacterBuildState,
    category: AbilityCategory | str,
    tier: Priority | str | None,
) -> AllocationResult:
    """Assign a priority tier to an ability group. Last write wins."""
    category = _coerce(AbilityCategory, category, "ability category")
    new_tier = _coerce_priority(tier)
    old_tier = state.ability_priorities[category]

    priorities = dict(state.ability_priorities)
    if new_tier is not None:
        for other, held in priorities.items():
            if held is new_tier:
                priorities[other] = None
    priorities[category] = new_tier

    new_state = state.model_copy(update={"ability_priorities": priorities}, deep=True)
    return AllocationResult.accept(
        new_state,
        f"{category.value.capitalize()} set to {new_tier or 'none'}",
        old_tier,
        new_tier,
    )


# =============================================================================
# Base Allocation
# =============================================================================


def _check_bought_cap(
    state: CharacterBuildState,
    category: FreebieCategory,
    trait: StrEnum,
    label: str,
    current: int,
    value: int,
) -> AllocationResult | None:
    """Reject a base rating that would lift bought dots past the trait cap.

    Freebie dots survive a step back in the wizard, so a base change can
    land on top of them.
    """
    bought = state.freebie_dots.get(category, trait)
    if bought and value + bought > TRAIT_MAX:
        return AllocationResult.reject(
            state,
            RejectionReason.TRAIT_CAP,
            f"{label} cannot exceed {TRAIT_MAX} with {bought} freebie dot(s) bought",
            current,
            value,
        )
    return None



def set_attribute(
    state: CharacterBuildState, name: Attribute | str, value: int
) -> AllocationResult:
    """Set an attribute's base rating directly.

    Rejected when the value drops below the free dot or the increase exceeds
    what the category has left.
    """
    attribute = _coerce(Attribute, name, "attribute")
    current = state.attributes[attribute]

    if value < ATTRIBUTE_BASE:
        return AllocationResult.reject(
            state,
            RejectionReason.OUT_OF_RANGE,
            f"{attribute.label} cannot go below {ATTRIBUTE_BASE}",
            current,
            value,
        )

    capped = _check_bought_cap(state, FreebieCategory.ATTRIBUTE, attribute, attribute.label, current, value)
    if capped is not None:
        return capped

    remaining = attribute_points_remaining(state, attribute.category)
    if value - current > remaining:
        return AllocationResult.reject(
            state,
            RejectionReason.BUDGET_EXCEEDED,
            f"Only {remaining} {attribute.category.value} dot(s) left",
            current,
            value,
        )

    new_state = state.model_copy(deep=True)
    new_state.attributes[attribute] = value
    return AllocationResult.accept(new_state, f"{attribute.label} set to {value}", current, value)


def set_ability(state: CharacterBuildState, name: Ability | str, value: int) -> AllocationResult:
    """Set an ability's base rating, bounded to 0..3 and the category budget."""
    ability = _coerce(Ability, name, "ability")
    current = state.abilities[ability]

    if not 0 <= value <= ABILITY_CREATION_MAX:
        return AllocationResult.reject(
            state,
            RejectionReason.OUT_OF_RANGE,
            f"{ability.label} must be between 0 and {ABILITY_CREATION_MAX}",
            current,
            value,
        )

    capped = _check_bought_cap(state, FreebieCategory.ABILITY, ability, ability.label, current, value)
    if capped is not None:
        return capped

    remaining = ability_points_remaining(state, ability.category)
    if value - current > remaining:
        return AllocationResult.reject(
            state,
            RejectionReason.BUDGET_EXCEEDED,
            f"Only {remaining} {ability.category.value} dot(s) left",
            current,
            value,
        )

    new_state = state.model_copy(deep=True)
    new_state.abilities[ability] = value
    return AllocationResult.accept(new_state, f"{ability.label} set to {value}", current, value)


def set_sphere(state: CharacterBuildState, name: Sphere | str, value: int) -> AllocationResult:
    """Set a sphere's base rating.

    Bounded to 0..3, never below one for the affinity sphere, and limited to
    six dots in total.
    """
    sphere = _coerce(Sphere, name, "sphere")
    current = state.spheres[sphere]

    if not 0 <= value <= SPHERE_CREATION_MAX:
        return AllocationResult.reject(
            state,
            RejectionReason.OUT_OF_RANGE,
            f"{sphere.display_name} must be between 0 and {SPHERE_CREATION_MAX}",
            current,
            value,
        )

    if sphere is state.affinity_sphere and value < AFFINITY_SPHERE_MIN:
        return AllocationResult.reject(
            state,
            RejectionReason.AFFINITY_FLOOR,
            f"{sphere.display_name} is the affinity sphere and keeps at least {AFFINITY_SPHERE_MIN} dot(s)",
            current,
            value,
        )

    capped = _check_bought_cap(state, FreebieCategory.SPHERE, sphere, sphere.display_name, current, value)
    if capped is not None:
        return capped

    remaining = sphere_points_remaining(state)
    if value - current > remaining:
        return AllocationResult.reject(
            state,
            RejectionReason.BUDGET_EXCEEDED,
            f"Only {remaining} sphere dot(s) left",
            current,
            value,
        )

    new_state = state.model_copy(deep=True)
    new_state.spheres[sphere] = value
    return AllocationResult.accept(new_state, f"{sphere.display_name} set to {value}", current, value)


def set_affinity_sphere(state: CharacterBuildState, name: Sphere | str) -> AllocationResult:
    """Designate the affinity sphere.

    A sphere at zero is raised to one, which spends a sphere dot. The
    previous affinity keeps its dots but loses its floor.
    """
    sphere = _coerce(Sphere, name, "sphere")
    previous = state.affinity_sphere

    new_state = state.model_copy(deep=True)
    shortfall = AFFINITY_SPHERE_MIN - state.spheres[sphere]
    if shortfall > 0:
        if sphere_points_remaining(state) < shortfall:
            return AllocationResult.reject(
                state,
                RejectionReason.BUDGET_EXCEEDED,
                f"No sphere dots left to give {sphere.display_name} its affinity dot",
                previous,
                sphere,
            )
        new_state.spheres[sphere] = AFFINITY_SPHERE_MIN
    new_state.affinity_sphere = sphere
    return AllocationResult.accept(new_state, f"Affinity sphere set to {sphere.display_name}", previous, sphere)


def set_background(
    state: CharacterBuildState, name: Background | str, value: int
) -> AllocationResult:
    """Set a background rating. A value of zero removes the background."""
    background = _coerce(Background, name, "background")
    current = state.backgrounds.get(background, 0)

    if not 0 <= value <= BACKGROUND_MAX:
        return AllocationResult.reject(
            state,
            RejectionReason.OUT_OF_RANGE,
            f"{background.label} must be between 0 and {BACKGROUND_MAX}",
            current,
            value,
        )

    capped = _check_bought_cap(state, FreebieCategory.BACKGROUND, background, background.label, current, value)
    if capped is not None:
        return capped

    remaining = background_points_remaining(state)
    if value - current > remaining:
        return AllocationResult.reject(
            state,
            RejectionReason.BUDGET_EXCEEDED,
            f"Only {remaining} background dot(s) left",
            current,
            value,
        )

    new_state = state.model_copy(deep=True)
    if value == 0:
        new_state.backgrounds.pop(background, None)
    else:
        new_state.backgrounds[background] = value
    return AllocationResult.accept(new_state, f"{background.label} set to {value}", current, value)


# =============================================================================
# Freebie Points
# =============================================================================

_FREEBIE_TRAITS: dict[FreebieCategory, type[StrEnum]] = {
    FreebieCategory.ATTRIBUTE: Attribute,
    FreebieCategory.ABILITY: Ability,
    FreebieCategory.SPHERE: Sphere,
    FreebieCategory.BACKGROUND: Background,
}


def _resolve_freebie_target(
    category: FreebieCategory, name: str | None
) -> StrEnum | None:
    if category.is_scalar:
        return None
    if name is None:
        raise ValidationError(
            f"A {category.value} name is required",
            field_name="name",
        )
    return _coerce(_FREEBIE_TRAITS[category], name, category.value)


def _trait_total(state: CharacterBuildState, category: FreebieCategory, trait: Any) -> int:
    if category is FreebieCategory.ATTRIBUTE:
        return state.attribute_total(trait)
    if category is FreebieCategory.ABILITY:
        return state.ability_total(trait)
    if category is FreebieCategory.SPHERE:
        return state.sphere_total(trait)
    if category is FreebieCategory.BACKGROUND:
        return state.background_total(trait)
    if category is FreebieCategory.ARETE:
        return state.arete_total
    return state.willpower_total


def _trait_cap(category: FreebieCategory) -> int:
    if category is FreebieCategory.ARETE:
        return ARETE_CREATION_MAX
    if category is FreebieCategory.WILLPOWER:
        return WILLPOWER_MAX
    return TRAIT_MAX


def _trait_label(category: FreebieCategory, trait: Any) -> str:
    if trait is None:
        return category.value.capitalize()
    if isinstance(trait, Sphere):
        return trait.display_name
    return trait.label


def add_freebie_dot(
    state: CharacterBuildState,
    category: FreebieCategory | str,
    name: str | None = None,
) -> AllocationResult:
    """Buy one dot with freebie points.

    The price is fixed per category (attribute 5, ability 2, sphere 7,
    background 1, arete 4, willpower 1).

    Args:
        state: Current build state.
        category: Trait category to raise.
        name: Trait name. Ignored for arete and willpower.

    Returns:
        Rejected with ``TRAIT_CAP`` when the trait is already at its creation
        maximum, or ``INSUFFICIENT_FREEBIES`` when the pool cannot cover it.
    """
    category = _coerce(FreebieCategory, category, "freebie category")
    trait = _resolve_freebie_target(category, name)
    label = _trait_label(category, trait)
    cost = FREEBIE_COSTS[category.value]
    current = state.freebie_dots.get(category, trait)

    cap = _trait_cap(category)
    if _trait_total(state, category, trait) + 1 > cap:
        return AllocationResult.reject(
            state,
            RejectionReason.TRAIT_CAP,
            f"{label} cannot exceed {cap} at character creation",
            current,
            current + 1,
        )

    remaining = remaining_freebies(state)
    if remaining < cost:
        return AllocationResult.reject(
            state,
            RejectionReason.INSUFFICIENT_FREEBIES,
            f"{label} costs {cost} freebie point(s), only {remaining} left",
            current,
            current + 1,
        )

    new_state = state.model_copy(deep=True)
    dots = new_state.freebie_dots
    if category is FreebieCategory.ARETE:
        dots.arete += 1
    elif category is FreebieCategory.WILLPOWER:
        dots.willpower += 1
    else:
        counters = dots.counter_map(category)
        counters[trait] = counters.get(trait, 0) + 1
    return AllocationResult.accept(new_state, f"Bought a dot of {label} for {cost}", current, current + 1)


def remove_freebie_dot(
    state: CharacterBuildState,
    category: FreebieCategory | str,
    name: str | None = None,
) -> AllocationResult:
    """Refund one freebie dot. Map counters that return to zero are removed."""
    category = _coerce(FreebieCategory, category, "freebie category")
    trait = _resolve_freebie_target(category, name)
    label = _trait_label(category, trait)
    current = state.freebie_dots.get(category, trait)

    if current <= 0:
        return AllocationResult.reject(
            state,
            RejectionReason.NOTHING_TO_REMOVE,
            f"No freebie dots on {label} to remove",
            current,
            current,
        )

    new_state = state.model_copy(deep=True)
    dots = new_state.freebie_dots
    if category is FreebieCategory.ARETE:
        dots.arete -= 1
    elif category is FreebieCategory.WILLPOWER:
        dots.willpower -= 1
    else:
        counters = dots.counter_map(category)
        if current == 1:
            del counters[trait]
        else:
            counters[trait] = current - 1
    return AllocationResult.accept(new_state, f"Refunded a dot of {label}", current, current - 1)


# =============================================================================
# Merits & Flaws
# =============================================================================


def _as_selection(item: MeritSelection | dict[str, Any]) -> MeritSelection:
    if isinstance(item, MeritSelection):
        return item
    return MeritSelection.model_validate(item)


def _taken_ids(state: CharacterBuildState) -> set[str]:
    return {m.id for m in state.merits} | {f.id for f in state.flaws}


def add_merit(
    state: CharacterBuildState, merit: MeritSelection | dict[str, Any]
) -> AllocationResult:
    """Take a merit, paying its cost from the freebie pool."""
    merit = _as_selection(merit)

    if merit.id in _taken_ids(state):
        return AllocationResult.reject(
            state,
            RejectionReason.DUPLICATE,
            f"{merit.name} is already taken",
            new_value=merit,
        )

    remaining = remaining_freebies(state)
    if remaining < merit.cost:
        return AllocationResult.reject(
            state,
            RejectionReason.INSUFFICIENT_FREEBIES,
            f"{merit.name} costs {merit.cost} freebie point(s), only {remaining} left",
            new_value=merit,
        )

    new_state = state.model_copy(update={"merits": [*state.merits, merit]}, deep=True)
    return AllocationResult.accept(new_state, f"Added merit {merit.name}", new_value=merit)


def remove_merit(state: CharacterBuildState, merit_id: str) -> AllocationResult:
    """Drop a merit and refund its cost."""
    match = next((m for m in state.merits if m.id == merit_id), None)
    if match is None:
        return AllocationResult.reject(
            state,
            RejectionReason.NOT_FOUND,
            f"No merit with id {merit_id!r}",
            new_value=merit_id,
        )

    merits = [m for m in state.merits if m.id != merit_id]
    new_state = state.model_copy(update={"merits": merits}, deep=True)
    return AllocationResult.accept(new_state, f"Removed merit {match.name}", old_value=match)


def add_flaw(state: CharacterBuildState, flaw: MeritSelection | dict[str, Any]) -> AllocationResult:
    """Take a flaw, adding its value to the freebie pool (at most 7 in total)."""
    flaw = _as_selection(flaw)

    if flaw.id in _taken_ids(state):
        return AllocationResult.reject(
            state,
            RejectionReason.DUPLICATE,
            f"{flaw.name} is already taken",
            new_value=flaw,
        )

    total = state.flaw_total
    if total + flaw.cost > MAX_FLAW_POINTS:
        return AllocationResult.reject(
            state,
            RejectionReason.FLAW_CAP,
            f"Flaws are capped at {MAX_FLAW_POINTS} points ({total} taken)",
            old_value=total,
            new_value=flaw,
        )

    new_state = state.model_copy(update={"flaws": [*state.flaws, flaw]}, deep=True)
    return AllocationResult.accept(new_state, f"Added flaw {flaw.name}", new_value=flaw)


def remove_flaw(state: CharacterBuildState, flaw_id: str) -> AllocationResult:
    """Drop a flaw.

    Rejected when the points it gave back are already spent, since the pool
    would go negative.
    """
    match = next((f for f in state.flaws if f.id == flaw_id), None)
    if match is None:
        return AllocationResult.reject(
            state,
            RejectionReason.NOT_FOUND,
            f"No flaw with id {flaw_id!r}",
            new_value=flaw_id,
        )

    remaining = remaining_freebies(state)
    if remaining - match.cost < 0:
        return AllocationResult.reject(
            state,
            RejectionReason.NEGATIVE_BALANCE,
            f"Removing {match.name} would leave {remaining - match.cost} freebie points",
            old_value=match,
        )

    flaws = [f for f in state.flaws if f.id != flaw_id]
    new_state = state.model_copy(update={"flaws": flaws}, deep=True)
    return AllocationResult.accept(new_state, f"Removed flaw {match.name}", old_value=match)


# =============================================================================
# Specialties & Identity
# =============================================================================


def set_specialty(state: CharacterBuildState, ability: Ability | str, text: str) -> AllocationResult:
    """Set or clear (with empty text) an ability's specialty."""
    ability = _coerce(Ability, ability, "ability")
    old = state.specialties.get(ability)
    text = text.strip()

    new_state = state.model_copy(deep=True)
    if text:
        new_state.specialties[ability] = text
        message = f"{ability.label} specialty set to {text}"
    else:
        new_state.specialties.pop(ability, None)
        message = f"{ability.label} specialty cleared"
    return AllocationResult.accept(new_state, message, old, text or None)


def abilities_needing_specialty(state: CharacterBuildState) -> list[Ability]:
    """List abilities rated 4+ (base + freebie) that have no specialty yet.

    This is advisory; nothing blocks on it.
    """
    return [
        ability
        for ability in Ability
        if state.ability_total(ability) >= SPECIALTY_THRESHOLD
        and not state.specialties.get(ability)
    ]


def update_identity(state: CharacterBuildState, **fields: str) -> AllocationResult:
    """Update free-text identity fields (name, concept, affiliation, ...)."""
    unknown = sorted(set(fields) - set(CharacterBuildState.IDENTITY_FIELDS))
    if unknown:
        return AllocationResult.reject(
            state,
            RejectionReason.UNKNOWN_FIELD,
            f"Unknown identity field(s): {', '.join(unknown)}",
            new_value=fields,
        )

    old = {key: getattr(state, key) for key in fields}
    new_state = state.model_copy(update=dict(fields), deep=True)
    return AllocationResult.accept(new_state, "Identity updated", old, dict(fields))


# =============================================================================
# Phase Gates
# =============================================================================


def can_proceed(state: CharacterBuildState, phase: Phase | str | None = None) -> bool:
    """Check whether the given phase (default: the current one) is finished."""
    phase = state.phase if phase is None else _coerce(Phase, phase, "phase")

    if phase is Phase.BASICS:
        return bool(state.name.strip())
    if phase is Phase.ATTRIBUTES_PRIORITY:
        return set(state.attribute_priorities.values()) == set(Priority)
    if phase is Phase.ATTRIBUTES_ASSIGN:
        return all(attribute_points_remaining(state, c) == 0 for c in AttributeCategory)
    if phase is Phase.ABILITIES_PRIORITY:
        return set(state.ability_priorities.values()) == set(Priority)
    if phase is Phase.ABILITIES_ASSIGN:
        return all(ability_points_remaining(state, c) == 0 for c in AbilityCategory)
    if phase is Phase.SPHERES:
        return sphere_points_remaining(state) == 0 and state.affinity_sphere is not None
    if phase is Phase.BACKGROUNDS:
        return background_points_remaining(state) == 0
    if phase is Phase.FREEBIES:
        return remaining_freebies(state) == 0
    return False


def _dots_blocker(left: int, kind: str) -> str:
    if left < 0:
        return f"Remove {-left} {kind} dot(s)"
    return f"{left} {kind} dot(s) left to spend"


def phase_blockers(state: CharacterBuildState, phase: Phase | str | None = None) -> list[str]:
    """Describe what is still missing before a phase can be left."""
    phase = state.phase if phase is None else _coerce(Phase, phase, "phase")
    blockers: list[str] = []

    if phase is Phase.BASICS and not state.name.strip():
        blockers.append("Give your character a name")
    elif phase is Phase.ATTRIBUTES_PRIORITY:
        missing = [c.value for c, tier in state.attribute_priorities.items() if tier is None]
        if missing:
            blockers.append(f"Assign a priority to: {', '.join(missing)}")
    elif phase is Phase.ATTRIBUTES_ASSIGN:
        for category in AttributeCategory:
            left = attribute_points_remaining(state, category)
            if left:
                blockers.append(_dots_blocker(left, category.value))
    elif phase is Phase.ABILITIES_PRIORITY:
        missing = [c.value for c, tier in state.ability_priorities.items() if tier is None]
        if missing:
            blockers.append(f"Assign a priority to: {', '.join(missing)}")
    elif phase is Phase.ABILITIES_ASSIGN:
        for category in AbilityCategory:
            left = ability_points_remaining(state, category)
            if left:
                blockers.append(_dots_blocker(left, category.value))
    elif phase is Phase.SPHERES:
        if state.affinity_sphere is None:
            blockers.append("Choose an affinity sphere")
        if sphere_points_remaining(state):
            blockers.append(_dots_blocker(sphere_points_remaining(state), "sphere"))
    elif phase is Phase.BACKGROUNDS and background_points_remaining(state):
        blockers.append(_dots_blocker(background_points_remaining(state), "background"))
    elif phase is Phase.FREEBIES and remaining_freebies(state):
        blockers.append(f"{remaining_freebies(state)} freebie point(s) left to spend")
    elif phase is Phase.COMPLETE:
        blockers.append("Character creation is complete")
    return blockers


__all__ = [
    "AllocationResult",
    # Budgets
    "attribute_points_budget",
    "attribute_points_remaining",
    "ability_points_budget",
    "ability_points_remaining",
    "sphere_points_remaining",
    "background_points_remaining",
    "flaw_total",
    "freebies_spent",
    "remaining_freebies",
    # Operations
    "set_attribute_priority",
    "set_ability_priority",
    "set_attribute",
    "set_ability",
    "set_sphere",
    "set_affinity_sphere",
    "set_background",
    "add_freebie_dot",
    "remove_freebie_dot",
    "add_merit",
    "remove_merit",
    "add_flaw",
    "remove_flaw",
    "set_specialty",
    "abilities_needing_specialty",
    "update_identity",
    # Gates
    "can_proceed",
    "phase_blockers",
]
