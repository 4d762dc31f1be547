"""Tests for the point allocation rules."""

from __future__ import annotations

import pytest

from paradox_wheel.core.exceptions import ValidationError
from paradox_wheel.engine import allocator
from paradox_wheel.engine.allocator import AllocationResult
from paradox_wheel.models.build import CharacterBuildState, FreebieDots, MeritSelection
from paradox_wheel.models.enums import (
    Ability,
    AbilityCategory,
    Attribute,
    AttributeCategory,
    Background,
    Phase,
    Priority,
    RejectionReason,
    Sphere,
)


def _freebie_state(**updates: object) -> CharacterBuildState:
    """A state sitting in the freebie phase."""
    return CharacterBuildState(phase=Phase.FREEBIES, **updates)


class TestAllocationResult:
    """Tests for the result type."""

    def test_accept(self, fresh_state: CharacterBuildState) -> None:
        result = AllocationResult.accept(fresh_state, "ok", 1, 2)

        assert result.success is True
        assert result.rejected is False
        assert result.reason is None
        assert result.old_value == 1
        assert result.new_value == 2

    def test_reject(self, fresh_state: CharacterBuildState) -> None:
        result = AllocationResult.reject(fresh_state, RejectionReason.OUT_OF_RANGE, "nope")

        assert result.success is False
        assert result.rejected is True
        assert result.reason is RejectionReason.OUT_OF_RANGE
        assert result.state is fresh_state


class TestPriorities:
    """Tests for attribute and ability priority tiers."""

    def test_set_attribute_priority(self, fresh_state: CharacterBuildState) -> None:
        result = allocator.set_attribute_priority(fresh_state, "physical", "primary")

        assert result.success
        assert result.state.attribute_priorities[AttributeCategory.PHYSICAL] is Priority.PRIMARY
        assert result.old_value is None
        assert allocator.attribute_points_remaining(result.state, "physical") == 7

    def test_input_state_is_not_mutated(self, fresh_state: CharacterBuildState) -> None:
        allocator.set_attribute_priority(fresh_state, "physical", "primary")

        assert fresh_state.attribute_priorities[AttributeCategory.PHYSICAL] is None

    def test_tier_is_exclusive(self, fresh_state: CharacterBuildState) -> None:
        """Giving a tier to a second group takes it away from the first."""
        state = allocator.set_attribute_priority(fresh_state, "physical", "primary").state
        state = allocator.set_attribute_priority(state, "mental", "primary").state

        assert state.attribute_priorities[AttributeCategory.PHYSICAL] is None
        assert state.attribute_priorities[AttributeCategory.MENTAL] is Priority.PRIMARY

    def test_clear_priority(self, fresh_state: CharacterBuildState) -> None:
        state = allocator.set_attribute_priority(fresh_state, "social", "secondary").state

        for cleared in (None, "none", ""):
            result = allocator.set_attribute_priority(state, "social", cleared)
            assert result.state.attribute_priorities[AttributeCategory.SOCIAL] is None

    def test_ability_priority_exclusive(self, fresh_state: CharacterBuildState) -> None:
        state = allocator.set_ability_priority(fresh_state, "talents", "tertiary").state
        state = allocator.set_ability_priority(state, "skills", "tertiary").state

        assert state.ability_priorities[AbilityCategory.TALENTS] is None
        assert state.ability_priorities[AbilityCategory.SKILLS] is Priority.TERTIARY
        assert allocator.ability_points_remaining(state, "skills") == 5

    def test_budgets_by_tier(self, prioritized_state: CharacterBuildState) -> None:
        assert allocator.attribute_points_budget(prioritized_state, "physical") == 7
        assert allocator.attribute_points_budget(prioritized_state, "social") == 5
        assert allocator.attribute_points_budget(prioritized_state, "mental") == 3
        assert allocator.ability_points_budget(prioritized_state, "talents") == 13
        assert allocator.ability_points_budget(prioritized_state, "skills") == 9
        assert allocator.ability_points_budget(prioritized_state, "knowledges") == 5

    def test_unset_tier_has_no_budget(self, fresh_state: CharacterBuildState) -> None:
        assert allocator.attribute_points_budget(fresh_state, "physical") == 0

    def test_unknown_category_raises(self, fresh_state: CharacterBuildState) -> None:
        with pytest.raises(ValidationError):
            allocator.set_attribute_priority(fresh_state, "spiritual", "primary")

    def test_unknown_tier_raises(self, fresh_state: CharacterBuildState) -> None:
        with pytest.raises(ValidationError):
            allocator.set_ability_priority(fresh_state, "talents", "quaternary")


class TestSetAttribute:
    """Tests for base attribute allocation."""

    def test_spend_within_budget(self, prioritized_state: CharacterBuildState) -> None:
        result = allocator.set_attribute(prioritized_state, "strength", 4)

        assert result.success
        assert result.state.attributes[Attribute.STRENGTH] == 4
        assert result.old_value == 1
        assert result.new_value == 4
        assert allocator.attribute_points_remaining(result.state, "physical") == 4

    def test_first_dot_is_free(self, prioritized_state: CharacterBuildState) -> None:
        assert allocator.attribute_points_remaining(prioritized_state, "mental") == 3

    def test_below_one_rejected(self, prioritized_state: CharacterBuildState) -> None:
        result = allocator.set_attribute(prioritized_state, "wits", 0)

        assert result.reason is RejectionReason.OUT_OF_RANGE
        assert result.state.attributes[Attribute.WITS] == 1

    def test_over_budget_rejected(self, prioritized_state: CharacterBuildState) -> None:
        result = allocator.set_attribute(prioritized_state, "perception", 5)

        assert result.reason is RejectionReason.BUDGET_EXCEEDED
        assert result.state is prioritized_state

    def test_lowering_refunds(self, prioritized_state: CharacterBuildState) -> None:
        state = allocator.set_attribute(prioritized_state, "charisma", 4).state
        state = allocator.set_attribute(state, "charisma", 2).state

        assert allocator.attribute_points_remaining(state, "social") == 4

    def test_no_priority_no_dots(self, fresh_state: CharacterBuildState) -> None:
        result = allocator.set_attribute(fresh_state, "strength", 2)

        assert result.reason is RejectionReason.BUDGET_EXCEEDED

    def test_unknown_attribute_raises(self, prioritized_state: CharacterBuildState) -> None:
        with pytest.raises(ValidationError) as exc_info:
            allocator.set_attribute(prioritized_state, "luck", 2)

        assert exc_info.value.details["invalid_value"] == "luck"


class TestSetAbility:
    """Tests for base ability allocation."""

    def test_spend(self, prioritized_state: CharacterBuildState) -> None:
        result = allocator.set_ability(prioritized_state, "awareness", 3)

        assert result.success
        assert allocator.ability_points_remaining(result.state, "talents") == 10

    def test_cap_of_three(self, prioritized_state: CharacterBuildState) -> None:
        result = allocator.set_ability(prioritized_state, "occult", 4)

        assert result.reason is RejectionReason.OUT_OF_RANGE
        assert result.state.abilities[Ability.OCCULT] == 0

    def test_negative_rejected(self, prioritized_state: CharacterBuildState) -> None:
        assert allocator.set_ability(prioritized_state, "occult", -1).reason is RejectionReason.OUT_OF_RANGE

    def test_over_budget(self, prioritized_state: CharacterBuildState) -> None:
        state = allocator.set_ability(prioritized_state, "occult", 3).state

        result = allocator.set_ability(state, "law", 3)

        assert result.reason is RejectionReason.BUDGET_EXCEEDED
        assert allocator.ability_points_remaining(result.state, "knowledges") == 2

    def test_lower_to_zero(self, prioritized_state: CharacterBuildState) -> None:
        state = allocator.set_ability(prioritized_state, "occult", 2).state

        result = allocator.set_ability(state, "occult", 0)

        assert result.success
        assert allocator.ability_points_remaining(result.state, "knowledges") == 5


class TestSpheres:
    """Tests for sphere allocation and the affinity sphere."""

    def test_set_sphere(self, fresh_state: CharacterBuildState) -> None:
        result = allocator.set_sphere(fresh_state, "forces", 3)

        assert result.success
        assert allocator.sphere_points_remaining(result.state) == 3

    def test_sphere_cap(self, fresh_state: CharacterBuildState) -> None:
        assert allocator.set_sphere(fresh_state, "forces", 4).reason is RejectionReason.OUT_OF_RANGE

    def test_sphere_budget(self, fresh_state: CharacterBuildState) -> None:
        state = allocator.set_sphere(fresh_state, "forces", 3).state
        state = allocator.set_sphere(state, "prime", 2).state

        result = allocator.set_sphere(state, "mind", 2)

        assert result.reason is RejectionReason.BUDGET_EXCEEDED
        assert allocator.sphere_points_remaining(result.state) == 1

    def test_affinity_raises_zero_sphere(self, fresh_state: CharacterBuildState) -> None:
        result = allocator.set_affinity_sphere(fresh_state, "life")

        assert result.success
        assert result.state.affinity_sphere is Sphere.LIFE
        assert result.state.spheres[Sphere.LIFE] == 1
        assert allocator.sphere_points_remaining(result.state) == 5

    def test_affinity_keeps_existing_rating(self, fresh_state: CharacterBuildState) -> None:
        state = allocator.set_sphere(fresh_state, "mind", 2).state

        state = allocator.set_affinity_sphere(state, "mind").state

        assert state.spheres[Sphere.MIND] == 2
        assert allocator.sphere_points_remaining(state) == 4

    def test_affinity_floor(self, fresh_state: CharacterBuildState) -> None:
        state = allocator.set_affinity_sphere(fresh_state, "life").state

        result = allocator.set_sphere(state, "life", 0)

        assert result.reason is RejectionReason.AFFINITY_FLOOR
        assert result.state.spheres[Sphere.LIFE] == 1

    def test_changing_affinity_keeps_old_dots(self, fresh_state: CharacterBuildState) -> None:
        state = allocator.set_affinity_sphere(fresh_state, "life").state

        state = allocator.set_affinity_sphere(state, "forces").state

        assert state.affinity_sphere is Sphere.FORCES
        assert state.spheres[Sphere.LIFE] == 1
        assert allocator.set_sphere(state, "life", 0).success

    def test_affinity_with_no_dots_left(self, fresh_state: CharacterBuildState) -> None:
        state = allocator.set_sphere(fresh_state, "forces", 3).state
        state = allocator.set_sphere(state, "prime", 3).state

        result = allocator.set_affinity_sphere(state, "life")

        assert result.reason is RejectionReason.BUDGET_EXCEEDED
        assert result.state.affinity_sphere is None


class TestBackgrounds:
    """Tests for background allocation."""

    def test_set_background(self, fresh_state: CharacterBuildState) -> None:
        result = allocator.set_background(fresh_state, "avatar", 3)

        assert result.state.backgrounds == {Background.AVATAR: 3}
        assert allocator.background_points_remaining(result.state) == 4

    def test_zero_removes_key(self, fresh_state: CharacterBuildState) -> None:
        state = allocator.set_background(fresh_state, "node", 2).state

        state = allocator.set_background(state, "node", 0).state

        assert Background.NODE not in state.backgrounds
        assert allocator.background_points_remaining(state) == 7

    def test_cap_of_five(self, fresh_state: CharacterBuildState) -> None:
        assert allocator.set_background(fresh_state, "library", 6).reason is RejectionReason.OUT_OF_RANGE

    def test_budget_of_seven(self, fresh_state: CharacterBuildState) -> None:
        state = allocator.set_background(fresh_state, "avatar", 5).state

        result = allocator.set_background(state, "node", 3)

        assert result.reason is RejectionReason.BUDGET_EXCEEDED
        assert Background.NODE not in result.state.backgrounds


class TestBoughtDotsCap:
    """Base ratings may not push freebie dots past the trait cap."""

    def test_background(self) -> None:
        state = CharacterBuildState(
            phase=Phase.BACKGROUNDS,
            freebie_dots=FreebieDots(backgrounds={Background.AVATAR: 3}),
        )

        result = allocator.set_background(state, "avatar", 5)

        assert result.reason is RejectionReason.TRAIT_CAP
        assert result.state is state
        assert allocator.set_background(state, "avatar", 2).success

    def test_attribute(self, prioritized_state: CharacterBuildState) -> None:
        state = prioritized_state.model_copy(
            update={"freebie_dots": FreebieDots(attributes={Attribute.STRENGTH: 2})}
        )

        assert allocator.set_attribute(state, "strength", 4).reason is RejectionReason.TRAIT_CAP
        assert allocator.set_attribute(state, "strength", 3).state.attribute_total(Attribute.STRENGTH) == 5

    def test_attribute_without_bought_dots_is_budget_bound(self, prioritized_state: CharacterBuildState) -> None:
        assert allocator.set_attribute(prioritized_state, "strength", 6).success

    def test_ability(self, prioritized_state: CharacterBuildState) -> None:
        state = prioritized_state.model_copy(
            update={"freebie_dots": FreebieDots(abilities={Ability.OCCULT: 3})}
        )

        assert allocator.set_ability(state, "occult", 3).reason is RejectionReason.TRAIT_CAP
        assert allocator.set_ability(state, "occult", 2).success

    def test_sphere(self, fresh_state: CharacterBuildState) -> None:
        state = fresh_state.model_copy(update={"freebie_dots": FreebieDots(spheres={Sphere.TIME: 3})})

        assert allocator.set_sphere(state, "time", 3).reason is RejectionReason.TRAIT_CAP
        assert allocator.set_sphere(state, "time", 2).success


class TestFreebieDots:
    """Tests for buying and refunding freebie dots."""

    @pytest.mark.parametrize(
        ("category", "name", "cost"),
        [
            ("attribute", "wits", 5),
            ("ability", "occult", 2),
            ("sphere", "mind", 7),
            ("background", "node", 1),
            ("arete", None, 4),
            ("willpower", None, 1),
        ],
    )
    def test_costs(self, category: str, name: str | None, cost: int) -> None:
        result = allocator.add_freebie_dot(_freebie_state(), category, name)

        assert result.success
        assert allocator.remaining_freebies(result.state) == 15 - cost

    def test_counts_accumulate(self) -> None:
        state = _freebie_state()
        state = allocator.add_freebie_dot(state, "ability", "occult").state
        state = allocator.add_freebie_dot(state, "ability", "occult").state

        assert state.freebie_dots.abilities == {Ability.OCCULT: 2}
        assert state.ability_total(Ability.OCCULT) == 2

    def test_trait_cap(self) -> None:
        state = _freebie_state(attributes={"strength": 5})

        result = allocator.add_freebie_dot(state, "attribute", "strength")

        assert result.reason is RejectionReason.TRAIT_CAP
        assert allocator.remaining_freebies(result.state) == 15

    def test_arete_cap_is_three(self) -> None:
        state = _freebie_state(arete=2)
        state = allocator.add_freebie_dot(state, "arete").state

        result = allocator.add_freebie_dot(state, "arete")

        assert state.arete_total == 3
        assert result.reason is RejectionReason.TRAIT_CAP

    def test_willpower_cap_is_ten(self) -> None:
        state = _freebie_state(willpower=9)
        state = allocator.add_freebie_dot(state, "willpower").state

        assert allocator.add_freebie_dot(state, "willpower").reason is RejectionReason.TRAIT_CAP

    def test_insufficient_freebies(self) -> None:
        state = _freebie_state(freebie_dots=FreebieDots(spheres={Sphere.MIND: 1, Sphere.TIME: 1}))
        assert allocator.remaining_freebies(state) == 1

        result = allocator.add_freebie_dot(state, "ability", "occult")

        assert result.reason is RejectionReason.INSUFFICIENT_FREEBIES

    def test_remove_refunds(self) -> None:
        state = allocator.add_freebie_dot(_freebie_state(), "sphere", "mind").state

        result = allocator.remove_freebie_dot(state, "sphere", "mind")

        assert result.success
        assert result.state.freebie_dots.spheres == {}
        assert allocator.remaining_freebies(result.state) == 15

    def test_remove_scalar(self) -> None:
        state = allocator.add_freebie_dot(_freebie_state(), "willpower").state

        result = allocator.remove_freebie_dot(state, "willpower")

        assert result.state.freebie_dots.willpower == 0

    def test_remove_nothing(self) -> None:
        result = allocator.remove_freebie_dot(_freebie_state(), "background", "node")

        assert result.reason is RejectionReason.NOTHING_TO_REMOVE

    def test_missing_name_raises(self) -> None:
        with pytest.raises(ValidationError):
            allocator.add_freebie_dot(_freebie_state(), "ability")

    def test_unknown_category_raises(self) -> None:
        with pytest.raises(ValidationError):
            allocator.add_freebie_dot(_freebie_state(), "paradox")


class TestMeritsAndFlaws:
    """Tests for merits and flaws."""

    def test_merit_costs_freebies(self) -> None:
        result = allocator.add_merit(_freebie_state(), {"id": "m1", "name": "Lucky", "cost": 3})

        assert result.success
        assert allocator.remaining_freebies(result.state) == 12
        assert result.state.merits == [MeritSelection(id="m1", name="Lucky", cost=3)]

    def test_duplicate_merit(self) -> None:
        merit = MeritSelection(id="m1", name="Lucky", cost=3)
        state = allocator.add_merit(_freebie_state(), merit).state

        assert allocator.add_merit(state, merit).reason is RejectionReason.DUPLICATE

    def test_merit_over_balance(self) -> None:
        state = _freebie_state(freebie_dots=FreebieDots(arete=2))

        result = allocator.add_merit(state, {"id": "m1", "name": "Avatar Companion", "cost": 8})

        assert result.reason is RejectionReason.INSUFFICIENT_FREEBIES

    def test_remove_merit(self) -> None:
        state = allocator.add_merit(_freebie_state(), {"id": "m1", "name": "Lucky", "cost": 3}).state

        result = allocator.remove_merit(state, "m1")

        assert result.state.merits == []
        assert allocator.remaining_freebies(result.state) == 15

    def test_remove_unknown_merit(self) -> None:
        assert allocator.remove_merit(_freebie_state(), "nope").reason is RejectionReason.NOT_FOUND

    def test_flaw_adds_freebies(self) -> None:
        result = allocator.add_flaw(_freebie_state(), {"id": "f1", "name": "Nightmares", "cost": 4})

        assert allocator.remaining_freebies(result.state) == 19
        assert allocator.flaw_total(result.state) == 4

    def test_flaw_cap(self) -> None:
        state = allocator.add_flaw(_freebie_state(), {"id": "f1", "name": "Nightmares", "cost": 5}).state

        result = allocator.add_flaw(state, {"id": "f2", "name": "Phobia", "cost": 3})

        assert result.reason is RejectionReason.FLAW_CAP
        assert allocator.flaw_total(result.state) == 5

    def test_flaw_cap_exactly_seven(self) -> None:
        state = allocator.add_flaw(_freebie_state(), {"id": "f1", "name": "Nightmares", "cost": 5}).state

        assert allocator.add_flaw(state, {"id": "f2", "name": "Phobia", "cost": 2}).success

    def test_flaw_cannot_duplicate_merit_id(self) -> None:
        state = allocator.add_merit(_freebie_state(), {"id": "x", "name": "Lucky", "cost": 1}).state

        assert allocator.add_flaw(state, {"id": "x", "name": "Lucky", "cost": 1}).reason is RejectionReason.DUPLICATE

    def test_remove_flaw(self) -> None:
        state = allocator.add_flaw(_freebie_state(), {"id": "f1", "name": "Nightmares", "cost": 2}).state

        result = allocator.remove_flaw(state, "f1")

        assert result.success
        assert allocator.remaining_freebies(result.state) == 15

    def test_remove_spent_flaw_rejected(self) -> None:
        """Refusing the removal keeps the pool from going negative."""
        state = allocator.add_flaw(_freebie_state(), {"id": "f1", "name": "Nightmares", "cost": 4}).state
        for _ in range(4):
            state = allocator.add_freebie_dot(state, "willpower").state
        state = allocator.add_freebie_dot(state, "sphere", "mind").state
        state = allocator.add_freebie_dot(state, "arete").state
        assert allocator.remaining_freebies(state) == 4

        state = allocator.add_freebie_dot(state, "ability", "occult").state
        result = allocator.remove_flaw(state, "f1")

        assert result.reason is RejectionReason.NEGATIVE_BALANCE
        assert len(result.state.flaws) == 1

    def test_remove_unknown_flaw(self) -> None:
        assert allocator.remove_flaw(_freebie_state(), "nope").reason is RejectionReason.NOT_FOUND


class TestSpecialtiesAndIdentity:
    """Tests for specialties and free-text identity fields."""

    def test_set_and_clear_specialty(self, fresh_state: CharacterBuildState) -> None:
        state = allocator.set_specialty(fresh_state, "occult", "  Hermetic texts ").state
        assert state.specialties == {Ability.OCCULT: "Hermetic texts"}

        state = allocator.set_specialty(state, "occult", "").state
        assert state.specialties == {}

    def test_abilities_needing_specialty(self) -> None:
        state = CharacterBuildState(
            abilities={"occult": 3, "awareness": 3},
            freebie_dots={"abilities": {"occult": 1, "awareness": 1}},
            specialties={"awareness": "Auras"},
        )

        assert allocator.abilities_needing_specialty(state) == [Ability.OCCULT]

    def test_update_identity(self, fresh_state: CharacterBuildState) -> None:
        result = allocator.update_identity(fresh_state, name="Marisol", essence="Dynamic")

        assert result.state.name == "Marisol"
        assert result.state.essence == "Dynamic"
        assert result.old_value == {"name": "", "essence": ""}

    def test_update_unknown_identity_field(self, fresh_state: CharacterBuildState) -> None:
        result = allocator.update_identity(fresh_state, phase="complete")

        assert result.reason is RejectionReason.UNKNOWN_FIELD
        assert result.state.phase is Phase.BASICS


class TestPhaseGates:
    """Tests for can_proceed and phase_blockers."""

    def test_basics_needs_name(self, fresh_state: CharacterBuildState) -> None:
        assert allocator.can_proceed(fresh_state) is False
        assert allocator.phase_blockers(fresh_state) == ["Give your character a name"]

        named = fresh_state.model_copy(update={"name": "   "})
        assert allocator.can_proceed(named) is False

        named = fresh_state.model_copy(update={"name": "Marisol"})
        assert allocator.can_proceed(named) is True
        assert allocator.phase_blockers(named) == []

    def test_priorities_need_all_three_tiers(self, fresh_state: CharacterBuildState) -> None:
        state = allocator.set_attribute_priority(fresh_state, "physical", "primary").state

        assert allocator.can_proceed(state, "attributes-priority") is False
        assert allocator.phase_blockers(state, "attributes-priority") == [
            "Assign a priority to: social, mental"
        ]

    def test_priorities_complete(self, prioritized_state: CharacterBuildState) -> None:
        assert allocator.can_proceed(prioritized_state, Phase.ATTRIBUTES_PRIORITY)
        assert allocator.can_proceed(prioritized_state, Phase.ABILITIES_PRIORITY)

    def test_assign_needs_every_dot(self, prioritized_state: CharacterBuildState) -> None:
        blockers = allocator.phase_blockers(prioritized_state, "attributes-assign")

        assert allocator.can_proceed(prioritized_state, "attributes-assign") is False
        assert blockers == [
            "7 physical dot(s) left to spend",
            "5 social dot(s) left to spend",
            "3 mental dot(s) left to spend",
        ]

    def test_overspent_group_asks_for_removal(self, prioritized_state: CharacterBuildState) -> None:
        state = allocator.set_attribute(prioritized_state, "strength", 5).state
        state = allocator.set_attribute_priority(state, "physical", "tertiary").state

        assert allocator.attribute_points_remaining(state, "physical") == -1
        assert allocator.phase_blockers(state, "attributes-assign") == [
            "Remove 1 physical dot(s)",
            "5 social dot(s) left to spend",
        ]

    def test_spheres_need_affinity(self, fresh_state: CharacterBuildState) -> None:
        state = allocator.set_sphere(fresh_state, "forces", 3).state
        state = allocator.set_sphere(state, "prime", 3).state

        assert allocator.can_proceed(state, "spheres") is False
        assert allocator.phase_blockers(state, "spheres") == ["Choose an affinity sphere"]

    def test_freebies_must_be_spent(self) -> None:
        state = _freebie_state()

        assert allocator.can_proceed(state) is False
        assert allocator.phase_blockers(state) == ["15 freebie point(s) left to spend"]

    def test_complete_never_proceeds(self) -> None:
        state = CharacterBuildState(phase=Phase.COMPLETE)

        assert allocator.can_proceed(state) is False
