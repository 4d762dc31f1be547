"""Tests for the character build state model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from paradox_wheel.models.build import CharacterBuildState, FreebieDots, MeritSelection
from paradox_wheel.models.enums import (
    Ability,
    AbilityCategory,
    Attribute,
    AttributeCategory,
    Background,
    FreebieCategory,
    Phase,
    Sphere,
)


class TestCharacterBuildStateDefaults:
    """Tests for a fresh build state."""

    def test_starts_at_basics(self) -> None:
        state = CharacterBuildState()

        assert state.phase is Phase.BASICS
        assert state.name == ""

    def test_attributes_start_at_one(self) -> None:
        state = CharacterBuildState()

        assert len(state.attributes) == 9
        assert all(rating == 1 for rating in state.attributes.values())

    def test_abilities_and_spheres_start_at_zero(self) -> None:
        state = CharacterBuildState()

        assert len(state.abilities) == 33
        assert set(state.abilities.values()) == {0}
        assert set(state.spheres.values()) == {0}
        assert state.affinity_sphere is None

    def test_no_priorities_assigned(self) -> None:
        state = CharacterBuildState()

        assert set(state.attribute_priorities) == set(AttributeCategory)
        assert set(state.ability_priorities) == set(AbilityCategory)
        assert set(state.attribute_priorities.values()) == {None}
        assert set(state.ability_priorities.values()) == {None}

    def test_base_arete_and_willpower(self) -> None:
        state = CharacterBuildState()

        assert state.arete == 1
        assert state.willpower == 5
        assert state.backgrounds == {}
        assert state.merits == []
        assert state.flaws == []

    def test_defaults_are_not_shared(self) -> None:
        """Each state gets its own maps."""
        first = CharacterBuildState()
        second = CharacterBuildState()

        first.attributes[Attribute.STRENGTH] = 3

        assert second.attributes[Attribute.STRENGTH] == 1


class TestCharacterBuildStateValidation:
    """Tests for build state validators."""

    def test_partial_maps_are_filled(self) -> None:
        """Missing traits take their starting value."""
        state = CharacterBuildState(
            attributes={"strength": 3},
            abilities={"occult": 2},
            spheres={"forces": 1},
        )

        assert state.attributes[Attribute.STRENGTH] == 3
        assert state.attributes[Attribute.WITS] == 1
        assert state.abilities[Ability.OCCULT] == 2
        assert state.abilities[Ability.BRAWL] == 0
        assert state.spheres[Sphere.FORCES] == 1
        assert state.spheres[Sphere.TIME] == 0

    def test_attribute_below_one_rejected(self) -> None:
        with pytest.raises(ValidationError, match="at least 1"):
            CharacterBuildState(attributes={"strength": 0})

    def test_ability_above_three_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CharacterBuildState(abilities={"occult": 4})

    def test_sphere_above_three_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CharacterBuildState(spheres={"prime": 4})

    def test_background_above_five_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CharacterBuildState(backgrounds={"node": 6})

    def test_zero_backgrounds_are_dropped(self) -> None:
        """A zero-rated background and a missing one are the same thing."""
        state = CharacterBuildState(backgrounds={"avatar": 2, "node": 0})

        assert state.backgrounds == {Background.AVATAR: 2}

    def test_unknown_trait_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CharacterBuildState(attributes={"luck": 2})

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CharacterBuildState(hit_points=10)

    def test_json_round_trip(self) -> None:
        """A sheet dumped to JSON validates back to an equal state."""
        state = CharacterBuildState(
            name="Marisol",
            phase=Phase.SPHERES,
            attribute_priorities={"physical": "primary"},
            attributes={"strength": 4},
            affinity_sphere="life",
            backgrounds={"avatar": 3},
            freebie_dots={"arete": 1, "abilities": {"occult": 1}},
            specialties={"occult": "Hedge lore"},
            merits=[{"id": "m1", "name": "Acute Senses", "cost": 1}],
        )

        restored = CharacterBuildState.model_validate(state.model_dump(mode="json"))

        assert restored == state


class TestCharacterBuildStateTotals:
    """Tests for base + freebie totals."""

    def test_totals_include_freebie_dots(self) -> None:
        state = CharacterBuildState(
            attributes={"strength": 3},
            abilities={"occult": 3},
            spheres={"life": 2},
            backgrounds={"avatar": 2},
            freebie_dots=FreebieDots(
                attributes={Attribute.STRENGTH: 1},
                abilities={Ability.OCCULT: 2},
                spheres={Sphere.LIFE: 1},
                backgrounds={Background.AVATAR: 3},
                arete=2,
                willpower=1,
            ),
        )

        assert state.attribute_total(Attribute.STRENGTH) == 4
        assert state.ability_total(Ability.OCCULT) == 5
        assert state.sphere_total(Sphere.LIFE) == 3
        assert state.background_total(Background.AVATAR) == 5
        assert state.arete_total == 3
        assert state.willpower_total == 6

    def test_background_total_without_base(self) -> None:
        state = CharacterBuildState(freebie_dots={"backgrounds": {"node": 2}})

        assert state.background_total(Background.NODE) == 2
        assert state.background_total(Background.LIBRARY) == 0

    def test_merit_and_flaw_totals(self) -> None:
        state = CharacterBuildState(
            merits=[
                MeritSelection(id="m1", name="Acute Senses", cost=1),
                MeritSelection(id="m2", name="Lucky", cost=3),
            ],
            flaws=[MeritSelection(id="f1", name="Nightmares", cost=1)],
        )

        assert state.merit_total == 4
        assert state.flaw_total == 1

    def test_identity(self) -> None:
        state = CharacterBuildState(name="Marisol", affiliation="Verbena")

        identity = state.identity()

        assert identity["name"] == "Marisol"
        assert identity["affiliation"] == "Verbena"
        assert set(identity) == set(CharacterBuildState.IDENTITY_FIELDS)


class TestFreebieDots:
    """Tests for the freebie dot ledger."""

    def test_empty_spends_nothing(self) -> None:
        assert FreebieDots().spent() == 0

    def test_weighted_spend(self) -> None:
        """Each category costs its own price per dot."""
        dots = FreebieDots(
            attributes={Attribute.WITS: 1},
            abilities={Ability.OCCULT: 2},
            spheres={Sphere.MIND: 1},
            backgrounds={Background.NODE: 3},
            arete=1,
            willpower=2,
        )

        assert dots.spent() == 5 + 2 * 2 + 7 + 3 * 1 + 4 + 2 * 1

    def test_zero_counters_dropped(self) -> None:
        dots = FreebieDots(abilities={"occult": 0, "law": 1})

        assert dots.abilities == {Ability.LAW: 1}

    def test_get(self) -> None:
        dots = FreebieDots(spheres={"prime": 2}, arete=1, willpower=3)

        assert dots.get(FreebieCategory.SPHERE, Sphere.PRIME) == 2
        assert dots.get(FreebieCategory.SPHERE, Sphere.TIME) == 0
        assert dots.get(FreebieCategory.ARETE) == 1
        assert dots.get(FreebieCategory.WILLPOWER) == 3

    def test_counter_map_scalar_category(self) -> None:
        with pytest.raises(KeyError):
            FreebieDots().counter_map(FreebieCategory.ARETE)

    def test_negative_scalar_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FreebieDots(arete=-1)


class TestMeritSelection:
    """Tests for merit and flaw picks."""

    def test_frozen(self) -> None:
        merit = MeritSelection(id="m1", name="Lucky", cost=3)

        with pytest.raises(ValidationError):
            merit.cost = 1  # type: ignore[misc]

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MeritSelection(id="", name="Lucky", cost=3)

    def test_negative_cost_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MeritSelection(id="m1", name="Lucky", cost=-2)
