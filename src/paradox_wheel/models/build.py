"""Character build state threaded through the creation wizard.

``CharacterBuildState`` is a plain typed record. It holds no rules of its own;
the allocator in ``paradox_wheel.engine.allocator`` decides which changes are
legal and returns new states. Sparse maps (backgrounds, freebie dots) treat an
absent key and a zero value identically.

Example:
    >>> state = CharacterBuildState(name="Marisol")
    >>> state.attributes[Attribute.STRENGTH]
    1
    >>> state.phase
    <Phase.BASICS: 'basics'>
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from paradox_wheel.core.constants import (
    ABILITY_CREATION_MAX,
    ATTRIBUTE_BASE,
    BASE_ARETE,
    BASE_WILLPOWER,
    BACKGROUND_MAX,
    FREEBIE_COSTS,
    SPHERE_CREATION_MAX,
)
from paradox_wheel.models.enums import (
    Ability,
    AbilityCategory,
    Attribute,
    AttributeCategory,
    Background,
    FreebieCategory,
    Phase,
    Priority,
    Sphere,
)


# =============================================================================
# Nested Records
# =============================================================================


class MeritSelection(BaseModel):
    """A merit or flaw picked during the freebie phase."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Catalogue id of the merit or flaw")
    name: str = Field(description="Display name")
    cost: int = Field(ge=0, description="Freebie point value")


class FreebieDots(BaseModel):
    """Dots bought with freebie points, on top of the base allocation.

    Map categories only hold positive counters. Arete and Willpower are
    plain integers.
    """

    model_config = ConfigDict(extra="forbid")

    attributes: dict[Attribute, int] = Field(default_factory=dict)
    abilities: dict[Ability, int] = Field(default_factory=dict)
    spheres: dict[Sphere, int] = Field(default_factory=dict)
    backgrounds: dict[Background, int] = Field(default_factory=dict)
    arete: int = Field(default=0, ge=0)
    willpower: int = Field(default=0, ge=0)

    @field_validator("attributes", "abilities", "spheres", "backgrounds", mode="after")
    @classmethod
    def drop_empty_counters(cls, value: dict[Any, int]) -> dict[Any, int]:
        """Absent and zero mean the same thing, so zero entries are removed."""
        return {k: v for k, v in value.items() if v > 0}

    def counter_map(self, category: FreebieCategory) -> dict[Any, int]:
        """Get the counter map for a map category.

        Raises:
            KeyError: For the scalar categories (arete, willpower).
        """
        maps: dict[FreebieCategory, dict[Any, int]] = {
            FreebieCategory.ATTRIBUTE: self.attributes,
            FreebieCategory.ABILITY: self.abilities,
            FreebieCategory.SPHERE: self.spheres,
            FreebieCategory.BACKGROUND: self.backgrounds,
        }
        return maps[category]

    def get(self, category: FreebieCategory, name: str | None = None) -> int:
        """Get the number of freebie dots bought for a trait."""
        if category is FreebieCategory.ARETE:
            return self.arete
        if category is FreebieCategory.WILLPOWER:
            return self.willpower
        return self.counter_map(category).get(name, 0)  # type: ignore[arg-type]

    def spent(self) -> int:
        """Weighted freebie cost of every dot bought."""
        return (
            sum(self.attributes.values()) * FREEBIE_COSTS["attribute"]
            + sum(self.abilities.values()) * FREEBIE_COSTS["ability"]
            + sum(self.spheres.values()) * FREEBIE_COSTS["sphere"]
            + sum(self.backgrounds.values()) * FREEBIE_COSTS["background"]
            + self.arete * FREEBIE_COSTS["arete"]
            + self.willpower * FREEBIE_COSTS["willpower"]
        )


# =============================================================================
# Build State
# =============================================================================


def _default_attributes() -> dict[Attribute, int]:
    return {attribute: ATTRIBUTE_BASE for attribute in Attribute}


def _default_abilities() -> dict[Ability, int]:
    return {ability: 0 for ability in Ability}


def _default_spheres() -> dict[Sphere, int]:
    return {sphere: 0 for sphere in Sphere}


class CharacterBuildState(BaseModel):
    """Everything the wizard knows about a character in progress.

    Attributes:
        name: Character name. Required to leave the basics phase.
        player: Player name.
        chronicle: Chronicle the character belongs to.
        nature: Personality archetype.
        demeanor: Outward archetype.
        essence: Avatar essence (Dynamic, Pattern, Primordial, Questing).
        affiliation: Tradition or Convention.
        sect: Sub-faction.
        concept: One-line character concept.
        phase: Current wizard phase.
        attribute_priorities: Tier per attribute group, ``None`` when unset.
        attributes: Base rating per attribute, starting at 1.
        ability_priorities: Tier per ability group, ``None`` when unset.
        abilities: Base rating per ability, starting at 0.
        spheres: Base rating per sphere, starting at 0.
        affinity_sphere: Sphere with a floor of one dot, once chosen.
        backgrounds: Sparse base rating per background.
        arete: Base Arete.
        willpower: Base Willpower.
        freebie_dots: Dots bought with freebie points.
        specialties: Specialty text per ability.
        merits: Merits taken, in order.
        flaws: Flaws taken, in order.
    """

    model_config = ConfigDict(extra="forbid")

    IDENTITY_FIELDS: ClassVar[tuple[str, ...]] = (
        "name",
        "player",
        "chronicle",
        "nature",
        "demeanor",
        "essence",
        "affiliation",
        "sect",
        "concept",
    )

    # Identity
    name: str = ""
    player: str = ""
    chronicle: str = ""
    nature: str = ""
    demeanor: str = ""
    essence: str = ""
    affiliation: str = ""
    sect: str = ""
    concept: str = ""

    phase: Phase = Phase.BASICS

    # Attributes
    attribute_priorities: dict[AttributeCategory, Priority | None] = Field(
        default_factory=lambda: {category: None for category in AttributeCategory}
    )
    attributes: dict[Attribute, int] = Field(default_factory=_default_attributes)

    # Abilities
    ability_priorities: dict[AbilityCategory, Priority | None] = Field(
        default_factory=lambda: {category: None for category in AbilityCategory}
    )
    abilities: dict[Ability, int] = Field(default_factory=_default_abilities)

    # Magick
    spheres: dict[Sphere, int] = Field(default_factory=_default_spheres)
    affinity_sphere: Sphere | None = None
    backgrounds: dict[Background, int] = Field(default_factory=dict)
    arete: int = BASE_ARETE
    willpower: int = BASE_WILLPOWER

    # Finishing touches
    freebie_dots: FreebieDots = Field(default_factory=FreebieDots)
    specialties: dict[Ability, str] = Field(default_factory=dict)
    merits: list[MeritSelection] = Field(default_factory=list)
    flaws: list[MeritSelection] = Field(default_factory=list)

    @field_validator("attribute_priorities", mode="after")
    @classmethod
    def fill_attribute_priorities(
        cls, value: dict[AttributeCategory, Priority | None]
    ) -> dict[AttributeCategory, Priority | None]:
        return {category: value.get(category) for category in AttributeCategory}

    @field_validator("ability_priorities", mode="after")
    @classmethod
    def fill_ability_priorities(
        cls, value: dict[AbilityCategory, Priority | None]
    ) -> dict[AbilityCategory, Priority | None]:
        return {category: value.get(category) for category in AbilityCategory}

    @field_validator("attributes", mode="after")
    @classmethod
    def validate_attributes(cls, value: dict[Attribute, int]) -> dict[Attribute, int]:
        """Fill missing attributes with the base dot and reject zero ratings."""
        filled = {attr: value.get(attr, ATTRIBUTE_BASE) for attr in Attribute}
        for attr, rating in filled.items():
            if rating < ATTRIBUTE_BASE:
                raise ValueError(f"{attr.label} must be at least {ATTRIBUTE_BASE}")
        return filled

    @field_validator("abilities", mode="after")
    @classmethod
    def validate_abilities(cls, value: dict[Ability, int]) -> dict[Ability, int]:
        filled = {ability: value.get(ability, 0) for ability in Ability}
        for ability, rating in filled.items():
            if not 0 <= rating <= ABILITY_CREATION_MAX:
                raise ValueError(f"{ability.label} must be between 0 and {ABILITY_CREATION_MAX}")
        return filled

    @field_validator("spheres", mode="after")
    @classmethod
    def validate_spheres(cls, value: dict[Sphere, int]) -> dict[Sphere, int]:
        filled = {sphere: value.get(sphere, 0) for sphere in Sphere}
        for sphere, rating in filled.items():
            if not 0 <= rating <= SPHERE_CREATION_MAX:
                raise ValueError(
                    f"{sphere.display_name} must be between 0 and {SPHERE_CREATION_MAX}"
                )
        return filled

    @field_validator("backgrounds", mode="after")
    @classmethod
    def validate_backgrounds(cls, value: dict[Background, int]) -> dict[Background, int]:
        for background, rating in value.items():
            if not 0 <= rating <= BACKGROUND_MAX:
                raise ValueError(f"{background.label} must be between 0 and {BACKGROUND_MAX}")
        return {k: v for k, v in value.items() if v > 0}

    # =========================================================================
    # Totals (base + freebie)
    # =========================================================================

    def attribute_total(self, attribute: Attribute) -> int:
        return self.attributes[attribute] + self.freebie_dots.attributes.get(attribute, 0)

    def ability_total(self, ability: Ability) -> int:
        return self.abilities[ability] + self.freebie_dots.abilities.get(ability, 0)

    def sphere_total(self, sphere: Sphere) -> int:
        return self.spheres[sphere] + self.freebie_dots.spheres.get(sphere, 0)

    def background_total(self, background: Background) -> int:
        return self.backgrounds.get(background, 0) + self.freebie_dots.backgrounds.get(
            background, 0
        )

    @property
    def arete_total(self) -> int:
        return self.arete + self.freebie_dots.arete

    @property
    def willpower_total(self) -> int:
        return self.willpower + self.freebie_dots.willpower

    @property
    def merit_total(self) -> int:
        return sum(merit.cost for merit in self.merits)

    @property
    def flaw_total(self) -> int:
        return sum(flaw.cost for flaw in self.flaws)

    def identity(self) -> dict[str, str]:
        """Get the free-text identity fields as a dictionary."""
        return {field: getattr(self, field) for field in self.IDENTITY_FIELDS}


__all__ = [
    "MeritSelection",
    "FreebieDots",
    "CharacterBuildState",
]
