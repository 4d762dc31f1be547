"""Enumeration types for The Paradox Wheel.

Closed vocabularies for character creation: priority tiers, attribute and
ability groups, the traits themselves, spheres, backgrounds, wizard phases,
freebie categories, and the reasons an allocation can be rejected.
"""

from __future__ import annotations

from enum import StrEnum


class Priority(StrEnum):
    """Priority tier assigned to an attribute or ability category.

    "No priority" is represented by ``None`` wherever a tier is optional.
    """

    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"


# =============================================================================
# Attributes
# =============================================================================


class AttributeCategory(StrEnum):
    """The three attribute groups."""

    PHYSICAL = "physical"
    SOCIAL = "social"
    MENTAL = "mental"

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        """Attributes belonging to this group, in sheet order."""
        return tuple(a for a in Attribute if a.category is self)


class Attribute(StrEnum):
    """The nine attributes. Each starts with one free dot."""

    # Physical
    STRENGTH = "strength"
    DEXTERITY = "dexterity"
    STAMINA = "stamina"

    # Social
    CHARISMA = "charisma"
    MANIPULATION = "manipulation"
    APPEARANCE = "appearance"

    # Mental
    PERCEPTION = "perception"
    INTELLIGENCE = "intelligence"
    WITS = "wits"

    @property
    def category(self) -> AttributeCategory:
        """Get the group this attribute belongs to."""
        return _ATTRIBUTE_CATEGORIES[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


_ATTRIBUTE_CATEGORIES: dict[Attribute, AttributeCategory] = {
    Attribute.STRENGTH: AttributeCategory.PHYSICAL,
    Attribute.DEXTERITY: AttributeCategory.PHYSICAL,
    Attribute.STAMINA: AttributeCategory.PHYSICAL,
    Attribute.CHARISMA: AttributeCategory.SOCIAL,
    Attribute.MANIPULATION: AttributeCategory.SOCIAL,
    Attribute.APPEARANCE: AttributeCategory.SOCIAL,
    Attribute.PERCEPTION: AttributeCategory.MENTAL,
    Attribute.INTELLIGENCE: AttributeCategory.MENTAL,
    Attribute.WITS: AttributeCategory.MENTAL,
}


# =============================================================================
# Abilities
# =============================================================================


class AbilityCategory(StrEnum):
    """The three ability groups."""

    TALENTS = "talents"
    SKILLS = "skills"
    KNOWLEDGES = "knowledges"

    @property
    def abilities(self) -> tuple[Ability, ...]:
        """Abilities belonging to this group, in sheet order."""
        return _ABILITY_GROUPS[self]


class Ability(StrEnum):
    """The 33 abilities of the M20 character sheet."""

    # Talents
    ALERTNESS = "alertness"
    ART = "art"
    ATHLETICS = "athletics"
    AWARENESS = "awareness"
    BRAWL = "brawl"
    EMPATHY = "empathy"
    EXPRESSION = "expression"
    INTIMIDATION = "intimidation"
    LEADERSHIP = "leadership"
    STREETWISE = "streetwise"
    SUBTERFUGE = "subterfuge"

    # Skills
    CRAFT = "craft"
    DRIVE = "drive"
    ETIQUETTE = "etiquette"
    FIREARMS = "firearms"
    MARTIAL_ARTS = "martial_arts"
    MEDITATION = "meditation"
    MELEE = "melee"
    RESEARCH = "research"
    STEALTH = "stealth"
    SURVIVAL = "survival"
    TECHNOLOGY = "technology"

    # Knowledges
    ACADEMICS = "academics"
    COMPUTER = "computer"
    COSMOLOGY = "cosmology"
    ENIGMAS = "enigmas"
    ESOTERICA = "esoterica"
    INVESTIGATION = "investigation"
    LAW = "law"
    MEDICINE = "medicine"
    OCCULT = "occult"
    POLITICS = "politics"
    SCIENCE = "science"

    @property
    def category(self) -> AbilityCategory:
        """Get the group this ability belongs to."""
        return _ABILITY_CATEGORIES[self]

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


_ABILITY_GROUPS: dict[AbilityCategory, tuple[Ability, ...]] = {
    AbilityCategory.TALENTS: (
        Ability.ALERTNESS,
        Ability.ART,
        Ability.ATHLETICS,
        Ability.AWARENESS,
        Ability.BRAWL,
        Ability.EMPATHY,
        Ability.EXPRESSION,
        Ability.INTIMIDATION,
        Ability.LEADERSHIP,
        Ability.STREETWISE,
        Ability.SUBTERFUGE,
    ),
    AbilityCategory.SKILLS: (
        Ability.CRAFT,
        Ability.DRIVE,
        Ability.ETIQUETTE,
        Ability.FIREARMS,
        Ability.MARTIAL_ARTS,
        Ability.MEDITATION,
        Ability.MELEE,
        Ability.RESEARCH,
        Ability.STEALTH,
        Ability.SURVIVAL,
        Ability.TECHNOLOGY,
    ),
    AbilityCategory.KNOWLEDGES: (
        Ability.ACADEMICS,
        Ability.COMPUTER,
        Ability.COSMOLOGY,
        Ability.ENIGMAS,
        Ability.ESOTERICA,
        Ability.INVESTIGATION,
        Ability.LAW,
        Ability.MEDICINE,
        Ability.OCCULT,
        Ability.POLITICS,
        Ability.SCIENCE,
    ),
}

_ABILITY_CATEGORIES: dict[Ability, AbilityCategory] = {
    ability: category
    for category, members in _ABILITY_GROUPS.items()
    for ability in members
}


# =============================================================================
# Spheres & Backgrounds
# =============================================================================


class Sphere(StrEnum):
    """The nine Spheres of magic as rated on a character sheet.

    Reference rotes store spheres by display name (including the Technocracy
    names); see ``paradox_wheel.models.traditions``.
    """

    CORRESPONDENCE = "correspondence"
    ENTROPY = "entropy"
    FORCES = "forces"
    LIFE = "life"
    MATTER = "matter"
    MIND = "mind"
    PRIME = "prime"
    SPIRIT = "spirit"
    TIME = "time"

    @property
    def display_name(self) -> str:
        """Get the capitalized sphere name used in rote data."""
        return self.value.capitalize()


class Background(StrEnum):
    """Backgrounds available at character creation (M20 core list)."""

    ALLIES = "allies"
    ALTERNATE_IDENTITY = "alternate_identity"
    ARCANE = "arcane"
    AVATAR = "avatar"
    BACKUP = "backup"
    BLESSING = "blessing"
    CERTIFICATION = "certification"
    CHANTRY = "chantry"
    CONTACTS = "contacts"
    CULT = "cult"
    DEMESNE = "demesne"
    DESTINY = "destiny"
    DREAM = "dream"
    ENHANCEMENT = "enhancement"
    FAME = "fame"
    FAMILIAR = "familiar"
    INFLUENCE = "influence"
    LIBRARY = "library"
    MENTOR = "mentor"
    NODE = "node"
    PATRON = "patron"
    RANK = "rank"
    REQUISITIONS = "requisitions"
    RESOURCES = "resources"
    RETAINERS = "retainers"
    SANCTUM = "sanctum"
    SECRET_WEAPONS = "secret_weapons"
    SPIES = "spies"
    STATUS = "status"
    TOTEM = "totem"
    WONDER = "wonder"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


# =============================================================================
# Wizard
# =============================================================================


class Phase(StrEnum):
    """Ordered phases of the character creation wizard."""

    BASICS = "basics"
    ATTRIBUTES_PRIORITY = "attributes-priority"
    ATTRIBUTES_ASSIGN = "attributes-assign"
    ABILITIES_PRIORITY = "abilities-priority"
    ABILITIES_ASSIGN = "abilities-assign"
    SPHERES = "spheres"
    BACKGROUNDS = "backgrounds"
    FREEBIES = "freebies"
    COMPLETE = "complete"

    @property
    def label(self) -> str:
        """Human-readable phase title."""
        return _PHASE_LABELS[self]


_PHASE_LABELS: dict[Phase, str] = {
    Phase.BASICS: "Concept & Identity",
    Phase.ATTRIBUTES_PRIORITY: "Prioritize Attributes",
    Phase.ATTRIBUTES_ASSIGN: "Assign Attributes",
    Phase.ABILITIES_PRIORITY: "Prioritize Abilities",
    Phase.ABILITIES_ASSIGN: "Assign Abilities",
    Phase.SPHERES: "Spheres",
    Phase.BACKGROUNDS: "Backgrounds",
    Phase.FREEBIES: "Freebie Points",
    Phase.COMPLETE: "Complete",
}


class FreebieCategory(StrEnum):
    """Trait categories that freebie points can raise."""

    ATTRIBUTE = "attribute"
    ABILITY = "ability"
    SPHERE = "sphere"
    BACKGROUND = "background"
    ARETE = "arete"
    WILLPOWER = "willpower"

    @property
    def is_scalar(self) -> bool:
        """Arete and Willpower are single counters rather than maps."""
        return self in (FreebieCategory.ARETE, FreebieCategory.WILLPOWER)


# =============================================================================
# Reference Data
# =============================================================================


class MeritKind(StrEnum):
    """Merits cost freebie points, flaws give them back."""

    MERIT = "merit"
    FLAW = "flaw"


class BackgroundSubtype(StrEnum):
    """Reference catalogue split for backgrounds."""

    GENERAL = "general"
    MAGE = "mage"


class RejectionReason(StrEnum):
    """Why an allocation or phase transition was refused."""

    OUT_OF_RANGE = "out_of_range"
    BUDGET_EXCEEDED = "budget_exceeded"
    AFFINITY_FLOOR = "affinity_floor"
    TRAIT_CAP = "trait_cap"
    INSUFFICIENT_FREEBIES = "insufficient_freebies"
    NOTHING_TO_REMOVE = "nothing_to_remove"
    FLAW_CAP = "flaw_cap"
    NEGATIVE_BALANCE = "negative_balance"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    UNKNOWN_FIELD = "unknown_field"
    PHASE_INCOMPLETE = "phase_incomplete"
    PHASE_TERMINAL = "phase_terminal"
    PHASE_INITIAL = "phase_initial"


__all__ = [
    "Priority",
    "AttributeCategory",
    "Attribute",
    "AbilityCategory",
    "Ability",
    "Sphere",
    "Background",
    "Phase",
    "FreebieCategory",
    "MeritKind",
    "BackgroundSubtype",
    "RejectionReason",
]
