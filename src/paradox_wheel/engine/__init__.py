"""Rules engine for The Paradox Wheel.

Modules:
    allocator: Pure point-allocation rules returning AllocationResult
    sequencer: Wizard phase transitions
    builder: Stateful builder with undo/redo for UIs
    search: Rote search and catalogue filtering
"""

from __future__ import annotations

from paradox_wheel.engine.allocator import (
    AllocationResult,
    abilities_needing_specialty,
    ability_points_remaining,
    add_flaw,
    add_freebie_dot,
    add_merit,
    attribute_points_remaining,
    background_points_remaining,
    can_proceed,
    flaw_total,
    phase_blockers,
    remaining_freebies,
    remove_flaw,
    remove_freebie_dot,
    remove_merit,
    set_ability,
    set_ability_priority,
    set_affinity_sphere,
    set_attribute,
    set_attribute_priority,
    set_background,
    set_specialty,
    set_sphere,
    sphere_points_remaining,
    update_identity,
)
from paradox_wheel.engine.builder import CharacterBuilder, StateHistory
from paradox_wheel.engine.search import (
    filter_backgrounds,
    filter_merits,
    group_by_category,
    parse_sphere_filter,
    search_rotes,
)
from paradox_wheel.engine.sequencer import (
    PHASE_ORDER,
    advance,
    next_phase,
    phase_index,
    previous_phase,
    retreat,
)


__all__ = [
    # Allocator
    "AllocationResult",
    "abilities_needing_specialty",
    "ability_points_remaining",
    "add_flaw",
    "add_freebie_dot",
    "add_merit",
    "attribute_points_remaining",
    "background_points_remaining",
    "can_proceed",
    "flaw_total",
    "phase_blockers",
    "remaining_freebies",
    "remove_flaw",
    "remove_freebie_dot",
    "remove_merit",
    "set_ability",
    "set_ability_priority",
    "set_affinity_sphere",
    "set_attribute",
    "set_attribute_priority",
    "set_background",
    "set_specialty",
    "set_sphere",
    "sphere_points_remaining",
    "update_identity",
    # Sequencer
    "PHASE_ORDER",
    "advance",
    "retreat",
    "next_phase",
    "previous_phase",
    "phase_index",
    # Builder
    "CharacterBuilder",
    "StateHistory",
    # Search
    "search_rotes",
    "parse_sphere_filter",
    "filter_merits",
    "filter_backgrounds",
    "group_by_category",
]
