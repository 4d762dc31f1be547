"""Phase sequencer for the character creation wizard.

A linear state machine over ``Phase``. Forward moves are gated by
``can_proceed``; backward moves are always allowed (except from the first
phase) and keep every value already entered.
"""

from __future__ import annotations

from paradox_wheel.core.logging import get_logger
from paradox_wheel.engine.allocator import (
    AllocationResult,
    can_proceed,
    phase_blockers,
)
from paradox_wheel.models.build import CharacterBuildState
from paradox_wheel.models.enums import Phase, RejectionReason


logger = get_logger(__name__)

PHASE_ORDER: tuple[Phase, ...] = tuple(Phase)
"""Wizard phases from first to last."""


def phase_index(phase: Phase | str) -> int:
    """Get the zero-based position of a phase in the wizard."""
    return PHASE_ORDER.index(Phase(phase))


def next_phase(phase: Phase | str) -> Phase | None:
    """Get the phase after ``phase``, or ``None`` from the terminal phase."""
    index = phase_index(phase)
    return PHASE_ORDER[index + 1] if index + 1 < len(PHASE_ORDER) else None


def previous_phase(phase: Phase | str) -> Phase | None:
    """Get the phase before ``phase``, or ``None`` from the first phase."""
    index = phase_index(phase)
    return PHASE_ORDER[index - 1] if index > 0 else None


def advance(state: CharacterBuildState) -> AllocationResult:
    """Move the wizard forward one phase.

    Returns:
        Rejected with ``PHASE_TERMINAL`` from ``complete``, or with
        ``PHASE_INCOMPLETE`` while the current phase's gate does not hold.
    """
    current = state.phase
    target = next_phase(current)

    if target is None:
        return AllocationResult.reject(
            state,
            RejectionReason.PHASE_TERMINAL,
            "Character creation is already complete",
            current,
            current,
        )

    if not can_proceed(state):
        blockers = phase_blockers(state) or [f"{current.label} is not finished"]
        return AllocationResult.reject(
            state,
            RejectionReason.PHASE_INCOMPLETE,
            "; ".join(blockers),
            current,
            target,
        )

    new_state = state.model_copy(update={"phase": target}, deep=True)
    logger.debug("Phase advanced", from_phase=current.value, to_phase=target.value)
    return AllocationResult.accept(new_state, f"Moved on to {target.label}", current, target)


def retreat(state: CharacterBuildState) -> AllocationResult:
    """Move the wizard back one phase, preserving all entered values."""
    current = state.phase
    target = previous_phase(current)

    if target is None:
        return AllocationResult.reject(
            state,
            RejectionReason.PHASE_INITIAL,
            "Already at the first step",
            current,
            current,
        )

    new_state = state.model_copy(update={"phase": target}, deep=True)
    logger.debug("Phase retreated", from_phase=current.value, to_phase=target.value)
    return AllocationResult.accept(new_state, f"Back to {target.label}", current, target)


__all__ = [
    "PHASE_ORDER",
    "phase_index",
    "next_phase",
    "previous_phase",
    "advance",
    "retreat",
]
