"""Stateful character builder for UI layers.

``CharacterBuilder`` wraps the pure allocator and sequencer functions around a
single current state, keeps an undo/redo history of accepted states, and turns
a finished build into the payload stored as a ``Character`` record.

Example:
    >>> builder = CharacterBuilder()
    >>> builder.update_identity(name="Marisol", affiliation="Verbena").success
    True
    >>> builder.advance().state.phase
    <Phase.ATTRIBUTES_PRIORITY: 'attributes-priority'>
    >>> builder.undo()
    True
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from paradox_wheel.core.constants import MAX_HISTORY
from paradox_wheel.core.exceptions import InvalidBuildStateError
from paradox_wheel.core.logging import get_logger
from paradox_wheel.engine import allocator, sequencer
from paradox_wheel.engine.allocator import AllocationResult
from paradox_wheel.models.build import CharacterBuildState, MeritSelection
from paradox_wheel.models.enums import Background, Phase


logger = get_logger(__name__)


class StateHistory:
    """Undo/redo stack of build states."""

    def __init__(self, max_history: int = MAX_HISTORY) -> None:
        self._history: list[CharacterBuildState] = []
        self._current_index: int = -1
        self._max_history = max_history

    def push(self, state: CharacterBuildState) -> None:
        """Add a new state, truncating any redo history."""
        self._history = self._history[: self._current_index + 1]
        self._history.append(state)
        self._current_index += 1

        if len(self._history) > self._max_history:
            self._history.pop(0)
            self._current_index -= 1

    def undo(self) -> CharacterBuildState | None:
        """Move back in history."""
        if self.can_undo:
            self._current_index -= 1
            return self._history[self._current_index]
        return None

    def redo(self) -> CharacterBuildState | None:
        """Move forward in history."""
        if self.can_redo:
            self._current_index += 1
            return self._history[self._current_index]
        return None

    def clear(self) -> None:
        self._history = []
        self._current_index = -1

    @property
    def can_undo(self) -> bool:
        return self._current_index > 0

    @property
    def can_redo(self) -> bool:
        return self._current_index < len(self._history) - 1

    def __len__(self) -> int:
        return len(self._history)


class CharacterBuilder:
    """A character build in progress, with history.

    Every mutating method delegates to the matching allocator or sequencer
    function, keeps the new state only when the result was accepted, and
    returns the ``AllocationResult`` unchanged so the caller can show its
    message.

    Attributes:
        history: Accepted states, oldest first.
    """

    def __init__(
        self,
        state: CharacterBuildState | None = None,
        *,
        max_history: int = MAX_HISTORY,
    ) -> None:
        """Initialize the builder.

        Args:
            state: Starting state. Defaults to a fresh build.
            max_history: Number of states kept for undo.
        """
        self._state = state or CharacterBuildState()
        self.history = StateHistory(max_history)
        self.history.push(self._state)

    @classmethod
    def from_sheet(cls, sheet: dict[str, Any]) -> CharacterBuilder:
        """Rebuild a builder from a stored character sheet."""
        return cls(CharacterBuildState.model_validate(sheet))

    @property
    def state(self) -> CharacterBuildState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def is_complete(self) -> bool:
        return self._state.phase is Phase.COMPLETE

    # =========================================================================
    # Applying Operations
    # =========================================================================

    def apply(
        self,
        operation: Callable[..., AllocationResult],
        *args: Any,
        **kwargs: Any,
    ) -> AllocationResult:
        """Run an allocator or sequencer function against the current state.

        Args:
            operation: A function taking the state as its first argument.
            *args: Remaining positional arguments for the operation.
            **kwargs: Keyword arguments for the operation.

        Returns:
            The operation's result. The builder's state only changes when the
            result is a success.
        """
        result = operation(self._state, *args, **kwargs)
        if result.success:
            self._state = result.state
            self.history.push(result.state)
        return result

    def set_attribute_priority(self, category: str, tier: str | None) -> AllocationResult:
        return self.apply(allocator.set_attribute_priority, category, tier)

    def set_ability_priority(self, category: str, tier: str | None) -> AllocationResult:
        return self.apply(allocator.set_ability_priority, category, tier)

    def set_attribute(self, name: str, value: int) -> AllocationResult:
        return self.apply(allocator.set_attribute, name, value)

    def set_ability(self, name: str, value: int) -> AllocationResult:
        return self.apply(allocator.set_ability, name, value)

    def set_sphere(self, name: str, value: int) -> AllocationResult:
        return self.apply(allocator.set_sphere, name, value)

    def set_affinity_sphere(self, name: str) -> AllocationResult:
        return self.apply(allocator.set_affinity_sphere, name)

    def set_background(self, name: str, value: int) -> AllocationResult:
        return self.apply(allocator.set_background, name, value)

    def add_freebie_dot(self, category: str, name: str | None = None) -> AllocationResult:
        return self.apply(allocator.add_freebie_dot, category, name)

    def remove_freebie_dot(self, category: str, name: str | None = None) -> AllocationResult:
        return self.apply(allocator.remove_freebie_dot, category, name)

    def add_merit(self, merit: MeritSelection | dict[str, Any]) -> AllocationResult:
        return self.apply(allocator.add_merit, merit)

    def remove_merit(self, merit_id: str) -> AllocationResult:
        return self.apply(allocator.remove_merit, merit_id)

    def add_flaw(self, flaw: MeritSelection | dict[str, Any]) -> AllocationResult:
        return self.apply(allocator.add_flaw, flaw)

    def remove_flaw(self, flaw_id: str) -> AllocationResult:
        return self.apply(allocator.remove_flaw, flaw_id)

    def set_specialty(self, ability: str, text: str) -> AllocationResult:
        return self.apply(allocator.set_specialty, ability, text)

    def update_identity(self, **fields: str) -> AllocationResult:
        return self.apply(allocator.update_identity, **fields)

    def advance(self) -> AllocationResult:
        result = self.apply(sequencer.advance)
        if result.success:
            logger.info("Wizard advanced", character=self._state.name, phase=self.phase.value)
        return result

    def retreat(self) -> AllocationResult:
        return self.apply(sequencer.retreat)

    # =========================================================================
    # Read-only Views
    # =========================================================================

    @property
    def remaining_freebies(self) -> int:
        return allocator.remaining_freebies(self._state)

    def can_proceed(self) -> bool:
        return allocator.can_proceed(self._state)

    def blockers(self) -> list[str]:
        return allocator.phase_blockers(self._state)

    # =========================================================================
    # History
    # =========================================================================

    def undo(self) -> bool:
        """Step back to the previous accepted state.

        Returns:
            True if there was a state to return to.
        """
        previous = self.history.undo()
        if previous is None:
            return False
        self._state = previous
        return True

    def redo(self) -> bool:
        """Re-apply the state undone last."""
        following = self.history.redo()
        if following is None:
            return False
        self._state = following
        return True

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def reset(self) -> None:
        """Discard the build and start over with a fresh state."""
        self._state = CharacterBuildState()
        self.history.clear()
        self.history.push(self._state)
        logger.info("Character builder reset")

    # =========================================================================
    # Finalizing
    # =========================================================================

    def to_character_payload(self) -> dict[str, Any]:
        """Turn a finished build into the fields of a stored character.

        Returns:
            Dictionary with ``name``, ``faction``, ``concept``, ``arete``,
            ``avatar``, ``essence`` and the full ``sheet``.

        Raises:
            InvalidBuildStateError: If the wizard has not reached ``complete``.
        """
        state = self._state
        if state.phase is not Phase.COMPLETE:
            raise InvalidBuildStateError(
                "Character creation is not finished",
                phase=state.phase.value,
            )

        avatar_rating = state.background_total(Background.AVATAR)
        return {
            "name": state.name,
            "faction": state.affiliation,
            "concept": state.concept or None,
            "arete": state.arete_total,
            "avatar": f"Avatar {avatar_rating}" if avatar_rating else None,
            "essence": state.essence or None,
            "sheet": state.model_dump(mode="json"),
        }


__all__ = [
    "StateHistory",
    "CharacterBuilder",
]
