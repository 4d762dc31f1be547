"""The Paradox Wheel - Mage: The Ascension reference and character creator.

A rules engine for M20 character creation with a grimoire of rotes, a
REST API and a Streamlit interface.

RULES-FIRST ARCHITECTURE:
- Allocation rules are pure functions returning an AllocationResult
- A rejected change never mutates the build; it explains itself instead
- The wizard cannot advance until the current phase's budget is spent

Example:
    >>> from paradox_wheel import CharacterBuilder
    >>>
    >>> builder = CharacterBuilder()
    >>> result = builder.update_identity(name="Mara Voss", affiliation="Verbena")
    >>> builder.advance().success
    True
    >>> builder.set_attribute_priority("physical", "primary").success
    True

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 build state, enums and faction reference tables.
    engine: Point allocation, phase sequencing, builder and rote search.
    storage: SQLite persistence for reference data and characters.
    api: FastAPI REST service.
    ui: Streamlit interface.
"""

from __future__ import annotations

# Core
from paradox_wheel.core.config import Settings, get_settings
from paradox_wheel.core.exceptions import ParadoxWheelError
from paradox_wheel.core.logging import configure_logging, get_logger

# Build state
from paradox_wheel.models.build import CharacterBuildState, FreebieDots, MeritSelection
from paradox_wheel.models.enums import Phase, RejectionReason

# Engine
from paradox_wheel.engine.allocator import AllocationResult
from paradox_wheel.engine.builder import CharacterBuilder
from paradox_wheel.engine.search import search_rotes

# Storage
from paradox_wheel.storage.database import Database, get_database


__version__ = "0.1.0"
__author__ = "The Paradox Wheel Team"
__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Core
    "ParadoxWheelError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Build state
    "CharacterBuildState",
    "FreebieDots",
    "MeritSelection",
    "Phase",
    "RejectionReason",
    # Engine
    "AllocationResult",
    "CharacterBuilder",
    "search_rotes",
    # Storage
    "Database",
    "get_database",
]
