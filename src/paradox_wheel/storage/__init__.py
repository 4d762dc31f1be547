"""Storage module for Paradox Wheel persistence.

Provides SQLite-based storage for:
- Reference data (rotes, merits & flaws, backgrounds, resources, mage groups)
- Saved characters and their assigned rotes
- Editable site content
"""

from paradox_wheel.storage.database import (
    CONTENT_DEFAULTS,
    Database,
    get_database,
    reset_database,
)
from paradox_wheel.storage.records import (
    BackgroundRecord,
    CharacterRecord,
    CharacterRoteRecord,
    MageGroupRecord,
    MeritRecord,
    ResourceRecord,
    RoteRecord,
)
from paradox_wheel.storage.seed import SAMPLE_ROTES

__all__ = [
    "CONTENT_DEFAULTS",
    "Database",
    "get_database",
    "reset_database",
    "BackgroundRecord",
    "CharacterRecord",
    "CharacterRoteRecord",
    "MageGroupRecord",
    "MeritRecord",
    "ResourceRecord",
    "RoteRecord",
    "SAMPLE_ROTES",
]
