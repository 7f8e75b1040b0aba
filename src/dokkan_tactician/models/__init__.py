"""Pydantic V2 data model for Dokkan Tactician.

Submodules:
    enums: Card attributes, slot roles and mechanics badges
    character: Character and CharacterStats
    roster: The seven-slot Roster
    analysis: TeamAnalysis and GenerationResult

Example:
    >>> from dokkan_tactician.models import Roster, TeamAnalysis
    >>> roster = Roster()
    >>> roster.is_empty
    True
"""

from __future__ import annotations

from dokkan_tactician.models.analysis import GenerationPhase, GenerationResult, TeamAnalysis
from dokkan_tactician.models.character import Character, CharacterStats
from dokkan_tactician.models.enums import MechanicBadge, Rarity, SlotRole, UnitClass, UnitType
from dokkan_tactician.models.roster import Roster


__all__ = [
    # Enums
    "UnitType",
    "UnitClass",
    "Rarity",
    "SlotRole",
    "MechanicBadge",
    # Entities
    "Character",
    "CharacterStats",
    "Roster",
    # Results
    "TeamAnalysis",
    "GenerationPhase",
    "GenerationResult",
]
