"""Enumeration types for Dokkan Tactician.

Card attributes (type, class, rarity), roster slot roles and the
mechanics badges shown on character cards.
"""

from __future__ import annotations

from enum import StrEnum


class UnitType(StrEnum):
    """The five Dokkan Battle types."""

    AGL = "AGL"
    TEQ = "TEQ"
    INT = "INT"
    STR = "STR"
    PHY = "PHY"


class UnitClass(StrEnum):
    """Super or Extreme alignment of a card."""

    SUPER = "Super"
    EXTREME = "Extreme"


class Rarity(StrEnum):
    """Card rarity tiers."""

    UR = "UR"
    LR = "LR"
    TUR = "TUR"
    EZA = "EZA"


class SlotRole(StrEnum):
    """Role of a roster slot."""

    LEADER = "leader"
    SUB = "sub"
    FRIEND = "friend"

    @property
    def label(self) -> str:
        """Display label for the slot header."""
        return self.value.capitalize()


class MechanicBadge(StrEnum):
    """Display badges derived from passive skills and links."""

    REVIVAL = "Revival"
    TRANSFORMATION = "Transformation"
    FUSION = "Fusion"

    @property
    def icon(self) -> str:
        """Emoji shown next to the badge."""
        icons: dict[MechanicBadge, str] = {
            MechanicBadge.REVIVAL: "❤️",
            MechanicBadge.TRANSFORMATION: "🔄",
            MechanicBadge.FUSION: "👥",
        }
        return icons[self]


__all__ = [
    "UnitType",
    "UnitClass",
    "Rarity",
    "SlotRole",
    "MechanicBadge",
]
