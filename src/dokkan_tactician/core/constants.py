"""Application-wide constants for Dokkan Tactician.

This module defines roster geometry, sanitizer fallback values and the
category presets offered by the auto-generation tab.
"""

from __future__ import annotations

# =============================================================================
# Roster Geometry
# =============================================================================

TEAM_SIZE = 7
"""Number of slots in a roster (leader, five subs, friend)."""

LEADER_SLOT = 0
"""Index of the leader slot."""

FRIEND_SLOT = 6
"""Index of the friend slot."""

# =============================================================================
# Sanitizer Fallbacks
# =============================================================================

HP_FALLBACK_BASE = 15000
"""Lower bound of the randomized HP used when the model omits it."""

HP_FALLBACK_SPREAD = 5000

ATK_FALLBACK_BASE = 15000
"""Lower bound of the randomized ATK used when the model omits it."""

ATK_FALLBACK_SPREAD = 5000

DEF_FALLBACK_BASE = 8000
"""Lower bound of the randomized DEF used when the model omits it."""

DEF_FALLBACK_SPREAD = 3000

LR_HP_THRESHOLD = 22000
"""Units above this HP are assumed LR when the model omits the rarity."""

GENERATED_ID_LENGTH = 8
"""Length of the base-36 token used for characters without an id."""

# =============================================================================
# Analysis
# =============================================================================

MIN_RATING = 0.0
MAX_RATING = 10.0

# =============================================================================
# External Links
# =============================================================================

WIKI_SEARCH_URL = "https://dokkan.wiki/cards?q={query}"
"""Search link template used by character cards."""

# =============================================================================
# Category Presets
# =============================================================================

POPULAR_CATEGORIES = [
    "Pure Saiyans",
    "Movie Heroes",
    "Future Saga",
    "Power of Wishes",
    "Realm of Gods",
    "Majin Buu Saga",
    "Tournament of Power",
    "Super Heroes",
    "Movie Bosses",
    "Terrifying Conquerors",
]
"""Categories offered in the auto-generation select box."""


__all__ = [
    # Roster
    "TEAM_SIZE",
    "LEADER_SLOT",
    "FRIEND_SLOT",
    # Sanitizer
    "HP_FALLBACK_BASE",
    "HP_FALLBACK_SPREAD",
    "ATK_FALLBACK_BASE",
    "ATK_FALLBACK_SPREAD",
    "DEF_FALLBACK_BASE",
    "DEF_FALLBACK_SPREAD",
    "LR_HP_THRESHOLD",
    "GENERATED_ID_LENGTH",
    # Analysis
    "MIN_RATING",
    "MAX_RATING",
    # Links
    "WIKI_SEARCH_URL",
    # Categories
    "POPULAR_CATEGORIES",
]
