"""Prompts and output schemas for roster generation and synergy analysis."""

from __future__ import annotations

from typing import Any


# =============================================================================
# System Instruction
# =============================================================================


ROSTER_SYSTEM_PROMPT = """You are a Dragon Ball Z Dokkan Battle card database API.

RULES:
1. Return EXACTLY {team_size} character objects in a JSON array.
2. EVERY character must have UNIQUE, REALISTIC stats (HP/ATK between 15,000 and 30,000 for LR units).
3. DO NOT use the same numbers for all characters.
4. Use the keys: name, subtitle, type, class, rarity, categories, links, leaderSkill, passiveSkill, stats.
5. type is one of AGL, TEQ, INT, STR, PHY. class is Super or Extreme. rarity is UR, LR, TUR or EZA.
6. stats is an object with hp, atk and def as plain integers.
7. Language: {language} for skills and titles."""

ANALYSIS_SYSTEM_PROMPT = """You are a Dragon Ball Z Dokkan Battle team analyst.
Rate teams from 0 to 10 based on link skills, leader skill coverage, type spread and rotations.
Answer in {language}."""


def roster_system_prompt(*, team_size: int, language: str) -> str:
    return ROSTER_SYSTEM_PROMPT.format(team_size=team_size, language=language)


def analysis_system_prompt(*, language: str) -> str:
    return ANALYSIS_SYSTEM_PROMPT.format(language=language)


# =============================================================================
# Roster Prompts
# =============================================================================


def input_grounded_prompt(names: str) -> str:
    """Search prompt for characters the user listed by name."""
    return (
        f"Research and find real Dokkan Battle stats for: {names}. "
        "Use live web search. Return the result as a JSON array, optionally inside a ```json block. "
        "Provide individual specific HP, ATK, and DEF for each unit."
    )


def input_fallback_prompt(names: str) -> str:
    """Schema-constrained prompt for characters the user listed by name."""
    return (
        f"Generate data for these Dokkan units: {names}. Use individual accurate stats. "
        "List each distinct unit with its actual unique game stats."
    )


def category_grounded_prompt(category: str, team_size: int) -> str:
    """Search prompt for an optimized roster built around a category."""
    return (
        f'Build the absolute best Dokkan Battle team for "{category}" using the most recent units. '
        f"Need {team_size} units with unique HP/ATK/DEF: 1 Leader, 5 Subs, 1 Friend. "
        "Use live web search. Return the result as a JSON array, optionally inside a ```json block."
    )


def category_fallback_prompt(category: str, team_size: int) -> str:
    """Schema-constrained prompt for an optimized category roster."""
    return (
        f'Create a top-tier {team_size}-unit Dokkan team for "{category}". '
        "1 Leader, 5 Subs, 1 Friend. Use realistic individual stats. "
        f"List {team_size} distinct top-tier units with their actual unique game stats."
    )


def analysis_prompt(team_description: str) -> str:
    return f"Analyze the synergy of this Dokkan Battle team:\n{team_description}"


# =============================================================================
# Output Schemas
# =============================================================================


_STRING = {"type": "string"}
_STRING_LIST = {"type": "array", "items": _STRING}

CHARACTER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": _STRING,
        "subtitle": _STRING,
        "type": {"type": "string", "enum": ["AGL", "TEQ", "INT", "STR", "PHY"]},
        "class": {"type": "string", "enum": ["Super", "Extreme"]},
        "rarity": {"type": "string", "enum": ["UR", "LR", "TUR", "EZA"]},
        "categories": _STRING_LIST,
        "links": _STRING_LIST,
        "leaderSkill": _STRING,
        "passiveSkill": _STRING,
        "stats": {
            "type": "object",
            "properties": {
                "hp": {"type": "number"},
                "atk": {"type": "number"},
                "def": {"type": "number"},
            },
            "required": ["hp", "atk", "def"],
            "additionalProperties": False,
        },
    },
    "required": [
        "name",
        "subtitle",
        "type",
        "class",
        "rarity",
        "categories",
        "links",
        "leaderSkill",
        "passiveSkill",
        "stats",
    ],
    "additionalProperties": False,
}

# Strict structured output needs an object at the root.
ROSTER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "characters": {"type": "array", "items": CHARACTER_SCHEMA},
    },
    "required": ["characters"],
    "additionalProperties": False,
}
ROSTER_SCHEMA_NAME = "dokkan_roster"

ANALYSIS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "rating": {"type": "number"},
        "summary": _STRING,
        "strengths": _STRING_LIST,
        "weaknesses": _STRING_LIST,
        "rotations": _STRING_LIST,
    },
    "required": ["rating", "summary", "strengths", "weaknesses", "rotations"],
    "additionalProperties": False,
}
ANALYSIS_SCHEMA_NAME = "team_analysis"


__all__ = [
    "ROSTER_SYSTEM_PROMPT",
    "ANALYSIS_SYSTEM_PROMPT",
    "roster_system_prompt",
    "analysis_system_prompt",
    "input_grounded_prompt",
    "input_fallback_prompt",
    "category_grounded_prompt",
    "category_fallback_prompt",
    "analysis_prompt",
    "CHARACTER_SCHEMA",
    "ROSTER_SCHEMA",
    "ROSTER_SCHEMA_NAME",
    "ANALYSIS_SCHEMA",
    "ANALYSIS_SCHEMA_NAME",
]
