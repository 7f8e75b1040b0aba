"""Synergy analysis of a roster.

A single schema-constrained request: no web search and no fallback phase,
since the answer is one well-shaped object rather than an array. Any
failure degrades to a zero-rated TeamAnalysis.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from dokkan_tactician.core.config import get_settings
from dokkan_tactician.core.logging import get_logger
from dokkan_tactician.engine.client import GenerationClient
from dokkan_tactician.engine.prompts import (
    ANALYSIS_SCHEMA,
    ANALYSIS_SCHEMA_NAME,
    analysis_prompt,
    analysis_system_prompt,
)
from dokkan_tactician.models.analysis import TeamAnalysis
from dokkan_tactician.models.character import Character


logger = get_logger(__name__)

EMPTY_TEAM_SUMMARY = "The team is empty. Add characters before requesting an analysis."
ANALYSIS_FAILED_SUMMARY = "The analysis could not be completed. Please try again."


def describe_team(team: Sequence[Character | None]) -> str:
    """One line per non-empty slot: name, subtitle, type and links."""
    return "\n".join(member.describe() for member in team if member is not None)


class SynergyAnalyzer:
    """Requests a structured critique of a roster."""

    def __init__(self, client: GenerationClient, *, language: str | None = None) -> None:
        self.client = client
        self.language = language or get_settings().generation.response_language

    def analyze(self, team: Sequence[Character | None]) -> TeamAnalysis:
        """Rate the roster and list strengths, weaknesses and rotations.

        Args:
            team: Roster slots; empty slots are skipped.

        Returns:
            The model's analysis, or a zero-rated analysis when the roster
            is empty or the request fails.
        """
        members = [member for member in team if member is not None]
        if not members:
            return TeamAnalysis.failed(EMPTY_TEAM_SUMMARY)

        try:
            text = self.client.generate_structured(
                analysis_prompt(describe_team(members)),
                schema=ANALYSIS_SCHEMA,
                schema_name=ANALYSIS_SCHEMA_NAME,
                system_instruction=analysis_system_prompt(language=self.language),
            )
            data = json.loads(text)
            if not isinstance(data, dict):
                raise TypeError(f"expected an object, got {type(data).__name__}")
            analysis = TeamAnalysis.model_validate(data)
        except Exception:
            logger.exception("Synergy analysis failed", members=len(members))
            return TeamAnalysis.failed(ANALYSIS_FAILED_SUMMARY)

        logger.info("Synergy analysis completed", members=len(members), rating=analysis.rating)
        return analysis


__all__ = [
    "EMPTY_TEAM_SUMMARY",
    "ANALYSIS_FAILED_SUMMARY",
    "describe_team",
    "SynergyAnalyzer",
]
