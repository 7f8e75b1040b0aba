"""Generation and analysis engine for Dokkan Tactician.

Submodules:
    client: OpenRouter chat-completions client (grounded and structured modes)
    prompts: System prompts, user prompts and output schemas
    pipeline: Two-phase GROUNDED/FALLBACK roster generation
    analysis: Synergy analysis of a roster
    mechanics: Keyword-based mechanics badges
    session: TeamSession application state and user actions

Example:
    >>> from dokkan_tactician.engine import (
    ...     OpenRouterClient, SynergyAnalyzer, TeamGenerator, TeamSession
    ... )
    >>>
    >>> client = OpenRouterClient()
    >>> session = TeamSession(TeamGenerator(client), SynergyAnalyzer(client))
    >>> notice = session.auto_generate("Pure Saiyans")
    >>> session.analyze()
"""

from __future__ import annotations

# =============================================================================
# Client
# =============================================================================
from dokkan_tactician.engine.client import (
    GenerationClient,
    GroundedResponse,
    OpenRouterClient,
    extract_citation_urls,
)

# =============================================================================
# Generation
# =============================================================================
from dokkan_tactician.engine.pipeline import (
    GenerationRequest,
    PhaseOutcome,
    TeamGenerator,
    TwoPhaseGenerator,
    decode_structured_roster,
    next_phase,
)

# =============================================================================
# Analysis
# =============================================================================
from dokkan_tactician.engine.analysis import SynergyAnalyzer, describe_team
from dokkan_tactician.engine.mechanics import detect_mechanics

# =============================================================================
# Session
# =============================================================================
from dokkan_tactician.engine.session import Notice, NoticeLevel, TeamSession


__all__ = [
    # Client
    "GenerationClient",
    "GroundedResponse",
    "OpenRouterClient",
    "extract_citation_urls",
    # Generation
    "GenerationRequest",
    "PhaseOutcome",
    "TwoPhaseGenerator",
    "TeamGenerator",
    "decode_structured_roster",
    "next_phase",
    # Analysis
    "SynergyAnalyzer",
    "describe_team",
    "detect_mechanics",
    # Session
    "Notice",
    "NoticeLevel",
    "TeamSession",
]
