"""Dokkan Tactician - team builder and synergy analyst for Dokkan Battle.

Rosters are generated by a generative-text model with live web search,
with a schema-constrained retry when the searched answer cannot be used.
Every character the model returns is repaired into a complete record
before it reaches the roster.

Example:
    >>> from dokkan_tactician import OpenRouterClient, TeamGenerator, SynergyAnalyzer
    >>>
    >>> client = OpenRouterClient()
    >>> result = TeamGenerator(client).generate_team_from_category("Pure Saiyans")
    >>> analysis = SynergyAnalyzer(client).analyze(result.characters)
    >>> print(analysis.rating, analysis.summary)

Modules:
    core: Configuration, logging, constants and base exceptions.
    models: Pydantic V2 schemas (Character, Roster, TeamAnalysis).
    ingestion: JSON extraction from model prose and character sanitizing.
    engine: OpenRouter client, two-phase generation, analysis and session state.
    ui: Streamlit interface.
"""

from __future__ import annotations

# Core
from dokkan_tactician.core.config import Settings, get_settings
from dokkan_tactician.core.exceptions import TacticianError
from dokkan_tactician.core.logging import configure_logging, get_logger

# Models
from dokkan_tactician.models import (
    Character,
    CharacterStats,
    GenerationPhase,
    GenerationResult,
    Roster,
    TeamAnalysis,
)

# Ingestion
from dokkan_tactician.ingestion import extract_json_array, sanitize_character

# Engine
from dokkan_tactician.engine import (
    OpenRouterClient,
    SynergyAnalyzer,
    TeamGenerator,
    TeamSession,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "TacticianError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Character",
    "CharacterStats",
    "Roster",
    "TeamAnalysis",
    "GenerationPhase",
    "GenerationResult",
    # Ingestion
    "extract_json_array",
    "sanitize_character",
    # Engine
    "OpenRouterClient",
    "TeamGenerator",
    "SynergyAnalyzer",
    "TeamSession",
]
