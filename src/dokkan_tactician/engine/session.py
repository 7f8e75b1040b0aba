"""Application state and user actions.

TeamSession is the single state object of the app. The Streamlit layer
keeps one instance in ``st.session_state`` and calls its actions from
button handlers; each action returns a Notice for the user or None.

The analysis is invalidated whenever the roster changes, and each action
refuses to start while an earlier call of the same action is in flight.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from dokkan_tactician.core.constants import TEAM_SIZE
from dokkan_tactician.core.logging import bind_context, clear_context, get_logger
from dokkan_tactician.engine.analysis import SynergyAnalyzer
from dokkan_tactician.engine.pipeline import TeamGenerator
from dokkan_tactician.models.analysis import TeamAnalysis
from dokkan_tactician.models.character import Character
from dokkan_tactician.models.roster import Roster


logger = get_logger(__name__)


class NoticeLevel(StrEnum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Notice(BaseModel):
    """A short blocking message for the user."""

    model_config = ConfigDict(frozen=True)

    level: NoticeLevel
    message: str


EMPTY_INPUT = "Enter at least one character name."
EMPTY_CATEGORY = "Choose or type a category first."
TEAM_FULL = "The team is full. Remove a character before adding more."
NO_CHARACTERS_FOUND = "No characters could be found. Try being more specific."
NO_TEAM_FOR_CATEGORY = "No team could be generated for that category."
ANALYZE_EMPTY_TEAM = "Build a team before analyzing it."
ALREADY_RUNNING = "That action is already running."


class TeamSession:
    """Roster, analysis, sources and the actions that change them.

    Attributes:
        roster: The seven-slot team.
        analysis: Latest synergy analysis, cleared on every roster change.
        sources: Citation URLs from the latest grounded generation.
        is_generating: A generation request is in flight.
        is_analyzing: An analysis request is in flight.
    """

    def __init__(self, generator: TeamGenerator, analyzer: SynergyAnalyzer) -> None:
        self.generator = generator
        self.analyzer = analyzer
        self.roster = Roster()
        self.analysis: TeamAnalysis | None = None
        self.sources: list[str] = []
        self.is_generating = False
        self.is_analyzing = False

    @property
    def slots(self) -> list[Character | None]:
        return list(self.roster.slots)

    @contextmanager
    def _busy(self, flag: str, action: str) -> Iterator[None]:
        setattr(self, flag, True)
        bind_context(action=action)
        try:
            yield
        finally:
            setattr(self, flag, False)
            clear_context()

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def add_from_input(self, text: str) -> Notice | None:
        """Look up the named characters and drop them into free slots.

        Args:
            text: Free-text list of character names.
        """
        if not text or not text.strip():
            return Notice(level=NoticeLevel.WARNING, message=EMPTY_INPUT)
        if self.roster.is_full:
            return Notice(level=NoticeLevel.WARNING, message=TEAM_FULL)
        if self.is_generating:
            return Notice(level=NoticeLevel.INFO, message=ALREADY_RUNNING)

        with self._busy("is_generating", "add_from_input"):
            self.analysis = None
            self.sources = []
            result = self.generator.generate_team_from_input(text.strip())
            self.sources = list(result.sources)

            if result.is_empty:
                return Notice(level=NoticeLevel.WARNING, message=NO_CHARACTERS_FOUND)

            placed = self.roster.add_many(result.characters)
            logger.info(
                "Characters added",
                found=len(result.characters),
                placed=placed,
                phase=result.phase.value,
            )
        return None

    def auto_generate(self, category: str) -> Notice | None:
        """Replace the whole roster with a generated team for ``category``."""
        if not category or not category.strip():
            return Notice(level=NoticeLevel.WARNING, message=EMPTY_CATEGORY)
        if self.is_generating:
            return Notice(level=NoticeLevel.INFO, message=ALREADY_RUNNING)

        with self._busy("is_generating", "auto_generate"):
            self.analysis = None
            self.sources = []
            result = self.generator.generate_team_from_category(category.strip())
            self.sources = list(result.sources)

            if result.is_empty:
                return Notice(level=NoticeLevel.WARNING, message=NO_TEAM_FOR_CATEGORY)

            self.roster.replace_all(result.characters[:TEAM_SIZE])
            logger.info(
                "Roster generated",
                category=category.strip(),
                characters=len(result.characters),
                phase=result.phase.value,
            )
        return None

    # -------------------------------------------------------------------------
    # Analysis
    # -------------------------------------------------------------------------

    def analyze(self) -> Notice | None:
        """Request a synergy analysis of the current roster."""
        if self.roster.is_empty:
            return Notice(level=NoticeLevel.WARNING, message=ANALYZE_EMPTY_TEAM)
        if self.is_analyzing:
            return Notice(level=NoticeLevel.INFO, message=ALREADY_RUNNING)

        with self._busy("is_analyzing", "analyze"):
            self.analysis = self.analyzer.analyze(self.roster.slots)
        return None

    # -------------------------------------------------------------------------
    # Roster edits
    # -------------------------------------------------------------------------

    def remove(self, index: int) -> Character | None:
        """Empty one slot; the analysis no longer applies."""
        removed = self.roster.remove(index)
        self.analysis = None
        return removed

    def clear(self) -> None:
        """Reset roster, analysis and sources."""
        self.roster.clear()
        self.analysis = None
        self.sources = []


__all__ = [
    "NoticeLevel",
    "Notice",
    "TeamSession",
]
