"""Reusable UI components for the Streamlit interface.

Character cards, the roster grid, the citation source list and the
analysis panel. The HTML builders are plain functions so they can be
exercised without a running Streamlit script.
"""

from __future__ import annotations

import html
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from urllib.parse import urlparse

import streamlit as st

from dokkan_tactician.core.exceptions import UIError
from dokkan_tactician.core.logging import get_logger
from dokkan_tactician.models.analysis import TeamAnalysis
from dokkan_tactician.models.character import Character
from dokkan_tactician.models.roster import Roster
from dokkan_tactician.ui.theme import rating_color, type_color


logger = get_logger(__name__)


# =============================================================================
# HTML Builders
# =============================================================================


def source_hostname(url: str) -> str:
    """Host name shown for a citation, without a leading ``www.``.

    Falls back to the raw string when it has no parseable host.
    """
    host = urlparse(url).hostname or url
    if host.startswith("www."):
        host = host[len("www."):]
    return host


def _tags(values: Sequence[str]) -> str:
    return "".join(f'<span class="unit-tag">{html.escape(value)}</span>' for value in values)


def character_card_html(character: Character) -> str:
    """Markup for one type-coloured character card."""
    badges = [f"{badge.icon} {badge.value}" for badge in character.mechanics]
    stats = character.stats
    return f"""
    <div class="unit-card" style="background: {type_color(character.type)};">
        <div>{_tags([character.type.value, character.unit_class.value, character.rarity.value])}</div>
        <div class="unit-name">{html.escape(character.name)}</div>
        <div class="unit-subtitle">{html.escape(character.subtitle)}</div>
        <div class="unit-stats">
            <div>HP<strong>{stats.hp:,}</strong></div>
            <div>ATK<strong>{stats.atk:,}</strong></div>
            <div>DEF<strong>{stats.defense:,}</strong></div>
        </div>
        <div>{_tags(badges)}</div>
        <div>{_tags(character.links[:3])}</div>
        <a href="{html.escape(character.wiki_url)}" target="_blank">Wiki ↗</a>
    </div>
    """


EMPTY_SLOT_HTML = '<div class="empty-slot">Empty</div>'


# =============================================================================
# Components
# =============================================================================


class BaseComponent(ABC):
    """Abstract base class for UI components."""

    @abstractmethod
    def render(self) -> None:
        """Render the component.

        Raises:
            UIError: If rendering fails.
        """
        raise NotImplementedError("Subclasses must implement render")


class SourceList(BaseComponent):
    """Citation links from the latest grounded generation."""

    def __init__(self, sources: Sequence[str]) -> None:
        self.sources = list(sources)

    def render(self) -> None:
        if not self.sources:
            return
        st.caption("Sources")
        st.markdown(
            "\n".join(f"- [{source_hostname(url)}]({url})" for url in self.sources)
        )


class RosterGrid(BaseComponent):
    """Seven slot columns with role labels and remove buttons.

    Attributes:
        roster: Roster to display.
        on_remove: Called with the slot index when a remove button is pressed.
    """

    def __init__(self, roster: Roster, *, on_remove: Callable[[int], object]) -> None:
        self.roster = roster
        self.on_remove = on_remove

    def render(self) -> None:
        try:
            columns = st.columns(len(self.roster.slots))
            for index, (column, member) in enumerate(zip(columns, self.roster.slots)):
                with column:
                    st.markdown(
                        f'<div class="slot-label">{Roster.role_of(index).label}</div>',
                        unsafe_allow_html=True,
                    )
                    if member is None:
                        st.markdown(EMPTY_SLOT_HTML, unsafe_allow_html=True)
                        continue
                    st.markdown(character_card_html(member), unsafe_allow_html=True)
                    st.button(
                        "Remove",
                        key=f"remove_{index}",
                        use_container_width=True,
                        on_click=self.on_remove,
                        args=(index,),
                    )
        except Exception as exc:
            raise UIError(f"Failed to render roster: {exc}") from exc


class AnalysisPanel(BaseComponent):
    """Rating, summary, strengths, weaknesses and rotations."""

    def __init__(self, analysis: TeamAnalysis) -> None:
        self.analysis = analysis

    def render(self) -> None:
        analysis = self.analysis
        st.subheader("Synergy Analysis")

        col_rating, col_summary = st.columns([1, 3])
        with col_rating:
            st.markdown(
                f'<div class="rating-box" style="color: {rating_color(analysis.rating)};">'
                f"{analysis.rating:g}/10</div>",
                unsafe_allow_html=True,
            )
        with col_summary:
            st.markdown(analysis.summary)

        col_strong, col_weak, col_rot = st.columns(3)
        for column, title, items in (
            (col_strong, "💪 Strengths", analysis.strengths),
            (col_weak, "⚠️ Weaknesses", analysis.weaknesses),
            (col_rot, "🔄 Rotations", analysis.rotations),
        ):
            with column:
                st.markdown(f"**{title}**")
                if items:
                    st.markdown("\n".join(f"- {item}" for item in items))
                else:
                    st.caption("Nothing reported.")


__all__ = [
    "source_hostname",
    "character_card_html",
    "EMPTY_SLOT_HTML",
    "BaseComponent",
    "SourceList",
    "RosterGrid",
    "AnalysisPanel",
]
