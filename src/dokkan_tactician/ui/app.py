"""Dokkan Tactician - Main Application Entry Point.

Single-page Streamlit app:
- Manual: look up named characters and drop them into free slots
- Auto: generate a complete roster for a category
- Roster grid with leader, sub and friend slots
- Synergy analysis of the current roster
"""

from __future__ import annotations

import streamlit as st

from dokkan_tactician.core.config import get_settings
from dokkan_tactician.core.constants import POPULAR_CATEGORIES
from dokkan_tactician.core.logging import configure_logging, get_logger
from dokkan_tactician.engine.session import Notice, NoticeLevel, TeamSession
from dokkan_tactician.ui.components import AnalysisPanel, RosterGrid, SourceList
from dokkan_tactician.ui.state import get_session
from dokkan_tactician.ui.theme import apply_theme


settings = get_settings()
configure_logging(
    level=settings.log_level,
    json_format=settings.log_json,
    log_file=settings.log_file,
)
logger = get_logger(__name__)


# =============================================================================
# Page Configuration
# =============================================================================


st.set_page_config(
    page_title=settings.ui.page_title,
    page_icon="🐉",
    layout="wide",
    initial_sidebar_state="collapsed",
    menu_items={
        "Get Help": None,
        "Report a bug": None,
        "About": f"{settings.app_name} {settings.app_version}",
    },
)

apply_theme()


# =============================================================================
# Helpers
# =============================================================================


_NOTICE_RENDERERS = {
    NoticeLevel.INFO: st.info,
    NoticeLevel.SUCCESS: st.success,
    NoticeLevel.WARNING: st.warning,
    NoticeLevel.ERROR: st.error,
}


def show_notice(notice: Notice | None) -> None:
    if notice is not None:
        logger.debug("Notice shown", level=notice.level.value, message=notice.message)
        _NOTICE_RENDERERS[notice.level](notice.message)


# =============================================================================
# Input Panel
# =============================================================================


def render_manual_tab(session: TeamSession) -> None:
    """Free-text lookup of named characters."""
    text = st.text_area(
        "Characters",
        placeholder="e.g. LR Super Saiyan God SS Goku & Vegeta, TEQ Gogeta Blue",
        help="List one or more characters; they fill the free slots in order.",
    )
    if st.button(
        "🔍 Search and add",
        type="primary",
        use_container_width=True,
        disabled=session.is_generating or session.roster.is_full,
    ):
        with st.spinner("Searching the web for real stats..."):
            show_notice(session.add_from_input(text))


def render_auto_tab(session: TeamSession) -> None:
    """Roster generation for a chosen or typed category."""
    custom = st.checkbox("Custom category")
    if custom:
        category = st.text_input("Category", placeholder="e.g. Realm of Gods")
    else:
        category = st.selectbox("Category", options=POPULAR_CATEGORIES)

    if st.button(
        "⚡ Generate team",
        type="primary",
        use_container_width=True,
        disabled=session.is_generating,
    ):
        with st.spinner(f"Building the best {category} team..."):
            show_notice(session.auto_generate(category or ""))


def render_input_panel(session: TeamSession) -> None:
    manual, auto = st.tabs(["✍️ Manual", "🤖 Auto"])
    with manual:
        render_manual_tab(session)
    with auto:
        render_auto_tab(session)

    if settings.ui.show_sources:
        SourceList(session.sources).render()


# =============================================================================
# Roster and Analysis
# =============================================================================


def render_roster(session: TeamSession) -> None:
    header, clear_col, analyze_col = st.columns([4, 1, 1])
    with header:
        st.markdown(f"## Team ({len(session.roster.members())}/{len(session.roster.slots)})")
    with clear_col:
        st.button(
            "🗑️ Clear",
            use_container_width=True,
            disabled=session.roster.is_empty,
            on_click=session.clear,
        )
    with analyze_col:
        analyze = st.button(
            "🧠 Analyze",
            use_container_width=True,
            disabled=session.roster.is_empty or session.is_analyzing,
        )

    RosterGrid(session.roster, on_remove=session.remove).render()

    if analyze:
        with st.spinner("Analyzing synergy..."):
            show_notice(session.analyze())

    if session.analysis is not None:
        st.divider()
        AnalysisPanel(session.analysis).render()


# =============================================================================
# Main Page
# =============================================================================


def main() -> None:
    """Render the main page."""
    st.markdown("# 🐉 Dokkan Tactician")
    st.caption("Team builder and synergy analyst for Dragon Ball Z Dokkan Battle")

    session = get_session()

    render_input_panel(session)
    st.divider()
    render_roster(session)


main()
