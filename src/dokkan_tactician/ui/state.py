"""Streamlit session-state wiring.

One TeamSession lives in ``st.session_state`` per browser session. It is
built lazily with the OpenRouter client on first access.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

import streamlit as st

from dokkan_tactician.core.exceptions import SessionStateError
from dokkan_tactician.core.logging import get_logger
from dokkan_tactician.engine.analysis import SynergyAnalyzer
from dokkan_tactician.engine.client import OpenRouterClient
from dokkan_tactician.engine.pipeline import TeamGenerator
from dokkan_tactician.engine.session import TeamSession


logger = get_logger(__name__)

SESSION_KEY = "team_session"


def build_session() -> TeamSession:
    """Create a TeamSession backed by the configured OpenRouter client."""
    client = OpenRouterClient()
    return TeamSession(TeamGenerator(client), SynergyAnalyzer(client))


def init_session_state(state: MutableMapping[str, Any] | None = None) -> None:
    """Initialize all session state variables."""
    if state is None:
        state = st.session_state
    if SESSION_KEY not in state:
        state[SESSION_KEY] = build_session()
        logger.info("Team session created")


def get_session(state: MutableMapping[str, Any] | None = None) -> TeamSession:
    """Return the TeamSession stored in the session state.

    Raises:
        SessionStateError: If the key holds something other than a TeamSession.
    """
    if state is None:
        state = st.session_state
    init_session_state(state)

    session = state[SESSION_KEY]
    if not isinstance(session, TeamSession):
        raise SessionStateError(
            f"Expected a TeamSession, found {type(session).__name__}",
            state_key=SESSION_KEY,
        )
    return session


__all__ = [
    "SESSION_KEY",
    "build_session",
    "init_session_state",
    "get_session",
]
