"""Tests for UI helpers that do not need a running Streamlit script."""

from __future__ import annotations

from typing import Any

import pytest

from dokkan_tactician.core.exceptions import SessionStateError
from dokkan_tactician.engine.session import TeamSession
from dokkan_tactician.models.character import Character
from dokkan_tactician.models.enums import UnitType
from dokkan_tactician.ui.components import character_card_html, source_hostname
from dokkan_tactician.ui.state import SESSION_KEY, get_session, init_session_state
from dokkan_tactician.ui.theme import Colors, rating_color, type_color


class TestSourceHostname:
    """Tests for source_hostname."""

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://www.dokkan.wiki/cards/1234", "dokkan.wiki"),
            ("https://dbz-dokkanbattle.fandom.com/wiki/Goku", "dbz-dokkanbattle.fandom.com"),
            ("http://WWW.Example.com", "example.com"),
            ("not a url", "not a url"),
        ],
    )
    def test_hostnames(self, url: str, expected: str) -> None:
        """Test the leading www. is stripped from the host."""
        assert source_hostname(url) == expected


class TestTheme:
    """Tests for theme colour helpers."""

    def test_type_colors(self) -> None:
        """Test each type has its own card colour."""
        assert type_color(UnitType.AGL) == "#2563eb"
        assert type_color(UnitType.PHY) == "#ea580c"
        assert len({type_color(unit_type) for unit_type in UnitType}) == len(UnitType)

    @pytest.mark.parametrize(
        ("rating", "expected"),
        [
            (10, Colors.RATING_HIGH),
            (8, Colors.RATING_HIGH),
            (7.9, Colors.RATING_MID),
            (5, Colors.RATING_MID),
            (4.9, Colors.RATING_LOW),
            (0, Colors.RATING_LOW),
        ],
    )
    def test_rating_bands(self, rating: float, expected: str) -> None:
        """Test rating colour bands: green from 8, yellow from 5, red below."""
        assert rating_color(rating) == expected


class TestCharacterCard:
    """Tests for character_card_html."""

    def test_contents(self, sample_character: Character) -> None:
        """Test the card shows name, stats, badges and wiki link."""
        html = character_card_html(sample_character)

        assert "Gohan (Beast)" in html
        assert "23,456" in html
        assert "Revival" in html
        assert sample_character.wiki_url in html
        assert type_color(UnitType.INT) in html

    def test_escapes_model_text(self, character_factory: Any) -> None:
        """Test model-provided text cannot inject markup."""
        html = character_card_html(character_factory("<script>alert(1)</script>"))

        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestSessionState:
    """Tests for session-state wiring."""

    def test_creates_session_once(self) -> None:
        """Test a TeamSession is created on first access and then reused."""
        state: dict[str, Any] = {}

        first = get_session(state)
        init_session_state(state)

        assert isinstance(first, TeamSession)
        assert get_session(state) is first

    def test_wrong_type_raises(self) -> None:
        """Test an unexpected object under the key raises SessionStateError."""
        state: dict[str, Any] = {SESSION_KEY: "not a session"}

        with pytest.raises(SessionStateError):
            get_session(state)
