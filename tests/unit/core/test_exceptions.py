"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from dokkan_tactician.core.exceptions import (
    AIConnectionError,
    AIControlError,
    AIRateLimitError,
    AIResponseError,
    ConfigurationError,
    RosterError,
    SessionStateError,
    SlotIndexError,
    TacticianError,
    UIError,
)


class TestTacticianError:
    """Tests for the base TacticianError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = TacticianError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = TacticianError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(TacticianError("Test", details={"x": 1}))
        assert "TacticianError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestAIExceptions:
    """Tests for AI-related exceptions."""

    def test_ai_control_error_with_context(self) -> None:
        """Test AIControlError records model and provider."""
        exc = AIControlError("API failed", model="gemini", provider="openrouter")
        assert exc.details["model"] == "gemini"
        assert exc.details["provider"] == "openrouter"

    def test_rate_limit_error(self) -> None:
        """Test AIRateLimitError with retry time."""
        exc = AIRateLimitError("Rate limited", retry_after_seconds=30.0, model="gemini")
        assert exc.details["retry_after_seconds"] == 30.0
        assert exc.details["model"] == "gemini"

    @pytest.mark.parametrize("error_cls", [AIConnectionError, AIResponseError, AIRateLimitError])
    def test_subclasses_are_ai_errors(self, error_cls: type[AIControlError]) -> None:
        """Test every AI failure can be caught as AIControlError."""
        with pytest.raises(AIControlError):
            raise error_cls("boom")


class TestRosterExceptions:
    """Tests for roster-related exceptions."""

    def test_slot_index_error(self) -> None:
        """Test SlotIndexError records the index."""
        exc = SlotIndexError("Out of range", index=9)
        assert exc.details["index"] == 9
        assert isinstance(exc, RosterError)


class TestOtherExceptions:
    """Tests for configuration and UI exceptions."""

    def test_configuration_error(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Invalid config", config_key="team_size")
        assert exc.details["config_key"] == "team_size"

    def test_session_state_error(self) -> None:
        """Test SessionStateError is a UIError with state key."""
        exc = SessionStateError("Wrong type", state_key="team_session")
        assert exc.details["state_key"] == "team_session"
        assert isinstance(exc, UIError)
        assert isinstance(exc, TacticianError)
