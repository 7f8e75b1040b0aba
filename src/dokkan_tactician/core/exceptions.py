"""Custom exception hierarchy for Dokkan Tactician.

All exceptions inherit from TacticianError, which carries a human-readable
message plus a details dictionary that is rendered into ``str(exc)``. Most of
these never reach the user: the generation pipeline and the synergy analyzer
catch them and degrade to empty results.

Example:
    >>> from dokkan_tactician.core.exceptions import AIResponseError
    >>> raise AIResponseError("No JSON array in response", model="gemini")
"""

from __future__ import annotations

from typing import Any


class TacticianError(Exception):
    """Base exception for all Dokkan Tactician errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# AI Domain Exceptions
# =============================================================================


class AIControlError(TacticianError):
    """Base exception for generative-AI failures.

    Raised by the generation client and caught by the pipeline and the
    analyzer, which treat it as a failed phase.
    """

    def __init__(
        self,
        message: str,
        *,
        model: str | None = None,
        provider: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize AI error with model context.

        Args:
            message: Human-readable error description.
            model: Name of the AI model involved.
            provider: Name of the AI provider (e.g., 'openrouter').
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if model:
            combined_details["model"] = model
        if provider:
            combined_details["provider"] = provider
        super().__init__(message, details=combined_details)


class AIConnectionError(AIControlError):
    """Raised when the AI service cannot be reached."""


class AIResponseError(AIControlError):
    """Raised when an AI response cannot be turned into the expected shape.

    Covers missing bodies, unparsable JSON and JSON of the wrong type.
    """


class AIRateLimitError(AIControlError):
    """Raised when the AI service throttles the request."""

    def __init__(
        self,
        message: str,
        *,
        retry_after_seconds: float | None = None,
        model: str | None = None,
        provider: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize rate limit error with retry context.

        Args:
            message: Human-readable error description.
            retry_after_seconds: Seconds the service asked us to wait.
            model: Name of the AI model involved.
            provider: Name of the AI provider.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if retry_after_seconds is not None:
            combined_details["retry_after_seconds"] = retry_after_seconds
        super().__init__(message, model=model, provider=provider, details=combined_details)


# =============================================================================
# Roster Domain Exceptions
# =============================================================================


class RosterError(TacticianError):
    """Base exception for invalid roster operations."""


class SlotIndexError(RosterError):
    """Raised when a slot index falls outside the roster."""

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if index is not None:
            combined_details["index"] = index
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(TacticianError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# UI Exceptions
# =============================================================================


class UIError(TacticianError):
    """Base exception for Streamlit front-end errors."""


class SessionStateError(UIError):
    """Raised when the Streamlit session holds an unexpected object."""

    def __init__(
        self,
        message: str,
        *,
        state_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if state_key:
            combined_details["state_key"] = state_key
        super().__init__(message, details=combined_details)


__all__ = [
    "TacticianError",
    "AIControlError",
    "AIConnectionError",
    "AIResponseError",
    "AIRateLimitError",
    "RosterError",
    "SlotIndexError",
    "ConfigurationError",
    "UIError",
    "SessionStateError",
]
