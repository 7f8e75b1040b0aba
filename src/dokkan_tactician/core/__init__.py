"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        TacticianError: Base exception for all application errors.
        AIControlError and subclasses: Generative-AI failures.
        RosterError and subclasses: Invalid roster operations.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
"""

from __future__ import annotations

from dokkan_tactician.core.config import (
    AIProviderSettings,
    GenerationSettings,
    Settings,
    UISettings,
    clear_settings_cache,
    get_settings,
)
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
from dokkan_tactician.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Base exception
    "TacticianError",
    # AI exceptions
    "AIControlError",
    "AIConnectionError",
    "AIResponseError",
    "AIRateLimitError",
    # Roster exceptions
    "RosterError",
    "SlotIndexError",
    # Configuration exceptions
    "ConfigurationError",
    # UI exceptions
    "UIError",
    "SessionStateError",
    # Configuration
    "Settings",
    "AIProviderSettings",
    "GenerationSettings",
    "UISettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
