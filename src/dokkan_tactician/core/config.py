"""Configuration management for Dokkan Tactician.

Settings are loaded with pydantic-settings from environment variables and an
optional ``.env`` file. The API key is held as a SecretStr.

Example:
    >>> from dokkan_tactician.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.generation.team_size
    7

Environment Variables:
    DOKKAN_TACTICIAN_OPENROUTER_API_KEY: OpenRouter API key
    DOKKAN_TACTICIAN_MODEL: Model identifier used for every request
    DOKKAN_TACTICIAN_BASE_URL: OpenAI-compatible endpoint
    DOKKAN_TACTICIAN_GEN_CATEGORY_MIN_CHARACTERS: Grounded acceptance threshold
    DOKKAN_TACTICIAN_GEN_RESPONSE_LANGUAGE: Language for skills and titles
    DOKKAN_TACTICIAN_LOG_LEVEL: Logging level
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dokkan_tactician.core.constants import TEAM_SIZE
from dokkan_tactician.core.exceptions import ConfigurationError


class AIProviderSettings(BaseSettings):
    """Configuration for the generative-text provider.

    Attributes:
        openrouter_api_key: API key sent to the OpenAI-compatible endpoint.
        base_url: Endpoint of the chat-completions API.
        model: Model identifier used for generation and analysis.
        timeout_seconds: Request timeout in seconds.
        temperature: Sampling temperature for roster generation.
        max_tokens: Completion token cap for each request.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOKKAN_TACTICIAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openrouter_api_key: SecretStr | None = Field(
        default=None,
        description="OpenRouter API key",
    )
    base_url: str = Field(
        default="https://openrouter.ai/api/v1",
        description="OpenAI-compatible API endpoint",
    )
    model: str = Field(
        default="google/gemini-3-flash-preview",
        description="Model used for every request",
    )
    timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        le=300,
        description="API request timeout",
    )
    temperature: float = Field(
        default=0.4,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    max_tokens: int = Field(
        default=4096,
        ge=256,
        le=32768,
        description="Completion token cap",
    )


class GenerationSettings(BaseSettings):
    """Configuration for roster generation.

    Attributes:
        team_size: Number of characters requested from the model.
        category_min_characters: Characters the grounded phase must yield
            for a category roster to be accepted without the fallback.
        input_min_characters: Same threshold for the free-text flow.
        response_language: Language the model writes skills and titles in.
        random_seed: Optional seed for sanitizer fallbacks.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOKKAN_TACTICIAN_GEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    team_size: int = Field(
        default=TEAM_SIZE,
        ge=1,
        le=TEAM_SIZE,
        description="Characters requested per roster",
    )
    category_min_characters: int = Field(
        default=TEAM_SIZE - 1,
        ge=1,
        description="Grounded acceptance threshold for category rosters",
    )
    input_min_characters: int = Field(
        default=1,
        ge=1,
        description="Grounded acceptance threshold for named characters",
    )
    response_language: str = Field(
        default="English",
        min_length=1,
        description="Language for skills and titles",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for sanitizer fallbacks",
    )

    @model_validator(mode="after")
    def validate_threshold(self) -> "GenerationSettings":
        """Ensure the category threshold can actually be met.

        Raises:
            ConfigurationError: If the threshold exceeds the team size.
        """
        if self.category_min_characters > self.team_size:
            raise ConfigurationError(
                f"category_min_characters ({self.category_min_characters}) must not "
                f"exceed team_size ({self.team_size})",
                config_key="category_min_characters",
            )
        return self


class UISettings(BaseSettings):
    """Configuration for the Streamlit UI.

    Attributes:
        page_title: Browser page title.
        show_sources: Show citation sources under the input panel.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOKKAN_TACTICIAN_UI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    page_title: str = Field(
        default="Dokkan Tactician",
        description="Browser page title",
    )
    show_sources: bool = Field(
        default=True,
        description="Show citation sources",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        log_json: Emit JSON log lines instead of console output.
        log_file: Optional file that also receives log lines.
        ai: AI provider settings.
        generation: Roster generation settings.
        ui: UI settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOKKAN_TACTICIAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Dokkan Tactician",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file path",
    )

    ai: AIProviderSettings = Field(default_factory=AIProviderSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    ui: UISettings = Field(default_factory=UISettings)

    @property
    def is_production(self) -> bool:
        """True when not running in debug mode."""
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "AIProviderSettings",
    "GenerationSettings",
    "UISettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
