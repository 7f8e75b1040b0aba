"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Dokkan Tactician test suite.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any

import pytest

from dokkan_tactician.engine.client import GroundedResponse


if TYPE_CHECKING:
    from collections.abc import Generator

    from dokkan_tactician.models.character import Character


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from dokkan_tactician.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DOKKAN_TACTICIAN_OPENROUTER_API_KEY": "test-openrouter-key",
        "DOKKAN_TACTICIAN_DEBUG": "true",
        "DOKKAN_TACTICIAN_LOG_LEVEL": "DEBUG",
        "DOKKAN_TACTICIAN_GEN_RESPONSE_LANGUAGE": "Spanish",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Client Fixtures
# =============================================================================


class FakeClient:
    """Scripted stand-in for OpenRouterClient.

    Each queued reply is either a value to return or an exception to raise.
    Every call is recorded so tests can assert on which mode ran and how often.
    """

    def __init__(
        self,
        *,
        grounded: list[GroundedResponse | Exception] | None = None,
        structured: list[str | Exception] | None = None,
    ) -> None:
        self.grounded_replies = list(grounded or [])
        self.structured_replies = list(structured or [])
        self.grounded_calls: list[dict[str, Any]] = []
        self.structured_calls: list[dict[str, Any]] = []

    def generate_grounded(self, prompt: str, *, system_instruction: str) -> GroundedResponse:
        self.grounded_calls.append({"prompt": prompt, "system_instruction": system_instruction})
        reply = self.grounded_replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def generate_structured(
        self,
        prompt: str,
        *,
        schema: dict[str, Any],
        schema_name: str,
        system_instruction: str | None = None,
    ) -> str:
        self.structured_calls.append(
            {
                "prompt": prompt,
                "schema": schema,
                "schema_name": schema_name,
                "system_instruction": system_instruction,
            }
        )
        reply = self.structured_replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def fake_client_factory() -> type[FakeClient]:
    """Provide the FakeClient class for building scripted clients."""
    return FakeClient


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for deterministic sanitizer fallbacks."""
    return random.Random(1234)


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def sample_raw_character() -> dict[str, Any]:
    """Provide a well-formed character object as the model would return it.

    Returns:
        Dictionary using the keys requested by the generation prompts.
    """
    return {
        "id": "gohan-beast",
        "name": "Gohan (Beast)",
        "subtitle": "Awakened Power",
        "type": "INT",
        "class": "Super",
        "rarity": "LR",
        "categories": ["Pure Saiyans", "Hybrid Saiyans"],
        "links": ["Super Saiyan", "Fierce Battle"],
        "leaderSkill": "Ki +3 and HP, ATK & DEF +170%",
        "passiveSkill": "ATK & DEF +200%; revives when HP is 0",
        "stats": {"hp": 23456, "atk": 21450, "def": 13000},
    }


@pytest.fixture
def sample_character(sample_raw_character: dict[str, Any]) -> Character:
    """Create a sample Character instance for testing."""
    from dokkan_tactician.ingestion.sanitizer import sanitize_character

    return sanitize_character(sample_raw_character, rng=random.Random(0))


def make_character(name: str, *, type_: str = "AGL", links: list[str] | None = None) -> Character:
    """Build a valid Character with minimal boilerplate."""
    from dokkan_tactician.models.character import Character, CharacterStats

    return Character(
        id=name.lower().replace(" ", "-"),
        name=name,
        subtitle="Test Card",
        type=type_,
        unit_class="Extreme",
        rarity="UR",
        links=links or [],
        leader_skill="N/A",
        passive_skill="N/A",
        stats=CharacterStats(hp=16000, atk=17000, defense=9000),
    )


@pytest.fixture
def character_factory() -> Any:
    """Provide the make_character helper."""
    return make_character
