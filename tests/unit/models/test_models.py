"""Tests for character, analysis and enum models."""

from __future__ import annotations

import math
from typing import Any

import pytest
from pydantic import ValidationError

from dokkan_tactician.models.analysis import GenerationPhase, GenerationResult, TeamAnalysis
from dokkan_tactician.models.character import Character, CharacterStats
from dokkan_tactician.models.enums import MechanicBadge, SlotRole, UnitClass


class TestCharacter:
    """Tests for the Character model."""

    def test_aliases_round_trip(self, sample_character: Character) -> None:
        """Test class and def are serialized under their card names."""
        data = sample_character.model_dump(by_alias=True)

        assert data["class"] == "Super"
        assert data["stats"]["def"] == 13000
        assert sample_character.unit_class is UnitClass.SUPER

    def test_wiki_url_is_encoded(self, character_factory: Any) -> None:
        """Test the wiki link percent-encodes the name."""
        char = character_factory("Goku & Vegeta")

        assert char.wiki_url == "https://dokkan.wiki/cards?q=Goku%20%26%20Vegeta"

    def test_describe(self, character_factory: Any) -> None:
        """Test the one-line description used in analysis prompts."""
        char = character_factory("Goku", type_="TEQ", links=["Saiyan", "Kamehameha"])

        assert char.describe() == "Goku (Test Card) [TEQ]: Saiyan, Kamehameha"

    def test_mechanics(self, sample_character: Character) -> None:
        """Test mechanics are derived from the passive skill."""
        assert sample_character.mechanics == [MechanicBadge.REVIVAL]

    def test_frozen(self, sample_character: Character) -> None:
        """Test characters are immutable."""
        with pytest.raises(ValidationError):
            sample_character.name = "Other"  # type: ignore[misc]

    def test_stats_must_be_positive(self) -> None:
        """Test non-positive stats are rejected by the model."""
        with pytest.raises(ValidationError):
            CharacterStats(hp=0, atk=1, defense=1)


class TestTeamAnalysis:
    """Tests for TeamAnalysis coercion."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (7.5, 7.5),
            ("8", 8.0),
            (14, 10.0),
            (-3, 0.0),
            ("great", 0.0),
            (None, 0.0),
            (True, 0.0),
            (math.nan, 0.0),
        ],
    )
    def test_rating_is_clamped(self, raw: Any, expected: float) -> None:
        """Test the rating always lands in 0-10."""
        assert TeamAnalysis(rating=raw).rating == expected

    def test_lists_are_coerced(self) -> None:
        """Test single strings and mixed lists become lists of strings."""
        analysis = TeamAnalysis.model_validate(
            {
                "rating": 6,
                "summary": None,
                "strengths": "Strong links",
                "weaknesses": [1, None, "Low defense"],
                "rotations": {"not": "a list"},
                "extra": "ignored",
            }
        )

        assert analysis.summary == ""
        assert analysis.strengths == ["Strong links"]
        assert analysis.weaknesses == ["1", "Low defense"]
        assert analysis.rotations == []

    def test_failed(self) -> None:
        """Test the failure sentinel has a zero rating and a summary."""
        analysis = TeamAnalysis.failed("Nothing to analyze")

        assert analysis.rating == 0.0
        assert analysis.summary == "Nothing to analyze"
        assert analysis.strengths == []


class TestGenerationResult:
    """Tests for GenerationResult."""

    def test_empty(self) -> None:
        """Test the empty result has no characters, no sources and the failed phase."""
        result = GenerationResult.empty()

        assert result.is_empty
        assert result.sources == []
        assert result.phase is GenerationPhase.FAILED

    def test_not_empty(self, sample_character: Character) -> None:
        """Test a result with characters is not empty."""
        result = GenerationResult(characters=[sample_character], phase=GenerationPhase.GROUNDED)

        assert not result.is_empty


class TestEnums:
    """Tests for display helpers on enums."""

    def test_slot_labels(self) -> None:
        """Test slot role labels."""
        assert [role.label for role in SlotRole] == ["Leader", "Sub", "Friend"]

    def test_badge_icons(self) -> None:
        """Test every badge has an icon."""
        assert all(badge.icon for badge in MechanicBadge)
