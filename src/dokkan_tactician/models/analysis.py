"""Result models for synergy analysis and roster generation."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dokkan_tactician.core.constants import MAX_RATING, MIN_RATING
from dokkan_tactician.models.character import Character


class TeamAnalysis(BaseModel):
    """AI critique of a roster.

    The rating is clamped into 0-10 and every list is coerced to a list of
    strings, so whatever shape the model returns ends up renderable.

    Attributes:
        rating: Overall score out of ten.
        summary: Free-text verdict.
        strengths: What the team does well.
        weaknesses: What the team struggles with.
        rotations: Suggested attack rotations.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    rating: float = Field(default=0.0, description="Score out of ten")
    summary: str = Field(default="", description="Free-text verdict")
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    rotations: list[str] = Field(default_factory=list)

    @field_validator("rating", mode="before")
    @classmethod
    def clamp_rating(cls, value: Any) -> float:
        """Clamp the rating into the 0-10 band; anything non-numeric is 0."""
        if isinstance(value, bool):
            return MIN_RATING
        try:
            rating = float(value)
        except (TypeError, ValueError):
            return MIN_RATING
        if rating != rating:  # NaN
            return MIN_RATING
        return max(MIN_RATING, min(MAX_RATING, rating))

    @field_validator("summary", mode="before")
    @classmethod
    def coerce_summary(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("strengths", "weaknesses", "rotations", mode="before")
    @classmethod
    def coerce_string_list(cls, value: Any) -> list[str]:
        """Accept a list of anything, or a single string, as a list of strings."""
        if value is None:
            return []
        if isinstance(value, str):
            return [value] if value.strip() else []
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value if item is not None]
        return []

    @classmethod
    def failed(cls, summary: str) -> "TeamAnalysis":
        """Zero-rated analysis carrying an explanatory summary."""
        return cls(rating=MIN_RATING, summary=summary)


class GenerationPhase(StrEnum):
    """States of the two-phase generation pipeline."""

    GROUNDED = "grounded"
    FALLBACK = "fallback"
    FAILED = "failed"


class GenerationResult(BaseModel):
    """Characters produced by the generation pipeline.

    Attributes:
        characters: Sanitized characters, possibly empty.
        sources: Citation URIs from the grounded phase, deduplicated.
        phase: The pipeline state that produced this result.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    characters: list[Character] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    phase: GenerationPhase = Field(default=GenerationPhase.FAILED)

    @property
    def is_empty(self) -> bool:
        return not self.characters

    @classmethod
    def empty(cls) -> "GenerationResult":
        """Result returned when both phases failed."""
        return cls(characters=[], sources=[], phase=GenerationPhase.FAILED)


__all__ = [
    "TeamAnalysis",
    "GenerationPhase",
    "GenerationResult",
]
