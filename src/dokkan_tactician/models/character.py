"""Pydantic V2 schema for Dokkan Battle characters.

Characters are only ever built by the response sanitizer from untrusted
model output, so the model itself is strict: every field is required and
already normalized by the time it gets here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dokkan_tactician.core.constants import WIKI_SEARCH_URL
from dokkan_tactician.models.enums import Rarity, UnitClass, UnitType


if TYPE_CHECKING:
    from dokkan_tactician.models.enums import MechanicBadge


class CharacterStats(BaseModel):
    """Base HP, ATK and DEF of a card.

    Attributes:
        hp: Hit points.
        atk: Attack.
        defense: Defense (serialized as ``def``).
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
    )

    hp: Annotated[int, Field(gt=0, description="Hit points")]
    atk: Annotated[int, Field(gt=0, description="Attack")]
    defense: Annotated[int, Field(gt=0, alias="def", description="Defense")]


class Character(BaseModel):
    """A single Dokkan Battle card.

    Attributes:
        id: Identifier reported by the model or generated by the sanitizer.
        name: Character name (e.g. 'Gohan (Beast)').
        subtitle: Card title (e.g. 'Awakened Power').
        type: One of the five types.
        unit_class: Super or Extreme (serialized as ``class``).
        rarity: Card rarity.
        categories: Category tags.
        links: Link skill names.
        leader_skill: Leader skill text.
        passive_skill: Passive skill text.
        stats: Base stats.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
    )

    id: str = Field(min_length=1, description="Identifier")
    name: str = Field(min_length=1, description="Character name")
    subtitle: str = Field(min_length=1, description="Card title")
    type: UnitType = Field(description="Dokkan type")
    unit_class: UnitClass = Field(alias="class", description="Super or Extreme")
    rarity: Rarity = Field(description="Card rarity")
    categories: list[str] = Field(default_factory=list, description="Category tags")
    links: list[str] = Field(default_factory=list, description="Link skills")
    leader_skill: str = Field(description="Leader skill text")
    passive_skill: str = Field(description="Passive skill text")
    stats: CharacterStats = Field(description="Base stats")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def wiki_url(self) -> str:
        """Search link for this character on the community wiki."""
        return WIKI_SEARCH_URL.format(query=quote(self.name, safe=""))

    @property
    def mechanics(self) -> list[MechanicBadge]:
        """Badges derived from the passive skill and link tags."""
        from dokkan_tactician.engine.mechanics import detect_mechanics

        return detect_mechanics(self.passive_skill, self.links)

    def describe(self) -> str:
        """One-line description used in synergy prompts."""
        return f"{self.name} ({self.subtitle}) [{self.type}]: {', '.join(self.links)}"


__all__ = [
    "CharacterStats",
    "Character",
]
