"""Roster model: the fixed seven-slot team.

Slot 0 is the leader, slots 1-5 are subs and slot 6 is the friend unit.
The roster is mutated only by user actions (add, remove, clear) or by bulk
replacement from an auto-generated team.

Example:
    >>> roster = Roster()
    >>> roster.add_many([gohan, piccolo])
    2
    >>> roster.role_of(0)
    <SlotRole.LEADER: 'leader'>
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from dokkan_tactician.core.constants import FRIEND_SLOT, LEADER_SLOT, TEAM_SIZE
from dokkan_tactician.core.exceptions import SlotIndexError
from dokkan_tactician.models.character import Character
from dokkan_tactician.models.enums import SlotRole


def _empty_slots() -> list[Character | None]:
    return [None] * TEAM_SIZE


class Roster(BaseModel):
    """Ordered sequence of seven optional character slots.

    Attributes:
        slots: The slot list, always exactly TEAM_SIZE long.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )

    slots: list[Character | None] = Field(
        default_factory=_empty_slots,
        description="Leader, five subs and friend",
    )

    @field_validator("slots")
    @classmethod
    def validate_length(cls, value: list[Character | None]) -> list[Character | None]:
        """Ensure the roster keeps its fixed size."""
        if len(value) != TEAM_SIZE:
            raise ValueError(f"A roster has exactly {TEAM_SIZE} slots, got {len(value)}")
        return value

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_empty(self) -> bool:
        """True when no slot holds a character."""
        return all(slot is None for slot in self.slots)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_full(self) -> bool:
        """True when every slot holds a character."""
        return all(slot is not None for slot in self.slots)

    @property
    def free_slots(self) -> int:
        return sum(1 for slot in self.slots if slot is None)

    def members(self) -> list[Character]:
        """Non-empty slots in slot order."""
        return [slot for slot in self.slots if slot is not None]

    @staticmethod
    def role_of(index: int) -> SlotRole:
        """Role of the slot at ``index``.

        Raises:
            SlotIndexError: If the index is outside the roster.
        """
        if not 0 <= index < TEAM_SIZE:
            raise SlotIndexError(f"Slot index must be between 0 and {TEAM_SIZE - 1}", index=index)
        if index == LEADER_SLOT:
            return SlotRole.LEADER
        if index == FRIEND_SLOT:
            return SlotRole.FRIEND
        return SlotRole.SUB

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add_many(self, characters: Iterable[Character]) -> int:
        """Place characters into empty slots, lowest index first.

        Characters that do not fit are dropped.

        Returns:
            Number of characters placed.
        """
        pending = iter(characters)
        slots = list(self.slots)
        placed = 0
        for index, slot in enumerate(slots):
            if slot is not None:
                continue
            character = next(pending, None)
            if character is None:
                break
            slots[index] = character
            placed += 1
        self.slots = slots
        return placed

    def remove(self, index: int) -> Character | None:
        """Empty the slot at ``index`` and return what it held.

        Raises:
            SlotIndexError: If the index is outside the roster.
        """
        self.role_of(index)
        slots = list(self.slots)
        removed = slots[index]
        slots[index] = None
        self.slots = slots
        return removed

    def clear(self) -> None:
        self.slots = _empty_slots()

    def replace_all(self, characters: Iterable[Character]) -> None:
        """Overwrite the roster with ``characters``, truncated and padded to size."""
        incoming = list(characters)[:TEAM_SIZE]
        self.slots = incoming + [None] * (TEAM_SIZE - len(incoming))


__all__ = [
    "Roster",
]
