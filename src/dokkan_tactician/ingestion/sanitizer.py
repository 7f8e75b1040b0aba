"""Tolerant decoding of model output into Character records.

Models answer with whatever keys they feel like ("character" instead of
"name", "leader_skill" instead of "leaderSkill", stats flattened to the top
level, numbers as "21,450"...). The sanitizer maps any object onto a valid
Character and never raises: missing data is replaced by placeholders or by
values drawn from an injectable random source.

Field aliases live in a versioned FieldPrecedenceTable rather than inline
``or`` chains so that the precedence is reviewable and testable.

Example:
    >>> import random
    >>> sanitizer = CharacterSanitizer(rng=random.Random(7))
    >>> char = sanitizer.sanitize({"character": "Beast Gohan", "type": "int"})
    >>> char.name, char.type
    ('Beast Gohan', <UnitType.INT: 'INT'>)
"""

from __future__ import annotations

import random
import re
import string
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from dokkan_tactician.core.constants import (
    ATK_FALLBACK_BASE,
    ATK_FALLBACK_SPREAD,
    DEF_FALLBACK_BASE,
    DEF_FALLBACK_SPREAD,
    GENERATED_ID_LENGTH,
    HP_FALLBACK_BASE,
    HP_FALLBACK_SPREAD,
    LR_HP_THRESHOLD,
)
from dokkan_tactician.core.logging import get_logger
from dokkan_tactician.models.character import Character, CharacterStats
from dokkan_tactician.models.enums import Rarity, UnitClass, UnitType


logger = get_logger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase
_NON_DIGITS = re.compile(r"[^0-9]")


# =============================================================================
# Field Precedence
# =============================================================================


class FieldRule(BaseModel):
    """Aliases for one output field, highest precedence first.

    Attributes:
        aliases: Keys looked up in the raw object, in order.
        placeholder: Value used when no alias holds a non-empty value.
    """

    model_config = ConfigDict(frozen=True)

    aliases: tuple[str, ...]
    placeholder: str = ""


class FieldPrecedenceTable(BaseModel):
    """Versioned mapping from Character fields to raw-object aliases.

    Stat aliases are looked up first inside the nested ``stats`` object and
    then at the top level of the raw object.
    """

    model_config = ConfigDict(frozen=True)

    version: str
    text_fields: dict[str, FieldRule]
    stat_fields: dict[str, tuple[str, ...]]
    type_aliases: tuple[str, ...] = ("type",)
    class_aliases: tuple[str, ...] = ("class",)
    rarity_aliases: tuple[str, ...] = ("rarity",)
    id_aliases: tuple[str, ...] = ("id",)
    categories_aliases: tuple[str, ...] = ("categories",)
    links_aliases: tuple[str, ...] = ("links",)


FIELD_PRECEDENCE_V1 = FieldPrecedenceTable(
    version="1",
    text_fields={
        "name": FieldRule(
            aliases=("name", "character", "characterName", "unit", "card_name"),
            placeholder="Warrior",
        ),
        "subtitle": FieldRule(
            aliases=("subtitle", "title", "description", "card_title"),
            placeholder="Fighter",
        ),
        "leader_skill": FieldRule(
            aliases=("leaderSkill", "leader_skill", "leader"),
            placeholder="N/A",
        ),
        "passive_skill": FieldRule(
            aliases=("passiveSkill", "passive_skill", "passive"),
            placeholder="N/A",
        ),
    },
    stat_fields={
        "hp": ("hp",),
        "atk": ("atk",),
        "defense": ("def",),
    },
)
"""Precedence table matching the keys requested by the generation prompts."""

DEFAULT_FIELD_PRECEDENCE = FIELD_PRECEDENCE_V1


# =============================================================================
# Value Coercion
# =============================================================================


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, dict)):
        return bool(value)
    return value is not False


def _first_present(raw: Mapping[str, Any], aliases: Iterable[str]) -> Any:
    for alias in aliases:
        value = raw.get(alias)
        if _is_present(value):
            return value
    return None


def parse_positive_int(value: Any) -> int | None:
    """Read a positive integer from a number or a numeric-looking string.

    Strings have every non-digit stripped first, so "21,450" reads as 21450.

    Returns:
        The integer, or None when the value is missing, zero or negative.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        parsed = int(round(value))
        return parsed if parsed > 0 else None
    if isinstance(value, str):
        digits = _NON_DIGITS.sub("", value)
        if not digits:
            return None
        try:
            parsed = int(digits)
        except ValueError:
            # Past the interpreter's digit limit for str -> int.
            return None
        return parsed if parsed > 0 else None
    return None


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [str(item) for item in value if item is not None]


# =============================================================================
# Sanitizer
# =============================================================================


class CharacterSanitizer:
    """Maps arbitrary objects onto valid Character records.

    Attributes:
        rng: Random source for fallback ids, types and stats.
        precedence: Field precedence table in use.
    """

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        precedence: FieldPrecedenceTable = DEFAULT_FIELD_PRECEDENCE,
    ) -> None:
        """Initialize the sanitizer.

        Args:
            rng: Random source; pass a seeded instance for deterministic output.
            precedence: Field precedence table.
        """
        self.rng = rng or random.Random()
        self.precedence = precedence

    def sanitize(self, raw: Any) -> Character:
        """Convert ``raw`` into a Character, inventing whatever is missing.

        Args:
            raw: Any value; non-mappings are treated as an empty object.

        Returns:
            A fully populated Character.
        """
        if not isinstance(raw, Mapping):
            logger.debug("Sanitizing non-object entry", entry_type=type(raw).__name__)
            raw = {}

        table = self.precedence
        text = {
            field: self._text(raw, rule) for field, rule in table.text_fields.items()
        }
        stats = self._stats(raw)

        return Character(
            id=self._identifier(raw),
            name=text["name"],
            subtitle=text["subtitle"],
            type=self._unit_type(_first_present(raw, table.type_aliases)),
            unit_class=self._unit_class(_first_present(raw, table.class_aliases)),
            rarity=self._rarity(_first_present(raw, table.rarity_aliases), stats.hp),
            categories=_string_list(_first_present(raw, table.categories_aliases)),
            links=_string_list(_first_present(raw, table.links_aliases)),
            leader_skill=text["leader_skill"],
            passive_skill=text["passive_skill"],
            stats=stats,
        )

    def sanitize_many(self, entries: Iterable[Any]) -> list[Character]:
        """Sanitize every entry of a decoded model array."""
        return [self.sanitize(entry) for entry in entries]

    # -------------------------------------------------------------------------
    # Field helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _text(raw: Mapping[str, Any], rule: FieldRule) -> str:
        value = _first_present(raw, rule.aliases)
        if value is None:
            return rule.placeholder
        return str(value).strip()

    def _identifier(self, raw: Mapping[str, Any]) -> str:
        value = _first_present(raw, self.precedence.id_aliases)
        if value is not None and str(value).strip():
            return str(value).strip()
        return "".join(self.rng.choice(_ID_ALPHABET) for _ in range(GENERATED_ID_LENGTH))

    def _unit_type(self, value: Any) -> UnitType:
        if isinstance(value, str):
            try:
                return UnitType(value.strip().upper())
            except ValueError:
                pass
        return self.rng.choice(list(UnitType))

    @staticmethod
    def _unit_class(value: Any) -> UnitClass:
        if isinstance(value, str):
            try:
                return UnitClass(value.strip().capitalize())
            except ValueError:
                pass
        return UnitClass.SUPER

    @staticmethod
    def _rarity(value: Any, hp: int) -> Rarity:
        if isinstance(value, str):
            try:
                return Rarity(value.strip().upper())
            except ValueError:
                pass
        return Rarity.LR if hp > LR_HP_THRESHOLD else Rarity.UR

    def _stats(self, raw: Mapping[str, Any]) -> CharacterStats:
        nested = raw.get("stats")
        nested = nested if isinstance(nested, Mapping) else {}
        fallbacks = {
            "hp": (HP_FALLBACK_BASE, HP_FALLBACK_SPREAD),
            "atk": (ATK_FALLBACK_BASE, ATK_FALLBACK_SPREAD),
            "defense": (DEF_FALLBACK_BASE, DEF_FALLBACK_SPREAD),
        }

        values: dict[str, int] = {}
        for field, aliases in self.precedence.stat_fields.items():
            parsed = parse_positive_int(_first_present(nested, aliases))
            if parsed is None:
                parsed = parse_positive_int(_first_present(raw, aliases))
            if parsed is None:
                base, spread = fallbacks[field]
                parsed = base + self.rng.randrange(spread)
            values[field] = parsed

        return CharacterStats(hp=values["hp"], atk=values["atk"], defense=values["defense"])


def sanitize_character(raw: Any, *, rng: random.Random | None = None) -> Character:
    """Sanitize a single object with the default precedence table."""
    return CharacterSanitizer(rng=rng).sanitize(raw)


__all__ = [
    "FieldRule",
    "FieldPrecedenceTable",
    "FIELD_PRECEDENCE_V1",
    "DEFAULT_FIELD_PRECEDENCE",
    "CharacterSanitizer",
    "parse_positive_int",
    "sanitize_character",
]
