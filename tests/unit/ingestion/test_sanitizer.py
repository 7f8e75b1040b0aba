"""Tests for the tolerant character sanitizer."""

from __future__ import annotations

import random
from typing import Any

import pytest

from dokkan_tactician.core.constants import (
    ATK_FALLBACK_BASE,
    ATK_FALLBACK_SPREAD,
    DEF_FALLBACK_BASE,
    DEF_FALLBACK_SPREAD,
    GENERATED_ID_LENGTH,
    HP_FALLBACK_BASE,
    HP_FALLBACK_SPREAD,
)
from dokkan_tactician.ingestion.sanitizer import (
    FIELD_PRECEDENCE_V1,
    CharacterSanitizer,
    FieldPrecedenceTable,
    FieldRule,
    parse_positive_int,
    sanitize_character,
)
from dokkan_tactician.models.enums import Rarity, UnitClass, UnitType


@pytest.fixture
def sanitizer(rng: random.Random) -> CharacterSanitizer:
    """Sanitizer with a seeded random source."""
    return CharacterSanitizer(rng=rng)


class TestParsePositiveInt:
    """Tests for parse_positive_int."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (21450, 21450),
            ("21,450", 21450),
            ("HP 18.000", 18000),
            (12345.6, 12346),
            (0, None),
            (-5, None),
            ("", None),
            ("unknown", None),
            (True, None),
            (None, None),
            (float("nan"), None),
            ([1, 2], None),
        ],
    )
    def test_values(self, value: Any, expected: int | None) -> None:
        """Test numbers and numeric-looking strings are read as positive ints."""
        assert parse_positive_int(value) == expected

    def test_oversized_digit_string(self) -> None:
        """Test a digit run past the int conversion limit reads as missing."""
        assert parse_positive_int("9" * 5000) is None


class TestCharacterSanitizer:
    """Tests for CharacterSanitizer.sanitize."""

    def test_well_formed_entry(
        self,
        sanitizer: CharacterSanitizer,
        sample_raw_character: dict[str, Any],
    ) -> None:
        """Test a complete entry is carried over unchanged."""
        char = sanitizer.sanitize(sample_raw_character)

        assert char.id == "gohan-beast"
        assert char.name == "Gohan (Beast)"
        assert char.subtitle == "Awakened Power"
        assert char.type is UnitType.INT
        assert char.unit_class is UnitClass.SUPER
        assert char.rarity is Rarity.LR
        assert char.links == ["Super Saiyan", "Fierce Battle"]
        assert char.leader_skill.startswith("Ki +3")
        assert char.stats.hp == 23456
        assert char.stats.atk == 21450
        assert char.stats.defense == 13000

    def test_name_aliases(self, sanitizer: CharacterSanitizer) -> None:
        """Test alternative keys are used in precedence order."""
        char = sanitizer.sanitize({"character": "Broly", "unit": "Other", "title": "Legendary"})

        assert char.name == "Broly"
        assert char.subtitle == "Legendary"

    def test_blank_values_fall_through(self, sanitizer: CharacterSanitizer) -> None:
        """Test blank strings do not win over later aliases."""
        char = sanitizer.sanitize({"name": "  ", "characterName": "Cell"})

        assert char.name == "Cell"

    def test_skill_aliases(self, sanitizer: CharacterSanitizer) -> None:
        """Test snake_case and short skill keys are accepted."""
        char = sanitizer.sanitize({"leader_skill": "ATK +150%", "passive": "Revives once"})

        assert char.leader_skill == "ATK +150%"
        assert char.passive_skill == "Revives once"

    def test_placeholders(self, sanitizer: CharacterSanitizer) -> None:
        """Test missing text fields get their placeholders."""
        char = sanitizer.sanitize({})

        assert char.name == "Warrior"
        assert char.subtitle == "Fighter"
        assert char.leader_skill == "N/A"
        assert char.passive_skill == "N/A"
        assert char.categories == []
        assert char.links == []

    def test_enum_normalization(self, sanitizer: CharacterSanitizer) -> None:
        """Test enum values are matched case-insensitively."""
        char = sanitizer.sanitize({"type": " teq ", "class": "extreme", "rarity": "tur"})

        assert char.type is UnitType.TEQ
        assert char.unit_class is UnitClass.EXTREME
        assert char.rarity is Rarity.TUR

    def test_invalid_enums_fall_back(self, sanitizer: CharacterSanitizer) -> None:
        """Test invalid enums fall back to a random type, Super and a stat-based rarity."""
        char = sanitizer.sanitize(
            {"type": "Fire", "class": "Mega", "rarity": "SSR", "stats": {"hp": 25000}}
        )

        assert char.type in set(UnitType)
        assert char.unit_class is UnitClass.SUPER
        assert char.rarity is Rarity.LR

    def test_low_hp_rarity_fallback(self, sanitizer: CharacterSanitizer) -> None:
        """Test an unknown rarity with modest HP becomes UR."""
        char = sanitizer.sanitize({"stats": {"hp": 15000, "atk": 15000, "def": 9000}})

        assert char.rarity is Rarity.UR

    def test_flattened_and_string_stats(self, sanitizer: CharacterSanitizer) -> None:
        """Test stats at the top level and formatted as strings are parsed."""
        char = sanitizer.sanitize({"hp": "21,450", "atk": "19.800", "def": 11000})

        assert char.stats.hp == 21450
        assert char.stats.atk == 19800
        assert char.stats.defense == 11000

    def test_unparsable_nested_stat_uses_top_level(self, sanitizer: CharacterSanitizer) -> None:
        """Test a junk nested value does not hide a valid top-level one."""
        char = sanitizer.sanitize({"stats": {"hp": "???"}, "hp": 20000})

        assert char.stats.hp == 20000

    def test_oversized_stat_uses_fallback_band(self, sanitizer: CharacterSanitizer) -> None:
        """Test an absurdly long stat string is replaced instead of raising."""
        char = sanitizer.sanitize({"hp": "9" * 5000})

        assert HP_FALLBACK_BASE <= char.stats.hp < HP_FALLBACK_BASE + HP_FALLBACK_SPREAD

    def test_missing_stats_use_fallback_bands(self, sanitizer: CharacterSanitizer) -> None:
        """Test missing stats are drawn from their fallback bands."""
        char = sanitizer.sanitize({"stats": {"hp": 0, "atk": -1}})

        assert HP_FALLBACK_BASE <= char.stats.hp < HP_FALLBACK_BASE + HP_FALLBACK_SPREAD
        assert ATK_FALLBACK_BASE <= char.stats.atk < ATK_FALLBACK_BASE + ATK_FALLBACK_SPREAD
        assert DEF_FALLBACK_BASE <= char.stats.defense < DEF_FALLBACK_BASE + DEF_FALLBACK_SPREAD

    def test_generated_id(self, sanitizer: CharacterSanitizer) -> None:
        """Test a missing id is replaced by a random token."""
        char = sanitizer.sanitize({"name": "Goku"})

        assert len(char.id) == GENERATED_ID_LENGTH
        assert char.id.isalnum()

    def test_lists_are_stringified(self, sanitizer: CharacterSanitizer) -> None:
        """Test list fields keep only non-null entries as strings."""
        char = sanitizer.sanitize({"links": ["Saiyan", None, 7], "categories": "not a list"})

        assert char.links == ["Saiyan", "7"]
        assert char.categories == []

    @pytest.mark.parametrize("raw", [None, 42, "Goku", ["a", "b"], 3.5])
    def test_non_object_input(self, sanitizer: CharacterSanitizer, raw: Any) -> None:
        """Test any value produces a structurally valid character."""
        char = sanitizer.sanitize(raw)

        assert char.name == "Warrior"
        assert char.type in set(UnitType)
        assert char.unit_class in set(UnitClass)
        assert char.stats.hp > 0
        assert char.stats.atk > 0
        assert char.stats.defense > 0

    def test_seeded_output_is_deterministic(self) -> None:
        """Test two sanitizers with the same seed invent the same values."""
        first = CharacterSanitizer(rng=random.Random(99)).sanitize({"type": "bogus"})
        second = CharacterSanitizer(rng=random.Random(99)).sanitize({"type": "bogus"})

        assert first == second

    def test_sanitize_many(self, sanitizer: CharacterSanitizer) -> None:
        """Test every entry of an array is sanitized."""
        chars = sanitizer.sanitize_many([{"name": "Goku"}, None, {"name": "Vegeta"}])

        assert [char.name for char in chars] == ["Goku", "Warrior", "Vegeta"]


class TestFieldPrecedence:
    """Tests for the versioned precedence table."""

    def test_v1_name_precedence(self) -> None:
        """Test the documented alias order for names."""
        assert FIELD_PRECEDENCE_V1.text_fields["name"].aliases[:2] == ("name", "character")

    def test_custom_table(self, rng: random.Random) -> None:
        """Test a custom table changes which keys are read."""
        table = FieldPrecedenceTable(
            version="test",
            text_fields={
                **FIELD_PRECEDENCE_V1.text_fields,
                "name": FieldRule(aliases=("nombre",), placeholder="Guerrero"),
            },
            stat_fields=FIELD_PRECEDENCE_V1.stat_fields,
        )
        sanitizer = CharacterSanitizer(rng=rng, precedence=table)

        assert sanitizer.sanitize({"nombre": "Goku"}).name == "Goku"
        assert sanitizer.sanitize({"name": "Goku"}).name == "Guerrero"


class TestSanitizeCharacter:
    """Tests for the module-level helper."""

    def test_uses_given_rng(self) -> None:
        """Test the helper honours an injected random source."""
        first = sanitize_character({}, rng=random.Random(5))
        second = sanitize_character({}, rng=random.Random(5))

        assert first == second
