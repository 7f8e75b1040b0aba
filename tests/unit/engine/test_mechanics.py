"""Tests for keyword-based mechanics detection."""

from __future__ import annotations

import pytest

from dokkan_tactician.engine.mechanics import detect_mechanics
from dokkan_tactician.models.enums import MechanicBadge


class TestDetectMechanics:
    """Tests for detect_mechanics."""

    @pytest.mark.parametrize(
        "passive",
        ["Revives when HP is 0", "REVIVAL skill", "reviving once per battle"],
    )
    def test_revival_inflections(self, passive: str) -> None:
        """Test every inflection of revive triggers the badge."""
        assert detect_mechanics(passive) == [MechanicBadge.REVIVAL]

    def test_transformation(self) -> None:
        """Test transformation text triggers the badge."""
        assert detect_mechanics("Transforms from the 4th turn") == [MechanicBadge.TRANSFORMATION]

    def test_transformation_from_link_tag(self) -> None:
        """Test a Transform link tag triggers the badge."""
        assert detect_mechanics("ATK +100%", ["Transform"]) == [MechanicBadge.TRANSFORMATION]

    @pytest.mark.parametrize("passive", ["Performs a Fusion", "Fuses with Goku", "Merges with Zamasu"])
    def test_fusion(self, passive: str) -> None:
        """Test fusion keywords trigger the badge."""
        assert MechanicBadge.FUSION in detect_mechanics(passive)

    def test_multiple_badges_in_declaration_order(self) -> None:
        """Test several badges come back in a stable order."""
        badges = detect_mechanics("Fuses and transforms, then revives")

        assert badges == [
            MechanicBadge.REVIVAL,
            MechanicBadge.TRANSFORMATION,
            MechanicBadge.FUSION,
        ]

    def test_no_badges(self) -> None:
        """Test plain text yields no badges."""
        assert detect_mechanics("ATK & DEF +200%", ["Saiyan"]) == []

    def test_empty_passive(self) -> None:
        """Test an empty passive is handled."""
        assert detect_mechanics("") == []
