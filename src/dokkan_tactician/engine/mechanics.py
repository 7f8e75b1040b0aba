"""Keyword-based mechanics detection for character cards."""

from __future__ import annotations

from collections.abc import Sequence

from dokkan_tactician.models.enums import MechanicBadge


# Substrings are matched against lower-cased text; "reviv" covers revive,
# revival and reviving.
MECHANIC_KEYWORDS: dict[MechanicBadge, tuple[str, ...]] = {
    MechanicBadge.REVIVAL: ("reviv",),
    MechanicBadge.TRANSFORMATION: ("transform",),
    MechanicBadge.FUSION: ("fuse", "fusion", "merg"),
}

MECHANIC_LINK_TAGS: dict[MechanicBadge, tuple[str, ...]] = {
    MechanicBadge.TRANSFORMATION: ("Transform",),
}


def detect_mechanics(passive_skill: str, links: Sequence[str] = ()) -> list[MechanicBadge]:
    """Derive display badges from a passive skill and link tags.

    Args:
        passive_skill: Passive skill text.
        links: Link skill names.

    Returns:
        Matching badges in declaration order.
    """
    text = f"{passive_skill or ''} {' '.join(links)}".lower()
    badges: list[MechanicBadge] = []
    for badge, keywords in MECHANIC_KEYWORDS.items():
        tags = MECHANIC_LINK_TAGS.get(badge, ())
        if any(keyword in text for keyword in keywords) or any(tag in links for tag in tags):
            badges.append(badge)
    return badges


__all__ = [
    "MECHANIC_KEYWORDS",
    "MECHANIC_LINK_TAGS",
    "detect_mechanics",
]
