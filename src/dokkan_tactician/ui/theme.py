"""Dokkan Tactician Theme.

Dark layout with type-coloured character cards. Card colours follow the
in-game type palette; rating colours follow the traffic-light bands of the
analysis panel.
"""

from __future__ import annotations

import streamlit as st

from dokkan_tactician.models.enums import UnitType


# =============================================================================
# Color Palette
# =============================================================================


class Colors:
    """Palette for cards, badges and the analysis panel."""

    # Card types
    AGL = "#2563eb"
    TEQ = "#16a34a"
    INT = "#9333ea"
    STR = "#dc2626"
    PHY = "#ea580c"

    # Backgrounds
    BG_DARK = "#0F0F0F"
    BG_CARD = "#1A1A1A"
    BG_ELEVATED = "#242424"

    # Text
    TEXT_PRIMARY = "#FAFAFA"
    TEXT_SECONDARY = "#A1A1A1"
    TEXT_MUTED = "#737373"

    BORDER = "#333333"

    # Rating bands
    RATING_HIGH = "#22C55E"
    RATING_MID = "#EAB308"
    RATING_LOW = "#EF4444"


TYPE_COLORS: dict[UnitType, str] = {
    UnitType.AGL: Colors.AGL,
    UnitType.TEQ: Colors.TEQ,
    UnitType.INT: Colors.INT,
    UnitType.STR: Colors.STR,
    UnitType.PHY: Colors.PHY,
}


def type_color(unit_type: UnitType) -> str:
    """Card accent colour for a unit type."""
    return TYPE_COLORS.get(unit_type, Colors.BORDER)


def rating_color(rating: float) -> str:
    """Colour band for an analysis rating: green from 8, yellow from 5."""
    if rating >= 8:
        return Colors.RATING_HIGH
    if rating >= 5:
        return Colors.RATING_MID
    return Colors.RATING_LOW


# =============================================================================
# Main CSS
# =============================================================================


THEME_CSS = f"""
<style>
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;800&display=swap');

    :root {{
        --bg-dark: {Colors.BG_DARK};
        --bg-card: {Colors.BG_CARD};
        --bg-elevated: {Colors.BG_ELEVATED};
        --text-primary: {Colors.TEXT_PRIMARY};
        --text-secondary: {Colors.TEXT_SECONDARY};
        --text-muted: {Colors.TEXT_MUTED};
        --border: {Colors.BORDER};
        --font-body: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif;
    }}

    /* Hide Streamlit chrome */
    #MainMenu {{visibility: hidden;}}
    footer {{visibility: hidden;}}
    .stDeployButton {{display: none;}}

    .main .block-container {{
        padding: 2rem;
        max-width: 1400px;
        font-family: var(--font-body);
    }}

    h1 {{
        font-weight: 800 !important;
        letter-spacing: -0.02em;
        font-style: italic;
    }}

    /* =================================
       CHARACTER CARDS
       ================================= */

    .unit-card {{
        border-radius: 12px;
        padding: 0.75rem;
        color: #FFFFFF;
        min-height: 260px;
        box-shadow: 0 4px 12px rgba(0, 0, 0, 0.35);
    }}

    .unit-card .unit-name {{
        font-weight: 800;
        font-size: 0.95rem;
        line-height: 1.2;
    }}

    .unit-card .unit-subtitle {{
        font-size: 0.7rem;
        opacity: 0.85;
        margin-bottom: 0.5rem;
    }}

    .unit-card .unit-tag {{
        display: inline-block;
        background: rgba(0, 0, 0, 0.3);
        border-radius: 6px;
        padding: 1px 6px;
        margin: 1px;
        font-size: 0.65rem;
        font-weight: 600;
    }}

    .unit-card .unit-stats {{
        display: grid;
        grid-template-columns: repeat(3, 1fr);
        gap: 4px;
        margin: 0.5rem 0;
        font-size: 0.7rem;
        text-align: center;
    }}

    .unit-card .unit-stats strong {{
        display: block;
        font-size: 0.8rem;
    }}

    .unit-card a {{
        color: #FFFFFF !important;
        font-size: 0.7rem;
    }}

    .empty-slot {{
        border: 2px dashed var(--border);
        border-radius: 12px;
        min-height: 260px;
        display: flex;
        align-items: center;
        justify-content: center;
        color: var(--text-muted);
        font-size: 0.8rem;
    }}

    .slot-label {{
        text-transform: uppercase;
        font-size: 0.7rem;
        font-weight: 700;
        letter-spacing: 0.1em;
        color: var(--text-secondary);
        margin-bottom: 4px;
    }}

    /* =================================
       ANALYSIS PANEL
       ================================= */

    .rating-box {{
        font-size: 3rem;
        font-weight: 800;
        text-align: center;
        border-radius: 12px;
        padding: 1rem;
        background: var(--bg-elevated);
    }}
</style>
"""


def apply_theme() -> None:
    """Apply the theme to the Streamlit app."""
    st.markdown(THEME_CSS, unsafe_allow_html=True)


__all__ = [
    "Colors",
    "TYPE_COLORS",
    "type_color",
    "rating_color",
    "THEME_CSS",
    "apply_theme",
]
