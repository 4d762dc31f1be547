"""Paradox Wheel Theme - Gothic Occult Aesthetic.

Deep violet backgrounds with brass accents, in the manner of the
Mage: The Ascension rulebooks. Prioritizes readability over ornament.
"""

from __future__ import annotations

import streamlit as st

from paradox_wheel.core.constants import TRAIT_MAX


# =============================================================================
# Color Palette
# =============================================================================


class Colors:
    """Paradox Wheel color palette."""

    # Primary accent
    VIOLET = "#7C3AED"
    VIOLET_DARK = "#5B21B6"

    # Brass accents
    BRASS = "#C9A227"
    BRASS_LIGHT = "#E0C15A"

    # Backgrounds
    BG_DARK = "#120E1A"
    BG_CARD = "#1D1728"
    BG_ELEVATED = "#2A2238"

    # Text
    TEXT_PRIMARY = "#F3EEFA"
    TEXT_SECONDARY = "#BFB3D3"
    TEXT_MUTED = "#8A7CA3"

    # Borders
    BORDER = "#3B3150"

    # Status
    SUCCESS = "#22C55E"
    WARNING = "#F59E0B"
    ERROR = "#EF4444"

    # Dots
    DOT_FILLED = "#C9A227"
    DOT_FREEBIE = "#A78BFA"
    DOT_EMPTY = "#3B3150"


# =============================================================================
# Main CSS
# =============================================================================


THEME_CSS = """
<style>
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&family=Cinzel:wght@500;600;700&display=swap');

    :root {
        --bg-dark: #120E1A;
        --bg-card: #1D1728;
        --bg-elevated: #2A2238;
        --text-primary: #F3EEFA;
        --text-secondary: #BFB3D3;
        --text-muted: #8A7CA3;
        --violet: #7C3AED;
        --brass: #C9A227;
        --border: #3B3150;
        --font-display: 'Cinzel', serif;
        --font-body: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif;
    }

    #MainMenu {visibility: hidden;}
    .stDeployButton {display: none;}

    .main .block-container {
        padding: 2rem;
        max-width: 1200px;
        font-family: var(--font-body);
        color: var(--text-primary);
    }

    h1, h2, h3 {
        font-family: var(--font-display) !important;
        color: var(--text-primary) !important;
        font-weight: 600 !important;
        letter-spacing: 0.02em;
    }

    h1 { border-bottom: 2px solid var(--brass); padding-bottom: 0.5rem; }

    /* Rote and catalogue cards */
    .pw-card {
        background: var(--bg-card);
        border: 1px solid var(--border);
        border-left: 3px solid var(--violet);
        border-radius: 8px;
        padding: 1rem 1.25rem;
        margin-bottom: 0.75rem;
    }

    .pw-card-title {
        font-family: var(--font-display);
        font-size: 1.1rem;
        color: var(--brass);
        margin-bottom: 0.25rem;
    }

    .pw-card-meta {
        color: var(--text-muted);
        font-size: 0.85rem;
        margin-bottom: 0.5rem;
    }

    .pw-sphere-tag {
        display: inline-block;
        background: var(--bg-elevated);
        border: 1px solid var(--border);
        border-radius: 999px;
        padding: 0.1rem 0.6rem;
        margin: 0 0.3rem 0.3rem 0;
        font-size: 0.8rem;
        color: var(--text-secondary);
    }

    .pw-dots { letter-spacing: 0.15em; font-size: 1.1rem; }

    /* Phase progress */
    .pw-phase {
        color: var(--text-muted);
        font-size: 0.85rem;
        text-transform: uppercase;
        letter-spacing: 0.08em;
    }
</style>
"""


def apply_theme() -> None:
    """Apply the theme to the Streamlit app."""
    st.markdown(THEME_CSS, unsafe_allow_html=True)


def dot_rating_html(base: int, bonus: int = 0, maximum: int = TRAIT_MAX) -> str:
    """Build a dot rating: base dots, freebie dots in a second color, then empties."""
    base = max(0, min(base, maximum))
    bonus = max(0, min(bonus, maximum - base))
    empty = maximum - base - bonus
    return (
        '<span class="pw-dots">'
        f'<span style="color:{Colors.DOT_FILLED}">{"●" * base}</span>'
        f'<span style="color:{Colors.DOT_FREEBIE}">{"●" * bonus}</span>'
        f'<span style="color:{Colors.DOT_EMPTY}">{"○" * empty}</span>'
        "</span>"
    )


def render_dot_rating(label: str, base: int, bonus: int = 0, maximum: int = TRAIT_MAX) -> None:
    """Render a labelled dot rating row."""
    st.markdown(
        f"{label} &nbsp; {dot_rating_html(base, bonus, maximum)}",
        unsafe_allow_html=True,
    )


__all__ = [
    "Colors",
    "THEME_CSS",
    "apply_theme",
    "dot_rating_html",
    "render_dot_rating",
]
