"""Merits & Flaws Page - Browse the Catalogue.

Merits cost freebie points; flaws give them back (up to 7).
"""

from __future__ import annotations

import streamlit as st

from paradox_wheel.core.constants import MAX_FLAW_POINTS
from paradox_wheel.engine.search import ALL, filter_backgrounds, filter_merits, group_by_category
from paradox_wheel.storage.database import get_database
from paradox_wheel.ui.components import MeritCard
from paradox_wheel.ui.theme import apply_theme


# =============================================================================
# Page Configuration
# =============================================================================


st.set_page_config(
    page_title="Merits & Flaws | The Paradox Wheel",
    page_icon="⚖️",
    layout="wide",
    initial_sidebar_state="expanded",
)

apply_theme()


# =============================================================================
# Main Page
# =============================================================================


def main() -> None:
    """Render the merits & flaws catalogue."""
    db = get_database()
    merits = db.list_merits()

    st.title("⚖️ Merits & Flaws")
    st.markdown(f"Merits cost freebie points. Flaws grant them, up to {MAX_FLAW_POINTS} points in total.")

    col1, col2, col3 = st.columns([2, 1, 1])
    with col1:
        term = st.text_input("Search", placeholder="Name, category or description")
    with col2:
        kind = st.selectbox("Type", options=[ALL, "merit", "flaw"], format_func=str.title)
    with col3:
        categories = sorted({merit.category for merit in merits})
        category = st.selectbox("Category", options=[ALL, *categories],
                                format_func=lambda value: "All categories" if value == ALL else value)

    results = filter_merits(merits, kind=kind, category=category, term=term)
    st.caption(f"{len(results)} of {len(merits)} entries")

    for group, entries in group_by_category(results).items():
        st.markdown(f"### {group}")
        for entry in entries:
            MeritCard(entry).render()

    st.divider()
    st.markdown("## Backgrounds")
    subtype = st.radio("Show", options=[ALL, "general", "mage"], horizontal=True, format_func=str.title)
    for background in filter_backgrounds(db.list_backgrounds(), subtype=subtype, term=term):
        with st.expander(f"{background.name} · {background.cost}"):
            st.caption(f"{background.category} · {background.subtype}")
            st.write(background.description)


main()
