"""Grimoire Page - Browse and Search Rotes.

This page allows users to:
- Search rotes by name, tradition, description or sphere
- Filter by tradition
- Require minimum Sphere ratings (Technocracy names match their Tradition equivalents)
"""

from __future__ import annotations

import streamlit as st

from paradox_wheel.engine.search import ALL, rote_traditions, search_rotes
from paradox_wheel.models.traditions import SPHERES
from paradox_wheel.storage.database import get_database
from paradox_wheel.ui.components import RoteCard
from paradox_wheel.ui.theme import apply_theme


# =============================================================================
# Page Configuration
# =============================================================================


st.set_page_config(
    page_title="Grimoire | The Paradox Wheel",
    page_icon="📜",
    layout="wide",
    initial_sidebar_state="expanded",
)

apply_theme()


# =============================================================================
# Main Page
# =============================================================================


def main() -> None:
    """Render the grimoire page."""
    db = get_database()
    rotes = db.list_rotes()

    st.title("📜 Grimoire")
    st.markdown("The collected rotes of the Awakened. Filters combine.")

    with st.sidebar:
        st.markdown("### Sphere Minimums")
        minimums = {
            sphere: st.slider(sphere, min_value=0, max_value=5, value=0, key=f"min_{sphere}")
            for sphere in SPHERES
        }

    col1, col2 = st.columns([2, 1])
    with col1:
        query = st.text_input("Search", placeholder="Name, tradition, description or sphere")
    with col2:
        tradition = st.selectbox("Tradition", options=[ALL, *rote_traditions(rotes)],
                                 format_func=lambda value: "All traditions" if value == ALL else value)

    results = search_rotes(rotes, query=query, sphere_minimums=minimums, tradition=tradition)

    st.caption(f"{len(results)} of {len(rotes)} rotes")

    if not rotes:
        st.info("The grimoire is empty. An admin can seed sample rotes from the Admin page.")
        return

    if not results:
        st.warning("No rotes match these filters.")
        return

    for rote in results:
        RoteCard(rote).render()


main()
