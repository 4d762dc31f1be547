"""Characters Page - Saved Mages and Their Rotes.

This page allows users to:
- View saved characters, newest first
- Assign grimoire rotes to a character and unassign them
- Delete characters
"""

from __future__ import annotations

import streamlit as st

from paradox_wheel.core.exceptions import DuplicateRecordError, RecordNotFoundError
from paradox_wheel.core.logging import get_logger
from paradox_wheel.engine.builder import CharacterBuilder
from paradox_wheel.models.traditions import get_tradition_symbol
from paradox_wheel.storage.database import get_database
from paradox_wheel.storage.records import CharacterRecord, RoteRecord
from paradox_wheel.ui.components import BuildSheet, RoteCard
from paradox_wheel.ui.theme import apply_theme

logger = get_logger(__name__)


# =============================================================================
# Page Configuration
# =============================================================================


st.set_page_config(
    page_title="Characters | The Paradox Wheel",
    page_icon="🧙",
    layout="wide",
    initial_sidebar_state="expanded",
)

apply_theme()


# =============================================================================
# Character Panel
# =============================================================================


def render_character(character: CharacterRecord, all_rotes: list[RoteRecord]) -> None:
    """Render one saved character with its rote controls."""
    db = get_database()
    symbol = get_tradition_symbol(character.faction)
    title = f"{symbol} {character.name} · {character.faction}"

    with st.expander(title):
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Arete", character.arete if character.arete is not None else "–")
        with col2:
            st.write(f"**Concept:** {character.concept or '–'}")
            st.write(f"**Essence:** {character.essence or '–'}")
        with col3:
            st.write(f"**Avatar:** {character.avatar or '–'}")
            st.caption(f"Created {character.created_at:%b %d, %Y}")

        if character.sheet:
            if st.toggle("Show full sheet", key=f"sheet_{character.id}"):
                BuildSheet(CharacterBuilder.from_sheet(character.sheet).state).render()

        st.markdown("#### Rotes")
        if not character.rotes:
            st.caption("No rotes assigned yet.")
        for assigned in character.rotes:
            if assigned.rote is None:
                continue
            col1, col2 = st.columns([5, 1])
            with col1:
                marker = " ⭐" if assigned.specialty else ""
                st.markdown(f"**{assigned.rote.name}**{marker}")
                if assigned.notes:
                    st.caption(assigned.notes)
            with col2:
                if st.button("Remove", key=f"unassign_{character.id}_{assigned.rote_id}"):
                    db.unassign_rote(character.id, assigned.rote_id)
                    st.toast(f"Removed {assigned.rote.name}", icon="✅")
                    st.rerun()

        assigned_ids = {assigned.rote_id for assigned in character.rotes}
        available = [rote for rote in all_rotes if rote.id not in assigned_ids]
        if available:
            with st.form(key=f"assign_{character.id}", clear_on_submit=True):
                rote = st.selectbox("Add a rote", options=available, format_func=lambda r: f"{r.name} ({r.tradition})")
                notes = st.text_input("Notes")
                specialty = st.checkbox("Specialty")
                if st.form_submit_button("Assign"):
                    try:
                        db.assign_rote(character.id, rote.id, notes=notes or None, specialty=specialty)
                    except (DuplicateRecordError, RecordNotFoundError) as exc:
                        st.toast(exc.message, icon="⚠️")
                    else:
                        st.toast(f"Assigned {rote.name}", icon="✅")
                        st.rerun()

        st.divider()
        if st.button("🗑️ Delete character", key=f"delete_{character.id}", type="secondary"):
            db.delete_character(character.id)
            st.toast(f"Deleted {character.name}", icon="✅")
            st.rerun()

        if character.rotes:
            with st.popover("Rote details"):
                for assigned in character.rotes:
                    if assigned.rote is not None:
                        RoteCard(assigned.rote).render()


# =============================================================================
# Main Page
# =============================================================================


def main() -> None:
    """Render the characters page."""
    db = get_database()

    st.title("🧙 Characters")

    characters = db.list_characters()
    if not characters:
        st.info("No characters yet.")
        if st.button("✨ Create a character", type="primary"):
            st.switch_page("pages/3_Character_Creation.py")
        return

    all_rotes = db.list_rotes()
    for character in characters:
        render_character(character, all_rotes)


main()
