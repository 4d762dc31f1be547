"""Admin Page - Manage Reference Data and Site Content.

Requires the admin password (``PARADOX_WHEEL_ADMIN_PASSWORD``). Without a
configured password the page stays locked.
"""

from __future__ import annotations

import json

import streamlit as st

from paradox_wheel.core.config import get_settings
from paradox_wheel.core.exceptions import ParadoxWheelError
from paradox_wheel.core.logging import get_logger
from paradox_wheel.core.security import check_admin_password
from paradox_wheel.engine.search import parse_sphere_filter
from paradox_wheel.models.enums import MeritKind
from paradox_wheel.models.traditions import ALL_FACTIONS
from paradox_wheel.storage.database import CONTENT_DEFAULTS, get_database
from paradox_wheel.ui.theme import apply_theme

logger = get_logger(__name__)


# =============================================================================
# Page Configuration
# =============================================================================


st.set_page_config(
    page_title="Admin | The Paradox Wheel",
    page_icon="🔐",
    layout="wide",
    initial_sidebar_state="expanded",
)

apply_theme()


# =============================================================================
# Sections
# =============================================================================


def render_login() -> None:
    """Password gate."""
    if not get_settings().admin.enabled:
        st.warning("Admin access is disabled. Set PARADOX_WHEEL_ADMIN_PASSWORD to enable it.")
        return

    with st.form("admin_login"):
        password = st.text_input("Password", type="password")
        if st.form_submit_button("Unlock"):
            if check_admin_password(password):
                st.session_state.admin_authenticated = True
                st.rerun()
            else:
                st.toast("Invalid password", icon="⚠️")


def render_rote_tools() -> None:
    db = get_database()
    st.markdown("### Rotes")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("🌱 Seed sample rotes", use_container_width=True):
            created = db.seed_rotes()
            st.toast(f"Added {len(created)} rotes", icon="✅")
    with col2:
        confirm = st.checkbox("I understand this deletes every rote")
        if st.button("🗑️ Delete all rotes", disabled=not confirm, use_container_width=True):
            deleted = db.delete_all_rotes()
            st.toast(f"Deleted {deleted} rotes", icon="✅")

    with st.form("add_rote", clear_on_submit=True):
        st.markdown("#### Add a rote")
        name = st.text_input("Name")
        tradition = st.selectbox("Tradition", options=ALL_FACTIONS)
        level = st.text_input("Level", placeholder="Disciple")
        spheres = st.text_input("Spheres", placeholder="Forces:3,Prime:2")
        page_ref = st.text_input("Page reference")
        description = st.text_area("Description")
        if st.form_submit_button("Add rote"):
            try:
                parsed = parse_sphere_filter(spheres)
                if not (name and level and description and parsed):
                    st.toast("Name, level, spheres and description are required", icon="⚠️")
                else:
                    db.create_rote(name, tradition, description, parsed, level, page_ref or None)
                    st.toast(f"Added {name}", icon="✅")
            except ParadoxWheelError as exc:
                st.toast(exc.message, icon="⚠️")

    for rote in db.list_rotes():
        col1, col2 = st.columns([5, 1])
        with col1:
            st.write(f"**{rote.name}** · {rote.tradition} · {rote.level}")
        with col2:
            if st.button("Delete", key=f"del_rote_{rote.id}"):
                db.delete_rote(rote.id)
                st.rerun()


def render_merit_tools() -> None:
    db = get_database()
    st.markdown("### Merits & Flaws")

    with st.form("add_merit", clear_on_submit=True):
        name = st.text_input("Name")
        category = st.text_input("Category", placeholder="Physical")
        kind = st.selectbox("Type", options=[kind.value for kind in MeritKind])
        cost = st.number_input("Cost", min_value=0, max_value=10, value=1)
        description = st.text_area("Description")
        if st.form_submit_button("Add entry"):
            if not (name and category and description):
                st.toast("Name, category and description are required", icon="⚠️")
            else:
                db.create_merit(name, category, kind, int(cost), description)
                st.toast(f"Added {name}", icon="✅")

    for merit in db.list_merits():
        col1, col2 = st.columns([5, 1])
        with col1:
            st.write(f"**{merit.name}** · {merit.type} · {merit.cost}")
        with col2:
            if st.button("Delete", key=f"del_merit_{merit.id}"):
                db.delete_merit(merit.id)
                st.rerun()


def render_content_tools() -> None:
    db = get_database()
    st.markdown("### Site Content")

    section = st.selectbox("Section", options=list(CONTENT_DEFAULTS))
    current = db.get_content(section)
    with st.form(f"content_{section}"):
        values = {
            key: st.text_area(key, value=value, key=f"content_{section}_{key}")
            for key, value in current.items()
        }
        if st.form_submit_button("Save"):
            db.update_content(section, values)
            st.toast("Content saved", icon="✅")

    with st.expander("Raw JSON"):
        st.code(json.dumps(current, indent=2), language="json")


# =============================================================================
# Main Page
# =============================================================================


def main() -> None:
    """Render the admin page."""
    st.title("🔐 Admin")

    if not st.session_state.get("admin_authenticated"):
        render_login()
        return

    if st.button("Lock"):
        st.session_state.admin_authenticated = False
        st.rerun()

    tab_rotes, tab_merits, tab_content = st.tabs(["Rotes", "Merits & Flaws", "Content"])
    with tab_rotes:
        render_rote_tools()
    with tab_merits:
        render_merit_tools()
    with tab_content:
        render_content_tools()


main()
