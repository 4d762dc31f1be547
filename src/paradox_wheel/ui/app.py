"""The Paradox Wheel - Main Application Entry Point.

Landing page for the multi-page Streamlit application. It shows the
welcome text from the site settings, catalogue counts, and quick
navigation to the main sections.
"""

from __future__ import annotations

import streamlit as st

from paradox_wheel.core.config import get_settings
from paradox_wheel.core.logging import configure_logging
from paradox_wheel.storage.database import get_database
from paradox_wheel.ui.theme import apply_theme


# =============================================================================
# Page Configuration
# =============================================================================


settings = get_settings()

st.set_page_config(
    page_title=settings.ui.page_title,
    page_icon="✦",
    layout="wide",
    initial_sidebar_state=settings.ui.sidebar_default_state,
    menu_items={
        "Get Help": None,
        "Report a bug": None,
        "About": "The Paradox Wheel - Mage: The Ascension reference and character creator",
    },
)

configure_logging(settings)

apply_theme()


# =============================================================================
# Main Page
# =============================================================================


def main() -> None:
    """Render the main landing page."""
    db = get_database()
    site = db.get_content("site-settings")

    st.markdown(f"""
    <div style="text-align: center; padding: 2rem 0;">
        <h1 style="font-size: 3rem; margin-bottom: 0.5rem;">✦ The Paradox Wheel</h1>
        <p style="font-size: 1.25rem; color: var(--text-secondary); font-style: italic;">
            {site["welcomeTitle"]}
        </p>
    </div>
    """, unsafe_allow_html=True)

    if site["welcomeText"]:
        st.markdown(site["welcomeText"])

    st.divider()

    counts = db.get_counts()
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("📜 Rotes", counts["rotes"])
    with col2:
        st.metric("🧙 Characters", counts["characters"])
    with col3:
        st.metric("⚖️ Merits & Flaws", counts["merits"])
    with col4:
        st.metric("🏛️ Mage Groups", counts["mage_groups"])

    st.divider()

    st.markdown("## Get Started")
    col1, col2, col3 = st.columns(3)

    with col1:
        st.markdown("""
        ### 📜 Grimoire

        Browse the rotes of the Traditions and the Technocracy. Search by
        name, filter by tradition, or set minimum Sphere ratings.
        """)
        if st.button("Open Grimoire →", key="nav_grimoire", use_container_width=True):
            st.switch_page("pages/1_Grimoire.py")

    with col2:
        st.markdown("""
        ### ✨ Create a Mage

        Walk through character creation step by step: priorities,
        Spheres, Backgrounds and freebie points, with every rule checked.
        """)
        if st.button("Start Creating →", key="nav_create", use_container_width=True):
            st.switch_page("pages/3_Character_Creation.py")

    with col3:
        st.markdown("""
        ### 🧙 Characters

        Your saved mages. Assign rotes from the grimoire and mark
        favourites as specialties.
        """)
        if st.button("Open Characters →", key="nav_characters", use_container_width=True):
            st.switch_page("pages/2_Characters.py")

    if site["howToUse"]:
        st.divider()
        st.markdown("## How to Use")
        st.markdown(site["howToUse"])

    st.divider()
    st.caption(site["footerText"])


# =============================================================================
# Sidebar
# =============================================================================


def render_sidebar() -> None:
    """Render the sidebar navigation."""
    with st.sidebar:
        st.markdown("# ✦ The Paradox Wheel")
        st.markdown("*Mage: The Ascension*")

        st.divider()

        st.markdown("### Navigation")

        if st.button("📜 Grimoire", key="side_grimoire", use_container_width=True):
            st.switch_page("pages/1_Grimoire.py")

        if st.button("🧙 Characters", key="side_characters", use_container_width=True):
            st.switch_page("pages/2_Characters.py")

        if st.button("✨ Character Creation", key="side_create", use_container_width=True):
            st.switch_page("pages/3_Character_Creation.py")

        if st.button("⚖️ Merits & Flaws", key="side_merits", use_container_width=True):
            st.switch_page("pages/4_Merits_Flaws.py")

        if st.button("🔐 Admin", key="side_admin", use_container_width=True):
            st.switch_page("pages/5_Admin.py")


# =============================================================================
# Entry Point
# =============================================================================


render_sidebar()
main()
