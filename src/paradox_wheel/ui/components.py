"""Reusable UI components for the Streamlit interface.

Cards for rotes and catalogue entries, a saved-character sheet, and the
toast helper every page uses to report an ``AllocationResult``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from html import escape
from typing import TYPE_CHECKING

import streamlit as st

from paradox_wheel.core.exceptions import UIError
from paradox_wheel.core.logging import get_logger
from paradox_wheel.models.enums import Ability, Attribute, Background, FreebieCategory, Sphere
from paradox_wheel.models.traditions import get_sphere_dots, get_tradition_symbol
from paradox_wheel.ui.theme import dot_rating_html


if TYPE_CHECKING:
    from paradox_wheel.engine.allocator import AllocationResult
    from paradox_wheel.models.build import CharacterBuildState
    from paradox_wheel.storage.records import MeritRecord, RoteRecord

logger = get_logger(__name__)


def show_result(result: AllocationResult, *, success_message: str | None = None) -> bool:
    """Toast an allocation result.

    Rejections always toast their message. Accepted results toast only when
    ``success_message`` is given.

    Returns:
        True if the result was accepted.
    """
    if result.success:
        if success_message:
            st.toast(success_message, icon="✅")
        return True
    st.toast(result.message, icon="⚠️")
    return False


class BaseComponent(ABC):
    """Abstract base class for UI components.

    All UI components should inherit from this class to ensure
    consistent rendering and error handling patterns.
    """

    @abstractmethod
    def render(self) -> None:
        """Render the component.

        Raises:
            UIError: If rendering fails.
        """
        raise NotImplementedError("Subclasses must implement render")


class RoteCard(BaseComponent):
    """A grimoire entry: name, tradition, spheres and effect."""

    def __init__(self, rote: RoteRecord) -> None:
        self.rote = rote

    def render(self) -> None:
        try:
            rote = self.rote
            tags = "".join(
                f'<span class="pw-sphere-tag">{escape(sphere)} {get_sphere_dots(level)}</span>'
                for sphere, level in sorted(rote.spheres.items())
            )
            page = f" · {escape(rote.page_ref)}" if rote.page_ref else ""
            st.markdown(
                f"""
                <div class="pw-card">
                    <div class="pw-card-title">{escape(rote.name)}</div>
                    <div class="pw-card-meta">
                        {get_tradition_symbol(rote.tradition)} {escape(rote.tradition)}
                        · {escape(rote.level)}{page}
                    </div>
                    <div>{tags}</div>
                    <p>{escape(rote.description)}</p>
                </div>
                """,
                unsafe_allow_html=True,
            )
        except Exception as exc:
            raise UIError(f"Failed to render rote {self.rote.name}: {exc}") from exc


class MeritCard(BaseComponent):
    """A merit or flaw catalogue entry."""

    def __init__(self, merit: MeritRecord) -> None:
        self.merit = merit

    def render(self) -> None:
        try:
            merit = self.merit
            sign = "-" if merit.type == "merit" else "+"
            subtype = f" · {escape(merit.subtype)}" if merit.subtype else ""
            st.markdown(
                f"""
                <div class="pw-card">
                    <div class="pw-card-title">{escape(merit.name)}
                        <span style="float:right">{sign}{merit.cost}</span></div>
                    <div class="pw-card-meta">{escape(merit.type.title())} · {escape(merit.category)}{subtype}</div>
                    <p>{escape(merit.description)}</p>
                </div>
                """,
                unsafe_allow_html=True,
            )
        except Exception as exc:
            raise UIError(f"Failed to render {self.merit.type} {self.merit.name}: {exc}") from exc


class BuildSheet(BaseComponent):
    """Read-only character sheet for a build state.

    Freebie dots are drawn in a second color after the base dots.
    """

    def __init__(self, state: CharacterBuildState) -> None:
        self.state = state

    def render(self) -> None:
        try:
            state = self.state
            freebies = state.freebie_dots

            st.markdown(f"### {get_tradition_symbol(state.affiliation)} {state.name or 'Unnamed'}")
            identity = [f"**{key.title()}:** {value}" for key, value in state.identity().items() if value and key != "name"]
            if identity:
                st.caption(" · ".join(identity))

            st.markdown("#### Attributes")
            cols = st.columns(3)
            for index, attribute in enumerate(Attribute):
                with cols[index // 3]:
                    st.markdown(
                        f"{attribute.label} {dot_rating_html(state.attributes[attribute], freebies.get(FreebieCategory.ATTRIBUTE, attribute))}",
                        unsafe_allow_html=True,
                    )

            st.markdown("#### Abilities")
            rated = [ability for ability in Ability if state.ability_total(ability) > 0]
            cols = st.columns(3)
            for index, ability in enumerate(rated):
                specialty = state.specialties.get(ability)
                label = f"{ability.label} ({specialty})" if specialty else ability.label
                with cols[index % 3]:
                    st.markdown(
                        f"{label} {dot_rating_html(state.abilities[ability], freebies.get(FreebieCategory.ABILITY, ability))}",
                        unsafe_allow_html=True,
                    )

            st.markdown("#### Spheres")
            cols = st.columns(3)
            for index, sphere in enumerate(Sphere):
                marker = " ★" if sphere is state.affinity_sphere else ""
                with cols[index % 3]:
                    st.markdown(
                        f"{sphere.display_name}{marker} {dot_rating_html(state.spheres[sphere], freebies.get(FreebieCategory.SPHERE, sphere))}",
                        unsafe_allow_html=True,
                    )

            owned = [background for background in Background if state.background_total(background) > 0]
            if owned:
                st.markdown("#### Backgrounds")
                for background in owned:
                    st.markdown(
                        f"{background.label} {dot_rating_html(state.backgrounds.get(background, 0), freebies.get(FreebieCategory.BACKGROUND, background))}",
                        unsafe_allow_html=True,
                    )

            col1, col2 = st.columns(2)
            with col1:
                st.markdown(f"**Arete** {dot_rating_html(state.arete, freebies.arete, 10)}", unsafe_allow_html=True)
            with col2:
                st.markdown(f"**Willpower** {dot_rating_html(state.willpower, freebies.willpower, 10)}", unsafe_allow_html=True)

            if state.merits or state.flaws:
                st.markdown("#### Merits & Flaws")
                for merit in state.merits:
                    st.write(f"Merit: {merit.name} ({merit.cost})")
                for flaw in state.flaws:
                    st.write(f"Flaw: {flaw.name} ({flaw.cost})")

        except Exception as exc:
            raise UIError(f"Failed to render character sheet: {exc}") from exc


__all__ = [
    "show_result",
    "BaseComponent",
    "RoteCard",
    "MeritCard",
    "BuildSheet",
]
