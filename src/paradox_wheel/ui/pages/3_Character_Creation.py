"""Character creation wizard.

The build lives in a ``CharacterBuilder`` kept in session state. Every
button calls a builder method; a rejected change shows a toast and leaves
the build as it was.
"""

from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from paradox_wheel.core.constants import (
    ABILITY_CREATION_MAX,
    AFFINITY_SPHERE_MIN,
    BACKGROUND_MAX,
    FREEBIE_COSTS,
    FREEBIE_POINTS,
    SPHERE_CREATION_MAX,
    TRAIT_MAX,
)
from paradox_wheel.core.logging import get_logger
from paradox_wheel.engine import allocator
from paradox_wheel.engine.allocator import AllocationResult
from paradox_wheel.engine.builder import CharacterBuilder
from paradox_wheel.engine.sequencer import PHASE_ORDER, phase_index
from paradox_wheel.models.build import MeritSelection
from paradox_wheel.models.enums import (
    AbilityCategory,
    AttributeCategory,
    Background,
    FreebieCategory,
    MeritKind,
    Phase,
    Priority,
    Sphere,
)
from paradox_wheel.models.traditions import (
    ALL_FACTIONS,
    get_tradition_symbol,
    suggested_affinity_spheres,
)
from paradox_wheel.storage.database import get_database
from paradox_wheel.ui.components import BuildSheet, show_result
from paradox_wheel.ui.theme import apply_theme, dot_rating_html

logger = get_logger(__name__)

ESSENCES = ["", "Dynamic", "Pattern", "Primordial", "Questing"]


# =============================================================================
# Page Configuration
# =============================================================================


st.set_page_config(
    page_title="Create a Mage | The Paradox Wheel",
    page_icon="✨",
    layout="wide",
    initial_sidebar_state="expanded",
)

apply_theme()


# =============================================================================
# Session State
# =============================================================================


def get_builder() -> CharacterBuilder:
    """Get the session's builder, creating it on first use."""
    if "builder" not in st.session_state:
        st.session_state.builder = CharacterBuilder()
    return st.session_state.builder


def run(action: Callable[[], AllocationResult], success_message: str | None = None) -> None:
    """Apply a builder action, toast the outcome, and rerun on success."""
    if show_result(action(), success_message=success_message):
        st.rerun()


def stepper(
    label: str,
    value: int,
    key: str,
    on_change: Callable[[int], AllocationResult],
    *,
    maximum: int,
    minimum: int = 0,
    bonus: int = 0,
) -> None:
    """A row with a dot rating and -/+ buttons."""
    col1, col2, col3 = st.columns([4, 1, 1])
    with col1:
        st.markdown(f"{label} &nbsp; {dot_rating_html(value, bonus, max(maximum, value + bonus))}", unsafe_allow_html=True)
    with col2:
        if st.button("−", key=f"{key}_down", disabled=value <= minimum):
            run(lambda: on_change(value - 1))
    with col3:
        if st.button("+", key=f"{key}_up", disabled=value >= maximum):
            run(lambda: on_change(value + 1))


def priority_picker(label: str, current: Priority | None, key: str, on_change: Callable[[str | None], AllocationResult]) -> None:
    """Radio for one category's priority tier."""
    options = ["none", *[tier.value for tier in Priority]]
    index = options.index(current.value) if current else 0
    choice = st.radio(label, options=options, index=index, key=key, horizontal=True,
                      format_func=lambda value: value.title())
    if choice != options[index]:
        run(lambda: on_change(choice))


# =============================================================================
# Phases
# =============================================================================


def render_basics(builder: CharacterBuilder) -> None:
    state = builder.state
    st.markdown("Who is your mage? Only the name is required.")

    with st.form("basics"):
        col1, col2 = st.columns(2)
        with col1:
            name = st.text_input("Name", value=state.name)
            player = st.text_input("Player", value=state.player)
            chronicle = st.text_input("Chronicle", value=state.chronicle)
            concept = st.text_input("Concept", value=state.concept)
            essence = st.selectbox("Essence", options=ESSENCES,
                                   index=ESSENCES.index(state.essence) if state.essence in ESSENCES else 0)
        with col2:
            factions = ["", *ALL_FACTIONS]
            affiliation = st.selectbox(
                "Affiliation",
                options=factions,
                index=factions.index(state.affiliation) if state.affiliation in factions else 0,
                format_func=lambda value: f"{get_tradition_symbol(value)} {value}" if value else "(none)",
            )
            sect = st.text_input("Sect", value=state.sect)
            nature = st.text_input("Nature", value=state.nature)
            demeanor = st.text_input("Demeanor", value=state.demeanor)

        if st.form_submit_button("Save details"):
            run(
                lambda: builder.update_identity(
                    name=name,
                    player=player,
                    chronicle=chronicle,
                    concept=concept,
                    essence=essence,
                    affiliation=affiliation,
                    sect=sect,
                    nature=nature,
                    demeanor=demeanor,
                ),
                success_message="Details saved",
            )


def render_attribute_priorities(builder: CharacterBuilder) -> None:
    st.markdown("Rank the attribute groups: primary gets 7 dots, secondary 5, tertiary 3.")
    for category in AttributeCategory:
        priority_picker(
            category.value.title(),
            builder.state.attribute_priorities[category],
            key=f"attr_prio_{category.value}",
            on_change=lambda tier, category=category: builder.set_attribute_priority(category, tier),
        )


def render_attribute_assignment(builder: CharacterBuilder) -> None:
    state = builder.state
    cols = st.columns(3)
    for col, category in zip(cols, AttributeCategory):
        with col:
            tier = state.attribute_priorities[category]
            left = allocator.attribute_points_remaining(state, category)
            st.markdown(f"#### {category.value.title()}")
            st.caption(f"{tier.value.title() if tier else 'No priority'} · {left} left")
            for attribute in category.attributes:
                stepper(
                    attribute.label,
                    state.attributes[attribute],
                    key=f"attr_{attribute.value}",
                    on_change=lambda value, attribute=attribute: builder.set_attribute(attribute, value),
                    minimum=1,
                    maximum=TRAIT_MAX,
                )


def render_ability_priorities(builder: CharacterBuilder) -> None:
    st.markdown("Rank the ability groups: primary gets 13 dots, secondary 9, tertiary 5.")
    for category in AbilityCategory:
        priority_picker(
            category.value.title(),
            builder.state.ability_priorities[category],
            key=f"abil_prio_{category.value}",
            on_change=lambda tier, category=category: builder.set_ability_priority(category, tier),
        )


def render_ability_assignment(builder: CharacterBuilder) -> None:
    state = builder.state
    st.markdown(f"No ability can go above {ABILITY_CREATION_MAX} before freebies.")
    cols = st.columns(3)
    for col, category in zip(cols, AbilityCategory):
        with col:
            tier = state.ability_priorities[category]
            left = allocator.ability_points_remaining(state, category)
            st.markdown(f"#### {category.value.title()}")
            st.caption(f"{tier.value.title() if tier else 'No priority'} · {left} left")
            for ability in category.abilities:
                stepper(
                    ability.label,
                    state.abilities[ability],
                    key=f"abil_{ability.value}",
                    on_change=lambda value, ability=ability: builder.set_ability(ability, value),
                    maximum=ABILITY_CREATION_MAX,
                )


def render_spheres(builder: CharacterBuilder) -> None:
    state = builder.state
    st.markdown(
        f"Spend 6 dots. No sphere above {SPHERE_CREATION_MAX}. "
        "Your affinity sphere must keep at least one dot."
    )
    st.caption(f"{allocator.sphere_points_remaining(state)} dot(s) left")

    suggested = suggested_affinity_spheres(state.affiliation)
    options = list(Sphere)
    current = options.index(state.affinity_sphere) if state.affinity_sphere else None
    choice = st.selectbox(
        "Affinity sphere",
        options=options,
        index=current,
        placeholder="Choose an affinity sphere",
        format_func=lambda sphere: f"{sphere.display_name}{' (suggested)' if sphere in suggested else ''}",
    )
    if choice is not None and choice is not state.affinity_sphere:
        run(lambda: builder.set_affinity_sphere(choice))

    cols = st.columns(3)
    for index, sphere in enumerate(Sphere):
        with cols[index % 3]:
            marker = " ★" if sphere is state.affinity_sphere else ""
            stepper(
                f"{sphere.display_name}{marker}",
                state.spheres[sphere],
                key=f"sphere_{sphere.value}",
                on_change=lambda value, sphere=sphere: builder.set_sphere(sphere, value),
                minimum=AFFINITY_SPHERE_MIN if sphere is state.affinity_sphere else 0,
                maximum=SPHERE_CREATION_MAX,
            )


def render_backgrounds(builder: CharacterBuilder) -> None:
    state = builder.state
    st.markdown("Spend 7 dots on backgrounds.")
    st.caption(f"{allocator.background_points_remaining(state)} dot(s) left")

    owned = list(state.backgrounds)
    for background in owned:
        stepper(
            background.label,
            state.backgrounds[background],
            key=f"bg_{background.value}",
            on_change=lambda value, background=background: builder.set_background(background, value),
            maximum=BACKGROUND_MAX,
        )

    remaining = [background for background in Background if background not in state.backgrounds]
    col1, col2 = st.columns([3, 1])
    with col1:
        new_background = st.selectbox("Add a background", options=remaining, format_func=lambda b: b.label)
    with col2:
        st.write("")
        if st.button("Add", key="bg_add") and new_background is not None:
            run(lambda: builder.set_background(new_background, 1))


def _freebie_row(builder: CharacterBuilder, category: FreebieCategory, label: str, base: int, name: str | None = None, maximum: int = TRAIT_MAX) -> None:
    bought = builder.state.freebie_dots.get(category, name)
    key = f"fb_{category.value}_{name or 'total'}"
    col1, col2, col3 = st.columns([4, 1, 1])
    with col1:
        st.markdown(f"{label} &nbsp; {dot_rating_html(base, bought, maximum)}", unsafe_allow_html=True)
    with col2:
        if st.button("−", key=f"{key}_down", disabled=bought == 0):
            run(lambda: builder.remove_freebie_dot(category, name))
    with col3:
        if st.button("+", key=f"{key}_up"):
            run(lambda: builder.add_freebie_dot(category, name))


def render_freebies(builder: CharacterBuilder) -> None:
    state = builder.state
    remaining = builder.remaining_freebies
    st.markdown(
        f"Spend {FREEBIE_POINTS} freebie points. Costs per dot: "
        + ", ".join(f"{category} {cost}" for category, cost in FREEBIE_COSTS.items())
        + ". Flaws give points back."
    )
    st.metric("Freebies remaining", remaining)

    tab_core, tab_attributes, tab_abilities, tab_spheres, tab_backgrounds, tab_merits = st.tabs(
        ["Arete & Willpower", "Attributes", "Abilities", "Spheres", "Backgrounds", "Merits & Flaws"]
    )

    with tab_core:
        _freebie_row(builder, FreebieCategory.ARETE, "Arete", state.arete, maximum=10)
        _freebie_row(builder, FreebieCategory.WILLPOWER, "Willpower", state.willpower, maximum=10)

    with tab_attributes:
        for category in AttributeCategory:
            st.markdown(f"##### {category.value.title()}")
            for attribute in category.attributes:
                _freebie_row(builder, FreebieCategory.ATTRIBUTE, attribute.label, state.attributes[attribute], attribute.value)

    with tab_abilities:
        for category in AbilityCategory:
            st.markdown(f"##### {category.value.title()}")
            for ability in category.abilities:
                _freebie_row(builder, FreebieCategory.ABILITY, ability.label, state.abilities[ability], ability.value)
        needing = allocator.abilities_needing_specialty(state)
        if needing:
            st.markdown("##### Specialties")
            for ability in needing:
                text = st.text_input(f"{ability.label} specialty", value=state.specialties.get(ability, ""), key=f"spec_{ability.value}")
                if text != state.specialties.get(ability, ""):
                    run(lambda ability=ability, text=text: builder.set_specialty(ability, text))

    with tab_spheres:
        for sphere in Sphere:
            _freebie_row(builder, FreebieCategory.SPHERE, sphere.display_name, state.spheres[sphere], sphere.value)

    with tab_backgrounds:
        for background in Background:
            _freebie_row(builder, FreebieCategory.BACKGROUND, background.label, state.backgrounds.get(background, 0), background.value)

    with tab_merits:
        render_merits_and_flaws(builder)


def render_merits_and_flaws(builder: CharacterBuilder) -> None:
    state = builder.state
    catalogue = get_database().list_merits()

    for kind, taken, remove in (
        (MeritKind.MERIT, state.merits, builder.remove_merit),
        (MeritKind.FLAW, state.flaws, builder.remove_flaw),
    ):
        st.markdown(f"##### {kind.value.title()}s")
        for selection in taken:
            col1, col2 = st.columns([5, 1])
            with col1:
                st.write(f"{selection.name} ({selection.cost})")
            with col2:
                if st.button("Remove", key=f"rm_{kind.value}_{selection.id}"):
                    run(lambda selection_id=selection.id, remove=remove: remove(selection_id))

        options = [entry for entry in catalogue if entry.type == kind.value]
        if not options:
            st.caption(f"No {kind.value}s in the catalogue.")
            continue
        col1, col2 = st.columns([4, 1])
        with col1:
            entry = st.selectbox(
                f"Add a {kind.value}",
                options=options,
                format_func=lambda e: f"{e.name} ({e.cost}) · {e.category}",
                key=f"pick_{kind.value}",
            )
        with col2:
            st.write("")
            if st.button("Add", key=f"add_{kind.value}") and entry is not None:
                selection = MeritSelection(id=entry.id, name=entry.name, cost=entry.cost)
                add = builder.add_merit if kind is MeritKind.MERIT else builder.add_flaw
                run(lambda: add(selection))


def render_complete(builder: CharacterBuilder) -> None:
    st.success(f"{builder.state.name} is ready.")
    BuildSheet(builder.state).render()

    col1, col2 = st.columns(2)
    with col1:
        if st.button("💾 Save character", type="primary", use_container_width=True):
            record = get_database().create_character(**builder.to_character_payload())
            logger.info("Character saved from wizard", character_id=record.id)
            st.toast(f"Saved {record.name}", icon="✅")
            builder.reset()
            st.switch_page("pages/2_Characters.py")
    with col2:
        if st.button("Start over", use_container_width=True):
            builder.reset()
            st.rerun()


PHASE_RENDERERS: dict[Phase, Callable[[CharacterBuilder], None]] = {
    Phase.BASICS: render_basics,
    Phase.ATTRIBUTES_PRIORITY: render_attribute_priorities,
    Phase.ATTRIBUTES_ASSIGN: render_attribute_assignment,
    Phase.ABILITIES_PRIORITY: render_ability_priorities,
    Phase.ABILITIES_ASSIGN: render_ability_assignment,
    Phase.SPHERES: render_spheres,
    Phase.BACKGROUNDS: render_backgrounds,
    Phase.FREEBIES: render_freebies,
    Phase.COMPLETE: render_complete,
}


# =============================================================================
# Main Page
# =============================================================================


def render_navigation(builder: CharacterBuilder) -> None:
    """Back / undo / redo / next controls and the blocker list."""
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        if st.button("← Back", disabled=builder.phase is Phase.BASICS, use_container_width=True):
            run(builder.retreat)
    with col2:
        if st.button("↩ Undo", disabled=not builder.can_undo, use_container_width=True):
            builder.undo()
            st.rerun()
    with col3:
        if st.button("↪ Redo", disabled=not builder.can_redo, use_container_width=True):
            builder.redo()
            st.rerun()
    with col4:
        if builder.phase is not Phase.COMPLETE:
            if st.button("Next →", type="primary", disabled=not builder.can_proceed(), use_container_width=True):
                run(builder.advance)

    for blocker in builder.blockers():
        if builder.phase is not Phase.COMPLETE:
            st.caption(f"• {blocker}")


def main() -> None:
    """Render the character creation wizard."""
    builder = get_builder()
    phase = builder.phase

    st.title("✨ Create a Mage")
    step = phase_index(phase)
    st.progress(step / (len(PHASE_ORDER) - 1))
    st.markdown(
        f'<div class="pw-phase">Step {step + 1} of {len(PHASE_ORDER)} · {phase.label}</div>',
        unsafe_allow_html=True,
    )

    st.divider()
    PHASE_RENDERERS[phase](builder)
    st.divider()
    render_navigation(builder)

    if phase not in (Phase.BASICS, Phase.COMPLETE):
        with st.sidebar:
            st.markdown("### Sheet so far")
            BuildSheet(builder.state).render()


main()
