"""Sample grimoire content loaded by the admin seed operation."""

from __future__ import annotations

from typing import Any


SAMPLE_ROTES: list[dict[str, Any]] = [
    {
        "name": "The Flickering Ward",
        "tradition": "Order of Hermes",
        "description": (
            "By tracing ancient Enochian sigils in the air and speaking words of binding, "
            "the mage weaves a protective barrier that deflects incoming Forces effects. "
            "The ward shimmers with faint golden light visible only to those with "
            "awakened perception."
        ),
        "spheres": {"Forces": 3, "Prime": 2},
        "level": "Disciple",
        "page_ref": "Book of Shadows, p.142",
    },
    {
        "name": "Ancestor's Whisper",
        "tradition": "Dreamspeakers",
        "description": (
            "The shaman enters a trance state, beating a steady rhythm on their drum to "
            "thin the Gauntlet. Spirits of the dead are drawn to the sound, and the most "
            "knowledgeable among them are coaxed into sharing fragments of lost knowledge."
        ),
        "spheres": {"Spirit": 3, "Mind": 2, "Entropy": 1},
        "level": "Disciple",
        "page_ref": "Spirit Ways, p.87",
    },
    {
        "name": "Temporal Echo",
        "tradition": "Cult of Ecstasy",
        "description": (
            "Through rhythmic movement and carefully controlled altered states, the "
            "Ecstatic perceives the temporal echoes left by significant events. The past "
            "bleeds through in shimmering after-images that replay key moments."
        ),
        "spheres": {"Time": 3, "Correspondence": 2},
        "level": "Disciple",
        "page_ref": "The Book of Madness, p.201",
    },
    {
        "name": "Living Cipher",
        "tradition": "Virtual Adepts",
        "description": (
            "The Adept encodes their consciousness as executable data, allowing them to "
            "project their awareness into the Digital Web. Their physical form enters a "
            "catatonic state while their digital avatar navigates the information streams."
        ),
        "spheres": {"Correspondence": 4, "Mind": 3},
        "level": "Adept",
        "page_ref": "Digital Web 2.0, p.156",
    },
    {
        "name": "Blood of the Earth",
        "tradition": "Verbena",
        "description": (
            "Drawing upon the primal life force that flows through all living things, the "
            "witch channels raw vitality into healing. The ritual requires blood freely "
            "given and words spoken in the Old Tongue."
        ),
        "spheres": {"Life": 3, "Prime": 2},
        "level": "Disciple",
        "page_ref": "The Book of Crafts, p.63",
    },
    {
        "name": "Resonance Cascade",
        "tradition": "Sons of Ether",
        "description": (
            "Using a modified Tesla apparatus, the Scientist generates a cascade of "
            "etheric resonance that disrupts the molecular bonds of inanimate matter. The "
            "effect is spectacular but imprecise, often leaving scorch marks in its wake."
        ),
        "spheres": {"Matter": 4, "Forces": 3, "Prime": 2},
        "level": "Adept",
        "page_ref": "Sons of Ether Tradition Book, p.98",
    },
    {
        "name": "The Wheel of Fate",
        "tradition": "Euthanatos",
        "description": (
            "By reading the threads of destiny woven into the Tapestry, the Euthanatos "
            "can perceive the most likely path of entropy for a target. This manifests as "
            "a vision of the subject's eventual death or dissolution."
        ),
        "spheres": {"Entropy": 4, "Time": 2},
        "level": "Adept",
        "page_ref": "Euthanatos Tradition Book, p.112",
    },
    {
        "name": "Hymn of the Celestial Sphere",
        "tradition": "Celestial Chorus",
        "description": (
            "Raising their voice in sacred song, the Chorister channels the divine harmony "
            "of the One. The hymn resonates with Prime energy, cleansing an area of "
            "Resonance corruption and bolstering the faith of all who hear."
        ),
        "spheres": {"Prime": 3, "Mind": 2, "Spirit": 1},
        "level": "Disciple",
        "page_ref": "Celestial Chorus Tradition Book, p.77",
    },
    {
        "name": "Iron Body Meditation",
        "tradition": "Akashic Brotherhood",
        "description": (
            "Through deep meditative practice and perfect control of chi flow, the Akashic "
            "strengthens their physical form beyond mortal limits. The skin takes on a "
            "faint metallic sheen as the body becomes resistant to harm."
        ),
        "spheres": {"Life": 3, "Mind": 2, "Prime": 1},
        "level": "Disciple",
        "page_ref": "Akashic Brotherhood Tradition Book, p.91",
    },
    {
        "name": "The Gossamer Veil",
        "tradition": "Hollow Ones",
        "description": (
            "With a gesture born of equal parts melancholy and defiance, the Hollow One "
            "weaves an illusion of shadows and mist. The Veil obscures the mage from "
            "mundane perception, rendering them a half-seen ghost in the peripheral vision."
        ),
        "spheres": {"Mind": 3, "Forces": 2, "Entropy": 1},
        "level": "Disciple",
        "page_ref": "The Orphans Survival Guide, p.45",
    },
    {
        "name": "Quintessential Forge",
        "tradition": "Order of Hermes",
        "description": (
            "The Hermetic mage inscribes a circle of power and channels raw Quintessence "
            "into a prepared vessel. Through precise application of Hermetic formulae, raw "
            "Prime energy is shaped and bound into permanent enchantment."
        ),
        "spheres": {"Prime": 5, "Matter": 3, "Forces": 2},
        "level": "Master",
        "page_ref": "Order of Hermes Tradition Book, p.188",
    },
    {
        "name": "Dream Walk",
        "tradition": "Dreamspeakers",
        "description": (
            "The shaman projects their consciousness into the Dreaming, walking between "
            "the dreams of sleeping minds. In this twilight realm, they may gather "
            "information, deliver messages, or confront nightmares given terrible form."
        ),
        "spheres": {"Mind": 4, "Spirit": 3, "Correspondence": 2},
        "level": "Adept",
        "page_ref": "Spirit Ways, p.134",
    },
]


__all__ = ["SAMPLE_ROTES"]
