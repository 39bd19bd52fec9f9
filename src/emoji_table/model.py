"""
Core enumerations shared by the generated tables and their accessors.

The symbol enumeration itself (``Emoji``) is generated into
``emoji_table.emoji_data``; the types here are hand-written because the
generator only references them.
"""

from __future__ import annotations

from enum import Enum


class SkinTone(str, Enum):
    """Fitzpatrick skin-tone modifiers (U+1F3FB..U+1F3FF)."""

    LIGHT = "\U0001f3fb"
    MEDIUM_LIGHT = "\U0001f3fc"
    MEDIUM = "\U0001f3fd"
    MEDIUM_DARK = "\U0001f3fe"
    DARK = "\U0001f3ff"

    @classmethod
    def from_modifier(cls, char: str) -> SkinTone | None:
        """Return the tone for a modifier character, or None."""
        try:
            return cls(char)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        """CLDR label, e.g. ``medium-light skin tone``."""
        return self.name.lower().replace("_", "-") + " skin tone"


class EmojiCategory(str, Enum):
    """Picker categories, valued by their ``emoji-test.txt`` group name."""

    SMILEYS_AND_EMOTION = "Smileys & Emotion"
    PEOPLE_AND_BODY = "People & Body"
    ANIMALS_AND_NATURE = "Animals & Nature"
    FOOD_AND_DRINK = "Food & Drink"
    TRAVEL_AND_PLACES = "Travel & Places"
    ACTIVITIES = "Activities"
    OBJECTS = "Objects"
    SYMBOLS = "Symbols"
    FLAGS = "Flags"

    @property
    def display_name(self) -> str:
        return self.value


SKIN_TONE_MODIFIERS = frozenset(tone.value for tone in SkinTone)

ZERO_WIDTH_JOINER = "\u200d"
VARIATION_SELECTOR_16 = "\ufe0f"


def tones_in(glyph: str) -> tuple[SkinTone, ...]:
    """Return the skin-tone modifiers of ``glyph`` in order of appearance."""
    return tuple(SkinTone(char) for char in glyph if char in SKIN_TONE_MODIFIERS)


__all__ = [
    "EmojiCategory",
    "SKIN_TONE_MODIFIERS",
    "SkinTone",
    "VARIATION_SELECTOR_16",
    "ZERO_WIDTH_JOINER",
    "tones_in",
]
