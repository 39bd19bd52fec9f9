"""
Helpers for building an emoji picker and reaction bar on top of the tables.

Preferences are stored per base symbol, the way a messaging client keeps
"last chosen skin tone" per emoji; recent emoji are stored as glyph text
with a usage index so they survive table regeneration.
"""

from __future__ import annotations

from collections.abc import Mapping

from emoji_table.emoji_data import CATEGORIES, Emoji
from emoji_table.lookup import is_available, skin_tone_variant, sorted_by_rank
from emoji_table.model import EmojiCategory, SkinTone
from emoji_table.variants import EmojiVariant

ToneChoice = SkinTone | tuple[SkinTone, ...]

BASE_REACTIONS: tuple[Emoji, ...] = (
    Emoji.THUMBS_UP,
    Emoji.THUMBS_DOWN,
)

DEFAULT_REACTIONS: tuple[Emoji, ...] = (
    Emoji.RED_HEART,
    Emoji.FACE_WITH_TEARS_OF_JOY,
    Emoji.CRYING_FACE,
    Emoji.FOLDED_HANDS,
)


def picker_sections(max_version: float | None = None) -> list[tuple[EmojiCategory, tuple[Emoji, ...]]]:
    """Return picker sections in tab order.

    Members are sorted by rank, symbols newer than ``max_version`` are
    removed and sections left empty are dropped.
    """
    sections: list[tuple[EmojiCategory, tuple[Emoji, ...]]] = []
    for category in EmojiCategory:
        members = [emoji for emoji in CATEGORIES.get(category, ()) if is_available(emoji, max_version)]
        if members:
            sections.append((category, tuple(sorted_by_rank(members))))
    return sections


def preferred_variant(emoji: Emoji, preferences: Mapping[Emoji, ToneChoice] | None = None) -> EmojiVariant:
    """Return ``emoji`` with its stored tone preference applied.

    A preference is ignored when it is not a one or two tone combination
    or when the symbol has no variant for it.
    """
    choice = (preferences or {}).get(emoji)
    if choice is None:
        return EmojiVariant(emoji)
    tones = (choice,) if isinstance(choice, SkinTone) else tuple(choice)
    if not 1 <= len(tones) <= 2 or skin_tone_variant(emoji, tones) is None:
        return EmojiVariant(emoji)
    return EmojiVariant(emoji, tones)


def ordered_recent(recent: Mapping[str, int]) -> list[EmojiVariant]:
    """Order recently used glyphs by their usage index, skipping unknown text."""
    ordered: list[EmojiVariant] = []
    for text in sorted(recent, key=recent.__getitem__):
        variant = EmojiVariant.from_glyph(text)
        if variant is not None:
            ordered.append(variant)
    return ordered


def base_reactions(preferences: Mapping[Emoji, ToneChoice] | None = None) -> list[EmojiVariant]:
    """Thumbs up and thumbs down, with the user's tone preference."""
    return [preferred_variant(emoji, preferences) for emoji in BASE_REACTIONS]


def default_reactions(preferences: Mapping[Emoji, ToneChoice] | None = None) -> list[EmojiVariant]:
    """The quick-reaction set offered after the base reactions."""
    return [preferred_variant(emoji, preferences) for emoji in DEFAULT_REACTIONS]
