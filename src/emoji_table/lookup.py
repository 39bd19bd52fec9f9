"""
Accessors over the generated emoji tables.

Every function here is a pure lookup on immutable data. Lookups keyed by an
``Emoji`` member cannot fail; optional data (skin-tone variants, category
membership) reports absence with ``None`` or an empty mapping.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from functools import lru_cache
from types import MappingProxyType

from emoji_table.emoji_data import (
    CATEGORIES,
    EMOJI_VERSIONS,
    SKIN_TONE_VARIANTS,
    SORT_ORDER,
    Emoji,
)
from emoji_table.generator.naming import symbol_name
from emoji_table.model import EmojiCategory, SkinTone

_NO_VARIANTS: Mapping[tuple[SkinTone, ...], str] = MappingProxyType({})


def glyph(emoji: Emoji) -> str:
    """Return the canonical glyph sequence of ``emoji``."""
    return emoji.value


def sort_rank(emoji: Emoji) -> int:
    """Return the display rank of ``emoji``."""
    return SORT_ORDER[emoji]


def sorted_by_rank(emojis: Iterable[Emoji]) -> list[Emoji]:
    """Return ``emojis`` in display order.

    Parameters
    ----------
    emojis : Iterable[Emoji]
        Any subset of the symbol set, e.g. search results or a category.

    Returns
    -------
    list[Emoji]
        The same symbols ascending by sort rank.
    """
    return sorted(emojis, key=SORT_ORDER.__getitem__)


def all_emojis() -> list[Emoji]:
    """Return the full symbol set in display order."""
    return sorted_by_rank(Emoji)


def introduction_version(emoji: Emoji) -> float:
    """Return the Emoji version that introduced ``emoji``."""
    return EMOJI_VERSIONS[emoji]


def is_available(emoji: Emoji, max_version: float | None) -> bool:
    """Return True if ``emoji`` exists in Emoji ``max_version`` or earlier.

    ``None`` means the rendering environment supports every version.
    """
    return max_version is None or EMOJI_VERSIONS[emoji] <= max_version


def available_emojis(max_version: float | None = None) -> list[Emoji]:
    """Return the symbols supported up to ``max_version`` in display order."""
    return [emoji for emoji in all_emojis() if is_available(emoji, max_version)]


def _tone_key(tones: SkinTone | Sequence[SkinTone]) -> tuple[SkinTone, ...]:
    if isinstance(tones, SkinTone):
        return (tones,)
    key = tuple(tones)
    if not 1 <= len(key) <= 2:
        raise ValueError(f"A tone combination has one or two tones, got {len(key)}")
    for tone in key:
        if not isinstance(tone, SkinTone):
            raise TypeError(f"Expected SkinTone, got {tone!r}")
    return key


def skin_tone_variant(emoji: Emoji, tones: SkinTone | Sequence[SkinTone]) -> str | None:
    """Return the precomposed glyph for a tone combination.

    The table is literal: a combination that is not tabulated returns
    ``None`` even when its single-tone parts exist, and callers fall back to
    the base glyph.

    Parameters
    ----------
    emoji : Emoji
        Base symbol.
    tones : SkinTone or sequence of SkinTone
        One tone, or an ordered sequence of one or two tones (one per
        participant for two-person emoji).

    Returns
    -------
    str or None
        Variant glyph, or ``None`` when no variant is available.

    Raises
    ------
    ValueError
        If ``tones`` is empty or longer than two.
    TypeError
        If ``tones`` contains something other than ``SkinTone`` members.
    """
    variants = SKIN_TONE_VARIANTS.get(emoji)
    if variants is None:
        _tone_key(tones)
        return None
    return variants.get(_tone_key(tones))


def skin_tone_variants(emoji: Emoji) -> Mapping[tuple[SkinTone, ...], str]:
    """Return all tabulated variants of ``emoji`` as a read-only mapping."""
    variants = SKIN_TONE_VARIANTS.get(emoji)
    if variants is None:
        return _NO_VARIANTS
    return MappingProxyType(variants)


def has_skin_tone_options(emoji: Emoji) -> bool:
    return emoji in SKIN_TONE_VARIANTS


def category_members(category: EmojiCategory) -> tuple[Emoji, ...]:
    """Return the ordered members of ``category``."""
    return CATEGORIES.get(category, ())


@lru_cache(maxsize=1)
def _category_index() -> Mapping[Emoji, EmojiCategory]:
    index: dict[Emoji, EmojiCategory] = {}
    for category, members in CATEGORIES.items():
        for emoji in members:
            index.setdefault(emoji, category)
    return MappingProxyType(index)


def category_of(emoji: Emoji) -> EmojiCategory | None:
    """Return the category listing ``emoji``, or None if it is uncategorized."""
    return _category_index().get(emoji)


def find_emoji(name: str) -> Emoji | None:
    """Resolve a symbolic name or a CLDR short name such as ``"thumbs up"``."""
    member = Emoji.__members__.get(name.strip().upper())
    if member is not None:
        return member
    try:
        return Emoji.__members__.get(symbol_name(name))
    except ValueError:
        return None


__all__ = [
    "all_emojis",
    "available_emojis",
    "category_members",
    "category_of",
    "find_emoji",
    "glyph",
    "has_skin_tone_options",
    "introduction_version",
    "is_available",
    "skin_tone_variant",
    "skin_tone_variants",
    "sort_rank",
    "sorted_by_rank",
]
