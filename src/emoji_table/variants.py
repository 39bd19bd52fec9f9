"""
Emoji variants: a symbol plus an optional skin-tone combination.

A variant is what gets stored for reactions and recently used emoji. Its
text form is the tabulated variant glyph, or the base glyph when the symbol
has no variant for the requested tones.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from emoji_table.emoji_data import SKIN_TONE_VARIANTS, Emoji
from emoji_table.lookup import has_skin_tone_options, skin_tone_variant
from emoji_table.model import VARIATION_SELECTOR_16, SkinTone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmojiVariant:
    """A base symbol with an optional skin-tone combination.

    Attributes:
        base: The symbol.
        tones: Ordered tone combination, or None for the base glyph.
    """

    base: Emoji
    tones: tuple[SkinTone, ...] | None = None

    @property
    def glyph(self) -> str:
        """Variant glyph if tabulated, otherwise the base glyph."""
        if self.tones:
            variant = skin_tone_variant(self.base, self.tones)
            if variant is not None:
                return variant
        return self.base.value

    @property
    def has_skin_tone_options(self) -> bool:
        return has_skin_tone_options(self.base)

    @property
    def is_tabulated(self) -> bool:
        """True if ``glyph`` is exactly what ``tones`` asks for."""
        return not self.tones or skin_tone_variant(self.base, self.tones) is not None

    def with_tones(self, tones: SkinTone | tuple[SkinTone, ...] | None) -> EmojiVariant:
        """Return the same symbol with another tone combination."""
        if isinstance(tones, SkinTone):
            tones = (tones,)
        return EmojiVariant(self.base, tones or None)

    @classmethod
    def from_glyph(cls, text: str, strict: bool = False) -> EmojiVariant | None:
        """Resolve a stored glyph back to its symbol and tones.

        Args:
            text: Base or variant glyph sequence.
            strict: Only accept exact fully-qualified glyphs. Otherwise the
                lookup is retried with U+FE0F removed, so minimally-qualified
                and unqualified text resolves to the same variant.

        Returns:
            The variant, or None for unknown text.
        """
        exact, relaxed = _glyph_index()
        variant = exact.get(text)
        if variant is None and not strict:
            variant = relaxed.get(text.replace(VARIATION_SELECTOR_16, ""))
            if variant is not None:
                logger.debug("Resolved %r through the unqualified glyph index", text)
        return variant

    def __str__(self) -> str:
        return self.glyph


@lru_cache(maxsize=1)
def _glyph_index() -> tuple[Mapping[str, EmojiVariant], Mapping[str, EmojiVariant]]:
    exact: dict[str, EmojiVariant] = {}
    for emoji in Emoji:
        exact[emoji.value] = EmojiVariant(emoji)
    for emoji, variants in SKIN_TONE_VARIANTS.items():
        for tones, variant_glyph in variants.items():
            exact[variant_glyph] = EmojiVariant(emoji, tones)

    relaxed: dict[str, EmojiVariant] = {}
    for text, variant in exact.items():
        relaxed.setdefault(text.replace(VARIATION_SELECTOR_16, ""), variant)
    return exact, relaxed
