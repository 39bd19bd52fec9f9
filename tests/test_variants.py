"""Tests for EmojiVariant"""

import pytest

from emoji_table.emoji_data import SKIN_TONE_VARIANTS, Emoji
from emoji_table.model import SkinTone
from emoji_table.variants import EmojiVariant


class TestEmojiVariant:
    """Tests for variant glyphs"""

    def test_base_variant(self):
        variant = EmojiVariant(Emoji.THUMBS_UP)
        assert variant.glyph == "\U0001f44d"
        assert str(variant) == "\U0001f44d"
        assert variant.has_skin_tone_options
        assert variant.is_tabulated

    def test_toned_variant(self):
        variant = EmojiVariant(Emoji.THUMBS_UP, (SkinTone.MEDIUM,))
        assert variant.glyph == "\U0001f44d\U0001f3fd"
        assert variant.is_tabulated

    def test_missing_combination_falls_back_to_base(self):
        variant = EmojiVariant(Emoji.HANDSHAKE, (SkinTone.DARK, SkinTone.DARK))
        assert variant.glyph == Emoji.HANDSHAKE.value
        assert not variant.is_tabulated

    def test_with_tones(self):
        variant = EmojiVariant(Emoji.FOLDED_HANDS)
        assert variant.with_tones(SkinTone.LIGHT) == EmojiVariant(Emoji.FOLDED_HANDS, (SkinTone.LIGHT,))
        assert variant.with_tones(None) == EmojiVariant(Emoji.FOLDED_HANDS)
        assert variant.with_tones(()) == EmojiVariant(Emoji.FOLDED_HANDS)

    def test_variants_are_hashable(self):
        stored = {EmojiVariant(Emoji.THUMBS_UP, (SkinTone.LIGHT,)), EmojiVariant(Emoji.THUMBS_UP, (SkinTone.LIGHT,))}
        assert len(stored) == 1


class TestFromGlyph:
    """Tests for reverse glyph lookup"""

    def test_base_glyph(self):
        assert EmojiVariant.from_glyph("\U0001f600") == EmojiVariant(Emoji.GRINNING_FACE)

    def test_variant_glyph(self):
        assert EmojiVariant.from_glyph("\U0001f44e\U0001f3ff") == EmojiVariant(Emoji.THUMBS_DOWN, (SkinTone.DARK,))

    def test_two_tone_variant_glyph(self):
        text = "\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fc"
        assert EmojiVariant.from_glyph(text) == EmojiVariant(
            Emoji.HANDSHAKE, (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT)
        )

    def test_every_tabulated_glyph_round_trips(self):
        for emoji in Emoji:
            assert EmojiVariant.from_glyph(emoji.value, strict=True) == EmojiVariant(emoji)
        for emoji, variants in SKIN_TONE_VARIANTS.items():
            for tones, text in variants.items():
                assert EmojiVariant.from_glyph(text, strict=True) == EmojiVariant(emoji, tones)

    def test_unqualified_text_resolves_when_not_strict(self):
        assert EmojiVariant.from_glyph("\u2764") == EmojiVariant(Emoji.RED_HEART)
        assert EmojiVariant.from_glyph("\u2764", strict=True) is None

    def test_minimally_qualified_variant(self):
        assert EmojiVariant.from_glyph("\u261d\ufe0f\U0001f3fb") == EmojiVariant(
            Emoji.INDEX_POINTING_UP, (SkinTone.LIGHT,)
        )

    @pytest.mark.parametrize("text", ["", "a", "\U0001f3fb", "\U0001f44d\U0001f44d"])
    def test_unknown_text(self, text):
        assert EmojiVariant.from_glyph(text) is None
