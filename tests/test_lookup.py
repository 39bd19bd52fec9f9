"""Tests for the compiled tables and their accessors."""

import pytest

from emoji_table import lookup
from emoji_table.emoji_data import (
    CATEGORIES,
    EMOJI_VERSION,
    EMOJI_VERSIONS,
    SKIN_TONE_VARIANTS,
    SORT_ORDER,
    Emoji,
)
from emoji_table.model import EmojiCategory, SkinTone


class TestSymbolTable:
    """Tests for the symbol enumeration"""

    def test_symbol_count(self):
        assert EMOJI_VERSION == "15.1"
        assert len(Emoji) == 1898

    def test_glyph_is_enum_value(self):
        assert lookup.glyph(Emoji.GRINNING_FACE) == "\U0001f600"
        assert lookup.glyph(Emoji.RED_HEART) == "\u2764\ufe0f"
        assert lookup.glyph(Emoji.KEYCAP_NUMBER_SIGN) == "#\ufe0f\u20e3"

    def test_glyphs_are_unique(self):
        glyphs = [emoji.value for emoji in Emoji]
        assert len(set(glyphs)) == len(glyphs)

    def test_fully_qualified_glyphs_are_kept(self):
        """Glyphs keep U+FE0F exactly as listed in the source data"""
        assert Emoji.SMILING_FACE.value == "\u263a\ufe0f"
        assert Emoji.INDEX_POINTING_UP.value == "\u261d\ufe0f"

    def test_multi_codepoint_sequences(self):
        assert Emoji.FLAG_UNITED_STATES.value == "\U0001f1fa\U0001f1f8"
        assert Emoji.FLAG_ENGLAND.value.endswith("\U000e007f")
        assert Emoji.PEOPLE_HOLDING_HANDS.value == "\U0001f9d1\u200d\U0001f91d\u200d\U0001f9d1"


class TestSortOrder:
    """Tests for sort ranks"""

    def test_ranks_are_dense_and_unique(self):
        assert sorted(SORT_ORDER.values()) == list(range(len(Emoji)))

    def test_every_symbol_has_a_rank(self):
        assert set(SORT_ORDER) == set(Emoji)

    def test_known_ranks(self):
        assert lookup.sort_rank(Emoji.GRINNING_FACE) == 0
        assert lookup.sort_rank(Emoji.FACE_WITH_TEARS_OF_JOY) == 7
        assert lookup.sort_rank(Emoji.FLAG_WALES) == len(Emoji) - 1

    def test_sorted_by_rank(self):
        emojis = [Emoji.FLAG_WALES, Emoji.THUMBS_UP, Emoji.GRINNING_FACE]
        assert lookup.sorted_by_rank(emojis) == [Emoji.GRINNING_FACE, Emoji.THUMBS_UP, Emoji.FLAG_WALES]

    def test_all_emojis_in_display_order(self):
        ordered = lookup.all_emojis()
        assert ordered[0] is Emoji.GRINNING_FACE
        assert [lookup.sort_rank(emoji) for emoji in ordered] == list(range(len(Emoji)))


class TestVersions:
    """Tests for introduction versions"""

    def test_every_symbol_has_a_version(self):
        assert set(EMOJI_VERSIONS) == set(Emoji)
        assert all(isinstance(version, float) for version in EMOJI_VERSIONS.values())

    def test_known_versions(self):
        assert lookup.introduction_version(Emoji.GRINNING_FACE) == 1.0
        assert lookup.introduction_version(Emoji.FACE_WITH_TEARS_OF_JOY) == 0.6
        assert lookup.introduction_version(Emoji.SMILING_FACE_WITH_TEAR) == 13.0
        assert lookup.introduction_version(Emoji.SHAKING_FACE) == 15.0
        assert lookup.introduction_version(Emoji.PHOENIX) == 15.1

    def test_is_available(self):
        assert lookup.is_available(Emoji.SHAKING_FACE, 15.0)
        assert not lookup.is_available(Emoji.SHAKING_FACE, 14.0)
        assert lookup.is_available(Emoji.PHOENIX, None)

    def test_available_emojis_filters_newer_symbols(self):
        available = lookup.available_emojis(14.0)
        assert Emoji.GRINNING_FACE in available
        assert Emoji.SHAKING_FACE not in available
        assert Emoji.PHOENIX not in available
        assert len(lookup.available_emojis()) == len(Emoji)


class TestSkinToneVariants:
    """Tests for skin-tone variant lookup"""

    def test_thumbs_up_has_five_single_tones(self):
        variants = lookup.skin_tone_variants(Emoji.THUMBS_UP)
        assert set(variants) == {(tone,) for tone in SkinTone}
        assert lookup.skin_tone_variant(Emoji.THUMBS_UP, SkinTone.LIGHT) == "\U0001f44d\U0001f3fb"
        assert lookup.skin_tone_variant(Emoji.THUMBS_UP, (SkinTone.DARK,)) == "\U0001f44d\U0001f3ff"

    def test_handshake_singles_and_mixed_pairs(self):
        variants = lookup.skin_tone_variants(Emoji.HANDSHAKE)
        singles = [key for key in variants if len(key) == 1]
        pairs = [key for key in variants if len(key) == 2]
        assert len(singles) == 5
        assert len(pairs) == 20
        assert all(first != second for first, second in pairs)
        assert (
            lookup.skin_tone_variant(Emoji.HANDSHAKE, (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT))
            == "\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fc"
        )

    def test_no_synthesis_of_missing_combinations(self):
        """A same-tone pair is not built from the single-tone variant"""
        assert lookup.skin_tone_variant(Emoji.HANDSHAKE, (SkinTone.LIGHT, SkinTone.LIGHT)) is None

    def test_people_holding_hands_has_all_pairs(self):
        variants = lookup.skin_tone_variants(Emoji.PEOPLE_HOLDING_HANDS)
        assert len(variants) == 25
        assert all(len(key) == 2 for key in variants)
        assert (SkinTone.LIGHT, SkinTone.LIGHT) in variants

    def test_tone_order_matters(self):
        forward = lookup.skin_tone_variant(Emoji.KISS_WOMAN_MAN, (SkinTone.LIGHT, SkinTone.DARK))
        backward = lookup.skin_tone_variant(Emoji.KISS_WOMAN_MAN, (SkinTone.DARK, SkinTone.LIGHT))
        assert forward is not None and backward is not None
        assert forward != backward
        assert len(lookup.skin_tone_variants(Emoji.KISS_WOMAN_MAN)) == 25

    def test_variant_glyph_taken_literally(self):
        """INDEX_POINTING_UP variants drop U+FE0F of the base glyph"""
        assert lookup.skin_tone_variant(Emoji.INDEX_POINTING_UP, SkinTone.MEDIUM) == "\u261d\U0001f3fd"

    def test_symbol_without_variants(self):
        assert lookup.skin_tone_variant(Emoji.GRINNING_FACE, SkinTone.LIGHT) is None
        assert dict(lookup.skin_tone_variants(Emoji.GRINNING_FACE)) == {}
        assert not lookup.has_skin_tone_options(Emoji.GRINNING_FACE)
        assert lookup.has_skin_tone_options(Emoji.THUMBS_UP)

    def test_variants_mapping_is_read_only(self):
        variants = lookup.skin_tone_variants(Emoji.THUMBS_UP)
        with pytest.raises(TypeError):
            variants[(SkinTone.LIGHT,)] = "x"  # type: ignore[index]

    def test_invalid_tone_combinations(self):
        with pytest.raises(ValueError):
            lookup.skin_tone_variant(Emoji.THUMBS_UP, ())
        with pytest.raises(ValueError):
            lookup.skin_tone_variant(Emoji.THUMBS_UP, (SkinTone.LIGHT,) * 3)
        with pytest.raises(TypeError):
            lookup.skin_tone_variant(Emoji.THUMBS_UP, ("LIGHT",))  # type: ignore[arg-type]

    def test_variant_keys_are_one_or_two_tones(self):
        for variants in SKIN_TONE_VARIANTS.values():
            assert variants
            for key in variants:
                assert 1 <= len(key) <= 2
                assert all(isinstance(tone, SkinTone) for tone in key)

    def test_total_variant_count(self):
        assert sum(len(variants) for variants in SKIN_TONE_VARIANTS.values()) == 1875


class TestCategories:
    """Tests for category grouping"""

    def test_all_categories_present(self):
        assert list(CATEGORIES) == list(EmojiCategory)

    def test_category_sizes(self):
        sizes = {category: len(members) for category, members in CATEGORIES.items()}
        assert sizes == {
            EmojiCategory.SMILEYS_AND_EMOTION: 168,
            EmojiCategory.PEOPLE_AND_BODY: 385,
            EmojiCategory.ANIMALS_AND_NATURE: 153,
            EmojiCategory.FOOD_AND_DRINK: 135,
            EmojiCategory.TRAVEL_AND_PLACES: 218,
            EmojiCategory.ACTIVITIES: 85,
            EmojiCategory.OBJECTS: 262,
            EmojiCategory.SYMBOLS: 223,
            EmojiCategory.FLAGS: 269,
        }

    def test_categories_partition_the_symbols(self):
        members = [emoji for group in CATEGORIES.values() for emoji in group]
        assert len(members) == len(set(members))
        assert set(members) == set(Emoji)

    def test_members_in_rank_order(self):
        for members in CATEGORIES.values():
            ranks = [lookup.sort_rank(emoji) for emoji in members]
            assert ranks == sorted(ranks)

    def test_category_of(self):
        assert lookup.category_of(Emoji.GRINNING_FACE) is EmojiCategory.SMILEYS_AND_EMOTION
        assert lookup.category_of(Emoji.THUMBS_UP) is EmojiCategory.PEOPLE_AND_BODY
        assert lookup.category_of(Emoji.FLAG_WALES) is EmojiCategory.FLAGS
        assert lookup.category_members(EmojiCategory.FLAGS)[-1] is Emoji.FLAG_WALES


class TestFindEmoji:
    """Tests for name resolution"""

    @pytest.mark.parametrize(
        "query, expected",
        [
            ("THUMBS_UP", Emoji.THUMBS_UP),
            ("thumbs_up", Emoji.THUMBS_UP),
            ("thumbs up", Emoji.THUMBS_UP),
            ("keycap: #", Emoji.KEYCAP_NUMBER_SIGN),
            ("1st place medal", Emoji.FIRST_PLACE_MEDAL),
        ],
    )
    def test_find_by_name(self, query, expected):
        assert lookup.find_emoji(query) is expected

    def test_unknown_name(self):
        assert lookup.find_emoji("not an emoji") is None
        assert lookup.find_emoji("\U0001f44d") is None
