"""Tests for picker and reaction helpers"""

from emoji_table.emoji_data import CATEGORIES, Emoji
from emoji_table.lookup import is_available
from emoji_table.model import EmojiCategory, SkinTone
from emoji_table.picker import (
    BASE_REACTIONS,
    DEFAULT_REACTIONS,
    base_reactions,
    default_reactions,
    ordered_recent,
    picker_sections,
    preferred_variant,
)
from emoji_table.variants import EmojiVariant


class TestPickerSections:
    """Tests for picker_sections"""

    def test_all_sections_without_limit(self):
        sections = picker_sections()
        assert [category for category, _ in sections] == list(EmojiCategory)
        assert sum(len(members) for _, members in sections) == len(Emoji)

    def test_sections_respect_max_version(self):
        sections = dict(picker_sections(max_version=12.0))
        smileys = sections[EmojiCategory.SMILEYS_AND_EMOTION]
        assert Emoji.GRINNING_FACE in smileys
        assert Emoji.SHAKING_FACE not in smileys
        for members in sections.values():
            assert all(is_available(emoji, 12.0) for emoji in members)

    def test_sections_keep_category_order(self):
        for category, members in picker_sections(max_version=15.0):
            expected = tuple(emoji for emoji in CATEGORIES[category] if is_available(emoji, 15.0))
            assert members == expected

    def test_empty_sections_are_dropped(self):
        assert picker_sections(max_version=0.1) == []


class TestPreferences:
    """Tests for tone preferences"""

    def test_no_preference(self):
        assert preferred_variant(Emoji.THUMBS_UP) == EmojiVariant(Emoji.THUMBS_UP)

    def test_single_tone_preference(self):
        variant = preferred_variant(Emoji.THUMBS_UP, {Emoji.THUMBS_UP: SkinTone.MEDIUM_DARK})
        assert variant.glyph == "\U0001f44d\U0001f3fe"

    def test_pair_preference(self):
        preferences = {Emoji.HANDSHAKE: (SkinTone.LIGHT, SkinTone.DARK)}
        variant = preferred_variant(Emoji.HANDSHAKE, preferences)
        assert variant.tones == (SkinTone.LIGHT, SkinTone.DARK)

    def test_unsupported_preference_is_ignored(self):
        assert preferred_variant(Emoji.GRINNING_FACE, {Emoji.GRINNING_FACE: SkinTone.LIGHT}) == EmojiVariant(
            Emoji.GRINNING_FACE
        )
        preferences = {Emoji.HANDSHAKE: (SkinTone.LIGHT, SkinTone.LIGHT)}
        assert preferred_variant(Emoji.HANDSHAKE, preferences) == EmojiVariant(Emoji.HANDSHAKE)

    def test_malformed_preference_is_ignored(self):
        preferences = {Emoji.THUMBS_UP: (SkinTone.LIGHT,) * 3}
        assert preferred_variant(Emoji.THUMBS_UP, preferences) == EmojiVariant(Emoji.THUMBS_UP)
        assert preferred_variant(Emoji.THUMBS_UP, {Emoji.THUMBS_UP: ()}) == EmojiVariant(Emoji.THUMBS_UP)


class TestReactions:
    """Tests for reaction sets"""

    def test_base_reactions(self):
        assert BASE_REACTIONS == (Emoji.THUMBS_UP, Emoji.THUMBS_DOWN)
        reactions = base_reactions({Emoji.THUMBS_DOWN: SkinTone.LIGHT})
        assert [str(variant) for variant in reactions] == ["\U0001f44d", "\U0001f44e\U0001f3fb"]

    def test_default_reactions(self):
        assert DEFAULT_REACTIONS == (
            Emoji.RED_HEART,
            Emoji.FACE_WITH_TEARS_OF_JOY,
            Emoji.CRYING_FACE,
            Emoji.FOLDED_HANDS,
        )
        reactions = default_reactions({Emoji.FOLDED_HANDS: SkinTone.DARK})
        assert reactions[-1].glyph == "\U0001f64f\U0001f3ff"
        assert reactions[0].glyph == "\u2764\ufe0f"


class TestRecent:
    """Tests for ordered_recent"""

    def test_sorted_by_usage_index(self):
        recent = {
            "\U0001f602": 3,
            "\U0001f44d\U0001f3fb": 1,
            "\U0001f600": 2,
        }
        assert ordered_recent(recent) == [
            EmojiVariant(Emoji.THUMBS_UP, (SkinTone.LIGHT,)),
            EmojiVariant(Emoji.GRINNING_FACE),
            EmojiVariant(Emoji.FACE_WITH_TEARS_OF_JOY),
        ]

    def test_unknown_glyphs_are_skipped(self):
        assert ordered_recent({"not an emoji": 0, "\U0001f600": 1}) == [EmojiVariant(Emoji.GRINNING_FACE)]

    def test_empty(self):
        assert ordered_recent({}) == []
