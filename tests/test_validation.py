"""Tests for table integrity validation"""

import pytest

from emoji_table.model import EmojiCategory, SkinTone
from emoji_table.validation import glyph_problem, validate_snapshot


class TestGlyphProblem:
    """Tests for glyph well-formedness"""

    @pytest.mark.parametrize(
        "glyph",
        [
            "\U0001f600",
            "\u2764\ufe0f",
            "#\ufe0f\u20e3",
            "\U0001f1fa\U0001f1f8",
            "\U0001f3f4\U000e0067\U000e0062\U000e0065\U000e006e\U000e0067\U000e007f",
            "\U0001f9d1\u200d\U0001f91d\u200d\U0001f9d1",
            "\U0001f44d\U0001f3fb",
        ],
    )
    def test_well_formed(self, glyph):
        assert glyph_problem(glyph) is None

    @pytest.mark.parametrize(
        "glyph, problem",
        [
            ("", "empty"),
            ("\u200d\U0001f600", "zero width joiner"),
            ("\U0001f600\u200d", "zero width joiner"),
            ("\U0001f9d1\u200d\u200d\U0001f9d1", "doubled"),
            ("\ufe0f\U0001f600", "variation selector"),
            ("\U0001f3fb", "skin-tone modifier"),
            ("\U0001f1fa", "regional indicator"),
            ("\U0001f1fa\U0001f1f8\U0001f1fa", "regional indicator"),
            ("\U0001f1fa\U0001f600", "regional indicator"),
            ("\U0001f3f4\U000e0067\U000e0062", "unterminated"),
            ("\U0001f3f4\U000e0067\U0001f600", "unterminated"),
            ("\U0001f3f4\U000e007f", "cancel tag"),
        ],
    )
    def test_malformed(self, glyph, problem):
        assert problem in glyph_problem(glyph)


class TestValidateSnapshot:
    """Tests for validate_snapshot"""

    def test_compiled_table_is_clean(self, compiled_snapshot):
        report = validate_snapshot(compiled_snapshot)
        assert report.ok, [str(issue) for issue in report.issues]
        assert report.symbol_count == 1898
        assert report.variant_count == 1875
        assert report.uncategorized == []

    def test_parsed_excerpt_is_clean(self, excerpt_lines):
        from emoji_table.generator import parse_lines

        assert validate_snapshot(parse_lines(excerpt_lines)).ok

    def test_duplicate_rank(self, snapshot_copy):
        records = snapshot_copy.records
        records["THUMBS_DOWN"].sort_rank = records["THUMBS_UP"].sort_rank

        report = validate_snapshot(snapshot_copy)
        assert not report.ok
        assert {"rank-duplicate", "rank-gap"} <= report.checks_failed()

    def test_negative_rank(self, snapshot_copy):
        snapshot_copy.records["GRINNING_FACE"].sort_rank = -1
        assert "rank" in validate_snapshot(snapshot_copy).checks_failed()

    def test_invalid_version(self, snapshot_copy):
        snapshot_copy.records["GRINNING_FACE"].version = 0.0
        assert validate_snapshot(snapshot_copy).checks_failed() == {"version"}

    def test_invalid_name(self, snapshot_copy):
        snapshot_copy.records["GRINNING_FACE"].name = "grinning face"
        assert validate_snapshot(snapshot_copy).checks_failed() == {"name"}

    def test_malformed_base_glyph(self, snapshot_copy):
        snapshot_copy.records["GRINNING_FACE"].glyph = "\U0001f600\u200d"
        assert "glyph" in validate_snapshot(snapshot_copy).checks_failed()

    def test_duplicate_glyph(self, snapshot_copy):
        records = snapshot_copy.records
        records["GRINNING_FACE"].glyph = records["THUMBS_UP"].glyph
        assert "glyph-duplicate" in validate_snapshot(snapshot_copy).checks_failed()

    def test_variant_key_too_long(self, snapshot_copy):
        variants = snapshot_copy.records["PEOPLE_HOLDING_HANDS"].variants
        variants[(SkinTone.LIGHT, SkinTone.LIGHT, SkinTone.LIGHT)] = "\U0001f9d1\U0001f3fb"
        assert "variant-key" in validate_snapshot(snapshot_copy).checks_failed()

    def test_variant_key_not_a_tone(self, snapshot_copy):
        variants = snapshot_copy.records["THUMBS_UP"].variants
        variants[("LIGHT",)] = variants.pop((SkinTone.LIGHT,))
        assert "variant-key" in validate_snapshot(snapshot_copy).checks_failed()

    def test_variant_glyph_does_not_match_key(self, snapshot_copy):
        variants = snapshot_copy.records["THUMBS_UP"].variants
        variants[(SkinTone.LIGHT,)], variants[(SkinTone.DARK,)] = (
            variants[(SkinTone.DARK,)],
            variants[(SkinTone.LIGHT,)],
        )
        report = validate_snapshot(snapshot_copy)
        assert report.checks_failed() == {"variant-glyph"}
        assert len(report.issues) == 2

    def test_variant_glyph_equals_base(self, snapshot_copy):
        record = snapshot_copy.records["THUMBS_UP"]
        record.variants[(SkinTone.LIGHT,)] = record.glyph
        assert "variant-glyph" in validate_snapshot(snapshot_copy).checks_failed()

    def test_empty_variant_glyph(self, snapshot_copy):
        snapshot_copy.records["THUMBS_UP"].variants[(SkinTone.LIGHT,)] = ""
        assert "variant-glyph" in validate_snapshot(snapshot_copy).checks_failed()

    def test_unknown_category_member(self, snapshot_copy):
        snapshot_copy.categories[EmojiCategory.FLAGS].append("NOT_AN_EMOJI")
        assert validate_snapshot(snapshot_copy).checks_failed() == {"category"}

    def test_member_in_two_categories(self, snapshot_copy):
        snapshot_copy.categories[EmojiCategory.FLAGS].append("GRINNING_FACE")
        assert validate_snapshot(snapshot_copy).checks_failed() == {"category"}

    def test_members_out_of_rank_order(self, snapshot_copy):
        smileys = snapshot_copy.categories[EmojiCategory.SMILEYS_AND_EMOTION]
        smileys[0], smileys[1] = smileys[1], smileys[0]
        assert validate_snapshot(snapshot_copy).checks_failed() == {"category-order"}

    def test_uncategorized_symbols_are_reported_not_rejected(self, snapshot_copy):
        snapshot_copy.categories[EmojiCategory.SMILEYS_AND_EMOTION].remove("GRINNING_FACE")
        report = validate_snapshot(snapshot_copy)
        assert report.ok
        assert report.uncategorized == ["GRINNING_FACE"]
