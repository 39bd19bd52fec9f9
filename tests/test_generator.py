"""Tests for the emoji-test.txt parser, symbol naming and module writer"""

import pytest

from conftest import data_line
from emoji_table.exceptions import EmojiDataError
from emoji_table.generator import (
    BUNDLED_SOURCE,
    parse_emoji_test,
    parse_lines,
    render_module,
    symbol_name,
    write_module,
)
from emoji_table.model import EmojiCategory, SkinTone


class TestSymbolName:
    """Tests for CLDR name conversion"""

    @pytest.mark.parametrize(
        "cldr_name, expected",
        [
            ("grinning face", "GRINNING_FACE"),
            ("upside-down face", "UPSIDE_DOWN_FACE"),
            ("thumbs up", "THUMBS_UP"),
            ("keycap: #", "KEYCAP_NUMBER_SIGN"),
            ("keycap: *", "KEYCAP_ASTERISK"),
            ("keycap: 10", "KEYCAP_10"),
            ("1st place medal", "FIRST_PLACE_MEDAL"),
            ("3rd place medal", "THIRD_PLACE_MEDAL"),
            ("flag: Côte d’Ivoire", "FLAG_COTE_DIVOIRE"),
            ("flag: Åland Islands", "FLAG_ALAND_ISLANDS"),
            ("piñata", "PINATA"),
            ("woman’s hat", "WOMANS_HAT"),
            ("Japanese “here” button", "JAPANESE_HERE_BUTTON"),
            ("flag: Bosnia & Herzegovina", "FLAG_BOSNIA_AND_HERZEGOVINA"),
            ("kiss: woman, man", "KISS_WOMAN_MAN"),
        ],
    )
    def test_conversion(self, cldr_name, expected):
        assert symbol_name(cldr_name) == expected

    @pytest.mark.parametrize("cldr_name", ["", "   ", "\U0001f600", "100"])
    def test_unusable_names(self, cldr_name):
        with pytest.raises(ValueError):
            symbol_name(cldr_name)


class TestParser:
    """Tests for parsing emoji-test.txt content"""

    def test_excerpt(self, excerpt_path):
        snapshot = parse_emoji_test(excerpt_path)

        assert snapshot.emoji_version == "15.1"
        assert [record.name for record in snapshot.ordered()] == [
            "GRINNING_FACE",
            "SMILING_FACE",
            "THUMBS_UP",
            "HANDSHAKE",
            "KEYCAP_NUMBER_SIGN",
            "FLAG_UNITED_STATES",
        ]
        assert [record.sort_rank for record in snapshot.ordered()] == list(range(6))

    def test_excerpt_values(self, excerpt_lines):
        snapshot = parse_lines(excerpt_lines)
        thumbs_up = snapshot.records["THUMBS_UP"]

        assert thumbs_up.glyph == "\U0001f44d"
        assert thumbs_up.version == 0.6
        assert thumbs_up.cldr_name == "thumbs up"
        assert thumbs_up.variants == {
            (SkinTone.LIGHT,): "\U0001f44d\U0001f3fb",
            (SkinTone.DARK,): "\U0001f44d\U0001f3ff",
        }
        assert snapshot.records["SMILING_FACE"].glyph == "\u263a\ufe0f"
        assert snapshot.records["KEYCAP_NUMBER_SIGN"].glyph == "#\ufe0f\u20e3"

    def test_two_tone_variant_key(self, excerpt_lines):
        handshake = parse_lines(excerpt_lines).records["HANDSHAKE"]
        assert handshake.variants[(SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT)] == (
            "\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fc"
        )
        assert len(handshake.variants) == 2

    def test_categories_follow_groups(self, excerpt_lines):
        snapshot = parse_lines(excerpt_lines)
        assert snapshot.categories == {
            EmojiCategory.SMILEYS_AND_EMOTION: ["GRINNING_FACE", "SMILING_FACE"],
            EmojiCategory.PEOPLE_AND_BODY: ["THUMBS_UP", "HANDSHAKE"],
            EmojiCategory.SYMBOLS: ["KEYCAP_NUMBER_SIGN"],
            EmojiCategory.FLAGS: ["FLAG_UNITED_STATES"],
        }

    def test_missing_version_header(self, excerpt_lines):
        lines = [line for line in excerpt_lines if not line.startswith("# Version:")]
        with pytest.raises(EmojiDataError, match="Version"):
            parse_lines(lines)

    def test_malformed_line(self, excerpt_lines):
        excerpt_lines.insert(5, "1F600 fully-qualified grinning face")
        with pytest.raises(EmojiDataError, match="Malformed") as exc_info:
            parse_lines(excerpt_lines, source="broken.txt")
        assert exc_info.value.line == 6
        assert str(exc_info.value).startswith("broken.txt:6: ")

    def test_orphan_variant(self):
        lines = [
            "# Version: 15.1",
            "# group: People & Body",
            data_line("1F44D 1F3FB", "1.0", "thumbs up: light skin tone"),
        ]
        with pytest.raises(EmojiDataError, match="no preceding base"):
            parse_lines(lines)

    def test_duplicate_glyph(self, excerpt_lines):
        excerpt_lines.insert(6, data_line("1F600", "1.0", "grinning face again"))
        with pytest.raises(EmojiDataError, match="already belongs"):
            parse_lines(excerpt_lines)

    def test_name_collision(self, excerpt_lines):
        excerpt_lines.insert(6, data_line("1F601", "0.6", "grinning-face"))
        with pytest.raises(EmojiDataError, match="collision"):
            parse_lines(excerpt_lines)

    def test_unknown_group(self):
        lines = [
            "# Version: 15.1",
            "# group: Mystery",
            data_line("1F600", "1.0", "grinning face"),
        ]
        with pytest.raises(EmojiDataError, match="Unknown group"):
            parse_lines(lines)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_emoji_test(tmp_path / "missing.txt")


class TestBundledSource:
    """The bundled data file regenerates the compiled table"""

    def test_bundled_source_exists(self):
        assert BUNDLED_SOURCE.is_file()

    def test_regenerates_compiled_snapshot(self, compiled_snapshot):
        assert parse_emoji_test(BUNDLED_SOURCE) == compiled_snapshot

    def test_regenerates_compiled_module(self):
        import emoji_table.emoji_data as emoji_data

        with open(emoji_data.__file__, encoding="ascii") as f:
            current = f.read()
        assert render_module(parse_emoji_test(BUNDLED_SOURCE)) == current


class TestWriter:
    """Tests for the generated module source"""

    def test_rendered_source_is_ascii(self, excerpt_lines):
        source = render_module(parse_lines(excerpt_lines))
        source.encode("ascii")
        assert "THUMBS_UP = '\\U0001f44d'  # thumbs up" in source
        assert "(SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): " in source
        assert "(SkinTone.LIGHT,): '\\U0001f44d\\U0001f3fb'," in source

    def test_rendered_module_executes(self, excerpt_lines):
        namespace: dict = {"__name__": "generated_emoji_data"}
        exec(compile(render_module(parse_lines(excerpt_lines)), "<emoji_data>", "exec"), namespace)

        emoji = namespace["Emoji"]
        assert namespace["EMOJI_VERSION"] == "15.1"
        assert len(emoji) == 6
        assert emoji.SMILING_FACE.value == "\u263a\ufe0f"
        assert namespace["SORT_ORDER"][emoji.FLAG_UNITED_STATES] == 5
        assert namespace["EMOJI_VERSIONS"][emoji.HANDSHAKE] == 3.0
        assert namespace["SKIN_TONE_VARIANTS"][emoji.THUMBS_UP][(SkinTone.DARK,)] == "\U0001f44d\U0001f3ff"
        assert namespace["CATEGORIES"][EmojiCategory.FLAGS] == (emoji.FLAG_UNITED_STATES,)

    def test_write_module(self, excerpt_lines, tmp_path):
        output = write_module(parse_lines(excerpt_lines), tmp_path / "pkg" / "emoji_data.py")
        assert output.exists()
        assert output.read_bytes().decode("ascii") == render_module(parse_lines(excerpt_lines))
