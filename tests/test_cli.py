"""Tests for the emoji-table command line"""

import json
import logging
import re

import pytest

from conftest import EXCERPT_LINES, data_line
from emoji_table import main
from emoji_table.lookup import available_emojis


def _total_symbols(output: str) -> int:
    return int(re.search(r"Total symbols: (\d+)", output).group(1))


class TestCommandLine:
    """Tests for argument handling"""

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "generate" in capsys.readouterr().out

    def test_unknown_command(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["frobnicate"])
        assert exc_info.value.code == 2

    def test_verbose_flags(self, capsys):
        assert main(["-vv", "stats"]) == 0
        assert main(["stats", "-vvvvv"]) == 0

    @pytest.mark.parametrize(
        "flags, level",
        [
            ([], logging.WARNING),
            (["-v"], logging.INFO),
            (["-vv"], logging.DEBUG),
            (["-vvv"], logging.DEBUG),
        ],
    )
    def test_verbosity_sets_root_level(self, flags, level, capsys):
        assert main([*flags, "stats"]) == 0
        assert logging.getLogger().level == level


class TestShowAndStats:
    """Tests for the inspection subcommands"""

    def test_show_by_name(self, capsys):
        assert main(["show", "THUMBS_UP"]) == 0
        out = capsys.readouterr().out
        assert "=== THUMBS_UP ===" in out
        assert "Code points: U+1F44D" in out
        assert "Category: People & Body" in out
        assert "Skin-tone variants (5):" in out

    def test_show_by_cldr_name(self, capsys):
        assert main(["show", "people holding hands"]) == 0
        assert "Skin-tone variants (25):" in capsys.readouterr().out

    def test_show_by_variant_glyph(self, capsys):
        assert main(["show", "\U0001f44d\U0001f3ff"]) == 0
        out = capsys.readouterr().out
        assert "=== THUMBS_UP ===" in out
        assert "Matched tones: dark skin tone" in out

    def test_show_unknown(self):
        assert main(["show", "no such emoji"]) == 1

    def test_stats(self, capsys):
        assert main(["stats"]) == 0
        out = capsys.readouterr().out
        assert "Emoji Table Statistics (Emoji 15.1)" in out
        assert _total_symbols(out) == 1898
        assert "Total variants: 1875" in out

    def test_stats_with_max_version(self, capsys):
        assert main(["stats", "--max-version", "14.0"]) == 0
        assert _total_symbols(capsys.readouterr().out) == len(available_emojis(14.0))

    def test_stats_uses_config(self, tmp_path, capsys):
        config = tmp_path / "emoji.yaml"
        config.write_text("max_emoji_version: 13.0\n", encoding="utf-8")
        assert main(["--config", str(config), "stats"]) == 0
        out = capsys.readouterr().out
        assert "Limited to Emoji 13.0" in out
        assert _total_symbols(out) == len(available_emojis(13.0))

    def test_command_line_overrides_config(self, tmp_path, capsys):
        config = tmp_path / "emoji.yaml"
        config.write_text("max_emoji_version: 13.0\n", encoding="utf-8")
        assert main(["stats", "--config", str(config), "--max-version", "15.0"]) == 0
        assert "Limited to Emoji 15.0" in capsys.readouterr().out

    def test_invalid_config(self, tmp_path):
        config = tmp_path / "emoji.yaml"
        config.write_text("colour: blue\n", encoding="utf-8")
        assert main(["--config", str(config), "stats"]) == 1

    def test_malformed_yaml_config(self, tmp_path):
        config = tmp_path / "emoji.yaml"
        config.write_text("max_emoji_version: [13.0\n", encoding="utf-8")
        assert main(["--config", str(config), "stats"]) == 1

    def test_missing_config(self, tmp_path):
        assert main(["--config", str(tmp_path / "missing.yaml"), "stats"]) == 1


class TestExportAndValidate:
    """Tests for export and validate"""

    def test_validate_compiled_table(self, capsys):
        assert main(["validate"]) == 0
        assert "OK" in capsys.readouterr().out

    def test_json_export_validates(self, tmp_path):
        output = tmp_path / "emoji.json"
        assert main(["export", "--format", "json", str(output)]) == 0
        assert json.loads(output.read_text(encoding="utf-8"))["emoji_version"] == "15.1"
        assert main(["validate", "--json", str(output)]) == 0

    def test_json_indent_from_config(self, tmp_path):
        config = tmp_path / "emoji.toml"
        config.write_text("json_indent = 0\n", encoding="utf-8")
        output = tmp_path / "emoji.json"
        assert main(["--config", str(config), "export", str(output)]) == 0
        assert output.read_text(encoding="utf-8").startswith('{\n"format"')

    def test_sqlite_export_validates(self, tmp_path):
        output = tmp_path / "emoji.sqlite"
        assert main(["-v", "export", "--format", "sqlite", str(output)]) == 0
        assert main(["validate", "--db", str(output)]) == 0

    def test_validate_tampered_json(self, tmp_path):
        output = tmp_path / "emoji.json"
        assert main(["export", str(output)]) == 0
        document = json.loads(output.read_text(encoding="utf-8"))
        document["emojis"][0]["sort_rank"] = 5
        output.write_text(json.dumps(document), encoding="utf-8")
        assert main(["validate", "--json", str(output)]) == 1

    def test_validate_missing_file(self, tmp_path):
        assert main(["validate", "--json", str(tmp_path / "missing.json")]) == 1
        assert main(["validate", "--db", str(tmp_path / "missing.sqlite")]) == 1

    def test_validate_json_and_db_are_exclusive(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["validate", "--json", "a.json", "--db", "b.sqlite"])


class TestGenerate:
    """Tests for generate"""

    def test_generate_from_excerpt(self, excerpt_path, tmp_path, capsys):
        output = tmp_path / "emoji_data.py"
        assert main(["generate", str(excerpt_path), "-o", str(output)]) == 0
        assert "Wrote 6 symbols and 4 variants" in capsys.readouterr().out
        assert "class Emoji(str, Enum):" in output.read_text(encoding="ascii")

    def test_generate_check_against_compiled_module(self):
        assert main(["generate", "--check"]) == 0

    def test_generate_check_detects_stale_output(self, tmp_path):
        output = tmp_path / "emoji_data.py"
        output.write_text("# stale\n", encoding="ascii")
        assert main(["generate", "--check", "-o", str(output)]) == 1
        assert output.read_text(encoding="ascii") == "# stale\n"

    def test_generate_refuses_invalid_data(self, tmp_path):
        source = tmp_path / "emoji-test.txt"
        lines = list(EXCERPT_LINES)
        lines.insert(6, data_line("1F600 200D", "1.0", "broken face"))
        source.write_text("\n".join(lines) + "\n", encoding="utf-8")
        output = tmp_path / "emoji_data.py"

        assert main(["generate", str(source), "-o", str(output)]) == 1
        assert not output.exists()

    def test_generate_parse_error(self, tmp_path):
        source = tmp_path / "emoji-test.txt"
        source.write_text("# no version header\n1F600 ; fully-qualified # x E1.0 grinning face\n", encoding="utf-8")
        assert main(["generate", str(source), "-o", str(tmp_path / "out.py")]) == 1

    def test_generate_missing_source(self, tmp_path):
        assert main(["generate", str(tmp_path / "missing.txt"), "-o", str(tmp_path / "out.py")]) == 1
