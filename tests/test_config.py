"""Tests for configuration loading"""

from pathlib import Path

import pytest

from emoji_table.config import EmojiTableConfig, load_config


class TestLoadConfig:
    """Tests for YAML and TOML configuration files"""

    def test_no_file_gives_defaults(self):
        assert load_config(None) == EmojiTableConfig()

    def test_yaml(self, tmp_path):
        path = tmp_path / "emoji.yaml"
        path.write_text(
            "max_emoji_version: 14\nsource: data/emoji-test.txt\noutput: /tmp/out.py\njson_indent: 4\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.max_emoji_version == 14.0
        assert isinstance(config.max_emoji_version, float)
        assert config.source == (tmp_path / "data" / "emoji-test.txt").resolve()
        assert config.output == Path("/tmp/out.py")
        assert config.json_indent == 4

    def test_toml(self, tmp_path):
        path = tmp_path / "emoji.toml"
        path.write_text('max_emoji_version = 13.1\noutput = "generated.py"\n', encoding="utf-8")
        config = load_config(path)
        assert config.max_emoji_version == 13.1
        assert config.output == (tmp_path / "generated.py").resolve()
        assert config.source is None
        assert config.json_indent == 2

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == EmojiTableConfig()

    def test_null_indent_means_compact(self, tmp_path):
        path = tmp_path / "emoji.yaml"
        path.write_text("json_indent: null\n", encoding="utf-8")
        assert load_config(path).json_indent is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "emoji.yaml"
        path.write_text("max_version: 14\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Unknown configuration key"):
            load_config(path)

    @pytest.mark.parametrize(
        "content",
        [
            "max_emoji_version: latest\n",
            "max_emoji_version: true\n",
            "json_indent: -1\n",
            "json_indent: 2.5\n",
            "source: 42\n",
        ],
    )
    def test_wrong_types(self, tmp_path, content):
        path = tmp_path / "emoji.yaml"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)

    def test_yaml_must_be_a_mapping(self, tmp_path):
        path = tmp_path / "emoji.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "emoji.toml"
        path.write_text("max_emoji_version = \n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "emoji.yaml"
        path.write_text("max_emoji_version: [13.0\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "emoji.ini"
        path.write_text("[emoji]\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported"):
            load_config(path)
