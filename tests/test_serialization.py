"""Tests for JSON export and import"""

import json

import pytest

from emoji_table.exceptions import EmojiDataError
from emoji_table.serialization import (
    FORMAT_NAME,
    dump_json,
    load_json,
    snapshot_to_document,
    table_fingerprint,
)


@pytest.fixture
def json_export(tmp_path, compiled_snapshot):
    return dump_json(compiled_snapshot, tmp_path / "emoji.json")


def _rewrite(path, edit):
    document = json.loads(path.read_text(encoding="utf-8"))
    edit(document)
    path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")


class TestJsonRoundTrip:
    """Tests for dump_json/load_json"""

    def test_round_trip(self, json_export, compiled_snapshot):
        assert load_json(json_export) == compiled_snapshot

    def test_round_trip_is_byte_exact(self, json_export, tmp_path):
        second = dump_json(load_json(json_export), tmp_path / "again.json")
        assert second.read_bytes() == json_export.read_bytes()

    def test_ascii_output_round_trips(self, tmp_path, compiled_snapshot):
        path = dump_json(compiled_snapshot, tmp_path / "ascii.json", indent=None, ensure_ascii=True)
        path.read_bytes().decode("ascii")
        assert load_json(path) == compiled_snapshot

    def test_glyphs_are_not_normalized(self, json_export):
        text = json_export.read_text(encoding="utf-8")
        assert '"glyph": "\u2764\ufe0f"' in text
        assert '"glyph": "\u261d\U0001f3fb"' in text

    def test_document_layout(self, compiled_snapshot):
        document = snapshot_to_document(compiled_snapshot)
        assert document["format"] == FORMAT_NAME
        assert document["emoji_version"] == "15.1"
        assert document["fingerprint"] == table_fingerprint(compiled_snapshot)
        assert len(document["emojis"]) == 1898

        thumbs_up = next(entry for entry in document["emojis"] if entry["name"] == "THUMBS_UP")
        assert thumbs_up["category"] == "People & Body"
        assert thumbs_up["sort_rank"] == 195
        assert thumbs_up["version"] == 0.6
        assert thumbs_up["variants"][0] == {"tones": ["LIGHT"], "glyph": "\U0001f44d\U0001f3fb"}

    def test_compiled_snapshot_has_cldr_names(self, compiled_snapshot):
        assert compiled_snapshot.records["THUMBS_UP"].cldr_name == "thumbs up"
        assert compiled_snapshot.records["FLAG_WALES"].cldr_name == "flag: Wales"
        assert all(record.cldr_name for record in compiled_snapshot.records.values())

    def test_creates_parent_directories(self, tmp_path, compiled_snapshot):
        path = dump_json(compiled_snapshot, tmp_path / "nested" / "dir" / "emoji.json")
        assert path.exists()


class TestFingerprint:
    """Tests for table_fingerprint"""

    def test_stable(self, compiled_snapshot, snapshot_copy):
        assert table_fingerprint(compiled_snapshot) == table_fingerprint(snapshot_copy)

    def test_changes_with_content(self, compiled_snapshot, snapshot_copy):
        snapshot_copy.records["RED_HEART"].glyph = "\u2764"
        assert table_fingerprint(snapshot_copy) != table_fingerprint(compiled_snapshot)


class TestJsonErrors:
    """Tests for rejected documents"""

    def test_fingerprint_mismatch(self, json_export):
        def edit(document):
            document["emojis"][0]["glyph"] = "\U0001f642"

        _rewrite(json_export, edit)
        with pytest.raises(EmojiDataError, match="Fingerprint mismatch"):
            load_json(json_export)
        assert load_json(json_export, verify=False).records["GRINNING_FACE"].glyph == "\U0001f642"

    def test_unknown_tone(self, json_export):
        def edit(document):
            entry = next(entry for entry in document["emojis"] if entry["variants"])
            entry["variants"][0]["tones"] = ["PURPLE"]

        _rewrite(json_export, edit)
        with pytest.raises(EmojiDataError, match="unknown tone"):
            load_json(json_export)

    def test_empty_tone_list(self, json_export):
        def edit(document):
            entry = next(entry for entry in document["emojis"] if entry["variants"])
            entry["variants"][0]["tones"] = []

        _rewrite(json_export, edit)
        with pytest.raises(EmojiDataError, match="no tone list"):
            load_json(json_export)

    def test_unknown_category(self, json_export):
        def edit(document):
            document["categories"]["Mystery"] = []

        _rewrite(json_export, edit)
        with pytest.raises(EmojiDataError, match="Unknown category"):
            load_json(json_export)

    def test_unsupported_format(self, json_export):
        def edit(document):
            document["format"] = "emoji-table/99"

        _rewrite(json_export, edit)
        with pytest.raises(EmojiDataError, match="Unsupported document format"):
            load_json(json_export)

    def test_missing_section(self, json_export):
        _rewrite(json_export, lambda document: document.pop("emojis"))
        with pytest.raises(EmojiDataError, match="Malformed"):
            load_json(json_export)

    @pytest.mark.parametrize("field, value", [("sort_rank", "abc"), ("version", "new")])
    def test_non_numeric_field(self, json_export, field, value):
        _rewrite(json_export, lambda document: document["emojis"][0].update({field: value}))
        with pytest.raises(EmojiDataError, match="Malformed"):
            load_json(json_export)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(EmojiDataError, match="Invalid JSON"):
            load_json(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "missing.json")
