"""Tests for the SQLite export"""

import sqlite3

import pytest

from emoji_table.db import DatabaseConnection, DatabaseSession, export_to_database, load_from_database
from emoji_table.exceptions import EmojiDataError
from emoji_table.generator import parse_lines
from emoji_table.serialization import table_fingerprint


@pytest.fixture
def database(tmp_path, compiled_snapshot):
    return export_to_database(compiled_snapshot, tmp_path / "emoji.sqlite")


class TestDatabaseExport:
    """Tests for export_to_database/load_from_database"""

    def test_round_trip(self, database, compiled_snapshot):
        assert load_from_database(database) == compiled_snapshot

    def test_row_counts(self, database):
        with DatabaseSession(database, create=False) as entities:
            assert entities.symbol.select().count() == 1898
            assert entities.variant.select().count() == 1875
            assert entities.metadata.get(key="emoji_version").value == "15.1"

    def test_fingerprint_stored(self, database, compiled_snapshot):
        with DatabaseSession(database, create=False) as entities:
            stored = entities.metadata.get(key="fingerprint").value
        assert stored == table_fingerprint(compiled_snapshot)

    def test_glyphs_stored_verbatim(self, database):
        with sqlite3.connect(database) as connection:
            (glyph,) = connection.execute("SELECT glyph FROM emoji_symbol WHERE name = 'RED_HEART'").fetchone()
        assert glyph == "\u2764\ufe0f"

    def test_cldr_names_stored(self, database):
        with sqlite3.connect(database) as connection:
            (cldr_name,) = connection.execute(
                "SELECT cldr_name FROM emoji_symbol WHERE name = 'PEOPLE_HOLDING_HANDS'"
            ).fetchone()
            (empty,) = connection.execute("SELECT COUNT(*) FROM emoji_symbol WHERE cldr_name = ''").fetchone()
        assert cldr_name == "people holding hands"
        assert empty == 0

    def test_export_replaces_existing_file(self, database, excerpt_lines):
        excerpt = parse_lines(excerpt_lines)
        export_to_database(excerpt, database)
        loaded = load_from_database(database)
        assert loaded == excerpt
        assert loaded.records["THUMBS_UP"].cldr_name == "thumbs up"

    def test_export_with_progress(self, tmp_path, excerpt_lines):
        excerpt = parse_lines(excerpt_lines)
        path = export_to_database(excerpt, tmp_path / "verbose.sqlite", verbose=20)
        assert load_from_database(path) == excerpt


class TestDatabaseErrors:
    """Tests for rejected databases"""

    def test_missing_database(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_from_database(tmp_path / "missing.sqlite")

    def test_tampered_glyph(self, database):
        with sqlite3.connect(database) as connection:
            connection.execute("UPDATE emoji_symbol SET glyph = 'x' WHERE name = 'GRINNING_FACE'")
        with pytest.raises(EmojiDataError, match="Fingerprint mismatch"):
            load_from_database(database)
        assert load_from_database(database, verify=False).records["GRINNING_FACE"].glyph == "x"

    def test_unknown_tone(self, database):
        with sqlite3.connect(database) as connection:
            connection.execute(
                "UPDATE skin_tone_variant SET tones = 'PURPLE' "
                "WHERE id = (SELECT MIN(id) FROM skin_tone_variant)"
            )
        with pytest.raises(EmojiDataError, match="unknown tone"):
            load_from_database(database)

    def test_unknown_category(self, database):
        with sqlite3.connect(database) as connection:
            connection.execute("UPDATE emoji_symbol SET category = 'Mystery' WHERE name = 'GRINNING_FACE'")
        with pytest.raises(EmojiDataError, match="Unknown category"):
            load_from_database(database)


class TestDatabaseConnection:
    """Tests for DatabaseConnection"""

    def test_connect_and_close(self, tmp_path):
        connection = DatabaseConnection(tmp_path / "sub" / "new.sqlite")
        entities = connection.connect()
        assert entities.symbol.__name__ == "EmojiSymbol"
        assert connection.database_path.exists()
        connection.close()
        assert connection.db is None
        assert connection.entities is None

    def test_connect_without_create(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DatabaseConnection(tmp_path / "missing.sqlite").connect(create=False)

    def test_not_a_database(self, tmp_path):
        path = tmp_path / "garbage.sqlite"
        path.write_bytes(b"this is not sqlite" * 100)
        with pytest.raises(RuntimeError):
            DatabaseConnection(path).connect()
