"""Tests for xxhash fingerprints"""

import pytest

from emoji_table.utils.fingerprint import calculate_data_hash, calculate_file_hash


class TestFingerprint:
    """Tests for file and data hashes"""

    def test_file_hash_matches_content(self, tmp_path):
        first = tmp_path / "a.txt"
        second = tmp_path / "b.txt"
        first.write_bytes(b"\xf0\x9f\x91\x8d" * 5000)
        second.write_bytes(b"\xf0\x9f\x91\x8d" * 5000)
        assert calculate_file_hash(first) == calculate_file_hash(second, chunk_size=7)
        assert len(calculate_file_hash(first)) == 16

    def test_file_hash_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            calculate_file_hash(tmp_path / "missing.txt")

    def test_data_hash_ignores_key_order(self):
        assert calculate_data_hash({"a": 1, "b": [1, 2]}) == calculate_data_hash({"b": [1, 2], "a": 1})

    def test_data_hash_sees_normalization(self):
        composed = "\u00e9"
        decomposed = "e\u0301"
        assert calculate_data_hash(composed) != calculate_data_hash(decomposed)
