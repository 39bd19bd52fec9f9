"""Shared fixtures for emoji-table tests."""

from pathlib import Path

import pytest

from emoji_table.serialization import snapshot_from_tables


def data_line(codepoints: str, version: str, name: str, status: str = "fully-qualified") -> str:
    """Format one ``emoji-test.txt`` data line."""
    glyph = "".join(chr(int(cp, 16)) for cp in codepoints.split())
    return f"{codepoints:<40} ; {status:<20}# {glyph} E{version} {name}"


EXCERPT_LINES = [
    "# emoji-test.txt",
    "# Version: 15.1",
    "",
    "# group: Smileys & Emotion",
    "# subgroup: face-smiling",
    data_line("1F600", "1.0", "grinning face"),
    data_line("263A FE0F", "0.6", "smiling face"),
    data_line("263A", "0.6", "smiling face", status="unqualified"),
    "",
    "# group: People & Body",
    "# subgroup: hand-fingers-closed",
    data_line("1F44D", "0.6", "thumbs up"),
    data_line("1F44D 1F3FB", "1.0", "thumbs up: light skin tone"),
    data_line("1F44D 1F3FF", "1.0", "thumbs up: dark skin tone"),
    data_line("1F91D", "3.0", "handshake"),
    data_line("1F91D 1F3FB", "14.0", "handshake: light skin tone"),
    data_line("1FAF1 1F3FB 200D 1FAF2 1F3FC", "14.0", "handshake: light skin tone, medium-light skin tone"),
    "",
    "# group: Component",
    data_line("1F3FB", "1.0", "light skin tone", status="component"),
    "",
    "# group: Symbols",
    data_line("0023 FE0F 20E3", "0.6", "keycap: #"),
    data_line("0023 20E3", "0.6", "keycap: #", status="unqualified"),
    "",
    "# group: Flags",
    data_line("1F1FA 1F1F8", "0.6", "flag: United States"),
    "",
    "#EOF",
]


@pytest.fixture
def excerpt_lines() -> list[str]:
    return list(EXCERPT_LINES)


@pytest.fixture
def excerpt_path(tmp_path: Path) -> Path:
    path = tmp_path / "emoji-test.txt"
    path.write_text("\n".join(EXCERPT_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture(scope="session")
def compiled_snapshot():
    """Snapshot of the compiled tables (do not mutate)."""
    return snapshot_from_tables()


@pytest.fixture
def snapshot_copy():
    """Fresh snapshot of the compiled tables, safe to tamper with."""
    return snapshot_from_tables()
