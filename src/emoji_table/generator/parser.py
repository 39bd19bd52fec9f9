"""
Parser for the Unicode ``emoji-test.txt`` data file.

Every ``fully-qualified`` line outside the ``Component`` group is either a
base symbol or, when its code points contain a skin-tone modifier, a variant
of the base symbol listed before it. The file is in CLDR order, which
becomes the sort rank.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from emoji_table.exceptions import EmojiDataError
from emoji_table.generator.naming import symbol_name
from emoji_table.model import EmojiCategory, tones_in
from emoji_table.snapshot import EmojiRecord, EmojiTableSnapshot

logger = logging.getLogger(__name__)

BUNDLED_SOURCE = Path(__file__).resolve().parent.parent / "data" / "emoji-test.txt"

# 1F44D 1F3FB ; fully-qualified # 👍🏻 E1.0 thumbs up: light skin tone
_DATA_LINE = re.compile(
    r"^(?P<codepoints>[0-9A-F]+(?: [0-9A-F]+)*)\s*;\s*(?P<status>[\w-]+)\s*#\s*\S+\s+"
    r"E(?P<version>\d+\.\d+)\s+(?P<name>.+?)\s*$"
)

_FULLY_QUALIFIED = "fully-qualified"
_COMPONENT_GROUP = "Component"


@dataclass(frozen=True)
class EmojiTestEntry:
    """One data line of ``emoji-test.txt``."""

    glyph: str
    status: str
    version: str
    name: str
    group: str | None
    line: int


def iter_entries(lines: Iterable[str], source: str = "<emoji-test>") -> Iterable[EmojiTestEntry]:
    """Yield data entries with the group they belong to.

    Raises:
        EmojiDataError: If a non-comment line does not match the format.
    """
    group: str | None = None
    for number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("#"):
            if line.startswith("# group:"):
                group = line[len("# group:"):].strip()
            continue

        match = _DATA_LINE.match(line)
        if match is None:
            raise EmojiDataError(f"Malformed data line: {line!r}", source=source, line=number)

        glyph = "".join(chr(int(codepoint, 16)) for codepoint in match["codepoints"].split())
        yield EmojiTestEntry(
            glyph=glyph,
            status=match["status"],
            version=match["version"],
            name=match["name"],
            group=group,
            line=number,
        )


def read_emoji_version(lines: Iterable[str]) -> str | None:
    """Return the ``# Version:`` header value."""
    for line in lines:
        if line.startswith("# Version:"):
            return line[len("# Version:"):].strip()
        if line.strip() and not line.startswith("#"):
            break
    return None


def parse_lines(lines: list[str], source: str = "<emoji-test>") -> EmojiTableSnapshot:
    """Build a table snapshot from the lines of an ``emoji-test.txt`` file.

    Args:
        lines: File content split into lines.
        source: Name used in error messages.

    Returns:
        Snapshot with symbols in file order.

    Raises:
        EmojiDataError: On malformed lines, unknown groups, orphan variants
            or colliding symbol names and glyphs.
    """
    emoji_version = read_emoji_version(lines)
    if emoji_version is None:
        raise EmojiDataError("Missing '# Version:' header", source=source)

    snapshot = EmojiTableSnapshot(emoji_version=emoji_version)
    glyph_owner: dict[str, str] = {}
    current: EmojiRecord | None = None
    skipped = 0

    for entry in iter_entries(lines, source):
        if entry.status != _FULLY_QUALIFIED or entry.group == _COMPONENT_GROUP:
            skipped += 1
            continue

        if entry.glyph in glyph_owner:
            raise EmojiDataError(
                f"Glyph of {entry.name!r} already belongs to {glyph_owner[entry.glyph]}",
                source=source,
                line=entry.line,
            )

        tones = tones_in(entry.glyph)
        if tones:
            if current is None:
                raise EmojiDataError(
                    f"Skin-tone variant {entry.name!r} has no preceding base symbol",
                    source=source,
                    line=entry.line,
                )
            if tones in current.variants:
                raise EmojiDataError(
                    f"Duplicate tone combination for {current.name}: {entry.name!r}",
                    source=source,
                    line=entry.line,
                )
            current.variants[tones] = entry.glyph
            glyph_owner[entry.glyph] = current.name
            continue

        try:
            category = EmojiCategory(entry.group)
        except ValueError as exc:
            raise EmojiDataError(f"Unknown group {entry.group!r}", source=source, line=entry.line) from exc

        try:
            name = symbol_name(entry.name)
        except ValueError as exc:
            raise EmojiDataError(str(exc), source=source, line=entry.line) from exc
        if name in snapshot.records:
            raise EmojiDataError(f"Symbol name collision: {name}", source=source, line=entry.line)

        current = EmojiRecord(
            name=name,
            glyph=entry.glyph,
            sort_rank=len(snapshot.records),
            version=float(entry.version),
            cldr_name=entry.name,
        )
        snapshot.records[name] = current
        snapshot.categories.setdefault(category, []).append(name)
        glyph_owner[entry.glyph] = name

    logger.debug("Skipped %s non-fully-qualified or component entries in %s", skipped, source)
    logger.info(
        "Parsed %s symbols with %s skin-tone variants from %s (Emoji %s)",
        len(snapshot),
        snapshot.variant_count(),
        source,
        emoji_version,
    )
    return snapshot


def parse_emoji_test(path: Path) -> EmojiTableSnapshot:
    """Parse an ``emoji-test.txt`` file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        EmojiDataError: If the content is malformed.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        lines = f.read().splitlines()
    return parse_lines(lines, source=path.name)
