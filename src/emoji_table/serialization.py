"""
JSON export and import of the emoji table.

Glyphs are stored exactly as in the compiled table. Nothing on the way in
or out applies Unicode normalization, and the document carries an xxhash
fingerprint of its content so a re-encoded or edited file is rejected on
load.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from emoji_table.emoji_data import (
    CATEGORIES,
    EMOJI_VERSION,
    EMOJI_VERSIONS,
    SKIN_TONE_VARIANTS,
    SORT_ORDER,
    Emoji,
)
from emoji_table.exceptions import EmojiDataError
from emoji_table.generator.parser import BUNDLED_SOURCE, parse_emoji_test
from emoji_table.model import EmojiCategory, SkinTone
from emoji_table.snapshot import EmojiRecord, EmojiTableSnapshot
from emoji_table.utils.fingerprint import calculate_data_hash

logger = logging.getLogger(__name__)

FORMAT_NAME = "emoji-table/1"


@lru_cache(maxsize=1)
def _bundled_cldr_names() -> dict[str, str]:
    if not BUNDLED_SOURCE.exists():
        logger.warning("Bundled source %s is missing, CLDR names left empty", BUNDLED_SOURCE)
        return {}
    bundled = parse_emoji_test(BUNDLED_SOURCE)
    if bundled.emoji_version != EMOJI_VERSION:
        logger.warning(
            "Bundled source is Emoji %s but the compiled table is Emoji %s, CLDR names left empty",
            bundled.emoji_version,
            EMOJI_VERSION,
        )
        return {}
    return {name: record.cldr_name for name, record in bundled.records.items()}


def snapshot_from_tables() -> EmojiTableSnapshot:
    """Return a snapshot of the compiled ``emoji_data`` tables.

    CLDR short names are not compiled into ``emoji_data``; they are read from
    the bundled ``emoji-test.txt`` the tables were generated from.
    """
    cldr_names = _bundled_cldr_names()
    snapshot = EmojiTableSnapshot(emoji_version=EMOJI_VERSION)
    for emoji in sorted(Emoji, key=SORT_ORDER.__getitem__):
        snapshot.records[emoji.name] = EmojiRecord(
            name=emoji.name,
            glyph=emoji.value,
            sort_rank=SORT_ORDER[emoji],
            version=EMOJI_VERSIONS[emoji],
            variants=dict(SKIN_TONE_VARIANTS.get(emoji, {})),
            cldr_name=cldr_names.get(emoji.name, ""),
        )
    for category, members in CATEGORIES.items():
        snapshot.categories[category] = [emoji.name for emoji in members]
    return snapshot


def _table_content(snapshot: EmojiTableSnapshot) -> dict[str, Any]:
    category_by_name = {
        name: category.value for category, members in snapshot.categories.items() for name in members
    }
    emojis = []
    for record in snapshot.ordered():
        emojis.append(
            {
                "name": record.name,
                "glyph": record.glyph,
                "sort_rank": record.sort_rank,
                "version": record.version,
                "category": category_by_name.get(record.name),
                "variants": [
                    {"tones": [tone.name for tone in tones], "glyph": glyph}
                    for tones, glyph in record.variants.items()
                ],
            }
        )
    return {
        "emoji_version": snapshot.emoji_version,
        "emojis": emojis,
        "categories": {category.value: list(members) for category, members in snapshot.categories.items()},
    }


def table_fingerprint(snapshot: EmojiTableSnapshot) -> str:
    """Return the xxh64 digest of the snapshot's canonical content."""
    return calculate_data_hash(_table_content(snapshot))


def snapshot_to_document(snapshot: EmojiTableSnapshot) -> dict[str, Any]:
    content = _table_content(snapshot)
    return {
        "format": FORMAT_NAME,
        "fingerprint": calculate_data_hash(content),
        **content,
    }


def _parse_tones(names: Any, owner: str) -> tuple[SkinTone, ...]:
    if not isinstance(names, list) or not names:
        raise EmojiDataError(f"Variant of {owner} has no tone list")
    tones = []
    for name in names:
        try:
            tones.append(SkinTone[name])
        except (KeyError, TypeError) as exc:
            raise EmojiDataError(f"Variant of {owner} uses unknown tone {name!r}") from exc
    return tuple(tones)


def snapshot_from_document(document: dict[str, Any], verify: bool = True) -> EmojiTableSnapshot:
    """Rebuild a snapshot from a decoded JSON document.

    Args:
        document: Decoded document as written by ``snapshot_to_document``.
        verify: Check the embedded fingerprint.

    Raises:
        EmojiDataError: On unsupported format, malformed entries, unknown
            tones or categories, or a fingerprint mismatch.
    """
    format_name = document.get("format") if isinstance(document, dict) else None
    if format_name != FORMAT_NAME:
        raise EmojiDataError(f"Unsupported document format: {format_name!r}")

    try:
        snapshot = EmojiTableSnapshot(emoji_version=str(document["emoji_version"]))
        for entry in document["emojis"]:
            name = entry["name"]
            variants: dict[tuple[SkinTone, ...], str] = {}
            for variant in entry.get("variants", []):
                variants[_parse_tones(variant.get("tones"), name)] = variant["glyph"]
            snapshot.records[name] = EmojiRecord(
                name=name,
                glyph=entry["glyph"],
                sort_rank=int(entry["sort_rank"]),
                version=float(entry["version"]),
                variants=variants,
            )
        for value, members in document["categories"].items():
            try:
                category = EmojiCategory(value)
            except ValueError as exc:
                raise EmojiDataError(f"Unknown category {value!r}") from exc
            snapshot.categories[category] = list(members)
    except EmojiDataError:
        raise
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise EmojiDataError(f"Malformed emoji table document: {exc!r}") from exc

    if verify:
        expected = document.get("fingerprint")
        actual = table_fingerprint(snapshot)
        if expected != actual:
            raise EmojiDataError(f"Fingerprint mismatch: document says {expected}, content hashes to {actual}")
    return snapshot


def dump_json(snapshot: EmojiTableSnapshot, path: Path, indent: int | None = 2, ensure_ascii: bool = False) -> Path:
    """Write ``snapshot`` as a JSON document.

    Returns:
        Resolved output path.
    """
    path = Path(path).resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    document = snapshot_to_document(snapshot)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        json.dump(document, f, ensure_ascii=ensure_ascii, indent=indent)
        f.write("\n")
    logger.info("Exported %s symbols to %s (fingerprint %s)", len(snapshot), path, document["fingerprint"])
    return path


def load_json(path: Path, verify: bool = True) -> EmojiTableSnapshot:
    """Load a JSON document written by ``dump_json``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        EmojiDataError: If the document is invalid (see ``snapshot_from_document``).
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as exc:
            raise EmojiDataError(f"Invalid JSON: {exc}", source=str(path)) from exc
    snapshot = snapshot_from_document(document, verify=verify)
    logger.debug("Loaded %s symbols from %s", len(snapshot), path)
    return snapshot
