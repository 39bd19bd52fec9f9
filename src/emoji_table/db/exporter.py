"""
Export and reload of emoji table snapshots through SQLite.

The database holds one row per symbol, one row per skin-tone variant and a
small key/value table with the Emoji version and the table fingerprint.
Glyph text is stored as-is.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from emoji_table.db.session_manager import DatabaseSession
from emoji_table.exceptions import EmojiDataError
from emoji_table.model import EmojiCategory, SkinTone
from emoji_table.serialization import table_fingerprint
from emoji_table.snapshot import EmojiRecord, EmojiTableSnapshot
from emoji_table.utils.progress import create_rich_progress_bar

logger = logging.getLogger(__name__)

_TONE_SEPARATOR = ","


def export_to_database(snapshot: EmojiTableSnapshot, database_path: Path, verbose: int = 30) -> Path:
    """Write ``snapshot`` to a new SQLite database.

    An existing file at ``database_path`` is replaced.

    Args:
        snapshot: Table to export.
        database_path: Target SQLite file.
        verbose: Numeric verbosity; a progress bar is shown at INFO or below.

    Returns:
        Resolved database path.

    Raises:
        RuntimeError: If the database cannot be created.
    """
    database_path = Path(database_path).resolve()
    if database_path.exists():
        logger.info("Replacing existing database %s", database_path)
        database_path.unlink()

    fingerprint = table_fingerprint(snapshot)
    category_by_name = {
        name: category.value for category, members in snapshot.categories.items() for name in members
    }
    records = snapshot.ordered()

    progress = create_rich_progress_bar(len(records), "Exporting", unit="emoji", verbose=verbose)
    with DatabaseSession(database_path) as entities:
        entities.metadata(key="emoji_version", value=snapshot.emoji_version)
        entities.metadata(key="fingerprint", value=fingerprint)

        task_id = None
        start = time.time()
        if progress is not None:
            progress.start()
            task_id = progress.add_task("Exporting", total=len(records), avg_speed="0.0 emoji/s")
        try:
            for count, record in enumerate(records, start=1):
                symbol = entities.symbol(
                    name=record.name,
                    glyph=record.glyph,
                    sort_rank=record.sort_rank,
                    version=record.version,
                    category=category_by_name.get(record.name, ""),
                    cldr_name=record.cldr_name,
                )
                for position, (tones, variant_glyph) in enumerate(record.variants.items()):
                    entities.variant(
                        symbol=symbol,
                        position=position,
                        tones=_TONE_SEPARATOR.join(tone.name for tone in tones),
                        glyph=variant_glyph,
                    )
                if progress is not None:
                    elapsed = time.time() - start
                    avg_text = f"{count / elapsed:.1f} emoji/s" if elapsed > 0 else "0.0 emoji/s"
                    progress.update(task_id, advance=1, avg_speed=avg_text)
        finally:
            if progress is not None:
                progress.stop()

    logger.info("Exported %s symbols to %s (fingerprint %s)", len(records), database_path, fingerprint)
    return database_path


def _parse_tones(text: str, owner: str) -> tuple[SkinTone, ...]:
    try:
        return tuple(SkinTone[name] for name in text.split(_TONE_SEPARATOR))
    except KeyError as exc:
        raise EmojiDataError(f"Variant of {owner} uses unknown tone {exc.args[0]!r}") from exc


def load_from_database(database_path: Path, verify: bool = True) -> EmojiTableSnapshot:
    """Rebuild a snapshot from a database written by ``export_to_database``.

    Args:
        database_path: SQLite file.
        verify: Compare the stored fingerprint with the loaded content.

    Raises:
        FileNotFoundError: If the database does not exist.
        RuntimeError: If the database cannot be opened.
        EmojiDataError: On unknown tones or categories, missing metadata or
            a fingerprint mismatch.
    """
    database_path = Path(database_path)
    with DatabaseSession(database_path, create=False) as entities:
        metadata = {row.key: row.value for row in entities.metadata.select()}
        if "emoji_version" not in metadata:
            raise EmojiDataError("Missing emoji_version metadata", source=str(database_path))

        snapshot = EmojiTableSnapshot(emoji_version=metadata["emoji_version"])
        members: dict[EmojiCategory, list[str]] = {}
        for symbol in entities.symbol.select().order_by(entities.symbol.sort_rank):
            variants = {}
            for row in sorted(symbol.variants, key=lambda variant: variant.position):
                variants[_parse_tones(row.tones, symbol.name)] = row.glyph
            snapshot.records[symbol.name] = EmojiRecord(
                name=symbol.name,
                glyph=symbol.glyph,
                sort_rank=symbol.sort_rank,
                version=symbol.version,
                variants=variants,
                cldr_name=symbol.cldr_name or "",
            )
            if symbol.category:
                try:
                    category = EmojiCategory(symbol.category)
                except ValueError as exc:
                    raise EmojiDataError(f"Unknown category {symbol.category!r}") from exc
                members.setdefault(category, []).append(symbol.name)

    for category in EmojiCategory:
        if category in members:
            snapshot.categories[category] = members[category]

    if verify:
        expected = metadata.get("fingerprint")
        actual = table_fingerprint(snapshot)
        if expected != actual:
            raise EmojiDataError(f"Fingerprint mismatch: database says {expected}, content hashes to {actual}")
    logger.debug("Loaded %s symbols from %s", len(snapshot), database_path)
    return snapshot
