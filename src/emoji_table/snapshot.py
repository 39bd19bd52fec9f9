"""
Plain-data snapshot of the emoji table.

The generator produces a snapshot from ``emoji-test.txt``, the serializers
read and write snapshots, and validation runs against them. The compiled
tables in ``emoji_table.emoji_data`` are converted with
``emoji_table.serialization.snapshot_from_tables``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from emoji_table.model import EmojiCategory, SkinTone

ToneKey = tuple[SkinTone, ...]


@dataclass
class EmojiRecord:
    """One symbol with all of its parallel table values.

    Attributes:
        name: Symbolic name (``THUMBS_UP``).
        glyph: Canonical glyph sequence.
        sort_rank: Display order index.
        version: Emoji version that introduced the symbol.
        variants: Tone combination to precomposed glyph.
        cldr_name: Human-readable CLDR short name, informational only.
    """

    name: str
    glyph: str
    sort_rank: int
    version: float
    variants: dict[ToneKey, str] = field(default_factory=dict)
    cldr_name: str = field(default="", compare=False)


@dataclass
class EmojiTableSnapshot:
    """All five tables keyed by symbolic name."""

    emoji_version: str
    records: dict[str, EmojiRecord] = field(default_factory=dict)
    categories: dict[EmojiCategory, list[str]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.records)

    def ordered(self) -> list[EmojiRecord]:
        """Records ascending by sort rank."""
        return sorted(self.records.values(), key=lambda record: record.sort_rank)

    def variant_count(self) -> int:
        return sum(len(record.variants) for record in self.records.values())
