"""PonyORM entities for the SQLite export of the emoji table.

Entities are declared per ``Database`` instance so that several exports can
be open in one process.
"""

from dataclasses import dataclass
from typing import Any

from pony.orm import Database, Optional, PrimaryKey, Required, Set


@dataclass(frozen=True)
class EmojiEntities:
    """Entity classes bound to one database."""

    symbol: Any
    variant: Any
    metadata: Any


def define_entities(db: Database) -> EmojiEntities:
    """Declare the emoji entities on ``db``.

    Must be called before ``db.generate_mapping``.
    """

    class EmojiSymbol(db.Entity):
        _table_ = "emoji_symbol"

        name = PrimaryKey(str)
        glyph = Required(str, unique=True)
        sort_rank = Required(int, unique=True)
        version = Required(float)
        category = Optional(str, index=True)
        cldr_name = Optional(str)
        variants = Set("SkinToneVariant", cascade_delete=True)

        def __repr__(self) -> str:
            return f"EmojiSymbol(name='{self.name}', rank={self.sort_rank})"

    class SkinToneVariant(db.Entity):
        _table_ = "skin_tone_variant"

        symbol = Required(EmojiSymbol)
        position = Required(int)  # order within the symbol's variants
        tones = Required(str)  # comma-separated SkinTone names
        glyph = Required(str, unique=True)

    class TableMetadata(db.Entity):
        _table_ = "table_metadata"

        key = PrimaryKey(str)
        value = Required(str)

    return EmojiEntities(symbol=EmojiSymbol, variant=SkinToneVariant, metadata=TableMetadata)
