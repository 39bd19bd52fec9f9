"""SQLite export of the emoji table using PonyORM."""

from emoji_table.db.connection import DatabaseConnection
from emoji_table.db.entities import EmojiEntities, define_entities
from emoji_table.db.exporter import export_to_database, load_from_database
from emoji_table.db.session_manager import DatabaseSession

__all__ = [
    "DatabaseConnection",
    "DatabaseSession",
    "EmojiEntities",
    "define_entities",
    "export_to_database",
    "load_from_database",
]
