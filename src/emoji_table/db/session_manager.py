"""
Database Session Manager

Context manager that opens a database and a PonyORM session together.
"""

import logging
from pathlib import Path
from typing import Any

from pony.orm import db_session as pony_db_session

from emoji_table.db.connection import DatabaseConnection
from emoji_table.db.entities import EmojiEntities

logger = logging.getLogger(__name__)


class DatabaseSession:
    """
    Context manager for database sessions.

    Entering connects and opens a ``db_session``; the entity classes are
    returned. Leaving commits (or rolls back on error) and disconnects.

    Attributes:
        db_connection: Database connection instance.
        _session_context: PonyORM session context manager.
    """

    def __init__(self, database_path: Path, create: bool = True) -> None:
        self.database_path: Path = Path(database_path).resolve()
        self.create = create
        self.db_connection: DatabaseConnection | None = None
        self._session_context: Any | None = None

    def __enter__(self) -> EmojiEntities:
        self.db_connection = DatabaseConnection(self.database_path)
        entities = self.db_connection.connect(create=self.create)
        self._session_context = pony_db_session()
        self._session_context.__enter__()
        return entities

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        try:
            if self._session_context is not None:
                self._session_context.__exit__(exc_type, exc_val, exc_tb)
        finally:
            self._session_context = None
            if self.db_connection is not None:
                self.db_connection.close()
                self.db_connection = None
