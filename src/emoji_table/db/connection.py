"""Database connection manager."""

import logging
from pathlib import Path

from pony.orm import Database

from emoji_table.db.entities import EmojiEntities, define_entities

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """PonyORM connection to one SQLite emoji table file."""

    def __init__(self, database_path: Path) -> None:
        """Initialize database connection.

        Args:
            database_path: Path to SQLite database file.
        """
        self.database_path = Path(database_path).resolve()
        self.db: Database | None = None
        self.entities: EmojiEntities | None = None

    def connect(self, create: bool = True) -> EmojiEntities:
        """Bind the database and generate its schema.

        Args:
            create: Create the file and tables if they are missing.

        Returns:
            Entity classes bound to this connection.

        Raises:
            FileNotFoundError: If ``create`` is False and the file is missing.
            RuntimeError: If the database cannot be opened or mapped.
        """
        if not create and not self.database_path.exists():
            raise FileNotFoundError(f"Database does not exist: {self.database_path}")

        try:
            if create:
                self.database_path.parent.mkdir(parents=True, exist_ok=True)

            db = Database()
            entities = define_entities(db)

            db.bind(provider="sqlite", filename=str(self.database_path), create_db=create)

            @db.on_connect(provider="sqlite")
            def setup_sqlite(db_instance, connection):  # type: ignore[no-untyped-def]
                connection.execute("PRAGMA synchronous=NORMAL;")
                connection.execute("PRAGMA busy_timeout=5000;")

            db.generate_mapping(create_tables=create)
            logger.debug("Database schema mapped for %s", self.database_path)
        except Exception as e:
            error_msg = f"Failed to connect to database {self.database_path}: {e}"
            logger.error(error_msg)
            raise RuntimeError(error_msg) from e

        self.db = db
        self.entities = entities
        return entities

    def close(self) -> None:
        """Close database connection."""
        if self.db is not None:
            self.db.disconnect()
            logger.debug("Database connection closed: %s", self.database_path)
            self.db = None
            self.entities = None
