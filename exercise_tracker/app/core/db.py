"""
SQLite storage handle and schema bootstrap.

``Database`` owns the location of the SQLite file and hands out one
short-lived connection per operation, so concurrent requests never
share a connection.  The application factory creates a single
``Database``, opens it on startup (which applies pending schema
versions) and closes it on shutdown; request handlers receive it via
the ``get_database`` dependency.

Schema versions are stored in the ``migrations`` table and applied in
order, the same way for a fresh file and for an existing one.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

from fastapi import Request

from .errors import StoreError

logger = logging.getLogger(__name__)

SQLITE_PREFIX = "sqlite:///"

MIGRATIONS: List[Tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            seq INTEGER PRIMARY KEY AUTOINCREMENT,
            id TEXT NOT NULL UNIQUE,
            username TEXT NOT NULL UNIQUE,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        -- Entries keep their insertion order through the autoincrement id.
        CREATE TABLE IF NOT EXISTS exercises (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id TEXT NOT NULL,
            description TEXT NOT NULL,
            duration INTEGER NOT NULL,
            date TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(user_id) REFERENCES users(id)
        );

        CREATE INDEX IF NOT EXISTS idx_exercises_user_id ON exercises(user_id);
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Turn the configured ``DATABASE_URL`` into a filesystem path.

    Absolute paths are used as is; relative ones are resolved against
    the project root (the directory holding the ``exercise_tracker``
    package).
    """
    db_url = database_url
    if db_url.startswith(SQLITE_PREFIX):
        db_url = db_url[len(SQLITE_PREFIX):]
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


class DatabaseClosedError(StoreError):
    """Raised when the store is used outside the application lifecycle."""


class Database:
    """Handle for the SQLite file backing the user store."""

    def __init__(self, database_url: str) -> None:
        self.path = resolve_database_path(database_url)
        self.is_open = False

    def open(self) -> None:
        """Create the file if needed and apply pending schema versions."""
        Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        self.is_open = True
        self.apply_migrations()
        logger.info("Database ready at %s", self.path)

    def close(self) -> None:
        self.is_open = False
        logger.info("Database at %s closed", self.path)

    def connect(self) -> sqlite3.Connection:
        """Return a new connection with name-keyed rows and FK enforcement."""
        if not self.is_open:
            raise DatabaseClosedError("Database is not open")
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor; commit on success, roll back on error, always close."""
        conn = self.connect()
        try:
            yield conn.cursor()
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def apply_migrations(self) -> None:
        with self.cursor() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    logger.info("Applying schema version %s", version)
                    cursor.executescript(sql)
                    cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                    current_version = version


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the application's store handle."""
    return request.app.state.database
