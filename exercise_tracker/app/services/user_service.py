"""
Business logic for users and their exercise logs.

``UserService`` wraps a :class:`~exercise_tracker.app.core.db.Database`
handle.  A service instance is built per request by the
``get_user_service`` dependency, so nothing here touches module-level
connection state.

All queries use parameterized statements.  Appending an entry is one
``INSERT ... SELECT`` keyed on the owning user, which makes the append
atomic and reports a missing user through the affected row count
instead of a separate read.
"""

import logging
import secrets
import sqlite3
import time
from typing import List, Optional

from fastapi import Depends

from ..core.coercion import fits_int64, is_valid_id, parse_int
from ..core.dates import display_or_today, format_date
from ..core.db import Database, get_database
from ..core.errors import (
    DuplicateKeyError,
    InvalidIdError,
    RequestValidationFailed,
    UserNotFoundError,
)
from ..schemas.exercise import Entry, ExerciseCreate, ExerciseRead, LogRead
from ..schemas.user import User, UserRead
from .log_filter import filter_log

logger = logging.getLogger(__name__)


def new_user_id() -> str:
    """Return a 24 hex digit id: 4 bytes of epoch seconds then 8 random bytes."""
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def normalize_id(user_id: str) -> str:
    if not is_valid_id(user_id):
        raise InvalidIdError(f"'{user_id}' is not a valid user id")
    return user_id.lower()


class UserService:
    """User store: create, list, look up and append entries."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def create_user(self, username: str) -> UserRead:
        """Register ``username`` and return its public fields.

        Raises ``DuplicateKeyError`` when the username is taken.
        """
        user_id = new_user_id()
        try:
            with self.database.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO users (id, username) VALUES (?, ?)",
                    (user_id, username),
                )
        except sqlite3.IntegrityError as exc:
            if "username" in str(exc):
                raise DuplicateKeyError(username) from exc
            raise
        logger.info("Created user %s (%s)", username, user_id)
        return UserRead(username=username, id=user_id)

    async def list_users(self) -> List[UserRead]:
        """Return every user in registration order."""
        with self.database.cursor() as cursor:
            rows = cursor.execute("SELECT id, username FROM users ORDER BY seq").fetchall()
        return [UserRead(username=row["username"], id=row["id"]) for row in rows]

    async def find_user(self, user_id: str) -> User:
        """Load a user together with all of their entries.

        Raises ``InvalidIdError`` for a malformed id and
        ``UserNotFoundError`` when no user has it.
        """
        user_id = normalize_id(user_id)
        with self.database.cursor() as cursor:
            row = cursor.execute(
                "SELECT id, username FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
            if row is None:
                raise UserNotFoundError(user_id)
            entry_rows = cursor.execute(
                "SELECT id, description, duration, date FROM exercises WHERE user_id = ? ORDER BY id",
                (user_id,),
            ).fetchall()
        return User(
            username=row["username"],
            id=row["id"],
            exercises=[self._row_to_entry(entry_row) for entry_row in entry_rows],
        )

    async def append_entry(self, user_id: str, data: ExerciseCreate) -> ExerciseRead:
        """Append an entry to the end of a user's log.

        The duration is coerced to an integer; a missing or unparsable
        date becomes today's date.
        """
        user_id = normalize_id(user_id)
        duration = parse_int(data.duration)
        if duration is None:
            raise RequestValidationFailed(f"duration '{data.duration}' is not a number")
        if not fits_int64(duration):
            raise RequestValidationFailed(f"duration '{data.duration}' is out of range")
        entry_date = display_or_today(data.date)

        with self.database.cursor() as cursor:
            cursor.execute(
                """
                INSERT INTO exercises (user_id, description, duration, date)
                SELECT id, ?, ?, ? FROM users WHERE id = ?
                """,
                (data.description, duration, entry_date, user_id),
            )
            if cursor.rowcount == 0:
                raise UserNotFoundError(user_id)
            row = cursor.execute(
                "SELECT username FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
        logger.info("Appended exercise to user %s", user_id)
        return ExerciseRead(
            username=row["username"],
            description=data.description,
            duration=duration,
            date=entry_date,
            id=user_id,
        )

    async def get_log(
        self,
        user_id: str,
        from_value: Optional[str] = None,
        to_value: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> LogRead:
        """Return a user's log narrowed by the optional bounds and limit.

        Unparsable bounds are ignored, as is a limit that is not a
        positive integer.
        """
        user = await self.find_user(user_id)
        log = filter_log(
            user.exercises,
            from_date=format_date(from_value),
            to_date=format_date(to_value),
            limit=limit,
        )
        return LogRead(username=user.username, count=len(log), id=user.id, log=log)

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> Entry:
        entry = Entry(description=row["description"], duration=row["duration"], date=row["date"])
        entry._id = row["id"]
        return entry


def get_user_service(database: Database = Depends(get_database)) -> UserService:
    """FastAPI dependency building a service around the request's store."""
    return UserService(database)
