"""
User stores.

``UserStore`` defines the operations the API needs: list, create, get,
update and delete.  Two implementations exist:

* ``InMemoryUserStore`` keeps records in an ordered list owned by the
  store instance.  Identifiers are sequential integers that are never
  reused, even after deletion.
* ``SQLiteUserStore`` persists records in the ``users`` table of a
  SQLite database.  Identifiers are UUID4 strings and the database
  maintains ``created_at``/``updated_at``.

Both stores merge only the fields sent in an update and never change
a record's identifier.  Deleting an unknown identifier is a no‑op in
both.  Use ``build_user_store`` to pick one from the settings.
"""

from __future__ import annotations

import logging
import sqlite3
import uuid
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from pydantic import BaseModel

from users_api.app.core.config import Settings
from users_api.app.core.db import get_connection, get_database_path, init_db
from users_api.app.core.exceptions import UserNotFoundError
from users_api.app.schemas.user import StoredUserRead, UserCreate, UserRead, UserUpdate


logger = logging.getLogger(__name__)


class UserStore(ABC):
    """Abstract user store.

    ``identifier_type`` and ``read_schema`` tell the API layer how to
    type path parameters and responses for this store.
    """

    identifier_type: type = int
    read_schema: type[BaseModel] = UserRead

    @abstractmethod
    async def list_users(self) -> List[Any]:
        """Return every stored user."""

    @abstractmethod
    async def create_user(self, data: UserCreate) -> Any:
        """Store a new user and return it with its assigned identifier."""

    @abstractmethod
    async def get_user(self, user_id: Any) -> Optional[Any]:
        """Return the user with ``user_id`` or ``None``."""

    @abstractmethod
    async def update_user(self, user_id: Any, data: UserUpdate) -> Any:
        """Apply the fields set on ``data`` to a user.

        Raises ``UserNotFoundError`` if there is no such user.
        """

    @abstractmethod
    async def delete_user(self, user_id: Any) -> None:
        """Remove a user.  Unknown identifiers are ignored."""

    def startup(self) -> None:
        """Prepare backing resources before the first request."""


class InMemoryUserStore(UserStore):
    """Keeps users in a list, in creation order.

    Not synchronised: operations contain no ``await`` points, so they
    run to completion on a single event loop.
    """

    identifier_type = int
    read_schema = UserRead

    def __init__(self) -> None:
        self._users: List[UserRead] = []
        self._created = 0

    async def list_users(self) -> List[UserRead]:
        return [user.model_copy() for user in self._users]

    async def create_user(self, data: UserCreate) -> UserRead:
        self._created += 1
        user = UserRead(id=self._created, **data.model_dump())
        self._users.append(user)
        logger.info("Created user %s", user.id)
        return user.model_copy()

    async def get_user(self, user_id: int) -> Optional[UserRead]:
        index = self._find(user_id)
        if index is None:
            return None
        return self._users[index].model_copy()

    async def update_user(self, user_id: int, data: UserUpdate) -> UserRead:
        index = self._find(user_id)
        if index is None:
            logger.warning("Update of unknown user %s", user_id)
            raise UserNotFoundError(user_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        self._users[index] = self._users[index].model_copy(update=changes)
        logger.info("Updated user %s: %s", user_id, sorted(changes))
        return self._users[index].model_copy()

    async def delete_user(self, user_id: int) -> None:
        index = self._find(user_id)
        if index is not None:
            del self._users[index]
            logger.info("Deleted user %s", user_id)

    def _find(self, user_id: int) -> Optional[int]:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None


class SQLiteUserStore(UserStore):
    """Persists users in a SQLite database.

    A connection is opened per operation and closed afterwards.  Errors
    raised by ``sqlite3`` are not caught.
    """

    identifier_type = str
    read_schema = StoredUserRead

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def startup(self) -> None:
        init_db(self.db_path)

    async def list_users(self) -> List[StoredUserRead]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute("SELECT * FROM users ORDER BY rowid").fetchall()
            return [self._row_to_user(row) for row in rows]
        finally:
            conn.close()

    async def create_user(self, data: UserCreate) -> StoredUserRead:
        user_id = str(uuid.uuid4())
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO users (id, name, email) VALUES (?, ?, ?)",
                (user_id, data.name, data.email),
            )
            conn.commit()
            logger.info("Created user %s", user_id)
            row = cursor.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
            return self._row_to_user(row)
        finally:
            conn.close()

    async def get_user(self, user_id: str) -> Optional[StoredUserRead]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
            if not row:
                return None
            return self._row_to_user(row)
        finally:
            conn.close()

    async def update_user(self, user_id: str, data: UserUpdate) -> StoredUserRead:
        """Update the columns present in ``data`` and bump ``updated_at``."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            row = cursor.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
            if not row:
                logger.warning("Update of unknown user %s", user_id)
                raise UserNotFoundError(user_id)
            current = dict(row)
            changes = data.model_dump(exclude_unset=True, exclude_none=True)
            new_name = changes.get("name", current["name"])
            new_email = changes.get("email", current["email"])
            cursor.execute(
                """
                UPDATE users
                SET name = ?, email = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (new_name, new_email, user_id),
            )
            conn.commit()
            logger.info("Updated user %s: %s", user_id, sorted(changes))
            row = cursor.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
            return self._row_to_user(row)
        finally:
            conn.close()

    async def delete_user(self, user_id: str) -> None:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM users WHERE id = ?", (user_id,))
            affected = cursor.rowcount
            conn.commit()
            if affected:
                logger.info("Deleted user %s", user_id)
        finally:
            conn.close()

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> StoredUserRead:
        return StoredUserRead(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )


def build_user_store(settings: Settings) -> UserStore:
    """Create the store selected by ``settings.user_store``."""
    kind = settings.user_store.lower()
    if kind == "memory":
        return InMemoryUserStore()
    if kind == "sqlite":
        return SQLiteUserStore(get_database_path(settings.database_url))
    raise ValueError(f"Unknown user store {settings.user_store!r}; expected 'memory' or 'sqlite'")
