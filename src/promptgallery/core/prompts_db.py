"""SQLite database holding gallery prompts and admin credentials."""

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

from .errors import StoreError
from .models import Admin, Prompt

logger = logging.getLogger(__name__)

_PROMPT_COLUMNS = "id, category, image_url, prompt_text, created_at"

# SQLite INTEGER is a signed 64-bit value; no row can have an id outside it.
_SQLITE_INT_MIN = -(2**63)
_SQLITE_INT_MAX = 2**63 - 1


def _is_storable_id(prompt_id: int) -> bool:
    return _SQLITE_INT_MIN <= prompt_id <= _SQLITE_INT_MAX


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _row_to_prompt(row: sqlite3.Row) -> Prompt:
    return Prompt(
        id=row["id"],
        category=row["category"],
        image_url=row["image_url"],
        prompt_text=row["prompt_text"],
        created_at=row["created_at"],
    )


class PromptsDB:
    """Manage the prompts and admins tables using SQLite.

    Each operation opens a short-lived connection, so an instance can be
    shared freely between request threads.  Every ``sqlite3.Error`` is logged
    and re-raised as :class:`StoreError`.
    """

    def __init__(self, db_path: Path):
        """Initialize the database, creating the schema if needed.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._initialize_db()
        logger.info(f"Initialized prompts database at {self.db_path}")

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection that commits on success and always closes."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _initialize_db(self) -> None:
        """Create database schema if it doesn't exist."""
        try:
            with self._connect() as conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS prompts (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        category TEXT NOT NULL,
                        image_url TEXT NOT NULL,
                        prompt_text TEXT NOT NULL,
                        created_at TIMESTAMP NOT NULL
                    )
                    """)

                # Listing is always newest first, optionally by category
                conn.execute("""
                    CREATE INDEX IF NOT EXISTS idx_prompts_category_created
                    ON prompts(category, created_at DESC)
                    """)

                conn.execute("""
                    CREATE TABLE IF NOT EXISTS admins (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        username TEXT UNIQUE NOT NULL,
                        password_hash TEXT NOT NULL,
                        created_at TIMESTAMP NOT NULL
                    )
                    """)
        except sqlite3.Error as e:
            logger.error(f"Error initializing database {self.db_path}: {e}")
            raise StoreError("Database error") from e

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------

    def list_prompts(self, category: str | None = None) -> list[Prompt]:
        """Get prompts, newest first.

        Args:
            category: If given, only prompts whose category equals it exactly

        Returns:
            List of prompts sorted by creation time (newest first)
        """
        query = f"SELECT {_PROMPT_COLUMNS} FROM prompts"
        params: tuple = ()
        if category is not None:
            query += " WHERE category = ?"
            params = (category,)
        # id breaks ties between rows created within the same clock tick
        query += " ORDER BY created_at DESC, id DESC"

        try:
            with self._connect() as conn:
                rows = conn.execute(query, params).fetchall()
                return [_row_to_prompt(row) for row in rows]

        except sqlite3.Error as e:
            logger.error(f"Error listing prompts (category={category!r}): {e}")
            raise StoreError("Database error") from e

    def get_prompt(self, prompt_id: int) -> Prompt | None:
        """Fetch a single prompt by id, or ``None`` if absent."""
        if not _is_storable_id(prompt_id):
            return None

        try:
            with self._connect() as conn:
                row = conn.execute(
                    f"SELECT {_PROMPT_COLUMNS} FROM prompts WHERE id = ?",
                    (prompt_id,),
                ).fetchone()
                return _row_to_prompt(row) if row else None

        except sqlite3.Error as e:
            logger.error(f"Error fetching prompt {prompt_id}: {e}")
            raise StoreError("Database error") from e

    def count_prompts(self) -> int:
        """Get total count of prompts."""
        try:
            with self._connect() as conn:
                result = conn.execute("SELECT COUNT(*) FROM prompts").fetchone()
                return result[0] if result else 0

        except sqlite3.Error as e:
            logger.error(f"Error counting prompts: {e}")
            raise StoreError("Database error") from e

    def distinct_categories(self) -> list[str]:
        """Get the distinct category values present, in ascending order."""
        try:
            with self._connect() as conn:
                rows = conn.execute(
                    "SELECT DISTINCT category FROM prompts ORDER BY category"
                ).fetchall()
                return [row[0] for row in rows]

        except sqlite3.Error as e:
            logger.error(f"Error listing categories: {e}")
            raise StoreError("Database error") from e

    def insert_prompt(self, category: str, image_url: str, prompt_text: str) -> Prompt:
        """Insert a prompt and return the persisted row.

        The insert and the follow-up fetch run on separate connections; a
        concurrent delete of the new row in between surfaces as a StoreError.
        """
        try:
            with self._connect() as conn:
                cursor = conn.execute(
                    """
                    INSERT INTO prompts (category, image_url, prompt_text, created_at)
                    VALUES (?, ?, ?, ?)
                    """,
                    (category, image_url, prompt_text, _utc_now()),
                )
                prompt_id = cursor.lastrowid

        except sqlite3.Error as e:
            logger.error(f"Error inserting prompt: {e}")
            raise StoreError("Database error") from e

        prompt = self.get_prompt(prompt_id)
        if prompt is None:
            raise StoreError(f"Prompt {prompt_id} vanished after insert")
        return prompt

    def update_prompt(
        self, prompt_id: int, category: str, image_url: str, prompt_text: str
    ) -> Prompt | None:
        """Overwrite the mutable fields of a prompt.

        Returns:
            The updated prompt, or ``None`` if no prompt has that id
        """
        if not _is_storable_id(prompt_id):
            return None

        try:
            with self._connect() as conn:
                cursor = conn.execute(
                    """
                    UPDATE prompts SET category = ?, image_url = ?, prompt_text = ?
                    WHERE id = ?
                    """,
                    (category, image_url, prompt_text, prompt_id),
                )
                if cursor.rowcount == 0:
                    return None

        except sqlite3.Error as e:
            logger.error(f"Error updating prompt {prompt_id}: {e}")
            raise StoreError("Database error") from e

        return self.get_prompt(prompt_id)

    def delete_prompt(self, prompt_id: int) -> bool:
        """Delete a prompt permanently.

        Returns:
            True if a row was deleted, False if no prompt has that id
        """
        if not _is_storable_id(prompt_id):
            return False

        try:
            with self._connect() as conn:
                cursor = conn.execute("DELETE FROM prompts WHERE id = ?", (prompt_id,))
                return cursor.rowcount > 0

        except sqlite3.Error as e:
            logger.error(f"Error deleting prompt {prompt_id}: {e}")
            raise StoreError("Database error") from e

    def seed_sample_prompts(self, samples: list[dict]) -> int:
        """Insert sample prompts, but only into an empty table.

        Args:
            samples: Dicts with ``category``, ``image_url`` and ``prompt_text``

        Returns:
            Number of prompts inserted (0 if the table already had rows)
        """
        try:
            with self._connect() as conn:
                (existing,) = conn.execute("SELECT COUNT(*) FROM prompts").fetchone()
                if existing:
                    return 0

                conn.executemany(
                    """
                    INSERT INTO prompts (category, image_url, prompt_text, created_at)
                    VALUES (?, ?, ?, ?)
                    """,
                    [
                        (s["category"], s["image_url"], s["prompt_text"], _utc_now())
                        for s in samples
                    ],
                )
                return len(samples)

        except sqlite3.Error as e:
            logger.error(f"Error seeding sample prompts: {e}")
            raise StoreError("Database error") from e

    # ------------------------------------------------------------------
    # Admins
    # ------------------------------------------------------------------

    def get_admin_by_username(self, username: str) -> Admin | None:
        """Look up an admin row by username."""
        try:
            with self._connect() as conn:
                row = conn.execute(
                    """
                    SELECT id, username, password_hash, created_at
                    FROM admins WHERE username = ?
                    """,
                    (username,),
                ).fetchone()
                if row is None:
                    return None
                return Admin(
                    id=row["id"],
                    username=row["username"],
                    password_hash=row["password_hash"],
                    created_at=row["created_at"],
                )

        except sqlite3.Error as e:
            logger.error(f"Error fetching admin {username!r}: {e}")
            raise StoreError("Database error") from e

    def ensure_admin(self, username: str, password_hash: str) -> bool:
        """Create an admin unless one with this username already exists.

        Returns:
            True if the admin was created, False if it already existed
        """
        try:
            with self._connect() as conn:
                # The UNIQUE constraint on username makes this a no-op for an
                # existing admin; the stored hash is never overwritten.
                cursor = conn.execute(
                    """
                    INSERT OR IGNORE INTO admins (username, password_hash, created_at)
                    VALUES (?, ?, ?)
                    """,
                    (username, password_hash, _utc_now()),
                )
                return cursor.rowcount > 0

        except sqlite3.Error as e:
            logger.error(f"Error creating admin {username!r}: {e}")
            raise StoreError("Database error") from e
