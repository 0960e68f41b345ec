"""
MyBible-style SQLite Bible Database Connector.

Provides access to a Bible stored as SQLite tables:
- verses (book_number, chapter, verse, text)
- books (book_number, short_name, long_name)
- info (name, value), where name = 'description' holds the Bible's title
"""
import logging
import sqlite3
import threading
from pathlib import Path
from typing import List, Optional

import regex

from errors import DatabaseNotFoundError, SourceQueryError
from query.sql import SqlFilter
from scripture.base import VerseRow
import config

logger = logging.getLogger(__name__)

VERSE_SELECT = """
    SELECT b.long_name, v.chapter, v.verse, v.text
    FROM verses v
    JOIN books b ON v.book_number = b.book_number
    WHERE {clause}
"""

DESCRIPTION_QUERY = "SELECT value FROM info WHERE name = 'description'"


def regexp(pattern: str, text: Optional[str]) -> int:
    """
    SQL function backing ``text REGEXP pattern``.

    Raises regex.error or TimeoutError, which SQLite reports as a failed
    statement.
    """
    if text is None:
        return 0
    match = regex.search(pattern, text, concurrent=True, timeout=config.REGEXP_TIMEOUT_SECONDS)
    return int(match is not None)


class BibleDatabase:
    """
    Connector for one Bible SQLite database.

    Implements the VerseTable protocol: every query goes through
    fetch_verses() with bound parameters.
    """

    def __init__(self, db_path: Optional[Path] = None, check_same_thread: bool = True):
        """
        Initialize Bible database connector.

        Args:
            db_path: Path to the SQLite database file.
                    Defaults to config.BIBLE_DB_PATH
            check_same_thread: Passed to sqlite3.connect; disable when the
                    connection is handed to a worker thread

        Raises:
            DatabaseNotFoundError: If database file does not exist
        """
        self.db_path = Path(db_path or config.BIBLE_DB_PATH)
        if not self.db_path.exists():
            raise DatabaseNotFoundError(str(self.db_path))

        logger.info(f"Initializing Bible database connector: {self.db_path}")
        self.check_same_thread = check_same_thread
        self._connection: Optional[sqlite3.Connection] = None
        # Held while a statement runs so close() waits for it to unwind
        self._lock = threading.Lock()
        self._ensure_connection()

    @property
    def name(self) -> str:
        return self.db_path.name

    def _ensure_connection(self) -> None:
        """Ensure database connection is open."""
        if self._connection is None:
            try:
                self._connection = sqlite3.connect(
                    str(self.db_path),
                    check_same_thread=self.check_same_thread
                )
                if config.REGISTER_REGEXP_FUNCTION:
                    self._connection.create_function("regexp", 2, regexp, deterministic=True)
                logger.debug(f"Bible database connection established: {self.name}")
            except sqlite3.Error as e:
                logger.error(f"Failed to connect to Bible database {self.db_path}: {e}")
                raise DatabaseNotFoundError(str(self.db_path)) from e

    def interrupt(self) -> None:
        """
        Abort the statement currently running on this connection.

        Safe to call from another thread; the interrupted query raises
        SourceQueryError in its own thread.
        """
        connection = self._connection
        if connection is not None:
            connection.interrupt()
            logger.debug(f"Interrupted running query on {self.name}")

    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            if self._connection:
                self._connection.close()
                self._connection = None
                logger.debug(f"Bible database connection closed: {self.name}")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def describe(self) -> Optional[str]:
        """
        Get the Bible's description from the info table.

        Returns:
            Description text, or None if the info table has none

        Raises:
            SourceQueryError: If the info table cannot be read
        """
        with self._lock:
            self._ensure_connection()
            try:
                row = self._connection.execute(DESCRIPTION_QUERY).fetchone()
            except sqlite3.Error as e:
                raise SourceQueryError(self.name, f"reading description: {e}") from e
        if row is None or row[0] is None:
            return None
        return str(row[0])

    def fetch_verses(self, sql_filter: SqlFilter) -> List[VerseRow]:
        """
        Run a verse query joined to the books table.

        Args:
            sql_filter: WHERE clause, bound parameters and ordering

        Returns:
            List of (long_name, chapter, verse, text) rows

        Raises:
            SourceQueryError: If the statement fails
        """
        sql = VERSE_SELECT.format(clause=sql_filter.clause)
        if sql_filter.order_by:
            sql += f"    ORDER BY {sql_filter.order_by}\n"
        logger.debug(f"[{self.name}] SQL: {sql.strip()}")
        logger.debug(f"[{self.name}] Parameters: {list(sql_filter.params)}")

        with self._lock:
            self._ensure_connection()
            try:
                cursor = self._connection.execute(sql, sql_filter.params)
                rows = [tuple(row) for row in cursor.fetchall()]
            except sqlite3.Error as e:
                logger.error(f"Database error querying {self.name}: {e}")
                raise SourceQueryError(self.name, str(e)) from e

        logger.debug(f"[{self.name}] Returned {len(rows)} rows")
        return rows
