"""
Shared test fixtures for Bible Verse Lookup tests.

This module provides sample Bible databases and in-memory verse tables.
"""
from pathlib import Path
import sqlite3
import sys
import threading
from typing import Iterable, List, Optional, Tuple

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from errors import SourceQueryError
from query.sql import SqlFilter
from scripture.bible_db import BibleDatabase


SAMPLE_BOOKS = [
    (10, "Gen", "Genesis"),
    (530, "1Co", "1 Corinthians"),
    (650, "Heb", "Hebrews"),
]

SAMPLE_VERSES = [
    (10, 6, 1, "And it came to pass, when men began to multiply on the face of the earth"),
    (10, 6, 2, "That the sons of God saw the daughters of men that they were fair"),
    (10, 6, 3, "And the LORD said, My spirit shall not always strive with man"),
    (10, 6, 8, "But Noah found grace in the eyes of the LORD."),
    (10, 6, 9, "Noah was a just man and perfect in his generations, and Noah walked with God."),
    (10, 7, 1, "And the LORD said unto Noah, Come thou and all thy house into the ark"),
    (10, 7, 2, "Of every clean beast thou shalt take to thee by sevens"),
    (530, 13, 13, "And now abideth faith, hope, charity, these three; but the greatest of these is charity."),
    (650, 11, 1, "Now faith is the substance of things hoped for, the evidence of things not seen."),
    (650, 11, 7, "By faith Noah, being warned of God of things not seen as yet, prepared an ark"),
]

WEB_VERSES = [
    (10, 6, 1, "When men began to multiply on the surface of the ground"),
    (10, 6, 2, "God's sons saw that men's daughters were beautiful"),
    (10, 6, 3, "Yahweh said, \"My Spirit will not strive with man forever\""),
]


def create_sample_bible(
    path: Path,
    description: Optional[str] = "King James Version (1769)",
    books: Iterable[Tuple[int, str, str]] = SAMPLE_BOOKS,
    verses: Iterable[Tuple[int, int, int, str]] = SAMPLE_VERSES,
    with_info_table: bool = True
) -> Path:
    """Create a MyBible-style SQLite file and return its path."""
    connection = sqlite3.connect(str(path))
    try:
        connection.executescript("""
            CREATE TABLE books (book_number NUMERIC, short_name TEXT, long_name TEXT);
            CREATE TABLE verses (book_number NUMERIC, chapter NUMERIC, verse NUMERIC, text TEXT);
        """)
        connection.executemany("INSERT INTO books VALUES (?, ?, ?)", list(books))
        connection.executemany("INSERT INTO verses VALUES (?, ?, ?, ?)", list(verses))
        if with_info_table:
            connection.execute("CREATE TABLE info (name TEXT, value TEXT)")
            if description is not None:
                connection.execute(
                    "INSERT INTO info VALUES ('description', ?)", (description,)
                )
        connection.commit()
    finally:
        connection.close()
    return path


def create_corrupt_bible(path: Path) -> Path:
    """Create a file with a Bible extension that is not a database."""
    path.write_text("this is not a sqlite database " * 50)
    return path


class InMemoryTable:
    """Verse table returning fixed rows and recording every filter."""

    def __init__(self, rows: List[Tuple[str, int, int, str]], name: str = "memory"):
        self.rows = list(rows)
        self.name = name
        self.filters: List[SqlFilter] = []

    def fetch_verses(self, sql_filter: SqlFilter):
        self.filters.append(sql_filter)
        return list(self.rows)


class FailingTable:
    """Verse table whose queries always fail."""

    def __init__(self, name: str = "broken"):
        self.name = name

    def fetch_verses(self, sql_filter: SqlFilter):
        raise SourceQueryError(self.name, "no such table: verses")


class BlockingTable:
    """Verse table that blocks until released, for timeout tests."""

    def __init__(self, name: str = "slow"):
        self.name = name
        self.release = threading.Event()

    def fetch_verses(self, sql_filter: SqlFilter):
        self.release.wait(timeout=5)
        return []


# Counts a long recursive series; runs for many seconds unless interrupted
RUNAWAY_CLAUSE = (
    "(SELECT count(*) FROM ("
    "WITH RECURSIVE series(x) AS (SELECT 1 UNION ALL SELECT x + 1 FROM series WHERE x < 500000000) "
    "SELECT x FROM series)) > 0"
)


class RunawayDatabase(BibleDatabase):
    """Real SQLite Bible whose verse queries never finish on their own."""

    def fetch_verses(self, sql_filter: SqlFilter):
        return super().fetch_verses(SqlFilter(RUNAWAY_CLAUSE))
