"""
Interfaces shared by all Bible sources.

The search, lookup and compare services only depend on these types, so
they can run against a real SQLite file or an in-memory stand-in.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Tuple

from core.models import Verse
from query.sql import SqlFilter

logger = logging.getLogger(__name__)

# (collection display name, chapter, verse, text)
VerseRow = Tuple[str, int, int, str]


class VerseTable(Protocol):
    """Protocol for a queryable verse table."""

    name: str

    def fetch_verses(self, sql_filter: SqlFilter) -> List[VerseRow]:
        """
        Run a parameterized filter against the verse table.

        Args:
            sql_filter: WHERE clause, bound parameters and ordering

        Returns:
            Rows in the requested order

        Raises:
            SourceQueryError: If the query cannot be executed
        """
        ...


@dataclass
class BibleSource:
    """One discovered Bible: a verse table plus an optional label lookup."""
    table: VerseTable
    label_provider: Optional[Callable[[], Optional[str]]] = None

    @property
    def name(self) -> str:
        return getattr(self.table, "name", repr(self.table))

    def interrupt(self) -> bool:
        """Abort the table's running query if it supports that."""
        interrupt = getattr(self.table, "interrupt", None)
        if interrupt is None:
            return False
        interrupt()
        return True


def rows_to_verses(rows: List[VerseRow], source_label: Optional[str] = None) -> List[Verse]:
    """
    Convert table rows into Verse objects.

    Args:
        rows: Rows from VerseTable.fetch_verses
        source_label: If given, replaces the row's own display name

    Returns:
        Verses in row order; rows with unusable numbering are skipped
    """
    verses: List[Verse] = []
    for row in rows:
        try:
            long_name, chapter, verse, text = row
            verses.append(Verse(
                source_label=source_label if source_label is not None else str(long_name),
                chapter=int(chapter),
                verse=int(verse),
                text="" if text is None else str(text)
            ))
        except (TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed verse row {row!r}: {e}")
    return verses
