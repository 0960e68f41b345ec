"""
Advanced search over a single Bible.

Example queries: "faith AND hope", "Noah OR ark", "love NOTfear".
"""
import logging
from typing import List, Union

from core.models import SearchPredicate, Verse
from query.compiler import compile_query
from query.sql import search_filter
from scripture.base import VerseTable, rows_to_verses

logger = logging.getLogger(__name__)


class SearchEngine:
    """Runs compiled search predicates against one verse table."""

    def search(self, predicate: Union[SearchPredicate, str], table: VerseTable) -> List[Verse]:
        """
        Find all verses matching a predicate.

        Args:
            predicate: Compiled predicate, or a raw query string to compile
            table: Verse table to query

        Returns:
            Matching verses ordered by book, chapter and verse. An empty
            predicate matches every verse.

        Raises:
            SourceQueryError: If the underlying query fails
        """
        if isinstance(predicate, str):
            logger.info(f"Advanced Search query: {predicate}")
            predicate = compile_query(predicate)
        if predicate.is_empty:
            logger.info("Search has no terms; matching every verse")

        rows = table.fetch_verses(search_filter(predicate))
        verses = rows_to_verses(rows)
        logger.info(f"Advanced Search found {len(verses)} verses")
        return verses


def search(predicate: Union[SearchPredicate, str], table: VerseTable) -> List[Verse]:
    """Shortcut for SearchEngine().search(...)."""
    return SearchEngine().search(predicate, table)
