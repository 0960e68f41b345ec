"""
Reference lookup over a single Bible.
"""
import logging
from typing import List

from core.models import Verse, VerseRange
from query.sql import range_filter
from scripture.base import VerseTable, rows_to_verses

logger = logging.getLogger(__name__)


class LookupEngine:
    """Fetches a chapter:verse range from one verse table."""

    def lookup(self, verse_range: VerseRange, table: VerseTable) -> List[Verse]:
        """
        Get the verses of a range, in chapter/verse order.

        Args:
            verse_range: Parsed reference
            table: Verse table to query

        Returns:
            Verses in the range; empty when nothing matches, including
            when the range is inverted

        Raises:
            SourceQueryError: If the underlying query fails
        """
        logger.info(
            f"Lookup: [book: {verse_range.collection_key}, "
            f"start: {verse_range.start_chapter}:{verse_range.start_verse}, "
            f"end: {verse_range.end_chapter}:{verse_range.end_verse}]"
        )
        if verse_range.is_inverted:
            logger.debug("Lookup range is inverted; no verses can match")

        rows = table.fetch_verses(range_filter(verse_range))
        verses = rows_to_verses(rows)
        logger.info(f"Lookup found {len(verses)} verses")
        return verses


def lookup(verse_range: VerseRange, table: VerseTable) -> List[Verse]:
    """Shortcut for LookupEngine().lookup(...)."""
    return LookupEngine().lookup(verse_range, table)
