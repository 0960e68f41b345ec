"""
Side-by-side comparison of one reference across many Bibles.

Every source is queried in its own worker thread and all of them share one
deadline. A source that fails or misses the deadline is logged and left out
of the result; the others are unaffected. A timed-out source has its
running query interrupted so the worker can finish.
"""
import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import List, Optional, Sequence

from core.models import SourceComparison, VerseRange
from query.sql import SqlFilter, range_filter
from scripture.base import BibleSource, rows_to_verses
import config

logger = logging.getLogger(__name__)


class CompareEngine:
    """Runs the same range lookup against every supplied source."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        fallback_label: Optional[str] = None
    ):
        """
        Initialize compare engine.

        Args:
            timeout: Seconds every source has to answer (default: config.COMPARE_TIMEOUT_SECONDS)
            fallback_label: Label for sources without a description
                    (default: config.UNKNOWN_SOURCE_LABEL)
        """
        self.timeout = timeout if timeout is not None else config.COMPARE_TIMEOUT_SECONDS
        self.fallback_label = fallback_label or config.UNKNOWN_SOURCE_LABEL

    def resolve_label(self, source: BibleSource) -> str:
        """Get a source's display label, falling back to the placeholder."""
        if source.label_provider is None:
            return self.fallback_label
        try:
            label = source.label_provider()
        except Exception as e:
            logger.warning(f"Label lookup failed for {source.name}: {e}")
            return self.fallback_label
        return label or self.fallback_label

    def _query_source(self, source: BibleSource, sql_filter: SqlFilter) -> SourceComparison:
        label = self.resolve_label(source)
        rows = source.table.fetch_verses(sql_filter)
        verses = rows_to_verses(rows, source_label=label)
        logger.info(f"Bible '{label}' ({source.name}) returned {len(verses)} verses")
        return SourceComparison(source_label=label, verses=verses)

    def compare(
        self,
        verse_range: VerseRange,
        sources: Sequence[BibleSource]
    ) -> List[SourceComparison]:
        """
        Look up a range in every source.

        Args:
            verse_range: Parsed reference
            sources: Sources in the order results should appear

        Returns:
            One SourceComparison per source that answered, in supplied order
        """
        sources = list(sources)
        if not sources:
            logger.info("Comparison completed with 0 Bibles")
            return []

        sql_filter = range_filter(verse_range)
        results: List[SourceComparison] = []

        # One worker per source, so a hung source never holds up a queued one
        executor = ThreadPoolExecutor(max_workers=len(sources))
        try:
            futures = [
                executor.submit(self._query_source, source, sql_filter)
                for source in sources
            ]
            done, _ = wait(futures, timeout=self.timeout)
            for source, future in zip(sources, futures):
                if future not in done:
                    future.cancel()
                    interrupted = source.interrupt()
                    logger.warning(
                        f"Bible source {source.name} timed out after {self.timeout}s"
                        f"{' (query interrupted)' if interrupted else ''}"
                    )
                    continue
                try:
                    results.append(future.result())
                except Exception as e:
                    logger.warning(f"Bible source {source.name} skipped: {e}")
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        logger.info(f"Comparison completed with {len(results)} Bibles")
        return results


def compare(verse_range: VerseRange, sources: Sequence[BibleSource]) -> List[SourceComparison]:
    """Shortcut for CompareEngine().compare(...)."""
    return CompareEngine().compare(verse_range, sources)
