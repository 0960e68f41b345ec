"""
Reader session: the result sets one user currently sees.

A lookup clears the comparison results and a comparison clears the lookup
results, so only one reference view is shown at a time. Results are
replaced on every submission, never merged.
"""
import logging
from typing import List, Optional

from core.models import SearchPredicate, SourceComparison, Verse
from query.compiler import compile_query
from query.reference import parse_reference
from scripture.base import VerseTable
from scripture.discovery import SourceDiscovery
from services.compare import CompareEngine
from services.lookup import LookupEngine
from services.search import SearchEngine

logger = logging.getLogger(__name__)


class ReaderSession:
    """Holds inputs and last results for search, lookup and compare."""

    def __init__(
        self,
        table: VerseTable,
        discovery: Optional[SourceDiscovery] = None,
        compare_engine: Optional[CompareEngine] = None
    ):
        self.table = table
        self.discovery = discovery
        self.search_engine = SearchEngine()
        self.lookup_engine = LookupEngine()
        self.compare_engine = compare_engine or CompareEngine()

        self.search_input: str = ""
        self.search_predicate: Optional[SearchPredicate] = None
        self.search_results: List[Verse] = []
        self.lookup_input: str = ""
        self.lookup_results: List[Verse] = []
        self.compare_results: List[SourceComparison] = []

    def submit_search(self, query: str) -> List[Verse]:
        """
        Run an advanced search and replace the search results.

        Raises:
            SourceQueryError: If the query fails (previous results are cleared)
        """
        self.search_input = query
        self.search_predicate = compile_query(query)
        self.search_results = []
        self.search_results = self.search_engine.search(self.search_predicate, self.table)
        return self.search_results

    def submit_lookup(self, reference: str) -> bool:
        """
        Look up a reference, clearing any comparison.

        Returns:
            False if the reference could not be parsed

        Raises:
            SourceQueryError: If the query fails
        """
        self.lookup_input = reference
        self.compare_results = []
        self.lookup_results = []
        verse_range = parse_reference(reference)
        if verse_range is None:
            logger.info(f"Failed to parse lookup input: {reference}")
            return False
        self.lookup_results = self.lookup_engine.lookup(verse_range, self.table)
        return True

    def submit_compare(self, reference: Optional[str] = None) -> bool:
        """
        Compare a reference across all discovered Bibles, clearing the lookup.

        Args:
            reference: Reference to compare (default: the last lookup input)

        Returns:
            False if the reference could not be parsed
        """
        if reference is not None:
            self.lookup_input = reference
        self.lookup_results = []
        self.compare_results = []
        verse_range = parse_reference(self.lookup_input)
        if verse_range is None:
            logger.info(f"Failed to parse lookup input for compare: {self.lookup_input}")
            return False
        sources = self.discovery.discover() if self.discovery else []
        self.compare_results = self.compare_engine.compare(verse_range, sources)
        return True
