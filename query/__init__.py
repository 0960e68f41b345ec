"""
Query translation and text matching.

Provides the pure, storage-independent pieces of the system:
- compiler: boolean search query -> SearchPredicate
- reference: "Gen 6:1-7:2" -> VerseRange
- highlight: verse text + query -> HighlightSpan list
- sql: SearchPredicate / VerseRange -> parameterized SqlFilter
"""
from query.compiler import compile_query
from query.reference import parse_reference, require_reference
from query.highlight import segment
from query.sql import SqlFilter, search_filter, range_filter

__all__ = [
    'compile_query',
    'parse_reference',
    'require_reference',
    'segment',
    'SqlFilter',
    'search_filter',
    'range_filter'
]
