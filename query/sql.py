"""
Translation of compiled queries into parameterized SQL filters.

Column names refer to the MyBible layout joined as
``verses v JOIN books b ON v.book_number = b.book_number``. User input only
ever travels in ``params``.
"""
from dataclasses import dataclass
from typing import Any, Tuple

import config
from core.models import SearchPredicate, VerseRange

# Always-true clause used when a search has no terms
MATCH_ALL_CLAUSE = "1"

CONTAINS_CLAUSE = "v.text LIKE '%' || ? || '%'"
NOT_CONTAINS_CLAUSE = "v.text NOT LIKE '%' || ? || '%'"

RANGE_CLAUSE = (
    "b.short_name = ? "
    "AND ((v.chapter * {multiplier}) + v.verse) BETWEEN ? AND ?"
)

SEARCH_ORDER = "v.book_number, v.chapter, v.verse"
RANGE_ORDER = "v.chapter, v.verse"


@dataclass(frozen=True)
class SqlFilter:
    """WHERE clause, its bound parameters and the ORDER BY columns."""
    clause: str
    params: Tuple[Any, ...] = ()
    order_by: str = ""


def search_filter(predicate: SearchPredicate) -> SqlFilter:
    """Build the filter for an advanced search."""
    if predicate.is_empty:
        return SqlFilter(MATCH_ALL_CLAUSE, (), SEARCH_ORDER)

    conditions = [
        NOT_CONTAINS_CLAUSE if term.negated else CONTAINS_CLAUSE
        for term in predicate.terms
    ]
    clause = f" {predicate.operator.value} ".join(conditions)
    params = tuple(term.text for term in predicate.terms)
    return SqlFilter(clause, params, SEARCH_ORDER)


def range_filter(verse_range: VerseRange) -> SqlFilter:
    """Build the filter for a reference lookup."""
    clause = RANGE_CLAUSE.format(multiplier=config.VERSE_KEY_MULTIPLIER)
    params = (verse_range.collection_key, verse_range.start_key, verse_range.end_key)
    return SqlFilter(clause, params, RANGE_ORDER)
