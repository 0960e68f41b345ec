"""
Boolean search query compiler.

Turns free text such as "faith AND hope" or "Noah OR NOTark" into a
SearchPredicate. Only a flat list of terms joined by a single operator is
supported; there is no nesting or parenthesization.
"""
import logging
from typing import List

from core.models import Operator, SearchPredicate, SearchTerm

logger = logging.getLogger(__name__)

NOT_PREFIX = "NOT"
OPERATOR_KEYWORDS = {"AND", "OR"}


def tokenize(query: str) -> List[str]:
    """Split a query on whitespace."""
    return query.split()


def is_operator_keyword(token: str) -> bool:
    """True for 'AND' / 'OR' in any case."""
    return token.upper() in OPERATOR_KEYWORDS


def has_not_prefix(token: str) -> bool:
    """True when the token starts with 'NOT' in any case."""
    return token[:len(NOT_PREFIX)].upper() == NOT_PREFIX


def detect_operator(tokens: List[str]) -> Operator:
    """
    Pick the operator joining all terms.

    An 'AND' keyword anywhere wins and stops the scan, so a query mixing
    'AND' and 'OR' is always an AND query. Without any keyword the
    default is AND.
    """
    operator = Operator.AND
    for token in tokens:
        upper = token.upper()
        if upper == "AND":
            return Operator.AND
        if upper == "OR":
            operator = Operator.OR
    return operator


def compile_query(query: str) -> SearchPredicate:
    """
    Compile a search query into a predicate.

    Args:
        query: Raw user input

    Returns:
        SearchPredicate; its term list may be empty, which matches everything
    """
    tokens = tokenize(query)
    operator = detect_operator(tokens)

    terms: List[SearchTerm] = []
    for token in tokens:
        if is_operator_keyword(token):
            continue
        if has_not_prefix(token) and len(token) > len(NOT_PREFIX):
            term = token[len(NOT_PREFIX):].strip()
            if term:
                terms.append(SearchTerm(term, negated=True))
            else:
                logger.debug(f"Dropping empty negated token: {token!r}")
        else:
            terms.append(SearchTerm(token))

    predicate = SearchPredicate(operator=operator, terms=tuple(terms))
    logger.debug(f"Compiled {query!r} -> {predicate}")
    return predicate
