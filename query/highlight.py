"""
Highlight segmentation for search results.

Splits verse text into spans that match any search token
(case-insensitive). Tokens are used as regular expressions verbatim, and
negated terms ("NOTword") are never highlighted.

Patterns come straight from user input, so matching runs under the regex
package's timeout; a pattern that is invalid or too slow highlights nothing.
"""
import logging
from typing import List

import regex

import config
from core.models import HighlightSpan
from query.compiler import has_not_prefix, is_operator_keyword, tokenize

logger = logging.getLogger(__name__)


def highlight_tokens(query: str) -> List[str]:
    """Tokens of the query that should be highlighted in results."""
    return [
        token for token in tokenize(query)
        if not is_operator_keyword(token) and not has_not_prefix(token)
    ]


def segment(text: str, query: str) -> List[HighlightSpan]:
    """
    Split text into matching and non-matching spans.

    Args:
        text: Verse text as stored
        query: The original search query

    Returns:
        Ordered spans whose substrings concatenate back to text
    """
    tokens = highlight_tokens(query)
    if not tokens or not text:
        return [HighlightSpan(text, False)]

    try:
        pattern = regex.compile("(" + "|".join(tokens) + ")", regex.IGNORECASE)
        matches = [
            match.span()
            for match in pattern.finditer(
                text, concurrent=True, timeout=config.HIGHLIGHT_TIMEOUT_SECONDS
            )
        ]
    except regex.error as e:
        logger.debug(f"Highlight pattern failed for {query!r}: {e}")
        return [HighlightSpan(text, False)]
    except TimeoutError:
        logger.warning(f"Highlight pattern timed out for {query!r}")
        return [HighlightSpan(text, False)]

    spans: List[HighlightSpan] = []
    last_end = 0
    for start, end in matches:
        if start == end:
            continue  # zero-width match, nothing to highlight
        if start > last_end:
            spans.append(HighlightSpan(text[last_end:start], False))
        spans.append(HighlightSpan(text[start:end], True))
        last_end = end
    if last_end < len(text):
        spans.append(HighlightSpan(text[last_end:], False))
    return spans
