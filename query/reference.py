"""
Verse reference parser.

Accepts either "Gen 6:1-6" (end chapter omitted, so the same as the start)
or "Gen 6:1-7:2".
"""
import logging
import re
from typing import Optional

from core.models import VerseRange
from errors import ReferenceParseError

logger = logging.getLogger(__name__)

# Largest value accepted for any chapter or verse field (unsigned 32-bit)
MAX_REFERENCE_NUMBER = 2 ** 32 - 1

REFERENCE_PATTERN = re.compile(
    r"(?P<book>\S+)\s+(?P<start_ch>[0-9]+):(?P<start_v>[0-9]+)"
    r"-(?:(?P<end_ch>[0-9]+):)?(?P<end_v>[0-9]+)"
)


def _to_number(value: str) -> Optional[int]:
    number = int(value)
    if number > MAX_REFERENCE_NUMBER:
        return None
    return number


def parse_reference(query: str) -> Optional[VerseRange]:
    """
    Parse a lookup reference.

    The book token is kept as typed; matching it against the database is
    left to the query layer.

    Returns:
        VerseRange, or None when the input does not match the grammar
    """
    match = REFERENCE_PATTERN.fullmatch(query)
    if not match:
        logger.debug(f"Reference does not match grammar: {query!r}")
        return None

    start_chapter = _to_number(match.group("start_ch"))
    start_verse = _to_number(match.group("start_v"))
    end_verse = _to_number(match.group("end_v"))
    if match.group("end_ch") is not None:
        end_chapter = _to_number(match.group("end_ch"))
    else:
        end_chapter = start_chapter

    if None in (start_chapter, start_verse, end_chapter, end_verse):
        logger.debug(f"Reference number out of range: {query!r}")
        return None

    return VerseRange(
        collection_key=match.group("book"),
        start_chapter=start_chapter,
        start_verse=start_verse,
        end_chapter=end_chapter,
        end_verse=end_verse
    )


def require_reference(query: str) -> VerseRange:
    """Like parse_reference, but raises ReferenceParseError on failure."""
    verse_range = parse_reference(query)
    if verse_range is None:
        raise ReferenceParseError(query)
    return verse_range
