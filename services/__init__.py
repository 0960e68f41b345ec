"""
Service modules for Bible Verse Lookup.

- search: SearchEngine (advanced boolean search on one Bible)
- lookup: LookupEngine (chapter:verse range on one Bible)
- compare: CompareEngine (same range across many Bibles)
"""
from services.search import SearchEngine, search
from services.lookup import LookupEngine, lookup
from services.compare import CompareEngine, compare

__all__ = [
    'SearchEngine',
    'search',
    'LookupEngine',
    'lookup',
    'CompareEngine',
    'compare'
]
