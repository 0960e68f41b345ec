"""
Test suite for Bible Verse Lookup.

Test Structure:
--------------
- test_query_compiler.py : Boolean search query compilation
- test_reference_parser.py : Verse reference parsing
- test_highlight.py     : Highlight segmentation
- test_sql.py           : SQL filter translation
- test_bible_db.py      : SQLite connector and source discovery
- test_services.py      : Search, lookup and compare engines
- test_session.py       : Reader session result handling
- test_api.py           : Flask endpoints
- test_cli.py           : Command-line interface
- fixtures/             : Sample Bible databases and fake tables

Running Tests:
-------------
    python -m pytest tests/ -v
"""

from tests.fixtures import (
    create_sample_bible,
    create_corrupt_bible,
    InMemoryTable,
    FailingTable,
    BlockingTable,
    RunawayDatabase
)

__all__ = [
    'create_sample_bible',
    'create_corrupt_bible',
    'InMemoryTable',
    'FailingTable',
    'BlockingTable',
    'RunawayDatabase'
]
