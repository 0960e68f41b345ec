"""
Scripture storage module.

Provides access to Bible databases (MyBible-style SQLite files) and
discovery of the Bibles available for comparison.
"""
from scripture.base import BibleSource, VerseRow, VerseTable
from scripture.bible_db import BibleDatabase
from scripture.discovery import DirectoryDiscovery, SourceDiscovery, StaticDiscovery

__all__ = [
    'BibleSource',
    'VerseRow',
    'VerseTable',
    'BibleDatabase',
    'DirectoryDiscovery',
    'SourceDiscovery',
    'StaticDiscovery'
]
