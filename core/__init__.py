"""
Core modules for Bible Verse Lookup.

Contains:
- models: Data models (Verse, SearchPredicate, VerseRange, HighlightSpan, ...)
- session: Per-user result state for interactive front ends
"""

# Import only models here; session pulls in services.
# Users should import directly: from core.session import ReaderSession
from . import models

__all__ = ['models']
