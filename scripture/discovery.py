"""
Discovery of Bible databases available for comparison.

DirectoryDiscovery scans a folder for MyBible-style files; StaticDiscovery
serves a fixed list. Both return BibleSource entries in a stable order for
a given listing, but directory listing order itself is filesystem-defined.
"""
import logging
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from errors import DatabaseNotFoundError
from scripture.base import BibleSource
from scripture.bible_db import BibleDatabase
import config

logger = logging.getLogger(__name__)


class SourceDiscovery(Protocol):
    """Protocol for anything that can enumerate Bible sources."""

    def discover(self) -> List[BibleSource]:
        ...


class StaticDiscovery:
    """Discovery over an already-built list of sources."""

    def __init__(self, sources: Sequence[BibleSource]):
        self._sources = list(sources)

    def discover(self) -> List[BibleSource]:
        return list(self._sources)


class DirectoryDiscovery:
    """
    Finds every file in a directory whose extension matches
    config.BIBLE_EXTENSION (case-insensitive) and opens it.

    Files that cannot be opened are logged and skipped.
    """

    def __init__(self, directory: Optional[Path] = None, extension: Optional[str] = None):
        self.directory = Path(directory or config.BIBLE_SOURCES_DIR)
        self.extension = (extension or config.BIBLE_EXTENSION).lower()
        if not self.extension.startswith("."):
            self.extension = "." + self.extension
        self._opened: List[BibleDatabase] = []

    def candidate_paths(self) -> List[Path]:
        """Matching files, in directory listing order."""
        if not self.directory.is_dir():
            logger.warning(f"Bible sources directory not found: {self.directory}")
            return []
        return [
            path for path in self.directory.iterdir()
            if path.is_file() and path.suffix.lower() == self.extension
        ]

    def discover(self) -> List[BibleSource]:
        """
        Open every matching database.

        Returns:
            One BibleSource per database that could be opened
        """
        self.close()
        sources: List[BibleSource] = []
        for path in self.candidate_paths():
            try:
                database = BibleDatabase(path, check_same_thread=False)
            except DatabaseNotFoundError as e:
                logger.warning(f"Skipping Bible source {path.name}: {e}")
                continue
            self._opened.append(database)
            sources.append(BibleSource(table=database, label_provider=database.describe))
        logger.info(f"Discovered {len(sources)} Bible sources in {self.directory}")
        return sources

    def close(self) -> None:
        """Close every database opened by the last discover() call."""
        for database in self._opened:
            database.close()
        self._opened = []
