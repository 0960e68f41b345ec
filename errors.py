"""
Custom exceptions for verse search, lookup and comparison.

All exceptions must be explicit and provide clear error messages
explaining how to fix the issue.
"""


class VerseLookupError(Exception):
    """Base exception for all verse lookup errors."""
    pass


class DatabaseNotFoundError(VerseLookupError):
    """Raised when a required Bible database is not found."""

    def __init__(self, db_path: str, db_type: str = "bible"):
        message = f"{db_type.capitalize()} database not found: {db_path}"
        message += f"\nFix: Download and place the {db_type} database at {db_path} (or set BIBLE_DB_PATH)"
        super().__init__(message)
        self.db_path = db_path
        self.db_type = db_type


class SourceQueryError(VerseLookupError):
    """Raised when a query against a single Bible source fails."""

    def __init__(self, source: str, reason: str = ""):
        message = f"Query against '{source}' failed"
        if reason:
            message += f": {reason}"
        message += "\nFix: Check that the database uses the verses/books/info layout and is readable"
        super().__init__(message)
        self.source = source
        self.reason = reason


class ReferenceParseError(VerseLookupError):
    """Raised when a verse reference cannot be parsed."""

    def __init__(self, reference: str):
        message = f"Could not parse reference: {reference!r}"
        message += "\nFix: Use the form 'Gen 6:1-6' or 'Gen 6:1-7:2'"
        super().__init__(message)
        self.reference = reference
