"""Command-line tools for Bible Verse Lookup."""
