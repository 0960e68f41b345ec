"""
Configuration settings for Bible Verse Lookup.

Organized into logical sections:
1. Core Settings (paths, directories)
2. Bible Sources
3. Comparison
4. Server & Logging
"""
import os
from pathlib import Path

# ============================================
# CORE SETTINGS
# ============================================

# Base directory
BASE_DIR = Path(__file__).parent

DATA_DIR = Path(os.getenv("BIBLE_DATA_DIR", str(BASE_DIR / "data")))
LOGS_DIR = BASE_DIR / "logs"

# ============================================
# BIBLE SOURCES
# ============================================

# File extension of MyBible-style databases (compared case-insensitively)
BIBLE_EXTENSION = os.getenv("BIBLE_EXTENSION", ".SQLite3")

# Main Bible database used for search and lookup
_bible_db_path = os.getenv("BIBLE_DB_PATH")
if _bible_db_path:
    BIBLE_DB_PATH = Path(_bible_db_path)
else:
    BIBLE_DB_PATH = DATA_DIR / "KJ1769.SQLite3"  # Default (will raise error when used)

# Directory scanned for Bibles to compare
BIBLE_SOURCES_DIR = Path(os.getenv("BIBLE_SOURCES_DIR", str(DATA_DIR)))

# Register a regexp(pattern, text) SQL function on every connection
REGISTER_REGEXP_FUNCTION = os.getenv("REGISTER_REGEXP_FUNCTION", "true").lower() == "true"

# Time limits for user-supplied regular expressions (regex package timeout)
REGEXP_TIMEOUT_SECONDS = float(os.getenv("REGEXP_TIMEOUT_SECONDS", "0.25"))  # Per SQL row
HIGHLIGHT_TIMEOUT_SECONDS = float(os.getenv("HIGHLIGHT_TIMEOUT_SECONDS", "0.25"))  # Per verse

# Composite ordering key: chapter * VERSE_KEY_MULTIPLIER + verse.
# Assumes no chapter has 1000 or more verses.
VERSE_KEY_MULTIPLIER = 1000

# ============================================
# COMPARISON
# ============================================

# Label used when a source has no description in its info table
UNKNOWN_SOURCE_LABEL = os.getenv("UNKNOWN_SOURCE_LABEL", "Unknown Bible")

# Every source gets its own worker; all share one deadline
COMPARE_TIMEOUT_SECONDS = float(os.getenv("COMPARE_TIMEOUT_SECONDS", "10"))

# ============================================
# SERVER & LOGGING
# ============================================

# Server configuration
HOST = os.getenv("FLASK_HOST", "127.0.0.1")
PORT = int(os.getenv("FLASK_PORT", "5000"))
DEBUG = os.getenv("FLASK_DEBUG", "False").lower() == "true"

# Logging configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_ENABLED = os.getenv("LOG_FILE_ENABLED", "false").lower() == "true"

# ============================================
# INITIALIZATION
# ============================================

if LOG_FILE_ENABLED:
    LOGS_DIR.mkdir(parents=True, exist_ok=True)

# Setup logging
import logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format=LOG_FORMAT,
    handlers=[
        logging.StreamHandler(),
        *([logging.FileHandler(LOGS_DIR / "verse_lookup.log")] if LOG_FILE_ENABLED else [])
    ]
)
