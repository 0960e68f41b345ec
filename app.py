"""
Flask backend server for Bible verse search, lookup and comparison.
"""
import logging
from typing import Optional

from flask import Flask, current_app, jsonify, request

import config
from errors import DatabaseNotFoundError, ReferenceParseError, SourceQueryError
from query.compiler import compile_query
from query.highlight import segment
from query.reference import require_reference
from scripture.bible_db import BibleDatabase
from scripture.discovery import DirectoryDiscovery, SourceDiscovery
from services.compare import CompareEngine
from services.lookup import LookupEngine
from services.search import SearchEngine

logger = logging.getLogger(__name__)

EXTENSION_KEY = "verse_lookup"


def create_app(
    bible_db: Optional[BibleDatabase] = None,
    discovery: Optional[SourceDiscovery] = None,
    compare_engine: Optional[CompareEngine] = None
) -> Flask:
    """
    Build the Flask application.

    Args:
        bible_db: Database for search and lookup (opened lazily from
                config.BIBLE_DB_PATH if None)
        discovery: Source discovery for comparisons (defaults to scanning
                config.BIBLE_SOURCES_DIR)
        compare_engine: Engine used for comparisons
    """
    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = {
        "bible_db": bible_db,
        "discovery": discovery or DirectoryDiscovery(),
        "compare_engine": compare_engine or CompareEngine()
    }

    register_routes(app)
    return app


def get_bible_db() -> BibleDatabase:
    """Get the main database, opening it on first use (lazy loading)."""
    state = current_app.extensions[EXTENSION_KEY]
    if state["bible_db"] is None:
        state["bible_db"] = BibleDatabase(config.BIBLE_DB_PATH, check_same_thread=False)
    return state["bible_db"]


def _query_arg(*names: str) -> str:
    for name in names:
        value = request.args.get(name)
        if value is None and request.is_json:
            value = (request.get_json(silent=True) or {}).get(name)
        if value is not None:
            return str(value)
    return ""


def register_routes(app: Flask) -> None:
    """Attach routes and error handlers to the app."""

    @app.route('/status', methods=['GET'])
    def status():
        """Health check and status endpoint."""
        state = current_app.extensions[EXTENSION_KEY]
        bible_db = state["bible_db"]
        return jsonify({
            "status": "ok",
            "database": str(bible_db.db_path if bible_db else config.BIBLE_DB_PATH),
            "database_loaded": bible_db is not None
        })

    @app.route('/search', methods=['GET', 'POST'])
    def search_verses():
        """Advanced search; every result carries highlight spans."""
        query = _query_arg('q', 'query')
        predicate = compile_query(query)
        verses = SearchEngine().search(predicate, get_bible_db())

        results = []
        for verse in verses:
            item = verse.to_dict()
            item["spans"] = [span.to_dict() for span in segment(verse.text, query)]
            results.append(item)

        return jsonify({
            "query": query,
            **predicate.to_dict(),
            "count": len(results),
            "results": results
        })

    @app.route('/lookup', methods=['GET', 'POST'])
    def lookup_verses():
        """Look up a reference such as 'Gen 6:1-6'."""
        reference = _query_arg('ref', 'reference')
        verse_range = require_reference(reference)
        verses = LookupEngine().lookup(verse_range, get_bible_db())
        return jsonify({
            "reference": reference,
            "range": verse_range.to_dict(),
            "count": len(verses),
            "results": [verse.to_dict() for verse in verses]
        })

    @app.route('/compare', methods=['GET', 'POST'])
    def compare_verses():
        """Compare a reference across every discovered Bible."""
        reference = _query_arg('ref', 'reference')
        verse_range = require_reference(reference)
        state = current_app.extensions[EXTENSION_KEY]
        sources = state["discovery"].discover()
        comparisons = state["compare_engine"].compare(verse_range, sources)
        return jsonify({
            "reference": reference,
            "range": verse_range.to_dict(),
            "count": len(comparisons),
            "sources": [comparison.to_dict() for comparison in comparisons]
        })

    @app.errorhandler(ReferenceParseError)
    def handle_bad_reference(e):
        """Handle unparseable references."""
        return jsonify({"error": str(e).splitlines()[0], "reference": e.reference}), 400

    @app.errorhandler(SourceQueryError)
    def handle_source_error(e):
        """Handle failed database queries."""
        logger.error(f"Source query failed: {e}")
        return jsonify({"error": str(e).splitlines()[0], "source": e.source}), 500

    @app.errorhandler(DatabaseNotFoundError)
    def handle_missing_database(e):
        """Handle a missing Bible database."""
        logger.error(f"Bible database unavailable: {e}")
        return jsonify({"error": str(e).splitlines()[0]}), 503

    @app.errorhandler(404)
    def handle_not_found(e):
        """Handle 404 errors."""
        return jsonify({"error": "Endpoint not found"}), 404


app = create_app()


if __name__ == '__main__':
    print(f"Starting Bible Verse Lookup server on {config.HOST}:{config.PORT}")
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
