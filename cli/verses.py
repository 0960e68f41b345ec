#!/usr/bin/env python3
"""
CLI tool for Bible verse search, lookup and comparison.

Usage:
    python -m cli.verses search "faith AND hope"
    python -m cli.verses lookup "Gen 6:1-6"
    python -m cli.verses compare "Gen 6:1-7:2" --sources-dir ./bibles
    python -m cli.verses shell

Features:
    - Boolean search (AND / OR / NOTword) with highlighted matches
    - Range lookup in the main Bible
    - Side-by-side comparison across every Bible in a directory
    - JSON output for scripting
    - Interactive shell keeping the last results
"""
import sys
import argparse
import json
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import config
from core.models import SourceComparison, Verse
from core.session import ReaderSession
from errors import DatabaseNotFoundError, SourceQueryError
from query.compiler import compile_query
from query.highlight import segment
from query.reference import parse_reference
from scripture.bible_db import BibleDatabase
from scripture.discovery import DirectoryDiscovery
from services.compare import CompareEngine
from services.lookup import LookupEngine
from services.search import SearchEngine

console = Console()

HIGHLIGHT_STYLE = "bold red"

SHELL_HELP = """Commands:
  search <query>     Advanced search (e.g. faith AND hope, Noah OR NOTark)
  lookup <reference> Look up a range (e.g. Gen 6:1-6, Gen 6:1-7:2)
  compare [reference] Compare a range across Bibles (default: last lookup)
  help               Show this help
  quit               Exit"""


def print_error(message: str):
    """Print error message."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str):
    """Print warning message."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def highlighted_text(text: str, query: str) -> Text:
    """Verse text with search matches styled."""
    rendered = Text()
    for span in segment(text, query):
        rendered.append(span.substring, style=HIGHLIGHT_STYLE if span.is_match else None)
    return rendered


def render_search(verses: List[Verse], query: str):
    """Print search results with highlighted matches."""
    if not verses:
        console.print("No advanced search results found")
        return
    console.print(f"Advanced Search Results ({len(verses)} verses)")
    for verse in verses:
        console.print(Text(verse.reference, style="bold"))
        console.print(highlighted_text(verse.text, query))


def render_lookup(verses: List[Verse]):
    """Print lookup results."""
    if not verses:
        console.print("No lookup results found")
        return
    console.print(f"Lookup Results ({len(verses)} verses)")
    for verse in verses:
        console.print(Text(verse.reference, style="bold"))
        console.print(verse.text, markup=False)


def render_compare(comparisons: List[SourceComparison]):
    """Print one panel per Bible."""
    console.print(f"Comparison Results ({len(comparisons)} Bibles)")
    if not comparisons:
        console.print("No comparison results found")
        return
    for comparison in comparisons:
        table = Table(show_header=False, box=None)
        table.add_column("Ref", style="cyan", no_wrap=True)
        table.add_column("Text")
        for verse in comparison.verses:
            table.add_row(f"{verse.chapter}:{verse.verse}", Text(verse.text))
        console.print(Panel(
            table,
            title=f"Bible: {comparison.source_label} ({len(comparison.verses)} verses)",
            title_align="left"
        ))


def run_search(args) -> int:
    """Run the search subcommand."""
    predicate = compile_query(args.query)
    with BibleDatabase(args.db) as bible_db:
        verses = SearchEngine().search(predicate, bible_db)
    if args.json:
        print(json.dumps({
            **predicate.to_dict(),
            "results": [
                {**verse.to_dict(), "spans": [s.to_dict() for s in segment(verse.text, args.query)]}
                for verse in verses
            ]
        }, ensure_ascii=False, indent=2))
    else:
        render_search(verses, args.query)
    return 0


def run_lookup(args) -> int:
    """Run the lookup subcommand."""
    verse_range = parse_reference(args.reference)
    if verse_range is None:
        print_error(f"Failed to parse lookup input: {args.reference}")
        return 1
    with BibleDatabase(args.db) as bible_db:
        verses = LookupEngine().lookup(verse_range, bible_db)
    if args.json:
        print(json.dumps([verse.to_dict() for verse in verses], ensure_ascii=False, indent=2))
    else:
        render_lookup(verses)
    return 0


def run_compare(args) -> int:
    """Run the compare subcommand."""
    verse_range = parse_reference(args.reference)
    if verse_range is None:
        print_error(f"Failed to parse lookup input for compare: {args.reference}")
        return 1
    discovery = DirectoryDiscovery(args.sources_dir)
    try:
        sources = discovery.discover()
        comparisons = CompareEngine(timeout=args.timeout).compare(verse_range, sources)
    finally:
        discovery.close()
    if args.json:
        print(json.dumps([c.to_dict() for c in comparisons], ensure_ascii=False, indent=2))
    else:
        render_compare(comparisons)
    return 0


def handle_shell_command(session: ReaderSession, line: str) -> bool:
    """
    Execute one shell command.

    Returns:
        False when the shell should exit
    """
    command, _, argument = line.strip().partition(" ")
    command = command.lower()
    argument = argument.strip()

    if command in ("quit", "exit"):
        return False
    if command == "search":
        try:
            render_search(session.submit_search(argument), argument)
        except SourceQueryError as e:
            print_error(str(e))
    elif command == "lookup":
        try:
            if session.submit_lookup(argument):
                render_lookup(session.lookup_results)
            else:
                print_warning(f"Failed to parse lookup input: {argument}")
        except SourceQueryError as e:
            print_error(str(e))
    elif command == "compare":
        if session.submit_compare(argument or None):
            render_compare(session.compare_results)
        else:
            print_warning(f"Failed to parse lookup input for compare: {session.lookup_input}")
    elif command in ("help", "?"):
        console.print(SHELL_HELP, markup=False)
    elif command:
        print_warning(f"Unknown command: {command} (type 'help')")
    return True


def run_shell(args) -> int:
    """Interactive search / lookup / compare loop."""
    discovery = DirectoryDiscovery(args.sources_dir)
    with BibleDatabase(args.db) as bible_db:
        session = ReaderSession(bible_db, discovery, CompareEngine(timeout=args.timeout))
        console.print("Bible Verse Lookup - Search, Lookup & Compare")
        console.print(SHELL_HELP, markup=False)
        try:
            while True:
                try:
                    line = console.input("[bold cyan]> [/bold cyan]")
                except EOFError:
                    break
                if not handle_shell_command(session, line):
                    break
        finally:
            discovery.close()
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Bible Verse Lookup - Search, Lookup & Compare",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s search "faith AND hope"          # Verses containing both words
  %(prog)s search "Noah OR ark"             # Verses containing either word
  %(prog)s search "love NOTfear"            # 'love' but not 'fear'
  %(prog)s lookup "Gen 6:1-6"               # Range in one chapter
  %(prog)s compare "Gen 6:1-7:2"            # Range across every Bible
        """
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help=f"Main Bible database (default: {config.BIBLE_DB_PATH})"
    )
    parser.add_argument(
        "--sources-dir",
        type=Path,
        default=None,
        help=f"Directory of Bibles to compare (default: {config.BIBLE_SOURCES_DIR})"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help=f"Per-Bible compare timeout in seconds (default: {config.COMPARE_TIMEOUT_SECONDS})"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Advanced boolean search")
    search_parser.add_argument("query", help="Search query, e.g. 'faith AND hope'")
    search_parser.set_defaults(handler=run_search)

    lookup_parser = subparsers.add_parser("lookup", help="Look up a reference")
    lookup_parser.add_argument("reference", help="Reference, e.g. 'Gen 6:1-6'")
    lookup_parser.set_defaults(handler=run_lookup)

    compare_parser = subparsers.add_parser("compare", help="Compare a reference across Bibles")
    compare_parser.add_argument("reference", help="Reference, e.g. 'Gen 6:1-7:2'")
    compare_parser.set_defaults(handler=run_compare)

    shell_parser = subparsers.add_parser("shell", help="Interactive mode")
    shell_parser.set_defaults(handler=run_shell)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except DatabaseNotFoundError as e:
        print_error(str(e))
        return 1
    except SourceQueryError as e:
        print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
