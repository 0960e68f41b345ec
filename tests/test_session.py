"""
Tests for the reader session (result-set replacement and clearing rules).
"""
import sys
from pathlib import Path
import tempfile
import unittest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.models import Operator
from core.session import ReaderSession
from errors import SourceQueryError
from scripture.base import BibleSource
from scripture.bible_db import BibleDatabase
from scripture.discovery import StaticDiscovery
from tests.fixtures import WEB_VERSES, FailingTable, create_sample_bible


class TestReaderSession(unittest.TestCase):
    """Test the session's submit_* methods."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        tmp = Path(self._tmp.name)
        self.kjv = BibleDatabase(create_sample_bible(tmp / "KJ1769.SQLite3"), check_same_thread=False)
        self.web = BibleDatabase(
            create_sample_bible(tmp / "WEB.SQLite3", description="World English Bible", verses=WEB_VERSES),
            check_same_thread=False
        )
        discovery = StaticDiscovery([
            BibleSource(self.kjv, self.kjv.describe),
            BibleSource(self.web, self.web.describe),
        ])
        self.session = ReaderSession(self.kjv, discovery)

    def tearDown(self):
        self.kjv.close()
        self.web.close()
        self._tmp.cleanup()

    def test_search_replaces_results(self):
        self.session.submit_search("Noah OR ark")
        self.assertEqual(len(self.session.search_results), 4)
        self.assertEqual(self.session.search_predicate.operator, Operator.OR)

        self.session.submit_search("faith AND hope")
        self.assertEqual(len(self.session.search_results), 2)
        self.assertEqual(self.session.search_input, "faith AND hope")

    def test_lookup_clears_compare(self):
        self.assertTrue(self.session.submit_compare("Gen 6:1-6"))
        self.assertEqual(len(self.session.compare_results), 2)

        self.assertTrue(self.session.submit_lookup("Gen 6:1-6"))
        self.assertEqual(len(self.session.lookup_results), 3)
        self.assertEqual(self.session.compare_results, [])

    def test_compare_clears_lookup(self):
        self.session.submit_lookup("Gen 6:1-7:2")
        self.assertEqual(len(self.session.lookup_results), 7)

        self.assertTrue(self.session.submit_compare())
        self.assertEqual(self.session.lookup_results, [])
        self.assertEqual(
            [c.source_label for c in self.session.compare_results],
            ["King James Version (1769)", "World English Bible"]
        )

    def test_compare_defaults_to_last_lookup_input(self):
        self.session.submit_lookup("Gen 6:2-3")
        self.session.submit_compare()
        for comparison in self.session.compare_results:
            self.assertEqual([v.verse for v in comparison.verses], [2, 3])

    def test_failed_lookup_parse_clears_results(self):
        self.session.submit_lookup("Gen 6:1-6")
        self.assertFalse(self.session.submit_lookup("not a ref"))
        self.assertEqual(self.session.lookup_results, [])
        self.assertEqual(self.session.compare_results, [])

    def test_failed_compare_parse_clears_results(self):
        self.session.submit_compare("Gen 6:1-6")
        self.assertFalse(self.session.submit_compare("not a ref"))
        self.assertEqual(self.session.compare_results, [])
        self.assertEqual(self.session.lookup_input, "not a ref")

    def test_search_does_not_touch_reference_results(self):
        self.session.submit_lookup("Gen 6:1-6")
        self.session.submit_search("faith")
        self.assertEqual(len(self.session.lookup_results), 3)

    def test_compare_without_discovery(self):
        session = ReaderSession(self.kjv)
        self.assertTrue(session.submit_compare("Gen 6:1-6"))
        self.assertEqual(session.compare_results, [])

    def test_search_failure_propagates_and_clears(self):
        session = ReaderSession(self.kjv)
        session.submit_search("faith")
        session.table = FailingTable()
        with self.assertRaises(SourceQueryError):
            session.submit_search("hope")
        self.assertEqual(session.search_results, [])


if __name__ == "__main__":
    unittest.main()
