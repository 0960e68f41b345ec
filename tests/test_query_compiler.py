"""
Tests for the boolean search query compiler.

Tests:
1. Operator selection (AND / OR / default, AND wins over OR)
2. Term extraction (keywords skipped, NOT prefix handling)
3. Empty queries
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models import Operator, SearchPredicate, SearchTerm
from query.compiler import compile_query, detect_operator, has_not_prefix, tokenize


class TestOperatorSelection:
    """Tests for choosing the operator joining the terms."""

    def test_and_query(self):
        predicate = compile_query("faith AND hope")
        assert predicate == SearchPredicate(
            Operator.AND,
            (SearchTerm("faith"), SearchTerm("hope"))
        )

    def test_or_query(self):
        predicate = compile_query("Noah OR ark")
        assert predicate.operator == Operator.OR
        assert [t.text for t in predicate.terms] == ["Noah", "ark"]

    def test_default_operator_is_and(self):
        assert compile_query("faith hope charity").operator == Operator.AND

    @pytest.mark.parametrize("query", [
        "faith AND hope OR charity",
        "faith OR hope AND charity",
        "faith or hope and charity",
        "OR AND",
    ])
    def test_and_wins_over_or_in_any_order(self, query):
        assert compile_query(query).operator == Operator.AND

    def test_keywords_are_case_insensitive(self):
        assert compile_query("faith or hope").operator == Operator.OR
        assert compile_query("faith Or hope").operator == Operator.OR

    def test_detect_operator_stops_at_first_and(self):
        assert detect_operator(["a", "AND", "b", "OR", "c"]) == Operator.AND
        assert detect_operator(["a", "OR", "b"]) == Operator.OR
        assert detect_operator([]) == Operator.AND


class TestTermExtraction:
    """Tests for building the term list."""

    def test_keywords_are_not_terms(self):
        predicate = compile_query("faith and hope OR love")
        assert [t.text for t in predicate.terms] == ["faith", "hope", "love"]

    def test_not_prefix_makes_negated_term(self):
        predicate = compile_query("love NOTfear")
        assert predicate.terms == (SearchTerm("love"), SearchTerm("fear", negated=True))

    def test_not_prefix_is_case_insensitive(self):
        predicate = compile_query("notNoah")
        assert predicate.terms == (SearchTerm("Noah", negated=True),)

    def test_bare_not_is_a_positive_term(self):
        predicate = compile_query("NOT")
        assert predicate.terms == (SearchTerm("NOT"),)

    def test_no_is_a_positive_term(self):
        predicate = compile_query("NO")
        assert predicate.terms == (SearchTerm("NO"),)

    def test_words_starting_with_not_are_negated(self):
        # "nothing" strips to "hing": the prefix rule has no word boundary
        predicate = compile_query("nothing")
        assert predicate.terms == (SearchTerm("hing", negated=True),)

    def test_term_order_is_preserved(self):
        predicate = compile_query("c NOTb a")
        assert [(t.text, t.negated) for t in predicate.terms] == [
            ("c", False), ("b", True), ("a", False)
        ]

    def test_tokens_split_on_any_whitespace(self):
        assert tokenize("  faith\thope\nlove  ") == ["faith", "hope", "love"]

    def test_has_not_prefix(self):
        assert has_not_prefix("NOTark")
        assert has_not_prefix("Not")
        assert not has_not_prefix("NO")
        assert not has_not_prefix("knot")


class TestEmptyQueries:
    """Tests for queries without any terms."""

    @pytest.mark.parametrize("query", ["", "   ", "AND", "OR", "and or"])
    def test_no_terms(self, query):
        predicate = compile_query(query)
        assert predicate.terms == ()
        assert predicate.is_empty

    def test_empty_query_defaults_to_and(self):
        assert compile_query("") == SearchPredicate(Operator.AND, ())

    def test_serialization(self):
        data = compile_query("faith OR NOTfear").to_dict()
        assert data == {
            "operator": "OR",
            "terms": [
                {"text": "faith", "negated": False},
                {"text": "fear", "negated": True}
            ]
        }
