"""Tests for term-level queries."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticBuilder.core.query import MultiTermQuery
from ElasticBuilder.queries import (
    ExistsQuery,
    FuzzyQuery,
    IdsQuery,
    PrefixQuery,
    RangeQuery,
    RegexpQuery,
    TermQuery,
    TermsQuery,
    TermsSetQuery,
    WildcardQuery,
)


class TestValueTermQueries(unittest.TestCase):
    def test_term_collapses_lone_value(self) -> None:
        self.assertEqual(TermQuery("user", "kimchy").to_json(), {"term": {"user": "kimchy"}})

    def test_term_expands_with_options(self) -> None:
        query = TermQuery("user", "kimchy").boost(2)
        self.assertEqual(query.to_json(), {"term": {"user": {"value": "kimchy", "boost": 2}}})

    def test_value_set_through_setters(self) -> None:
        query = TermQuery().field("status").value("published")
        self.assertEqual(query.to_json(), {"term": {"status": "published"}})

    def test_missing_value_fails_at_serialization(self) -> None:
        query = TermQuery("user")
        with self.assertRaises(ValueError) as ctx:
            query.to_json()
        self.assertEqual(str(ctx.exception), "Value is required for term level query!")

    def test_falsy_value_is_kept(self) -> None:
        self.assertEqual(TermQuery("count", 0).to_json(), {"term": {"count": 0}})

    def test_multi_term_capability(self) -> None:
        for cls in (PrefixQuery, WildcardQuery, RegexpQuery, FuzzyQuery, RangeQuery):
            self.assertTrue(issubclass(cls, MultiTermQuery), cls)
        self.assertFalse(issubclass(TermQuery, MultiTermQuery))

    def test_prefix_rewrite_methods(self) -> None:
        query = PrefixQuery("user", "ki").rewrite("top_terms_10")
        self.assertEqual(query.to_json(), {"prefix": {"user": {"value": "ki", "rewrite": "top_terms_10"}}})
        PrefixQuery("user", "ki").rewrite("constant_score")
        PrefixQuery("user", "ki").rewrite("top_terms_blended_freqs_3")

    def test_invalid_rewrite_rejected(self) -> None:
        with self.assertLogs("ElasticBuilder", level="WARNING"):
            with self.assertRaises(ValueError):
                WildcardQuery("user", "ki*").rewrite("top_terms_")
        with self.assertLogs("ElasticBuilder", level="WARNING"):
            with self.assertRaises(ValueError):
                RegexpQuery("user", "k.*").rewrite("CONSTANT_SCORE")

    def test_fuzzy_options(self) -> None:
        query = FuzzyQuery("user", "ki").fuzziness("AUTO").prefix_length(1).transpositions(True)
        self.assertEqual(
            query.to_json(),
            {"fuzzy": {"user": {"value": "ki", "fuzziness": "AUTO", "prefix_length": 1, "transpositions": True}}},
        )


class TestTermsQuery(unittest.TestCase):
    def test_values(self) -> None:
        query = TermsQuery("user", ["kimchy", "elastic"]).value("es")
        self.assertEqual(query.to_json(), {"terms": {"user": ["kimchy", "elastic", "es"]}})

    def test_single_value_in_constructor(self) -> None:
        self.assertEqual(TermsQuery("user", "kimchy").to_json(), {"terms": {"user": ["kimchy"]}})

    def test_lookup_mode_replaces_values(self) -> None:
        query = TermsQuery("user", ["ignored"]).index("users").id("2").path("followers")
        self.assertEqual(
            query.to_json(),
            {"terms": {"user": {"index": "users", "id": "2", "path": "followers"}}},
        )

    def test_options_sit_beside_field(self) -> None:
        query = TermsQuery("user", ["a"]).boost(1.5)
        self.assertEqual(query.to_json(), {"terms": {"boost": 1.5, "user": ["a"]}})

    def test_values_requires_sequence(self) -> None:
        with self.assertRaises(TypeError):
            TermsQuery("user").values("abc")


class TestOtherTermLevelQueries(unittest.TestCase):
    def test_terms_set(self) -> None:
        query = TermsSetQuery("codes", ["abc", "def"]).minimum_should_match_field("required")
        self.assertEqual(
            query.to_json(),
            {"terms_set": {"codes": {"terms": ["abc", "def"], "minimum_should_match_field": "required"}}},
        )

    def test_range(self) -> None:
        query = RangeQuery("age").gte(10).lte(20).boost(2)
        self.assertEqual(query.to_json(), {"range": {"age": {"gte": 10, "lte": 20, "boost": 2}}})

    def test_range_relation_is_upper_cased(self) -> None:
        query = RangeQuery("span").relation("within")
        self.assertEqual(query.to_json(), {"range": {"span": {"relation": "WITHIN"}}})
        with self.assertLogs("ElasticBuilder", level="WARNING"):
            with self.assertRaises(ValueError):
                RangeQuery("span").relation("overlaps")

    def test_exists(self) -> None:
        self.assertEqual(ExistsQuery("user").to_json(), {"exists": {"field": "user"}})

    def test_ids(self) -> None:
        self.assertEqual(IdsQuery(["1", "4"]).to_json(), {"ids": {"values": ["1", "4"]}})
        with self.assertRaises(TypeError):
            IdsQuery("1")


if __name__ == "__main__":
    unittest.main()
