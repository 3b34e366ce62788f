"""Tests for full-text queries."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticBuilder.queries import (
    CombinedFieldsQuery,
    MatchPhrasePrefixQuery,
    MatchPhraseQuery,
    MatchQuery,
    MultiMatchQuery,
    QueryStringQuery,
    SimpleQueryStringQuery,
)


class TestMonoFieldQueries(unittest.TestCase):
    def test_match_collapses_lone_query(self) -> None:
        self.assertEqual(MatchQuery("message", "this is a test").to_json(), {"match": {"message": "this is a test"}})

    def test_match_with_options(self) -> None:
        query = MatchQuery("message", "this is a test").operator("AND").zero_terms_query("all")
        self.assertEqual(
            query.to_json(),
            {"match": {"message": {"query": "this is a test", "operator": "and", "zero_terms_query": "all"}}},
        )

    def test_match_rejects_unknown_operator(self) -> None:
        with self.assertLogs("ElasticBuilder", level="WARNING"):
            with self.assertRaises(ValueError):
                MatchQuery("message", "x").operator("xor")

    def test_missing_query_fails_at_serialization(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            MatchQuery("message").to_json()
        self.assertEqual(str(ctx.exception), "Query is required for full text query!")

    def test_phrase_slop(self) -> None:
        query = MatchPhraseQuery("message", "quick fox").slop(2)
        self.assertEqual(query.to_json(), {"match_phrase": {"message": {"query": "quick fox", "slop": 2}}})

    def test_phrase_rejects_minimum_should_match(self) -> None:
        with self.assertRaises(ValueError):
            MatchPhraseQuery("message", "quick fox").minimum_should_match(2)
        with self.assertRaises(ValueError):
            MatchPhrasePrefixQuery("message", "quick f").minimum_should_match(2)

    def test_phrase_prefix(self) -> None:
        query = MatchPhrasePrefixQuery("message", "quick f").max_expansions(10)
        self.assertEqual(
            query.to_json(),
            {"match_phrase_prefix": {"message": {"query": "quick f", "max_expansions": 10}}},
        )


class TestMultiFieldQueries(unittest.TestCase):
    def test_multi_match(self) -> None:
        query = MultiMatchQuery(["subject", "message"], "this is a test").type("BEST_FIELDS").tie_breaker(0.3)
        self.assertEqual(
            query.to_json(),
            {
                "multi_match": {
                    "fields": ["subject", "message"],
                    "query": "this is a test",
                    "type": "best_fields",
                    "tie_breaker": 0.3,
                }
            },
        )

    def test_multi_match_single_field_string(self) -> None:
        query = MultiMatchQuery("title^3", "quick")
        self.assertEqual(query.to_json(), {"multi_match": {"query": "quick", "fields": ["title^3"]}})

    def test_query_text_precedes_fields(self) -> None:
        self.assertEqual(list(MultiMatchQuery(["a"], "q").to_json()["multi_match"]), ["query", "fields"])
        self.assertEqual(list(CombinedFieldsQuery(["a"], "q").to_json()["combined_fields"]), ["query", "fields"])

    def test_empty_field_list_is_sent(self) -> None:
        self.assertEqual(MultiMatchQuery().query("q").to_json(), {"multi_match": {"fields": [], "query": "q"}})

    def test_multi_match_rejects_unknown_type(self) -> None:
        with self.assertLogs("ElasticBuilder", level="WARNING"):
            with self.assertRaises(ValueError):
                MultiMatchQuery(["a"], "x").type("fastest_fields")

    def test_fields_requires_sequence(self) -> None:
        with self.assertRaises(TypeError):
            MultiMatchQuery().fields("title")

    def test_combined_fields(self) -> None:
        query = CombinedFieldsQuery(["title", "abstract"], "database systems").operator("and")
        self.assertEqual(
            query.to_json(),
            {
                "combined_fields": {
                    "fields": ["title", "abstract"],
                    "query": "database systems",
                    "operator": "and",
                }
            },
        )


class TestQueryStringQueries(unittest.TestCase):
    def test_fields_omitted_until_set(self) -> None:
        self.assertEqual(QueryStringQuery("this AND that").to_json(), {"query_string": {"query": "this AND that"}})

    def test_fields_and_default_operator(self) -> None:
        query = QueryStringQuery("this AND that").field("content").default_operator("and")
        self.assertEqual(
            query.to_json(),
            {"query_string": {"query": "this AND that", "fields": ["content"], "default_operator": "AND"}},
        )

    def test_simple_query_string(self) -> None:
        query = SimpleQueryStringQuery('"fried eggs" +eggplant').flags("OR|AND|PREFIX")
        self.assertEqual(
            query.to_json(),
            {
                "simple_query_string": {
                    "query": '"fried eggs" +eggplant',
                    "flags": "OR|AND|PREFIX",
                }
            },
        )

    def test_simple_query_string_omits_fields_until_set(self) -> None:
        self.assertEqual(SimpleQueryStringQuery("foo").to_json(), {"simple_query_string": {"query": "foo"}})
        query = SimpleQueryStringQuery("foo").fields(["title", "body^2"])
        self.assertEqual(query.to_json(), {"simple_query_string": {"query": "foo", "fields": ["title", "body^2"]}})


if __name__ == "__main__":
    unittest.main()
