"""Tests for the search request body and the top-level package exports."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

import ElasticBuilder
from ElasticBuilder import (
    AvgAggregation,
    BoolQuery,
    CompletionSuggester,
    InnerHits,
    MatchAllQuery,
    MatchQuery,
    RequestBodySearch,
    Rescore,
    RuntimeField,
    Sort,
    TermQuery,
    TermsAggregation,
    TermSuggester,
)


class TestRequestBodySearch(unittest.TestCase):
    def test_query_paging_and_sort(self) -> None:
        body = (
            RequestBodySearch()
            .query(BoolQuery().filter(TermQuery("user", "kimchy")))
            .from_(10)
            .size(20)
            .sort(Sort("post_date", "desc"))
            .sort(Sort("user"))
            .to_json()
        )
        self.assertEqual(
            body,
            {
                "query": {"bool": {"filter": {"term": {"user": "kimchy"}}}},
                "from": 10,
                "size": 20,
                "sort": [{"post_date": "desc"}, "user"],
            },
        )

    def test_aggregations_are_keyed_by_name(self) -> None:
        body = (
            RequestBodySearch()
            .size(0)
            .agg(TermsAggregation("users", "user"))
            .aggs([AvgAggregation("avg_age", "age")])
            .to_json()
        )
        self.assertEqual(
            body,
            {
                "size": 0,
                "aggregations": {
                    "users": {"terms": {"field": "user"}},
                    "avg_age": {"avg": {"field": "age"}},
                },
            },
        )

    def test_rescore_becomes_list(self) -> None:
        body = (
            RequestBodySearch()
            .rescore(Rescore(10, MatchQuery("a", "x")))
            .rescore(Rescore(5, MatchQuery("b", "y")))
            .to_json()
        )
        self.assertEqual(len(body["rescore"]), 2)
        self.assertEqual(body["rescore"][1]["window_size"], 5)

    def test_collapse_and_runtime_mappings(self) -> None:
        body = (
            RequestBodySearch()
            .collapse("user", InnerHits("last_tweets").size(5), 4)
            .runtime_mapping("day", RuntimeField("keyword", "emit('x')"))
            .index_boost("alias1", 1.4)
            .to_json()
        )
        self.assertEqual(
            body,
            {
                "collapse": {
                    "field": "user",
                    "inner_hits": {"name": "last_tweets", "size": 5},
                    "max_concurrent_group_searches": 4,
                },
                "runtime_mappings": {"day": {"type": "keyword", "script": {"source": "emit('x')"}}},
                "indices_boost": [{"alias1": 1.4}],
            },
        )

    def test_suggestions_are_keyed_by_name(self) -> None:
        body = (
            RequestBodySearch()
            .suggest_text("tring out Elasticsearch")
            .suggest(TermSuggester("my-suggest-1", "message"))
            .suggest(CompletionSuggester("song-suggest", "suggest").prefix("nir"))
            .to_json()
        )
        self.assertEqual(
            body,
            {
                "suggest": {
                    "text": "tring out Elasticsearch",
                    "my-suggest-1": {"term": {"field": "message"}},
                    "song-suggest": {"prefix": "nir", "completion": {"field": "suggest"}},
                }
            },
        )

    def test_type_checks(self) -> None:
        with self.assertRaises(TypeError):
            RequestBodySearch().query({"match_all": {}})
        with self.assertRaises(TypeError):
            RequestBodySearch().agg(MatchAllQuery())
        with self.assertRaises(TypeError):
            RequestBodySearch().sort("age")
        with self.assertRaises(TypeError):
            RequestBodySearch().suggest({"my-suggest": {"term": {"field": "message"}}})

    def test_empty_body(self) -> None:
        self.assertEqual(RequestBodySearch().to_json(), {})


class TestPackageExports(unittest.TestCase):
    def test_all_names_resolve(self) -> None:
        for name in ElasticBuilder.__all__:
            self.assertTrue(hasattr(ElasticBuilder, name), name)

    def test_builders_are_exported(self) -> None:
        names = (
            "BoolQuery",
            "FunctionScoreQuery",
            "SpanNearQuery",
            "TermsAggregation",
            "BucketSortAggregation",
            "PhraseSuggester",
            "GeoPoint",
            "GeoShapeQuery",
            "CompositeAggregation",
        )
        for name in names:
            self.assertIn(name, ElasticBuilder.__all__)


if __name__ == "__main__":
    unittest.main()
