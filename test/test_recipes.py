"""Tests for the ready-made recipe queries."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticBuilder.queries import BoolQuery, FunctionScoreQuery, MatchQuery, TermQuery
from ElasticBuilder.recipes import filter_query, missing_query, random_sort_query


class TestRecipes(unittest.TestCase):
    def test_missing_query(self) -> None:
        query = missing_query("user")
        self.assertIsInstance(query, BoolQuery)
        self.assertEqual(query.to_json(), {"bool": {"must_not": {"exists": {"field": "user"}}}})

    def test_random_sort_defaults_to_match_all(self) -> None:
        query = random_sort_query(seed=7)
        self.assertIsInstance(query, FunctionScoreQuery)
        self.assertEqual(
            query.to_json(),
            {"function_score": {"query": {"match_all": {}}, "random_score": {"seed": 7}}},
        )

    def test_random_sort_with_query_and_no_seed(self) -> None:
        query = random_sort_query(MatchQuery("title", "elasticsearch"))
        self.assertEqual(
            query.to_json(),
            {"function_score": {"query": {"match": {"title": "elasticsearch"}}, "random_score": {}}},
        )

    def test_random_sort_rejects_non_query(self) -> None:
        with self.assertRaises(TypeError):
            random_sort_query({"match_all": {}})

    def test_filter_query(self) -> None:
        self.assertEqual(
            filter_query(TermQuery("status", "active")).to_json(),
            {"bool": {"filter": {"term": {"status": "active"}}}},
        )

    def test_filter_query_with_scoring(self) -> None:
        self.assertEqual(
            filter_query(TermQuery("status", "active"), scoring=True).to_json(),
            {"bool": {"filter": {"term": {"status": "active"}}, "must": {"match_all": {}}}},
        )

    def test_filter_query_rejects_non_query(self) -> None:
        with self.assertRaises(TypeError):
            filter_query("status:active")


if __name__ == "__main__":
    unittest.main()
