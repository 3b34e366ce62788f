"""Tests for nested and parent/child queries."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticBuilder.core.inner_hits import InnerHits
from ElasticBuilder.core.sort import Sort
from ElasticBuilder.queries import (
    HasChildQuery,
    HasParentQuery,
    MatchAllQuery,
    MatchQuery,
    NestedQuery,
    ParentIdQuery,
    TermQuery,
)


class TestNestedQuery(unittest.TestCase):
    def test_basic(self) -> None:
        query = NestedQuery(MatchQuery("obj1.name", "blue"), "obj1").score_mode("avg")
        self.assertEqual(
            query.to_json(),
            {"nested": {"query": {"match": {"obj1.name": "blue"}}, "path": "obj1", "score_mode": "avg"}},
        )

    def test_score_mode_is_lower_cased(self) -> None:
        query = NestedQuery().score_mode("SUM")
        self.assertEqual(query.to_json(), {"nested": {"score_mode": "sum"}})

    def test_score_mode_rejects_unknown_and_none(self) -> None:
        for bad in ("invalid", None):
            with self.assertLogs("ElasticBuilder", level="WARNING"):
                with self.assertRaises(ValueError) as ctx:
                    NestedQuery().score_mode(bad)
            self.assertIn("query-dsl-nested-query.html", str(ctx.exception))

    def test_query_must_be_query(self) -> None:
        with self.assertRaises(TypeError):
            NestedQuery({"match_all": {}}, "obj1")

    def test_inner_hits(self) -> None:
        inner = InnerHits("comments").size(3).sort(Sort("date", "desc"))
        query = NestedQuery(MatchAllQuery(), "comments").inner_hits(inner)
        self.assertEqual(
            query.to_json(),
            {
                "nested": {
                    "query": {"match_all": {}},
                    "path": "comments",
                    "inner_hits": {"name": "comments", "size": 3, "sort": [{"date": "desc"}]},
                }
            },
        )
        with self.assertRaises(TypeError):
            NestedQuery().inner_hits({"size": 3})


class TestParentChildQueries(unittest.TestCase):
    def test_has_child(self) -> None:
        query = HasChildQuery(TermQuery("tag", "something"), "blog_tag").min_children(2).max_children(10)
        self.assertEqual(
            query.to_json(),
            {
                "has_child": {
                    "query": {"term": {"tag": "something"}},
                    "type": "blog_tag",
                    "min_children": 2,
                    "max_children": 10,
                }
            },
        )

    def test_has_child_deprecated_child_type(self) -> None:
        with self.assertLogs("ElasticBuilder", level="WARNING") as logs:
            query = HasChildQuery().child_type("blog_tag")
        self.assertIn("deprecated", logs.output[0])
        self.assertEqual(query.to_json(), {"has_child": {"type": "blog_tag"}})

    def test_has_parent(self) -> None:
        query = HasParentQuery(TermQuery("tag", "something"), "blog").score(True)
        self.assertEqual(
            query.to_json(),
            {"has_parent": {"query": {"term": {"tag": "something"}}, "parent_type": "blog", "score": True}},
        )
        self.assertEqual(HasParentQuery().type("blog").to_json(), {"has_parent": {"parent_type": "blog"}})

    def test_has_parent_rejects_score_mode(self) -> None:
        with self.assertLogs("ElasticBuilder", level="WARNING"):
            with self.assertRaises(ValueError) as ctx:
                HasParentQuery().score_mode("sum")
        self.assertEqual(str(ctx.exception), "score_mode is not supported in HasParentQuery")

    def test_parent_id(self) -> None:
        query = ParentIdQuery("my_child", "1").ignore_unmapped(True)
        self.assertEqual(
            query.to_json(),
            {"parent_id": {"type": "my_child", "id": "1", "ignore_unmapped": True}},
        )


if __name__ == "__main__":
    unittest.main()
