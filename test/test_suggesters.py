"""Tests for the term, phrase and completion suggesters."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticBuilder.core.suggester import Suggester
from ElasticBuilder.suggesters import CompletionSuggester, DirectGenerator, PhraseSuggester, TermSuggester


class TestSuggesterBase(unittest.TestCase):
    def test_empty_type_rejected(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            Suggester("", "my_suggestion")
        self.assertEqual(str(ctx.exception), "Suggester `suggester_type` cannot be empty")

    def test_empty_name_rejected(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            TermSuggester("", "message")
        self.assertEqual(str(ctx.exception), "Suggester `name` cannot be empty")

    def test_field_and_size(self) -> None:
        suggester = Suggester("my_type", "my_suggestion").field("message").size(5)
        self.assertEqual(suggester.to_json(), {"my_suggestion": {"my_type": {"field": "message", "size": 5}}})


class TestTermSuggester(unittest.TestCase):
    def test_text_sits_beside_options(self) -> None:
        suggester = (
            TermSuggester("my_suggestion", "message", "tring out Elasticsearch")
            .sort("FREQUENCY")
            .suggest_mode("popular")
            .max_edits(2)
            .string_distance("jaro_winkler")
        )
        self.assertEqual(
            suggester.to_json(),
            {
                "my_suggestion": {
                    "text": "tring out Elasticsearch",
                    "term": {
                        "field": "message",
                        "sort": "frequency",
                        "suggest_mode": "popular",
                        "max_edits": 2,
                        "string_distance": "jaro_winkler",
                    },
                }
            },
        )

    def test_analyzer_and_shard_size(self) -> None:
        suggester = TermSuggester("s", "body").analyzer("standard").shard_size(10)
        self.assertEqual(suggester.to_json(), {"s": {"term": {"field": "body", "analyzer": "standard", "shard_size": 10}}})

    def test_invalid_suggest_mode(self) -> None:
        with self.assertLogs("ElasticBuilder", level="WARNING"):
            with self.assertRaises(ValueError):
                TermSuggester("s", "body").suggest_mode("sometimes")

    def test_invalid_sort(self) -> None:
        with self.assertLogs("ElasticBuilder", level="WARNING"):
            with self.assertRaises(ValueError):
                TermSuggester("s", "body").sort("length")


class TestPhraseSuggester(unittest.TestCase):
    def test_generators_and_collate(self) -> None:
        suggester = (
            PhraseSuggester("simple_phrase", "title.trigram", "noble prize")
            .gram_size(3)
            .direct_generator(DirectGenerator("title.trigram").suggest_mode("ALWAYS").min_word_length(1))
            .collate({"query": {"source": {"match": {"{{field_name}}": "{{suggestion}}"}}}}, prune=True)
            .highlight("<em>", "</em>")
            .smoothing("Laplace")
        )
        self.assertEqual(
            suggester.to_json(),
            {
                "simple_phrase": {
                    "text": "noble prize",
                    "phrase": {
                        "field": "title.trigram",
                        "gram_size": 3,
                        "direct_generator": [
                            {"field": "title.trigram", "suggest_mode": "always", "min_word_length": 1}
                        ],
                        "collate": {
                            "query": {"source": {"match": {"{{field_name}}": "{{suggestion}}"}}},
                            "prune": True,
                        },
                        "highlight": {"pre_tag": "<em>", "post_tag": "</em>"},
                        "smoothing": "laplace",
                    },
                }
            },
        )

    def test_prune_is_omitted_unless_given(self) -> None:
        suggester = PhraseSuggester("p", "title").collate({"query": {"id": "tmpl"}})
        self.assertEqual(suggester.to_json(), {"p": {"phrase": {"field": "title", "collate": {"query": {"id": "tmpl"}}}}})

    def test_several_generators(self) -> None:
        generators = [DirectGenerator("title.trigram"), DirectGenerator("title.reverse").pre_filter("reverse")]
        suggester = PhraseSuggester("p", "title.trigram").direct_generator(generators)
        self.assertEqual(
            suggester.to_json()["p"]["phrase"]["direct_generator"],
            [{"field": "title.trigram"}, {"field": "title.reverse", "pre_filter": "reverse"}],
        )

    def test_generator_type_checked(self) -> None:
        with self.assertRaises(TypeError):
            PhraseSuggester("p", "title").direct_generator({"field": "title"})
        with self.assertRaises(TypeError):
            PhraseSuggester("p", "title").collate("{{suggestion}}")

    def test_invalid_smoothing(self) -> None:
        with self.assertLogs("ElasticBuilder", level="WARNING"):
            with self.assertRaises(ValueError):
                PhraseSuggester("p", "title").smoothing("good_turing")


class TestCompletionSuggester(unittest.TestCase):
    def test_prefix_with_fuzzy_options(self) -> None:
        suggester = CompletionSuggester("song_suggest", "suggest").prefix("nor").fuzzy().fuzziness(2).transpositions(False)
        self.assertEqual(
            suggester.to_json(),
            {
                "song_suggest": {
                    "prefix": "nor",
                    "completion": {"field": "suggest", "fuzzy": {"fuzziness": 2, "transpositions": False}},
                }
            },
        )

    def test_plain_fuzzy_flag(self) -> None:
        suggester = CompletionSuggester("s", "suggest").prefix("nir").fuzzy().skip_duplicates()
        self.assertEqual(
            suggester.to_json(),
            {"s": {"prefix": "nir", "completion": {"field": "suggest", "fuzzy": True, "skip_duplicates": True}}},
        )

    def test_regex_options(self) -> None:
        suggester = CompletionSuggester("s", "suggest").regex("n[ever|i]r").flags("ALL").max_determinized_states(1000)
        self.assertEqual(
            suggester.to_json(),
            {
                "s": {
                    "regex": "n[ever|i]r",
                    "completion": {"field": "suggest", "regex": {"flags": "ALL", "max_determinized_states": 1000}},
                }
            },
        )

    def test_contexts(self) -> None:
        suggester = CompletionSuggester("place", "suggest").prefix("tim").contexts("place_type", ["cafe", "restaurants"])
        self.assertEqual(
            suggester.to_json()["place"]["completion"]["contexts"],
            {"place_type": ["cafe", "restaurants"]},
        )


if __name__ == "__main__":
    unittest.main()
