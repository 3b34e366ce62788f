"""Tests for the recipe CLI commands and output writers."""

import json
import logging
import sys
import tempfile
import unittest
from pathlib import Path

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticBuilder.cli import cli
from ElasticBuilder.renderers import JsonFileWriter, render_json
from ElasticBuilder.queries import TermQuery
from ElasticBuilder.utils.log import log


def _write_config(tmp: str, formats: str, base_dir: str = "output") -> Path:
    config_path = Path(tmp) / "config.yml"
    config_path.write_text(
        f"""
log:
  level: ERROR

output:
  base_dir: {base_dir}
  formats: [{formats}]
  indent: 0
""",
        encoding="utf-8",
    )
    return config_path


class TestRecipeCli(unittest.TestCase):
    def tearDown(self) -> None:
        log.handlers.clear()
        log.addHandler(logging.NullHandler())
        log.setLevel(logging.NOTSET)
        log.propagate = True

    def _invoke(self, config_path: Path, *args: str):
        result = CliRunner().invoke(cli, ["--config", str(config_path), "recipe", *args])
        self.assertEqual(result.exit_code, 0, result.output)
        return result

    def test_missing_prints_request_body(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            result = self._invoke(_write_config(tmp, "console"), "missing", "user")
        self.assertEqual(
            json.loads(result.output),
            {"query": {"bool": {"must_not": {"exists": {"field": "user"}}}}},
        )

    def test_random_sort_with_seed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            result = self._invoke(_write_config(tmp, "console"), "random-sort", "--seed", "7")
        self.assertEqual(
            json.loads(result.output),
            {"query": {"function_score": {"query": {"match_all": {}}, "random_score": {"seed": 7}}}},
        )

    def test_filter_with_scoring(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            result = self._invoke(_write_config(tmp, "console"), "filter", "status", "active", "--scoring")
        self.assertEqual(
            json.loads(result.output),
            {"query": {"bool": {"filter": {"term": {"status": "active"}}, "must": {"match_all": {}}}}},
        )

    def test_json_writer_saves_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            base_dir = Path(tmp) / "out"
            result = self._invoke(_write_config(tmp, "json", base_dir.as_posix()), "missing", "user")
            self.assertEqual(result.output, "")
            files = list((base_dir / "json").glob("missing_*.json"))
            self.assertEqual(len(files), 1)
            payload = json.loads(files[0].read_text(encoding="utf-8"))
        self.assertEqual(
            payload,
            [{"name": "missing", "body": {"query": {"bool": {"must_not": {"exists": {"field": "user"}}}}}}],
        )

    def test_invalid_config_fails(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.yml"
            config_path.write_text("output:\n  formats: [yaml]\n", encoding="utf-8")
            result = CliRunner().invoke(cli, ["--config", str(config_path), "recipe", "missing", "user"])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIsInstance(result.exception, ValueError)


class TestRenderers(unittest.TestCase):
    def test_render_json_accepts_builders(self) -> None:
        self.assertEqual(render_json(TermQuery("user", "kimchy"), indent=0), '{"term": {"user": "kimchy"}}')

    def test_render_json_keeps_non_ascii(self) -> None:
        self.assertEqual(render_json({"q": "café"}, indent=0), '{"q": "café"}')
        self.assertEqual(render_json({"q": "café"}, indent=0, ensure_ascii=True), '{"q": "caf\\u00e9"}')

    def test_json_file_writer_keeps_write_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            writer = JsonFileWriter(tmp, indent=2)
            writer.write_document("first", TermQuery("a", 1))
            writer.write_document("second", {"size": 0})
            path = writer.finalize("batch")
            self.assertEqual(path.parent, Path(tmp) / "json")
            self.assertTrue(path.name.startswith("batch_"))
            payload = json.loads(path.read_text(encoding="utf-8"))
        self.assertEqual([entry["name"] for entry in payload], ["first", "second"])
        self.assertEqual(payload[0]["body"], {"term": {"a": 1}})


if __name__ == "__main__":
    unittest.main()
