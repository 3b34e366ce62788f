"""Tests for config defaults, overrides and validation."""

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticBuilder.config import load_config_with_defaults, merge_config_dicts, parse_config_dict


_BASE_YAML = """
log:
  level: INFO
  to_file: false
  dir: log

output:
  base_dir: output
  formats: [console]
  indent: 2
  ensure_ascii: false
"""


def _load_override(override_yaml: str):
    with tempfile.TemporaryDirectory() as tmp:
        override_path = Path(tmp) / "override.yml"
        override_path.write_text(override_yaml, encoding="utf-8")
        return load_config_with_defaults(override_path, _defaults_text=_BASE_YAML)


class TestConfigDefaults(unittest.TestCase):
    def test_builtin_defaults(self) -> None:
        cfg = load_config_with_defaults()
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertFalse(cfg.runtime.to_file)
        self.assertEqual(cfg.output.formats, ("console",))
        self.assertEqual(cfg.output.indent, 2)
        self.assertFalse(cfg.output.ensure_ascii)


class TestConfigOverride(unittest.TestCase):
    def test_override_merges_with_defaults(self) -> None:
        cfg = _load_override(
            """
log:
  level: debug

output:
  formats: [Console, json]
"""
        )
        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertEqual(cfg.runtime.dir, "log")
        self.assertEqual(cfg.output.formats, ("console", "json"))
        self.assertEqual(cfg.output.base_dir, "output")

    def test_empty_override_uses_defaults(self) -> None:
        cfg = _load_override("{}")
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.output.formats, ("console",))

    def test_lists_are_replaced_not_merged(self) -> None:
        merged = merge_config_dicts({"output": {"formats": ["console"], "indent": 2}}, {"output": {"formats": ["json"]}})
        self.assertEqual(merged, {"output": {"formats": ["json"], "indent": 2}})

    def test_non_mapping_root_rejected(self) -> None:
        with self.assertRaises(ValueError):
            _load_override("- just\n- a list\n")


class TestConfigValidation(unittest.TestCase):
    def _raw(self, **output_overrides) -> dict:
        output = {"base_dir": "output", "formats": ["console"], "indent": 2, "ensure_ascii": False}
        output.update(output_overrides)
        return {"log": {"level": "INFO", "to_file": False, "dir": "log"}, "output": output}

    def test_unknown_format(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            parse_config_dict(self._raw(formats=["console", "yaml"]))
        self.assertIn("yaml", str(ctx.exception))

    def test_empty_formats(self) -> None:
        with self.assertRaises(ValueError):
            parse_config_dict(self._raw(formats=[]))

    def test_negative_indent(self) -> None:
        with self.assertRaises(ValueError):
            parse_config_dict(self._raw(indent=-1))

    def test_bool_indent_is_a_type_error(self) -> None:
        with self.assertRaises(TypeError):
            parse_config_dict(self._raw(indent=True))

    def test_unknown_log_level(self) -> None:
        raw = self._raw()
        raw["log"]["level"] = "verbose"
        with self.assertRaises(ValueError):
            parse_config_dict(raw)

    def test_missing_section(self) -> None:
        raw = self._raw()
        del raw["output"]
        with self.assertRaises(ValueError) as ctx:
            parse_config_dict(raw)
        self.assertIn("output", str(ctx.exception))

    def test_log_dir_must_differ_from_output_dir(self) -> None:
        raw = self._raw(base_dir="shared")
        raw["log"].update({"to_file": True, "dir": "shared"})
        with self.assertRaises(ValueError):
            parse_config_dict(raw)


if __name__ == "__main__":
    unittest.main()
