"""Application config orchestration and YAML loading entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from ElasticBuilder.config.output import OutputConfig, check_output, load_output
from ElasticBuilder.config.runtime import RuntimeConfig, check_runtime, load_runtime

DEFAULT_CONFIG_TEXT = """\
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


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Load and validate every domain of a merged mapping."""
    runtime = load_runtime(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_output(output)

    config = AppConfig(runtime=runtime, output=output)
    check_cross_domain(config)
    return config


def load_config_with_defaults(config_path: Path | None = None, *, _defaults_text: str = DEFAULT_CONFIG_TEXT) -> AppConfig:
    """Load config by merging the built-in defaults with an optional override file.

    Args:
        config_path: YAML file overriding some defaults, or None.
        _defaults_text: Default YAML; replaced in tests.

    Returns:
        Validated application configuration.

    Raises:
        OSError: If the override file cannot be read.
        ValueError: If the YAML root is not a mapping or a value is invalid.
        TypeError: If a value has the wrong type.
    """
    base = parse_yaml(_defaults_text)
    if config_path is None:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def check_cross_domain(config: AppConfig) -> None:
    """Validate constraints spanning several domains."""
    if config.runtime.to_file and config.runtime.dir.strip() == config.output.base_dir.strip():
        raise ValueError("log.dir must differ from output.base_dir when log.to_file=true")


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings; scalars and lists in `override` win."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
