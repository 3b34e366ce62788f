"""Output domain configuration: where and how rendered documents go."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ElasticBuilder.config.common import (
    check_choices,
    expect_bool,
    expect_int,
    expect_str,
    expect_str_list,
    get_optional_value,
    get_required_value,
    get_section,
)

_ALLOWED_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration.

    Attributes:
        base_dir: Root directory for file writers; JSON documents land in
            ``<base_dir>/json``.
        formats: Enabled writers, lower-cased.
        indent: JSON indentation width; 0 renders on a single line.
        ensure_ascii: Escape non-ASCII characters in JSON output.
    """

    base_dir: str
    formats: tuple[str, ...]
    indent: int
    ensure_ascii: bool


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load the ``output`` section.

    Raises:
        TypeError: If a value has the wrong type.
        ValueError: If a required key is missing.
    """
    section = get_section(raw, "output", required=True)
    formats = tuple(
        item.lower()
        for item in expect_str_list(get_required_value(section, "formats", "output.formats"), "output.formats")
    )
    return OutputConfig(
        base_dir=expect_str(get_required_value(section, "base_dir", "output.base_dir"), "output.base_dir"),
        formats=formats,
        indent=expect_int(get_optional_value(section, "indent", 2), "output.indent"),
        ensure_ascii=expect_bool(get_optional_value(section, "ensure_ascii", False), "output.ensure_ascii"),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If the directory is blank, no format is enabled, a format
            is unknown or the indent is negative.
    """
    if not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty")
    if not config.formats:
        raise ValueError("output.formats must include at least one format")
    check_choices(config.formats, _ALLOWED_FORMATS, "output.formats")
    if config.indent < 0:
        raise ValueError("output.indent must be >= 0")
