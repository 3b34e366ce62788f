"""Runtime domain configuration: logging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ElasticBuilder.config.common import check_choices, expect_bool, expect_str, get_required_value, get_section

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Validated logging settings."""

    level: str
    to_file: bool
    dir: str


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Load the ``log`` section.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed runtime configuration, with the level upper-cased.

    Raises:
        TypeError: If a value has the wrong type.
        ValueError: If a required key is missing.
    """
    section = get_section(raw, "log", required=True)
    return RuntimeConfig(
        level=expect_str(get_required_value(section, "level", "log.level"), "log.level").upper(),
        to_file=expect_bool(get_required_value(section, "to_file", "log.to_file"), "log.to_file"),
        dir=expect_str(get_required_value(section, "dir", "log.dir"), "log.dir"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    """Validate the log level and directory.

    Raises:
        ValueError: If the level is unknown or the directory is blank.
    """
    check_choices((config.level,), _ALLOWED_LOG_LEVELS, "log.level")
    if not config.dir.strip():
        raise ValueError("log.dir must not be empty")
