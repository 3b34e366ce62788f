"""Public configuration API for ElasticBuilder."""

from __future__ import annotations

from ElasticBuilder.config.app import (
    DEFAULT_CONFIG_TEXT,
    AppConfig,
    check_cross_domain,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from ElasticBuilder.config.output import OutputConfig
from ElasticBuilder.config.runtime import RuntimeConfig

__all__ = [
    "DEFAULT_CONFIG_TEXT",
    "AppConfig",
    "OutputConfig",
    "RuntimeConfig",
    "check_cross_domain",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
