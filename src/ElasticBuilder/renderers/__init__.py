"""Output renderers for command results.

The module exports the OutputWriter base for new output formats and a factory
building the writers enabled in the configuration.
"""

from __future__ import annotations

from ElasticBuilder.config import AppConfig
from ElasticBuilder.renderers.base import MultiOutputWriter, OutputWriter
from ElasticBuilder.renderers.console import ConsoleOutputWriter
from ElasticBuilder.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create the output writer for the configured formats.

    Args:
        config: Application configuration.

    Returns:
        A MultiOutputWriter over every enabled writer.

    Raises:
        ValueError: If no writer is enabled.
    """
    output = config.output
    writers: list[OutputWriter] = []
    if "console" in output.formats:
        writers.append(ConsoleOutputWriter(indent=output.indent, ensure_ascii=output.ensure_ascii))
    if "json" in output.formats:
        writers.append(JsonFileWriter(output.base_dir, indent=output.indent, ensure_ascii=output.ensure_ascii))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "OutputWriter",
    "create_output_writer",
    "render_json",
]
