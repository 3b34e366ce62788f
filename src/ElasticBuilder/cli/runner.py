"""Command runner for coordinating CLI execution.

Configures logging, creates the output writer and turns any failure into a
logged error followed by `click.Abort`.
"""

from __future__ import annotations

from typing import Callable

import click

from ElasticBuilder.cli.commands import RecipeCommand
from ElasticBuilder.config import AppConfig
from ElasticBuilder.renderers import create_output_writer
from ElasticBuilder.utils.log import configure_logging, log


class CommandRunner:
    """Runs recipe commands against one configuration."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_recipe(self, action: str, build: Callable[[RecipeCommand], object]) -> None:
        """Execute one recipe command.

        Args:
            action: The CLI command name, e.g. ``missing``.
            build: Calls the RecipeCommand method for this action.

        Raises:
            click.Abort: When building or writing the document fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            output_writer = create_output_writer(self.config)
            build(RecipeCommand(output_writer=output_writer))
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Recipe %s failed: %s", action, e)
            raise click.Abort from e
