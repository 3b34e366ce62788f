"""Click CLI interface definitions.

Defines the command-line structure and routes commands to the runner.
"""

from __future__ import annotations

from pathlib import Path

import click

from ElasticBuilder.cli.runner import CommandRunner
from ElasticBuilder.config import load_config_with_defaults


@click.group(help="ElasticBuilder: build Elasticsearch request bodies.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="YAML file overriding the built-in defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group; loads the configuration once for every command."""
    ctx.obj = load_config_with_defaults(config_path)


@cli.group("recipe")
def recipe() -> None:
    """Render a ready-made query as a search request body."""


@recipe.command("missing")
@click.argument("field")
@click.pass_context
def missing_cmd(ctx: click.Context, field: str) -> None:
    """Match documents with no value for FIELD."""
    CommandRunner(ctx.obj).run_recipe(ctx.command.name, lambda command: command.missing(field))


@recipe.command("random-sort")
@click.option("--seed", type=int, default=None, help="Seed making the order reproducible.")
@click.pass_context
def random_sort_cmd(ctx: click.Context, seed: int | None) -> None:
    """Return every document in random order."""
    CommandRunner(ctx.obj).run_recipe(ctx.command.name, lambda command: command.random_sort(seed))


@recipe.command("filter")
@click.argument("field")
@click.argument("value")
@click.option("--scoring", is_flag=True, default=False, help="Give every hit a score of 1.0.")
@click.pass_context
def filter_cmd(ctx: click.Context, field: str, value: str, scoring: bool) -> None:
    """Match documents whose FIELD is exactly VALUE, without scoring."""
    CommandRunner(ctx.obj).run_recipe(ctx.command.name, lambda command: command.filter(field, value, scoring))
