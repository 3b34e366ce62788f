"""CLI package for ElasticBuilder.

Click definitions live in `ui`, execution and error handling in `runner`,
and the recipe logic in `commands`.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from ElasticBuilder.cli.runner import CommandRunner
from ElasticBuilder.cli.ui import cli


def main() -> None:
    """Run the ElasticBuilder CLI.

    Entry point referenced by the console script in pyproject.toml.
    """
    cli()
