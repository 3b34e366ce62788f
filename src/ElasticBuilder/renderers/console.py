"""Console output writer."""

from __future__ import annotations

from typing import Any

import click

from ElasticBuilder.renderers.base import OutputWriter
from ElasticBuilder.renderers.json import render_json
from ElasticBuilder.utils.log import log


class ConsoleOutputWriter(OutputWriter):
    """Echo each document to stdout as JSON.

    Only the document goes to stdout so the output can be piped; the name is
    logged.
    """

    def __init__(self, *, indent: int = 2, ensure_ascii: bool = False) -> None:
        """Initialize console writer.

        Args:
            indent: Indentation of the printed JSON.
            ensure_ascii: Escape non-ASCII characters.
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def write_document(self, name: str, document: Any) -> None:
        """Print one document as indented JSON."""
        log.info("document=%s", name)
        click.echo(render_json(document, indent=self.indent, ensure_ascii=self.ensure_ascii))

    def finalize(self, action: str) -> None:
        """No-op for console output."""
        log.debug("Console output finished for %s", action)
