"""Base classes for output writers.

A command builds one or more named documents (serialized request bodies)
and hands each to the writer, then calls `finalize` once.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Sequence


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_document(self, name: str, document: Any) -> None:
        """Write one serialized document.

        Args:
            name: Label of the document, e.g. the recipe name.
            document: Plain JSON-compatible data.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Flush anything accumulated so far.

        Args:
            action: The CLI command name, used to name output files.
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_document(self, name: str, document: Any) -> None:
        """Write document to every writer."""
        for writer in self.writers:
            writer.write_document(name, document)

    def finalize(self, action: str) -> None:
        """Finalize all writers."""
        for writer in self.writers:
            writer.finalize(action)
