"""Base class for every suggester."""

from __future__ import annotations

from typing import Any

from ElasticBuilder.core.util import recursive_to_json
from ElasticBuilder.utils.guards import is_empty, is_nil


class Suggester:
    """A named suggestion of a given type.

    Serializes as ``{name: {"text": ..., suggester_type: {...options}}}``.
    Options that belong to the whole suggestion (such as ``text``) sit
    beside the typed block.

    Raises:
        ValueError: If `suggester_type` or `name` is empty.
    """

    def __init__(self, suggester_type: str, name: str, field: str | None = None) -> None:
        """Initialize the suggester.

        Args:
            suggester_type: Wire name of the typed block, e.g. ``term``.
            name: Key the suggestion is emitted under.
            field: Field to fetch candidates from.
        """
        if is_empty(suggester_type):
            raise ValueError("Suggester `suggester_type` cannot be empty")
        if is_empty(name):
            raise ValueError("Suggester `name` cannot be empty")

        self.name = name
        self.suggester_type = suggester_type
        self._opts: dict[str, Any] = {}
        self._body: dict[str, Any] = {name: self._opts}
        self._suggest_opts: dict[str, Any] = {}
        self._opts[suggester_type] = self._suggest_opts

        if not is_nil(field):
            self._suggest_opts["field"] = field

    def field(self, field: str) -> Suggester:
        """Set the field to fetch candidate suggestions from."""
        self._suggest_opts["field"] = field
        return self

    def size(self, size: int) -> Suggester:
        """Set the maximum number of suggestions returned per token."""
        self._suggest_opts["size"] = size
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize the suggestion keyed by its name."""
        return recursive_to_json(self._body)

    def __repr__(self) -> str:
        """Return a short description for debugging."""
        return f"{type(self).__name__}(name={self.name!r})"
