"""Inner hits returned alongside nested / parent-child matches."""

from __future__ import annotations

from typing import Any, Sequence

from ElasticBuilder.core.highlight import Highlight
from ElasticBuilder.core.script import Script
from ElasticBuilder.core.sort import Sort
from ElasticBuilder.core.util import check_type, recursive_to_json


class InnerHits:
    """Inner hits definition for joining queries and field collapsing."""

    def __init__(self, name: str | None = None) -> None:
        """Initialize an inner hits."""
        self._body: dict[str, Any] = {}
        if name is not None:
            self._body["name"] = name

    def name(self, name: str) -> InnerHits:
        """Set the name the inner hits are reported under."""
        self._body["name"] = name
        return self

    def from_(self, offset: int) -> InnerHits:
        """Set the offset of the first inner hit."""
        self._body["from"] = offset
        return self

    def size(self, size: int) -> InnerHits:
        """Set the maximum number of inner hits returned."""
        self._body["size"] = size
        return self

    def sort(self, sort: Sort) -> InnerHits:
        """Append a sort criterion.

        Raises:
            TypeError: If `sort` is not a Sort.
        """
        check_type(sort, Sort)
        self._body.setdefault("sort", []).append(sort)
        return self

    def sorts(self, sorts: Sequence[Sort]) -> InnerHits:
        """Append several sort criteria."""
        for sort in sorts:
            self.sort(sort)
        return self

    def highlight(self, highlight: Highlight) -> InnerHits:
        """Highlight matches in the inner hits.

        Raises:
            TypeError: If `highlight` is not a Highlight.
        """
        check_type(highlight, Highlight)
        self._body["highlight"] = highlight
        return self

    def explain(self, enable: bool) -> InnerHits:
        """Return an explanation of how each inner hit was scored."""
        self._body["explain"] = enable
        return self

    def source(self, source: Any) -> InnerHits:
        """Control which parts of ``_source`` are returned."""
        self._body["_source"] = source
        return self

    def script_field(self, name: str, script: Script | str) -> InnerHits:
        """Add a field computed by a script for each inner hit."""
        self._body.setdefault("script_fields", {})[name] = {"script": script}
        return self

    def script_fields(self, fields: dict[str, Script | str]) -> InnerHits:
        """Add several script fields keyed by name."""
        for name, script in fields.items():
            self.script_field(name, script)
        return self

    def docvalue_fields(self, fields: Sequence[str]) -> InnerHits:
        """Return these fields read from doc values."""
        self._body["docvalue_fields"] = fields
        return self

    def version(self, enable: bool) -> InnerHits:
        """Return the version of each inner hit."""
        self._body["version"] = enable
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize the inner hits options."""
        return recursive_to_json(self._body)
