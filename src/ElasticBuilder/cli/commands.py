"""Command implementations for the ElasticBuilder CLI.

Commands build request bodies from recipes and hand them to an OutputWriter,
kept apart from click parameter handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ElasticBuilder.core.query import Query
from ElasticBuilder.core.request_body_search import RequestBodySearch
from ElasticBuilder.queries.term_level import TermQuery
from ElasticBuilder.recipes import filter_query, missing_query, random_sort_query
from ElasticBuilder.renderers import OutputWriter
from ElasticBuilder.utils.log import log


@dataclass(slots=True)
class RecipeCommand:
    """Render one recipe as a ``_search`` request body."""

    output_writer: OutputWriter

    def _emit(self, name: str, query: Query) -> dict[str, Any]:
        """Build the request body for one query and hand it to the writer."""
        body = RequestBodySearch().query(query).to_json()
        log.debug("Built %s: %s", name, body)
        self.output_writer.write_document(name, body)
        return body

    def missing(self, field: str) -> dict[str, Any]:
        """Documents lacking `field`."""
        return self._emit("missing", missing_query(field))

    def random_sort(self, seed: int | None) -> dict[str, Any]:
        """All documents in random order."""
        return self._emit("random_sort", random_sort_query(seed=seed))

    def filter(self, field: str, value: str, scoring: bool) -> dict[str, Any]:  # noqa: A003
        """Documents whose `field` is exactly `value`, in filter context."""
        return self._emit("filter", filter_query(TermQuery(field, value), scoring=scoring))
