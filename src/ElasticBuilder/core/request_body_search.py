"""The top-level search request body."""

from __future__ import annotations

from typing import Any, Sequence

from ElasticBuilder.core.aggregation import Aggregation
from ElasticBuilder.core.highlight import Highlight
from ElasticBuilder.core.inner_hits import InnerHits
from ElasticBuilder.core.query import Query
from ElasticBuilder.core.rescore import Rescore
from ElasticBuilder.core.runtime_field import RuntimeField
from ElasticBuilder.core.script import Script
from ElasticBuilder.core.sort import Sort
from ElasticBuilder.core.suggester import Suggester
from ElasticBuilder.core.util import check_type, recursive_to_json
from ElasticBuilder.utils.guards import is_empty


class RequestBodySearch:
    """Body of a ``_search`` request.

    Aggregations are kept apart from the rest of the body and emitted under
    ``aggregations`` keyed by aggregation name.
    """

    def __init__(self) -> None:
        """Initialize an empty request body."""
        self._body: dict[str, Any] = {}
        self._aggs: list[Aggregation] = []

    def query(self, query: Query) -> RequestBodySearch:
        """Set the query that selects and scores hits.

        Raises:
            TypeError: If `query` is not a Query.
        """
        check_type(query, Query)
        self._body["query"] = query
        return self

    def aggregation(self, agg: Aggregation) -> RequestBodySearch:
        """Add an aggregation; it is emitted under its own name.

        Raises:
            TypeError: If `agg` is not an Aggregation.
        """
        check_type(agg, Aggregation)
        self._aggs.append(agg)
        return self

    def agg(self, agg: Aggregation) -> RequestBodySearch:
        """Alias for `aggregation`."""
        return self.aggregation(agg)

    def aggregations(self, aggs: Sequence[Aggregation]) -> RequestBodySearch:
        """Add several aggregations.

        Raises:
            TypeError: If `aggs` is not a list or tuple of Aggregation.
        """
        check_type(aggs, (list, tuple))
        for agg in aggs:
            self.aggregation(agg)
        return self

    def aggs(self, aggs: Sequence[Aggregation]) -> RequestBodySearch:
        """Alias for `aggregations`."""
        return self.aggregations(aggs)

    def timeout(self, timeout: str) -> RequestBodySearch:
        """Bound the time spent searching each shard, e.g. ``5s``."""
        self._body["timeout"] = timeout
        return self

    def from_(self, offset: int) -> RequestBodySearch:
        """Set the offset of the first hit (``from``)."""
        self._body["from"] = offset
        return self

    def size(self, size: int) -> RequestBodySearch:
        """Set the number of hits to return."""
        self._body["size"] = size
        return self

    def terminate_after(self, number_of_docs: int) -> RequestBodySearch:
        """Stop collecting on each shard after this many documents."""
        self._body["terminate_after"] = number_of_docs
        return self

    def sort(self, sort: Sort) -> RequestBodySearch:
        """Append a sort criterion.

        Raises:
            TypeError: If `sort` is not a Sort.
        """
        check_type(sort, Sort)
        self._body.setdefault("sort", []).append(sort)
        return self

    def sorts(self, sorts: Sequence[Sort]) -> RequestBodySearch:
        """Append several sort criteria."""
        for sort in sorts:
            self.sort(sort)
        return self

    def track_scores(self, enable: bool) -> RequestBodySearch:
        """Compute scores even when sorting on a field."""
        self._body["track_scores"] = enable
        return self

    def track_total_hits(self, enable: bool | int) -> RequestBodySearch:
        """Count hits accurately, or up to the given number."""
        self._body["track_total_hits"] = enable
        return self

    def source(self, source: Any) -> RequestBodySearch:
        """Control ``_source`` filtering: bool, pattern(s) or includes/excludes."""
        self._body["_source"] = source
        return self

    def stored_fields(self, fields: Sequence[str] | str) -> RequestBodySearch:
        """Return these stored fields."""
        self._body["stored_fields"] = fields
        return self

    def runtime_mapping(self, name: str, runtime_field: RuntimeField) -> RequestBodySearch:
        """Define a field computed at search time.

        Raises:
            TypeError: If `runtime_field` is not a RuntimeField.
        """
        check_type(runtime_field, RuntimeField)
        self._body.setdefault("runtime_mappings", {})[name] = runtime_field
        return self

    def runtime_mappings(self, runtime_fields: dict[str, RuntimeField]) -> RequestBodySearch:
        """Define several runtime fields keyed by name."""
        for name, runtime_field in runtime_fields.items():
            self.runtime_mapping(name, runtime_field)
        return self

    def script_field(self, name: str, script: Script | str) -> RequestBodySearch:
        """Add a field computed by a script for each hit."""
        self._body.setdefault("script_fields", {})[name] = {"script": script}
        return self

    def script_fields(self, fields: dict[str, Script | str]) -> RequestBodySearch:
        """Add several script fields keyed by name."""
        for name, script in fields.items():
            self.script_field(name, script)
        return self

    def docvalue_fields(self, fields: Sequence[Any]) -> RequestBodySearch:
        """Return these fields read from doc values."""
        self._body["docvalue_fields"] = fields
        return self

    def post_filter(self, filter_query: Query) -> RequestBodySearch:
        """Filter hits after aggregations are computed.

        Raises:
            TypeError: If `filter_query` is not a Query.
        """
        check_type(filter_query, Query)
        self._body["post_filter"] = filter_query
        return self

    def highlight(self, highlight: Highlight) -> RequestBodySearch:
        """Highlight matches in the hits.

        Raises:
            TypeError: If `highlight` is not a Highlight.
        """
        check_type(highlight, Highlight)
        self._body["highlight"] = highlight
        return self

    def rescore(self, rescore: Rescore) -> RequestBodySearch:
        """Add a rescorer. A second rescorer turns ``rescore`` into a list."""
        check_type(rescore, Rescore)
        if "rescore" in self._body:
            if not isinstance(self._body["rescore"], list):
                self._body["rescore"] = [self._body["rescore"]]
            self._body["rescore"].append(rescore)
        else:
            self._body["rescore"] = rescore
        return self

    def explain(self, enable: bool) -> RequestBodySearch:
        """Return an explanation of how each hit was scored."""
        self._body["explain"] = enable
        return self

    def version(self, enable: bool) -> RequestBodySearch:
        """Return the version of each hit."""
        self._body["version"] = enable
        return self

    def index_boost(self, index: str, boost: float) -> RequestBodySearch:
        """Boost the scores of hits from one index."""
        self._body.setdefault("indices_boost", []).append({index: boost})
        return self

    def min_score(self, score: float) -> RequestBodySearch:
        """Drop hits scoring below this value."""
        self._body["min_score"] = score
        return self

    def collapse(
        self,
        field: str,
        inner_hits: InnerHits | None = None,
        max_concurrent_group_requests: int | None = None,
    ) -> RequestBodySearch:
        """Collapse results on a field, optionally expanding each group."""
        collapse: dict[str, Any] = {"field": field}
        if inner_hits is not None:
            check_type(inner_hits, InnerHits)
            collapse["inner_hits"] = inner_hits
            if max_concurrent_group_requests is not None:
                collapse["max_concurrent_group_searches"] = max_concurrent_group_requests
        self._body["collapse"] = collapse
        return self

    def search_after(self, values: Sequence[Any]) -> RequestBodySearch:
        """Page from the sort values of the last hit of the previous page."""
        self._body["search_after"] = values
        return self

    def suggest(self, suggester: Suggester) -> RequestBodySearch:
        """Add a suggestion under the ``suggest`` section, keyed by its name.

        Raises:
            TypeError: If `suggester` is not a Suggester.
        """
        check_type(suggester, Suggester)
        self._body.setdefault("suggest", {}).update(suggester.to_json())
        return self

    def suggest_text(self, text: str) -> RequestBodySearch:
        """Set the global text shared by suggestions that give none."""
        self._body.setdefault("suggest", {})["text"] = text
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize the body, gathering aggregations under ``aggregations``."""
        body = recursive_to_json(self._body)
        if is_empty(self._aggs):
            return body
        aggregations: dict[str, Any] = {}
        for agg in recursive_to_json(self._aggs):
            aggregations.update(agg)
        body["aggregations"] = aggregations
        return body
