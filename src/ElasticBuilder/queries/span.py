"""Span queries: positional matching over terms.

Every span query derives from the `SpanQuery` marker, and only span queries
may be nested inside one another. `SpanMultiTermQuery` is the one bridge from
ordinary queries: it wraps a multi-term query such as `prefix` or `wildcard`.
"""

from __future__ import annotations

from typing import Any, Sequence

from ElasticBuilder.core.query import MultiTermQuery, SpanQuery
from ElasticBuilder.core.util import check_type, recursive_to_json
from ElasticBuilder.utils.guards import has


def _check_clauses(clauses: Sequence[SpanQuery]) -> list[SpanQuery]:
    """Validate span clauses and return them as a list.

    Raises:
        TypeError: If `clauses` is not a list or tuple of SpanQuery.
    """
    check_type(clauses, (list, tuple))
    for clause in clauses:
        check_type(clause, SpanQuery)
    return list(clauses)


class SpanTermQuery(SpanQuery):
    """Span holding a single term.

    Serializes like `TermQuery`: a lone value collapses into
    ``{span_term: {field: value}}``.
    """

    def __init__(self, field: str | None = None, value: Any = None) -> None:
        """Initialize a span term query."""
        super().__init__("span_term")
        self._field = field
        if value is not None:
            self._query_opts["value"] = value

    def field(self, field: str) -> SpanTermQuery:
        """Set the field to match."""
        self._field = field
        return self

    def value(self, value: Any) -> SpanTermQuery:
        """Set the term to look for."""
        self._query_opts["value"] = value
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize, collapsing a lone value.

        Raises:
            ValueError: If no value was set.
        """
        if not has(self._query_opts, "value"):
            raise ValueError("Value is required for Span term query!")
        opts = self._query_opts["value"] if len(self._query_opts) == 1 else self._query_opts
        return recursive_to_json({self.query_type: {self._field: opts}})


class SpanMultiTermQuery(SpanQuery):
    """Wraps a multi-term query (prefix, wildcard, regexp, fuzzy, range) as a span."""

    def __init__(self, multi_term_query: MultiTermQuery | None = None) -> None:
        """Initialize a span multi term query."""
        super().__init__("span_multi")
        if multi_term_query is not None:
            self.match(multi_term_query)

    def match(self, multi_term_query: MultiTermQuery) -> SpanMultiTermQuery:
        """Set the multi term query to wrap.

        Raises:
            TypeError: If `multi_term_query` is not a MultiTermQuery.
        """
        check_type(multi_term_query, MultiTermQuery)
        self._query_opts["match"] = multi_term_query
        return self


class SpanFirstQuery(SpanQuery):
    """Matches spans near the beginning of a field."""

    def __init__(self, span_query: SpanQuery | None = None) -> None:
        """Initialize a span first query."""
        super().__init__("span_first")
        if span_query is not None:
            self.match(span_query)

    def match(self, span_query: SpanQuery) -> SpanFirstQuery:
        """Set the span that must appear near the start of the field.

        Raises:
            TypeError: If `span_query` is not a SpanQuery.
        """
        check_type(span_query, SpanQuery)
        self._query_opts["match"] = span_query
        return self

    def end(self, limit: int) -> SpanFirstQuery:
        """Set the maximum end position of a matching span."""
        self._query_opts["end"] = limit
        return self


class SpanNearQuery(SpanQuery):
    """Matches spans which are near one another."""

    def __init__(self) -> None:
        """Initialize a span near query."""
        super().__init__("span_near")

    def clauses(self, clauses: Sequence[SpanQuery]) -> SpanNearQuery:
        """Set the spans that must appear near each other."""
        self._query_opts["clauses"] = _check_clauses(clauses)
        return self

    def slop(self, slop: int) -> SpanNearQuery:
        """Set the maximum number of intervening positions."""
        self._query_opts["slop"] = slop
        return self

    def in_order(self, enable: bool) -> SpanNearQuery:
        """Require the clauses to match in order."""
        self._query_opts["in_order"] = enable
        return self


class SpanOrQuery(SpanQuery):
    """Matches the union of its span clauses."""

    def __init__(self) -> None:
        """Initialize a span or query."""
        super().__init__("span_or")

    def clauses(self, clauses: Sequence[SpanQuery]) -> SpanOrQuery:
        """Set the spans any of which may match."""
        self._query_opts["clauses"] = _check_clauses(clauses)
        return self


class SpanNotQuery(SpanQuery):
    """Removes spans overlapping with another span query."""

    def __init__(self) -> None:
        """Initialize a span not query."""
        super().__init__("span_not")

    def include(self, span_query: SpanQuery) -> SpanNotQuery:
        """Set the span whose matches are kept.

        Raises:
            TypeError: If `span_query` is not a SpanQuery.
        """
        check_type(span_query, SpanQuery)
        self._query_opts["include"] = span_query
        return self

    def exclude(self, span_query: SpanQuery) -> SpanNotQuery:
        """Set the span that must not overlap the included one.

        Raises:
            TypeError: If `span_query` is not a SpanQuery.
        """
        check_type(span_query, SpanQuery)
        self._query_opts["exclude"] = span_query
        return self

    def pre(self, pre: int) -> SpanNotQuery:
        """Set how many positions before the include span may not overlap."""
        self._query_opts["pre"] = pre
        return self

    def post(self, post: int) -> SpanNotQuery:
        """Set how many positions after the include span may not overlap."""
        self._query_opts["post"] = post
        return self

    def dist(self, dist: int) -> SpanNotQuery:
        """Shorthand for equal `pre` and `post`."""
        self._query_opts["dist"] = dist
        return self


class LittleBigOptions:
    """The ``little`` / ``big`` pair of the containing and within queries."""

    def little(self, span_query: SpanQuery):
        """Set the inner span.

        Raises:
            TypeError: If `span_query` is not a SpanQuery.
        """
        check_type(span_query, SpanQuery)
        self._query_opts["little"] = span_query  # type: ignore[attr-defined]
        return self

    def big(self, span_query: SpanQuery):
        """Set the outer span.

        Raises:
            TypeError: If `span_query` is not a SpanQuery.
        """
        check_type(span_query, SpanQuery)
        self._query_opts["big"] = span_query  # type: ignore[attr-defined]
        return self


class SpanContainingQuery(LittleBigOptions, SpanQuery):
    """Returns `big` spans that enclose a `little` span."""

    def __init__(self) -> None:
        """Initialize a span containing query."""
        super().__init__("span_containing")


class SpanWithinQuery(LittleBigOptions, SpanQuery):
    """Returns `little` spans enclosed by a `big` span."""

    def __init__(self) -> None:
        """Initialize a span within query."""
        super().__init__("span_within")


class SpanFieldMaskingQuery(SpanQuery):
    """Lets span queries spanning different fields pretend to share one."""

    def __init__(self, field: str | None = None, span_query: SpanQuery | None = None) -> None:
        """Initialize a span field masking query."""
        super().__init__("field_masking_span")
        if field is not None:
            self._query_opts["field"] = field
        if span_query is not None:
            self.query(span_query)

    def query(self, span_query: SpanQuery) -> SpanFieldMaskingQuery:
        """Set the span query run on the masked field.

        Raises:
            TypeError: If `span_query` is not a SpanQuery.
        """
        check_type(span_query, SpanQuery)
        self._query_opts["query"] = span_query
        return self

    def field(self, field: str) -> SpanFieldMaskingQuery:
        """Set the field the span query pretends to run on."""
        self._query_opts["field"] = field
        return self
