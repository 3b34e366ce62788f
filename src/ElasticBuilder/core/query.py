"""Base class for every query clause."""

from __future__ import annotations

from typing import Any

from ElasticBuilder.core.util import recursive_to_json


class Query:
    """A single query clause of the search DSL.

    The clause is held as ``{query_type: options}``; setters write into the
    options mapping and return the query so calls can be chained.

    Attributes:
        query_type: Wire name of the clause, e.g. ``bool`` or ``term``.
    """

    def __init__(self, query_type: str) -> None:
        """Initialize an empty clause.

        Args:
            query_type: Wire name of the clause.
        """
        self.query_type = query_type
        self._query_opts: dict[str, Any] = {}
        self._body: dict[str, Any] = {query_type: self._query_opts}

    def boost(self, factor: float) -> Query:
        """Set the boost applied to documents matching this query."""
        self._query_opts["boost"] = factor
        return self

    def name(self, name: str) -> Query:
        """Set the query name reported back in `matched_queries`."""
        self._query_opts["_name"] = name
        return self

    def get_dsl(self) -> dict[str, Any]:
        """Return the serialized form of this query."""
        return self.to_json()

    def to_json(self) -> Any:
        """Serialize the query into plain JSON-compatible data."""
        return recursive_to_json(self._body)

    def __repr__(self) -> str:
        """Return a short description for debugging."""
        return f"{type(self).__name__}(query_type={self.query_type!r})"


class SpanQuery(Query):
    """Marker base for clauses accepted inside span queries."""


class MultiTermQuery(Query):
    """Marker base for term-level queries that expand to several terms.

    Only these may be wrapped by `span_multi`.
    """
