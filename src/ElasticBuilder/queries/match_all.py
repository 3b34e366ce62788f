"""Queries matching every document or none."""

from __future__ import annotations

from ElasticBuilder.core.query import Query


class MatchAllQuery(Query):
    """Matches all documents with a score of 1.0 (or `boost`)."""

    def __init__(self) -> None:
        """Initialize a match all query."""
        super().__init__("match_all")


class MatchNoneQuery(Query):
    """Matches no documents."""

    def __init__(self) -> None:
        """Initialize a match none query."""
        super().__init__("match_none")
