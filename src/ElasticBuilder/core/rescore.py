"""Rescoring of the top hits with a secondary query."""

from __future__ import annotations

from typing import Any

from ElasticBuilder.core.consts import ES_REF_BASE, RESCORE_MODE_SET
from ElasticBuilder.core.query import Query
from ElasticBuilder.core.util import check_enum, check_type, invalid_param, recursive_to_json

ES_REF_URL = f"{ES_REF_BASE}/filter-search-results.html#rescore"

_invalid_score_mode_param = invalid_param(ES_REF_URL, "score_mode", RESCORE_MODE_SET)


class Rescore:
    """Query rescorer applied to the top `window_size` hits of each shard."""

    def __init__(self, window_size: int | None = None, rescore_query: Query | None = None) -> None:
        """Initialize a rescorer."""
        self._rescore_opts: dict[str, Any] = {}
        self._body: dict[str, Any] = {"query": self._rescore_opts}
        if window_size is not None:
            self._body["window_size"] = window_size
        if rescore_query is not None:
            self.rescore_query(rescore_query)

    def window_size(self, window_size: int) -> Rescore:
        """Set how many top hits of each shard are rescored."""
        self._body["window_size"] = window_size
        return self

    def rescore_query(self, rescore_query: Query) -> Rescore:
        """Set the query used to rescore.

        Raises:
            TypeError: If `rescore_query` is not a Query.
        """
        check_type(rescore_query, Query)
        self._rescore_opts["rescore_query"] = rescore_query
        return self

    def query_weight(self, weight: float) -> Rescore:
        """Set the weight of the original query score."""
        self._rescore_opts["query_weight"] = weight
        return self

    def rescore_query_weight(self, weight: float) -> Rescore:
        """Set the weight of the rescore query score."""
        self._rescore_opts["rescore_query_weight"] = weight
        return self

    def score_mode(self, mode: str) -> Rescore:
        """Set how scores are combined: total, multiply, min, max or avg."""
        self._rescore_opts["score_mode"] = check_enum(mode, RESCORE_MODE_SET, _invalid_score_mode_param)
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize the rescorer."""
        return recursive_to_json(self._body)
