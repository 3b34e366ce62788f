"""Compound queries: queries wrapping and combining other queries."""

from __future__ import annotations

from typing import Any, Sequence

from ElasticBuilder.core.consts import BOOST_MODE_SET, ES_REF_BASE, SCORE_MODE_SET
from ElasticBuilder.core.query import Query
from ElasticBuilder.core.util import check_enum, check_type, invalid_param, recursive_to_json, set_default
from ElasticBuilder.queries.score_functions import ScoreFunction
from ElasticBuilder.utils.guards import head, omit

_FUNCTION_SCORE_REF_URL = f"{ES_REF_BASE}/query-dsl-function-score-query.html"

_invalid_score_mode_param = invalid_param(_FUNCTION_SCORE_REF_URL, "score_mode", SCORE_MODE_SET)
_invalid_boost_mode_param = invalid_param(_FUNCTION_SCORE_REF_URL, "boost_mode", BOOST_MODE_SET)

_BOOL_CLAUSES = ("must", "filter", "must_not", "should")


class BoolQuery(Query):
    """Boolean combination of queries.

    Each clause accepts a single query or a list of them and may be called
    repeatedly; queries accumulate. A clause holding exactly one query is sent
    as that query instead of a one-element list.
    """

    def __init__(self) -> None:
        """Initialize a bool query."""
        super().__init__("bool")

    def _add_queries(self, clause: str, queries: Query | Sequence[Query]) -> BoolQuery:
        """Append one query or a list of queries to a clause."""
        set_default(self._query_opts, clause, [])
        if isinstance(queries, (list, tuple)):
            for query in queries:
                check_type(query, Query)
                self._query_opts[clause].append(query)
        else:
            check_type(queries, Query)
            self._query_opts[clause].append(queries)
        return self

    def must(self, queries: Query | Sequence[Query]) -> BoolQuery:
        """Add clauses that must match and contribute to the score."""
        return self._add_queries("must", queries)

    def filter(self, queries: Query | Sequence[Query]) -> BoolQuery:  # noqa: A003
        """Add clauses that must match, in filter context (no scoring)."""
        return self._add_queries("filter", queries)

    def must_not(self, queries: Query | Sequence[Query]) -> BoolQuery:
        """Add clauses that must not match."""
        return self._add_queries("must_not", queries)

    def should(self, queries: Query | Sequence[Query]) -> BoolQuery:
        """Add clauses that should match."""
        return self._add_queries("should", queries)

    def minimum_should_match(self, min_match: int | str) -> BoolQuery:
        """Set how many ``should`` clauses must match."""
        self._query_opts["minimum_should_match"] = min_match
        return self

    def adjust_pure_negative(self, enable: bool) -> BoolQuery:
        """Toggle matching all documents when only ``must_not`` is given."""
        self._query_opts["adjust_pure_negative"] = enable
        return self

    def disable_coord(self, enable: bool) -> BoolQuery:
        """Disable the coordination factor."""
        self._query_opts["disable_coord"] = enable
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize, unwrapping clauses that hold a single query."""
        opts: dict[str, Any] = {}
        for key, value in self._query_opts.items():
            if key in _BOOL_CLAUSES and len(value) == 1:
                opts[key] = head(value)
            else:
                opts[key] = value
        return recursive_to_json({self.query_type: opts})


class BoostingQuery(Query):
    """Demotes documents matching a negative query instead of excluding them."""

    def __init__(
        self,
        positive_query: Query | None = None,
        negative_query: Query | None = None,
        negative_boost: float | None = None,
    ) -> None:
        """Initialize a boosting query."""
        super().__init__("boosting")
        if positive_query is not None:
            self.positive(positive_query)
        if negative_query is not None:
            self.negative(negative_query)
        if negative_boost is not None:
            self._query_opts["negative_boost"] = negative_boost

    def positive(self, query: Query) -> BoostingQuery:
        """Set the query documents must match.

        Raises:
            TypeError: If `query` is not a Query.
        """
        check_type(query, Query)
        self._query_opts["positive"] = query
        return self

    def negative(self, query: Query) -> BoostingQuery:
        """Set the query that lowers the score of matching documents.

        Raises:
            TypeError: If `query` is not a Query.
        """
        check_type(query, Query)
        self._query_opts["negative"] = query
        return self

    def negative_boost(self, factor: float) -> BoostingQuery:
        """Set the factor applied to documents matching the negative query."""
        self._query_opts["negative_boost"] = factor
        return self


class ConstantScoreQuery(Query):
    """Wraps a filter and gives every match the same score."""

    def __init__(self, filter_query: Query | None = None) -> None:
        """Initialize a constant score query."""
        super().__init__("constant_score")
        if filter_query is not None:
            self.filter(filter_query)

    def filter(self, filter_query: Query) -> ConstantScoreQuery:  # noqa: A003
        """Set the filter whose matches get the constant score.

        Raises:
            TypeError: If `filter_query` is not a Query.
        """
        check_type(filter_query, Query)
        self._query_opts["filter"] = filter_query
        return self

    def query(self, filter_query: Query) -> ConstantScoreQuery:
        """Alias for `filter`."""
        return self.filter(filter_query)


class DisMaxQuery(Query):
    """Scores each document by its best matching sub-query."""

    def __init__(self) -> None:
        """Initialize a dis max query."""
        super().__init__("dis_max")

    def tie_breaker(self, factor: float) -> DisMaxQuery:
        """Set how much the non-best matching clauses add to the score."""
        self._query_opts["tie_breaker"] = factor
        return self

    def queries(self, queries: Query | Sequence[Query]) -> DisMaxQuery:
        """Add one or more sub-queries."""
        set_default(self._query_opts, "queries", [])
        if isinstance(queries, (list, tuple)):
            for query in queries:
                check_type(query, Query)
                self._query_opts["queries"].append(query)
        else:
            check_type(queries, Query)
            self._query_opts["queries"].append(queries)
        return self


class FunctionScoreQuery(Query):
    """Modifies the score of documents with one or more score functions.

    With exactly one function, the function's keys are merged into the query
    body instead of being sent in a ``functions`` list.
    """

    def __init__(self) -> None:
        """Initialize a function score query."""
        super().__init__("function_score")
        self._query_opts["functions"] = []

    def query(self, query: Query) -> FunctionScoreQuery:
        """Set the query whose score is modified.

        Raises:
            TypeError: If `query` is not a Query.
        """
        check_type(query, Query)
        self._query_opts["query"] = query
        return self

    def score_mode(self, mode: str) -> FunctionScoreQuery:
        """Set how function scores are combined with each other."""
        self._query_opts["score_mode"] = check_enum(mode, SCORE_MODE_SET, _invalid_score_mode_param)
        return self

    def boost_mode(self, mode: str) -> FunctionScoreQuery:
        """Set how the function score is combined with the query score."""
        self._query_opts["boost_mode"] = check_enum(mode, BOOST_MODE_SET, _invalid_boost_mode_param)
        return self

    def max_boost(self, limit: float) -> FunctionScoreQuery:
        """Cap the score the functions may produce."""
        self._query_opts["max_boost"] = limit
        return self

    def min_score(self, limit: float) -> FunctionScoreQuery:
        """Drop documents scoring below this value."""
        self._query_opts["min_score"] = limit
        return self

    def function(self, func: ScoreFunction) -> FunctionScoreQuery:
        """Append a score function.

        Raises:
            TypeError: If `func` is not a ScoreFunction.
        """
        check_type(func, ScoreFunction)
        self._query_opts["functions"].append(func)
        return self

    def functions(self, funcs: Sequence[ScoreFunction]) -> FunctionScoreQuery:
        """Append several score functions.

        Raises:
            TypeError: If `funcs` is not a list or tuple of ScoreFunction.
        """
        check_type(funcs, (list, tuple))
        for func in funcs:
            self.function(func)
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize, inlining the function when there is only one."""
        functions = self._query_opts["functions"]
        if len(functions) == 1:
            opts = omit(self._query_opts, ("functions",))
            opts.update(recursive_to_json(head(functions)))
        else:
            opts = self._query_opts
        return recursive_to_json({self.query_type: opts})
