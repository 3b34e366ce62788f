"""Ready-made queries for common needs."""

from __future__ import annotations

from ElasticBuilder.core.query import Query
from ElasticBuilder.core.util import check_type
from ElasticBuilder.queries.compound import BoolQuery, FunctionScoreQuery
from ElasticBuilder.queries.match_all import MatchAllQuery
from ElasticBuilder.queries.score_functions import RandomScoreFunction
from ElasticBuilder.queries.term_level import ExistsQuery


def missing_query(field: str) -> BoolQuery:
    """Match documents with no indexed value for `field`.

    Args:
        field: Field that must be missing.

    Returns:
        A ``bool`` query with a ``must_not`` ``exists`` clause.
    """
    return BoolQuery().must_not(ExistsQuery(field))


def random_sort_query(query: Query | None = None, seed: int | str | None = None) -> FunctionScoreQuery:
    """Return documents in random order.

    Args:
        query: Query selecting the documents. Defaults to ``match_all``.
        seed: Seed making the order reproducible across requests.

    Returns:
        A ``function_score`` query with a ``random_score`` function.

    Raises:
        TypeError: If `query` is not a `Query`.
    """
    if query is None:
        query = MatchAllQuery()
    check_type(query, Query)
    func = RandomScoreFunction()
    if seed is not None:
        func.seed(seed)
    return FunctionScoreQuery().query(query).function(func)


def filter_query(query: Query, scoring: bool = False) -> BoolQuery:
    """Run `query` in filter context.

    Args:
        query: Query to use as the filter.
        scoring: Add a ``match_all`` must clause so every hit scores 1.0
            instead of 0.

    Returns:
        A ``bool`` query with a ``filter`` clause.

    Raises:
        TypeError: If `query` is not a `Query`.
    """
    check_type(query, Query)
    bool_query = BoolQuery().filter(query)
    if scoring is True:
        bool_query.must(MatchAllQuery())
    return bool_query
