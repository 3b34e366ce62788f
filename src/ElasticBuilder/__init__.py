"""ElasticBuilder: fluent builders for the Elasticsearch query DSL.

Build a request body by chaining setters, then call ``to_json()``::

    from ElasticBuilder import BoolQuery, RequestBodySearch, TermQuery

    body = (
        RequestBodySearch()
        .query(BoolQuery().filter(TermQuery("user", "kimchy")))
        .size(10)
        .to_json()
    )
"""

from __future__ import annotations

from ElasticBuilder import recipes
from ElasticBuilder.aggregations import *  # noqa: F401,F403
from ElasticBuilder.aggregations import __all__ as _aggregations_all
from ElasticBuilder.core import (
    Aggregation,
    GeoPoint,
    GeoShape,
    Highlight,
    IndexedShape,
    InnerHits,
    MultiTermQuery,
    Query,
    RequestBodySearch,
    Rescore,
    RuntimeField,
    Script,
    Sort,
    SpanQuery,
    Suggester,
    check_type,
    consts,
    invalid_param,
    recursive_to_json,
)
from ElasticBuilder.queries import *  # noqa: F401,F403
from ElasticBuilder.queries import __all__ as _queries_all
from ElasticBuilder.recipes import filter_query, missing_query, random_sort_query
from ElasticBuilder.suggesters import *  # noqa: F401,F403
from ElasticBuilder.suggesters import __all__ as _suggesters_all

__version__ = "0.1.0"

__all__ = [
    "Aggregation",
    "GeoPoint",
    "GeoShape",
    "Highlight",
    "IndexedShape",
    "InnerHits",
    "MultiTermQuery",
    "Query",
    "RequestBodySearch",
    "Rescore",
    "RuntimeField",
    "Script",
    "Sort",
    "SpanQuery",
    "Suggester",
    "check_type",
    "consts",
    "filter_query",
    "invalid_param",
    "missing_query",
    "random_sort_query",
    "recipes",
    "recursive_to_json",
    *_queries_all,
    *_aggregations_all,
    *_suggesters_all,
]
