"""Core building blocks: base classes, shared clauses and helpers."""

from __future__ import annotations

from ElasticBuilder.core import consts, util
from ElasticBuilder.core.aggregation import Aggregation
from ElasticBuilder.core.geo import GeoPoint, GeoShape, IndexedShape
from ElasticBuilder.core.highlight import Highlight
from ElasticBuilder.core.inner_hits import InnerHits
from ElasticBuilder.core.query import MultiTermQuery, Query, SpanQuery
from ElasticBuilder.core.request_body_search import RequestBodySearch
from ElasticBuilder.core.rescore import Rescore
from ElasticBuilder.core.runtime_field import RuntimeField
from ElasticBuilder.core.script import Script
from ElasticBuilder.core.sort import Sort
from ElasticBuilder.core.suggester import Suggester
from ElasticBuilder.core.util import check_type, invalid_param, recursive_to_json

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
    "invalid_param",
    "recursive_to_json",
    "util",
]
