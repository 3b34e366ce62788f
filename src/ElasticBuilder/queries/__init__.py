"""Query clause builders grouped by family."""

from __future__ import annotations

from ElasticBuilder.queries.compound import (
    BoolQuery,
    BoostingQuery,
    ConstantScoreQuery,
    DisMaxQuery,
    FunctionScoreQuery,
)
from ElasticBuilder.queries.full_text import (
    CombinedFieldsQuery,
    MatchPhrasePrefixQuery,
    MatchPhraseQuery,
    MatchQuery,
    MultiMatchQuery,
    QueryStringQuery,
    SimpleQueryStringQuery,
)
from ElasticBuilder.queries.geo import GeoBoundingBoxQuery, GeoDistanceQuery, GeoQuery, GeoShapeQuery
from ElasticBuilder.queries.joining import HasChildQuery, HasParentQuery, NestedQuery, ParentIdQuery
from ElasticBuilder.queries.match_all import MatchAllQuery, MatchNoneQuery
from ElasticBuilder.queries.score_functions import (
    DecayScoreFunction,
    FieldValueFactorFunction,
    RandomScoreFunction,
    ScoreFunction,
    ScriptScoreFunction,
    WeightScoreFunction,
)
from ElasticBuilder.queries.span import (
    SpanContainingQuery,
    SpanFieldMaskingQuery,
    SpanFirstQuery,
    SpanMultiTermQuery,
    SpanNearQuery,
    SpanNotQuery,
    SpanOrQuery,
    SpanTermQuery,
    SpanWithinQuery,
)
from ElasticBuilder.queries.specialized import (
    DistanceFeatureQuery,
    MoreLikeThisQuery,
    PercolateQuery,
    RankFeatureQuery,
    ScriptQuery,
    ScriptScoreQuery,
)
from ElasticBuilder.queries.term_level import (
    ExistsQuery,
    FuzzyQuery,
    IdsQuery,
    PrefixQuery,
    RangeQuery,
    RegexpQuery,
    TermQuery,
    TermsQuery,
    TermsSetQuery,
    WildcardQuery,
)

__all__ = [
    "BoolQuery",
    "BoostingQuery",
    "CombinedFieldsQuery",
    "ConstantScoreQuery",
    "DecayScoreFunction",
    "DisMaxQuery",
    "DistanceFeatureQuery",
    "ExistsQuery",
    "FieldValueFactorFunction",
    "FunctionScoreQuery",
    "FuzzyQuery",
    "GeoBoundingBoxQuery",
    "GeoDistanceQuery",
    "GeoQuery",
    "GeoShapeQuery",
    "HasChildQuery",
    "HasParentQuery",
    "IdsQuery",
    "MatchAllQuery",
    "MatchNoneQuery",
    "MatchPhrasePrefixQuery",
    "MatchPhraseQuery",
    "MatchQuery",
    "MoreLikeThisQuery",
    "MultiMatchQuery",
    "NestedQuery",
    "ParentIdQuery",
    "PercolateQuery",
    "PrefixQuery",
    "QueryStringQuery",
    "RandomScoreFunction",
    "RangeQuery",
    "RankFeatureQuery",
    "RegexpQuery",
    "ScoreFunction",
    "ScriptQuery",
    "ScriptScoreFunction",
    "ScriptScoreQuery",
    "SimpleQueryStringQuery",
    "SpanContainingQuery",
    "SpanFieldMaskingQuery",
    "SpanFirstQuery",
    "SpanMultiTermQuery",
    "SpanNearQuery",
    "SpanNotQuery",
    "SpanOrQuery",
    "SpanTermQuery",
    "SpanWithinQuery",
    "TermQuery",
    "TermsQuery",
    "TermsSetQuery",
    "WeightScoreFunction",
    "WildcardQuery",
]
