"""Aggregation builders: metrics, bucket and pipeline."""

from __future__ import annotations

from ElasticBuilder.aggregations.bucket import (
    DateHistogramAggregation,
    DateRangeAggregation,
    FilterAggregation,
    FiltersAggregation,
    GlobalAggregation,
    HistogramAggregation,
    MissingAggregation,
    NestedAggregation,
    RangeAggregation,
    ReverseNestedAggregation,
    SignificantTermsAggregation,
    TermsAggregation,
)
from ElasticBuilder.aggregations.composite import (
    CompositeAggregation,
    DateHistogramValuesSource,
    HistogramValuesSource,
    TermsValuesSource,
    ValuesSource,
)
from ElasticBuilder.aggregations.metrics import (
    AvgAggregation,
    CardinalityAggregation,
    ExtendedStatsAggregation,
    MaxAggregation,
    MinAggregation,
    PercentileRanksAggregation,
    PercentilesAggregation,
    StatsAggregation,
    SumAggregation,
    TopHitsAggregation,
    ValueCountAggregation,
    WeightedAverageAggregation,
)
from ElasticBuilder.aggregations.pipeline import (
    AvgBucketAggregation,
    BucketScriptAggregation,
    BucketSelectorAggregation,
    BucketSortAggregation,
    CumulativeSumAggregation,
    DerivativeAggregation,
    ExtendedStatsBucketAggregation,
    MaxBucketAggregation,
    MinBucketAggregation,
    MovingFunctionAggregation,
    PercentilesBucketAggregation,
    SerialDifferencingAggregation,
    StatsBucketAggregation,
    SumBucketAggregation,
)

__all__ = [
    "AvgAggregation",
    "AvgBucketAggregation",
    "BucketScriptAggregation",
    "BucketSelectorAggregation",
    "BucketSortAggregation",
    "CardinalityAggregation",
    "CompositeAggregation",
    "CumulativeSumAggregation",
    "DateHistogramAggregation",
    "DateHistogramValuesSource",
    "DateRangeAggregation",
    "DerivativeAggregation",
    "ExtendedStatsAggregation",
    "ExtendedStatsBucketAggregation",
    "FilterAggregation",
    "FiltersAggregation",
    "GlobalAggregation",
    "HistogramAggregation",
    "HistogramValuesSource",
    "MaxAggregation",
    "MaxBucketAggregation",
    "MinAggregation",
    "MinBucketAggregation",
    "MissingAggregation",
    "MovingFunctionAggregation",
    "NestedAggregation",
    "PercentileRanksAggregation",
    "PercentilesAggregation",
    "PercentilesBucketAggregation",
    "RangeAggregation",
    "ReverseNestedAggregation",
    "SerialDifferencingAggregation",
    "SignificantTermsAggregation",
    "StatsAggregation",
    "StatsBucketAggregation",
    "SumAggregation",
    "SumBucketAggregation",
    "TermsAggregation",
    "TermsValuesSource",
    "TopHitsAggregation",
    "ValueCountAggregation",
    "ValuesSource",
    "WeightedAverageAggregation",
]
