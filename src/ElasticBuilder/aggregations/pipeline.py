"""Pipeline aggregations: work on the output of other aggregations."""

from __future__ import annotations

from typing import Any, NoReturn, Sequence

from ElasticBuilder.core.aggregation import Aggregation
from ElasticBuilder.core.consts import ES_REF_BASE, GAP_POLICY_SET
from ElasticBuilder.core.script import Script
from ElasticBuilder.core.sort import Sort
from ElasticBuilder.core.util import check_enum, check_type, invalid_param, unsupported

BucketsPath = str | dict[str, str]

_invalid_gap_policy_param = invalid_param("", "gap_policy", GAP_POLICY_SET)


class PipelineOptions:
    """Options shared by pipeline aggregations.

    `buckets_path` points at the metric to work on, e.g. ``sales_per_month>sales``.
    """

    _aggs_def: dict[str, Any]
    _REF_URL = ""

    def __init__(self, name: str | None, agg_type: str, buckets_path: BucketsPath | None = None) -> None:
        """Initialize the aggregation with the path to the metric it reads."""
        super().__init__(name, agg_type)  # type: ignore[call-arg]
        if buckets_path is not None:
            self._aggs_def["buckets_path"] = buckets_path

    def buckets_path(self, path: BucketsPath):
        """Set the path, or named paths, to the metric this aggregation reads."""
        self._aggs_def["buckets_path"] = path
        return self

    def gap_policy(self, policy: str):
        """Set what happens to buckets with missing data.

        Raises:
            ValueError: If policy is not ``skip``, ``insert_zeros`` or ``keep_values``.
        """
        self._aggs_def["gap_policy"] = check_enum(
            policy, GAP_POLICY_SET, _invalid_gap_policy_param, ref_url=self._REF_URL
        )
        return self

    def format(self, fmt: str):  # noqa: A003
        """Set the format of ``value_as_string`` in the response."""
        self._aggs_def["format"] = fmt
        return self


class AvgBucketAggregation(PipelineOptions, Aggregation):
    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-avg-bucket-aggregation.html"

    def __init__(self, name: str | None = None, buckets_path: BucketsPath | None = None) -> None:
        """Initialize an avg bucket aggregation."""
        super().__init__(name, "avg_bucket", buckets_path)


class MaxBucketAggregation(PipelineOptions, Aggregation):
    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-max-bucket-aggregation.html"

    def __init__(self, name: str | None = None, buckets_path: BucketsPath | None = None) -> None:
        """Initialize a max bucket aggregation."""
        super().__init__(name, "max_bucket", buckets_path)


class MinBucketAggregation(PipelineOptions, Aggregation):
    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-min-bucket-aggregation.html"

    def __init__(self, name: str | None = None, buckets_path: BucketsPath | None = None) -> None:
        """Initialize a min bucket aggregation."""
        super().__init__(name, "min_bucket", buckets_path)


class SumBucketAggregation(PipelineOptions, Aggregation):
    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-sum-bucket-aggregation.html"

    def __init__(self, name: str | None = None, buckets_path: BucketsPath | None = None) -> None:
        """Initialize a sum bucket aggregation."""
        super().__init__(name, "sum_bucket", buckets_path)


class StatsBucketAggregation(PipelineOptions, Aggregation):
    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-stats-bucket-aggregation.html"

    def __init__(self, name: str | None = None, buckets_path: BucketsPath | None = None) -> None:
        """Initialize a stats bucket aggregation."""
        super().__init__(name, "stats_bucket", buckets_path)


class DerivativeAggregation(PipelineOptions, Aggregation):
    """Derivative of a metric across histogram buckets."""

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-derivative-aggregation.html"

    def __init__(self, name: str | None = None, buckets_path: BucketsPath | None = None) -> None:
        """Initialize a derivative aggregation."""
        super().__init__(name, "derivative", buckets_path)

    def unit(self, unit: str) -> DerivativeAggregation:
        """Set the x-axis unit of the derivative, e.g. ``1d``."""
        self._aggs_def["unit"] = unit
        return self


class CumulativeSumAggregation(PipelineOptions, Aggregation):
    """Running total of a metric across histogram buckets."""

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-cumulative-sum-aggregation.html"

    def __init__(self, name: str | None = None, buckets_path: BucketsPath | None = None) -> None:
        """Initialize a cumulative sum aggregation."""
        super().__init__(name, "cumulative_sum", buckets_path)

    def gap_policy(self, policy: str) -> NoReturn:
        """Not accepted by the cumulative sum aggregation.

        Raises:
            ValueError: Always.
        """
        unsupported("CumulativeSumAggregation", "gap_policy", self._REF_URL)


class BucketScriptAggregation(PipelineOptions, Aggregation):
    """Computes a per-bucket value with a script over other metrics."""

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-bucket-script-aggregation.html"

    def __init__(self, name: str | None = None, buckets_path: BucketsPath | None = None) -> None:
        """Initialize a bucket script aggregation."""
        super().__init__(name, "bucket_script", buckets_path)

    def script(self, script: Script | str) -> BucketScriptAggregation:
        """Set the script computing the bucket value from `buckets_path` variables."""
        self._aggs_def["script"] = script
        return self


class BucketSelectorAggregation(PipelineOptions, Aggregation):
    """Keeps only the buckets for which a script returns true."""

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-bucket-selector-aggregation.html"

    def __init__(self, name: str | None = None, buckets_path: BucketsPath | None = None) -> None:
        """Initialize a bucket selector aggregation."""
        super().__init__(name, "bucket_selector", buckets_path)

    def format(self, fmt: str) -> NoReturn:  # noqa: A003
        """Not accepted by the bucket selector aggregation.

        Raises:
            ValueError: Always.
        """
        unsupported("BucketSelectorAggregation", "format", self._REF_URL)

    def script(self, script: Script | str) -> BucketSelectorAggregation:
        """Set the script deciding whether a bucket is kept."""
        self._aggs_def["script"] = script
        return self


class BucketSortAggregation(PipelineOptions, Aggregation):
    """Sorts and truncates the buckets of its parent aggregation."""

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-bucket-sort-aggregation.html"

    def __init__(self, name: str | None = None) -> None:
        """Initialize a bucket sort aggregation."""
        super().__init__(name, "bucket_sort")

    def sort(self, sorts: Sequence[Sort]) -> BucketSortAggregation:
        """Set the sort criteria of the parent buckets.

        Raises:
            TypeError: If `sorts` is not a list of Sort.
        """
        check_type(sorts, (list, tuple))
        for sort in sorts:
            check_type(sort, Sort)
        self._aggs_def["sort"] = list(sorts)
        return self

    def from_(self, offset: int) -> BucketSortAggregation:
        """Set how many leading buckets to drop (``from``)."""
        self._aggs_def["from"] = offset
        return self

    def size(self, size: int) -> BucketSortAggregation:
        """Set how many buckets are kept."""
        self._aggs_def["size"] = size
        return self


class ExtendedStatsBucketAggregation(PipelineOptions, Aggregation):
    """`stats_bucket` plus variance and standard deviation."""

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-extended-stats-bucket-aggregation.html"

    def __init__(self, name: str | None = None, buckets_path: BucketsPath | None = None) -> None:
        """Initialize an extended stats bucket aggregation."""
        super().__init__(name, "extended_stats_bucket", buckets_path)

    def sigma(self, sigma: float) -> ExtendedStatsBucketAggregation:
        """Set how many standard deviations the reported bounds span."""
        self._aggs_def["sigma"] = sigma
        return self


class PercentilesBucketAggregation(PipelineOptions, Aggregation):
    """Percentiles of a metric across the buckets of a sibling aggregation."""

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-percentiles-bucket-aggregation.html"

    def __init__(self, name: str | None = None, buckets_path: BucketsPath | None = None) -> None:
        """Initialize a percentiles bucket aggregation."""
        super().__init__(name, "percentiles_bucket", buckets_path)

    def percents(self, percents: Sequence[float]) -> PercentilesBucketAggregation:
        """Set the percentiles to compute.

        Raises:
            TypeError: If `percents` is not a list or tuple.
        """
        check_type(percents, (list, tuple))
        self._aggs_def["percents"] = list(percents)
        return self


class SerialDifferencingAggregation(PipelineOptions, Aggregation):
    """Difference between a metric and its value `lag` buckets earlier."""

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-serialdiff-aggregation.html"

    def __init__(self, name: str | None = None, buckets_path: BucketsPath | None = None) -> None:
        """Initialize a serial differencing aggregation."""
        super().__init__(name, "serial_diff", buckets_path)

    def lag(self, lag: int) -> SerialDifferencingAggregation:
        """Set how many buckets back the subtracted value is taken from."""
        self._aggs_def["lag"] = lag
        return self


class MovingFunctionAggregation(PipelineOptions, Aggregation):
    """Runs a script over a sliding window of buckets."""

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-pipeline-movfn-aggregation.html"

    def __init__(
        self,
        name: str | None = None,
        buckets_path: BucketsPath | None = None,
        window: int | None = None,
        script: str | None = None,
    ) -> None:
        """Initialize a moving function aggregation."""
        super().__init__(name, "moving_fn", buckets_path)
        if window is not None:
            self._aggs_def["window"] = window
        if script is not None:
            self._aggs_def["script"] = script

    def window(self, window: int) -> MovingFunctionAggregation:
        """Set the size of the window."""
        self._aggs_def["window"] = window
        return self

    def shift(self, shift: int) -> MovingFunctionAggregation:
        """Shift the window right by this many buckets."""
        self._aggs_def["shift"] = shift
        return self

    def script(self, script: str) -> MovingFunctionAggregation:
        """Set the script run on each window, e.g. ``MovingFunctions.unweightedAvg(values)``."""
        self._aggs_def["script"] = script
        return self
