"""Metrics aggregations: compute values over the documents of a bucket."""

from __future__ import annotations

from typing import Any, NoReturn, Sequence

from ElasticBuilder.core.aggregation import Aggregation
from ElasticBuilder.core.consts import ES_REF_BASE
from ElasticBuilder.core.highlight import Highlight
from ElasticBuilder.core.script import Script
from ElasticBuilder.core.sort import Sort
from ElasticBuilder.core.util import check_type, set_default, unsupported


class MetricsOptions:
    """Value source options shared by metrics aggregations.

    The value is read from `field` or computed by `script`.
    """

    _aggs_def: dict[str, Any]

    def __init__(self, name: str | None, agg_type: str, field: str | None = None) -> None:
        """Initialize the aggregation, reading values from `field` if given."""
        super().__init__(name, agg_type)  # type: ignore[call-arg]
        if field is not None:
            self._aggs_def["field"] = field

    def field(self, field: str):
        """Set the field to read values from."""
        self._aggs_def["field"] = field
        return self

    def script(self, script: Script):
        """Compute the values with a script.

        Raises:
            TypeError: If `script` is not a Script.
        """
        check_type(script, Script)
        self._aggs_def["script"] = script
        return self

    def missing(self, value: Any):
        """Set the value used for documents lacking the field."""
        self._aggs_def["missing"] = value
        return self

    def format(self, fmt: str):  # noqa: A003
        """Set the format of ``value_as_string`` in the response."""
        self._aggs_def["format"] = fmt
        return self


class AvgAggregation(MetricsOptions, Aggregation):
    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize an avg aggregation."""
        super().__init__(name, "avg", field)


class MinAggregation(MetricsOptions, Aggregation):
    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize a min aggregation."""
        super().__init__(name, "min", field)


class MaxAggregation(MetricsOptions, Aggregation):
    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize a max aggregation."""
        super().__init__(name, "max", field)


class SumAggregation(MetricsOptions, Aggregation):
    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize a sum aggregation."""
        super().__init__(name, "sum", field)


class ValueCountAggregation(MetricsOptions, Aggregation):
    """Counts the values extracted from documents."""

    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize a value count aggregation."""
        super().__init__(name, "value_count", field)


class CardinalityAggregation(MetricsOptions, Aggregation):
    """Approximate count of distinct values."""

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-metrics-cardinality-aggregation.html"

    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize a cardinality aggregation."""
        super().__init__(name, "cardinality", field)

    def format(self, fmt: str) -> NoReturn:  # noqa: A003
        """Not accepted by the cardinality aggregation.

        Raises:
            ValueError: Always.
        """
        unsupported("CardinalityAggregation", "format", self._REF_URL)

    def precision_threshold(self, threshold: int) -> CardinalityAggregation:
        """Set the count below which results are expected to be close to exact."""
        self._aggs_def["precision_threshold"] = threshold
        return self


class StatsAggregation(MetricsOptions, Aggregation):
    """Returns min, max, sum, count and avg together."""

    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize a stats aggregation."""
        super().__init__(name, "stats", field)


class ExtendedStatsAggregation(MetricsOptions, Aggregation):
    """`stats` plus variance, standard deviation and its bounds."""

    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize an extended stats aggregation."""
        super().__init__(name, "extended_stats", field)

    def sigma(self, sigma: float) -> ExtendedStatsAggregation:
        """Set how many standard deviations the reported bounds span."""
        self._aggs_def["sigma"] = sigma
        return self


class PercentileOptions(MetricsOptions):
    """Algorithm and response shape options of the percentile aggregations."""

    def keyed(self, keyed: bool):
        """Return buckets as a hash keyed by percentile instead of a list."""
        self._aggs_def["keyed"] = keyed
        return self

    def tdigest(self, compression: int):
        """Use the TDigest algorithm with the given compression."""
        self._aggs_def["tdigest"] = {"compression": compression}
        return self

    def compression(self, compression: int):
        """Alias for `tdigest`."""
        return self.tdigest(compression)

    def hdr(self, number_of_sig_value_digits: int):
        """Use HDR Histogram with the given precision."""
        self._aggs_def["hdr"] = {"number_of_significant_value_digits": number_of_sig_value_digits}
        return self


class PercentilesAggregation(PercentileOptions, Aggregation):
    """Approximate percentiles of a numeric field."""

    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize a percentiles aggregation."""
        super().__init__(name, "percentiles", field)

    def percents(self, percents: Sequence[float]) -> PercentilesAggregation:
        """Set the percentiles to compute, e.g. ``[95, 99, 99.9]``.

        Raises:
            TypeError: If `percents` is not a list or tuple.
        """
        check_type(percents, (list, tuple))
        self._aggs_def["percents"] = list(percents)
        return self


class PercentileRanksAggregation(PercentileOptions, Aggregation):
    """Percentile rank of each of the given values."""

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-metrics-percentile-rank-aggregation.html"

    def __init__(
        self,
        name: str | None = None,
        field: str | None = None,
        values: Sequence[float] | None = None,
    ) -> None:
        """Initialize a percentile ranks aggregation."""
        super().__init__(name, "percentile_ranks", field)
        if values is not None:
            self.values(values)

    def format(self, fmt: str) -> NoReturn:  # noqa: A003
        """Not accepted by the percentile ranks aggregation.

        Raises:
            ValueError: Always.
        """
        unsupported("PercentileRanksAggregation", "format", self._REF_URL)

    def values(self, values: Sequence[float]) -> PercentileRanksAggregation:
        """Set the values whose ranks are computed.

        Raises:
            TypeError: If `values` is not a list or tuple.
        """
        check_type(values, (list, tuple))
        self._aggs_def["values"] = list(values)
        return self


class TopHitsAggregation(MetricsOptions, Aggregation):
    """Returns the most relevant documents of each bucket.

    It reads whole documents, so the value source options of other metrics
    aggregations are rejected.
    """

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-metrics-top-hits-aggregation.html"

    def __init__(self, name: str | None = None) -> None:
        """Initialize a top hits aggregation."""
        super().__init__(name, "top_hits")

    def field(self, field: str) -> NoReturn:
        """Not accepted; top hits read whole documents."""
        unsupported("TopHitsAggregation", "field", self._REF_URL)

    def script(self, script: Script) -> NoReturn:
        """Not accepted; top hits read whole documents."""
        unsupported("TopHitsAggregation", "script", self._REF_URL)

    def missing(self, value: Any) -> NoReturn:
        """Not accepted; top hits read whole documents."""
        unsupported("TopHitsAggregation", "missing", self._REF_URL)

    def format(self, fmt: str) -> NoReturn:  # noqa: A003
        """Not accepted; top hits read whole documents."""
        unsupported("TopHitsAggregation", "format", self._REF_URL)

    def from_(self, offset: int) -> TopHitsAggregation:
        """Set the offset of the first hit (``from``)."""
        self._aggs_def["from"] = offset
        return self

    def size(self, size: int) -> TopHitsAggregation:
        """Set the maximum number of hits per bucket."""
        self._aggs_def["size"] = size
        return self

    def sort(self, sort: Sort) -> TopHitsAggregation:
        """Append a sort criterion for the hits.

        Raises:
            TypeError: If `sort` is not a Sort.
        """
        check_type(sort, Sort)
        set_default(self._aggs_def, "sort", [])
        self._aggs_def["sort"].append(sort)
        return self

    def sorts(self, sorts: Sequence[Sort]) -> TopHitsAggregation:
        """Append several sort criteria."""
        for sort in sorts:
            self.sort(sort)
        return self

    def track_scores(self, enable: bool) -> TopHitsAggregation:
        """Compute scores even when sorting on a field."""
        self._aggs_def["track_scores"] = enable
        return self

    def version(self, enable: bool) -> TopHitsAggregation:
        """Return the version of each hit."""
        self._aggs_def["version"] = enable
        return self

    def explain(self, enable: bool) -> TopHitsAggregation:
        """Return an explanation of how each hit was scored."""
        self._aggs_def["explain"] = enable
        return self

    def highlight(self, highlight: Highlight) -> TopHitsAggregation:
        """Highlight matches in the hits.

        Raises:
            TypeError: If `highlight` is not a Highlight.
        """
        check_type(highlight, Highlight)
        self._aggs_def["highlight"] = highlight
        return self

    def source(self, source: Any) -> TopHitsAggregation:
        """Control which parts of ``_source`` are returned."""
        self._aggs_def["_source"] = source
        return self

    def stored_fields(self, fields: Sequence[str] | str) -> TopHitsAggregation:
        """Return these stored fields."""
        self._aggs_def["stored_fields"] = fields
        return self

    def script_field(self, name: str, script: Script | str) -> TopHitsAggregation:
        """Add a field computed by a script for each hit."""
        set_default(self._aggs_def, "script_fields", {})
        self._aggs_def["script_fields"][name] = {"script": script}
        return self

    def script_fields(self, fields: dict[str, Script | str]) -> TopHitsAggregation:
        """Add several script fields keyed by name."""
        check_type(fields, dict)
        for name, script in fields.items():
            self.script_field(name, script)
        return self

    def docvalue_fields(self, fields: Sequence[Any]) -> TopHitsAggregation:
        """Return these fields read from doc values."""
        self._aggs_def["docvalue_fields"] = fields
        return self


class WeightedAverageAggregation(MetricsOptions, Aggregation):
    """Average where each value carries its own weight.

    `value` and `weight` each take a field name or a `Script`; giving one
    replaces the other within the same source.
    """

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-metrics-weight-avg-aggregation.html"

    def __init__(
        self,
        name: str | None = None,
        value: str | Script | None = None,
        weight: str | Script | None = None,
    ) -> None:
        """Initialize a weighted average aggregation."""
        super().__init__(name, "weighted_avg")
        self._aggs_def["value"] = {}
        self._aggs_def["weight"] = {}
        if value is not None:
            self.value(value)
        if weight is not None:
            self.weight(weight)

    def _set_source(self, key: str, source: str | Script, missing: Any) -> None:
        """Point `key` at a field or a script, dropping the other."""
        if not isinstance(source, (str, Script)):
            raise TypeError(f"{key.capitalize()} must be either a string or instanceof Script")
        target = self._aggs_def[key]
        if isinstance(source, Script):
            target.pop("field", None)
            target["script"] = source
        else:
            target.pop("script", None)
            target["field"] = source
        if missing is not None:
            target["missing"] = missing

    def value(self, value: str | Script, missing: Any = None) -> WeightedAverageAggregation:
        """Set the source of the values being averaged."""
        self._set_source("value", value, missing)
        return self

    def weight(self, weight: str | Script, missing: Any = None) -> WeightedAverageAggregation:
        """Set the source of the weights."""
        self._set_source("weight", weight, missing)
        return self

    def field(self, field: str) -> NoReturn:
        """Not accepted; use `value` and `weight`."""
        unsupported("WeightedAverageAggregation", "field", self._REF_URL)

    def script(self, script: Script) -> NoReturn:
        """Not accepted; use `value` and `weight`."""
        unsupported("WeightedAverageAggregation", "script", self._REF_URL)

    def missing(self, value: Any) -> NoReturn:
        """Not accepted; pass `missing` to `value` or `weight`."""
        unsupported("WeightedAverageAggregation", "missing", self._REF_URL)
