"""Bucket aggregations: group documents into buckets."""

from __future__ import annotations

from typing import Any, Mapping, NoReturn, Sequence

from ElasticBuilder.core.aggregation import Aggregation
from ElasticBuilder.core.consts import ES_REF_BASE, EXECUTION_HINT_SET
from ElasticBuilder.core.query import Query
from ElasticBuilder.core.script import Script
from ElasticBuilder.core.util import check_enum, check_type, invalid_param, set_default, unsupported
from ElasticBuilder.utils.guards import has, is_empty
from ElasticBuilder.utils.log import log

_DIRECTIONS = ("asc", "desc")
_COLLECT_MODES = ("depth_first", "breadth_first")

_invalid_direction_param = invalid_param("", "direction", "'asc' or 'desc'")
_invalid_execution_hint_param = invalid_param("", "execution_hint", EXECUTION_HINT_SET)
_invalid_collect_mode_param = invalid_param("", "collect_mode", "'depth_first' or 'breadth_first'")


class BucketOptions:
    """Value source of a bucket aggregation: a field or a script."""

    _aggs_def: dict[str, Any]

    def __init__(self, name: str | None, agg_type: str, field: str | None = None) -> None:
        """Initialize the aggregation, bucketing on `field` if given."""
        super().__init__(name, agg_type)  # type: ignore[call-arg]
        if field is not None:
            self._aggs_def["field"] = field

    def field(self, field: str):
        """Set the field to build buckets from."""
        self._aggs_def["field"] = field
        return self

    def script(self, script: Script):
        """Compute bucket keys with a script.

        Raises:
            TypeError: If `script` is not a Script.
        """
        check_type(script, Script)
        self._aggs_def["script"] = script
        return self


class HistogramOptions(BucketOptions):
    """Options shared by the fixed-interval histogram aggregations."""

    def __init__(
        self,
        name: str | None,
        agg_type: str,
        field: str | None = None,
        interval: Any = None,
    ) -> None:
        """Initialize the aggregation with the bucket width if given."""
        super().__init__(name, agg_type, field)
        if interval is not None:
            self._aggs_def["interval"] = interval

    def interval(self, interval: Any):
        """Set the bucket width."""
        self._aggs_def["interval"] = interval
        return self

    def format(self, fmt: str):  # noqa: A003
        """Set the format of ``key_as_string`` in the response."""
        self._aggs_def["format"] = fmt
        return self

    def offset(self, offset: Any):
        """Shift bucket boundaries by this amount."""
        self._aggs_def["offset"] = offset
        return self

    def order(self, key: str, direction: str = "desc"):
        """Sort buckets by `key`.

        Calling it again adds a tie-breaking criterion; ``order`` then becomes
        a list.

        Raises:
            ValueError: If direction is not ``asc`` or ``desc``.
        """
        entry = {key: check_enum(direction, _DIRECTIONS, _invalid_direction_param)}
        if has(self._aggs_def, "order"):
            if not isinstance(self._aggs_def["order"], list):
                self._aggs_def["order"] = [self._aggs_def["order"]]
            self._aggs_def["order"].append(entry)
        else:
            self._aggs_def["order"] = entry
        return self

    def min_doc_count(self, min_doc_count: int):
        """Only return buckets holding at least this many documents."""
        self._aggs_def["min_doc_count"] = min_doc_count
        return self

    def extended_bounds(self, min_bound: Any, max_bound: Any):
        """Force buckets to span at least from `min_bound` to `max_bound`."""
        self._aggs_def["extended_bounds"] = {"min": min_bound, "max": max_bound}
        return self

    def hard_bounds(self, min_bound: Any, max_bound: Any):
        """Never create buckets outside `min_bound` and `max_bound`."""
        self._aggs_def["hard_bounds"] = {"min": min_bound, "max": max_bound}
        return self

    def missing(self, value: Any):
        """Set the value used for documents lacking the field."""
        self._aggs_def["missing"] = value
        return self

    def keyed(self, keyed: bool):
        """Return buckets as a hash keyed by bucket key instead of a list."""
        self._aggs_def["keyed"] = keyed
        return self


class HistogramAggregation(HistogramOptions, Aggregation):
    """Fixed-width numeric buckets."""

    def __init__(self, name: str | None = None, field: str | None = None, interval: float | None = None) -> None:
        """Initialize a histogram aggregation."""
        super().__init__(name, "histogram", field, interval)


class DateHistogramAggregation(HistogramOptions, Aggregation):
    """Date buckets of a calendar or fixed interval."""

    def __init__(self, name: str | None = None, field: str | None = None, interval: str | None = None) -> None:
        """Initialize a date histogram aggregation."""
        super().__init__(name, "date_histogram", field, interval)

    def time_zone(self, zone: str) -> DateHistogramAggregation:
        """Set the time zone bucket boundaries are computed in."""
        self._aggs_def["time_zone"] = zone
        return self

    def calendar_interval(self, interval: str) -> DateHistogramAggregation:
        """Set a calendar-aware interval such as ``1M`` or ``quarter``."""
        self._aggs_def["calendar_interval"] = interval
        return self

    def fixed_interval(self, interval: str) -> DateHistogramAggregation:
        """Set a fixed interval in SI units such as ``90m``."""
        self._aggs_def["fixed_interval"] = interval
        return self


class RangeOptions(BucketOptions):
    """Options shared by range aggregations.

    At least one range is required; this is only checked when the aggregation
    is serialized.
    """

    _RANGE_KEYS = ("from", "to")

    def __init__(self, name: str | None, agg_type: str, field: str | None = None) -> None:
        """Initialize the aggregation with no ranges yet."""
        super().__init__(name, agg_type, field)
        self._aggs_def["ranges"] = []

    def format(self, fmt: str):  # noqa: A003
        """Set the format of the range bounds in the response."""
        self._aggs_def["format"] = fmt
        return self

    def range(self, range_def: Mapping[str, Any]):
        """Add a range such as ``{"from": 10, "to": 20, "key": "mid"}``.

        Raises:
            ValueError: If the range has neither ``from`` nor ``to``.
        """
        check_type(range_def, Mapping)
        if not any(has(range_def, key) for key in self._RANGE_KEYS):
            raise ValueError(f"Invalid Range! Range must have at least one of {', '.join(self._RANGE_KEYS)}")
        self._aggs_def["ranges"].append(dict(range_def))
        return self

    def ranges(self, ranges: Sequence[Mapping[str, Any]]):
        """Add several ranges, each validated like `range`."""
        check_type(ranges, (list, tuple))
        for range_def in ranges:
            self.range(range_def)
        return self

    def missing(self, value: Any):
        """Set the value used for documents lacking the field."""
        self._aggs_def["missing"] = value
        return self

    def keyed(self, keyed: bool):
        """Return buckets as a hash keyed by range key instead of a list."""
        self._aggs_def["keyed"] = keyed
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize the aggregation.

        Raises:
            ValueError: If no range was added.
        """
        if is_empty(self._aggs_def["ranges"]):
            raise ValueError("`ranges` cannot be empty.")
        return super().to_json()  # type: ignore[misc]


class RangeAggregation(RangeOptions, Aggregation):
    """Buckets for user-defined numeric ranges."""

    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize a range aggregation."""
        super().__init__(name, "range", field)


class DateRangeAggregation(RangeOptions, Aggregation):
    """Buckets for user-defined date ranges; bounds may use date math."""

    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize a date range aggregation."""
        super().__init__(name, "date_range", field)

    def time_zone(self, zone: str) -> DateRangeAggregation:
        """Set the time zone used to convert date math in the bounds."""
        self._aggs_def["time_zone"] = zone
        return self


class TermsOptions(BucketOptions):
    """Options shared by the term bucketing aggregations."""

    _REF_URL = ""

    def format(self, fmt: str):  # noqa: A003
        """Set the format of ``key_as_string`` in the response."""
        self._aggs_def["format"] = fmt
        return self

    def min_doc_count(self, min_doc_count: int):
        """Only return terms found in at least this many documents."""
        self._aggs_def["min_doc_count"] = min_doc_count
        return self

    def shard_min_doc_count(self, min_doc_count: int):
        """Set the per-shard counterpart of `min_doc_count`."""
        self._aggs_def["shard_min_doc_count"] = min_doc_count
        return self

    def size(self, size: int):
        """Set how many term buckets are returned."""
        self._aggs_def["size"] = size
        return self

    def shard_size(self, size: int):
        """Set how many terms each shard returns to the coordinating node."""
        self._aggs_def["shard_size"] = size
        return self

    def missing(self, value: Any):
        """Set the value used for documents lacking the field."""
        self._aggs_def["missing"] = value
        return self

    def include(self, clause: str | Sequence[str]):
        """Only bucket values matching a regex or listed exactly."""
        self._aggs_def["include"] = clause
        return self

    def exclude(self, clause: str | Sequence[str]):
        """Never bucket values matching a regex or listed exactly."""
        self._aggs_def["exclude"] = clause
        return self

    def execution_hint(self, hint: str):
        """Suggest how terms are collected, e.g. ``map`` or ``global_ordinals``."""
        self._aggs_def["execution_hint"] = check_enum(
            hint, EXECUTION_HINT_SET, _invalid_execution_hint_param, ref_url=self._REF_URL
        )
        return self


class TermsAggregation(TermsOptions, Aggregation):
    """One bucket per unique value."""

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-bucket-terms-aggregation.html"

    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize a terms aggregation."""
        super().__init__(name, "terms", field)

    def show_term_doc_count_error(self, enable: bool) -> TermsAggregation:
        """Report the worst-case count error of each term."""
        self._aggs_def["show_term_doc_count_error"] = enable
        return self

    def include_partition(self, partition: int, num_partitions: int) -> TermsAggregation:
        """Only bucket the terms falling into one of `num_partitions` partitions."""
        self._aggs_def["include"] = {"partition": partition, "num_partitions": num_partitions}
        return self

    def collect_mode(self, mode: str) -> TermsAggregation:
        """Set the sub-aggregation collection order: ``depth_first`` or ``breadth_first``."""
        self._aggs_def["collect_mode"] = check_enum(mode, _COLLECT_MODES, _invalid_collect_mode_param)
        return self

    def order(self, key: str, direction: str = "desc") -> TermsAggregation:
        """Sort buckets by `key`, e.g. ``_count`` or a sub-aggregation name."""
        self._aggs_def["order"] = {key: check_enum(direction, _DIRECTIONS, _invalid_direction_param)}
        return self


class SignificantTermsAggregation(TermsOptions, Aggregation):
    """Terms that are unusually frequent in the matching documents.

    One scoring heuristic may be picked; picking another adds it beside the
    first, which the engine rejects.
    """

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-bucket-significantterms-aggregation.html"

    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize a significant terms aggregation."""
        super().__init__(name, "significant_terms", field)

    def script(self, script: Script) -> NoReturn:
        """Not accepted by the significant terms aggregation.

        Raises:
            ValueError: Always.
        """
        unsupported("SignificantTermsAggregation", "script", self._REF_URL)

    def jlh(self) -> SignificantTermsAggregation:
        """Score terms with the JLH heuristic."""
        self._aggs_def["jlh"] = {}
        return self

    def mutual_information(
        self, include_negatives: bool = True, background_is_superset: bool = True
    ) -> SignificantTermsAggregation:
        """Score terms by mutual information."""
        self._aggs_def["mutual_information"] = {
            "include_negatives": include_negatives,
            "background_is_superset": background_is_superset,
        }
        return self

    def chi_square(
        self, include_negatives: bool = True, background_is_superset: bool = True
    ) -> SignificantTermsAggregation:
        """Score terms with chi square."""
        self._aggs_def["chi_square"] = {
            "include_negatives": include_negatives,
            "background_is_superset": background_is_superset,
        }
        return self

    def gnd(self, background_is_superset: bool = True) -> SignificantTermsAggregation:
        """Score terms by Google normalized distance."""
        self._aggs_def["gnd"] = {"background_is_superset": background_is_superset}
        return self

    def percentage(self) -> SignificantTermsAggregation:
        """Score terms by the share of their documents in the foreground set."""
        self._aggs_def["percentage"] = {}
        return self

    def script_heuristic(self, script: Script) -> SignificantTermsAggregation:
        """Score terms with a script.

        Raises:
            TypeError: If `script` is not a Script.
        """
        check_type(script, Script)
        self._aggs_def["script_heuristic"] = {"script": script}
        return self

    def background_filter(self, filter_query: Query) -> SignificantTermsAggregation:
        """Narrow the background set used for comparison.

        Raises:
            TypeError: If `filter_query` is not a Query.
        """
        check_type(filter_query, Query)
        self._aggs_def["background_filter"] = filter_query
        return self


class FilterAggregation(Aggregation):
    """Single bucket of the documents matching a query.

    The aggregation body is the query itself.
    """

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-bucket-filter-aggregation.html"

    def __init__(self, name: str | None = None, filter_query: Query | None = None) -> None:
        """Initialize a filter aggregation."""
        super().__init__(name, "filter")
        if filter_query is not None:
            self.filter(filter_query)

    def field(self, field: str) -> NoReturn:
        """Not accepted; the filter query selects the documents."""
        unsupported("FilterAggregation", "field", self._REF_URL)

    def script(self, script: Script) -> NoReturn:
        """Not accepted; the filter query selects the documents."""
        unsupported("FilterAggregation", "script", self._REF_URL)

    def filter(self, filter_query: Query) -> FilterAggregation:  # noqa: A003
        """Set the query selecting the bucket's documents.

        Raises:
            TypeError: If `filter_query` is not a Query.
        """
        check_type(filter_query, Query)
        self._aggs_def = self._aggs[self.agg_type] = filter_query  # type: ignore[assignment]
        return self


class FiltersAggregation(Aggregation):
    """One bucket per filter.

    Filters are either named (a mapping, giving keyed buckets) or anonymous
    (a list). Switching from one style to the other logs a warning and drops
    the filters added so far.
    """

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-bucket-filters-aggregation.html"

    def __init__(self, name: str | None = None) -> None:
        """Initialize a filters aggregation."""
        super().__init__(name, "filters")

    def field(self, field: str) -> NoReturn:
        """Not accepted; the filters select the documents."""
        unsupported("FiltersAggregation", "field", self._REF_URL)

    def script(self, script: Script) -> NoReturn:
        """Not accepted; the filters select the documents."""
        unsupported("FiltersAggregation", "script", self._REF_URL)

    def _check_named_filters(self) -> None:
        """Make sure filters are held as a mapping, dropping anonymous ones."""
        if not set_default(self._aggs_def, "filters", {}) and isinstance(self._aggs_def["filters"], list):
            log.warning("[FiltersAggregation] Do not mix named and anonymous filters!")
            log.warning("[FiltersAggregation] Overwriting anonymous filters.")
            self._aggs_def["filters"] = {}

    def _check_anonymous_filters(self) -> None:
        """Make sure filters are held as a list, dropping named ones."""
        if not set_default(self._aggs_def, "filters", []) and not isinstance(self._aggs_def["filters"], list):
            log.warning("[FiltersAggregation] Do not mix named and anonymous filters!")
            log.warning("[FiltersAggregation] Overwriting named filters.")
            self._aggs_def["filters"] = []

    def filter(self, bucket_name: str, filter_query: Query) -> FiltersAggregation:  # noqa: A003
        """Add a named filter."""
        check_type(filter_query, Query)
        self._check_named_filters()
        self._aggs_def["filters"][bucket_name] = filter_query
        return self

    def filters(self, filter_queries: Mapping[str, Query]) -> FiltersAggregation:
        """Add several named filters."""
        check_type(filter_queries, Mapping)
        self._check_named_filters()
        self._aggs_def["filters"].update(filter_queries)
        return self

    def anonymous_filter(self, filter_query: Query) -> FiltersAggregation:
        """Add an anonymous filter; buckets come back as a list."""
        check_type(filter_query, Query)
        self._check_anonymous_filters()
        self._aggs_def["filters"].append(filter_query)
        return self

    def anonymous_filters(self, filter_queries: Sequence[Query]) -> FiltersAggregation:
        """Add several anonymous filters."""
        check_type(filter_queries, (list, tuple))
        self._check_anonymous_filters()
        self._aggs_def["filters"].extend(filter_queries)
        return self

    def other_bucket(self, enable: bool, other_bucket_key: str | None = None) -> FiltersAggregation:
        """Add a bucket for documents matching none of the filters."""
        self._aggs_def["other_bucket"] = enable
        if not is_empty(other_bucket_key):
            self.other_bucket_key(other_bucket_key)  # type: ignore[arg-type]
        return self

    def other_bucket_key(self, key: str) -> FiltersAggregation:
        """Set the key of the other bucket; implies `other_bucket`."""
        self._aggs_def["other_bucket_key"] = key
        return self


class MissingAggregation(BucketOptions, Aggregation):
    """Single bucket of documents lacking a field value."""

    _REF_URL = f"{ES_REF_BASE}/search-aggregations-bucket-missing-aggregation.html"

    def __init__(self, name: str | None = None, field: str | None = None) -> None:
        """Initialize a missing aggregation."""
        super().__init__(name, "missing", field)

    def script(self, script: Script) -> NoReturn:
        """Not accepted by the missing aggregation.

        Raises:
            ValueError: Always.
        """
        unsupported("MissingAggregation", "script", self._REF_URL)


class NestedAggregation(Aggregation):
    """Aggregates nested documents under `path`."""

    def __init__(self, name: str | None = None, path: str | None = None) -> None:
        """Initialize a nested aggregation."""
        super().__init__(name, "nested")
        if path is not None:
            self._aggs_def["path"] = path

    def path(self, path: str) -> NestedAggregation:
        """Set the path of the nested documents."""
        self._aggs_def["path"] = path
        return self


class ReverseNestedAggregation(Aggregation):
    """Joins back from nested documents to their parent (or `path`) documents."""

    def __init__(self, name: str | None = None, path: str | None = None) -> None:
        """Initialize a reverse nested aggregation."""
        super().__init__(name, "reverse_nested")
        if path:
            self.path(path)

    def path(self, path: str) -> ReverseNestedAggregation:
        """Join back to this nested level instead of the root document."""
        self._aggs_def["path"] = path
        return self


class GlobalAggregation(Aggregation):
    """Single bucket of every document in the searched indices, ignoring the query."""

    def __init__(self, name: str | None = None) -> None:
        """Initialize a global aggregation."""
        super().__init__(name, "global")
