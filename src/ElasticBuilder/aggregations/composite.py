"""Composite aggregation and the value sources it combines."""

from __future__ import annotations

from typing import Any

from ElasticBuilder.core.aggregation import Aggregation
from ElasticBuilder.core.consts import ES_REF_BASE
from ElasticBuilder.core.script import Script
from ElasticBuilder.core.util import check_enum, check_type, invalid_param, recursive_to_json
from ElasticBuilder.utils.guards import is_empty, is_nil

_COMPOSITE_REF_URL = f"{ES_REF_BASE}/search-aggregations-bucket-composite-aggregation.html"

_invalid_order_param = invalid_param("", "order", "'asc' or 'desc'")


class ValuesSource:
    """One key component of a composite bucket.

    Serializes as ``{name: {source_type: {...options}}}``.

    Raises:
        ValueError: If `source_type` is empty.
    """

    _REF_URL = _COMPOSITE_REF_URL

    def __init__(self, source_type: str, name: str, field: str | None = None) -> None:
        """Initialize the source.

        Args:
            source_type: Wire name of the source, e.g. ``terms``.
            name: Key of this part of the composite key.
            field: Field the values come from.
        """
        if is_empty(source_type):
            raise ValueError("ValuesSource `source_type` cannot be empty")
        self._name = name
        self.source_type = source_type
        self._opts: dict[str, Any] = {}
        self._body: dict[str, Any] = {source_type: self._opts}
        if not is_nil(field):
            self._opts["field"] = field

    def field(self, field: str) -> ValuesSource:
        """Set the field the key values come from."""
        self._opts["field"] = field
        return self

    def script(self, script: Script) -> ValuesSource:
        """Compute the key values with a script.

        Raises:
            TypeError: If `script` is not a Script.
        """
        check_type(script, Script)
        self._opts["script"] = script
        return self

    def value_type(self, value_type: str) -> ValuesSource:
        """Hint the type of script values, e.g. ``long``."""
        self._opts["value_type"] = value_type
        return self

    def order(self, order: str) -> ValuesSource:
        """Set the sort direction of this key: ``asc`` or ``desc``."""
        self._opts["order"] = check_enum(order, ("asc", "desc"), _invalid_order_param, ref_url=self._REF_URL)
        return self

    def missing_bucket(self, enable: bool) -> ValuesSource:
        """Create a bucket for documents without a value."""
        self._opts["missing_bucket"] = enable
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize the source keyed by its name."""
        return {self._name: recursive_to_json(self._body)}


class TermsValuesSource(ValuesSource):
    """Key built from the terms of a field."""

    _REF_URL = f"{_COMPOSITE_REF_URL}#_terms"

    def __init__(self, name: str, field: str | None = None) -> None:
        """Initialize a terms values source."""
        super().__init__("terms", name, field)


class HistogramValuesSource(ValuesSource):
    """Key built from fixed-width numeric buckets."""

    _REF_URL = f"{_COMPOSITE_REF_URL}#_histogram"

    def __init__(self, name: str, field: str | None = None, interval: float | None = None) -> None:
        """Initialize a histogram values source."""
        super().__init__("histogram", name, field)
        if not is_nil(interval):
            self._opts["interval"] = interval

    def interval(self, interval: float) -> HistogramValuesSource:
        """Set the bucket width."""
        self._opts["interval"] = interval
        return self


class DateHistogramValuesSource(ValuesSource):
    """Key built from date buckets."""

    _REF_URL = f"{_COMPOSITE_REF_URL}#_date_histogram"

    def __init__(self, name: str, field: str | None = None, interval: str | None = None) -> None:
        """Initialize a date histogram values source."""
        super().__init__("date_histogram", name, field)
        if not is_nil(interval):
            self._opts["interval"] = interval

    def interval(self, interval: str) -> DateHistogramValuesSource:
        """Set the bucket interval, e.g. ``1d``."""
        self._opts["interval"] = interval
        return self

    def calendar_interval(self, interval: str) -> DateHistogramValuesSource:
        """Set a calendar-aware interval such as ``1M``."""
        self._opts["calendar_interval"] = interval
        return self

    def fixed_interval(self, interval: str) -> DateHistogramValuesSource:
        """Set a fixed interval such as ``90m``."""
        self._opts["fixed_interval"] = interval
        return self

    def time_zone(self, zone: str) -> DateHistogramValuesSource:
        """Set the time zone bucket boundaries are computed in."""
        self._opts["time_zone"] = zone
        return self

    def format(self, fmt: str) -> DateHistogramValuesSource:  # noqa: A003
        """Set the format of the key in the response."""
        self._opts["format"] = fmt
        return self


class CompositeAggregation(Aggregation):
    """Buckets keyed by combinations of several value sources, paged with `after`."""

    def __init__(self, name: str | None = None) -> None:
        """Initialize a composite aggregation."""
        super().__init__(name, "composite")
        self._aggs_def["sources"] = []

    def sources(self, *sources: ValuesSource) -> CompositeAggregation:
        """Append value sources; their order is the order of the key parts.

        Raises:
            TypeError: If a source is not a ValuesSource.
        """
        for source in sources:
            check_type(source, ValuesSource)
        self._aggs_def["sources"].extend(sources)
        return self

    def size(self, size: int) -> CompositeAggregation:
        """Set how many buckets a page holds."""
        self._aggs_def["size"] = size
        return self

    def after(self, after_key: dict[str, Any]) -> CompositeAggregation:
        """Resume after the given bucket key, usually the previous ``after_key``."""
        self._aggs_def["after"] = after_key
        return self
