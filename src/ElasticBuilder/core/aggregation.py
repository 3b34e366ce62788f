"""Base class for every aggregation."""

from __future__ import annotations

from typing import Any, Sequence

from ElasticBuilder.core.util import check_type, recursive_to_json
from ElasticBuilder.utils.guards import is_empty


class Aggregation:
    """A named aggregation of a given type.

    Serializes as::

        {name: {agg_type: {...definition...}, "meta": {...}, "aggs": {...}}}

    The name may be set after construction, but must be present by the time
    the aggregation is serialized.
    """

    def __init__(self, name: str | None, agg_type: str) -> None:
        """Initialize the aggregation.

        Args:
            name: Key the aggregation is emitted under; may be set later.
            agg_type: Wire name of the aggregation, e.g. ``terms``.
        """
        if not agg_type:
            raise ValueError("`agg_type` cannot be empty")
        self._name = name
        self.agg_type = agg_type
        self._aggs_def: dict[str, Any] = {}
        self._aggs: dict[str, Any] = {agg_type: self._aggs_def}
        self._nested_aggs: list[Aggregation] = []

    def name(self, name: str) -> Aggregation:
        """Set the name the response will use for this aggregation."""
        self._name = name
        return self

    def meta(self, meta: dict[str, Any]) -> Aggregation:
        """Attach a free-form metadata object returned as-is in the response."""
        self._aggs["meta"] = meta
        return self

    def aggregation(self, agg: Aggregation) -> Aggregation:
        """Add a sub-aggregation. May be called several times."""
        check_type(agg, Aggregation)
        self._nested_aggs.append(agg)
        return self

    def agg(self, agg: Aggregation) -> Aggregation:
        """Alias for `aggregation`."""
        return self.aggregation(agg)

    def aggregations(self, aggs: Sequence[Aggregation]) -> Aggregation:
        """Add several sub-aggregations."""
        check_type(aggs, (list, tuple))
        for agg in aggs:
            self.aggregation(agg)
        return self

    def aggs(self, aggs: Sequence[Aggregation]) -> Aggregation:
        """Alias for `aggregations`."""
        return self.aggregations(aggs)

    def get_dsl(self) -> dict[str, Any]:
        """Return the serialized form of this aggregation."""
        return self.to_json()

    def to_json(self) -> dict[str, Any]:
        """Serialize the aggregation and its sub-aggregations.

        Raises:
            ValueError: If no name was given.
        """
        if self._name is None:
            raise ValueError("Aggregation name could not be determined")
        main_aggs = recursive_to_json(self._aggs)
        if not is_empty(self._nested_aggs):
            nested: dict[str, Any] = {}
            for agg in recursive_to_json(self._nested_aggs):
                nested.update(agg)
            main_aggs["aggs"] = nested
        return {self._name: main_aggs}

    def __repr__(self) -> str:
        """Return a short description for debugging."""
        return f"{type(self).__name__}(name={self._name!r}, agg_type={self.agg_type!r})"
