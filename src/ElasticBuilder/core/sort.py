"""Sort clause for search requests and top hits."""

from __future__ import annotations

from typing import Any, Mapping

from ElasticBuilder.core.consts import ES_REF_BASE, SORT_MODE_SET, UNIT_SET
from ElasticBuilder.core.query import Query
from ElasticBuilder.core.script import Script
from ElasticBuilder.core.util import check_enum, check_type, invalid_param, recursive_to_json
from ElasticBuilder.utils.guards import is_empty

ES_REF_URL = f"{ES_REF_BASE}/sort-search-results.html"

_invalid_order_param = invalid_param(ES_REF_URL, "order", "'asc' or 'desc'")
_invalid_mode_param = invalid_param(ES_REF_URL, "mode", SORT_MODE_SET)
_invalid_distance_type_param = invalid_param(ES_REF_URL, "distance_type", "'plane' or 'arc'")
_invalid_unit_param = invalid_param(ES_REF_URL, "unit", UNIT_SET)


class Sort:
    """Sort on a field, a geo distance or a script.

    Serialization picks the most compact form the engine accepts:

    - bare field name when no option is set,
    - ``{field: order}`` when only the order is set,
    - ``{field: {...options}}`` otherwise,
    - ``{"_geo_distance": {...}}`` / ``{"_script": {...}}`` for those sorts.
    """

    def __init__(self, field: str | None = None, order: str | None = None) -> None:
        """Initialize the sort.

        Args:
            field: Field to sort on.
            order: ``asc`` or ``desc``.
        """
        self._opts: dict[str, Any] = {}
        self._geo_point: Any = None
        self._script: Script | None = None
        self._field = field
        if order is not None:
            self.order(order)

    def order(self, order: str) -> Sort:
        """Set the sort order, ``asc`` or ``desc`` (case-insensitive)."""
        self._opts["order"] = check_enum(order, ("asc", "desc"), _invalid_order_param)
        return self

    def mode(self, mode: str) -> Sort:
        """Set how multi-valued fields are reduced: min, max, sum, avg or median."""
        self._opts["mode"] = check_enum(mode, SORT_MODE_SET, _invalid_mode_param)
        return self

    def nested_path(self, path: str) -> Sort:
        """Set the nested object path the sort field lives under."""
        self._opts["nested_path"] = path
        return self

    def nested_filter(self, filter_query: Query) -> Sort:
        """Only consider nested documents matching this filter.

        Raises:
            TypeError: If `filter_query` is not a Query.
        """
        check_type(filter_query, Query)
        self._opts["nested_filter"] = filter_query
        return self

    def nested(self, nested: Mapping[str, Any]) -> Sort:
        """Set the ``nested`` sort options; a ``filter`` entry must be a Query."""
        filter_query = nested.get("filter")
        if filter_query is not None:
            check_type(filter_query, Query)
        self._opts["nested"] = nested
        return self

    def missing(self, value: Any) -> Sort:
        """Set where documents without the field sort: ``_first``, ``_last`` or a value."""
        self._opts["missing"] = value
        return self

    def unmapped_type(self, type_name: str) -> Sort:
        """Set the type assumed on indices where the field is unmapped."""
        self._opts["unmapped_type"] = type_name
        return self

    def geo_distance(self, geo_point: Any) -> Sort:
        """Sort by distance from the given point(s) on `field`.

        Args:
            geo_point: A `GeoPoint`, a list of them, or any raw point form the
                engine accepts (``[lon, lat]``, ``"lat,lon"``, geohash).
        """
        self._geo_point = geo_point
        return self

    def distance_type(self, distance_type: str) -> Sort:
        """Set how geo distance is computed: ``arc`` or ``plane``."""
        self._opts["distance_type"] = check_enum(
            distance_type, ("plane", "arc"), _invalid_distance_type_param
        )
        return self

    def unit(self, unit: str) -> Sort:
        """Set the distance unit. Units are case-sensitive (``NM``)."""
        if unit not in UNIT_SET:
            _invalid_unit_param(unit)
        self._opts["unit"] = unit
        return self

    def script(self, script: Script) -> Sort:
        """Sort by the value a script computes.

        Raises:
            TypeError: If `script` is not a Script.
        """
        check_type(script, Script)
        self._script = script
        return self

    def type(self, type_name: str) -> Sort:  # noqa: A003
        """Set the type of the script result: ``number`` or ``string``."""
        self._opts["type"] = type_name
        return self

    def reverse(self, reverse: bool) -> Sort:
        """Reverse the natural order."""
        self._opts["reverse"] = reverse
        return self

    def to_json(self) -> Any:
        """Serialize into the most compact accepted form."""
        if self._geo_point is None and self._script is None:
            if is_empty(self._opts):
                return self._field
            if list(self._opts) == ["order"]:
                return {self._field: self._opts["order"]}

        if self._geo_point is not None:
            repr_ = {"_geo_distance": {self._field: self._geo_point, **self._opts}}
        elif self._script is not None:
            repr_ = {"_script": {"script": self._script, **self._opts}}
        else:
            repr_ = {self._field: self._opts}
        return recursive_to_json(repr_)
