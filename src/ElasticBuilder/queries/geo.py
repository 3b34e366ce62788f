"""Geo queries: match geo points and shapes by location."""

from __future__ import annotations

from typing import Any, NoReturn

from ElasticBuilder.core.consts import ES_REF_BASE, GEO_RELATION_SET, VALIDATION_METHOD_SET
from ElasticBuilder.core.geo import GeoPoint, GeoShape, IndexedShape
from ElasticBuilder.core.query import Query
from ElasticBuilder.core.util import check_enum, check_type, invalid_param, recursive_to_json, unsupported
from ElasticBuilder.utils.guards import is_nil

_DISTANCE_REF_URL = f"{ES_REF_BASE}/query-dsl-geo-distance-query.html"
_BOUNDING_BOX_REF_URL = f"{ES_REF_BASE}/query-dsl-geo-bounding-box-query.html"
_SHAPE_REF_URL = f"{ES_REF_BASE}/query-dsl-geo-shape-query.html"

_invalid_validation_method = invalid_param("", "validation_method", "'IGNORE_MALFORMED', 'COERCE' or 'STRICT'")
_invalid_distance_type = invalid_param(_DISTANCE_REF_URL, "distance_type", "'plane' or 'arc'")
_invalid_bounding_box_type = invalid_param(_BOUNDING_BOX_REF_URL, "type", "'memory' or 'indexed'")
_invalid_relation = invalid_param(_SHAPE_REF_URL, "relation", GEO_RELATION_SET)


class GeoQuery(Query):
    """Shape shared by geo queries: ``{type: {field: {...}, ...options}}``.

    Options describing the location go under the field; the remaining
    options sit beside it.
    """

    def __init__(self, query_type: str, field: str | None = None) -> None:
        """Initialize the query on the geo `field`."""
        super().__init__(query_type)
        self._field = field
        self._field_opts: Any = {}

    def field(self, field: str) -> GeoQuery:
        """Set the geo field to query."""
        self._field = field
        return self

    def validation_method(self, method: str) -> GeoQuery:
        """Set how invalid coordinates are handled; sent upper-case.

        Raises:
            ValueError: If method is not IGNORE_MALFORMED, COERCE or STRICT.
        """
        lowered = check_enum(method, VALIDATION_METHOD_SET, _invalid_validation_method)
        self._query_opts["validation_method"] = lowered.upper()
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize with the location options under the field name."""
        return recursive_to_json({self.query_type: {self._field: self._field_opts, **self._query_opts}})


class GeoDistanceQuery(GeoQuery):
    """Matches points within a distance of a central point."""

    def __init__(self, field: str | None = None, point: GeoPoint | None = None) -> None:
        """Initialize a geo distance query."""
        super().__init__("geo_distance", field)
        if not is_nil(point):
            self.geo_point(point)  # type: ignore[arg-type]

    def distance(self, distance: str | float) -> GeoDistanceQuery:
        """Set the radius of the circle, e.g. ``200km``."""
        self._query_opts["distance"] = distance
        return self

    def distance_type(self, distance_type: str) -> GeoDistanceQuery:
        """Set how distance is computed: ``arc`` or the faster ``plane``."""
        self._query_opts["distance_type"] = check_enum(distance_type, ("plane", "arc"), _invalid_distance_type)
        return self

    def geo_point(self, point: GeoPoint) -> GeoDistanceQuery:
        """Set the central point.

        Raises:
            TypeError: If `point` is not a GeoPoint.
        """
        check_type(point, GeoPoint)
        self._field_opts = point
        return self


class GeoBoundingBoxQuery(GeoQuery):
    """Matches points inside a bounding box."""

    def __init__(self, field: str | None = None) -> None:
        """Initialize a geo bounding box query."""
        super().__init__("geo_bounding_box", field)

    def _corner(self, key: str, point: GeoPoint) -> GeoBoundingBoxQuery:
        """Set one corner of the box.

        Raises:
            TypeError: If `point` is not a GeoPoint.
        """
        check_type(point, GeoPoint)
        self._field_opts[key] = point
        return self

    def top_left(self, point: GeoPoint) -> GeoBoundingBoxQuery:
        """Set the top left corner."""
        return self._corner("top_left", point)

    def bottom_right(self, point: GeoPoint) -> GeoBoundingBoxQuery:
        """Set the bottom right corner."""
        return self._corner("bottom_right", point)

    def top_right(self, point: GeoPoint) -> GeoBoundingBoxQuery:
        """Set the top right corner."""
        return self._corner("top_right", point)

    def bottom_left(self, point: GeoPoint) -> GeoBoundingBoxQuery:
        """Set the bottom left corner."""
        return self._corner("bottom_left", point)

    def top(self, value: float) -> GeoBoundingBoxQuery:
        """Set the top edge latitude."""
        self._field_opts["top"] = value
        return self

    def left(self, value: float) -> GeoBoundingBoxQuery:
        """Set the left edge longitude."""
        self._field_opts["left"] = value
        return self

    def bottom(self, value: float) -> GeoBoundingBoxQuery:
        """Set the bottom edge latitude."""
        self._field_opts["bottom"] = value
        return self

    def right(self, value: float) -> GeoBoundingBoxQuery:
        """Set the right edge longitude."""
        self._field_opts["right"] = value
        return self

    def type(self, type_name: str) -> GeoBoundingBoxQuery:  # noqa: A003
        """Set the execution type: ``memory`` or ``indexed``."""
        self._query_opts["type"] = check_enum(type_name, ("memory", "indexed"), _invalid_bounding_box_type)
        return self


class GeoShapeQuery(GeoQuery):
    """Matches shapes relating to an inline or indexed shape."""

    def __init__(self, field: str | None = None) -> None:
        """Initialize a geo shape query."""
        super().__init__("geo_shape", field)

    def validation_method(self, method: str) -> NoReturn:
        """Not accepted by geo shape queries.

        Raises:
            ValueError: Always.
        """
        unsupported("GeoShapeQuery", "validation_method", _SHAPE_REF_URL)

    def shape(self, shape: GeoShape) -> GeoShapeQuery:
        """Set an inline shape.

        Raises:
            TypeError: If `shape` is not a GeoShape.
        """
        check_type(shape, GeoShape)
        self._field_opts["shape"] = shape
        return self

    def indexed_shape(self, shape: IndexedShape) -> GeoShapeQuery:
        """Use a shape stored in another document.

        Raises:
            TypeError: If `shape` is not an IndexedShape.
        """
        check_type(shape, IndexedShape)
        self._field_opts["indexed_shape"] = shape
        return self

    def relation(self, relation: str) -> GeoShapeQuery:
        """Set the spatial relation, e.g. ``WITHIN``; sent upper-case."""
        lowered = check_enum(relation, GEO_RELATION_SET, _invalid_relation)
        self._field_opts["relation"] = lowered.upper()
        return self

    def ignore_unmapped(self, enable: bool) -> GeoShapeQuery:
        """Match nothing instead of failing when the field is unmapped."""
        self._query_opts["ignore_unmapped"] = enable
        return self
