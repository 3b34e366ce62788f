"""Geo values used by geo queries, sorts and aggregations."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ElasticBuilder.core.util import check_type, recursive_to_json
from ElasticBuilder.utils.guards import is_nil, is_object
from ElasticBuilder.utils.log import log


class GeoPoint:
    """A point given as ``lat``/``lon`` fields, a mapping, an array or a string.

    Only one representation is kept. Switching to another one logs a warning
    and replaces the point built so far.
    """

    def __init__(self) -> None:
        """Initialize a point with no representation set."""
        self._point: Any = None

    def _warn_mixed_repr(self) -> None:
        """Warn that the previous representation is being replaced."""
        log.warning("[GeoPoint] Do not mix with other representation!")
        log.warning("[GeoPoint] Overwriting.")

    def _check_obj_repr(self) -> None:
        """Switch to the object representation, warning if another was set."""
        if is_nil(self._point):
            self._point = {}
        elif not is_object(self._point):
            self._warn_mixed_repr()
            self._point = {}

    def lat(self, lat: float) -> GeoPoint:
        """Set the latitude of the object representation."""
        self._check_obj_repr()
        self._point["lat"] = lat
        return self

    def lon(self, lon: float) -> GeoPoint:
        """Set the longitude of the object representation."""
        self._check_obj_repr()
        self._point["lon"] = lon
        return self

    def object(self, point: Mapping[str, float]) -> GeoPoint:  # noqa: A003
        """Use a mapping such as ``{"lat": 41.12, "lon": -71.34}``.

        Raises:
            TypeError: If `point` is not a mapping.
        """
        check_type(point, Mapping)
        if not is_nil(self._point):
            self._warn_mixed_repr()
        self._point = dict(point)
        return self

    def array(self, point: Sequence[float]) -> GeoPoint:
        """Use a ``[lon, lat]`` array.

        Raises:
            TypeError: If `point` is not a list or tuple.
        """
        check_type(point, (list, tuple))
        if not is_nil(self._point):
            self._warn_mixed_repr()
        self._point = list(point)
        return self

    def string(self, point: str) -> GeoPoint:
        """Use a ``"lat,lon"`` string or a geohash."""
        if not is_nil(self._point):
            self._warn_mixed_repr()
        self._point = point
        return self

    def to_json(self) -> Any:
        """Return the point in whichever representation was chosen."""
        return recursive_to_json(self._point)


class GeoShape:
    """An inline GeoJSON-like shape for `geo_shape` queries."""

    def __init__(self, type: str | None = None, coords: Sequence[Any] | None = None) -> None:  # noqa: A002
        """Initialize a geo shape."""
        self._body: dict[str, Any] = {}
        if type is not None:
            self.type(type)
        if coords is not None:
            self.coordinates(coords)

    def type(self, type_name: str) -> GeoShape:  # noqa: A003
        """Set the shape type, e.g. ``envelope``, ``polygon`` or ``circle``."""
        self._body["type"] = type_name
        return self

    def coordinates(self, coords: Sequence[Any]) -> GeoShape:
        """Set the shape coordinates.

        Raises:
            TypeError: If `coords` is not a list or tuple.
        """
        check_type(coords, (list, tuple))
        self._body["coordinates"] = coords
        return self

    def radius(self, radius: str | float) -> GeoShape:
        """Set the radius of a ``circle`` shape, e.g. ``100m``."""
        self._body["radius"] = radius
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize the shape definition."""
        return recursive_to_json(self._body)


class IndexedShape:
    """Reference to a shape already indexed in another document."""

    def __init__(self, id: str | None = None, type: str | None = None) -> None:  # noqa: A002
        """Initialize an indexed shape."""
        self._body: dict[str, Any] = {}
        if id is not None:
            self._body["id"] = id
        if type is not None:
            self._body["type"] = type

    def id(self, doc_id: str) -> IndexedShape:  # noqa: A003
        """Set the id of the document holding the shape."""
        self._body["id"] = doc_id
        return self

    def type(self, type_name: str) -> IndexedShape:  # noqa: A003
        """Set the mapping type of that document."""
        self._body["type"] = type_name
        return self

    def index(self, index: str) -> IndexedShape:
        """Set the index holding the document; defaults to ``shapes``."""
        self._body["index"] = index
        return self

    def path(self, path: str) -> IndexedShape:
        """Set the field holding the shape; defaults to ``shape``."""
        self._body["path"] = path
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize the shape reference."""
        return recursive_to_json(self._body)
