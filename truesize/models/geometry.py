"""Geometry data model: the Polygon / MultiPolygon tagged variant.

Geometries are immutable.  Every transform in the package goes through
``map_vertices``, the one recursive combinator that rebuilds a geometry
vertex by vertex while keeping its ring and polygon structure intact:
same number of polygons, same number of rings per polygon, same number
of points per ring.

Coordinates follow GeoJSON order, ``(lon, lat)`` per vertex.  Reference
points (``LatLng``) follow map order, ``(lat, lng)``, as the map layer
reports them.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from numbers import Real
from typing import TYPE_CHECKING, Any, ClassVar, TypeAlias

from truesize.core.exceptions import (
    InvalidReferencePointError,
    MalformedGeometryError,
    UnsupportedGeometryKind,
)

if TYPE_CHECKING:
    import shapely.geometry

Coord: TypeAlias = tuple[float, float]
Ring: TypeAlias = tuple[Coord, ...]
VertexFn: TypeAlias = Callable[[float, float], Coord]
PointLike: TypeAlias = "LatLng | Mapping[str, Any] | Sequence[float]"


# ---------------------------------------------------------------------------
# Reference point
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LatLng:
    """A reference point on the map, latitude first.

    Attributes:
        lat: Latitude in degrees.
        lng: Longitude in degrees.
    """

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lat) and math.isfinite(self.lng)):
            msg = f"reference point must be finite, got lat={self.lat!r} lng={self.lng!r}"
            raise InvalidReferencePointError(msg)

    @classmethod
    def coerce(cls, value: LatLng | Mapping[str, Any] | Sequence[float]) -> LatLng:
        """Build a ``LatLng`` from a point, a ``{"lat", "lng"}`` mapping or a pair.

        Pairs are read as ``(lat, lng)``.  Mappings may spell longitude
        ``lng`` or ``lon``.

        Raises:
            TypeError: If the value has none of the accepted shapes.
            InvalidReferencePointError: If a coordinate is NaN or infinite.
        """
        if isinstance(value, LatLng):
            return value
        if isinstance(value, Mapping):
            lng = value.get("lng", value.get("lon"))
            if "lat" not in value or lng is None:
                msg = f"reference point mapping needs 'lat' and 'lng' keys, got {sorted(value)}"
                raise TypeError(msg)
            return cls(lat=float(value["lat"]), lng=float(lng))
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
            return cls(lat=float(value[0]), lng=float(value[1]))
        msg = f"cannot interpret {type(value).__name__} as a reference point"
        raise TypeError(msg)

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


# ---------------------------------------------------------------------------
# Tagged variant
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Polygon:
    """A polygon: outer ring first, holes after it.

    Rings passed as nested lists are normalised to tuples of float pairs,
    so two polygons compare equal whenever their coordinates do.

    Raises:
        MalformedGeometryError: If a ring is not a sequence of finite
            ``(lon, lat)`` pairs.
    """

    geom_type: ClassVar[str] = "Polygon"

    rings: tuple[Ring, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        rings = tuple(_as_ring(ring) for ring in _as_sequence(self.rings))
        object.__setattr__(self, "rings", rings)

    def to_geojson(self) -> dict[str, Any]:
        """Serialise to a GeoJSON geometry mapping."""
        return {
            "type": self.geom_type,
            "coordinates": [[[lon, lat] for lon, lat in ring] for ring in self.rings],
        }

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return self.to_geojson()

    def to_shapely(self) -> shapely.geometry.Polygon:
        from shapely.geometry import shape

        return shape(self.to_geojson())


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    """A collection of polygons transformed as one shape."""

    geom_type: ClassVar[str] = "MultiPolygon"

    polygons: tuple[Polygon, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "polygons",
            tuple(
                p if isinstance(p, Polygon) else Polygon(_as_sequence(p))
                for p in _as_sequence(self.polygons)
            ),
        )

    def to_geojson(self) -> dict[str, Any]:
        """Serialise to a GeoJSON geometry mapping."""
        return {
            "type": self.geom_type,
            "coordinates": [p.to_geojson()["coordinates"] for p in self.polygons],
        }

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return self.to_geojson()

    def to_shapely(self) -> shapely.geometry.MultiPolygon:
        from shapely.geometry import shape

        return shape(self.to_geojson())


def _as_sequence(value: Any) -> tuple[Any, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        msg = f"expected a sequence of rings or polygons, got {type(value).__name__}"
        raise MalformedGeometryError(msg)
    return tuple(value)


def _as_ring(ring: Any) -> Ring:
    return tuple(_as_vertex(vertex) for vertex in _as_sequence(ring))


def _as_vertex(vertex: Any) -> Coord:
    try:
        lon, lat = vertex
        coord = (float(lon), float(lat))
    except (TypeError, ValueError) as exc:
        msg = f"vertex must be a (lon, lat) pair of numbers, got {vertex!r}"
        raise MalformedGeometryError(msg) from exc
    if not all(math.isfinite(v) for v in coord):
        msg = f"vertex coordinates must be finite, got {vertex!r}"
        raise MalformedGeometryError(msg)
    return coord


Geometry: TypeAlias = Polygon | MultiPolygon

GeometryLike: TypeAlias = "Geometry | Mapping[str, Any] | Any"
"""A ``Geometry``, a GeoJSON geometry or Feature mapping, or any object
exposing ``__geo_interface__`` (e.g. a Shapely geometry)."""


# ---------------------------------------------------------------------------
# Recursive combinator
# ---------------------------------------------------------------------------


def map_vertices(geometry: Geometry, fn: VertexFn) -> Geometry:
    """Return a new geometry with ``fn(lon, lat)`` applied to every vertex.

    Raises:
        UnsupportedGeometryKind: If ``geometry`` is not a Polygon or
            MultiPolygon.
    """
    if isinstance(geometry, Polygon):
        return Polygon(tuple(tuple(fn(lon, lat) for lon, lat in ring) for ring in geometry.rings))
    if isinstance(geometry, MultiPolygon):
        return MultiPolygon(tuple(map_vertices(p, fn) for p in geometry.polygons))  # type: ignore[misc]
    raise UnsupportedGeometryKind(geometry_kind(geometry))


def iter_vertices(geometry: Geometry) -> Iterator[Coord]:
    """Yield every ``(lon, lat)`` vertex across all rings and polygons."""
    if isinstance(geometry, Polygon):
        for ring in geometry.rings:
            yield from ring
    elif isinstance(geometry, MultiPolygon):
        for polygon in geometry.polygons:
            yield from iter_vertices(polygon)
    else:
        raise UnsupportedGeometryKind(geometry_kind(geometry))


def count_vertices(geometry: GeometryLike) -> int:
    """Total number of vertices, closing duplicates included."""
    return sum(1 for _ in iter_vertices(coerce_geometry(geometry)))


def transform_vertices(geometry: GeometryLike, fn: VertexFn) -> GeometryLike:
    """Apply ``fn`` to every vertex, answering in the caller's format.

    A ``Geometry`` comes back as a ``Geometry``; anything else (GeoJSON
    mapping, Feature, ``__geo_interface__`` object) comes back as a fresh
    GeoJSON geometry mapping.
    """
    result = map_vertices(coerce_geometry(geometry), fn)
    return match_input_format(geometry, result)


def match_input_format(original: GeometryLike, result: Geometry) -> GeometryLike:
    """Return ``result`` in the same representation as ``original``."""
    if isinstance(original, (Polygon, MultiPolygon)):
        return result
    return result.to_geojson()


# ---------------------------------------------------------------------------
# GeoJSON interop
# ---------------------------------------------------------------------------


def geometry_kind(obj: object) -> str:
    """Best-effort geometry type name used in error messages."""
    if isinstance(obj, (Polygon, MultiPolygon)):
        return obj.geom_type
    if isinstance(obj, Mapping):
        return str(obj.get("type"))
    geo = getattr(obj, "__geo_interface__", None)
    if isinstance(geo, Mapping):
        return str(geo.get("type"))
    return type(obj).__name__


def coerce_geometry(obj: GeometryLike) -> Geometry:
    """Normalise any supported geometry representation to a ``Geometry``.

    Raises:
        UnsupportedGeometryKind: For Point, LineString, GeometryCollection
            and anything else that is not a (Multi)Polygon.
        MalformedGeometryError: If the coordinates are not well-formed.
    """
    if isinstance(obj, (Polygon, MultiPolygon)):
        return obj
    if not isinstance(obj, Mapping):
        geo = getattr(obj, "__geo_interface__", None)
        if not isinstance(geo, Mapping):
            raise UnsupportedGeometryKind(type(obj).__name__)
        obj = geo
    if obj.get("type") == "Feature":
        inner = obj.get("geometry")
        if inner is None:
            msg = "Feature has no geometry"
            raise MalformedGeometryError(msg)
        return coerce_geometry(inner)
    return geometry_from_geojson(obj)


def geometry_from_geojson(data: Mapping[str, Any]) -> Geometry:
    """Parse a GeoJSON ``Polygon`` or ``MultiPolygon`` geometry mapping.

    Raises:
        UnsupportedGeometryKind: If ``type`` is anything else.
        MalformedGeometryError: If ``coordinates`` is missing or badly nested.
    """
    kind = data.get("type")
    if kind not in (Polygon.geom_type, MultiPolygon.geom_type):
        raise UnsupportedGeometryKind(str(kind))

    coords = data.get("coordinates")
    if not _is_array(coords):
        msg = f"{kind} coordinates must be an array, got {type(coords).__name__}"
        raise MalformedGeometryError(msg)

    if kind == Polygon.geom_type:
        return _parse_polygon(coords)
    return MultiPolygon(tuple(_parse_polygon(p) for p in coords))


def _parse_polygon(rings: Any) -> Polygon:
    if not _is_array(rings):
        msg = f"polygon must be an array of rings, got {type(rings).__name__}"
        raise MalformedGeometryError(msg)
    return Polygon(tuple(_parse_ring(ring) for ring in rings))


def _parse_ring(ring: Any) -> Ring:
    if not _is_array(ring):
        msg = f"ring must be an array of positions, got {type(ring).__name__}"
        raise MalformedGeometryError(msg)
    return tuple(_parse_position(pos) for pos in ring)


def _parse_position(pos: Any) -> Coord:
    # Altitude and other extra ordinates are dropped.
    if not _is_array(pos) or len(pos) < 2 or not all(_is_number(v) for v in pos[:2]):
        msg = f"position must be [lon, lat] numbers, got {pos!r}"
        raise MalformedGeometryError(msg)
    return (float(pos[0]), float(pos[1]))


def _is_array(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)
