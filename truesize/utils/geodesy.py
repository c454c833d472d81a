"""Bounding boxes and geodesic area for relocated shapes.

The relocation transform only approximates true size; these helpers
measure what actually ends up on the map.  Area is computed on the
WGS 84 ellipsoid with ``pyproj.Geod`` so it is accurate at any latitude.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from truesize.core.exceptions import EmptyGeometryError
from truesize.models.geometry import LatLng, MultiPolygon, coerce_geometry, iter_vertices

if TYPE_CHECKING:
    from pyproj import Geod

    from truesize.models.geometry import GeometryLike, Polygon, Ring

# Square metres per square kilometre
SQ_METRES_PER_SQ_KM = 1_000_000.0

# Minimum positions for a ring to enclose any area
MIN_COORDS_FOR_RING = 3


def compute_bbox(geometry: GeometryLike) -> tuple[float, float, float, float]:
    """Compute the tight bounding box of a shape.

    Returns:
        ``(min_lon, min_lat, max_lon, max_lat)``

    Raises:
        EmptyGeometryError: If the geometry has no vertices.
    """
    vertices = list(iter_vertices(coerce_geometry(geometry)))
    if not vertices:
        msg = "Cannot compute bounding box of a geometry with no vertices"
        raise EmptyGeometryError(msg, stage="geodesy")
    lons = [c[0] for c in vertices]
    lats = [c[1] for c in vertices]
    return (min(lons), min(lats), max(lons), max(lats))


def bbox_center(geometry: GeometryLike) -> LatLng:
    """Centre of the bounding box, as reported by a map layer's bounds."""
    min_lon, min_lat, max_lon, max_lat = compute_bbox(geometry)
    return LatLng(lat=(min_lat + max_lat) / 2, lng=(min_lon + max_lon) / 2)


def geodesic_area_km2(geometry: GeometryLike) -> float:
    """Geodesic area of a shape in square kilometres.

    Holes are subtracted; winding order does not matter.  Rings with
    fewer than three positions contribute nothing.
    """
    from pyproj import Geod

    geod = Geod(ellps="WGS84")
    shape = coerce_geometry(geometry)
    polygons = shape.polygons if isinstance(shape, MultiPolygon) else (shape,)

    total_m2 = sum(_polygon_area_m2(geod, polygon) for polygon in polygons)
    return total_m2 / SQ_METRES_PER_SQ_KM


def _polygon_area_m2(geod: Geod, polygon: Polygon) -> float:
    if not polygon.rings:
        return 0.0
    exterior, *holes = polygon.rings
    area = _ring_area_m2(geod, exterior)
    for hole in holes:
        area -= _ring_area_m2(geod, hole)
    return area


def _ring_area_m2(geod: Geod, ring: Ring) -> float:
    if len(ring) < MIN_COORDS_FOR_RING:
        return 0.0
    lons = [c[0] for c in ring]
    lats = [c[1] for c in ring]
    # Geod.polygon_area_perimeter returns (signed area_m2, perimeter_m)
    area_m2, _perimeter = geod.polygon_area_perimeter(lons, lats)
    return abs(area_m2)
