"""Data models.

- geometry: Polygon / MultiPolygon tagged variant, LatLng reference
  points, and the recursive vertex-map combinator
- geojson: Pydantic schemas for GeoJSON Features and FeatureCollections
"""

from truesize.models.geojson import FeatureCollectionModel, FeatureModel
from truesize.models.geometry import (
    Geometry,
    LatLng,
    MultiPolygon,
    Polygon,
    coerce_geometry,
    count_vertices,
    geometry_from_geojson,
    iter_vertices,
    map_vertices,
)

__all__ = [
    "Geometry",
    "LatLng",
    "MultiPolygon",
    "Polygon",
    "coerce_geometry",
    "count_vertices",
    "geometry_from_geojson",
    "iter_vertices",
    "map_vertices",
    "FeatureCollectionModel",
    "FeatureModel",
]
