"""Searchable catalog of country and state silhouettes.

- loader: Read and validate GeoJSON FeatureCollection files
- search: Index features by name and answer search-box queries
"""

from truesize.catalog.loader import CatalogLoadError, load_feature_collection
from truesize.catalog.search import CatalogEntry, ShapeCatalog

__all__ = [
    "CatalogEntry",
    "CatalogLoadError",
    "ShapeCatalog",
    "load_feature_collection",
]
