"""GeoJSON boundary file loading.

Reads a FeatureCollection from local disk and validates its envelope
with pydantic.  Failures are permanent: a broken file will not fix
itself on a second read.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from truesize.core.exceptions import PermanentError
from truesize.models.geojson import FeatureCollectionModel

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger("truesize.catalog.loader")


class CatalogLoadError(PermanentError):
    """Raised when a boundary file cannot be read or is not a FeatureCollection."""

    default_stage = "catalog"
    default_code = "CATALOG_LOAD_FAILED"


def load_feature_collection(path: Path) -> FeatureCollectionModel:
    """Load and validate a GeoJSON FeatureCollection file.

    Args:
        path: Path to a ``.geojson`` file.

    Returns:
        The validated ``FeatureCollectionModel``.

    Raises:
        CatalogLoadError: If the file cannot be read, is not JSON, or is
            not a FeatureCollection.
    """
    try:
        content = path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read boundary file {path}: {exc}"
        raise CatalogLoadError(msg) from exc

    try:
        collection = FeatureCollectionModel.model_validate_json(content)
    except PydanticValidationError as exc:
        msg = f"Boundary file {path} is not a valid GeoJSON FeatureCollection: {exc}"
        raise CatalogLoadError(msg) from exc

    logger.info(
        "boundary file loaded | path=%s | features=%d",
        path,
        len(collection.features),
    )
    return collection
