"""Pydantic schemas for the GeoJSON boundary files.

Only the envelope is validated here (``FeatureCollection`` → ``Feature``
→ ``geometry`` / ``properties``).  Geometry coordinates are parsed lazily
by ``truesize.models.geometry`` when a shape is actually cloned, so a
boundary file with a few Point features still loads.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class FeatureModel(BaseModel):
    """A single GeoJSON Feature.

    Attributes:
        type: Always ``"Feature"``.
        geometry: Raw GeoJSON geometry mapping, or ``None`` for
            unlocated features.
        properties: Feature properties (``ADMIN``, ``name``, ...).
    """

    model_config = ConfigDict(extra="allow")

    type: Literal["Feature"] = "Feature"
    geometry: dict[str, Any] | None = None
    properties: dict[str, Any] | None = Field(default_factory=dict)

    def get_property(self, key: str) -> Any:
        """Return a property value, or ``None`` when absent."""
        return (self.properties or {}).get(key)

    def to_dict(self) -> dict[str, Any]:
        """Serialise back to a plain GeoJSON Feature mapping."""
        return self.model_dump(mode="json")


class FeatureCollectionModel(BaseModel):
    """A GeoJSON FeatureCollection."""

    model_config = ConfigDict(extra="allow")

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[FeatureModel] = Field(default_factory=list)
