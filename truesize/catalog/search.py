"""Name index over loaded boundary features.

Entries keep insertion order, so when countries are added before
states a query matching both lists the countries first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from truesize.catalog.loader import load_feature_collection
from truesize.core.constants import (
    COUNTRY_KIND,
    COUNTRY_NAME_PROPERTY,
    DEFAULT_SEARCH_LIMIT,
    DEFAULT_SEARCH_MIN_QUERY,
    STATE_KIND,
    STATE_NAME_PROPERTY,
)

if TYPE_CHECKING:
    from pathlib import Path

    from truesize.core.config import TrueSizeConfig
    from truesize.models.geojson import FeatureCollectionModel

logger = logging.getLogger("truesize.catalog.search")


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One searchable silhouette.

    Attributes:
        name: Display name (e.g. ``"France"``, ``"Texas"``).
        kind: ``"Country"`` or ``"State"``.
        feature: The GeoJSON Feature mapping to clone.
    """

    name: str
    kind: str
    feature: dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> str:
        """Search-result label, e.g. ``"France (Country)"``."""
        return f"{self.name} ({self.kind})"


class ShapeCatalog:
    """In-memory, case-insensitive name search over boundary features."""

    def __init__(
        self,
        *,
        min_query_length: int = DEFAULT_SEARCH_MIN_QUERY,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> None:
        self.min_query_length = min_query_length
        self.limit = limit
        self._entries: list[CatalogEntry] = []

    @classmethod
    def from_config(cls, config: TrueSizeConfig) -> ShapeCatalog:
        return cls(min_query_length=config.search_min_query, limit=config.search_limit)

    @classmethod
    def from_files(
        cls,
        countries_path: Path,
        states_path: Path | None = None,
        *,
        config: TrueSizeConfig | None = None,
    ) -> ShapeCatalog:
        """Build the default catalog: countries first, then states.

        Raises:
            CatalogLoadError: If either file cannot be loaded.
        """
        catalog = cls.from_config(config) if config is not None else cls()
        catalog.add_collection(
            load_feature_collection(countries_path),
            kind=COUNTRY_KIND,
            name_property=COUNTRY_NAME_PROPERTY,
        )
        if states_path is not None:
            catalog.add_collection(
                load_feature_collection(states_path),
                kind=STATE_KIND,
                name_property=STATE_NAME_PROPERTY,
            )
        return catalog

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[CatalogEntry, ...]:
        return tuple(self._entries)

    def add_collection(
        self,
        collection: FeatureCollectionModel,
        *,
        kind: str,
        name_property: str,
    ) -> int:
        """Index every feature of ``collection`` under ``name_property``.

        Features without a usable name are skipped.

        Returns:
            Number of entries added.
        """
        added = 0
        for index, feature in enumerate(collection.features):
            name = feature.get_property(name_property)
            if not name:
                logger.warning(
                    "feature skipped | kind=%s | index=%d | missing property %r",
                    kind,
                    index,
                    name_property,
                )
                continue
            self._entries.append(CatalogEntry(name=str(name), kind=kind, feature=feature.to_dict()))
            added += 1

        logger.info("catalog indexed | kind=%s | entries=%d", kind, added)
        return added

    def search(self, query: str) -> list[CatalogEntry]:
        """Case-insensitive substring search on entry names.

        Returns an empty list for queries shorter than
        ``min_query_length`` and at most ``limit`` entries otherwise.
        """
        needle = query.lower()
        if len(needle) < self.min_query_length:
            return []
        results = [entry for entry in self._entries if needle in entry.name.lower()]
        return results[: self.limit]
