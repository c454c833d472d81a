"""Shared pytest fixtures for the truesize test suite."""

from pathlib import Path

import pytest

from truesize.models.geometry import MultiPolygon, Polygon

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def countries_geojson(data_dir: Path) -> Path:
    """Countries FeatureCollection (Ecuador, Greenland, France, two oddities)."""
    return data_dir / "countries.geojson"


@pytest.fixture()
def states_geojson(data_dir: Path) -> Path:
    """States FeatureCollection (Texas, New Mexico, Alaska)."""
    return data_dir / "states.geojson"


@pytest.fixture()
def truncated_geojson(data_dir: Path) -> Path:
    """A file cut off mid-document (invalid JSON)."""
    return data_dir / "truncated.geojson"


@pytest.fixture()
def topology_json(data_dir: Path) -> Path:
    """Valid JSON that is not a FeatureCollection."""
    return data_dir / "topology.json"


# ---------------------------------------------------------------------------
# Geometry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def square_near_40() -> Polygon:
    """One-degree square between 40N and 41N at the prime meridian."""
    return Polygon(([(0, 40), (1, 40), (1, 41), (0, 41), (0, 40)],))


@pytest.fixture()
def polygon_with_hole() -> Polygon:
    """Ten-degree square with a two-degree hole, straddling the equator."""
    return Polygon(
        (
            [(10, -5), (20, -5), (20, 5), (10, 5), (10, -5)],
            [(14, -1), (16, -1), (16, 1), (14, 1), (14, -1)],
        )
    )


@pytest.fixture()
def two_islands() -> MultiPolygon:
    """Two disjoint squares in the southern hemisphere."""
    return MultiPolygon(
        (
            Polygon(([(100, -30), (102, -30), (102, -28), (100, -28), (100, -30)],)),
            Polygon(([(105, -25), (106, -25), (106, -24), (105, -25)],)),
        )
    )
