"""Shared fixtures for the quake_viz tests."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from quake_viz.config import FeedSettings, MapSettings
from quake_viz.models import SeismicEvent


def make_feature(
    event_id: str,
    mag: float | None,
    lon: float = 0.0,
    lat: float = 0.0,
    depth: float = 10.0,
    time: int | None = 1_700_000_000_000,
    place: str | None = "Somewhere",
    url: str | None = "https://earthquake.usgs.gov/earthquakes/eventpage/x",
) -> dict[str, Any]:
    """Build a GeoJSON feature shaped like the USGS summary feeds."""
    return {
        "type": "Feature",
        "id": event_id,
        "properties": {"mag": mag, "place": place, "time": time, "url": url},
        "geometry": {"type": "Point", "coordinates": [lon, lat, depth]},
    }


def make_event(event_id: str, magnitude: float, lat: float = 0.0, lon: float = 0.0) -> SeismicEvent:
    """Build an event directly."""
    return SeismicEvent(id=event_id, magnitude=magnitude, latitude=lat, longitude=lon)


@pytest.fixture
def feed_settings() -> FeedSettings:
    """Fixture for feed settings."""
    return FeedSettings()


@pytest.fixture
def map_settings() -> MapSettings:
    """Fixture for map settings."""
    return MapSettings()


@pytest.fixture
def feed_document() -> dict[str, Any]:
    """A feed with three events of magnitude 2, 4 and 6."""
    return {
        "type": "FeatureCollection",
        "features": [
            make_feature("ev2", 2.0, lon=-120.0, lat=35.0),
            make_feature("ev4", 4.0, lon=140.0, lat=-10.0),
            make_feature("ev6", 6.0, lon=10.0, lat=45.0),
        ],
    }


@pytest.fixture
def mock_session(feed_document: dict[str, Any]) -> MagicMock:
    """A requests.Session stand-in returning `feed_document`."""
    session = MagicMock()
    session.headers = {}
    session.get.return_value.json.return_value = feed_document
    session.get.return_value.raise_for_status.return_value = None
    return session
