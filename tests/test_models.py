"""Tests for the quake_viz data models."""

from datetime import datetime, timezone

import pytest
from conftest import make_feature
from pydantic import ValidationError

from quake_viz.models import Period, SeismicEvent


class TestSeismicEvent:
    """Tests for parsing GeoJSON features into events."""

    def test_from_feature(self) -> None:
        """Test that every attribute is read from the feature."""
        feature = make_feature(
            "us7000abcd",
            5.3,
            lon=142.1,
            lat=38.3,
            depth=29.5,
            time=1_700_000_000_000,
            place="Off the east coast of Honshu, Japan",
            url="https://earthquake.usgs.gov/earthquakes/eventpage/us7000abcd",
        )
        event = SeismicEvent.from_feature(feature)

        assert event.id == "us7000abcd"
        assert event.magnitude == 5.3
        assert event.place == "Off the east coast of Honshu, Japan"
        assert event.time == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
        assert (event.longitude, event.latitude, event.depth) == (142.1, 38.3, 29.5)
        assert event.url.endswith("us7000abcd")

    def test_missing_properties_fall_back(self) -> None:
        """Test that null magnitude, place, time and url get defaults."""
        event = SeismicEvent.from_feature(make_feature("x", None, time=None, place=None, url=None))

        assert event.magnitude == 0.0
        assert event.place == "Unknown"
        assert event.time is None
        assert event.url == ""

    def test_two_element_coordinates(self) -> None:
        """Test that a missing depth reads as zero."""
        feature = make_feature("x", 1.0)
        feature["geometry"]["coordinates"] = [1.0, 2.0]
        assert SeismicEvent.from_feature(feature).depth == 0.0

    def test_missing_geometry(self) -> None:
        """Test that a feature without geometry is rejected."""
        feature = make_feature("x", 1.0)
        feature["geometry"] = None
        with pytest.raises(TypeError):
            SeismicEvent.from_feature(feature)

    def test_out_of_range_latitude(self) -> None:
        """Test that coordinates are validated."""
        with pytest.raises(ValidationError):
            SeismicEvent.from_feature(make_feature("x", 1.0, lat=95.0))

    def test_events_are_immutable(self) -> None:
        """Test that a fetched event cannot be modified."""
        event = SeismicEvent.from_feature(make_feature("x", 1.0))
        with pytest.raises(ValidationError):
            event.magnitude = 9.0  # type: ignore[misc]


def test_period_labels() -> None:
    """Test the selector labels and values of each period."""
    assert [p.value for p in Period] == ["hour", "day", "week"]
    assert [p.label for p in Period] == ["Past Hour", "Past Day", "Past Week"]
    assert Period("week") is Period.WEEK
