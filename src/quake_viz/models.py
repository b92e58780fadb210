"""Pydantic models for the quake_viz package.

This module defines the data models used throughout the application to represent
seismic events read from the USGS feeds, the selectable feed periods and the
map markers derived from events.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Period(str, Enum):
    """Time window covered by a USGS summary feed."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"

    @property
    def label(self) -> str:
        """Human readable label used by the period selector."""
        return f"Past {self.value.capitalize()}"


class SeismicEvent(BaseModel):
    """Represents a single earthquake event from a USGS feed.

    Events are immutable once fetched. A new feed replaces the whole list.

    Attributes:
        id: USGS event identifier.
        magnitude: Event magnitude. A missing magnitude is read as 0.0.
        place: Place description.
        time: Occurrence time in UTC, or None when the feed omits it.
        longitude: Longitude of the epicenter (-180.0 to 180.0).
        latitude: Latitude of the epicenter (-90.0 to 90.0).
        depth: Depth in kilometres.
        url: USGS event page.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="USGS event identifier.")
    magnitude: float = Field(0.0, description="Event magnitude.")
    place: str = Field("Unknown", description="Place description.")
    time: datetime | None = Field(default=None, description="Occurrence time (UTC).")
    longitude: float = Field(..., ge=-180.0, le=180.0, description="Longitude of the event.")
    latitude: float = Field(..., ge=-90.0, le=90.0, description="Latitude of the event.")
    depth: float = Field(0.0, description="Depth in km.")
    url: str = Field("", description="USGS event page.")

    @classmethod
    def from_feature(cls, feature: dict[str, Any]) -> "SeismicEvent":
        """Build an event from a GeoJSON feature.

        Args:
            feature: One entry of the feed's ``features`` list.

        Returns:
            SeismicEvent: The parsed event.

        Raises:
            KeyError, TypeError, IndexError: If the feature lacks an id or geometry.
            pydantic.ValidationError: If a value is out of range.
        """
        props = feature.get("properties") or {}
        coords = feature["geometry"]["coordinates"]
        millis = props.get("time")
        return cls(
            id=str(feature["id"]),
            magnitude=props.get("mag") or 0.0,
            place=props.get("place") or "Unknown",
            time=(
                datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
                if millis is not None
                else None
            ),
            longitude=coords[0],
            latitude=coords[1],
            depth=coords[2] if len(coords) > 2 and coords[2] is not None else 0.0,
            url=props.get("url") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert the model to a flat dictionary.

        Returns:
            dict[str, Any]: A dictionary representation of the event.
        """
        return self.model_dump()


class Marker(BaseModel):
    """Visual representation of one event on the map."""

    event_id: str
    latitude: float
    longitude: float
    radius: float = Field(..., gt=0.0, description="Circle radius in pixels.")
    color: str = Field(..., description="Hex stroke and fill color.")
    popup_html: str = Field("", description="HTML shown in the marker popup.")
