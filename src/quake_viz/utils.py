"""Utility functions for the quake_viz package.

Pure helpers that turn seismic events into visual attributes: marker radius and
color, popup content, and the bounding box used to frame the map.
"""

import calendar
import html
from collections.abc import Sequence
from datetime import datetime
from zoneinfo import ZoneInfo

from .models import Marker, SeismicEvent

DEFAULT_MIN_RADIUS = 4.0

# (lower bound, color), highest band first. First match wins.
MAGNITUDE_COLORS: list[tuple[float, str]] = [
    (6.0, "#800026"),
    (5.0, "#BD0026"),
    (4.0, "#E31A1C"),
    (3.0, "#FC4E2A"),
    (2.0, "#FD8D3C"),
]
BASE_COLOR = "#FEB24C"


def magnitude_to_radius(magnitude: float, min_radius: float = DEFAULT_MIN_RADIUS) -> float:
    """Map a magnitude to a marker radius in pixels.

    The radius doubles every 1.5 magnitude units and never drops below
    ``min_radius``.

    Args:
        magnitude: Event magnitude.
        min_radius: Radius floor. Defaults to 4 pixels.

    Returns:
        The marker radius.
    """
    return max(min_radius, 2 ** (magnitude / 1.5))


def magnitude_to_color(magnitude: float) -> str:
    """Return the palette color for a magnitude.

    Args:
        magnitude: Event magnitude.

    Returns:
        Hex color string of the highest band whose lower bound is reached.
    """
    for lower_bound, color in MAGNITUDE_COLORS:
        if magnitude >= lower_bound:
            return color
    return BASE_COLOR


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return f"{day}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_event_time(time: datetime | None, tz_name: str = "UTC") -> str:
    """Format an event time for display, e.g. "October 19th, 2026 at 3:04 PM".

    Args:
        time: Timezone-aware event time, or None.
        tz_name: IANA timezone to display the time in.

    Returns:
        The formatted time, or "Unknown" if no time is available.
    """
    if time is None:
        return "Unknown"

    local = time.astimezone(ZoneInfo(tz_name))
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{calendar.month_name[local.month]} {_ordinal(local.day)}, {local.year} "
        f"at {hour}:{local.minute:02d} {meridiem}"
    )


def _format_number(value: float) -> str:
    # Integral values drop the trailing ".0", others keep their full precision.
    return f"{value:.15g}"


def build_popup_html(event: SeismicEvent, tz_name: str = "UTC") -> str:
    """Build the popup body shown when a marker is clicked.

    Args:
        event: The event to describe.
        tz_name: Timezone used for the event time.

    Returns:
        An HTML fragment with place, magnitude, depth, time and a link to USGS.
    """
    lines = [
        f"<strong>{html.escape(event.place)}</strong>",
        f"Magnitude: {_format_number(event.magnitude)} | Depth: {_format_number(event.depth)} km",
        f"Time: {format_event_time(event.time, tz_name)}",
    ]
    if event.url:
        lines.append(
            f'<a href="{html.escape(event.url, quote=True)}" target="_blank" '
            'rel="noopener noreferrer">View on USGS</a>'
        )
    return "<br>".join(lines)


def event_to_marker(
    event: SeismicEvent, min_radius: float = DEFAULT_MIN_RADIUS, tz_name: str = "UTC"
) -> Marker:
    """Derive the marker for a single event.

    Args:
        event: The event to draw.
        min_radius: Radius floor in pixels.
        tz_name: Timezone used in the popup.

    Returns:
        Marker: Position, radius, color and popup for the event.
    """
    return Marker(
        event_id=event.id,
        latitude=event.latitude,
        longitude=event.longitude,
        radius=magnitude_to_radius(event.magnitude, min_radius),
        color=magnitude_to_color(event.magnitude),
        popup_html=build_popup_html(event, tz_name),
    )


def compute_bounds(events: Sequence[SeismicEvent]) -> list[list[float]] | None:
    """Compute the bounding box covering all events.

    Args:
        events: Events to cover.

    Returns:
        ``[[south, west], [north, east]]`` in degrees, or None if there are no events.
    """
    if not events:
        return None

    latitudes = [event.latitude for event in events]
    longitudes = [event.longitude for event in events]
    return [[min(latitudes), min(longitudes)], [max(latitudes), max(longitudes)]]
