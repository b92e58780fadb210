"""Frontend components for the Quake Viz application.

This module contains reusable UI components for the Streamlit interface:
the page shell, the feed controls, and the earthquake map with its automatic
viewport framing.
"""

from collections.abc import Sequence
from typing import Any, cast

import folium
import pandas as pd
import streamlit as st
from streamlit_folium import st_folium

from quake_viz.backend.service import MAX_MAGNITUDE, MIN_MAGNITUDE, EarthquakeService
from quake_viz.config import MapSettings
from quake_viz.models import Period, SeismicEvent
from quake_viz.utils import compute_bounds, event_to_marker

FOOTER_TEXT = "Data from USGS Earthquake API | Built with Streamlit & Folium"


def render_header() -> None:
    """Render the page title and subtitle."""
    st.title("🌎 Earthquake Visualizer")
    st.caption("Explore recent earthquake activity around the world in real time.")


def render_footer() -> None:
    """Render the page footer."""
    st.divider()
    st.caption(FOOTER_TEXT)


def render_controls() -> tuple[Period, float]:
    """Render the period selector and the minimum magnitude slider.

    Widget values live in session state under the "period" and "min_magnitude"
    keys, which the caller is expected to have initialized.

    Returns:
        A tuple containing (period, min_magnitude) as chosen by the user.
    """
    period = st.selectbox(
        "Period",
        list(Period),
        format_func=lambda p: p.label,
        key="period",
    )
    min_magnitude = st.slider(
        "Min Magnitude",
        min_value=MIN_MAGNITUDE,
        max_value=MAX_MAGNITUDE,
        step=0.1,
        key="min_magnitude",
    )
    return Period(period), float(min_magnitude)


def render_status(service: EarthquakeService) -> None:
    """Render the loading, error or event count line.

    Args:
        service: The service to report on.
    """
    text = service.status_text()
    if service.error and not service.loading:
        st.error(text)
    else:
        st.markdown(f"**{text}**")


def fit_viewport(
    folium_map: folium.Map,
    events: Sequence[SeismicEvent],
    max_zoom: int = 6,
    padding: int = 40,
) -> bool:
    """Frame the map around the given events.

    Args:
        folium_map: The map to adjust.
        events: Visible events.
        max_zoom: Highest zoom level the fit may choose.
        padding: Padding in pixels on each side of the bounds.

    Returns:
        True if the view was fitted, False if there was nothing to fit.
    """
    bounds = compute_bounds(events)
    if bounds is None:
        return False

    folium_map.fit_bounds(bounds, padding=(padding, padding), max_zoom=max_zoom)
    return True


def create_event_map(events: Sequence[SeismicEvent], settings: MapSettings) -> folium.Map:
    """Create a Folium map with one circle marker per event.

    Args:
        events: The events to draw, typically the filtered list.
        settings: Map rendering settings.

    Returns:
        The populated map, fitted to the events when there are any.
    """
    folium_map = folium.Map(
        location=[settings.center_lat, settings.center_lng],
        zoom_start=settings.zoom_start,
        tiles=None,  # Tiles are added explicitly below
        scrollWheelZoom=True,
    )

    folium.TileLayer(
        tiles=settings.tiles,
        attr=settings.attribution,
        name="OpenStreetMap",
        overlay=False,
        control=False,
    ).add_to(folium_map)

    for event in events:
        marker = event_to_marker(event, settings.min_radius, settings.display_timezone)
        folium.CircleMarker(
            location=[marker.latitude, marker.longitude],
            radius=marker.radius,
            color=marker.color,
            fill=True,
            fill_color=marker.color,
            fill_opacity=settings.fill_opacity,
            popup=folium.Popup(marker.popup_html, max_width=300),
        ).add_to(folium_map)

    fit_viewport(folium_map, events, max_zoom=settings.max_zoom, padding=settings.padding)
    return folium_map


def display_event_map(events: Sequence[SeismicEvent], settings: MapSettings) -> dict[str, Any]:
    """Render the earthquake map inside Streamlit.

    Args:
        events: The events to draw.
        settings: Map rendering settings.

    Returns:
        Data returned by st_folium. Only the last clicked popup is requested.
    """
    folium_map = create_event_map(events, settings)
    return cast(
        dict[str, Any],
        st_folium(
            folium_map,
            returned_objects=["last_object_clicked_popup"],
            height=settings.height,
            use_container_width=True,
        ),
    )


def events_to_dataframe(events: Sequence[SeismicEvent]) -> pd.DataFrame:
    """Tabulate events for the raw data view.

    Args:
        events: Events to tabulate.

    Returns:
        One row per event, newest first. Empty DataFrame with the model columns if
        there are no events.
    """
    columns = list(SeismicEvent.model_fields)
    if not events:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame([event.to_dict() for event in events], columns=columns)
    return df.sort_values("time", ascending=False, na_position="last").reset_index(drop=True)
