"""Main application module for Quake Viz."""

import logging

import streamlit as st

from quake_viz.backend.feed import UsgsFeedClient
from quake_viz.backend.service import MIN_MAGNITUDE, EarthquakeService
from quake_viz.config import Settings, get_settings
from quake_viz.frontend.components import (
    display_event_map,
    events_to_dataframe,
    render_controls,
    render_footer,
    render_header,
    render_status,
)
from quake_viz.logger import configure_logging
from quake_viz.models import Period

logger = logging.getLogger(__name__)

# --- Configuration Loading ---


def load_config() -> Settings:
    """Loads the application configuration.

    Returns:
        Settings: The application settings object.

    Raises:
        RuntimeError: If the configuration cannot be loaded.
    """
    try:
        return get_settings()
    except Exception as e:
        raise RuntimeError(f"Failed to load configuration: {e}") from e


@st.cache_resource
def get_client(_settings: Settings) -> UsgsFeedClient:
    """Creates and caches the feed client shared by all sessions.

    Args:
        _settings: The application settings object. The underscore keeps Streamlit
            from hashing it.

    Returns:
        UsgsFeedClient: The initialized client.
    """
    return UsgsFeedClient(_settings.feed)


# --- Main App Logic ---


def _init_session_state(settings: Settings) -> EarthquakeService:
    """Initialize session state and return this session's service.

    Creates the service on first run and seeds the widget keys 'period' and
    'min_magnitude' with their defaults.

    Args:
        settings: The application settings object.

    Returns:
        EarthquakeService: The per-session service.
    """
    if "period" not in st.session_state:
        st.session_state["period"] = Period.DAY
    if "min_magnitude" not in st.session_state:
        st.session_state["min_magnitude"] = MIN_MAGNITUDE

    if "service" not in st.session_state:
        st.session_state["service"] = EarthquakeService(
            get_client(settings),
            period=st.session_state["period"],
            min_magnitude=st.session_state["min_magnitude"],
        )
    return st.session_state["service"]


def display_data_tabs(service: EarthquakeService, settings: Settings) -> None:
    """Display the map and raw data tabs for the visible events.

    Args:
        service: The per-session service.
        settings: The application settings object.
    """
    events = service.filtered_events
    tabs = st.tabs(["Map View", "Raw Data"])

    with tabs[0]:
        display_event_map(events, settings.map)

    with tabs[1]:
        st.dataframe(events_to_dataframe(events), use_container_width=True)


def main() -> None:
    """Entry point for the application.

    Checks if running within Streamlit and relaunches if necessary.
    """
    if st.runtime.exists():
        _main_app_logic()
    else:
        import sys

        from streamlit.web import cli as stcli

        sys.argv = ["streamlit", "run", __file__] + sys.argv[1:]
        sys.exit(stcli.main())


def _main_app_logic() -> None:
    """Core logic for the Streamlit application."""
    st.set_page_config(layout="wide", page_title="Earthquake Visualizer")

    # --- Initialization ---
    try:
        settings = load_config()
    except RuntimeError as e:
        st.error(str(e))
        st.stop()

    configure_logging()

    service = _init_session_state(settings)

    render_header()

    # --- UI Layout ---
    col1, col2 = st.columns([1, 3])

    # Left Column: Controls
    with col1:
        period, min_magnitude = render_controls()
        service.set_min_magnitude(min_magnitude)

        with st.spinner("Loading..."):
            service.select_period(period)

        render_status(service)

        if st.button("Refresh Data"):
            logger.info(f"Manual refresh of the {service.period.value} feed requested.")
            with st.spinner("Loading..."):
                service.refresh()
            st.rerun()

    # Right Column: Map and Results
    with col2:
        display_data_tabs(service, settings)

    render_footer()


if __name__ == "__main__":
    main()
