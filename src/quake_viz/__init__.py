"""Earthquake visualization package."""

from .backend.feed import FeedError, UsgsFeedClient
from .backend.service import EarthquakeService
from .config import FeedSettings, LoggingSettings, MapSettings, Settings, get_settings
from .frontend.app import main
from .frontend.components import create_event_map, display_event_map, fit_viewport
from .logger import configure_logging
from .models import Marker, Period, SeismicEvent
from .utils import compute_bounds, event_to_marker, magnitude_to_color, magnitude_to_radius

__all__ = [
    "EarthquakeService",
    "FeedError",
    "FeedSettings",
    "LoggingSettings",
    "MapSettings",
    "Marker",
    "Period",
    "SeismicEvent",
    "Settings",
    "UsgsFeedClient",
    "compute_bounds",
    "configure_logging",
    "create_event_map",
    "display_event_map",
    "event_to_marker",
    "fit_viewport",
    "get_settings",
    "magnitude_to_color",
    "magnitude_to_radius",
    "main",
]
