"""Frontend package for Quake Viz."""

from .app import main
from .components import create_event_map, display_event_map, fit_viewport

__all__ = ["main", "create_event_map", "display_event_map", "fit_viewport"]
