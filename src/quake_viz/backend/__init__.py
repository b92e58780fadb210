"""Backend package for Quake Viz."""

from .feed import FeedError, UsgsFeedClient
from .service import EarthquakeService

__all__ = ["EarthquakeService", "FeedError", "UsgsFeedClient"]
