"""HTTP client for the USGS GeoJSON summary feeds."""

import logging
from typing import Any

import requests
from pydantic import ValidationError

from quake_viz.config import FeedSettings
from quake_viz.models import Period, SeismicEvent

logger = logging.getLogger(__name__)

# fromtimestamp raises OverflowError, OSError or ValueError for out-of-range times.
_MALFORMED_FEATURE_ERRORS = (
    AttributeError,
    KeyError,
    TypeError,
    IndexError,
    ValueError,
    OverflowError,
    OSError,
    ValidationError,
)


class FeedError(RuntimeError):
    """Raised when a feed cannot be downloaded or decoded."""


class UsgsFeedClient:
    """Fetches seismic events from the USGS summary feeds.

    Attributes:
        settings (FeedSettings): Feed configuration.
        session (requests.Session): Shared HTTP session.
    """

    def __init__(self, settings: FeedSettings, session: requests.Session | None = None) -> None:
        """Initialize the client.

        Args:
            settings: Feed configuration (URLs, timeout, headers).
            session: Optional pre-built session, mainly for tests.
        """
        self.settings = settings
        self.session = session or requests.Session()
        self.session.headers.update(settings.headers)

    def fetch(self, period: Period) -> list[SeismicEvent]:
        """Download and parse the feed for a period.

        Args:
            period: The time window to fetch.

        Returns:
            list[SeismicEvent]: Events in feed order.

        Raises:
            FeedError: On network failure, a non-2xx status, an undecodable body or a
                document that is not a feature collection.
        """
        period = Period(period)
        url = self.settings.urls[period.value]
        logger.info(f"Fetching {period.value} feed from {url}")

        try:
            response = self.session.get(url, timeout=self.settings.timeout)
            response.raise_for_status()
            document = response.json()
        except requests.RequestException as exception:
            raise FeedError(f"Request to {url} failed: {exception}") from exception
        except ValueError as exception:
            raise FeedError(f"Feed at {url} is not valid JSON: {exception}") from exception

        if not isinstance(document, dict):
            raise FeedError(f"Feed at {url} is not a GeoJSON object")

        features = document.get("features") or []
        if not isinstance(features, list):
            raise FeedError(f"Feed at {url} has a non-list 'features' member")

        events = self._parse_features(features)
        logger.info(f"Fetched {len(events)} events for period '{period.value}'.")
        return events

    def _parse_features(self, features: list[dict[str, Any]]) -> list[SeismicEvent]:
        """Parse feed features, skipping malformed entries.

        Args:
            features: The feed's ``features`` array.

        Returns:
            list[SeismicEvent]: Parsed events.
        """
        events: list[SeismicEvent] = []
        for index, feature in enumerate(features):
            try:
                events.append(SeismicEvent.from_feature(feature))
            except _MALFORMED_FEATURE_ERRORS as exception:
                logger.warning(f"Skipping malformed feature {index}: {exception}")
        return events
