"""Module for the earthquake feed selection and filtering logic.

This module provides `EarthquakeService`, which owns the user-controlled state
of the page (feed period and magnitude threshold), fetches a feed whenever the
period changes, and exposes the events passing the threshold.
"""

import logging
import threading

from quake_viz.backend.feed import FeedError, UsgsFeedClient
from quake_viz.models import Period, SeismicEvent

# Create a module-level logger
logger = logging.getLogger(__name__)

# Constants
FETCH_ERROR_MESSAGE = "Failed to fetch earthquake data"
MIN_MAGNITUDE = 0.0
MAX_MAGNITUDE = 7.0


class EarthquakeService:
    """Feed selector and magnitude filter.

    Selecting a new period fetches that period's feed and replaces the event list
    wholesale. Changing the threshold only re-filters what is already loaded.

    Every fetch is tagged with an increasing request number. A response is applied
    only if no newer request was issued while it was in flight, so overlapping
    Streamlit reruns cannot let an older feed overwrite a newer selection.

    Attributes:
        client (UsgsFeedClient): Feed client used for fetching.
        period (Period): Most recently requested period.
        min_magnitude (float): Current magnitude threshold.
        events (list[SeismicEvent]): Events of the last successful fetch.
        error (str): User-facing error of the last fetch, empty if it succeeded.
        loading (bool): True while the latest request is in flight.
        fetch_count (int): Number of fetches issued so far.
    """

    def __init__(
        self,
        client: UsgsFeedClient,
        period: Period = Period.DAY,
        min_magnitude: float = MIN_MAGNITUDE,
    ) -> None:
        """Initialize the service without fetching anything.

        Args:
            client: Feed client used for fetching.
            period: Initially selected period. Defaults to the past day.
            min_magnitude: Initial magnitude threshold.
        """
        self.client = client
        self.period = Period(period)
        self.min_magnitude = self._validate_magnitude(min_magnitude)
        self.events: list[SeismicEvent] = []
        self.error = ""
        self.loading = False
        self.fetch_count = 0

        self._latest_request = 0
        self._lock = threading.Lock()

    @property
    def filtered_events(self) -> list[SeismicEvent]:
        """Events whose magnitude is at least the current threshold, in feed order."""
        threshold = self.min_magnitude
        return [event for event in self.events if event.magnitude >= threshold]

    def select_period(self, period: Period | str) -> bool:
        """Select a feed period, fetching it if it is not already the current one.

        The first call always fetches, since nothing has been loaded yet.

        Args:
            period: The period to show.

        Returns:
            bool: True if a fetch was issued.
        """
        period = Period(period)
        with self._lock:
            if self._latest_request and period == self.period:
                return False
            request_id = self._begin_request(period)

        self._run_request(request_id, period)
        return True

    def refresh(self) -> None:
        """Fetch the current period again."""
        with self._lock:
            period = self.period
            request_id = self._begin_request(period)

        self._run_request(request_id, period)

    def set_min_magnitude(self, value: float) -> None:
        """Set the magnitude threshold. Never triggers a fetch.

        Args:
            value: New threshold in [0, 7].

        Raises:
            ValueError: If the value is outside [0, 7].
        """
        self.min_magnitude = self._validate_magnitude(value)

    def status_text(self) -> str:
        """Return the status line shown under the controls.

        Returns:
            str: "Loading...", the fetch error, or the number of visible events.
        """
        if self.loading:
            return "Loading..."
        if self.error:
            return self.error
        return f"{len(self.filtered_events)} events"

    def _begin_request(self, period: Period) -> int:
        """Register a new request. Must be called with the lock held."""
        self._latest_request += 1
        self.period = period
        self.loading = True
        self.error = ""
        self.fetch_count += 1
        return self._latest_request

    def _run_request(self, request_id: int, period: Period) -> None:
        """Fetch the feed and apply the outcome if the request is still the latest.

        Args:
            request_id: Number returned by `_begin_request`.
            period: Period being fetched.
        """
        try:
            events = self.client.fetch(period)
        except FeedError as exception:
            logger.error(f"Fetching the {period.value} feed failed: {exception}")
            self._finish_request(request_id, period, error=FETCH_ERROR_MESSAGE)
            return
        except Exception as exception:
            # Any other failure must still clear the loading state.
            logger.error(
                f"Unexpected error fetching the {period.value} feed: {exception}", exc_info=True
            )
            self._finish_request(request_id, period, error=FETCH_ERROR_MESSAGE)
            return

        self._finish_request(request_id, period, events=events)

    def _finish_request(
        self,
        request_id: int,
        period: Period,
        events: list[SeismicEvent] | None = None,
        error: str = "",
    ) -> bool:
        """Apply a fetch outcome unless a newer request superseded it.

        On failure the previously loaded events are kept and only the error is set.

        Returns:
            bool: True if the outcome was applied.
        """
        with self._lock:
            if request_id != self._latest_request:
                logger.debug(
                    f"Discarding stale {period.value} response "
                    f"(request {request_id}, latest {self._latest_request})."
                )
                return False

            self.loading = False
            if error:
                self.error = error
            else:
                self.events = list(events or [])
                self.error = ""
            return True

    @staticmethod
    def _validate_magnitude(value: float) -> float:
        value = float(value)
        if not MIN_MAGNITUDE <= value <= MAX_MAGNITUDE:
            raise ValueError(
                f"Minimum magnitude must be between {MIN_MAGNITUDE} and {MAX_MAGNITUDE}, "
                f"got {value}"
            )
        return value
