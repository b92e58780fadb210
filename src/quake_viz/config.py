"""Configuration settings for the Quake Viz application.

This module defines the configuration settings for the Quake Viz application, including
the USGS feed endpoints, map rendering defaults and logging. It uses Pydantic's
BaseSettings for environment variable management.
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import Period


class FeedSettings(BaseModel):
    """Settings for the USGS GeoJSON summary feeds.

    Attributes:
        base_url: Base URL of the summary feeds.
        timeout: Request timeout in seconds.
        user_agent: User-Agent string to use for requests.
    """

    base_url: str = Field(
        "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary",
        description="Base URL of the USGS summary feeds",
    )
    timeout: float = Field(10.0, gt=0, description="Request timeout in seconds")
    user_agent: str = Field("quake-viz/0.1", description="User-Agent string")

    @computed_field
    def urls(self) -> dict[str, str]:
        """Return the feed URL for every period.

        Returns:
            A dictionary mapping period values ("hour", "day", "week") to feed URLs.
        """
        base = self.base_url.rstrip("/")
        return {period.value: f"{base}/all_{period.value}.geojson" for period in Period}

    @computed_field
    def headers(self) -> dict[str, str]:
        """Return the headers dictionary.

        Returns:
            A dictionary containing the HTTP headers to be used in feed requests.
        """
        return {
            "User-Agent": self.user_agent,
            "Accept-Encoding": "gzip, deflate",
            "Accept": "application/geo+json, application/json;q=0.9",
        }


class MapSettings(BaseModel):
    """Settings for the rendered map.

    Attributes:
        center_lat: Initial map center latitude.
        center_lng: Initial map center longitude.
        zoom_start: Initial zoom level.
        max_zoom: Zoom cap applied when fitting the viewport to markers.
        padding: Padding in pixels around the fitted bounds.
        height: Map height in pixels.
        tiles: Tile URL template.
        attribution: Tile attribution HTML.
        min_radius: Smallest marker radius in pixels.
        fill_opacity: Marker fill opacity.
        display_timezone: IANA timezone used for popup times.
    """

    center_lat: float = Field(20.0, ge=-90.0, le=90.0, description="Initial center latitude")
    center_lng: float = Field(0.0, ge=-180.0, le=180.0, description="Initial center longitude")
    zoom_start: int = Field(2, ge=0, description="Initial zoom level")
    max_zoom: int = Field(6, ge=0, description="Maximum zoom when fitting bounds")
    padding: int = Field(40, ge=0, description="Fit bounds padding in pixels")
    # 560px is roughly 70vh on a typical laptop screen.
    height: int = Field(560, gt=0, description="Map height in pixels")
    tiles: str = Field(
        "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png", description="Tile URL template"
    )
    attribution: str = Field(
        '&copy; <a href="https://www.openstreetmap.org/">OpenStreetMap</a>',
        description="Tile attribution",
    )
    min_radius: float = Field(4.0, ge=0.0, description="Marker radius floor in pixels")
    fill_opacity: float = Field(0.7, ge=0.0, le=1.0, description="Marker fill opacity")
    display_timezone: str = Field("UTC", description="Timezone for displayed event times")

    @field_validator("display_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        """Reject timezone names the zoneinfo database does not know."""
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exception:
            raise ValueError(f"Unknown timezone '{value}'") from exception
        return value


class LoggingSettings(BaseModel):
    """Logging configuration settings.

    Attributes:
        level: The logging level (e.g., INFO, DEBUG).
        format: The log message format string.
    """

    level: str = Field("INFO", description="Logging level")
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )


class Settings(BaseSettings):
    """Global application settings.

    This class loads settings from environment variables and provides a structured
    access to them.

    Attributes:
        feed: Feed configuration settings.
        map: Map rendering settings.
        logging: Logging configuration settings.
    """

    feed: FeedSettings = Field(default_factory=FeedSettings)
    map: MapSettings = Field(default_factory=MapSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of the settings.

    This function returns a singleton instance of the Settings class, cached
    using lru_cache to avoid reloading environment variables on every call.

    Returns:
        The global Settings instance.
    """
    return Settings()
