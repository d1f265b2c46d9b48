"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from trias_trips.adapters.trias_api.constants import DEFAULT_TRIAS_ENDPOINT

# TOML [trip] keys that map one-to-one onto settings
TRIP_SECTION_KEYS = (
    "trias_endpoint",
    "origin_stop_point_ref",
    "destination_stop_point_ref",
    "number_of_results",
    "include_intermediate_stops",
)
DISPLAY_SECTION_KEYS = ("title", "timezone", "refresh_interval_seconds")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # TRIAS API configuration
    trias_endpoint: str = Field(
        default=DEFAULT_TRIAS_ENDPOINT, description="TRIAS endpoint URL to POST trip requests to"
    )
    trias_api_timeout: int = Field(
        default=10, description="Timeout for TRIAS API requests in seconds"
    )

    # Trip configuration
    origin_stop_point_ref: str = Field(
        default="", description="StopPointRef of the origin (e.g. 'de:08111:6118')"
    )
    destination_stop_point_ref: str = Field(
        default="", description="StopPointRef of the destination"
    )
    number_of_results: int = Field(default=3, description="Number of trips to request")
    include_intermediate_stops: bool = Field(
        default=True, description="Ask the server to include intermediate stops"
    )

    # Display configuration
    refresh_interval_seconds: int = Field(
        default=60, description="Interval between trip updates in seconds"
    )
    title: str = Field(default="VVS Trips", description="Title shown above the trip list")
    timezone: str = Field(
        default="Europe/Berlin",
        description="Timezone for displaying trip times (IANA timezone name)",
    )

    # Optional TOML config file with [trip] and [display] sections
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding trip and display settings",
    )

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Create a config that ignores any local .env file."""
        return cls(_env_file=None, **overrides)  # type: ignore[call-arg]

    @field_validator("number_of_results")
    @classmethod
    def validate_number_of_results(cls, v: int) -> int:
        """Validate number of results is a positive integer."""
        if v < 1:
            raise ValueError("number_of_results must be a positive integer")
        return v

    @field_validator("refresh_interval_seconds")
    @classmethod
    def validate_refresh_interval(cls, v: int) -> int:
        """Validate refresh interval is at least one second."""
        if v < 1:
            raise ValueError("refresh_interval_seconds must be at least 1")
        return v

    @field_validator("origin_stop_point_ref", "destination_stop_point_ref", "trias_endpoint")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip surrounding whitespace from identifiers."""
        return v.strip()

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def apply_toml_overrides(self) -> None:
        """Update trip and display settings from the TOML file, if one is configured.

        Values in [trip] and [display] win over environment variables.
        """
        if not self.config_file:
            return

        toml_data = self._load_toml_data()

        trip = toml_data.get("trip", {})
        if not isinstance(trip, dict):
            raise ValueError("TOML config 'trip' must be a table")
        for key in TRIP_SECTION_KEYS:
            if key in trip:
                setattr(self, key, trip[key])

        display = toml_data.get("display", {})
        if not isinstance(display, dict):
            raise ValueError("TOML config 'display' must be a table")
        for key in DISPLAY_SECTION_KEYS:
            if key in display:
                setattr(self, key, display[key])
