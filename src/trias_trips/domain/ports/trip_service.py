"""Trip service port."""

from datetime import datetime
from typing import Protocol

from trias_trips.domain.models.trip_configuration import TripConfiguration
from trias_trips.domain.models.trip_summary import TripSummary


class TripService(Protocol):
    """Port for fetching the configured trip."""

    @property
    def trip_config(self) -> TripConfiguration:
        """The trip being fetched."""
        ...

    async def fetch_trips(self, now: datetime | None = None) -> list[TripSummary]:
        """Fetch trips for the configured origin and destination."""
        ...
