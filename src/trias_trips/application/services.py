"""Application services (use cases) for trip fetching."""

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from trias_trips.domain.errors import ConfigurationError
from trias_trips.domain.models import TripConfiguration, TripQuery, TripSummary

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from trias_trips.domain.ports import TripRepository


class TripService:
    """Service for fetching the configured trip."""

    def __init__(
        self, trip_repository: "TripRepository", trip_config: TripConfiguration
    ) -> None:
        """Initialize with a trip repository and the trip to fetch."""
        self._trip_repository = trip_repository
        self._trip_config = trip_config

    @property
    def trip_config(self) -> TripConfiguration:
        return self._trip_config

    def validate(self) -> None:
        """Check that endpoint, origin and destination are configured.

        Raises:
            ConfigurationError: Listing every missing setting.
        """
        missing = [
            name
            for name, value in (
                ("endpoint", self._trip_config.endpoint),
                ("originStopPointRef", self._trip_config.origin_stop_point_ref),
                ("destinationStopPointRef", self._trip_config.destination_stop_point_ref),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(missing)

    def build_query(self, now: datetime | None = None) -> TripQuery:
        """Build a query departing now (or at the given time) for the configured trip."""
        self.validate()
        return TripQuery(
            origin_stop_point_ref=self._trip_config.origin_stop_point_ref,
            destination_stop_point_ref=self._trip_config.destination_stop_point_ref,
            departure_time=now or datetime.now(UTC),
            number_of_results=self._trip_config.number_of_results,
            include_intermediate_stops=self._trip_config.include_intermediate_stops,
        )

    async def fetch_trips(self, now: datetime | None = None) -> list[TripSummary]:
        """Fetch trips for the configured origin and destination.

        Configuration errors are raised before any network call.
        """
        query = self.build_query(now)
        trips = await self._trip_repository.get_trips(query)
        logger.debug(f"TripService received {len(trips)} trip(s)")
        return trips
