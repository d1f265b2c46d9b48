"""Trip repository port."""

from typing import Protocol

from trias_trips.domain.models.trip_query import TripQuery
from trias_trips.domain.models.trip_summary import TripSummary


class TripRepository(Protocol):
    """Port for retrieving trip itineraries."""

    async def get_trips(self, query: TripQuery) -> list[TripSummary]:
        """Get trips matching the query, in the order returned by the server."""
        ...
