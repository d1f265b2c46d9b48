"""TRIAS trip repository adapter."""

import logging
from typing import TYPE_CHECKING

from trias_trips.adapters.trias_api.request_builder import build_trip_request
from trias_trips.adapters.trias_api.response_parser import TripResponseParser
from trias_trips.domain.models.trip_query import TripQuery
from trias_trips.domain.models.trip_summary import TripSummary
from trias_trips.domain.ports.trip_repository import TripRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from trias_trips.adapters.trias_api.http_client import TriasHttpClient


class TriasTripRepository(TripRepository):
    """Adapter fetching trips from a TRIAS endpoint."""

    def __init__(self, http_client: "TriasHttpClient") -> None:
        """Initialize with an HTTP client bound to the TRIAS endpoint."""
        self._http_client = http_client

    async def get_trips(self, query: TripQuery) -> list[TripSummary]:
        """Build a TripRequest, post it and extract the trips from the response."""
        request_xml = build_trip_request(query)
        response_xml = await self._http_client.post_xml(request_xml)
        trips = TripResponseParser.extract_trips(response_xml)
        logger.debug(
            f"Fetched {len(trips)} trip(s) from {query.origin_stop_point_ref} "
            f"to {query.destination_stop_point_ref}"
        )
        return trips
