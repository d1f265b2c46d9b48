"""Parser for TRIAS TripResponse documents."""

import logging
import re
from datetime import datetime
from typing import Any

from trias_trips.adapters.trias_api.constants import GENERIC_PT_MODE, TRIP_RESULT_PATH
from trias_trips.adapters.trias_api.elements import (
    TimedLegElement,
    TripElement,
    TripLegElement,
    parse_trip,
)
from trias_trips.adapters.trias_api.xml_tree import as_list, get_path, parse_xml_tree
from trias_trips.domain.models.trip_summary import LegSummary, TransitLeg, TripSummary, WalkLeg

logger = logging.getLogger(__name__)

# TRIAS durations are ISO 8601 durations like "PT17M" or "PT1H5M"
DURATION_PATTERN = re.compile(r"^PT(?:(\d+)H)?(?:(\d+)M)?")


class TripResponseParser:
    """Parses TRIAS TripResponse documents into TripSummary objects."""

    @staticmethod
    def extract_trips(xml: str | bytes) -> list[TripSummary]:
        """Extract trip summaries from a TRIAS response.

        Args:
            xml: Response body.

        Returns:
            Trip summaries in server order. Empty if the response has no
            TripResult.

        Raises:
            ResponseParseError: If the body is not well-formed XML.
        """
        tree = parse_xml_tree(xml)
        trip_results = get_path(tree, *TRIP_RESULT_PATH)
        if trip_results is None:
            logger.debug("No TripResult in TRIAS response")
            return []

        trips = []
        for trip_result in as_list(trip_results):
            trip = parse_trip(trip_result)
            if trip is None:
                logger.debug("Skipping TripResult without Trip")
                continue
            trips.append(TripResponseParser._to_summary(trip))

        return trips

    @staticmethod
    def duration_to_minutes(duration: Any) -> int | None:
        """Convert an ISO 8601 duration ("PT1H5M") to whole minutes.

        Missing hour or minute components count as zero. Returns None for
        anything that does not start with "PT".
        """
        if not isinstance(duration, str):
            return None

        match = DURATION_PATTERN.match(duration)
        if not match:
            return None

        hours = int(match.group(1)) if match.group(1) else 0
        minutes = int(match.group(2)) if match.group(2) else 0
        return hours * 60 + minutes

    @staticmethod
    def _parse_time(time_str: str | None) -> datetime | None:
        """Parse ISO 8601 time string."""
        if not time_str:
            return None

        try:
            return datetime.fromisoformat(time_str.replace("Z", "+00:00"))
        except ValueError:
            logger.debug(f"Ignoring unparsable TRIAS time: {time_str}")
            return None

    @staticmethod
    def _to_summary(trip: TripElement) -> TripSummary:
        return TripSummary(
            departure_time=TripResponseParser._parse_time(trip.start_time),
            arrival_time=TripResponseParser._parse_time(trip.end_time),
            duration_minutes=TripResponseParser.duration_to_minutes(trip.duration),
            legs=[TripResponseParser._to_leg(leg) for leg in trip.legs],
        )

    @staticmethod
    def _to_leg(leg: TripLegElement) -> LegSummary:
        if not isinstance(leg, TimedLegElement):
            return WalkLeg()

        return TransitLeg(
            mode=leg.service.mode or GENERIC_PT_MODE,
            line=leg.service.published_line_name,
            journey_ref=leg.service.journey_ref,
            operating_day_ref=leg.service.operating_day_ref,
            from_stop=leg.board.stop_point_name,
            to_stop=leg.alight.stop_point_name,
            departure_time=TripResponseParser._parse_time(leg.board.time),
            arrival_time=TripResponseParser._parse_time(leg.alight.time),
        )


extract_trips = TripResponseParser.extract_trips
duration_to_minutes = TripResponseParser.duration_to_minutes
