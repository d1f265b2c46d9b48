"""Builder for TRIAS TripRequest documents.

Stop references are embedded as-is, without XML escaping. They are numeric or
alphanumeric codes (e.g. "de:08111:6118") in practice; do not pass untrusted
input through here.
"""

from datetime import UTC, datetime

from trias_trips.adapters.trias_api.constants import TRIAS_NAMESPACE, TRIAS_VERSION
from trias_trips.domain.models.trip_query import TripQuery

TRIP_REQUEST_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<Trias xmlns="{namespace}" version="{version}">
  <ServiceRequest>
    <RequestTimestamp>{request_timestamp}</RequestTimestamp>
    <RequestPayload>
      <TripRequest>
        <Origin>
          <LocationRef>
            <StopPointRef>{origin}</StopPointRef>
          </LocationRef>
          <DepArrTime>{departure_time}</DepArrTime>
        </Origin>
        <Destination>
          <LocationRef>
            <StopPointRef>{destination}</StopPointRef>
          </LocationRef>
        </Destination>
        <Params>
          <NumberOfResults>{number_of_results}</NumberOfResults>
          <IncludeIntermediateStops>{include_intermediate_stops}</IncludeIntermediateStops>
          <IncludeTrackSections>false</IncludeTrackSections>
          <IncludeFares>false</IncludeFares>
        </Params>
      </TripRequest>
    </RequestPayload>
  </ServiceRequest>
</Trias>"""


def format_timestamp(value: datetime) -> str:
    """Format a datetime as UTC ISO 8601 with millisecond precision (e.g. 2024-05-01T07:30:00.000Z)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_trip_request(query: TripQuery, requested_at: datetime | None = None) -> str:
    """Build a TRIAS TripRequest document for the query.

    Args:
        query: Origin, destination, departure time and result options.
        requested_at: Timestamp for RequestTimestamp. Defaults to now.

    Returns:
        The XML request body.
    """
    return TRIP_REQUEST_TEMPLATE.format(
        namespace=TRIAS_NAMESPACE,
        version=TRIAS_VERSION,
        request_timestamp=format_timestamp(requested_at or datetime.now(UTC)),
        origin=query.origin_stop_point_ref,
        destination=query.destination_stop_point_ref,
        departure_time=format_timestamp(query.departure_time),
        number_of_results=query.number_of_results,
        include_intermediate_stops="true" if query.include_intermediate_stops else "false",
    )
