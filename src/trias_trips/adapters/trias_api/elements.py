"""Typed views of the TRIAS elements used for trip summaries.

Each ``parse_*`` function reads one element from the generic XML tree and
returns ``None`` for every field that is absent, so callers never walk the
untyped tree themselves.
"""

from dataclasses import dataclass, field
from typing import Any

from trias_trips.adapters.trias_api.xml_tree import as_list, get_path, text_of


@dataclass(frozen=True)
class CallElement:
    """LegBoard or LegAlight: stop name plus the relevant service time."""

    stop_point_name: str | None
    timetabled_time: str | None
    estimated_time: str | None

    @property
    def time(self) -> str | None:
        """Timetabled time, falling back to the estimate."""
        return self.timetabled_time or self.estimated_time


@dataclass(frozen=True)
class ServiceElement:
    """Service block of a TimedLeg."""

    mode: str | None
    published_line_name: str | None
    journey_ref: str | None
    operating_day_ref: str | None


@dataclass(frozen=True)
class TimedLegElement:
    """Scheduled leg served by a vehicle."""

    board: CallElement
    alight: CallElement
    service: ServiceElement


@dataclass(frozen=True)
class ContinuousLegElement:
    """Unscheduled movement, usually walking."""


TripLegElement = TimedLegElement | ContinuousLegElement


@dataclass(frozen=True)
class TripElement:
    """Trip element of a TripResult."""

    start_time: str | None
    end_time: str | None
    duration: str | None
    legs: list[TripLegElement] = field(default_factory=list)


def parse_call(node: Any, service_key: str) -> CallElement:
    """Parse LegBoard (service_key="ServiceDeparture") or LegAlight ("ServiceArrival")."""
    service_time = get_path(node, service_key)
    return CallElement(
        stop_point_name=text_of(get_path(node, "StopPointName", "Text")),
        timetabled_time=text_of(get_path(service_time, "TimetabledTime")),
        estimated_time=text_of(get_path(service_time, "EstimatedTime")),
    )


def _parse_mode(service: Any) -> str | None:
    mode = get_path(service, "Mode")
    return text_of(get_path(mode, "PtMode")) or text_of(mode)


def _parse_published_line_name(service: Any) -> str | None:
    names = as_list(get_path(service, "PublishedLineName"))
    if not names:
        return None
    return text_of(get_path(names[0], "Text"))


def parse_service(node: Any) -> ServiceElement:
    """Parse the Service block of a TimedLeg."""
    return ServiceElement(
        mode=_parse_mode(node),
        published_line_name=_parse_published_line_name(node),
        journey_ref=text_of(get_path(node, "JourneyRef")),
        operating_day_ref=text_of(get_path(node, "OperatingDayRef")),
    )


def parse_timed_leg(node: Any) -> TimedLegElement:
    """Parse a TimedLeg element."""
    return TimedLegElement(
        board=parse_call(get_path(node, "LegBoard"), "ServiceDeparture"),
        alight=parse_call(get_path(node, "LegAlight"), "ServiceArrival"),
        service=parse_service(get_path(node, "Service")),
    )


def parse_trip_leg(node: Any) -> TripLegElement | None:
    """Parse a TripLeg element.

    Returns None for leg kinds other than TimedLeg and ContinuousLeg
    (e.g. InterchangeLeg).
    """
    if not isinstance(node, dict):
        return None
    if "TimedLeg" in node:
        return parse_timed_leg(node["TimedLeg"])
    if "ContinuousLeg" in node:
        return ContinuousLegElement()
    return None


def parse_trip(trip_result: Any) -> TripElement | None:
    """Parse the Trip element of a TripResult, or None if it has no Trip."""
    trip = get_path(trip_result, "Trip")
    if not isinstance(trip, dict):
        return None

    legs: list[TripLegElement] = []
    for leg_node in as_list(trip.get("TripLeg")):
        leg = parse_trip_leg(leg_node)
        if leg is not None:
            legs.append(leg)

    return TripElement(
        start_time=text_of(trip.get("StartTime")),
        end_time=text_of(trip.get("EndTime")),
        duration=text_of(trip.get("Duration")),
        legs=legs,
    )
