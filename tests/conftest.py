"""Shared fixtures: builders for TRIAS TripResponse documents."""

from collections.abc import Callable

import pytest

TRIAS_OPEN = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<Trias xmlns="http://www.vdv.de/trias" xmlns:siri="http://www.siri.org.uk/siri" '
    'version="1.2">'
)


def _make_response(*trip_results: str) -> str:
    return (
        f"{TRIAS_OPEN}<ServiceDelivery>"
        "<siri:ResponseTimestamp>2024-05-06T07:00:01Z</siri:ResponseTimestamp>"
        "<siri:ProducerRef>EFAController10.6.14.22-EFA02</siri:ProducerRef>"
        '<siri:Status>true</siri:Status><DeliveryPayload><TripResponse>'
        f"{''.join(trip_results)}"
        "</TripResponse></DeliveryPayload></ServiceDelivery></Trias>"
    )


def _make_trip_result(
    *legs: str,
    trip_id: str = "ID-1",
    start: str | None = "2024-05-06T07:03:00Z",
    end: str | None = "2024-05-06T07:20:00Z",
    duration: str | None = "PT17M",
) -> str:
    parts = [f"<TripId>{trip_id}</TripId>"]
    if duration is not None:
        parts.append(f"<Duration>{duration}</Duration>")
    if start is not None:
        parts.append(f"<StartTime>{start}</StartTime>")
    if end is not None:
        parts.append(f"<EndTime>{end}</EndTime>")
    parts.extend(
        f"<TripLeg><LegId>{index}</LegId>{leg}</TripLeg>" for index, leg in enumerate(legs, 1)
    )
    return f"<TripResult><ResultId>{trip_id}</ResultId><Trip>{''.join(parts)}</Trip></TripResult>"


def _make_timed_leg(
    line: str = "S1",
    mode: str | None = "<Mode><PtMode>rail</PtMode><RailSubmode>suburbanRailway</RailSubmode></Mode>",
    board: str = "Stuttgart Hauptbahnhof (tief)",
    alight: str = "Stuttgart Vaihingen",
    dep_timetabled: str | None = "2024-05-06T07:03:00Z",
    dep_estimated: str | None = "2024-05-06T07:05:00Z",
    arr_timetabled: str | None = "2024-05-06T07:18:00Z",
    arr_estimated: str | None = None,
    published_line_names: list[str] | None = None,
) -> str:
    def _times(timetabled: str | None, estimated: str | None) -> str:
        result = ""
        if timetabled is not None:
            result += f"<TimetabledTime>{timetabled}</TimetabledTime>"
        if estimated is not None:
            result += f"<EstimatedTime>{estimated}</EstimatedTime>"
        return result

    names = published_line_names if published_line_names is not None else [line]
    line_xml = "".join(
        f"<PublishedLineName><Text>{name}</Text><Language>de</Language></PublishedLineName>"
        for name in names
    )
    return (
        "<TimedLeg>"
        "<LegBoard><StopPointRef>de:08111:6118:1:1</StopPointRef>"
        f"<StopPointName><Text>{board}</Text><Language>de</Language></StopPointName>"
        f"<ServiceDeparture>{_times(dep_timetabled, dep_estimated)}</ServiceDeparture>"
        "<StopSeqNumber>1</StopSeqNumber></LegBoard>"
        "<LegAlight><StopPointRef>de:08111:6056:2:2</StopPointRef>"
        f"<StopPointName><Text>{alight}</Text><Language>de</Language></StopPointName>"
        f"<ServiceArrival>{_times(arr_timetabled, arr_estimated)}</ServiceArrival>"
        "<StopSeqNumber>6</StopSeqNumber></LegAlight>"
        "<Service><OperatingDayRef>2024-05-06</OperatingDayRef>"
        "<JourneyRef>ddb:92S01: :H:j24:1234</JourneyRef>"
        "<LineRef>ddb:92S01: :H</LineRef><DirectionRef>outward</DirectionRef>"
        f"{mode or ''}{line_xml}"
        "<DestinationText><Text>Herrenberg</Text><Language>de</Language></DestinationText>"
        "</Service></TimedLeg>"
    )


CONTINUOUS_LEG = (
    "<ContinuousLeg>"
    "<LegStart><StopPointRef>de:08111:6056:2:2</StopPointRef>"
    "<LocationName><Text>Stuttgart Vaihingen</Text><Language>de</Language></LocationName>"
    "</LegStart>"
    "<LegEnd><LocationName><Text>Universität</Text><Language>de</Language></LocationName></LegEnd>"
    "<Service><IndividualMode>walk</IndividualMode></Service>"
    "<TimeWindowStart>2024-05-06T07:18:00Z</TimeWindowStart>"
    "<TimeWindowEnd>2024-05-06T07:20:00Z</TimeWindowEnd>"
    "<Duration>PT2M</Duration>"
    "</ContinuousLeg>"
)


@pytest.fixture
def trip_response() -> Callable[..., str]:
    """Builder for a full TripResponse document from TripResult fragments."""
    return _make_response


@pytest.fixture
def trip_result() -> Callable[..., str]:
    """Builder for a TripResult fragment from TripLeg payloads."""
    return _make_trip_result


@pytest.fixture
def timed_leg() -> Callable[..., str]:
    """Builder for a TimedLeg fragment."""
    return _make_timed_leg


@pytest.fixture
def continuous_leg() -> str:
    """A ContinuousLeg (footpath) fragment."""
    return CONTINUOUS_LEG
