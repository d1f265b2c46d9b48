"""Tests for CLI helper functions."""

import json
import sys
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from trias_trips import cli
from trias_trips.domain.models import TransitLeg, TripSummary, WalkLeg

CONFIG_ENV_VARS = ("ORIGIN_STOP_POINT_REF", "DESTINATION_STOP_POINT_REF", "CONFIG_FILE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove configuration variables that may leak in from the environment."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def trip() -> TripSummary:
    """Create a sample trip."""
    return TripSummary(
        departure_time=datetime(2024, 5, 6, 7, 3, tzinfo=UTC),
        arrival_time=datetime(2024, 5, 6, 7, 20, tzinfo=UTC),
        duration_minutes=17,
        legs=[TransitLeg(mode="rail", line="S1", from_stop="Hbf"), WalkLeg()],
    )


def _run_cli(monkeypatch: pytest.MonkeyPatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["trias-trips-cli", *argv])
    cli.cli_main()


def test_trip_to_dict_serializes_datetimes_and_legs(trip: TripSummary) -> None:
    """Given a trip, when converting to dict, then datetimes are ISO strings and walk legs only carry the mode."""
    data = cli.trip_to_dict(trip)

    assert data["departure_time"] == "2024-05-06T07:03:00+00:00"
    assert data["duration_minutes"] == 17
    assert data["legs"][0]["line"] == "S1"
    assert data["legs"][0]["departure_time"] is None
    assert data["legs"][1] == {"mode": "walk"}
    json.dumps(data)


def test_request_command_prints_request_xml(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given origin and destination, when running 'request', then the TripRequest XML is printed."""
    _run_cli(
        monkeypatch,
        "request",
        "--origin",
        "de:08111:6118",
        "--destination",
        "de:08111:6056",
        "--results",
        "2",
        "--no-intermediate-stops",
    )

    out = capsys.readouterr().out
    assert "<StopPointRef>de:08111:6118</StopPointRef>" in out
    assert "<StopPointRef>de:08111:6056</StopPointRef>" in out
    assert "<NumberOfResults>2</NumberOfResults>" in out
    assert "<IncludeIntermediateStops>false</IncludeIntermediateStops>" in out


def test_request_command_without_stops_fails(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given no stop references, when running 'request', then an error is printed and the exit code is 1."""
    with pytest.raises(SystemExit) as exc_info:
        _run_cli(monkeypatch, "request")

    assert exc_info.value.code == 1
    assert "Missing originStopPointRef/destinationStopPointRef" in capsys.readouterr().err


def test_parse_command_prints_json(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
    trip_response: Callable[..., str],
    trip_result: Callable[..., str],
    timed_leg: Callable[..., str],
    continuous_leg: str,
) -> None:
    """Given a saved response, when running 'parse --json', then trips are printed as JSON."""
    response_file = tmp_path / "response.xml"
    response_file.write_text(
        trip_response(trip_result(timed_leg(line="S1"), continuous_leg)), encoding="utf-8"
    )

    _run_cli(monkeypatch, "parse", str(response_file), "--json")

    data = json.loads(capsys.readouterr().out)
    assert len(data) == 1
    assert data[0]["duration_minutes"] == 17
    assert [leg["mode"] for leg in data[0]["legs"]] == ["rail", "walk"]


def test_parse_command_prints_widget_text(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
    trip_response: Callable[..., str],
    trip_result: Callable[..., str],
    timed_leg: Callable[..., str],
    continuous_leg: str,
) -> None:
    """Given a saved response, when running 'parse', then the widget text is printed."""
    response_file = tmp_path / "response.xml"
    response_file.write_text(trip_response(trip_result(continuous_leg, timed_leg(line="U6"))))

    _run_cli(monkeypatch, "parse", str(response_file), "--timezone", "UTC")

    assert capsys.readouterr().out.splitlines() == [
        "Trips",
        "07:03 → 07:20 (17 min)",
        "  Walk · U6",
    ]


def test_parse_command_with_malformed_file_fails(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    """Given a malformed file, when running 'parse', then an error is printed and the exit code is 1."""
    response_file = tmp_path / "broken.xml"
    response_file.write_text("<Trias>")

    with pytest.raises(SystemExit) as exc_info:
        _run_cli(monkeypatch, "parse", str(response_file))

    assert exc_info.value.code == 1
    assert "Malformed TRIAS response" in capsys.readouterr().err


def test_fetch_command_prints_trips(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], trip: TripSummary
) -> None:
    """Given a working endpoint, when running 'fetch --json', then the fetched trips are printed."""
    with patch.object(cli, "fetch_trips", AsyncMock(return_value=[trip])) as fetch_mock:
        _run_cli(monkeypatch, "fetch", "--origin", "a", "--destination", "b", "--json")

    trip_config = fetch_mock.call_args.args[1]
    assert trip_config.origin_stop_point_ref == "a"
    assert trip_config.destination_stop_point_ref == "b"
    data = json.loads(capsys.readouterr().out)
    assert data[0]["legs"][0]["line"] == "S1"


def test_no_command_prints_help_and_exits(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given no command, when running the CLI, then help is printed and the exit code is 1."""
    with pytest.raises(SystemExit) as exc_info:
        _run_cli(monkeypatch)

    assert exc_info.value.code == 1
    assert "usage:" in capsys.readouterr().out
