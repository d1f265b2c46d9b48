"""CLI for one-shot TRIAS trip requests."""

import argparse
import asyncio
import json
import sys
from dataclasses import asdict, replace
from datetime import datetime
from pathlib import Path
from typing import Any

import aiohttp

from trias_trips.adapters.config import AppConfig, TripConfigurationLoader
from trias_trips.adapters.display import TripFormatter
from trias_trips.adapters.trias_api import (
    TriasHttpClient,
    TriasTripRepository,
    build_trip_request,
    extract_trips,
)
from trias_trips.application.services import TripService
from trias_trips.domain.models import TripConfiguration, TripState, TripSummary


def trip_to_dict(trip: TripSummary) -> dict[str, Any]:
    """Convert a trip summary into JSON-serializable data."""

    def _convert(value: Any) -> Any:
        if isinstance(value, datetime):
            return value.isoformat()
        if isinstance(value, dict):
            return {k: _convert(v) for k, v in value.items()}
        if isinstance(value, list):
            return [_convert(v) for v in value]
        return value

    return _convert(asdict(trip))


def _trip_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect trip settings given on the command line."""
    overrides: dict[str, Any] = {}
    if args.endpoint:
        overrides["endpoint"] = args.endpoint
    if args.origin:
        overrides["origin_stop_point_ref"] = args.origin
    if args.destination:
        overrides["destination_stop_point_ref"] = args.destination
    if args.results is not None:
        if args.results < 1:
            raise ValueError("--results must be a positive integer")
        overrides["number_of_results"] = args.results
    if args.no_intermediate_stops:
        overrides["include_intermediate_stops"] = False
    return overrides


def load_trip_configuration(args: argparse.Namespace) -> tuple[AppConfig, TripConfiguration]:
    """Load configuration and apply command line overrides."""
    config = AppConfig()
    if args.config_file:
        config.config_file = args.config_file
    trip_config = TripConfigurationLoader.load(config)
    return config, replace(trip_config, **_trip_overrides(args))


def print_trips(trips: list[TripSummary], title: str, timezone: str, as_json: bool) -> None:
    """Print trips as JSON or as the text widget."""
    if as_json:
        print(json.dumps([trip_to_dict(t) for t in trips], indent=2, ensure_ascii=False))
        return

    formatter = TripFormatter(timezone)
    state = TripState(trips=trips)
    for line in formatter.render(state, title):
        print(line)


async def fetch_trips(config: AppConfig, trip_config: TripConfiguration) -> list[TripSummary]:
    """Fetch the configured trip once."""
    async with aiohttp.ClientSession() as session:
        http_client = TriasHttpClient(
            session, trip_config.endpoint, timeout_seconds=config.trias_api_timeout
        )
        service = TripService(TriasTripRepository(http_client), trip_config)
        return await service.fetch_trips()


def _add_trip_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--origin", help="Origin StopPointRef (e.g. de:08111:6118)")
    parser.add_argument("--destination", help="Destination StopPointRef")
    parser.add_argument("--results", type=int, help="Number of trips to request")
    parser.add_argument(
        "--no-intermediate-stops",
        action="store_true",
        help="Don't ask for intermediate stops",
    )
    parser.add_argument("--endpoint", help="TRIAS endpoint URL")
    parser.add_argument("--config-file", help="TOML configuration file")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Query a TRIAS journey planner for trips between two stops",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fetch the next trips between two stops
  trias-trips-cli fetch --origin de:08111:6118 --destination de:08111:6056

  # Show the request document without sending it
  trias-trips-cli request --origin de:08111:6118 --destination de:08111:6056

  # Summarize a saved TRIAS response
  trias-trips-cli parse response.xml --json
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    fetch_parser = subparsers.add_parser("fetch", help="Fetch and print trips")
    _add_trip_options(fetch_parser)
    fetch_parser.add_argument("--json", action="store_true", help="Output as JSON")

    request_parser = subparsers.add_parser("request", help="Print the TripRequest XML")
    _add_trip_options(request_parser)

    parse_parser = subparsers.add_parser("parse", help="Extract trips from a saved response")
    parse_parser.add_argument("file", help="Path to a TRIAS TripResponse XML file")
    parse_parser.add_argument("--json", action="store_true", help="Output as JSON")
    parse_parser.add_argument("--timezone", default="Europe/Berlin", help="Display timezone")

    return parser


async def main() -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "fetch":
            config, trip_config = load_trip_configuration(args)
            trips = await fetch_trips(config, trip_config)
            print_trips(trips, trip_config.title, config.timezone, args.json)

        elif args.command == "request":
            _config, trip_config = load_trip_configuration(args)
            query = TripService(None, trip_config).build_query()  # type: ignore[arg-type]
            print(build_trip_request(query))

        elif args.command == "parse":
            trips = extract_trips(Path(args.file).read_bytes())
            print_trips(trips, "Trips", args.timezone, args.json)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
