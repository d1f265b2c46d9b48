"""TRIAS API adapters."""

from trias_trips.adapters.trias_api.http_client import TriasHttpClient
from trias_trips.adapters.trias_api.request_builder import build_trip_request
from trias_trips.adapters.trias_api.response_parser import (
    TripResponseParser,
    duration_to_minutes,
    extract_trips,
)
from trias_trips.adapters.trias_api.trias_trip_repository import TriasTripRepository

__all__ = [
    "TriasHttpClient",
    "TriasTripRepository",
    "TripResponseParser",
    "build_trip_request",
    "duration_to_minutes",
    "extract_trips",
]
