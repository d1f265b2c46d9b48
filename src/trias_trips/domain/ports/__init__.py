"""Ports (interfaces) for the ports-and-adapters architecture."""

from trias_trips.domain.ports.display_adapter import DisplayAdapter
from trias_trips.domain.ports.trip_repository import TripRepository
from trias_trips.domain.ports.trip_service import TripService

__all__ = [
    "DisplayAdapter",
    "TripRepository",
    "TripService",
]
