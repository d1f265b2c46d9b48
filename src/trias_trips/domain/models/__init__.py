"""Domain models for TRIAS trips."""

from trias_trips.domain.models.error_details import ErrorDetails
from trias_trips.domain.models.trip_configuration import TripConfiguration
from trias_trips.domain.models.trip_query import TripQuery
from trias_trips.domain.models.trip_state import TripState
from trias_trips.domain.models.trip_summary import (
    WALK_MODE,
    LegSummary,
    TransitLeg,
    TripSummary,
    WalkLeg,
)

__all__ = [
    "WALK_MODE",
    "ErrorDetails",
    "LegSummary",
    "TransitLeg",
    "TripConfiguration",
    "TripQuery",
    "TripState",
    "TripSummary",
    "WalkLeg",
]
