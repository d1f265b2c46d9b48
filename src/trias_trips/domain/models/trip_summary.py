"""Trip summary domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

WALK_MODE = "walk"


@dataclass(frozen=True)
class TransitLeg:
    """A scheduled (vehicle-based) leg of a trip."""

    mode: str
    line: str | None = None
    journey_ref: str | None = None
    operating_day_ref: str | None = None
    from_stop: str | None = None
    to_stop: str | None = None
    departure_time: datetime | None = None
    arrival_time: datetime | None = None


@dataclass(frozen=True)
class WalkLeg:
    """An unscheduled movement, e.g. walking between stops."""

    mode: Literal["walk"] = WALK_MODE


LegSummary = TransitLeg | WalkLeg


@dataclass(frozen=True)
class TripSummary:
    """Simplified view of one itinerary returned by the journey planner.

    Legs are kept in board-to-alight order as delivered by the server.
    """

    departure_time: datetime | None
    arrival_time: datetime | None
    duration_minutes: int | None
    legs: list[LegSummary] = field(default_factory=list)
