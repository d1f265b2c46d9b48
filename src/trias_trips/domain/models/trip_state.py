"""Trip state domain model."""

from dataclasses import dataclass, field
from datetime import datetime

from trias_trips.domain.models.trip_summary import TripSummary


@dataclass(frozen=True)
class TripState:
    """Last known result of a fetch cycle.

    Holds either a trip list or an error message, never both.
    """

    trips: list[TripSummary] = field(default_factory=list)
    error: str | None = None
    last_update: datetime | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.trips:
            raise ValueError("TripState cannot carry trips and an error at the same time")

    @classmethod
    def success(cls, trips: list[TripSummary], last_update: datetime) -> "TripState":
        """Create a state for a successful fetch."""
        return cls(trips=list(trips), error=None, last_update=last_update)

    @classmethod
    def failure(cls, message: str, last_update: datetime) -> "TripState":
        """Create a state for a failed fetch, replacing any previous trips."""
        return cls(trips=[], error=message or "Unknown error", last_update=last_update)

    @property
    def has_error(self) -> bool:
        return self.error is not None
