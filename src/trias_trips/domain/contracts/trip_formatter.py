"""Protocol for formatting trips."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from trias_trips.domain.models.trip_state import TripState
    from trias_trips.domain.models.trip_summary import TripSummary


class TripFormatterProtocol(Protocol):
    """Protocol for formatting trip information for display."""

    def format_time(self, time: "datetime | None") -> str:
        """Format a trip or leg time as HH:MM."""
        ...

    def format_headline(self, trip: "TripSummary") -> str:
        """Format departure, arrival and duration of a trip."""
        ...

    def format_legs(self, trip: "TripSummary") -> str:
        """Format the legs of a trip as a single line."""
        ...

    def render(self, state: "TripState", title: str) -> list[str]:
        """Render the whole widget as lines of text."""
        ...
