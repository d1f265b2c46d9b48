"""Formatter for trip summaries."""

from datetime import datetime
from zoneinfo import ZoneInfo

from trias_trips.domain.contracts.trip_formatter import TripFormatterProtocol
from trias_trips.domain.models.trip_state import TripState
from trias_trips.domain.models.trip_summary import TripSummary, WalkLeg

MISSING_VALUE = "?"
LEG_SEPARATOR = " · "
NO_TRIPS_MESSAGE = "No trips"


class TripFormatter(TripFormatterProtocol):
    """Formats trips as short text lines for the dashboard widget."""

    def __init__(self, timezone: str = "Europe/Berlin") -> None:
        """Initialize the formatter.

        Args:
            timezone: IANA timezone the times are shown in.
        """
        self.timezone = ZoneInfo(timezone)

    def format_time(self, time: datetime | None) -> str:
        """Format time as HH:MM in the configured timezone, '?' if unknown."""
        if time is None:
            return MISSING_VALUE
        return time.astimezone(self.timezone).strftime("%H:%M")

    def format_headline(self, trip: TripSummary) -> str:
        """Format as 'HH:MM → HH:MM (N min)'."""
        duration = MISSING_VALUE if trip.duration_minutes is None else str(trip.duration_minutes)
        return (
            f"{self.format_time(trip.departure_time)} → "
            f"{self.format_time(trip.arrival_time)} ({duration} min)"
        )

    def format_legs(self, trip: TripSummary) -> str:
        """Format legs as e.g. 'Walk · S1 · U6'."""
        labels = []
        for leg in trip.legs:
            if isinstance(leg, WalkLeg):
                labels.append("Walk")
            else:
                labels.append(leg.line or leg.mode or "PT")
        return LEG_SEPARATOR.join(labels)

    def render(self, state: TripState, title: str) -> list[str]:
        """Render title plus either the error, 'No trips' or two lines per trip."""
        lines = [title]
        if state.error is not None:
            lines.append(state.error)
            return lines

        if not state.trips:
            lines.append(NO_TRIPS_MESSAGE)
            return lines

        for trip in state.trips:
            lines.append(self.format_headline(trip))
            lines.append(f"  {self.format_legs(trip)}")
        return lines
