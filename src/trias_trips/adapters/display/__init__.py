"""Display adapters."""

from trias_trips.adapters.display.console_display import ConsoleDisplayAdapter
from trias_trips.adapters.display.trip_formatter import TripFormatter

__all__ = ["ConsoleDisplayAdapter", "TripFormatter"]
