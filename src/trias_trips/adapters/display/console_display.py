"""Console display adapter rendering the trip widget to a text stream."""

import logging
import sys
from typing import TextIO

from trias_trips.adapters.display.trip_formatter import TripFormatter
from trias_trips.domain.models.trip_state import TripState
from trias_trips.domain.ports.display_adapter import DisplayAdapter

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[2J\033[H"


class ConsoleDisplayAdapter(DisplayAdapter):
    """Redraws the trip widget on a terminal after every fetch."""

    def __init__(
        self,
        formatter: TripFormatter,
        title: str,
        stream: TextIO | None = None,
        clear_screen: bool = False,
    ) -> None:
        self.formatter = formatter
        self.title = title
        self.stream = stream or sys.stdout
        self.clear_screen = clear_screen

    async def display_trips(self, state: TripState) -> None:
        """Write the rendered widget to the stream."""
        lines = self.formatter.render(state, self.title)
        if self.clear_screen:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write("\n".join(lines) + "\n")
        self.stream.flush()

    async def start(self) -> None:
        logger.info("Console display started")

    async def stop(self) -> None:
        logger.info("Console display stopped")
