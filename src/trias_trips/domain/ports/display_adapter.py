"""Display adapter port."""

from abc import ABC, abstractmethod

from trias_trips.domain.models.trip_state import TripState


class DisplayAdapter(ABC):
    """Port for displaying trip information to users."""

    @abstractmethod
    async def display_trips(self, state: TripState) -> None:
        """Display the latest trip state."""
        ...

    @abstractmethod
    async def start(self) -> None:
        """Start the display adapter."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop the display adapter."""
        ...
