"""Protocol for trip polling."""

from typing import Protocol


class TripPollerProtocol(Protocol):
    """Protocol for polling the journey planner and updating state."""

    async def start(self) -> None:
        """Start the trip poller."""
        ...

    async def stop(self) -> None:
        """Stop the trip poller."""
        ...

    async def refresh(self) -> None:
        """Run one fetch cycle immediately."""
        ...
