"""Protocol for updating trip state."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from trias_trips.domain.models.trip_state import TripState


class StateUpdaterProtocol(Protocol):
    """Protocol for replacing the trip state."""

    @property
    def current(self) -> "TripState":
        """The last state written."""
        ...

    def replace(self, state: "TripState") -> None:
        """Replace the whole state in one step.

        Args:
            state: The new state.
        """
        ...
