"""Updater for trip state."""

from __future__ import annotations

import logging

from trias_trips.domain.contracts.state_updater import StateUpdaterProtocol
from trias_trips.domain.models.trip_state import TripState

logger = logging.getLogger(__name__)


class StateUpdater(StateUpdaterProtocol):
    """Owns the current TripState and swaps it in one assignment."""

    def __init__(self, initial_state: TripState | None = None) -> None:
        """Initialize the state updater.

        Args:
            initial_state: State before the first fetch completes.
        """
        self._state = initial_state or TripState()

    @property
    def current(self) -> TripState:
        return self._state

    def replace(self, state: TripState) -> None:
        """Replace the trip state.

        Args:
            state: The state produced by a completed fetch.
        """
        self._state = state
        if state.has_error:
            logger.debug(f"Updated trip state with error: {state.error}")
        else:
            logger.debug(f"Updated trip state: {len(state.trips)} trip(s)")
