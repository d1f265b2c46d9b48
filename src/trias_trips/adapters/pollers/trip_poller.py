"""Trip poller fetching trips on a fixed interval."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from trias_trips.domain.contracts.trip_poller import TripPollerProtocol
from trias_trips.domain.errors import ConfigurationError, TriasHttpError, TriasTransportError
from trias_trips.domain.models.error_details import ErrorDetails
from trias_trips.domain.models.trip_state import TripState

if TYPE_CHECKING:
    from trias_trips.domain.contracts.state_updater import StateUpdaterProtocol
    from trias_trips.domain.ports import DisplayAdapter, TripService

logger = logging.getLogger(__name__)


def _extract_error_details(error: Exception) -> ErrorDetails:
    """Extract HTTP status code and error reason from exception."""
    if isinstance(error, TriasHttpError):
        status_code = error.status_code
        if status_code == 429:
            reason = "Rate limit exceeded"
        elif status_code == 502:
            reason = "Bad gateway (server error)"
        elif status_code == 503:
            reason = "Service unavailable"
        elif status_code == 504:
            reason = "Gateway timeout"
        else:
            reason = f"HTTP {status_code}"
        return ErrorDetails(status_code=status_code, reason=reason)

    if isinstance(error, ConfigurationError):
        return ErrorDetails(reason="Configuration error")
    if isinstance(error, TriasTransportError):
        return ErrorDetails(reason="Transport error")
    return ErrorDetails(reason="Unknown error")


class TripPoller(TripPollerProtocol):
    """Fetches trips once at startup and then every refresh interval.

    Fetches never overlap: the loop awaits each fetch before sleeping and
    refresh() holds a lock, so a manual refresh waits for a running one.
    """

    def __init__(
        self,
        trip_service: TripService,
        state_updater: StateUpdaterProtocol,
        display: DisplayAdapter | None = None,
        refresh_interval_seconds: int | None = None,
    ) -> None:
        """Initialize the trip poller.

        Args:
            trip_service: Service fetching the configured trip.
            state_updater: Owner of the trip state.
            display: Optional display notified after every fetch.
            refresh_interval_seconds: Poll interval. Defaults to the trip configuration's.
        """
        self.trip_service = trip_service
        self.state_updater = state_updater
        self.display = display
        self.refresh_interval_seconds = (
            refresh_interval_seconds or trip_service.trip_config.refresh_interval_seconds
        )
        self._lock = asyncio.Lock()
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the trip poller."""
        if self.is_running:
            logger.warning("Trip poller already running")
            return

        self._task = asyncio.create_task(self._poll_loop())
        logger.info(f"Started trip poller (interval: {self.refresh_interval_seconds}s)")

    async def stop(self) -> None:
        """Stop the trip poller."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Trip poller cancelled")
            logger.info("Stopped trip poller")
        self._task = None

    async def wait(self) -> None:
        """Wait until the poll loop ends."""
        if self._task is not None:
            await self._task

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        await self.refresh()

        try:
            while True:
                await asyncio.sleep(self.refresh_interval_seconds)
                await self.refresh()
        except asyncio.CancelledError:
            logger.info("Trip poller cancelled")
            raise

    async def refresh(self) -> None:
        """Run one fetch cycle and publish the resulting state."""
        async with self._lock:
            state = await self._fetch_state()
            self.state_updater.replace(state)

        if self.display is not None:
            await self.display.display_trips(state)

    async def _fetch_state(self) -> TripState:
        try:
            trips = await self.trip_service.fetch_trips()
        except Exception as e:
            error_details = _extract_error_details(e)
            logger.error(
                f"Trip poller failed to fetch trips: "
                f"{error_details.reason} (status: {error_details.status_code}, error: {e})"
            )
            return TripState.failure(str(e), datetime.now(UTC))

        logger.debug(f"Trip poller fetched {len(trips)} trip(s)")
        return TripState.success(trips, datetime.now(UTC))
