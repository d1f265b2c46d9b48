"""Main entry point for the TRIAS trips dashboard."""

import asyncio
import logging
import sys

import aiohttp

from trias_trips.adapters.config import AppConfig, TripConfigurationLoader
from trias_trips.adapters.display import ConsoleDisplayAdapter, TripFormatter
from trias_trips.adapters.pollers import TripPoller
from trias_trips.adapters.trias_api import TriasHttpClient, TriasTripRepository
from trias_trips.adapters.updaters import StateUpdater
from trias_trips.application.services import TripService
from trias_trips.domain.errors import ConfigurationError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    try:
        trip_config = TripConfigurationLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logger.info(
        f"Fetching trips from '{trip_config.origin_stop_point_ref}' to "
        f"'{trip_config.destination_stop_point_ref}' via {trip_config.endpoint}"
    )

    async with aiohttp.ClientSession() as session:
        http_client = TriasHttpClient(
            session, trip_config.endpoint, timeout_seconds=config.trias_api_timeout
        )
        trip_service = TripService(TriasTripRepository(http_client), trip_config)

        # Missing stop references are shown on the widget on every fetch
        try:
            trip_service.validate()
        except ConfigurationError as e:
            logger.warning(f"{e}. Set ORIGIN_STOP_POINT_REF and DESTINATION_STOP_POINT_REF.")

        display_adapter = ConsoleDisplayAdapter(
            TripFormatter(config.timezone),
            trip_config.title,
            clear_screen=sys.stdout.isatty(),
        )
        poller = TripPoller(trip_service, StateUpdater(), display=display_adapter)

        await display_adapter.start()
        await poller.start()
        try:
            await poller.wait()
        finally:
            await poller.stop()
            await display_adapter.stop()


def run() -> None:
    """Synchronous entry point for the dashboard command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
