"""Trip configuration loader."""

import logging

from trias_trips.adapters.config.app_config import AppConfig
from trias_trips.domain.models.trip_configuration import TripConfiguration

logger = logging.getLogger(__name__)


class TripConfigurationLoader:
    """Loads the trip configuration from app config."""

    @staticmethod
    def load(config: AppConfig) -> TripConfiguration:
        """Load the trip configuration, applying TOML overrides first."""
        config.apply_toml_overrides()

        trip_config = TripConfiguration(
            endpoint=config.trias_endpoint,
            origin_stop_point_ref=config.origin_stop_point_ref,
            destination_stop_point_ref=config.destination_stop_point_ref,
            number_of_results=config.number_of_results,
            include_intermediate_stops=config.include_intermediate_stops,
            refresh_interval_seconds=config.refresh_interval_seconds,
            title=config.title,
        )
        logger.debug(f"Loaded trip configuration: {trip_config}")
        return trip_config
