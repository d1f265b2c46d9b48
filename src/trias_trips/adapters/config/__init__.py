"""Configuration adapters."""

from trias_trips.adapters.config.app_config import AppConfig
from trias_trips.adapters.config.trip_configuration_loader import TripConfigurationLoader

__all__ = ["AppConfig", "TripConfigurationLoader"]
