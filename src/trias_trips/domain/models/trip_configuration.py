"""Trip configuration domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TripConfiguration:
    """Configuration for the trip that is fetched and displayed."""

    endpoint: str
    origin_stop_point_ref: str
    destination_stop_point_ref: str
    number_of_results: int = 3
    include_intermediate_stops: bool = True
    refresh_interval_seconds: int = 60
    title: str = "VVS Trips"
