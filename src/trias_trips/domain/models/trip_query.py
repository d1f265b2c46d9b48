"""Trip query domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TripQuery:
    """Parameters of a single TRIAS trip request."""

    origin_stop_point_ref: str
    destination_stop_point_ref: str
    departure_time: datetime
    number_of_results: int
    include_intermediate_stops: bool

    def __post_init__(self) -> None:
        if self.number_of_results < 1:
            raise ValueError("number_of_results must be a positive integer")
