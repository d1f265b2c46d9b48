"""Pollers."""

from trias_trips.adapters.pollers.trip_poller import TripPoller

__all__ = ["TripPoller"]
