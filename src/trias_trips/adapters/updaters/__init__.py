"""State updaters."""

from trias_trips.adapters.updaters.state_updater import StateUpdater

__all__ = ["StateUpdater"]
