"""Adapters for external systems (TRIAS API, configuration, display)."""
