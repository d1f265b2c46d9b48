"""TRIAS trip planner dashboard."""
