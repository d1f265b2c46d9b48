"""Domain layer for TRIAS trips."""
