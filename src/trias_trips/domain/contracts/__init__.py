"""Protocols shared between adapters."""
