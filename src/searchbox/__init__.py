"""Autocomplete core and textual search box for community forum search."""

__version__ = "0.1.0"
