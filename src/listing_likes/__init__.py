"""Keeps marketplace listing like counts in sync with users' liked listings."""

__version__ = "0.1.0"
