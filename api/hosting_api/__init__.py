"""Hosting lookup API for projects published from the developer workspace."""

__version__ = "1.0.0"
