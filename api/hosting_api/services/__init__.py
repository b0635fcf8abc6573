"""Filesystem-backed lookups behind the HTTP routes."""
