"""Volunteer to nonprofit project matching service."""

__version__ = "0.1.0"
