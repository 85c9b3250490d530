"""Tracker - parcel tracking persistence."""

__version__ = "0.1.0"
