"""Test fixtures for Tracker."""

from tests.fixtures.parcels import make_parcel

__all__ = ["make_parcel"]
