"""Persistence layer for SQLite storage."""

from tracker.persistence.database import Database
from tracker.persistence.store import ParcelStore

__all__ = ["Database", "ParcelStore"]
