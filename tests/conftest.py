"""Shared fixtures for tracker tests."""

import random

import pytest
import pytest_asyncio

from tracker.persistence.database import Database
from tracker.persistence.store import ParcelStore


@pytest.fixture
def rng() -> random.Random:
    """Test-local random source for unique client ids."""
    return random.Random()


@pytest_asyncio.fixture
async def db(tmp_path):
    """Connected database backed by a temporary file."""
    database = Database(tmp_path / "tracker.db")
    await database.connect()
    yield database
    await database.disconnect()


@pytest.fixture
def store(db: Database) -> ParcelStore:
    return ParcelStore(db)
