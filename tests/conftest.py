"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import pytest_asyncio

from workout_competition.db.engine import init_db
from workout_competition.models.workout import WorkoutRecord

BASE_TIME = datetime(2026, 1, 5, 7, 0, tzinfo=timezone.utc)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest_asyncio.fixture
async def db_path(temp_db_path):
    """A temporary database with the schema created."""
    await init_db(temp_db_path)
    return temp_db_path


@pytest.fixture
def make_record():
    """Factory for workout records logged one day apart."""
    counter = {"n": 0}

    def _make(user_id: str, pushups=0, pullups=0, situps=0, squats=0) -> WorkoutRecord:
        counter["n"] += 1
        return WorkoutRecord(
            id=counter["n"],
            user_id=user_id,
            pushups=pushups,
            pullups=pullups,
            situps=situps,
            squats=squats,
            created_at=BASE_TIME + timedelta(days=counter["n"]),
        )

    return _make
