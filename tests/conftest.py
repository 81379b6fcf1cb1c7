from datetime import datetime, timezone

import pytest

from flashcard_srs.clock import FixedClock
from flashcard_srs.db import ScheduleStore


@pytest.fixture
def tmp_db(tmp_path):
    """Provide a temporary SQLite database path for tests."""
    db_path = str(tmp_path / "test_reviews.db")
    return db_path


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(tmp_db):
    s = ScheduleStore(tmp_db)
    s.init()
    return s
