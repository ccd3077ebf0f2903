from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from task_api.main import create_app
from task_api.store import TaskStore


class FakeClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(clock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture
def client(store) -> TestClient:
    return TestClient(create_app(store))
