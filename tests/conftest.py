"""
Pytest configuration and fixtures.
"""

import datetime
import sys
from pathlib import Path

import pytest

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from tasktracker.domain.models import UserPreferences
from tasktracker.i18n import set_language
from tasktracker.infra.config import Settings
from tasktracker.infra.gateway import InMemoryPersistenceGateway, SqlitePersistenceGateway
from tasktracker.services.goal_store import GoalStore
from tasktracker.services.task_store import TaskStore

from fakes import FakeClock, RecordingSink

# Local noon, far away from midnight and DST switches
T0 = int(datetime.datetime(2026, 6, 10, 12, 0).timestamp() * 1000)


@pytest.fixture(autouse=True)
def english_labels():
    """Every test starts (and ends) with English labels"""
    set_language("en")
    yield
    set_language("en")


@pytest.fixture
def clock():
    return FakeClock(T0)


@pytest.fixture
def gateway():
    return InMemoryPersistenceGateway()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def task_store(gateway, sink, clock):
    return TaskStore(gateway, sink=sink, clock=clock)


@pytest.fixture
def goal_store(gateway):
    return GoalStore(gateway)


@pytest.fixture
def sqlite_gateway(tmp_path):
    """SQLite-backed gateway in a temporary file"""
    gw = SqlitePersistenceGateway.from_url(f"sqlite:///{tmp_path / 'test.db'}")
    yield gw
    gw.close()


@pytest.fixture
def settings(tmp_path, monkeypatch):
    """Settings rooted in tmp_path, isolated from the environment and the user's home"""
    for var in ("TASKTRACKER_STORAGE_BACKEND", "TASKTRACKER_DATABASE_URL", "TASKTRACKER_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return Settings(
        config_dir=tmp_path / "config",
        data_dir=tmp_path / "data",
        storage_backend="memory",
        preferences=UserPreferences(sound_enabled=False),
    )
