"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from study_tracker.goals.store import GoalStore


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path of a goals file that does not exist yet."""
    return tmp_path / "study-tracker.json"


@pytest.fixture
def store(data_file: Path) -> GoalStore:
    """Empty goal store backed by a temporary file."""
    return GoalStore(data_file)


@pytest.fixture
def seeded_store(store: GoalStore) -> GoalStore:
    """Store holding Math (5h x 2), Physics (3h x 4) and Chemistry (2h x 1)."""
    store.create("Math", 5, 2)
    store.create("Physics", 3, 4)
    store.create("Chemistry", 2, 1)
    store.log_session("Physics", 1.5)
    return store


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
