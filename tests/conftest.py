"""Pytest configuration and fixtures for colortasks tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from colortasks.config import select_config_path
from colortasks.logger import reset_logger
from colortasks.store import TaskStore


@pytest.fixture(autouse=True)
def _clean_globals() -> Iterator[None]:
    """Reset logger and global config path between tests."""
    reset_logger()
    select_config_path(None)
    yield
    reset_logger()
    select_config_path(None)


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Deterministic task ids: task-1, task-2, ..."""
    counter = 0

    def _next() -> str:
        nonlocal counter
        counter += 1
        return f"task-{counter}"

    return _next


@pytest.fixture
def store(id_factory: Callable[[], str]) -> TaskStore:
    return TaskStore(id_factory=id_factory)
