"""Shared fixtures for scheduler tests."""

from __future__ import annotations

from typing import Iterator

import pytest
from loguru import logger

from priority_scheduler.task_engine import TaskWorkspace


@pytest.fixture
def workspace() -> TaskWorkspace:
    return TaskWorkspace()


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru output at WARNING and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(str(msg)), level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)
