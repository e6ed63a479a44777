"""Tests for the history stack (task_engine/history.py)."""

from __future__ import annotations

import pytest

from priority_scheduler.errors import Empty
from priority_scheduler.task_engine.history import HistoryStack
from priority_scheduler.task_engine.model import Task


class TestHistoryStack:
    def test_lifo_order(self) -> None:
        stack = HistoryStack()
        a, b, c = Task(title="a"), Task(title="b"), Task(title="c")
        for t in (a, b, c):
            stack.push_task(t)
        assert [stack.pop_task() for _ in range(3)] == [c, b, a]
        assert stack.is_empty()

    def test_pop_empty_raises(self) -> None:
        with pytest.raises(Empty):
            HistoryStack().pop_task()

    def test_drain_is_destructive(self) -> None:
        stack = HistoryStack()
        a, b = Task(title="a"), Task(title="b")
        stack.push_task(a)
        stack.push_task(b)
        assert stack.drain() == [b, a]
        assert stack.is_empty()
        assert stack.drain() == []

    def test_push_after_drain(self) -> None:
        stack = HistoryStack()
        stack.push_task(Task(title="old"))
        stack.drain()
        new = Task(title="new")
        stack.push_task(new)
        assert len(stack) == 1
        assert stack.pop_task() is new
