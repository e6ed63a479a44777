"""Errors raised by the task-ordering core."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .task_engine.model import Task


class SchedulerError(Exception):
    """Base class for scheduler errors."""

    pass


class Empty(SchedulerError, IndexError):
    """Retrieval from an empty priority queue or history stack."""

    pass


class CycleDetected(SchedulerError, ValueError):
    """A strict topological sort ran into a dependency cycle."""

    def __init__(self, cycle: Sequence["Task"]):
        self.cycle = list(cycle)
        path = " -> ".join(task.title for task in self.cycle)
        super().__init__(f"Dependency cycle detected: {path}")
