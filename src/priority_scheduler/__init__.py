"""Provide the public `priority_scheduler` package exports."""

from __future__ import annotations

from .errors import CycleDetected, Empty, SchedulerError
from .task_engine import (
    DependencyGraph,
    HistoryStack,
    Task,
    TaskPriorityQueue,
    TaskStatus,
    TaskWorkspace,
)

__all__ = [
    "CycleDetected",
    "DependencyGraph",
    "Empty",
    "HistoryStack",
    "SchedulerError",
    "Task",
    "TaskPriorityQueue",
    "TaskStatus",
    "TaskWorkspace",
]
