"""Task-ordering core: task model, dependency graph, priority queue and history.

:class:`TaskWorkspace` ties the structures together for one process.
"""

from .engine import TaskWorkspace
from .graph import DependencyGraph
from .history import HistoryStack
from .model import DEFAULT_STATUS, Task, TaskStatus
from .queue import TaskPriorityQueue

__all__ = [
    "DEFAULT_STATUS",
    "DependencyGraph",
    "HistoryStack",
    "Task",
    "TaskPriorityQueue",
    "TaskStatus",
    "TaskWorkspace",
]
