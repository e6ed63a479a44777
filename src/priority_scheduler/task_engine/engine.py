"""Task workspace: the single context object behind the interactive shell.

A new task is registered with the task list, the dependency graph, the
priority queue and the history stack at once.  None of them is authoritative;
each answers a different query and they all share the same instances.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from .graph import DependencyGraph
from .history import HistoryStack
from .model import Task
from .queue import TaskPriorityQueue


def _same_title(a: str, b: str) -> bool:
    """Compare titles character by character, ignoring case.

    Case mappings that change length (``"ß".upper() == "SS"``) never make two
    titles equal.
    """
    if len(a) != len(b):
        return False
    return all(
        x == y or x.upper() == y.upper() or x.lower() == y.lower()
        for x, y in zip(a, b)
    )


class TaskWorkspace:
    """Own the four task collections for one process.

    Parameters
    ----------
    strict_cycles:
        Default cycle policy for :meth:`topological_order`.  When false a
        cycle only degrades the order; when true it raises
        :class:`~priority_scheduler.errors.CycleDetected`.
    """

    def __init__(self, strict_cycles: bool = False) -> None:
        self.strict_cycles = strict_cycles
        self.tasks: list[Task] = []
        self.graph = DependencyGraph()
        self.queue = TaskPriorityQueue()
        self.history = HistoryStack()

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def create_task(
        self,
        title: str,
        description: str = "",
        priority: int = 0,
        deadline: str = "",
    ) -> Task:
        """Create a task and register it everywhere."""
        task = Task(title=title, description=description, priority=int(priority), deadline=deadline)
        self.tasks.append(task)
        self.queue.add_task(task)
        self.graph.add_task(task)
        self.history.push_task(task)
        logger.info("Created task {} {!r} (priority {})", task.id, title, task.priority)
        return task

    def add_dependency(self, task: Task, depends_on: Task) -> None:
        """Record that *task* depends on *depends_on*."""
        self.graph.add_dependency(task, depends_on)
        logger.info("Task {!r} depends on {!r}", task.title, depends_on.title)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_tasks(self) -> list[Task]:
        return list(self.tasks)

    def find_task(self, title: str) -> Optional[Task]:
        """Case-insensitive exact title match; the earliest task wins."""
        for task in self.tasks:
            if _same_title(task.title, title):
                return task
        return None

    def next_task(self) -> Optional[Task]:
        """Pop the most urgent task, or ``None`` once the queue is drained."""
        if self.queue.is_empty():
            return None
        return self.queue.get_next_task()

    def topological_order(self, strict: Optional[bool] = None) -> list[Task]:
        if strict is None:
            strict = self.strict_cycles
        return self.graph.topological_sort(strict=strict)

    def drain_history(self) -> list[Task]:
        """Consume the history stack, newest first."""
        return self.history.drain()

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def set_status(self, title: str, status: str) -> Optional[Task]:
        """Set the status of the task titled *title*; ``None`` if not found."""
        task = self.find_task(title)
        if task is None:
            logger.debug("Status change skipped: no task titled {!r}", title)
            return None
        previous = task.status
        task.set_status(status)
        logger.info("Task {!r} status {} -> {}", task.title, previous, task.status)
        return task
