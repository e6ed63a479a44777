"""Last-in-first-out record of task creation."""

from __future__ import annotations

from ..errors import Empty
from .model import Task


class HistoryStack:
    """Tasks in push order, readable only by popping the newest.

    Reading the history consumes it: after :meth:`drain` the stack is empty
    until new tasks are pushed.
    """

    def __init__(self) -> None:
        self._items: list[Task] = []

    def __len__(self) -> int:
        return len(self._items)

    def push_task(self, task: Task) -> None:
        self._items.append(task)

    def pop_task(self) -> Task:
        """Remove and return the most recently pushed task.

        Raises:
            Empty: If the stack holds no tasks.
        """
        if not self._items:
            raise Empty("History stack is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def drain(self) -> list[Task]:
        """Pop every task, newest first."""
        drained: list[Task] = []
        while not self.is_empty():
            drained.append(self.pop_task())
        return drained
