"""Max-priority retrieval over shared tasks."""

from __future__ import annotations

import heapq
import itertools

from ..errors import Empty
from .model import Task


class TaskPriorityQueue:
    """Binary heap returning the highest ``priority`` first.

    Priority is captured when a task is added; changing ``task.priority``
    later does not reorder the heap.  Order among equal priorities is an
    implementation detail (currently insertion order) and callers must not
    rely on it.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Task]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def add_task(self, task: Task) -> None:
        heapq.heappush(self._heap, (-task.priority, next(self._counter), task))

    def get_next_task(self) -> Task:
        """Remove and return the most urgent task.

        Raises:
            Empty: If the queue holds no tasks.
        """
        if not self._heap:
            raise Empty("Priority queue is empty")
        _, _, task = heapq.heappop(self._heap)
        return task

    def peek_next_task(self) -> Task:
        if not self._heap:
            raise Empty("Priority queue is empty")
        return self._heap[0][2]

    def is_empty(self) -> bool:
        return not self._heap
