"""Dependency graph over shared :class:`Task` instances.

An edge ``t1 -> t2`` means *t1 depends on t2*: t2 has to be finished before
t1.  Edges live on the tasks themselves (``Task.dependencies``); the graph
only owns the ordered set of known tasks and the ordering algorithm.
"""

from __future__ import annotations

from typing import Iterator, Optional

from loguru import logger

from ..errors import CycleDetected
from .model import Task


class DependencyGraph:
    """Known tasks in insertion order plus a depth-first topological sort."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._members: set[int] = set()
        self._last_order: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task: object) -> bool:
        return id(task) in self._members

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def last_order(self) -> list[Task]:
        """The result of the most recent :meth:`topological_sort` call."""
        return list(self._last_order)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_task(self, task: Task) -> None:
        """Register *task* unless this exact instance is already known."""
        if id(task) in self._members:
            return
        self._members.add(id(task))
        self._tasks.append(task)
        logger.debug("Graph: registered task {!r}", task.title)

    def add_dependency(self, task: Task, depends_on: Task) -> None:
        """Record that *task* depends on *depends_on*, registering both."""
        self.add_task(task)
        self.add_task(depends_on)
        task.add_dependency(depends_on)
        logger.debug("Graph: {!r} now depends on {!r}", task.title, depends_on.title)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def topological_sort(self, strict: bool = False) -> list[Task]:
        """Return all known tasks with every dependency ahead of its dependents.

        With ``strict=False`` a cycle does not stop the sort: already visited
        tasks are skipped, so the call terminates but the cyclic tasks come
        out in traversal order.  With ``strict=True`` a cycle raises
        :class:`CycleDetected`.
        """
        order, cycle = self._traverse()
        if cycle is not None:
            if strict:
                raise CycleDetected(cycle)
            logger.warning(
                "Dependency cycle detected: {}; ordering is not valid for these tasks",
                " -> ".join(t.title for t in cycle),
            )
        self._last_order = order
        return list(order)

    def find_cycle(self) -> Optional[list[Task]]:
        """Return one dependency cycle as a task path, or ``None``."""
        _, cycle = self._traverse()
        return cycle

    def _traverse(self) -> tuple[list[Task], Optional[list[Task]]]:
        """Iterative depth-first post-order over the known tasks.

        Each task is marked visited before its dependencies are explored and
        pushed onto ``finished_stack`` once all of them are done.  Reading
        the stack bottom-up yields dependencies before dependents.
        """
        visited: set[int] = set()
        done: set[int] = set()
        finished_stack: list[Task] = []
        cycle: Optional[list[Task]] = None

        for root in self._tasks:
            if id(root) in visited:
                continue
            visited.add(id(root))
            work: list[tuple[Task, Iterator[Task]]] = [(root, iter(root.dependencies))]
            while work:
                task, pending = work[-1]
                for dep in pending:
                    key = id(dep)
                    if key not in self._members:
                        logger.debug(
                            "Graph: skipping unregistered dependency {!r} of {!r}", dep.title, task.title
                        )
                        continue
                    if key not in visited:
                        visited.add(key)
                        work.append((dep, iter(dep.dependencies)))
                        break
                    if key not in done and cycle is None:
                        # Back edge: dep is still on the work stack.
                        path = [t for t, _ in work]
                        start = next(i for i, t in enumerate(path) if t is dep)
                        cycle = path[start:] + [dep]
                else:
                    work.pop()
                    done.add(id(task))
                    finished_stack.append(task)

        return finished_stack, cycle
