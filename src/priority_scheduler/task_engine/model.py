"""Task model for the priority scheduler.

A :class:`Task` is a shared, mutable unit of work.  The same instance is held
by the dependency graph, the priority queue and the history stack at once, so
tasks compare and hash by identity and are never copied on insertion.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class TaskStatus(str, Enum):
    """Well-known status labels.

    ``Task.status`` stays a free-form string; these values are offered for
    callers that want consistent spelling.
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    BLOCKED = "blocked"
    DONE = "done"
    CANCELLED = "cancelled"


DEFAULT_STATUS = TaskStatus.PENDING.value


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _generate_id() -> str:
    """Short human-friendly task ID: ``task-<8hex>``."""
    return f"task-{uuid.uuid4().hex[:8]}"


# ---------------------------------------------------------------------------
# Task dataclass
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class Task:
    """A unit of work with a priority, a deadline, a status and dependencies.

    ``title`` is the display identity used by lookups but is not required to
    be unique.  ``deadline`` is stored verbatim and never interpreted.
    """

    title: str
    description: str = ""
    priority: int = 0  # higher = more urgent
    deadline: str = ""
    status: str = DEFAULT_STATUS
    dependencies: list[Task] = field(default_factory=list, repr=False)

    id: str = field(default_factory=_generate_id, repr=False)
    created_at: str = field(default_factory=_now_iso, repr=False)
    updated_at: str = field(default_factory=_now_iso, repr=False)

    def __str__(self) -> str:
        return (
            f"Task(title={self.title!r}, description={self.description!r}, "
            f"priority={self.priority}, deadline={self.deadline!r}, status={self.status!r})"
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def touch(self) -> None:
        """Bump ``updated_at`` to now."""
        self.updated_at = _now_iso()

    def add_dependency(self, other: Task) -> None:
        """Record that this task depends on *other*.

        No duplicate or cycle check is made here; the graph decides what to
        do with cycles when ordering.
        """
        self.dependencies.append(other)
        self.touch()

    def set_status(self, new_status: str) -> None:
        """Replace the status with any label."""
        self.status = str(new_status)
        self.touch()

    @property
    def is_done(self) -> bool:
        return self.status.lower() == TaskStatus.DONE.value

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Render as a plain dict; dependencies are listed by title."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "priority": self.priority,
            "deadline": self.deadline,
            "status": self.status,
            "dependencies": [dep.title for dep in self.dependencies],
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
