"""Pure task domain logic - no I/O dependencies."""

import time
from dataclasses import dataclass
from typing import Callable


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass
class Task:
    """A fitness to-do item."""

    id: int
    text: str
    completed: bool = False

    def toggle(self) -> None:
        self.completed = not self.completed


class TaskStore:
    """
    Ordered, in-memory task list.

    Ids come from the creation time in milliseconds. Two tasks created within
    the same millisecond (or after a clock step backwards) get the next free
    integer instead, so ids stay unique and increasing for the store's lifetime.
    """

    def __init__(self, id_source: Callable[[], int] = _now_ms):
        self._id_source = id_source
        self._tasks: list[Task] = []
        self._last_id = 0

    def _new_id(self) -> int:
        candidate = self._id_source()
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def add(self, text: str) -> Task | None:
        """Append a new task. Blank text is ignored."""
        if not text.strip():
            return None
        task = Task(id=self._new_id(), text=text)
        self._tasks.append(task)
        return task

    def get(self, task_id: int) -> Task | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def toggle(self, task_id: int) -> Task | None:
        """Flip completion on the matching task. Unknown ids are a no-op."""
        task = self.get(task_id)
        if task is not None:
            task.toggle()
        return task

    def remove(self, task_id: int) -> bool:
        """Delete the matching task. Returns False if nothing was removed."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        return len(self._tasks) != before

    def pending(self) -> list[Task]:
        return [t for t in self._tasks if not t.completed]

    def completed(self) -> list[Task]:
        return [t for t in self._tasks if t.completed]

    def __len__(self) -> int:
        return len(self._tasks)

    def list(self) -> list[Task]:
        """Current tasks in insertion order."""
        return list(self._tasks)
