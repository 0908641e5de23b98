"""Pure task domain logic - no I/O dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time

from .errors import IndexOutOfRange

DONE_MARK = "X"
NOT_DONE_MARK = " "


@dataclass
class DukeDateTime:
    """A date and a clock time, either of which may be missing."""

    date: date | None = None
    time: time | None = None

    @property
    def is_empty(self) -> bool:
        return self.date is None and self.time is None

    def __str__(self) -> str:
        parts = []
        if self.date is not None:
            parts.append(self.date.strftime("%d %b %Y"))
        if self.time is not None:
            parts.append(self.time.strftime("%H:%M"))
        return " ".join(parts) if parts else "unspecified"


@dataclass
class Duration:
    """Start and end of an event. Ordering is not enforced."""

    start: DukeDateTime = field(default_factory=DukeDateTime)
    end: DukeDateTime = field(default_factory=DukeDateTime)

    def __str__(self) -> str:
        if self.end.is_empty:
            return str(self.start)
        return f"{self.start} to {self.end}"


@dataclass
class Task:
    """Base task: a description and a completion flag."""

    description: str
    is_done: bool = False

    kind = "task"
    icon = "?"

    def mark_as_done(self) -> None:
        self.is_done = True

    def matches(self, term: str) -> bool:
        """Substring match on the description."""
        return term in self.description

    def __str__(self) -> str:
        mark = DONE_MARK if self.is_done else NOT_DONE_MARK
        return f"[{self.icon}][{mark}] {self.description}"


@dataclass
class Todo(Task):
    kind = "todo"
    icon = "T"


@dataclass
class Deadline(Task):
    by: DukeDateTime = field(default_factory=DukeDateTime)

    kind = "deadline"
    icon = "D"

    def __str__(self) -> str:
        return f"{super().__str__()} (by: {self.by})"


@dataclass
class Event(Task):
    at: Duration = field(default_factory=Duration)

    kind = "event"
    icon = "E"

    def __str__(self) -> str:
        return f"{super().__str__()} (at: {self.at})"


class TaskList:
    """
    Ordered collection of tasks.

    User-facing positions are 1-based; deleting shifts later tasks down.
    """

    def __init__(self, tasks: list[Task] | None = None):
        self._tasks: list[Task] = list(tasks) if tasks else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self):
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def _check_index(self, index: int) -> None:
        if index < 1 or index > len(self._tasks):
            raise IndexOutOfRange(index)

    def mark_as_done(self, index: int) -> Task:
        """Mark the task at 1-based ``index`` done and return it."""
        self._check_index(index)
        task = self._tasks[index - 1]
        task.mark_as_done()
        return task

    def delete_at(self, index: int) -> Task:
        """Remove and return the task at 1-based ``index``."""
        self._check_index(index)
        return self._tasks.pop(index - 1)

    def delete_all(self) -> None:
        self._tasks.clear()

    def matching(self, term: str) -> list[tuple[int, Task]]:
        """Return (1-based position, task) pairs whose description contains ``term``."""
        return [(i, t) for i, t in enumerate(self._tasks, start=1) if t.matches(term)]

    def __str__(self) -> str:
        return format_listing(enumerate(self._tasks, start=1))


def format_listing(numbered) -> str:
    """Render (position, task) pairs one per line."""
    return "\n".join(f"{i}. {task}" for i, task in numbered)
