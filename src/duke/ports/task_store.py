"""Task storage interface."""

from typing import Protocol

from duke.core.tasks import TaskList


class TaskStore(Protocol):
    """Interface for persisting the task list between sessions."""

    def load(self) -> TaskList:
        """Load the saved task list. Returns an empty list if nothing is saved."""
        ...

    def save(self, tasks: TaskList) -> None:
        """Overwrite the saved task list."""
        ...
