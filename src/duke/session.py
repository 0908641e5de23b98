"""Session layer shared between the CLI and Telegram.

A Session owns the task list for as long as the front end runs, feeds each
raw line through the command processor and persists the list when a command
changes it.
"""

import logging

from .core.commands import Reply, process_user_input
from .core.errors import DukeError
from .core.tasks import TaskList
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)


class Session:
    """One user's task list plus the store it is saved to."""

    def __init__(self, store: TaskStore, tasks: TaskList | None = None):
        self.store = store
        self.tasks = tasks if tasks is not None else store.load()

    def execute(self, line: str) -> Reply:
        """Process one command, saving if it changed the list. Raises DukeError."""
        logger.debug(f"Processing command: {line!r}")
        reply = process_user_input(line, self.tasks)
        if reply.changed:
            self.store.save(self.tasks)
        return reply

    def handle(self, line: str) -> Reply:
        """Like execute, but a rejected command becomes an error reply."""
        try:
            return self.execute(line)
        except DukeError as e:
            logger.info(f"Command rejected ({type(e).__name__}): {line!r}")
            return Reply(False, False, e.message)
