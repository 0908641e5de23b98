"""Functional core - pure business logic with no I/O."""

from .tasks import Task, Todo, Deadline, Event, DukeDateTime, Duration, TaskList
from .errors import DukeError
from .translator import translate_todo, translate_deadline, translate_event
from .commands import Intent, Reply, identify_intent, process_user_input
from .formatting import make_formatted_text

__all__ = [
    # Tasks
    "Task",
    "Todo",
    "Deadline",
    "Event",
    "DukeDateTime",
    "Duration",
    "TaskList",
    # Errors
    "DukeError",
    # Translator
    "translate_todo",
    "translate_deadline",
    "translate_event",
    # Commands
    "Intent",
    "Reply",
    "identify_intent",
    "process_user_input",
    # Rendering
    "make_formatted_text",
]
