"""Command classification and dispatch.

``process_user_input`` classifies a raw line by its leading keyword, applies
it to a TaskList and returns a Reply. Failures are raised as DukeError.
"""

import re
from dataclasses import dataclass
from enum import Enum

from . import messages
from .errors import IncompleteCommand, NotANumber, UndecipherableMessage
from .tasks import Task, TaskList, format_listing
from .translator import translate_deadline, translate_event, translate_todo


class Intent(Enum):
    """What a command asks for, keyed by its leading keyword."""

    EXIT = "bye"
    LIST = "list"
    DONE = "done"
    DELETE = "delete"
    NUKE = "nuke"
    FIND = "find"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    INVALID = ""


# Checked in this order; the first prefix match wins.
KEYWORD_ORDER = (
    Intent.EXIT,
    Intent.LIST,
    Intent.DONE,
    Intent.DELETE,
    Intent.NUKE,
    Intent.FIND,
    Intent.TODO,
    Intent.DEADLINE,
    Intent.EVENT,
)


INDEX_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)

@dataclass(frozen=True)
class Reply:
    """Outcome of one command."""

    terminate: bool
    changed: bool
    text: str


def identify_intent(text: str) -> Intent:
    """
    Classify by case-insensitive keyword prefix.

    No word boundary is required, so "listing" is a LIST command.
    """
    lowered = text.lower()
    for intent in KEYWORD_ORDER:
        if lowered.startswith(intent.value):
            return intent
    return Intent.INVALID


def process_user_input(text: str, tasks: TaskList) -> Reply:
    """Apply one command to ``tasks``."""
    match identify_intent(text):
        case Intent.EXIT:
            return Reply(True, False, messages.GREET_BYE)
        case Intent.LIST:
            return _process_list(tasks)
        case Intent.DONE:
            return _process_done(text, tasks)
        case Intent.DELETE:
            return _process_delete(text, tasks)
        case Intent.NUKE:
            tasks.delete_all()
            return Reply(False, True, messages.FEEDBACK_NUKE)
        case Intent.FIND:
            return _process_find(text, tasks)
        case Intent.TODO:
            return _added(translate_todo(text), tasks)
        case Intent.DEADLINE:
            return _added(translate_deadline(text), tasks)
        case Intent.EVENT:
            return _added(translate_event(text), tasks)
        case _:
            raise UndecipherableMessage()


def _process_list(tasks: TaskList) -> Reply:
    if tasks.is_empty():
        return Reply(False, False, messages.FEEDBACK_EMPTY_LIST)
    return Reply(False, False, str(tasks))


def _parse_index(text: str, command: str) -> int:
    """Read the 1-based index that follows the command keyword."""
    tokens = text.split()
    if len(tokens) < 2:
        raise IncompleteCommand(command)
    if INDEX_PATTERN.fullmatch(tokens[1]) is None:
        raise NotANumber(tokens[1])
    return int(tokens[1])


def _process_done(text: str, tasks: TaskList) -> Reply:
    task = tasks.mark_as_done(_parse_index(text, "done"))
    return Reply(False, True, messages.FEEDBACK_TASK_DONE % (task, tasks.size()))


def _process_delete(text: str, tasks: TaskList) -> Reply:
    task = tasks.delete_at(_parse_index(text, "delete"))
    return Reply(False, True, messages.FEEDBACK_TASK_DELETE % (task, tasks.size()))


def _process_find(text: str, tasks: TaskList) -> Reply:
    term = text[4:].strip()
    found = tasks.matching(term)
    if not found:
        return Reply(False, True, messages.FEEDBACK_FIND_NONE)
    return Reply(False, True, messages.FEEDBACK_FIND % format_listing(found))


def _added(task: Task, tasks: TaskList) -> Reply:
    tasks.add(task)
    return Reply(False, True, messages.FEEDBACK_TASK_ADDED % (task, tasks.size()))
