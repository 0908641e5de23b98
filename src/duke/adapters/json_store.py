"""JSON file task storage adapter."""

import json
import logging
from datetime import date, time
from pathlib import Path

from duke.core.tasks import Deadline, DukeDateTime, Duration, Event, Task, TaskList, Todo

logger = logging.getLogger(__name__)


def _date_time_to_dict(value: DukeDateTime) -> dict:
    return {
        "date": value.date.isoformat() if value.date else None,
        "time": value.time.isoformat(timespec="minutes") if value.time else None,
    }


def _date_time_from_dict(data: dict | None) -> DukeDateTime:
    if not data:
        return DukeDateTime()
    return DukeDateTime(
        date=date.fromisoformat(data["date"]) if data.get("date") else None,
        time=time.fromisoformat(data["time"]) if data.get("time") else None,
    )


def task_to_dict(task: Task) -> dict:
    """Serialize a task to a JSON-friendly record."""
    record = {"type": task.kind, "description": task.description, "done": task.is_done}
    if isinstance(task, Deadline):
        record["by"] = _date_time_to_dict(task.by)
    elif isinstance(task, Event):
        record["start"] = _date_time_to_dict(task.at.start)
        record["end"] = _date_time_to_dict(task.at.end)
    return record


def task_from_dict(data: dict) -> Task:
    """Rebuild a task from a record written by task_to_dict."""
    description = data["description"]
    done = bool(data.get("done", False))

    match data.get("type"):
        case "todo":
            return Todo(description, done)
        case "deadline":
            return Deadline(description, done, by=_date_time_from_dict(data.get("by")))
        case "event":
            return Event(
                description,
                done,
                at=Duration(
                    _date_time_from_dict(data.get("start")),
                    _date_time_from_dict(data.get("end")),
                ),
            )
        case other:
            raise ValueError(f"Unknown task type: {other!r}")


class JsonTaskStore:
    """
    JSON file task storage.

    Implements TaskStore protocol. The whole list is one JSON array.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> TaskList:
        """Load tasks from disk. Missing or unreadable file -> empty list."""
        if not self.path.exists():
            return TaskList()

        try:
            records = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read task file {self.path}: {e}")
            return TaskList()

        if not isinstance(records, list):
            logger.warning(f"Task file {self.path} does not hold a list, ignoring it")
            return TaskList()

        tasks = TaskList()
        for record in records:
            try:
                tasks.add(task_from_dict(record))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping unreadable task record {record!r}: {e}")
        logger.debug(f"Loaded {tasks.size()} tasks from {self.path}")
        return tasks

    def save(self, tasks: TaskList) -> None:
        """Write all tasks to disk (pretty-printed)."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps([task_to_dict(t) for t in tasks], indent=2))
        logger.debug(f"Saved {tasks.size()} tasks to {self.path}")
