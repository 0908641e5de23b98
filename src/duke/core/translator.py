"""Turns add-task commands into Task objects.

Dates are written ``d/m/yy`` or ``dd/mm/yyyy`` (day and month take one or two
digits, the year two or four). Times are military ``hhmm``. Both are optional
and may appear anywhere in the text after ``/by`` or ``/at``.
"""

import re
from datetime import date, time

from .errors import (
    DayTooBig,
    DayZero,
    HourOutOfBounds,
    IncompleteCommand,
    MinuteOutOfBounds,
    MonthTooBig,
    MonthZero,
    NoDescription,
)
from .tasks import Deadline, DukeDateTime, Duration, Event, Todo

DATE_PATTERN = re.compile(r"\b\d{1,2}/\d{1,2}/(\d{2}|\d{4})\b", re.ASCII)

# Never matches the year of a date token: it is always preceded by "/".
TIME_PATTERN = re.compile(r"(?<!/)\d{4}\b", re.ASCII)

# February is always 29 days.
DAYS_EACH_MONTH = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
NAMES_EACH_MONTH = (
    "January", "Februrary", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

DEADLINE_SEPARATOR = "/by"
EVENT_SEPARATOR = "/at"
RANGE_SEPARATOR = "to"


def translate_todo(text: str) -> Todo:
    """Build a Todo from ``todo <description>``."""
    description = text[4:].strip()
    if not description:
        raise NoDescription()
    return Todo(description)


def translate_deadline(text: str) -> Deadline:
    """Build a Deadline from ``deadline <description> /by [date] [time]``."""
    description, when = _split_description(text[8:], DEADLINE_SEPARATOR, "deadline")

    by = DukeDateTime()
    if when is not None:
        by = extract_date_time(when)

    return Deadline(description, by=by)


def translate_event(text: str) -> Event:
    """Build an Event from ``event <description> /at [date] [time] [to [date] [time]]``."""
    description, when = _split_description(text[5:], EVENT_SEPARATOR, "event")

    start = DukeDateTime()
    end = DukeDateTime()
    if when is not None:
        if RANGE_SEPARATOR in when and not when.endswith(RANGE_SEPARATOR):
            start_text, end_text = when.split(RANGE_SEPARATOR, 1)
            start = extract_date_time(start_text)
            end = extract_date_time(end_text)
        else:
            start = extract_date_time(when)

    return Event(description, at=Duration(start, end))


def _split_description(remainder: str, separator: str, command: str) -> tuple[str, str | None]:
    """
    Split the text after the command keyword into description and time text.

    Returns the trimmed description and the untrimmed text after the
    separator, or None when nothing follows it.
    """
    remainder = remainder.strip()
    if not remainder or separator not in remainder:
        raise IncompleteCommand(command)

    head, _, tail = remainder.partition(separator)
    description = head.strip()
    if not description:
        raise NoDescription()

    return description, tail or None


def extract_date_time(text: str) -> DukeDateTime:
    return DukeDateTime(extract_date(text), extract_time(text))


def extract_date(text: str) -> date | None:
    """Read the first date token in ``text``; two-digit years land in the 2000s."""
    match = DATE_PATTERN.search(text)
    if match is None:
        return None

    day, month, year = (int(v) for v in match.group(0).split("/"))
    check_date(day, month)

    if year < 100:
        year += 2000

    try:
        return date(year, month, day)
    except ValueError:
        # 29 February outside a leap year
        raise DayTooBig(NAMES_EACH_MONTH[month - 1]) from None


def extract_time(text: str) -> time | None:
    """Read the first ``hhmm`` token in ``text``."""
    match = TIME_PATTERN.search(text)
    if match is None:
        return None

    token = match.group(0)
    hour, minute = int(token[:2]), int(token[2:])
    check_time(hour, minute)
    return time(hour, minute)


def check_date(day: int, month: int) -> None:
    """Raise if ``day``/``month`` cannot exist according to DAYS_EACH_MONTH."""
    if day == 0:
        raise DayZero()
    if month == 0:
        raise MonthZero()
    if month > 12:
        raise MonthTooBig()
    if day > DAYS_EACH_MONTH[month - 1]:
        raise DayTooBig(NAMES_EACH_MONTH[month - 1])


def check_time(hour: int, minute: int) -> None:
    if hour < 0 or hour > 23:
        raise HourOutOfBounds()
    if minute < 0 or minute > 59:
        raise MinuteOutOfBounds()
