"""Error taxonomy for command parsing and task list operations."""

from . import messages


class DukeError(Exception):
    """A command could not be carried out.

    Carries a message template and its arguments so front ends can render
    the text however they display replies.
    """

    template: str = messages.ERROR_UNDECIPHERABLE_MESSAGE

    def __init__(self, *args):
        self.args_for_template = args
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.args_for_template:
            return self.template % self.args_for_template
        return self.template


class NoDescription(DukeError):
    template = messages.ERROR_NO_DESCRIPTION


class IncompleteCommand(DukeError):
    template = messages.ERROR_INCOMPLETE_COMMAND

    def __init__(self, command: str):
        self.command = command
        super().__init__(command)


class DayZero(DukeError):
    template = messages.ERROR_DAY_ZERO


class MonthZero(DukeError):
    template = messages.ERROR_MONTH_ZERO


class MonthTooBig(DukeError):
    template = messages.ERROR_MONTH_BIG


class DayTooBig(DukeError):
    template = messages.ERROR_DAY_BIG

    def __init__(self, month_name: str):
        self.month_name = month_name
        super().__init__(month_name)


class HourOutOfBounds(DukeError):
    template = messages.ERROR_HOURS_OOB


class MinuteOutOfBounds(DukeError):
    template = messages.ERROR_MINUTES_OOB


class NotANumber(DukeError):
    template = messages.ERROR_NOT_NUMBER

    def __init__(self, token: str):
        self.token = token
        super().__init__(token)


class IndexOutOfRange(DukeError):
    template = messages.ERROR_INDEX_OOB

    def __init__(self, index: int):
        self.index = index
        super().__init__(index)


class UndecipherableMessage(DukeError):
    template = messages.ERROR_UNDECIPHERABLE_MESSAGE
