"""User-facing text templates.

Templates use ``%`` formatting; arguments are supplied by the caller.
"""

GREET_HELLO = "Hello! I'm Duke.\nWhat can I do for you?"
GREET_BYE = "Bye. Hope to see you again soon!"

FEEDBACK_EMPTY_LIST = "Your task list is empty."
FEEDBACK_TASK_ADDED = "Got it. I've added this task:\n  %s\nNow you have %d tasks in the list."
FEEDBACK_TASK_DONE = "Nice! I've marked this task as done:\n  %s\nYou have %d tasks in the list."
FEEDBACK_TASK_DELETE = "Noted. I've removed this task:\n  %s\nNow you have %d tasks in the list."
FEEDBACK_NUKE = "All tasks have been removed. Your list is now empty."
FEEDBACK_FIND = "Here are the matching tasks in your list:\n%s"
FEEDBACK_FIND_NONE = "No tasks match your search."

ERROR_NO_DESCRIPTION = "OOPS!!! The description of a task cannot be empty."
ERROR_INCOMPLETE_COMMAND = "OOPS!!! The %s command is incomplete."
ERROR_DAY_ZERO = "OOPS!!! A day cannot be 0."
ERROR_MONTH_ZERO = "OOPS!!! A month cannot be 0."
ERROR_MONTH_BIG = "OOPS!!! There are only 12 months in a year."
ERROR_DAY_BIG = "OOPS!!! %s does not have that many days."
ERROR_HOURS_OOB = "OOPS!!! Hours must be between 00 and 23."
ERROR_MINUTES_OOB = "OOPS!!! Minutes must be between 00 and 59."
ERROR_NOT_NUMBER = "OOPS!!! '%s' is not a number."
ERROR_INDEX_OOB = "OOPS!!! There is no task number %d."
ERROR_UNDECIPHERABLE_MESSAGE = "OOPS!!! I'm sorry, but I don't know what that means :-("

HELP_TEXT = (
    "Commands:\n"
    "todo <description>\n"
    "deadline <description> /by [d/m/yy] [hhmm]\n"
    "event <description> /at [d/m/yy] [hhmm] to [d/m/yy] [hhmm]\n"
    "list\n"
    "done <n>\n"
    "delete <n>\n"
    "find <term>\n"
    "nuke\n"
    "bye"
)
