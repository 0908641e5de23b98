"""Terminal rendering of reply text."""

HORIZONTAL_LINE = "_" * 60
INDENT = "    "


def make_formatted_text(text: str) -> str:
    """Box ``text`` between horizontal rules, indenting every line."""
    lines = [INDENT + HORIZONTAL_LINE]
    lines.extend(f"{INDENT} {line}" for line in text.splitlines())
    lines.append(INDENT + HORIZONTAL_LINE)
    return "\n".join(lines) + "\n"
