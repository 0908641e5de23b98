"""Telegram message formatting utilities."""

import telegramify_markdown

MAX_MESSAGE_LENGTH = 4000


def as_code_block(text: str) -> str:
    """Keep task listings monospaced."""
    return f"```\n{text}\n```"


async def send_markdown(message, text: str):
    """Reply with markdown text, converted to MarkdownV2 and split into chunks."""
    converted = telegramify_markdown.markdownify(text)
    chunks = [
        converted[i : i + MAX_MESSAGE_LENGTH]
        for i in range(0, len(converted), MAX_MESSAGE_LENGTH)
    ]
    for chunk in chunks:
        await message.reply_text(chunk, parse_mode="MarkdownV2")
