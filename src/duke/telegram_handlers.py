"""Telegram command handlers."""

import asyncio
import logging

from telegram import Update
from telegram.ext import ContextTypes

from .core import messages
from .session import Session
from .telegram_format import as_code_block, send_markdown

logger = logging.getLogger(__name__)

SESSION_KEY = "session"


def get_session(context: ContextTypes.DEFAULT_TYPE) -> Session:
    """The session shared by every chat, stored in bot_data."""
    return context.bot_data[SESSION_KEY]


async def start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start command."""
    await update.message.reply_text(
        f"{messages.GREET_HELLO}\n\n"
        "Send me a command such as 'todo read book' or 'list'.\n"
        "/help - Show all commands"
    )


async def help_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /help command."""
    await send_markdown(update.message, as_code_block(messages.HELP_TEXT))


async def command_text_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Run a plain-text message as a Duke command.

    'bye' gets the farewell but the bot keeps running.
    """
    text = (update.message.text or "").strip()
    if not text:
        return

    # Saving the task file is blocking I/O
    reply = await asyncio.to_thread(get_session(context).handle, text)
    if reply.terminate:
        logger.info(f"User {update.effective_user.id} said goodbye")
    await send_markdown(update.message, as_code_block(reply.text))
