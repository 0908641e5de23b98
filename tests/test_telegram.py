"""Tests for the Telegram front end."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from duke.config import Config
from duke.core.tasks import TaskList
from duke.session import Session
from duke.telegram_bot import AuthFilter, create_application
from duke.telegram_handlers import SESSION_KEY, command_text_handler


@pytest.fixture
def session():
    return Session(MagicMock(), TaskList())


def _update(text: str, user_id: int = 42):
    update = MagicMock()
    update.message.text = text
    update.effective_user.id = user_id
    return update


class TestAuthFilter:
    def test_open_when_no_users(self):
        assert AuthFilter([]).check_update(_update("hi")) is True

    def test_allows_listed_user(self):
        assert AuthFilter([42]).check_update(_update("hi", 42)) is True

    def test_rejects_other_user(self):
        assert AuthFilter([42]).check_update(_update("hi", 7)) is False

    def test_rejects_missing_user(self):
        update = _update("hi")
        update.effective_user = None
        assert AuthFilter([42]).check_update(update) is False


class TestCommandTextHandler:
    @patch("duke.telegram_handlers.send_markdown", new_callable=AsyncMock)
    def test_runs_command_against_session(self, mock_send, session):
        context = MagicMock()
        context.bot_data = {SESSION_KEY: session}
        update = _update("todo read book")

        asyncio.run(command_text_handler(update, context))

        assert session.tasks[0].description == "read book"
        sent = mock_send.call_args.args[1]
        assert "[T][ ] read book" in sent
        assert sent.startswith("```")

    @patch("duke.telegram_handlers.send_markdown", new_callable=AsyncMock)
    def test_saves_through_session_store(self, mock_send, session):
        context = MagicMock()
        context.bot_data = {SESSION_KEY: session}

        asyncio.run(command_text_handler(_update("todo water plants"), context))

        session.store.save.assert_called_once_with(session.tasks)

    @patch("duke.telegram_handlers.send_markdown", new_callable=AsyncMock)
    def test_error_is_replied(self, mock_send, session):
        context = MagicMock()
        context.bot_data = {SESSION_KEY: session}

        asyncio.run(command_text_handler(_update("done"), context))

        assert "done command is incomplete" in mock_send.call_args.args[1]

    @patch("duke.telegram_handlers.send_markdown", new_callable=AsyncMock)
    def test_blank_message_ignored(self, mock_send, session):
        context = MagicMock()
        context.bot_data = {SESSION_KEY: session}

        asyncio.run(command_text_handler(_update("   "), context))

        mock_send.assert_not_called()


class TestCreateApplication:
    def test_requires_token(self, session):
        with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN"):
            create_application(Config(telegram_bot_token=""), session)

    def test_stores_session(self, session):
        app = create_application(Config(telegram_bot_token="123:abc"), session)
        assert app.bot_data[SESSION_KEY] is session
