"""Tests for the session layer."""

from unittest.mock import MagicMock

import pytest

from duke.core import messages
from duke.core.errors import NotANumber
from duke.core.tasks import TaskList, Todo
from duke.session import Session


@pytest.fixture
def store():
    mock = MagicMock()
    mock.load.return_value = TaskList([Todo("read book")])
    return mock


class TestSession:
    def test_loads_from_store(self, store):
        session = Session(store)
        store.load.assert_called_once()
        assert session.tasks.size() == 1

    def test_explicit_tasks_skip_load(self, store):
        session = Session(store, TaskList())
        store.load.assert_not_called()
        assert session.tasks.is_empty()

    def test_saves_when_changed(self, store):
        session = Session(store)
        reply = session.handle("todo buy milk")
        assert reply.changed is True
        store.save.assert_called_once_with(session.tasks)

    def test_does_not_save_when_unchanged(self, store):
        session = Session(store)
        session.handle("list")
        store.save.assert_not_called()

    def test_error_becomes_reply(self, store):
        session = Session(store)
        reply = session.handle("done x")
        assert reply.terminate is False
        assert reply.changed is False
        assert reply.text == messages.ERROR_NOT_NUMBER % "x"
        store.save.assert_not_called()

    def test_session_continues_after_error(self, store):
        session = Session(store)
        session.handle("gibberish")
        reply = session.handle("delete 1")
        assert "read book" in reply.text
        assert session.tasks.is_empty()

    def test_execute_raises(self, store):
        session = Session(store)
        with pytest.raises(NotANumber):
            session.execute("done x")

    def test_bye_terminates(self, store):
        assert Session(store).handle("bye").terminate is True
