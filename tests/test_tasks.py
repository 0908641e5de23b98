"""Tests for core task logic."""

from datetime import date, time

import pytest

from duke.core.errors import IndexOutOfRange
from duke.core.tasks import Deadline, DukeDateTime, Duration, Event, TaskList, Todo


@pytest.fixture
def sample_tasks():
    return TaskList([Todo("a"), Todo("b"), Todo("c"), Todo("d")])


class TestDukeDateTime:
    def test_defaults_to_empty(self):
        value = DukeDateTime()
        assert value.date is None
        assert value.time is None
        assert DukeDateTime(date(2024, 1, 1)) != value

    def test_date_and_time(self):
        assert str(DukeDateTime(date(2023, 12, 2), time(18, 0))) == "02 Dec 2023 18:00"

    def test_date_only(self):
        assert str(DukeDateTime(date(2023, 12, 2))) == "02 Dec 2023"

    def test_time_only(self):
        assert str(DukeDateTime(time=time(7, 5))) == "07:05"

    def test_empty(self):
        value = DukeDateTime()
        assert value.is_empty
        assert str(value) == "unspecified"


class TestTaskStr:
    def test_todo(self):
        assert str(Todo("read")) == "[T][ ] read"

    def test_done(self):
        task = Todo("read")
        task.mark_as_done()
        assert str(task) == "[T][X] read"

    def test_deadline(self):
        task = Deadline("submit", by=DukeDateTime(date(2023, 12, 2), time(18, 0)))
        assert str(task) == "[D][ ] submit (by: 02 Dec 2023 18:00)"

    def test_event_with_end(self):
        start = DukeDateTime(date(2020, 1, 1), time(10, 0))
        end = DukeDateTime(date(2020, 1, 1), time(11, 0))
        task = Event("meeting", at=Duration(start, end))
        assert str(task) == "[E][ ] meeting (at: 01 Jan 2020 10:00 to 01 Jan 2020 11:00)"

    def test_event_without_end(self):
        task = Event("party", at=Duration(DukeDateTime(time=time(20, 0))))
        assert str(task) == "[E][ ] party (at: 20:00)"


class TestTaskList:
    def test_starts_empty(self):
        tasks = TaskList()
        assert tasks.is_empty()
        assert tasks.size() == 0
        assert str(tasks) == ""

    def test_add_keeps_order(self):
        tasks = TaskList()
        tasks.add(Todo("first"))
        tasks.add(Todo("second"))
        assert [t.description for t in tasks] == ["first", "second"]

    def test_mark_as_done_is_idempotent(self, sample_tasks):
        first = sample_tasks.mark_as_done(2)
        second = sample_tasks.mark_as_done(2)
        assert first is second
        assert second.is_done is True
        assert len(sample_tasks) == 4

    @pytest.mark.parametrize("k", [1, 2, 3, 4])
    def test_delete_shifts_down(self, sample_tasks, k):
        before = [t.description for t in sample_tasks]
        removed = sample_tasks.delete_at(k)
        assert removed.description == before[k - 1]
        assert [t.description for t in sample_tasks] == before[: k - 1] + before[k:]

    @pytest.mark.parametrize("index", [0, 5, -1])
    def test_delete_out_of_range(self, sample_tasks, index):
        with pytest.raises(IndexOutOfRange) as exc:
            sample_tasks.delete_at(index)
        assert exc.value.index == index
        assert len(sample_tasks) == 4

    @pytest.mark.parametrize("index", [0, 5])
    def test_mark_out_of_range(self, sample_tasks, index):
        with pytest.raises(IndexOutOfRange):
            sample_tasks.mark_as_done(index)

    def test_delete_all(self, sample_tasks):
        sample_tasks.delete_all()
        assert sample_tasks.is_empty()

    def test_matching_keeps_positions(self):
        tasks = TaskList([Todo("read book"), Todo("milk"), Todo("bookshelf")])
        assert [(i, t.description) for i, t in tasks.matching("book")] == [
            (1, "read book"),
            (3, "bookshelf"),
        ]

    def test_listing(self):
        tasks = TaskList([Todo("a"), Todo("b")])
        assert str(tasks) == "1. [T][ ] a\n2. [T][ ] b"
