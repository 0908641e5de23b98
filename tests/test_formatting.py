"""Tests for terminal rendering."""

from duke.core.formatting import HORIZONTAL_LINE, make_formatted_text


class TestMakeFormattedText:
    def test_boxes_and_indents_each_line(self):
        lines = make_formatted_text("one\ntwo").splitlines()
        assert lines[0].strip() == HORIZONTAL_LINE
        assert lines[-1].strip() == HORIZONTAL_LINE
        assert lines[1:-1] == ["     one", "     two"]

    def test_ends_with_newline(self):
        assert make_formatted_text("x").endswith("\n")
