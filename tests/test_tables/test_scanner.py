"""Tests for the line cursor and block scanner."""

import pytest

from mdfmt.tables.scanner import LineCursor, closes_fence, opening_fence, scan
from mdfmt.types import Alignment, PassThrough, TableBlock


def _kinds(segments):
    return ["table" if isinstance(s, TableBlock) else "text" for s in segments]


class TestLineCursor:
    def test_next_and_line_numbers(self):
        cursor = LineCursor(["a", "b"])
        assert cursor.next() == "a"
        assert cursor.line_no == 1
        assert cursor.next() == "b"
        assert cursor.line_no == 2
        assert cursor.next() is None

    def test_peek_does_not_consume(self):
        cursor = LineCursor(["a", "b"])
        assert cursor.peek() == "a"
        assert cursor.peek() == "a"
        assert cursor.next() == "a"
        assert cursor.peek() == "b"

    def test_peek_at_end(self):
        assert LineCursor([]).peek() is None

    def test_push_back(self):
        cursor = LineCursor(["a", "b"])
        cursor.next()
        cursor.next()
        cursor.push_back()
        assert cursor.line_no == 1
        assert cursor.peek() == "b"
        assert cursor.next() == "b"
        assert cursor.line_no == 2

    def test_push_back_without_line(self):
        with pytest.raises(RuntimeError):
            LineCursor(["a"]).push_back()

    def test_accepts_generator(self):
        cursor = LineCursor(line for line in ["x"])
        assert cursor.next() == "x"


class TestFences:
    def test_backtick_fence(self):
        assert opening_fence("```python") == "```"

    def test_tilde_fence(self):
        assert opening_fence("~~~~") == "~~~~"

    def test_indented_fence(self):
        assert opening_fence("   ```") == "```"

    def test_too_indented(self):
        assert opening_fence("    ```") is None

    def test_too_short(self):
        assert opening_fence("``") is None

    def test_backtick_in_info_string(self):
        assert opening_fence("``` a`b") is None

    def test_close_same_marker(self):
        assert closes_fence("```", "```") is True

    def test_close_longer_run(self):
        assert closes_fence("`````", "```") is True

    def test_close_shorter_run(self):
        assert closes_fence("```", "`````") is False

    def test_close_other_character(self):
        assert closes_fence("~~~", "```") is False

    def test_close_with_info_string(self):
        assert closes_fence("``` python", "```") is False


class TestScan:
    def test_plain_text_only(self):
        segments = list(scan(["one", "two"]))
        assert segments == [PassThrough("one", 1), PassThrough("two", 2)]

    def test_simple_table(self):
        segments = list(scan(["| a | b |", "|---|:-:|", "| 1 | 2 |"]))
        assert len(segments) == 1
        block = segments[0]
        assert isinstance(block, TableBlock)
        assert [c.text for c in block.header.cells] == ["a", "b"]
        assert block.alignment == (Alignment.DEFAULT, Alignment.CENTER)
        assert len(block.body) == 1
        assert block.body[0].line_no == 3
        assert block.line_count == 3

    def test_header_only_table(self):
        segments = list(scan(["| a |", "| --- |"]))
        assert _kinds(segments) == ["table"]
        assert segments[0].body == ()

    def test_pipe_line_without_delimiter_is_text(self):
        segments = list(scan(["| a | b |", "| 1 | 2 |"]))
        assert _kinds(segments) == ["text", "text"]

    def test_invalid_delimiter_is_text(self):
        segments = list(scan(["| a | b |", "| --- | x |", "| 1 | 2 |"]))
        assert _kinds(segments) == ["text", "text", "text"]

    def test_delimiter_needs_pipe(self):
        segments = list(scan(["a | b", "---"]))
        assert _kinds(segments) == ["text", "text"]

    def test_table_ends_at_non_table_line(self):
        lines = ["before", "| a |", "| - |", "| 1 |", "", "after"]
        segments = list(scan(lines))
        assert _kinds(segments) == ["text", "table", "text", "text"]
        assert segments[2] == PassThrough("", 5)
        assert segments[3] == PassThrough("after", 6)

    def test_terminating_line_can_start_new_table(self):
        # A row that is not table-shaped ends the first table; the following
        # header + delimiter open a second one
        lines = ["| a |", "| - |", "text", "| b |", "| - |"]
        assert _kinds(scan(lines)) == ["table", "text", "table"]

    def test_adjacent_tables_merge_into_body(self):
        lines = ["| a |", "| - |", "| b |", "| - |"]
        segments = list(scan(lines))
        assert _kinds(segments) == ["table"]
        assert len(segments[0].body) == 2

    def test_table_at_end_of_input_is_closed(self):
        segments = list(scan(["text", "| a |", "| --- |", "| 1 |"]))
        assert _kinds(segments) == ["text", "table"]

    def test_header_truncating_to_delimiter_after_row_is_text(self):
        # Formatting "| --- | note |" as a one-column header would leave
        # "| --- |" under "| a | b |" and make a table of them next time
        lines = ["| a | b |", "| --- | note |", "| --- |"]
        segments = list(scan(lines))
        assert _kinds(segments) == ["text", "text", "text"]
        assert segments[1] == PassThrough("| --- | note |", 2)

    def test_header_truncating_to_delimiter_after_text_is_table(self):
        segments = list(scan(["text", "| --- | note |", "| --- |"]))
        assert _kinds(segments) == ["text", "table"]

    def test_untruncated_header_after_row_is_table(self):
        segments = list(scan(["| a | b |", "| x | note |", "| --- |"]))
        assert _kinds(segments) == ["text", "table"]

    def test_header_cell_count_may_differ(self):
        segments = list(scan(["| A | B | C |", "| --- | --- |"]))
        assert segments[0].column_count == 2
        assert len(segments[0].header) == 3

    def test_is_lazy(self):
        def lines():
            yield "text"
            raise AssertionError("read too far")

        segments = scan(lines())
        assert next(segments) == PassThrough("text", 1)


class TestScanCodeFences:
    def test_table_in_fence_untouched(self):
        lines = ["```", "| a |", "| - |", "```", "after"]
        segments = list(scan(lines))
        assert _kinds(segments) == ["text"] * 5

    def test_table_after_fence(self):
        lines = ["~~~", "code", "~~~", "| a |", "| - |"]
        assert _kinds(scan(lines)) == ["text", "text", "text", "table"]

    def test_unclosed_fence_runs_to_end(self):
        lines = ["```", "| a |", "| - |"]
        assert _kinds(scan(lines)) == ["text"] * 3

    def test_fence_ends_table(self):
        lines = ["| a |", "| - |", "```", "| b |", "```"]
        assert _kinds(scan(lines)) == ["table", "text", "text", "text"]

    def test_fences_disabled(self):
        lines = ["```", "| a |", "| - |", "```"]
        assert _kinds(scan(lines, code_fences=False)) == ["text", "table", "text"]
