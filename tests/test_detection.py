"""Unit tests for table boundary detection and row splitting."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from code_tables.classifiers import CellKind
from code_tables.detection import parse_table, split_row
from code_tables.schema import CodeTable, TableRow

HEADER = "| a | b |"
ALIGN = "|---|---|"
DATA = "| `x` | y |"


# ===========================================================================
# split_row tests
# ===========================================================================


class TestSplitRow:

    def test_keeps_edge_fragments(self):
        row = split_row(HEADER, is_first=True)
        assert row.contents == ["", "a", "b", ""]

    def test_first_row_all_headings(self):
        row = split_row("| `x` |---|", is_first=True)
        assert row.kinds == [CellKind.HEADING] * 4

    def test_no_edge_pipes(self):
        row = split_row("a|b", is_first=False)
        assert row.contents == ["a", "b"]
        assert row.kinds == [CellKind.TEXT_ENTRY, CellKind.TEXT_ENTRY]

    def test_mixed_kinds(self):
        row = split_row(" |---| `c` |  | t |", is_first=False)
        assert row.contents == ["", "---", "`c`", "", "t", ""]
        assert row.kinds == [
            CellKind.EMPTY,
            CellKind.ALIGNMENT,
            CellKind.CODE_ENTRY,
            CellKind.EMPTY,
            CellKind.TEXT_ENTRY,
            CellKind.EMPTY,
        ]


# ===========================================================================
# parse_table tests
# ===========================================================================


class TestParseTable:

    def test_full_table(self):
        table_text = "\n".join([HEADER, ALIGN, DATA])
        parsed = parse_table(table_text + "\nafter")
        assert parsed is not None
        assert len(parsed.table.rows) == 3
        assert parsed.consumed == len(table_text)

    def test_resumes_on_line_break(self):
        text = "\n".join([HEADER, ALIGN, DATA]) + "\nafter"
        parsed = parse_table(text)
        assert text[parsed.consumed :] == "\nafter"

    def test_only_first_row_is_heading(self):
        parsed = parse_table("\n".join([HEADER, ALIGN, DATA]))
        assert [row.is_heading for row in parsed.table.rows] == [True, False, False]

    def test_no_pipe_on_first_line(self):
        assert parse_table("hello\n| a |") is None

    def test_leading_blank_line_is_not_skipped(self):
        assert parse_table("\n| a |") is None

    def test_empty_text(self):
        assert parse_table("") is None

    def test_header_only(self):
        parsed = parse_table("| a |")
        assert len(parsed.table.rows) == 1
        assert parsed.consumed == 5

    def test_no_trailing_newline(self):
        text = "| a |\n| b |"
        assert parse_table(text).consumed == len(text)

    def test_stops_at_first_plain_line(self):
        text = "| a |\n| b |\nplain\n| c |"
        parsed = parse_table(text)
        assert len(parsed.table.rows) == 2
        assert text[parsed.consumed :] == "\nplain\n| c |"

    def test_crlf_line_endings(self):
        text = "| a |\r\n| b |\r\nrest"
        parsed = parse_table(text)
        assert parsed.table.rows[0].contents == ["", "a", ""]
        assert text[parsed.consumed :] == "\r\nrest"

    def test_mismatched_cell_counts_accepted(self):
        parsed = parse_table("| a | b |\n| x |")
        assert len(parsed.table.rows[0].contents) == 4
        assert parsed.table.rows[1].contents == ["", "x", ""]


# ===========================================================================
# Schema validation tests
# ===========================================================================


class TestSchema:

    def test_row_kinds_must_align(self):
        with pytest.raises(ValidationError):
            TableRow(contents=["a", "b"], kinds=[CellKind.TEXT_ENTRY])

    def test_table_needs_rows(self):
        with pytest.raises(ValidationError):
            CodeTable(rows=[])

    def test_first_row_must_be_heading(self):
        with pytest.raises(ValidationError):
            CodeTable(rows=[split_row("| a |", is_first=False)])

    def test_only_first_row_may_be_heading(self):
        with pytest.raises(ValidationError):
            CodeTable(rows=[split_row("| a |", is_first=True), split_row("| b |", is_first=True)])
