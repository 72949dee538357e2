"""Table boundary detection and row splitting.

Operates on the text that immediately follows an ``@code`` marker.  The table
is the run of consecutive lines, starting with the very first one, that each
contain a pipe character.
"""

import logging

from code_tables.classifiers import classify_cell, is_table_line
from code_tables.patterns import CARRIAGE_RETURN, LINE_TERMINATOR, PIPE
from code_tables.schema import CodeTable, ParsedTable, TableRow

logger = logging.getLogger(__name__)


# ─── Row Splitting ───────────────────────────────────────────────────────────


def split_row(line: str, is_first: bool) -> TableRow:
    """Split a table line on pipes into trimmed, classified cells.

    Empty fragments produced by leading or trailing pipes are kept as cells.
    """
    contents = [fragment.strip() for fragment in line.split(PIPE)]
    kinds = [classify_cell(cell, is_first) for cell in contents]
    return TableRow(contents=contents, kinds=kinds)


# ─── Table Boundary Detection ────────────────────────────────────────────────


def _iter_lines(text: str):
    """Yield (line, end) pairs where *end* is the offset just past the line's content.

    The line terminator, and a carriage return before it, are excluded from
    both the line and *end*.
    """
    pos = 0
    n = len(text)
    while pos < n:
        newline = text.find(LINE_TERMINATOR, pos)
        stop = n if newline == -1 else newline
        line = text[pos:stop]
        # "\r\n" endings: leave the "\r" with the terminator
        end = stop - 1 if line.endswith(CARRIAGE_RETURN) else stop
        yield text[pos:end], end
        pos = stop + 1


def parse_table(text: str) -> ParsedTable | None:
    """Parse the table at the start of *text*, or return None if there is none.

    The consumed length runs to the end of the last table line, stopping just
    before its line terminator so the caller resumes on the line break.
    """
    lines: list[str] = []
    consumed = 0
    for line, end in _iter_lines(text):
        # First line without a pipe ends the table
        if not is_table_line(line):
            break
        lines.append(line)
        consumed = end

    if not lines:
        return None

    rows = [split_row(lines[0], is_first=True)]
    rows.extend(split_row(line, is_first=False) for line in lines[1:])
    logger.debug("Parsed table with %d rows (%d chars)", len(rows), consumed)
    return ParsedTable(table=CodeTable(rows=rows), consumed=consumed)
