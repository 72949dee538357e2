"""Cell classification helpers for code-table parsing.

Each cell of a parsed table gets exactly one CellKind, computed from its row
position and its trimmed text.  The kind decides how formatting.py renders
the cell.
"""

from enum import Enum

from code_tables.patterns import ALIGNMENT_CHAR, CODE_DELIMITER, PIPE


class CellKind(str, Enum):
    """Rendering category of a single table cell."""

    HEADING = "heading"
    ALIGNMENT = "alignment"
    CODE_ENTRY = "code_entry"
    EMPTY = "empty"
    TEXT_ENTRY = "text_entry"


def is_table_line(line: str) -> bool:
    """Return True if the line contains a pipe and so belongs to a table."""
    return PIPE in line


def is_alignment_marker(text: str) -> bool:
    """Return True for column-alignment cells like '---' or ':--'."""
    return ALIGNMENT_CHAR in text and " " not in text


def is_code_entry(text: str) -> bool:
    """Return True if the cell contains at least one inline-code delimiter."""
    return len(text.split(CODE_DELIMITER)) > 1


def classify_cell(text: str, is_first_row: bool) -> CellKind:
    """Classify one trimmed cell.

    Every cell of the first row is a heading, whatever it contains.  Other
    cells are tested in order (alignment, code, empty) and fall through to
    plain text; the first matching rule wins.
    """
    if is_first_row:
        return CellKind.HEADING
    if is_alignment_marker(text):
        return CellKind.ALIGNMENT
    if is_code_entry(text):
        return CellKind.CODE_ENTRY
    if not text:
        return CellKind.EMPTY
    return CellKind.TEXT_ENTRY
