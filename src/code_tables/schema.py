"""Pydantic models for parsed code tables.

A CodeTable is created fresh for every ``@code`` marker, rendered to HTML by
formatting.py, and then discarded.
"""

from pydantic import BaseModel, model_validator

from code_tables.classifiers import CellKind


class TableRow(BaseModel):
    """One pipe-delimited line: trimmed cell strings plus one CellKind per cell."""

    contents: list[str]
    kinds: list[CellKind]

    @model_validator(mode="after")
    def validate_kinds_aligned(self) -> "TableRow":
        """Ensure there is exactly one kind per cell."""
        if len(self.contents) != len(self.kinds):
            raise ValueError(f"Row has {len(self.contents)} cells but {len(self.kinds)} kinds")
        return self

    @property
    def is_heading(self) -> bool:
        return CellKind.HEADING in self.kinds


class CodeTable(BaseModel):
    """Ordered rows of a table; row 0 is always the heading row.

    Rows may have differing cell counts.  No padding or reconciliation is
    done, each row renders however many cells it has.
    """

    rows: list[TableRow]

    @model_validator(mode="after")
    def validate_heading_row(self) -> "CodeTable":
        """Ensure the table is non-empty and only row 0 is a heading row."""
        if not self.rows:
            raise ValueError("A code table needs at least one row")
        if any(kind != CellKind.HEADING for kind in self.rows[0].kinds):
            raise ValueError("Every cell of row 0 must be a heading")
        for i, row in enumerate(self.rows[1:], start=1):
            if row.is_heading:
                raise ValueError(f"Row {i} contains a heading cell; only row 0 may")
        return self

    @property
    def heading_rows(self) -> list[TableRow]:
        return [row for row in self.rows if row.is_heading]

    @property
    def data_rows(self) -> list[TableRow]:
        return [row for row in self.rows if not row.is_heading]


class ParsedTable(BaseModel):
    """A recognised table plus how many characters of the input it spans."""

    table: CodeTable
    consumed: int
