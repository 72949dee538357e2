"""HTML rendering for parsed code tables.

Cell text is inserted verbatim with no HTML escaping.  Code cells close with
``<td>`` rather than ``</td>``, and that literal output must not change.
"""

from code_tables.classifiers import CellKind
from code_tables.schema import CodeTable, TableRow


def render_cell(text: str, kind: CellKind) -> str:
    """Render one cell according to its kind; alignment and empty cells render as ''."""
    if kind == CellKind.HEADING:
        # Blank headings (the fragments outside edge pipes) render like empty data cells
        return f"<th>{text}</th>" if text else ""
    if kind == CellKind.CODE_ENTRY:
        return f"<td><pre>{text}</pre><td>"
    if kind == CellKind.TEXT_ENTRY:
        return f"<td>{text}</td>"
    return ""


def render_row(row: TableRow) -> str:
    cells = "".join(render_cell(text, kind) for text, kind in zip(row.contents, row.kinds))
    return f"<tr>{cells}</tr>"


def render_table(table: CodeTable) -> str:
    """Render a table as a single-line HTML fragment.

    Heading rows go inside <thead>; data rows follow it directly, without a
    <tbody> wrapper.
    """
    heading = "".join(render_row(row) for row in table.heading_rows)
    data = "".join(render_row(row) for row in table.data_rows)
    return f"<table><thead>{heading}</thead>{data}</table>"
