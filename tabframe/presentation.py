"""Plain-text head/tail rendering for tables and columns.

Read-only: nothing here changes the data it renders. ``rows=0`` means all rows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from .column import Column
    from .table import Table

DEFAULT_WIDTH = 20


def _window(n_rows: int, rows: int, tail: bool) -> range:
    if rows < 0:
        raise ValueError("rows must be >= 0")
    if rows == 0 or rows >= n_rows:
        return range(n_rows)
    if tail:
        return range(n_rows - rows, n_rows)
    return range(rows)


def _footer(count: int) -> str:
    return f"Printed: {count} rows"


def render_column(column: "Column", rows: int = 0, tail: bool = False) -> str:
    values = column.values
    window = _window(len(values), rows, tail)
    lines = [column.name, "-" * len(column.name)]
    lines.extend(values[i] for i in window)
    lines.append("")
    lines.append(_footer(len(window)))
    return "\n".join(lines)


def render_table(
    table: "Table",
    rows: int = 0,
    tail: bool = False,
    columns: Optional[Sequence[str]] = None,
    width: int = DEFAULT_WIDTH,
) -> str:
    """Render a fixed-width view of the first (or last) ``rows`` rows."""
    names = list(table.columns) if columns is None else list(columns)
    cells: List[List[str]] = [table.select(name).values for name in names]
    n_rows = len(cells[0]) if cells else 0
    window = _window(n_rows, rows, tail)

    def _line(fields: Sequence[str]) -> str:
        return "".join(f"{f:<{width}}" for f in fields).rstrip()

    lines = [_line(names)]
    for i in window:
        lines.append(_line([col[i] for col in cells]))
    lines.append("")
    lines.append(_footer(len(window)))
    return "\n".join(lines)


__all__ = ["DEFAULT_WIDTH", "render_column", "render_table"]
