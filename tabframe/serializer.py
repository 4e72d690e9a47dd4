"""Render a table back to delimited text."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

from .type_inference import MISSING

if TYPE_CHECKING:  # pragma: no cover
    from .table import Table

INDEX_LABEL = "index"
LINE_TERMINATOR = "\n"


def to_delimited(
    table: "Table",
    *,
    sep: str = ",",
    header: bool = True,
    index: bool = True,
    na_rep: str = "",
    columns: Optional[Sequence[str]] = None,
) -> str:
    """Serialize ``table`` (or the ``columns`` subset) to delimited text.

    Parameters
    ----------
    sep : str
        Field separator.
    header : bool
        Write the column names as the first line.
    index : bool
        Prepend an ``index`` field holding the zero-based row number.
    na_rep : str
        Text written in place of missing cells.
    columns : sequence of str, optional
        Columns to write, in this order. Defaults to every column.
    """
    names = list(table.columns) if columns is None else list(columns)
    # select() raises before anything is rendered.
    cells: List[List[str]] = [table.select(name).values for name in names]

    lines: List[str] = []
    if header:
        fields = ([INDEX_LABEL] if index else []) + names
        lines.append(sep.join(fields))

    n_rows = len(cells[0]) if cells else 0
    for idx in range(n_rows):
        row = [na_rep if col[idx] == MISSING else col[idx] for col in cells]
        if index:
            row.insert(0, str(idx))
        lines.append(sep.join(row))

    return "".join(line + LINE_TERMINATOR for line in lines)


def write_delimited(
    table: "Table",
    path: Union[str, Path],
    *,
    encoding: str = "utf-8",
    verbose: bool = False,
    **options,
) -> Path:
    """Write ``to_delimited(table, **options)`` to ``path``.

    Parent directories are not created; an unwritable path raises ``OSError``.
    """
    text = to_delimited(table, **options)
    out_path = Path(path)
    out_path.write_text(text, encoding=encoding)
    if verbose:
        sep = options.get("sep", ",")
        print(f"[info] saved {len(table)} rows to {out_path} with separator '{sep}'")
    return out_path


__all__ = ["INDEX_LABEL", "to_delimited", "write_delimited"]
