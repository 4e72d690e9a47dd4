"""Delimited-text parsing into per-column cell lists.

Only the pieces the table store needs:
  - Line splitting (``split_lines``), tolerant of ``\\r\\n`` endings
  - Header validation (``parse_header``)
  - Row repair: a row one field short gets a trailing missing cell
  - Blank-line skipping for multi-column input

There is no quoting or escaping: a field containing the delimiter is split.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple
import re

from .errors import DuplicateColumnError, RowLengthError
from .type_inference import MISSING

DEFAULT_DELIMITER = ","

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> List[str]:
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    # A terminator on the last line does not start another row.
    if lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def split_fields(line: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")
    return line.split(delimiter)


def parse_header(line: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    headers = split_fields(line, delimiter)
    seen = set()
    for h in headers:
        if h in seen:
            raise DuplicateColumnError(f"Duplicate column name in header: {h!r}")
        seen.add(h)
    return headers


def _repair_row(fields: List[str], width: int, line_no: int) -> Tuple[List[str], bool]:
    if len(fields) == width:
        return fields, False
    if len(fields) == width - 1:
        return fields + [MISSING], True
    raise RowLengthError(
        f"Line {line_no}: expected {width} fields, found {len(fields)}"
    )


def parse_delimited(
    text: str, delimiter: str = DEFAULT_DELIMITER, verbose: bool = False
) -> Tuple[List[str], List[List[str]], Dict[str, Any]]:
    """Split delimited text into headers and one cell list per column.

    Returns ``(headers, cells, report)`` where ``cells[j]`` holds the raw
    values of column ``headers[j]`` in row order.
    """
    report: Dict[str, Any] = {
        "rows": 0,
        "padded_rows": 0,
        "blank_lines_skipped": 0,
        "delimiter": delimiter,
    }
    lines = split_lines(text)
    if not lines:
        return [], [], report

    headers = parse_header(lines[0], delimiter)
    width = len(headers)
    cells: List[List[str]] = [[] for _ in headers]

    for line_no, line in enumerate(lines[1:], start=2):
        if line == "" and width > 1:
            report["blank_lines_skipped"] += 1
            continue
        fields, padded = _repair_row(split_fields(line, delimiter), width, line_no)
        if padded:
            report["padded_rows"] += 1
        for column, value in zip(cells, fields):
            column.append(value)
        report["rows"] += 1

    if verbose:
        print(
            f"[info] parsed {report['rows']} rows x {width} columns "
            f"(padded={report['padded_rows']}, blank={report['blank_lines_skipped']})"
        )
    return headers, cells, report


__all__ = [
    "DEFAULT_DELIMITER",
    "split_lines",
    "split_fields",
    "parse_header",
    "parse_delimited",
]
