"""Column type inference.

A column is classified from its non-missing tokens only:

    integer  -> every token is integer-like
    float    -> every token is a decimal number (integers included)
    text     -> anything else, and columns with no tokens at all
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping
import re

import pandas as pd

INTEGER = "integer"
FLOAT = "float"
TEXT = "text"

DTYPES = (INTEGER, FLOAT, TEXT)
NUMERIC_DTYPES = (INTEGER, FLOAT)

MISSING = ""

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def is_missing(value: str) -> bool:
    return value == MISSING


def is_integer_like(value: str) -> bool:
    return INTEGER_PATTERN.fullmatch(value) is not None


def is_float_like(value: str) -> bool:
    return FLOAT_PATTERN.fullmatch(value) is not None


def conforms(value: str, dtype: str) -> bool:
    """Return True if ``value`` may be stored in a column of ``dtype``."""
    if is_missing(value) or dtype == TEXT:
        return True
    if dtype == INTEGER:
        return is_integer_like(value)
    if dtype == FLOAT:
        return is_float_like(value)
    raise ValueError(f"Unknown dtype: {dtype!r}")


def _present(values: Iterable[str]) -> pd.Series:
    s = pd.Series(list(values), dtype=object)
    return s[s != MISSING]


def infer_dtype(values: Iterable[str]) -> str:
    """Infer the dtype of a sequence of raw text cells."""
    s = _present(values)
    if s.empty:
        return TEXT
    s = s.astype(str)
    if s.str.fullmatch(INTEGER_PATTERN.pattern).all():
        return INTEGER
    if s.str.fullmatch(FLOAT_PATTERN.pattern).all():
        return FLOAT
    return TEXT


class TypeInferencer:
    """Per-column type report for a table or a mapping of name -> cells."""

    def infer_types(self, columns: Mapping[str, Iterable[str]]) -> Dict[str, Any]:
        type_info: Dict[str, Any] = {}
        for name, cells in columns.items():
            values = list(cells)
            type_info[name] = self._infer_column(values)
        return type_info

    def _infer_column(self, values: list) -> Dict[str, Any]:
        s = _present(values).astype(str)
        non_missing = int(s.size)
        if non_missing:
            numeric_share = float(s.str.fullmatch(FLOAT_PATTERN.pattern).mean())
        else:
            numeric_share = 0.0
        return {
            "detected_type": infer_dtype(values),
            "non_missing": non_missing,
            "missing": len(values) - non_missing,
            "numeric_share": numeric_share,
        }


__all__ = [
    "INTEGER",
    "FLOAT",
    "TEXT",
    "DTYPES",
    "NUMERIC_DTYPES",
    "MISSING",
    "is_missing",
    "is_integer_like",
    "is_float_like",
    "conforms",
    "infer_dtype",
    "TypeInferencer",
]
