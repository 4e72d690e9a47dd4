"""Exceptions raised by tabframe.

Each error also derives from the closest built-in so callers can catch
either the package type or the usual Python one.
"""

from __future__ import annotations


class TableError(Exception):
    """Base class for every tabframe error."""


class ColumnTypeError(TableError, TypeError):
    """Operation is not valid for the column's dtype."""


class ColumnNotFoundError(TableError, KeyError):
    """A referenced column name does not exist."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Column not found: {self.name!r}"


class MaskLengthError(TableError, IndexError):
    """A boolean mask does not match the table's row count."""


class RowLengthError(TableError, ValueError):
    """A data line has a field count the parser cannot repair."""


class DuplicateColumnError(TableError, ValueError):
    """Two columns would share the same name."""


__all__ = [
    "TableError",
    "ColumnTypeError",
    "ColumnNotFoundError",
    "MaskLengthError",
    "RowLengthError",
    "DuplicateColumnError",
]
