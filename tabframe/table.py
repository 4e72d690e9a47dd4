"""Table: an ordered collection of equal-length columns.

Columns live in a single insertion-ordered dict, so the column order and the
name lookup can never disagree.
"""

from __future__ import annotations

from pathlib import Path
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

import numpy as np
import pandas as pd

from .column import Column, FillValue
from .errors import (
    ColumnNotFoundError,
    ColumnTypeError,
    DuplicateColumnError,
    MaskLengthError,
    RowLengthError,
)
from .parsing import DEFAULT_DELIMITER, parse_delimited
from .presentation import render_table
from .profiler import TableProfiler
from .serializer import to_delimited, write_delimited
from .type_inference import FLOAT, INTEGER, MISSING

RenamePairs = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class Table:
    """In-memory columnar table of text cells with per-column dtypes."""

    def __init__(self, columns: Iterable[Column] = ()):
        store: Dict[str, Column] = {}
        n_rows: Optional[int] = None
        for col in columns:
            if col.name in store:
                raise DuplicateColumnError(f"Duplicate column name: {col.name!r}")
            if n_rows is None:
                n_rows = len(col)
            elif len(col) != n_rows:
                raise RowLengthError(
                    f"Column {col.name!r} has {len(col)} rows, expected {n_rows}"
                )
            store[col.name] = col
        self._store = store
        self.parse_report: Dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_text(
        cls, text: str, delimiter: str = DEFAULT_DELIMITER, verbose: bool = False
    ) -> "Table":
        """Parse delimited text; the first line holds the column names."""
        headers, cells, report = parse_delimited(text, delimiter, verbose=verbose)
        table = cls(Column(name, values) for name, values in zip(headers, cells))
        table.parse_report = report
        return table

    @classmethod
    def read_csv(
        cls,
        path: Union[str, Path],
        delimiter: str = DEFAULT_DELIMITER,
        encoding: str = "utf-8",
        verbose: bool = False,
    ) -> "Table":
        text = Path(path).read_text(encoding=encoding)
        table = cls.from_text(text, delimiter, verbose=verbose)
        table.parse_report["source"] = str(path)
        return table

    @classmethod
    def from_dict(cls, data: Mapping[str, Iterable[Any]]) -> "Table":
        return cls(Column(name, values) for name, values in data.items())

    def copy(self) -> "Table":
        table = Table(col.copy() for col in self._store.values())
        table.parse_report = dict(self.parse_report)
        return table

    # ------------------------------------------------------------------
    # Shape and access
    # ------------------------------------------------------------------

    @property
    def columns(self) -> List[str]:
        return list(self._store)

    @property
    def dtypes(self) -> Dict[str, str]:
        return {name: col.dtype for name, col in self._store.items()}

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self), len(self._store)

    def __len__(self) -> int:
        first = next(iter(self._store.values()), None)
        return len(first) if first is not None else 0

    def __contains__(self, name: object) -> bool:
        return name in self._store

    def __iter__(self) -> Iterator[str]:
        return iter(self.columns)

    def items(self) -> Iterator[Tuple[str, Column]]:
        return iter(list(self._store.items()))

    def select(self, name: str) -> Column:
        """Return the column called ``name``.

        This is the table's own column, not a copy: in-place column
        operations (``fill_missing``) are visible through the table.
        """
        try:
            return self._store[name]
        except KeyError:
            raise ColumnNotFoundError(name) from None

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, str):
            return self.select(key)
        if isinstance(key, (list, tuple)) and key and all(isinstance(k, str) for k in key):
            return self.select_columns(key)
        return self.filter(key)

    def select_columns(self, names: Sequence[str]) -> "Table":
        """New table holding copies of ``names``, in that order."""
        return Table(self.select(name).copy() for name in names)

    def rows(self) -> List[Tuple[str, ...]]:
        cells = [col.values for col in self._store.values()]
        return list(zip(*cells))

    def row(self, idx: int) -> Dict[str, str]:
        n = len(self)
        if not -n <= idx < n:
            raise IndexError(f"Row {idx} out of range for table with {n} rows")
        return {name: col[idx] for name, col in self._store.items()}

    def equals(self, other: object) -> bool:
        if not isinstance(other, Table) or self.columns != other.columns:
            return False
        return all(col.equals(other.select(name)) for name, col in self._store.items())

    # ------------------------------------------------------------------
    # Structural mutation
    # ------------------------------------------------------------------

    def rename(self, pairs: RenamePairs) -> None:
        """Rename columns in place; each renamed column keeps its position.

        Pairs are applied in order and all are checked before any change.
        """
        items = list(pairs.items()) if isinstance(pairs, Mapping) else list(pairs)
        order = self.columns
        for old, new in items:
            if old not in order:
                raise ColumnNotFoundError(old)
            if new != old and new in order:
                raise DuplicateColumnError(
                    f"Cannot rename {old!r} to {new!r}: column already exists"
                )
            order[order.index(old)] = new

        renamed: Dict[str, Column] = {}
        for col, new_name in zip(self._store.values(), order):
            renamed[new_name] = col if col.name == new_name else col.rename(new_name)
        self._store = renamed

    def fill_missing(self, value: FillValue) -> None:
        """Fill missing cells in every column; fails before any change if a column rejects ``value``."""
        # Columns with nothing to fill never reject the value.
        for col in self._store.values():
            if col.missing_count():
                col._coerce_fill(value)
        for col in self._store.values():
            col.fill_missing(value)

    def drop_missing(self, name: str, verbose: bool = False) -> int:
        """Drop every row whose cell in column ``name`` is missing.

        Returns the number of rows removed.
        """
        keep = self.select(name).notna()
        dropped = int(keep.size - keep.sum())
        if dropped:
            for col in self._store.values():
                col._drop_rows(keep)
        if verbose:
            print(f"[info] drop_missing({name!r}): removed {dropped} rows")
        return dropped

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def filter(self, mask: Sequence[bool]) -> "Table":
        """Return a new table with the rows where ``mask`` is true."""
        keep = np.asarray(mask)
        if keep.size == 0:
            keep = keep.astype(bool)
        elif keep.dtype != bool:
            raise ColumnTypeError(f"Mask must hold booleans, not {keep.dtype}")
        if keep.ndim != 1 or keep.shape[0] != len(self):
            raise MaskLengthError(
                f"Mask of length {keep.size} does not match {len(self)} data rows"
            )
        return Table(col._take(keep) for col in self._store.values())

    def head(self, n: int = 5) -> "Table":
        n = max(0, min(n, len(self)))
        keep = np.zeros(len(self), dtype=bool)
        keep[:n] = True
        return self.filter(keep)

    def tail(self, n: int = 5) -> "Table":
        n = max(0, min(n, len(self)))
        keep = np.zeros(len(self), dtype=bool)
        keep[len(self) - n:] = True
        return self.filter(keep)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_csv(self, path: Optional[Union[str, Path]] = None, **options) -> Optional[str]:
        """Serialize to delimited text; return it, or write it when ``path`` is given."""
        if path is None:
            return to_delimited(self, **options)
        write_delimited(self, path, **options)
        return None

    def to_string(
        self,
        rows: int = 0,
        tail: bool = False,
        columns: Optional[Sequence[str]] = None,
    ) -> str:
        return render_table(self, rows=rows, tail=tail, columns=columns)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Table(rows={len(self)}, columns={self.columns!r})"

    def to_pandas(self) -> pd.DataFrame:
        """Convert to a DataFrame; missing numeric cells become NA."""
        data: Dict[str, pd.Series] = {}
        for name, col in self._store.items():
            s = pd.Series(col.values, dtype=object, name=name)
            if col.dtype == INTEGER:
                s = s.mask(s == MISSING).map(lambda v: v if pd.isna(v) else int(v))
                s = s.astype("Int64")
            elif col.dtype == FLOAT:
                s = pd.to_numeric(s, errors="coerce").astype(float)
            data[name] = s
        return pd.DataFrame(data, columns=self.columns)

    def describe(self) -> Dict[str, Any]:
        return TableProfiler().profile_table(self)


__all__ = ["Table"]
