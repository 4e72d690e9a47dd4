"""Column: a named, typed sequence of text cells."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence, Union
import math
import numbers
import operator

import numpy as np
import pandas as pd

from .errors import ColumnTypeError
from .presentation import render_column
from .type_inference import (
    DTYPES,
    FLOAT,
    INTEGER,
    MISSING,
    NUMERIC_DTYPES,
    TEXT,
    conforms,
    infer_dtype,
)

FillValue = Union[int, float, str]
Number = Union[int, float]


def _to_cell(value: Any) -> str:
    if value is None:
        return MISSING
    if isinstance(value, float) and math.isnan(value):
        return MISSING
    return value if isinstance(value, str) else str(value)


class Column:
    """Cells are stored as text; ``dtype`` is fixed when the column is built.

    Comparison operators return a numpy boolean mask, so columns are not
    hashable and ``==`` is not content equality (use ``equals``).
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self, name: str, values: Iterable[Any] = (), dtype: Optional[str] = None
    ):
        cells = [_to_cell(v) for v in values]
        if dtype is None:
            dtype = infer_dtype(cells)
        elif dtype not in DTYPES:
            raise ValueError(f"Unknown dtype {dtype!r}; expected one of {DTYPES}")
        else:
            for cell in cells:
                if not conforms(cell, dtype):
                    raise ColumnTypeError(
                        f"Value {cell!r} in column {name!r} is not a valid {dtype}"
                    )
        self._name = name
        self._dtype = dtype
        self._values: List[str] = cells

    # ------------------------------------------------------------------
    # Basic accessors
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def dtype(self) -> str:
        return self._dtype

    @property
    def values(self) -> List[str]:
        """Snapshot of the cells; later mutations of the column do not show here."""
        return list(self._values)

    @property
    def is_numeric(self) -> bool:
        return self._dtype in NUMERIC_DTYPES

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __getitem__(self, idx: int) -> str:
        return self._values[idx]

    def __repr__(self) -> str:
        return f"Column(name={self._name!r}, dtype={self._dtype!r}, length={len(self)})"

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self, rows: int = 0, tail: bool = False) -> str:
        return render_column(self, rows=rows, tail=tail)

    def copy(self) -> "Column":
        return self._derive(self._name, list(self._values))

    def rename(self, new_name: str) -> "Column":
        """Return a new column under ``new_name`` with the same dtype and cells."""
        return self._derive(new_name, list(self._values))

    def equals(self, other: object) -> bool:
        return (
            isinstance(other, Column)
            and self._name == other._name
            and self._dtype == other._dtype
            and self._values == other._values
        )

    def _derive(self, name: str, cells: List[str]) -> "Column":
        # Cells already satisfy the dtype; skip validation.
        col = Column.__new__(Column)
        col._name = name
        col._dtype = self._dtype
        col._values = cells
        return col

    def _take(self, keep: Sequence[bool]) -> "Column":
        return self._derive(
            self._name, [v for v, k in zip(self._values, keep) if k]
        )

    def _drop_rows(self, keep: Sequence[bool]) -> None:
        self._values[:] = [v for v, k in zip(self._values, keep) if k]

    # ------------------------------------------------------------------
    # Missing values
    # ------------------------------------------------------------------

    def isna(self) -> np.ndarray:
        return np.array([v == MISSING for v in self._values], dtype=bool)

    def notna(self) -> np.ndarray:
        return ~self.isna()

    def count(self) -> int:
        """Number of present (non-missing) cells."""
        return sum(1 for v in self._values if v != MISSING)

    def missing_count(self) -> int:
        return len(self._values) - self.count()

    def _coerce_fill(self, value: FillValue) -> str:
        if isinstance(value, bool):
            raise ColumnTypeError("Fill value must be int, float or str, not bool")
        if isinstance(value, numbers.Real):
            if self._dtype == INTEGER:
                if not math.isfinite(value):
                    raise ColumnTypeError(
                        f"Cannot fill integer column {self._name!r} with {value!r}"
                    )
                return str(int(value))
            if self._dtype == FLOAT:
                try:
                    text = repr(float(value))
                except OverflowError:
                    raise ColumnTypeError(
                        f"Fill value {value!r} is too large for float column {self._name!r}"
                    ) from None
                if not conforms(text, FLOAT):
                    raise ColumnTypeError(
                        f"Cannot fill float column {self._name!r} with {value!r}"
                    )
                return text
            return str(value)
        if isinstance(value, str):
            if not conforms(value, self._dtype):
                raise ColumnTypeError(
                    f"Fill value {value!r} is not a valid {self._dtype} "
                    f"for column {self._name!r}"
                )
            return value
        raise ColumnTypeError(
            f"Fill value must be int, float or str, not {type(value).__name__}"
        )

    def fill_missing(self, value: FillValue) -> None:
        """Replace every missing cell in place with ``value`` coerced to the dtype.

        Integer columns truncate numeric fill values toward zero.
        """
        if self.missing_count() == 0:
            return
        cell = self._coerce_fill(value)
        self._values[:] = [cell if v == MISSING else v for v in self._values]

    # ------------------------------------------------------------------
    # Statistics (numeric columns only)
    # ------------------------------------------------------------------

    def _require_numeric(self, op: str) -> None:
        if self._dtype not in NUMERIC_DTYPES:
            raise ColumnTypeError(
                f"Column.{op}() expects an integer or float column, "
                f"{self._name!r} is {self._dtype}"
            )

    def _parse(self, value: str) -> Number:
        return int(value) if self._dtype == INTEGER else float(value)

    def _present(self) -> List[str]:
        return [v for v in self._values if v != MISSING]

    def _as_float_array(self) -> np.ndarray:
        """Cells as float64; missing or unparseable cells become NaN."""
        parsed = pd.to_numeric(pd.Series(self._values, dtype=object), errors="coerce")
        return parsed.astype(float).to_numpy()

    def sum(self) -> Number:
        self._require_numeric("sum")
        if self._dtype == INTEGER:
            total = 0
            for v in self._present():
                total += int(v)
            return total
        return float(np.nansum(self._as_float_array()))

    def mean(self) -> float:
        """Sum of present cells divided by the number of present cells."""
        self._require_numeric("mean")
        n = self.count()
        if n == 0:
            return math.nan
        return float(self.sum()) / n

    def sorted(self) -> List[str]:
        """Present cells in ascending numeric order; missing cells are left out."""
        self._require_numeric("sorted")
        return sorted(self._present(), key=self._parse)

    def min(self) -> Number:
        self._require_numeric("min")
        ordered = self.sorted()
        return self._parse(ordered[0]) if ordered else math.nan

    def max(self) -> Number:
        self._require_numeric("max")
        ordered = self.sorted()
        return self._parse(ordered[-1]) if ordered else math.nan

    # ------------------------------------------------------------------
    # Comparisons -> boolean masks
    # ------------------------------------------------------------------

    def _compare(self, key: Any, op: Callable[[Any, Any], Any]) -> np.ndarray:
        if isinstance(key, bool):
            raise ColumnTypeError("Cannot compare a column with a bool")
        if isinstance(key, numbers.Real):
            if self._dtype not in NUMERIC_DTYPES:
                raise ColumnTypeError(
                    f"Invalid comparison: text column {self._name!r} against a number"
                )
            arr = self._as_float_array()
            present = ~np.isnan(arr)
            with np.errstate(invalid="ignore"):
                result = op(arr, float(key))
            return np.asarray(result, dtype=bool) & present
        if isinstance(key, str):
            if self._dtype != TEXT:
                raise ColumnTypeError(
                    f"Invalid comparison: {self._dtype} column {self._name!r} against text"
                )
            return np.array([op(v, key) for v in self._values], dtype=bool)
        raise ColumnTypeError(
            f"Cannot compare a column with {type(key).__name__}"
        )

    def __eq__(self, key: Any) -> np.ndarray:  # type: ignore[override]
        return self._compare(key, operator.eq)

    def __ne__(self, key: Any) -> np.ndarray:  # type: ignore[override]
        return self._compare(key, operator.ne)

    def __lt__(self, key: Any) -> np.ndarray:
        return self._compare(key, operator.lt)

    def __gt__(self, key: Any) -> np.ndarray:
        return self._compare(key, operator.gt)

    def __le__(self, key: Any) -> np.ndarray:
        return self._compare(key, operator.le)

    def __ge__(self, key: Any) -> np.ndarray:
        return self._compare(key, operator.ge)


__all__ = ["Column", "FillValue"]
