"""In-memory columnar table package: delimited-text parsing, type inference, masks and serialization.

Public entry points:
    Table.from_text(text, delimiter=",") / Table.read_csv(path, delimiter=",")
    run_loading_pipeline(file_path: str, *, config: Optional[dict] = None)

Column dtypes:
    integer  -> every present cell is a signed integer
    float    -> every present cell is a decimal number
    text     -> anything else (also columns with no present cells)
"""

from .column import Column, FillValue  # noqa: F401
from .errors import (  # noqa: F401
    ColumnNotFoundError,
    ColumnTypeError,
    DuplicateColumnError,
    MaskLengthError,
    RowLengthError,
    TableError,
)
from .pipeline import run_loading_pipeline  # noqa: F401
from .table import Table  # noqa: F401
from .type_inference import FLOAT, INTEGER, MISSING, TEXT, infer_dtype  # noqa: F401

__all__ = [
    "Table",
    "Column",
    "FillValue",
    "run_loading_pipeline",
    "infer_dtype",
    "INTEGER",
    "FLOAT",
    "TEXT",
    "MISSING",
    "TableError",
    "ColumnTypeError",
    "ColumnNotFoundError",
    "MaskLengthError",
    "RowLengthError",
    "DuplicateColumnError",
]
