from typing import TYPE_CHECKING, Any, Dict, Optional

from .type_inference import NUMERIC_DTYPES, TypeInferencer

if TYPE_CHECKING:  # pragma: no cover
    from .column import Column
    from .table import Table


class TableProfiler:
    """Profiling engine producing per-column completeness and numeric stats."""

    def profile_table(
        self, table: "Table", type_info: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Generate a profile for every column of the table."""

        if type_info is None:
            type_info = TypeInferencer().infer_types(dict(table.items()))

        profile = {
            "dataset_info": self._get_dataset_info(table),
            "columns": {},
        }

        for name, column in table.items():
            profile["columns"][name] = self._profile_column(
                column, type_info.get(name, {})
            )

        return profile

    def _get_dataset_info(self, table: "Table") -> Dict[str, Any]:
        """Get basic dataset information."""

        n_rows = len(table)
        missing = {name: col.missing_count() for name, col in table.items()}
        return {
            "total_rows": n_rows,
            "total_columns": len(table.columns),
            "dtypes": table.dtypes,
            "missing_counts": missing,
            "missing_percentages": {
                name: (count / n_rows * 100 if n_rows else 0.0)
                for name, count in missing.items()
            },
        }

    def _profile_column(
        self, column: "Column", type_info: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Generate profile for a single column."""

        n = len(column)
        missing = column.missing_count()
        profile = {
            "name": column.name,
            "detected_type": type_info.get("detected_type", column.dtype),
            "missing_count": missing,
            "missing_percentage": missing / n * 100 if n else 0.0,
            "completeness_score": (n - missing) / n * 100 if n else 0.0,
        }

        if column.dtype in NUMERIC_DTYPES:
            profile["statistics"] = self._get_numeric_statistics(column)
        else:
            profile["statistics"] = {}

        return profile

    def _get_numeric_statistics(self, column: "Column") -> Dict[str, Any]:
        """Get numeric statistics for a column."""

        if column.count() == 0:
            return {"error": "No valid numeric values"}

        return {
            "sum": column.sum(),
            "mean": column.mean(),
            "min": column.min(),
            "max": column.max(),
        }
