from pathlib import Path
from typing import Dict, Any, Optional, Tuple

from .table import Table
from .type_inference import TypeInferencer
from .profiler import TableProfiler

DEFAULT_CONFIG: Dict[str, Any] = {
    "delimiter": ",",
    "encoding": "utf-8",
    "drop_missing": [],
    "fill_value": None,
    "verbose": False,
}

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _resolve_config(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    cfg = dict(DEFAULT_CONFIG)
    if config:
        unknown = sorted(set(config) - set(DEFAULT_CONFIG))
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        cfg.update(config)
    return cfg


def _load_raw(file_path: str, cfg: Dict[str, Any]) -> Table:
    path = Path(file_path)
    if path.suffix.lower() not in (".csv", ".tsv", ".txt", ""):
        raise ValueError(f"Unsupported file type: {path.suffix}")
    return Table.read_csv(
        path,
        delimiter=cfg["delimiter"],
        encoding=cfg["encoding"],
        verbose=cfg["verbose"],
    )


def _clean_structured(
    table: Table, cfg: Dict[str, Any]
) -> Tuple[Table, Dict[str, Any]]:
    """Apply the configured cleaning steps in place and build a report."""
    parsed = table.parse_report
    report: Dict[str, Any] = {
        "source": parsed.get("source"),
        "delimiter": parsed.get("delimiter", cfg["delimiter"]),
        "rows_before": len(table),
        "rows_after": None,
        "padded_rows": parsed.get("padded_rows", 0),
        "blank_lines_skipped": parsed.get("blank_lines_skipped", 0),
        "dropped_rows": {},
        "filled": False,
        "dtypes": table.dtypes,
    }

    # Drop before fill, otherwise nothing is left to drop.
    for name in cfg["drop_missing"]:
        report["dropped_rows"][name] = table.drop_missing(name, verbose=cfg["verbose"])

    if cfg["fill_value"] is not None:
        table.fill_missing(cfg["fill_value"])
        report["filled"] = True

    report["rows_after"] = len(table)
    return table, report


def run_loading_pipeline(
    file_path: str, *, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Primary orchestrator: load -> parse -> infer types -> clean -> profile.

    Parameters
    ----------
    file_path : str
        Path to a delimited text file.
    config : dict, optional
        Overrides for ``DEFAULT_CONFIG`` (delimiter, encoding, drop_missing,
        fill_value, verbose).

    Returns
    -------
    dict with keys: table, report, profile, type_info
    """
    cfg = _resolve_config(config)

    table = _load_raw(file_path, cfg)

    # Type info reflects the data as read; dtypes do not change afterwards.
    type_info = TypeInferencer().infer_types(dict(table.items()))

    table, report = _clean_structured(table, cfg)

    profile = TableProfiler().profile_table(table, type_info)

    if cfg["verbose"]:
        print(
            f"[info] loaded {report['rows_after']} rows x {len(table.columns)} columns "
            f"from {file_path}"
        )

    return {
        "table": table,
        "report": report,
        "profile": profile,
        "type_info": type_info,
    }
