import pandas as pd
from pathlib import Path

import pytest

from tabframe import run_loading_pipeline, Table


def _write_people(tmp_path: Path, **to_csv_kwargs) -> Path:
    # Create a small mixed CSV with pandas; missing cells come out as empty fields
    df = pd.DataFrame(
        {
            "Name": ["Alice", "Bob", "Charlie", "Dana"],
            "Age": [30, None, 35, 40],
            "Score": [95.5, 88.0, None, 85.25],
        }
    )
    df["Age"] = df["Age"].astype("Int64")
    csv_path = tmp_path / "people.csv"
    df.to_csv(csv_path, index=False, **to_csv_kwargs)
    return csv_path


def test_pipeline_defaults(tmp_path: Path):
    csv_path = _write_people(tmp_path)

    result = run_loading_pipeline(str(csv_path))
    table = result["table"]
    report = result["report"]

    assert isinstance(table, Table)
    assert table.columns == ["Name", "Age", "Score"]
    assert table.dtypes == {"Name": "text", "Age": "integer", "Score": "float"}
    assert report["rows_before"] == report["rows_after"] == 4
    assert report["source"] == str(csv_path)
    assert report["dropped_rows"] == {}
    assert result["type_info"]["Age"]["missing"] == 1

    stats = result["profile"]["columns"]["Score"]["statistics"]
    assert stats["sum"] == pytest.approx(268.75)
    assert stats["min"] == pytest.approx(85.25)
    assert stats["max"] == pytest.approx(95.5)


def test_pipeline_drop_then_fill(tmp_path: Path):
    csv_path = _write_people(tmp_path)

    result = run_loading_pipeline(
        str(csv_path), config={"drop_missing": ["Age"], "fill_value": 0}
    )
    table = result["table"]
    report = result["report"]

    assert report["dropped_rows"] == {"Age": 1}
    assert report["rows_after"] == 3
    assert report["filled"] is True
    assert table["Name"].values == ["Alice", "Charlie", "Dana"]
    assert table["Score"].values == ["95.5", "0.0", "85.25"]
    # Profile reflects the cleaned table
    assert result["profile"]["dataset_info"]["missing_counts"]["Score"] == 0


def test_pipeline_custom_delimiter(tmp_path: Path):
    csv_path = _write_people(tmp_path, sep=";")

    result = run_loading_pipeline(str(csv_path), config={"delimiter": ";"})
    assert result["table"].columns == ["Name", "Age", "Score"]
    assert result["report"]["delimiter"] == ";"


def test_pipeline_rejects_unknown_config(tmp_path: Path):
    csv_path = _write_people(tmp_path)
    with pytest.raises(ValueError):
        run_loading_pipeline(str(csv_path), config={"sample_size": 10})


def test_pipeline_rejects_unsupported_extension(tmp_path: Path):
    path = tmp_path / "book.xlsx"
    path.write_bytes(b"")
    with pytest.raises(ValueError):
        run_loading_pipeline(str(path))


def test_pipeline_verbose(tmp_path: Path, capsys):
    csv_path = _write_people(tmp_path)
    run_loading_pipeline(
        str(csv_path), config={"verbose": True, "drop_missing": ["Score"]}
    )
    out = capsys.readouterr().out
    assert "[info] parsed 4 rows x 3 columns" in out
    assert "[info] drop_missing('Score'): removed 1 rows" in out
    assert "[info] loaded 3 rows x 3 columns" in out
