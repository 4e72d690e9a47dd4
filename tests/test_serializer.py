from pathlib import Path

import pytest

from tabframe import ColumnNotFoundError, Table
from tabframe.serializer import to_delimited, write_delimited

SOURCE = "city,pop,area\nOslo,709000,454.0\nBergen,,465.3\nTromso,77000,\n"


@pytest.fixture
def cities() -> Table:
    return Table.from_text(SOURCE)


def test_default_output_has_index_and_header(cities: Table):
    assert to_delimited(cities) == (
        "index,city,pop,area\n"
        "0,Oslo,709000,454.0\n"
        "1,Bergen,,465.3\n"
        "2,Tromso,77000,\n"
    )


def test_options(cities: Table):
    text = to_delimited(
        cities, sep="\t", header=False, index=False, na_rep="NA", columns=["pop", "city"]
    )
    assert text == "709000\tOslo\nNA\tBergen\n77000\tTromso\n"


def test_unknown_column_fails_before_output(cities: Table):
    with pytest.raises(ColumnNotFoundError):
        to_delimited(cities, columns=["city", "country"])


def test_no_selected_columns_writes_no_rows(cities: Table):
    assert to_delimited(cities, columns=[], index=False) == "\n"
    assert to_delimited(cities, columns=[], header=False) == ""


def test_round_trip_keeps_names_dtypes_and_cells(cities: Table):
    reparsed = Table.from_text(cities.to_csv())
    assert reparsed.columns == ["index"] + cities.columns
    assert reparsed.select_columns(cities.columns).equals(cities)
    assert reparsed.dtypes["index"] == "integer"


def test_round_trip_without_index(cities: Table):
    reparsed = Table.from_text(cities.to_csv(index=False))
    assert reparsed.equals(cities)


def test_write_to_file(tmp_path: Path, cities: Table):
    out = tmp_path / "cities.csv"
    assert cities.to_csv(out, index=False) is None
    assert Table.read_csv(out).equals(cities)
    assert write_delimited(cities, out, sep=";") == out
    assert out.read_text(encoding="utf-8").startswith("index;city;pop;area\n")


def test_write_does_not_create_directories(tmp_path: Path, cities: Table):
    with pytest.raises(OSError):
        cities.to_csv(tmp_path / "missing" / "cities.csv")


def test_verbose_write(tmp_path: Path, cities: Table, capsys):
    write_delimited(cities, tmp_path / "c.csv", verbose=True, sep="|")
    out = capsys.readouterr().out
    assert "[info] saved 3 rows" in out
    assert "separator '|'" in out
