import pytest

from tabframe.type_inference import (
    FLOAT,
    INTEGER,
    TEXT,
    TypeInferencer,
    conforms,
    infer_dtype,
    is_float_like,
    is_integer_like,
)


@pytest.mark.parametrize(
    "values, expected",
    [
        (["1", "2", "3"], INTEGER),
        (["1", "2.5"], FLOAT),
        (["1", "a"], TEXT),
        (["", "", ""], TEXT),
        ([], TEXT),
        (["-4", "", "+7"], INTEGER),
        (["1e3", "2"], FLOAT),
        ([".5", "3."], FLOAT),
    ],
)
def test_infer_dtype(values, expected):
    assert infer_dtype(values) == expected


def test_missing_cells_do_not_affect_inference():
    assert infer_dtype(["", "10", "", "20"]) == INTEGER
    assert infer_dtype(["", "1.5"]) == FLOAT


def test_tokens_must_parse_fully():
    assert not is_integer_like("12abc")
    assert not is_integer_like("1.0")
    assert not is_float_like("1.2.3")
    assert not is_float_like("nan")
    assert not is_float_like("inf")
    assert not is_float_like(" 1")
    assert is_float_like("-0.25")
    assert is_integer_like("-0")


def test_conforms_exempts_missing():
    assert conforms("", INTEGER)
    assert conforms("", FLOAT)
    assert conforms("3", FLOAT)
    assert not conforms("3.5", INTEGER)
    assert conforms("anything", TEXT)
    with pytest.raises(ValueError):
        conforms("1", "decimal")


def test_type_inferencer_reports_counts():
    info = TypeInferencer().infer_types(
        {"a": ["1", "", "3"], "b": ["x", "2", ""], "c": ["", ""]}
    )
    assert info["a"] == {
        "detected_type": INTEGER,
        "non_missing": 2,
        "missing": 1,
        "numeric_share": 1.0,
    }
    assert info["b"]["detected_type"] == TEXT
    assert info["b"]["numeric_share"] == pytest.approx(0.5)
    assert info["c"]["detected_type"] == TEXT
    assert info["c"]["non_missing"] == 0
    assert info["c"]["numeric_share"] == 0.0


def test_type_inferencer_accepts_table_columns():
    from tabframe import Table

    table = Table.from_text("a,b\n1,x\n,y\n")
    info = TypeInferencer().infer_types(dict(table.items()))
    assert info["a"]["detected_type"] == INTEGER
    assert info["a"]["missing"] == 1
    assert info["b"]["detected_type"] == TEXT
